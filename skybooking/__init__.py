"""Flight booking core: records, password handling, seat selection, schedule tables and bookings."""

__version__ = "0.1.0"
__all__ = ["__version__"]