"""Outcome codes and fixed constants used across the booking system."""

from enum import Enum

EARTH_RADIUS_KM = 6371.0
FIRST_CLASS_MULTIPLIER = 2.0
BUSINESS_CLASS_MULTIPLIER = 1.5
ECONOMY_CLASS_MULTIPLIER = 1.0


class TicketResult(Enum):
    """Outcome of creating a ticket."""

    CANNOT_ADD_TICKETS = 0
    BROKE_RULES = 1
    TICKET_SUCCESS = 2


class AdminResult(Enum):
    """Outcome of creating an administrator account."""

    ADMIN_SUCCESS = 0
    ADMIN_PASSWORD_MISMATCH = 1
    ADMIN_WEAK_PASSWORD = 2
    ADMIN_USERNAME_TAKEN = 3
    ADMIN_EMAIL_USED = 4


class AirportResult(Enum):
    """Outcome of registering an airport account."""

    AIRPORT_SUCCESS = 0
    AIRPORT_PASSWORD_MISMATCH = 1
    AIRPORT_WEAK_PASSWORD = 2
    AIRPORT_LOCATION_EXISTS = 3
    AIRPORT_EMAIL_USED = 4


class LoginResult(Enum):
    """Outcome of a login attempt: the account kind, or the failure."""

    USER = 0
    AIRPORT = 1
    ADMIN = 2
    WRONG_PASSWORD = 3
    USER_NOT_FOUND = 4


class SignUpResult(Enum):
    """Outcome of a user sign-up."""

    USER_SUCCESS = 0
    USER_PASSWORD_MISMATCH = 1
    USER_WEAK_PASSWORD = 2
    USER_USERNAME_TAKEN = 3
    USER_EMAIL_USED = 4