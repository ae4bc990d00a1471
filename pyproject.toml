[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skybooking"
version = "0.1.0"
description = "Flight booking core: records, password hashing and strength scoring, seat selection, schedule tables and bookings"
requires-python = ">=3.10"
dependencies = []
keywords = ["flights", "booking", "airline", "seats", "reservations", "schedule"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skybooking"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
