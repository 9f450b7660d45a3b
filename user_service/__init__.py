"""User service: a layered HTTP API for managing user records."""

__version__ = "1.0.0"
