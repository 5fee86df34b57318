"""HR management web service built on command and query buses."""

__version__ = "0.1.0"