"""Custom exceptions for the greeter service."""

class GreeterError(Exception):
    """Base exception for errors raised by the greeter service."""
    pass

class InvalidInput(GreeterError):
    """The supplied name is missing or empty."""

    def __init__(self, message: str = "Invalid name provided"):
        super().__init__(message)
