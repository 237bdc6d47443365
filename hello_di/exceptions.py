"""Exceptions raised when a HelloDao dependency cannot be bound."""


class HelloDIError(Exception):
    """Base exception for the hello_di package."""


class InvalidDependencyError(HelloDIError, TypeError):
    """Raised when a DAO reference is missing or does not implement HelloDao."""
