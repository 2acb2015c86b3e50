"""
Custom Exceptions for the PropFinder API

Exception Hierarchy:
    PropFinderError (base)
    ├── ConfigurationError
    ├── DatabaseError
    │   └── DatabaseConnectionError
    └── ValidationError
"""


class PropFinderError(Exception):
    """Base exception for all PropFinder errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(PropFinderError):
    """Raised when there's a configuration problem."""

    pass


# Database Errors
class DatabaseError(PropFinderError):
    """Raised when a hosted database call fails."""

    def __init__(self, message: str, operation: str = None):
        self.operation = operation
        super().__init__(message)


class DatabaseConnectionError(DatabaseError):
    """Raised when the database client cannot be created or reached."""

    pass


class ValidationError(PropFinderError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str = None, value=None):
        self.field = field
        self.value = value
        super().__init__(message)
