"""
Custom exception classes for the traffic dashboard.
Provides specific error handling and better debugging.
"""

class DashboardError(Exception):
    """Base exception for traffic dashboard operations."""
    pass

class UserAlreadyExistsError(DashboardError):
    """Raised when trying to create a user whose username or email is taken."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"User '{identifier}' already exists")

class DatabaseError(DashboardError):
    """Raised when database operations fail."""
    pass

class ConfigurationError(DashboardError):
    """Raised when configuration is invalid or missing."""
    pass

class ValidationError(DashboardError):
    """Raised when input validation fails."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Validation failed for {field}: {reason}")

class AuthenticationError(DashboardError):
    """Raised when a bearer token is missing, malformed or expired."""
    pass

class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials do not match a known user."""

    def __init__(self):
        super().__init__("Invalid credentials")
