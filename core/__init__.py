# Core module exports
from .types import *
from .exceptions import *

__all__ = [
    'DashboardError',
    'UserAlreadyExistsError',
    'DatabaseError',
    'ConfigurationError',
    'ValidationError',
    'AuthenticationError',
    'InvalidCredentialsError'
]
