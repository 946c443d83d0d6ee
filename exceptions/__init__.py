# Exceptions package
from .custom_exceptions import (
    BlogAPIException,
    DatabaseOperationException,
    ResourceNotFoundException,
    StoreUnavailableException,
    ValidationException,
)

__all__ = [
    'BlogAPIException',
    'ResourceNotFoundException',
    'ValidationException',
    'DatabaseOperationException',
    'StoreUnavailableException',
]
