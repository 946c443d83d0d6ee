"""
Custom Exception Classes for the Blog Posts API

Provides a hierarchy of exceptions for consistent error responses.
All custom exceptions inherit from BlogAPIException which carries a status code and details.
"""

from typing import Any


class BlogAPIException(Exception):
    """Base exception for all Blog Posts API errors"""

    def __init__(self, message: str, status_code: int = 500, details: dict[Any, Any] | None = None):
        """
        Args:
            message: Human-readable error message
            status_code: HTTP status code for the error
            details: Additional context as a dictionary
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundException(BlogAPIException):
    """Raised when a requested resource doesn't exist"""

    def __init__(
        self, resource_type: str, resource_id: str = "", details: dict[Any, Any] | None = None
    ):
        """
        Args:
            resource_type: Type of resource (e.g., 'BlogPost')
            resource_id: ID of the missing resource
            details: Additional context

        Example:
            raise ResourceNotFoundException('BlogPost', post_id)
        """
        message = f"{resource_type} with resource ID '{resource_id}' not found"
        extra_details = {"resource_type": resource_type, "resource_id": resource_id}
        if details:
            extra_details.update(details)
        super().__init__(message, status_code=404, details=extra_details)


class ValidationException(BlogAPIException):
    """Raised when input validation fails"""

    def __init__(self, field: str, message: str, details: dict[Any, Any] | None = None):
        """
        Args:
            field: Name of the field that failed validation
            message: Description of the validation error
            details: Additional context

        Example:
            raise ValidationException('id', 'Path and body id must match', {'path_id': post_id})
        """
        extra_details = {"field": field}
        if details:
            extra_details.update(details)
        super().__init__(message, status_code=400, details=extra_details)


class DatabaseOperationException(BlogAPIException):
    """Raised when database operations fail"""

    def __init__(
        self,
        operation: str,
        message: str = "",
        collection: str = "",
        details: dict[Any, Any] | None = None,
    ):
        """
        Args:
            operation: Type of operation (e.g., 'insert', 'update', 'delete', 'find')
            message: Description of the database error
            collection: Name of the collection
            details: Additional context (e.g., query, error message)

        Example:
            raise DatabaseOperationException('update', collection='blogposts', details={'error': str(e)})
        """
        self.operation = operation
        self.collection = collection

        error_message = message or f"Database operation '{operation}' failed"
        if collection and not message:
            error_message += f" on collection '{collection}'"

        extra_details = {"operation": operation, "collection": collection}
        if details:
            extra_details.update(details)
        super().__init__(error_message, status_code=500, details=extra_details)


class StoreUnavailableException(BlogAPIException):
    """Raised when the database cannot be reached"""

    def __init__(self, operation: str, details: dict[Any, Any] | None = None):
        """
        Args:
            operation: Store operation that could not reach the database
            details: Additional context (e.g., driver error message)

        Example:
            raise StoreUnavailableException('find_by_id', {'error': str(e)})
        """
        extra_details = {"operation": operation}
        if details:
            extra_details.update(details)
        super().__init__(
            "Database is unavailable, please try again later",
            status_code=503,
            details=extra_details,
        )
