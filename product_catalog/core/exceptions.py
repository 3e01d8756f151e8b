"""
Application Exception Handling

AppException base class and the catalog error kinds built on it.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides a consistent error payload across the service.

    Usage:
        raise AppException("Price must be >= 0", "VALIDATION_ERROR")
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", {"product_id": 7})

    Error Codes:
        Product:
            - PRODUCT_NOT_FOUND
            - VALIDATION_ERROR

        Storage:
            - STORAGE_ERROR
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a serializable dictionary."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class ProductNotFoundError(AppException):
    """Raised when an update targets a product id that does not exist."""

    def __init__(self, product_id: Any):
        super().__init__(
            f"Product {product_id} not found",
            "PRODUCT_NOT_FOUND",
            {"product_id": product_id}
        )
        self.product_id = product_id


class InvalidProductError(AppException):
    """Raised when a product field or filter argument fails validation."""

    def __init__(self, field: str, reason: str, value: Any = None):
        details = {"field": field, "reason": reason}
        if value is not None:
            details["value"] = str(value)
        super().__init__(f"Invalid {field}: {reason}", "VALIDATION_ERROR", details)
        self.field = field
        self.reason = reason


class StorageError(AppException):
    """Raised when the backing store fails to complete an operation."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            f"Storage failure during {operation}: {reason}",
            "STORAGE_ERROR",
            {"operation": operation}
        )
        self.operation = operation


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(product_id: Any) -> ProductNotFoundError:
    """Create product not found exception."""
    return ProductNotFoundError(product_id)


def invalid_product(field: str, reason: str, value: Any = None) -> InvalidProductError:
    """Create validation exception for a product field."""
    return InvalidProductError(field, reason, value)


def storage_error(operation: str, exc: Exception) -> StorageError:
    """Create storage exception wrapping a backend error."""
    return StorageError(operation, str(exc) or exc.__class__.__name__)
