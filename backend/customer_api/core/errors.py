"""Error Hierarchy - typed, categorized exceptions for every customer API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are WARNING; persistence errors (500-level) are CRITICAL
    - to_response() always produces the standard envelope with data = None

Design Decisions:
    - Single hierarchy with CustomerApiError base: one global handler renders all of them
    - severity picks the log level, category is logged alongside the code
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"


class CustomerApiError(Exception):
    """Base exception for all customer API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard response envelope."""
        return {"message": self.message, "success": False, "data": None}


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingCustomerDataError(CustomerApiError):
    """Request arrived without a customer payload."""
    def __init__(self):
        super().__init__(
            "Customer data is required",
            "MISSING_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


# ─── Persistence Errors (500-level) ─────────────────────────────

class PersistenceError(CustomerApiError):
    """Store rejected the operation or was unreachable."""
    def __init__(self, detail: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {detail}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.detail = detail
        self.operation = operation


class CustomerSaveFailedError(CustomerApiError):
    """Customer write failed; message carries the store's failure detail."""
    def __init__(self, detail: str):
        super().__init__(
            f"Failed to save customer: {detail}",
            "CUSTOMER_SAVE_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.detail = detail
