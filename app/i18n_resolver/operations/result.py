"""Result value for lookups that report failure instead of raising."""

from dataclasses import dataclass
from typing import Any, Optional

from i18n_resolver.operations.status import OperationStatus


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a single operation.

    Attributes:
        status: High-level outcome.
        message: Short description for logs and troubleshooting.
        data: Payload, the rendered text for a successful lookup.
        error_code: Name of the error class for failed results.
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    def unwrap_or(self, default: Any) -> Any:
        """Return data on success, default otherwise."""
        return self.data if self.is_success else default

    @classmethod
    def success(cls, data: Optional[Any] = None, message: str = "ok") -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
    ) -> "OperationResult":
        """Build a failed result with an explicit status."""
        return cls(status=status, message=message, error_code=error_code)

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        status: OperationStatus = OperationStatus.PERMANENT_ERROR,
    ) -> "OperationResult":
        """Build a failed result from an exception.

        The exception text becomes the message and its class name the
        error_code, so callers can branch on error_code without importing
        the exception types.
        """
        return cls.error(status, str(exc), error_code=type(exc).__name__)
