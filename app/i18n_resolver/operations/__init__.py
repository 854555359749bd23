"""Operation result types and status enums."""

from i18n_resolver.operations.result import OperationResult
from i18n_resolver.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
