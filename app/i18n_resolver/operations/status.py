"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of a
localization call without raising.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Non-retryable error (bad request, render failure)
        NOT_FOUND: Message not defined in any language of the fallback chain
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
