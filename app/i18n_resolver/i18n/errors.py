"""Localization error taxonomy.

Every error raised by the resolver derives from LocalizationError so callers
can opt into catching the whole family at once.
"""

from typing import Any, Optional


class LocalizationError(Exception):
    """Base class for all localization errors."""


class CatalogLoadError(LocalizationError):
    """A required catalog source is missing or malformed.

    Raised only during startup. There is no partial-service mode: the
    process must not continue serving with an incomplete catalog set.

    Attributes:
        language: Language tag whose catalog failed to load.
        path: Location of the catalog source, if known.
        reason: Human-readable failure description.
    """

    def __init__(self, language: str, path: Optional[str], reason: str):
        self.language = language
        self.path = path
        self.reason = reason
        location = f" ({path})" if path else ""
        super().__init__(f"Failed to load catalog for {language}{location}: {reason}")


class UnsupportedRequestShape(LocalizationError):
    """The lookup request is neither a message key nor a structured request.

    Attributes:
        value: The rejected request value.
    """

    def __init__(self, value: Any, reason: Optional[str] = None):
        self.value = value
        detail = reason or f"unsupported localize request: {value!r}"
        super().__init__(detail)


class MessageNotFound(LocalizationError):
    """No language in the fallback chain defines the message key.

    Attributes:
        key: The requested message key.
        language: The requested language (as passed by the caller).
    """

    def __init__(self, key: str, language: str):
        self.key = key
        self.language = language
        super().__init__(f"Message {key!r} not found for language {language!r}")


class RenderError(LocalizationError):
    """Template substitution or plural-form selection failed.

    Attributes:
        key: The message key being rendered.
        cause: Description of what went wrong.
    """

    def __init__(self, key: str, cause: str):
        self.key = key
        self.cause = cause
        super().__init__(f"Failed to render message {key!r}: {cause}")
