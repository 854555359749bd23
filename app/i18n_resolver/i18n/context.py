"""Request-scoped current language.

The negotiated language of the in-flight request lives in a context
variable, so each request (thread or task) sees its own value and the
Localizer itself holds no per-request state.

Usage:
    from i18n_resolver.i18n.context import bind_language

    with bind_language("fr"):
        localizer.resolve(None, "greet")  # resolves in French
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Optional, Union

from i18n_resolver.i18n.models import LanguageTag

_current_language: ContextVar[Optional[str]] = ContextVar(
    "i18n_current_language", default=None
)


def get_current_language() -> Optional[str]:
    """Get the language bound to the current request, if any."""
    return _current_language.get()


@contextmanager
def bind_language(
    language: Optional[Union[str, LanguageTag]],
) -> Generator[None, None, None]:
    """Bind a language to the current context for the duration of the block."""
    token = _current_language.set(None if language is None else str(language))
    try:
        yield
    finally:
        _current_language.reset(token)
