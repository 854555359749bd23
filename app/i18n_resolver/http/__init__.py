"""HTTP adapters: language negotiation middleware and FastAPI dependencies."""

from i18n_resolver.http.dependencies import (
    LocalizerDep,
    RequestLanguageDep,
    get_request_language,
)
from i18n_resolver.http.middleware import LanguageMiddleware

__all__ = [
    "LanguageMiddleware",
    "LocalizerDep",
    "RequestLanguageDep",
    "get_request_language",
]
