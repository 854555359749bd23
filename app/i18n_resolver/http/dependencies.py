"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the Localizer and the negotiated language
of the current request.
"""

from typing import Annotated

from fastapi import Depends, Request

from i18n_resolver.i18n.engine import Localizer
from i18n_resolver.i18n.negotiation import negotiate_language
from i18n_resolver.services.providers import get_localizer

# Localizer dependency
LocalizerDep = Annotated[Localizer, Depends(get_localizer)]


def get_request_language(request: Request, localizer: LocalizerDep) -> str:
    """Get the negotiated language of the current request.

    Uses the value stored by LanguageMiddleware when present, otherwise
    negotiates from the Accept-Language header.
    """
    language = getattr(request.state, "language", None)
    if language:
        return language
    return str(
        negotiate_language(
            request.headers.get("accept-language"),
            localizer.supported_languages,
            localizer.default_language,
        )
    )


# Negotiated request language dependency
RequestLanguageDep = Annotated[str, Depends(get_request_language)]

__all__ = [
    "LocalizerDep",
    "RequestLanguageDep",
    "get_request_language",
]
