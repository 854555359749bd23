"""Starlette middleware negotiating the language of each request."""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware

from i18n_resolver.i18n.context import bind_language
from i18n_resolver.i18n.engine import Localizer
from i18n_resolver.i18n.models import LanguageTag
from i18n_resolver.i18n.negotiation import negotiate_language
from i18n_resolver.logging import bind_request_context
from i18n_resolver.services.providers import get_settings


class LanguageMiddleware(BaseHTTPMiddleware):
    """Negotiates the request language and binds it for the request.

    The query parameter wins over the Accept-Language header. It defaults
    to I18N_QUERY_PARAMETER ("lng" unless configured).
    The result is stored on request.state.language and bound to the
    request-scoped context, so Localizer.resolve(None, ...) picks it up.
    """

    def __init__(
        self,
        app,
        localizer: Localizer,
        query_parameter: Optional[str] = None,
    ):
        super().__init__(app)
        self.localizer = localizer
        if query_parameter is None:
            query_parameter = get_settings().i18n.QUERY_PARAMETER
        self.query_parameter = query_parameter

    def negotiate(self, query_value: Optional[str], header: Optional[str]) -> LanguageTag:
        return negotiate_language(
            query_value or header,
            self.localizer.supported_languages,
            self.localizer.default_language,
        )

    async def dispatch(self, request, call_next):
        language = self.negotiate(
            request.query_params.get(self.query_parameter),
            request.headers.get("accept-language"),
        )
        request.state.language = str(language)
        with bind_language(language), bind_request_context(
            language=str(language),
            request_path=request.url.path,
            request_method=request.method,
        ):
            response = await call_next(request)
        response.headers.setdefault("Content-Language", str(language))
        return response
