"""i18n system - message localization resolver.

Loads per-language message catalogs at startup and resolves message keys to
rendered strings, falling back to the default language when a translation
or a whole locale is missing.

Main components:
- models: LanguageTag, MessageDefinition, MessageCatalog, ByKey, ByConfig
- decoders: pluggable catalog decoders keyed by file extension
- loader: CatalogLoader and SourceLocator
- resolvers: Resolver, build_resolver, ResolverRegistry
- engine: Localizer facade (resolve, must_resolve, try_resolve)
- negotiation: Accept-Language parsing and language matching
- context: request-scoped current language
"""

from i18n_resolver.i18n.context import bind_language, get_current_language
from i18n_resolver.i18n.decoders import register_decoder
from i18n_resolver.i18n.engine import Localizer
from i18n_resolver.i18n.errors import (
    CatalogLoadError,
    LocalizationError,
    MessageNotFound,
    RenderError,
    UnsupportedRequestShape,
)
from i18n_resolver.i18n.loader import CatalogLoader, CatalogLocator, SourceLocator
from i18n_resolver.i18n.models import (
    ByConfig,
    ByKey,
    LanguageTag,
    LookupRequest,
    MessageCatalog,
    MessageDefinition,
    normalize_request,
)
from i18n_resolver.i18n.negotiation import (
    best_match,
    negotiate_language,
    parse_accept_language,
)
from i18n_resolver.i18n.resolvers import Resolver, ResolverRegistry, build_resolver
from i18n_resolver.i18n.store import CatalogStore

__all__ = [
    "LanguageTag",
    "MessageDefinition",
    "MessageCatalog",
    "ByKey",
    "ByConfig",
    "LookupRequest",
    "normalize_request",
    "LocalizationError",
    "CatalogLoadError",
    "UnsupportedRequestShape",
    "MessageNotFound",
    "RenderError",
    "register_decoder",
    "CatalogStore",
    "CatalogLoader",
    "CatalogLocator",
    "SourceLocator",
    "Resolver",
    "ResolverRegistry",
    "build_resolver",
    "Localizer",
    "best_match",
    "negotiate_language",
    "parse_accept_language",
    "bind_language",
    "get_current_language",
]
