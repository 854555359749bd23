"""Localization engine.

The Localizer is the facade consumers use: it picks the Resolver for the
requested language and renders the first matching catalog entry along the
fallback chain. It holds only state built at startup; the language is passed
on every call (or taken from the request-scoped context).
"""

from typing import Any, List, Optional, Union

from i18n_resolver.i18n.context import get_current_language
from i18n_resolver.i18n.errors import LocalizationError, MessageNotFound
from i18n_resolver.i18n.models import LanguageTag, normalize_request
from i18n_resolver.i18n.rendering import render_message
from i18n_resolver.i18n.resolvers import ResolverRegistry
from i18n_resolver.i18n.store import CatalogStore
from i18n_resolver.operations import OperationResult, OperationStatus

Language = Optional[Union[str, LanguageTag]]


class Localizer:
    """Resolves message keys to rendered strings for a language.

    Usage:
        localizer = create_localizer()

        localizer.resolve("fr", "greet.title")
        localizer.resolve("fr", ByConfig("greet", data={"name": "Sam"}))
        localizer.must_resolve("de", "maybe.missing")  # "" on failure

    Attributes:
        store: Catalog store with every loaded catalog.
        registry: Prebuilt resolvers by language.
    """

    def __init__(self, store: CatalogStore, registry: ResolverRegistry):
        self.store = store
        self.registry = registry

    @property
    def default_language(self) -> LanguageTag:
        return self.registry.default_language

    @property
    def supported_languages(self) -> List[LanguageTag]:
        """Languages with a prebuilt resolver, default language included."""
        return [LanguageTag.from_string(language) for language in self.registry.languages]

    def resolve(self, language: Language, request: Any) -> str:
        """Resolve and render a message.

        Args:
            language: Requested language. None uses the language bound to
                the current request context, then the default language.
            request: Message key, ByKey, ByConfig, or an equivalent mapping.

        Returns:
            Rendered message text, or the request's fallback text when no
            language in the chain defines the key.

        Raises:
            UnsupportedRequestShape: If request has an unrecognized shape.
            MessageNotFound: If the key is missing and no fallback was given.
            RenderError: If plural selection or interpolation fails.
        """
        config = normalize_request(request)
        if language is None:
            language = get_current_language()

        resolver = self.registry.get(language)
        found = resolver.find(config.key)
        if found is None:
            if config.fallback is not None:
                return config.fallback
            requested = str(language) if language else str(resolver.language)
            raise MessageNotFound(config.key, requested)

        catalog_language, definition = found
        return render_message(
            definition,
            catalog_language,
            data=config.data,
            plural_count=config.plural_count,
        )

    def must_resolve(self, language: Language, request: Any) -> str:
        """Resolve a message, returning "" instead of raising.

        For call sites that explicitly choose to ignore localization failures.
        """
        return self.try_resolve(language, request).unwrap_or("")

    def try_resolve(self, language: Language, request: Any) -> OperationResult:
        """Resolve a message into an OperationResult instead of raising.

        Returns:
            SUCCESS with the rendered text as data, NOT_FOUND for a missing
            message, PERMANENT_ERROR for any other localization error. The
            error class name is used as error_code.
        """
        try:
            text = self.resolve(language, request)
        except MessageNotFound as e:
            return OperationResult.from_exception(e, OperationStatus.NOT_FOUND)
        except LocalizationError as e:
            return OperationResult.from_exception(e)
        return OperationResult.success(data=text)

    def has_message(self, language: Language, key: str) -> bool:
        """Check whether any language in the fallback chain defines key."""
        if language is None:
            language = get_current_language()
        return self.registry.get(language).find(key) is not None
