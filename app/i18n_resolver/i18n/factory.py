"""Factory functions for creating i18n components.

Wires the catalog loader, store and resolver registry into a ready Localizer
at startup.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from i18n_resolver.configuration import LocalizationSettings
from i18n_resolver.i18n.engine import Localizer
from i18n_resolver.i18n.errors import CatalogLoadError
from i18n_resolver.i18n.loader import CatalogLoader, CatalogLocator, SourceLocator
from i18n_resolver.i18n.models import LanguageTag
from i18n_resolver.i18n.resolvers import ResolverRegistry
from i18n_resolver.i18n.store import CatalogStore
from i18n_resolver.logging import get_module_logger

logger = get_module_logger()


def create_localizer(
    settings: Optional[LocalizationSettings] = None,
    root_path: Optional[Union[str, Path]] = None,
    default_language: Optional[Union[str, LanguageTag]] = None,
    supported_languages: Optional[Iterable[Union[str, LanguageTag]]] = None,
    locator: Optional[CatalogLocator] = None,
) -> Localizer:
    """Create a Localizer with every supported catalog loaded.

    Explicit arguments override the corresponding settings values.

    Args:
        settings: Localization settings (default: read from the environment).
        root_path: Directory with <language>.<format> catalog files.
        default_language: Language every fallback chain terminates in.
        supported_languages: Languages whose catalogs must load.
        locator: Custom catalog locator; replaces root_path and settings.FORMAT.

    Returns:
        Localizer: Ready localizer backed by a frozen catalog store.

    Raises:
        CatalogLoadError: If a language tag is invalid or any catalog is
            missing or malformed. Startup must not continue.

    Usage:
        # Use settings from the environment (I18N_*)
        localizer = create_localizer()

        # Explicit configuration
        localizer = create_localizer(
            root_path="/srv/locales",
            default_language="en",
            supported_languages=["en", "fr"],
        )
    """
    if settings is None:
        settings = LocalizationSettings()

    default_tag = _parse_tag(default_language or settings.DEFAULT_LANGUAGE)
    languages = []
    for language in (
        supported_languages
        if supported_languages is not None
        else settings.SUPPORTED_LANGUAGES
    ):
        tag = _parse_tag(language)
        if tag not in languages:
            languages.append(tag)

    if locator is None:
        locator = SourceLocator(root_path or settings.ROOT_PATH, settings.FORMAT)

    store = CatalogLoader().load(CatalogStore(), languages, locator)
    registry = ResolverRegistry.build_all(store, languages, default_tag)

    logger.info(
        "localizer_created",
        default_language=str(default_tag),
        supported_languages=[str(tag) for tag in languages],
    )
    return Localizer(store=store, registry=registry)


def _parse_tag(language: Union[str, LanguageTag]) -> LanguageTag:
    try:
        return LanguageTag.coerce(language)
    except ValueError as e:
        logger.error("invalid_language_configured", language=str(language))
        raise CatalogLoadError(str(language), None, str(e)) from e
