"""Catalog loading interface and implementations.

Locates one catalog source per supported language, decodes it through the
decoder registered for its extension and commits the results to a
CatalogStore in a single step.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Union

from i18n_resolver.i18n.decoders import decode_catalog
from i18n_resolver.i18n.errors import CatalogLoadError
from i18n_resolver.i18n.models import LanguageTag, MessageCatalog
from i18n_resolver.i18n.store import CatalogStore
from i18n_resolver.logging import get_module_logger

logger = get_module_logger()


class CatalogLocator(ABC):
    """Abstract base for catalog source locators."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension identifying the source format."""

    @abstractmethod
    def locate(self, language: LanguageTag) -> Path:
        """Resolve the source location for a language.

        Args:
            language: Language to locate the catalog for.

        Returns:
            Path of the catalog source.
        """


class SourceLocator(CatalogLocator):
    """Locates catalogs at <root_path>/<language>.<extension>.

    Attributes:
        root_path: Directory containing the catalog files.
    """

    def __init__(self, root_path: Union[str, Path], extension: str = "yaml"):
        self.root_path = Path(root_path)
        self._extension = extension.lower().lstrip(".")

    @property
    def extension(self) -> str:
        return self._extension

    def locate(self, language: LanguageTag) -> Path:
        return self.root_path / f"{language}.{self._extension}"


class CatalogLoader:
    """Loads the catalogs of all supported languages into a CatalogStore.

    Loading is all-or-nothing: catalogs are decoded into a staging area and
    only committed once every language succeeded. The store is frozen after
    the commit.
    """

    def load(
        self,
        store: CatalogStore,
        supported_languages: Iterable[Union[str, LanguageTag]],
        locator: CatalogLocator,
    ) -> CatalogStore:
        """Load every supported language's catalog.

        Args:
            store: Store to populate.
            supported_languages: Languages whose catalogs are required.
            locator: Resolves each language to its catalog source.

        Returns:
            The populated, frozen store.

        Raises:
            CatalogLoadError: If any source is missing or malformed.
        """
        staged: Dict[LanguageTag, MessageCatalog] = {}
        for language in supported_languages:
            tag = self._parse_language(language)
            if tag in staged:
                continue
            staged[tag] = self.load_catalog(tag, locator)

        for catalog in staged.values():
            store.add(catalog)
        store.freeze()

        logger.info(
            "catalogs_loaded",
            languages=[str(tag) for tag in staged],
            catalog_count=len(staged),
        )
        return store

    def load_catalog(
        self, language: LanguageTag, locator: CatalogLocator
    ) -> MessageCatalog:
        """Load and decode a single language's catalog.

        Raises:
            CatalogLoadError: If the source is missing or malformed.
        """
        path = locator.locate(language)
        try:
            raw = path.read_bytes()
        except OSError as e:
            logger.error(
                "catalog_load_failed",
                language=str(language),
                path=str(path),
                error=str(e),
            )
            raise CatalogLoadError(str(language), str(path), "source not readable") from e

        try:
            messages = decode_catalog(raw, locator.extension)
        except (KeyError, ValueError) as e:
            logger.error(
                "catalog_decode_failed",
                language=str(language),
                path=str(path),
                error=str(e),
            )
            raise CatalogLoadError(str(language), str(path), str(e)) from e

        logger.info(
            "catalog_loaded",
            language=str(language),
            path=str(path),
            message_count=len(messages),
        )
        return MessageCatalog(language=language, messages=messages)

    @staticmethod
    def _parse_language(language: Union[str, LanguageTag]) -> LanguageTag:
        try:
            return LanguageTag.coerce(language)
        except ValueError as e:
            logger.error("invalid_supported_language", language=str(language))
            raise CatalogLoadError(str(language), None, str(e)) from e
