"""Catalog store holding every loaded message catalog."""

from typing import Dict, Iterator, List, Optional, Union

from i18n_resolver.i18n.models import LanguageTag, MessageCatalog


class CatalogStore:
    """Mapping of language tag to its MessageCatalog.

    Populated once during startup and frozen afterwards. Once frozen the
    store is read-only, so concurrent lookups need no locking.
    """

    def __init__(self):
        self._catalogs: Dict[LanguageTag, MessageCatalog] = {}
        self._frozen = False

    def add(self, catalog: MessageCatalog) -> None:
        """Register a catalog, replacing any earlier one for the language.

        Raises:
            RuntimeError: If the store has been frozen.
        """
        if self._frozen:
            raise RuntimeError("Catalog store is frozen")
        self._catalogs[catalog.language] = catalog

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, language: Union[str, LanguageTag]) -> Optional[MessageCatalog]:
        """Get the catalog for a language, or None if it was never loaded."""
        if isinstance(language, str):
            try:
                language = LanguageTag.from_string(language)
            except ValueError:
                return None
        return self._catalogs.get(language)

    @property
    def languages(self) -> List[LanguageTag]:
        return list(self._catalogs)

    def __contains__(self, language: object) -> bool:
        return language in self._catalogs

    def __iter__(self) -> Iterator[MessageCatalog]:
        return iter(self._catalogs.values())

    def __len__(self) -> int:
        return len(self._catalogs)
