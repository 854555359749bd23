"""Per-language resolvers and the registry that hands them out.

A Resolver binds a fallback chain of languages to the shared catalog store.
The registry prebuilds one Resolver per supported language at startup and
answers every lookup, falling back to the default language's Resolver.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple, Union

from i18n_resolver.i18n.models import LanguageTag, MessageDefinition
from i18n_resolver.i18n.store import CatalogStore
from i18n_resolver.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class Resolver:
    """Fallback chain bound to a catalog store.

    Attributes:
        chain: Languages tried in order; the last one is the default language.
        store: Catalog store shared by every resolver.
    """

    chain: Tuple[LanguageTag, ...]
    store: CatalogStore

    def __post_init__(self):
        if not self.chain:
            raise ValueError("Resolver fallback chain must not be empty")
        if len(set(self.chain)) != len(self.chain):
            raise ValueError(f"Resolver fallback chain has duplicates: {self.chain}")

    @property
    def language(self) -> LanguageTag:
        """Language this resolver answers for (first entry of the chain)."""
        return self.chain[0]

    @property
    def default_language(self) -> LanguageTag:
        return self.chain[-1]

    def find(self, key: str) -> Optional[Tuple[LanguageTag, MessageDefinition]]:
        """Find the first language in the chain whose catalog defines key.

        Returns:
            Tuple of (language, definition), or None if no catalog has it.
        """
        for language in self.chain:
            catalog = self.store.get(language)
            if catalog is None:
                continue
            definition = catalog.get(key)
            if definition is not None:
                return language, definition
        return None


def build_resolver(
    store: CatalogStore,
    language: Union[str, LanguageTag],
    default_language: Union[str, LanguageTag],
) -> Resolver:
    """Build the Resolver for one language.

    The chain is [language, default_language], with the default appended
    only when it differs from language.

    Args:
        store: Shared catalog store.
        language: Language the resolver answers for.
        default_language: Language every chain terminates in.

    Returns:
        New Resolver.
    """
    tag = LanguageTag.coerce(language)
    default_tag = LanguageTag.coerce(default_language)
    chain = [tag]
    if tag != default_tag:
        chain.append(default_tag)
    return Resolver(chain=tuple(chain), store=store)


class ResolverRegistry:
    """Mapping of language tag string to its prebuilt Resolver.

    Always holds a Resolver for the default language, which answers every
    lookup that misses. Built once and read-only afterwards.
    """

    def __init__(
        self,
        resolvers: Dict[str, Resolver],
        default_language: Union[str, LanguageTag],
    ):
        self.default_language = LanguageTag.coerce(default_language)
        if str(self.default_language) not in resolvers:
            raise ValueError(
                f"Registry has no resolver for default language {self.default_language}"
            )
        self._resolvers = dict(resolvers)

    @classmethod
    def build_all(
        cls,
        store: CatalogStore,
        supported_languages: Iterable[Union[str, LanguageTag]],
        default_language: Union[str, LanguageTag],
    ) -> "ResolverRegistry":
        """Build a Resolver for every supported language.

        A Resolver for the default language is always built, even when the
        default is not declared as supported.

        Args:
            store: Shared catalog store.
            supported_languages: Languages to build resolvers for.
            default_language: Language every chain terminates in.

        Returns:
            Populated ResolverRegistry.
        """
        default_tag = LanguageTag.coerce(default_language)
        resolvers: Dict[str, Resolver] = {}
        for language in supported_languages:
            tag = LanguageTag.coerce(language)
            resolvers[str(tag)] = build_resolver(store, tag, default_tag)

        if str(default_tag) not in resolvers:
            resolvers[str(default_tag)] = build_resolver(store, default_tag, default_tag)

        logger.info(
            "resolver_registry_built",
            languages=list(resolvers),
            default_language=str(default_tag),
        )
        return cls(resolvers, default_tag)

    def get(self, language: Optional[Union[str, LanguageTag]]) -> Resolver:
        """Get the Resolver for a language.

        Tries an exact match on the given string, then on its canonical form.
        Any miss, including an unparsable or empty language, returns the
        default language's Resolver.
        """
        if language is None:
            return self.default_resolver
        name = str(language)
        resolver = self._resolvers.get(name)
        if resolver is not None:
            return resolver
        try:
            canonical = str(LanguageTag.from_string(name))
        except ValueError:
            return self.default_resolver
        return self._resolvers.get(canonical, self.default_resolver)

    @property
    def default_resolver(self) -> Resolver:
        return self._resolvers[str(self.default_language)]

    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(self._resolvers)

    def __contains__(self, language: object) -> bool:
        return str(language) in self._resolvers

    def __len__(self) -> int:
        return len(self._resolvers)
