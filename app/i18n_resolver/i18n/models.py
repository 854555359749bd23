"""Localization models.

Defines the core data structures: language tags, message definitions,
per-language catalogs and the two shapes of lookup request.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from i18n_resolver.i18n.errors import UnsupportedRequestShape

_SUBTAG_PATTERN = re.compile(r"^[A-Za-z0-9]{1,8}$")
_LANGUAGE_PATTERN = re.compile(r"^[A-Za-z]{2,8}$")

PLURAL_CATEGORIES = ("zero", "one", "two", "few", "many", "other")

PluralCount = Union[int, float, Decimal, str]

MAX_PLURAL_EXPONENT = 64


@dataclass(frozen=True)
class LanguageTag:
    """Canonical BCP 47 language tag.

    Equality and hashing use the canonical string, so "EN_us" and "en-US"
    parse to the same tag.

    Attributes:
        value: Canonical tag string (e.g., "en", "fr-CA", "zh-Hant-TW").
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, tag: str) -> "LanguageTag":
        """Parse and canonicalize a language tag.

        The language subtag is lower-cased, a four-letter script subtag is
        title-cased, a two-letter or three-digit region is upper-cased and
        anything else is lower-cased. Underscores are accepted as separators.

        Args:
            tag: Raw tag string (e.g., "en_us", "FR").

        Returns:
            LanguageTag with the canonical form.

        Raises:
            ValueError: If the tag is empty or malformed.
        """
        if not isinstance(tag, str) or not tag.strip():
            raise ValueError(f"Invalid language tag: {tag!r}")

        subtags = tag.strip().replace("_", "-").split("-")
        if not _LANGUAGE_PATTERN.match(subtags[0]):
            raise ValueError(f"Invalid language tag: {tag!r}")

        canonical = [subtags[0].lower()]
        for subtag in subtags[1:]:
            if not _SUBTAG_PATTERN.match(subtag):
                raise ValueError(f"Invalid language tag: {tag!r}")
            if len(subtag) == 4 and subtag.isalpha():
                canonical.append(subtag.title())
            elif (len(subtag) == 2 and subtag.isalpha()) or (
                len(subtag) == 3 and subtag.isdigit()
            ):
                canonical.append(subtag.upper())
            else:
                canonical.append(subtag.lower())
        return cls("-".join(canonical))

    @classmethod
    def coerce(cls, tag: Union[str, "LanguageTag"]) -> "LanguageTag":
        """Return tag unchanged if already parsed, otherwise parse it."""
        if isinstance(tag, LanguageTag):
            return tag
        return cls.from_string(tag)

    @property
    def language(self) -> str:
        """Get language part of the tag (e.g., "en" from "en-US")."""
        return self.value.split("-")[0]


@dataclass(frozen=True)
class MessageDefinition:
    """A single message: default text plus optional CLDR plural variants.

    Attributes:
        id: Message key.
        other: Default template text, also the "other" plural category.
        zero, one, two, few, many: Optional plural variants.
        description: Optional note for translators.
    """

    id: str
    other: Optional[str] = None
    zero: Optional[str] = None
    one: Optional[str] = None
    two: Optional[str] = None
    few: Optional[str] = None
    many: Optional[str] = None
    description: Optional[str] = None

    @property
    def plural_forms(self) -> Dict[str, str]:
        """Declared non-empty variants keyed by plural category."""
        forms = {}
        for category in PLURAL_CATEGORIES:
            text = getattr(self, category)
            if text:
                forms[category] = text
        return forms

    @property
    def has_plural_forms(self) -> bool:
        return any(getattr(self, category) for category in PLURAL_CATEGORIES[:-1])

    def text_for(self, category: str) -> Optional[str]:
        """Get the variant for a plural category, falling back to "other"."""
        return getattr(self, category, None) or self.other


@dataclass(frozen=True)
class MessageCatalog:
    """All message definitions for one language.

    The messages mapping is wrapped read-only on construction; a catalog is
    never mutated after load.

    Attributes:
        language: Language these messages are written in.
        messages: Mapping of message key to MessageDefinition.
    """

    language: LanguageTag
    messages: Mapping[str, MessageDefinition] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get(self, key: str) -> Optional[MessageDefinition]:
        return self.messages.get(key)

    def has(self, key: str) -> bool:
        return key in self.messages

    def keys(self):
        return self.messages.keys()

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)


def _validate_key(key: Any) -> str:
    if not isinstance(key, str) or not key:
        raise UnsupportedRequestShape(key, "message key must be a non-empty string")
    return key


def _validate_plural_count(count: Any) -> Optional[PluralCount]:
    if count is None:
        return None
    if isinstance(count, bool) or not isinstance(count, (int, float, Decimal, str)):
        raise UnsupportedRequestShape(count, f"invalid plural count: {count!r}")
    try:
        number = Decimal(count)
    except (InvalidOperation, ValueError) as e:
        raise UnsupportedRequestShape(
            count, f"invalid plural count: {count!r}"
        ) from e
    # Plural rules need the integer and fraction digits of the count
    if not number.is_finite() or abs(number.adjusted()) > MAX_PLURAL_EXPONENT:
        raise UnsupportedRequestShape(count, f"plural count out of range: {count!r}")
    return count


@dataclass(frozen=True)
class ByKey:
    """Lookup request carrying only a message key."""

    key: str

    def __post_init__(self):
        _validate_key(self.key)


@dataclass(frozen=True)
class ByConfig:
    """Structured lookup request.

    Attributes:
        key: Message key.
        data: Template data for placeholder substitution.
        plural_count: Count used to select a plural variant.
        fallback: Text returned when no language in the chain has the key.
    """

    key: str
    data: Optional[Mapping[str, Any]] = None
    plural_count: Optional[PluralCount] = None
    fallback: Optional[str] = None

    def __post_init__(self):
        _validate_key(self.key)
        if self.data is not None and not isinstance(self.data, Mapping):
            raise UnsupportedRequestShape(self.data, "template data must be a mapping")
        if self.fallback is not None and not isinstance(self.fallback, str):
            raise UnsupportedRequestShape(self.fallback, "fallback must be a string")
        _validate_plural_count(self.plural_count)


LookupRequest = Union[ByKey, ByConfig]

_MAPPING_ALIASES = {
    "key": "key",
    "message_id": "key",
    "data": "data",
    "template_data": "data",
    "plural_count": "plural_count",
    "count": "plural_count",
    "fallback": "fallback",
    "default": "fallback",
}


def normalize_request(request: Any) -> ByConfig:
    """Normalize any accepted request shape into a ByConfig.

    Accepts a bare key string, a ByKey, a ByConfig, or a mapping using the
    ByConfig field names (or their aliases message_id, template_data,
    count, default).

    Args:
        request: Request in any accepted shape.

    Returns:
        Equivalent ByConfig request.

    Raises:
        UnsupportedRequestShape: If the shape is not recognized.
    """
    if isinstance(request, ByConfig):
        return request
    if isinstance(request, ByKey):
        return ByConfig(key=request.key)
    if isinstance(request, str):
        return ByConfig(key=request)
    if isinstance(request, Mapping):
        fields: Dict[str, Any] = {}
        for name, value in request.items():
            target = _MAPPING_ALIASES.get(name) if isinstance(name, str) else None
            if target is None:
                raise UnsupportedRequestShape(
                    request, f"unknown localize request field: {name!r}"
                )
            if target in fields:
                raise UnsupportedRequestShape(
                    request, f"duplicate localize request field: {name!r}"
                )
            fields[target] = value
        if "key" not in fields:
            raise UnsupportedRequestShape(request, "localize request has no key")
        return ByConfig(**fields)
    raise UnsupportedRequestShape(request)
