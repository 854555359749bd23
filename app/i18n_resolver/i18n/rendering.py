"""Message rendering: plural-form selection and placeholder interpolation."""

import re
from decimal import Decimal
from functools import lru_cache
from typing import Any, Mapping, Optional

from babel import Locale as BabelLocale
from babel.core import UnknownLocaleError

from i18n_resolver.i18n.errors import RenderError
from i18n_resolver.i18n.models import LanguageTag, MessageDefinition, PluralCount

# Matches {{name}}, {{ .name }} and {name}
_PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*\.?(\w+)\s*\}\}|\{(\w+)\}")

PLURAL_COUNT_VARIABLE = "PluralCount"


@lru_cache(maxsize=None)
def _babel_locale(tag: str) -> Optional[BabelLocale]:
    try:
        return BabelLocale.parse(tag, sep="-")
    except (UnknownLocaleError, ValueError):
        return None


def plural_category(language: LanguageTag, count: PluralCount) -> str:
    """Get the CLDR plural category of count in language.

    Args:
        language: Language whose plural rules apply.
        count: Number (or numeric string) being described.

    Returns:
        One of "zero", "one", "two", "few", "many", "other".

    Raises:
        LookupError: If no CLDR plural rules are known for the language.
    """
    locale = _babel_locale(str(language))
    if locale is None and language.language != str(language):
        locale = _babel_locale(language.language)
    if locale is None:
        raise LookupError(f"no plural rules for language {language}")
    number = Decimal(count) if isinstance(count, str) else count
    return locale.plural_form(number)


def interpolate(key: str, template: str, data: Mapping[str, Any]) -> str:
    """Substitute placeholders in template with values from data.

    Every referenced name must be present in data; extra names are ignored.

    Raises:
        RenderError: If a placeholder has no value in data.
    """
    missing = []
    for match in _PLACEHOLDER_PATTERN.finditer(template):
        name = match.group(1) or match.group(2)
        if name not in data and name not in missing:
            missing.append(name)
    if missing:
        raise RenderError(
            key, f"missing template data: {', '.join(missing)}"
        )

    def _substitute(match: "re.Match[str]") -> str:
        return str(data[match.group(1) or match.group(2)])

    return _PLACEHOLDER_PATTERN.sub(_substitute, template)


def template_data(
    data: Optional[Mapping[str, Any]], plural_count: Optional[PluralCount]
) -> Mapping[str, Any]:
    """Build the data a template is rendered with.

    The plural count is exposed as PluralCount unless data already sets it.
    """
    merged = dict(data or {})
    if plural_count is not None:
        merged.setdefault(PLURAL_COUNT_VARIABLE, plural_count)
    return merged


def render_message(
    definition: MessageDefinition,
    language: LanguageTag,
    data: Optional[Mapping[str, Any]] = None,
    plural_count: Optional[PluralCount] = None,
) -> str:
    """Render a message definition in the language that supplied it.

    Args:
        definition: Message to render.
        language: Language of the catalog the definition came from.
        data: Template data.
        plural_count: Count selecting a plural variant.

    Returns:
        Rendered text.

    Raises:
        RenderError: If the plural category cannot be computed, no variant
            applies or a placeholder has no value.
    """
    category = "other"
    if plural_count is not None and definition.has_plural_forms:
        try:
            category = plural_category(language, plural_count)
        except (LookupError, ValueError, ArithmeticError) as e:
            raise RenderError(definition.id, str(e)) from e

    template = definition.text_for(category)
    if not template:
        raise RenderError(
            definition.id, f"no text for plural category {category!r}"
        )
    return interpolate(definition.id, template, template_data(data, plural_count))
