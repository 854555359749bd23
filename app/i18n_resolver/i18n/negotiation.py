"""Language negotiation for inbound requests.

Parses Accept-Language headers and matches the caller's preferences against
the supported languages.
"""

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from i18n_resolver.i18n.models import LanguageTag


def parse_accept_language(header: Optional[str]) -> List[Tuple[LanguageTag, float]]:
    """Parse an Accept-Language header into tags ordered by preference.

    "fr-CH, fr;q=0.9, en;q=0.8, *;q=0.5" -> [(fr-CH, 1.0), (fr, 0.9), (en, 0.8)]

    Wildcards and malformed ranges are skipped, q=0 entries are dropped and
    unparsable quality values count as 1.0. Ties keep header order.

    Args:
        header: Accept-Language header value.

    Returns:
        List of (LanguageTag, quality) sorted by quality, highest first.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        pieces = part.split(";")
        lang_range = pieces[0].strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.strip().partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 1.0

        if quality <= 0:
            continue

        try:
            tag = LanguageTag.from_string(lang_range)
        except ValueError:
            continue
        preferences.append((tag, quality))

    return sorted(preferences, key=lambda x: x[1], reverse=True)


def best_match(
    requested: Sequence[LanguageTag], available: Sequence[LanguageTag]
) -> Optional[LanguageTag]:
    """Pick the available tag serving the most preferred requested tag.

    Each requested tag is tried in order: an exact match first, then any
    available tag with the same primary language ("pt" serves "pt-BR" and
    the other way round). Earlier entries of available win ties.
    """
    for tag in requested:
        if tag in available:
            return tag
        for candidate in available:
            if candidate.language == tag.language:
                return candidate
    return None


def negotiate_language(
    accept_language: Optional[str],
    supported: Iterable[Union[str, LanguageTag]],
    default: Union[str, LanguageTag],
) -> LanguageTag:
    """Pick the supported language that best satisfies an Accept-Language header.

    Args:
        accept_language: Accept-Language header value (may be empty).
        supported: Languages the application can serve.
        default: Returned when nothing matches.

    Returns:
        The negotiated LanguageTag.
    """
    requested = [tag for tag, _ in parse_accept_language(accept_language)]
    available = [LanguageTag.coerce(language) for language in supported]
    match = best_match(requested, available)
    return match if match is not None else LanguageTag.coerce(default)
