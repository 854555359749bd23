"""Application-scoped service providers."""

from i18n_resolver.services.providers import get_localizer, get_settings

__all__ = ["get_settings", "get_localizer"]
