"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the settings and the
Localizer.
"""

from functools import lru_cache

from i18n_resolver.configuration import Settings
from i18n_resolver.i18n.engine import Localizer
from i18n_resolver.i18n.factory import create_localizer


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_localizer() -> Localizer:
    """
    Get application-scoped Localizer singleton.

    Loads every supported catalog on first call, so
    call it during startup, before serving traffic. A CatalogLoadError here
    must abort startup.

    Returns:
        Localizer: Cached localizer built from settings.i18n.

    Usage:
        @router.get("/greet")
        def greet(localizer: LocalizerDep, language: RequestLanguageDep):
            return {"message": localizer.resolve(language, "greet")}
    """
    return create_localizer(get_settings().i18n)
