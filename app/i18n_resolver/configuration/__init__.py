"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class
    LocalizationSettings: Catalog and language settings section

Example:
    ```python
    from i18n_resolver.services import get_settings

    settings = get_settings()
    default_language = settings.i18n.DEFAULT_LANGUAGE
    ```
"""

from i18n_resolver.configuration.localization import LocalizationSettings
from i18n_resolver.configuration.settings import Settings

__all__ = ["Settings", "LocalizationSettings"]
