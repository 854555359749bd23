"""Top-level settings for the resolver."""

from typing import ClassVar, Dict, Type

from pydantic_settings import BaseSettings

from i18n_resolver.configuration.base import SectionSettings
from i18n_resolver.configuration.localization import LocalizationSettings


class Settings(SectionSettings):
    """Process-wide settings.

    Each section reads its own prefixed environment variables; the sections
    listed in ``sections`` are created from the environment unless passed
    explicitly.

    Environment Variables:
        PREFIX: Deployment prefix, empty in production.
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR).

    Example:
        settings = Settings(i18n=LocalizationSettings(ROOT_PATH="/srv/locales"))
        settings.i18n.DEFAULT_LANGUAGE
    """

    sections: ClassVar[Dict[str, Type[BaseSettings]]] = {
        "i18n": LocalizationSettings,
    }

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: LocalizationSettings

    def __init__(self, **kwargs):
        for name, section in type(self).sections.items():
            if name not in kwargs:
                kwargs[name] = section()
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """Production deployments run without a PREFIX."""
        return not self.PREFIX
