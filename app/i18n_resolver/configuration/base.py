"""Shared base class for settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class SectionSettings(BaseSettings):
    """Base for every settings section.

    Sections read ``.env`` as well as the process environment, match
    variable names case-sensitively and ignore unrelated variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
