"""Localization settings.

Configuration for catalog discovery and the language fallback policy.
"""

import json
from typing import Annotated, Any, List

from pydantic import Field, field_validator
from pydantic_settings import NoDecode, SettingsConfigDict

from i18n_resolver.configuration.base import SectionSettings


class LocalizationSettings(SectionSettings):
    """Message catalog and language negotiation settings.

    Environment Variables:
        I18N_ROOT_PATH: Directory holding one catalog file per language
        I18N_DEFAULT_LANGUAGE: Language used when a translation is missing
        I18N_SUPPORTED_LANGUAGES: JSON list or comma-separated language tags
        I18N_FORMAT: Catalog file extension (yaml, yml, json, toml)
        I18N_QUERY_PARAMETER: Query parameter overriding Accept-Language

    Example:
        ```python
        from i18n_resolver.services import get_settings

        settings = get_settings()
        root = settings.i18n.ROOT_PATH
        default = settings.i18n.DEFAULT_LANGUAGE
        ```
    """

    model_config = SettingsConfigDict(env_prefix="I18N_")

    ROOT_PATH: str = Field(
        default="./locales",
        description="Directory containing <language>.<format> catalog files",
    )

    DEFAULT_LANGUAGE: str = Field(
        default="en",
        description="Language every fallback chain terminates in",
    )

    SUPPORTED_LANGUAGES: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en", "de", "fr"],
        description="Languages whose catalogs are loaded at startup",
    )

    FORMAT: str = Field(
        default="yaml",
        description="Catalog file extension, selects the decoder",
    )

    QUERY_PARAMETER: str = Field(
        default="lng",
        description="Query parameter that overrides the Accept-Language header",
    )

    @field_validator("SUPPORTED_LANGUAGES", mode="before")
    @classmethod
    def split_supported_languages(cls, v: Any) -> Any:
        """Accept a JSON list or a comma-separated string."""
        if isinstance(v, str):
            stripped = v.strip()
            if stripped.startswith("["):
                return json.loads(stripped)
            return [part.strip() for part in stripped.split(",") if part.strip()]
        return v

    @field_validator("DEFAULT_LANGUAGE")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("I18N_DEFAULT_LANGUAGE must not be empty")
        return v.strip()

    @field_validator("FORMAT")
    @classmethod
    def normalize_format(cls, v: str) -> str:
        return v.strip().lower().lstrip(".")
