"""Feature-level fixtures for i18n system tests.

Provides catalog directories and prebuilt localizers for resolution scenarios.
"""

import json

import pytest
import yaml

from tests.factories.i18n import make_localizer


@pytest.fixture
def catalog_dir(tmp_path):
    """Create temporary directory with sample YAML catalogs.

    Returns a directory structure like:
    - en.yaml
    - fr.yaml
    - de.yaml
    """
    en = {
        "greet": "Hello, {name}!",
        "farewell": "Goodbye",
        "only_default": "Default only",
        "incident": {
            "created": "Incident {{incident_id}} created",
        },
        "items": {
            "description": "Number of items in the cart",
            "one": "{{.PluralCount}} item",
            "other": "{{.PluralCount}} items",
        },
    }
    with open(tmp_path / "en.yaml", "w", encoding="utf-8") as f:
        yaml.dump(en, f, allow_unicode=True)

    fr = {
        "greet": "Bonjour, {name}!",
        "farewell": "Au revoir",
        "incident": {
            "created": "Incident {{incident_id}} créé",
        },
        "items": {
            "one": "{{.PluralCount}} article",
            "other": "{{.PluralCount}} articles",
        },
    }
    with open(tmp_path / "fr.yaml", "w", encoding="utf-8") as f:
        yaml.dump(fr, f, allow_unicode=True)

    de = {
        "greet": "Hallo, {name}!",
    }
    with open(tmp_path / "de.yaml", "w", encoding="utf-8") as f:
        yaml.dump(de, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def json_catalog_dir(tmp_path):
    """Create temporary directory with JSON catalogs for en and fr."""
    (tmp_path / "en.json").write_text(
        json.dumps({"greet": "Hello, {name}!"}), encoding="utf-8"
    )
    (tmp_path / "fr.json").write_text(
        json.dumps({"greet": "Bonjour, {name}!"}), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def localizer():
    """Localizer over in-memory en/fr catalogs with en as default."""
    return make_localizer()


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "de-DE,*;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
    }
