"""Unit tests for i18n_resolver.http.dependencies module."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from i18n_resolver.http import LanguageMiddleware, LocalizerDep, RequestLanguageDep
from i18n_resolver.i18n import ByConfig
from i18n_resolver.services.providers import get_localizer
from tests.factories.i18n import make_localizer


def _build_app(localizer, with_middleware: bool) -> FastAPI:
    app = FastAPI()
    if with_middleware:
        app.add_middleware(LanguageMiddleware, localizer=localizer)
    app.dependency_overrides[get_localizer] = lambda: localizer

    @app.get("/farewell")
    def farewell(localizer: LocalizerDep, language: RequestLanguageDep):
        return {
            "language": language,
            "message": localizer.resolve(language, ByConfig("farewell")),
        }

    return app


@pytest.mark.unit
class TestRequestLanguageDependency:
    """Tests for the FastAPI dependencies."""

    @pytest.mark.parametrize("with_middleware", [True, False])
    def test_negotiated_language(self, with_middleware):
        """RequestLanguageDep yields the negotiated language."""
        client = TestClient(_build_app(make_localizer(), with_middleware))
        response = client.get("/farewell", headers={"Accept-Language": "fr"})
        assert response.json() == {"language": "fr", "message": "Au revoir"}

    def test_without_middleware_defaults(self):
        """Without preference the default language is used."""
        client = TestClient(_build_app(make_localizer(), with_middleware=False))
        response = client.get("/farewell", headers={"Accept-Language": "ja"})
        assert response.json() == {"language": "en", "message": "Goodbye"}

    def test_middleware_value_is_reused(self):
        """The language stored by the middleware wins over the header."""
        client = TestClient(_build_app(make_localizer(), with_middleware=True))
        response = client.get("/farewell?lng=en", headers={"Accept-Language": "fr"})
        assert response.json()["language"] == "en"
