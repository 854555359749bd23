"""Tests for i18n_resolver.i18n.engine module."""

import threading

import pytest

from i18n_resolver.i18n import (
    ByConfig,
    ByKey,
    MessageNotFound,
    RenderError,
    UnsupportedRequestShape,
    bind_language,
)
from i18n_resolver.operations import OperationStatus
from tests.factories.i18n import DEFAULT_CATALOGS, make_localizer


@pytest.mark.unit
class TestResolve:
    """Tests for Localizer.resolve()."""

    def test_resolve_in_requested_language(self, localizer):
        """Keys present in the requested language are rendered from it."""
        result = localizer.resolve("fr", ByConfig("greet", data={"name": "Sam"}))
        assert result == "Bonjour, Sam!"

    def test_resolve_unsupported_language_uses_default(self, localizer):
        """Unsupported languages behave like the default language."""
        result = localizer.resolve("de", ByConfig("greet", data={"name": "Sam"}))
        assert result == "Hello, Sam!"

    def test_resolve_fallback_text(self, localizer):
        """Fallback text is returned verbatim when no catalog has the key."""
        assert localizer.resolve("fr", ByConfig("missing", fallback="N/A")) == "N/A"

    def test_fallback_text_not_interpolated(self, localizer):
        """Fallback text is not treated as a template."""
        result = localizer.resolve("fr", ByConfig("missing", fallback="{name}"))
        assert result == "{name}"

    def test_resolve_missing_placeholder(self, localizer):
        """Rendering without required data raises RenderError."""
        with pytest.raises(RenderError) as exc_info:
            localizer.resolve("en", "greet")
        assert exc_info.value.key == "greet"

    def test_resolve_bare_key(self, localizer):
        """A bare string key is accepted."""
        assert localizer.resolve("fr", "farewell") == "Au revoir"

    def test_resolve_by_key(self, localizer):
        """ByKey requests are accepted."""
        assert localizer.resolve("fr", ByKey("farewell")) == "Au revoir"

    def test_resolve_mapping_request(self, localizer):
        """Mapping requests are accepted."""
        result = localizer.resolve("fr", {"key": "greet", "data": {"name": "Sam"}})
        assert result == "Bonjour, Sam!"

    def test_resolve_falls_back_to_default_catalog(self, localizer):
        """A key missing in the requested language is taken from the default."""
        assert localizer.resolve("fr", "only_default") == "Default only"

    def test_resolve_message_not_found(self, localizer):
        """A key missing everywhere raises MessageNotFound."""
        with pytest.raises(MessageNotFound) as exc_info:
            localizer.resolve("fr", "missing")
        assert exc_info.value.key == "missing"
        assert exc_info.value.language == "fr"

    def test_resolve_fallback_ignored_when_found(self, localizer):
        """Fallback text is only used when the key is missing."""
        assert localizer.resolve("fr", ByConfig("farewell", fallback="N/A")) == (
            "Au revoir"
        )

    def test_resolve_unsupported_request(self, localizer):
        """Unsupported request shapes raise UnsupportedRequestShape."""
        with pytest.raises(UnsupportedRequestShape):
            localizer.resolve("en", 42)

    def test_resolve_non_finite_count(self, localizer):
        """A NaN plural count is rejected as an unsupported request."""
        with pytest.raises(UnsupportedRequestShape):
            localizer.resolve("en", {"key": "items", "plural_count": float("nan")})

    def test_resolve_plural(self, localizer):
        """Plural variants are selected with the count."""
        assert localizer.resolve("en", ByConfig("items", plural_count=1)) == "1 item"
        assert localizer.resolve("fr", ByConfig("items", plural_count=3)) == "3 articles"

    def test_resolve_plural_uses_supplying_language_rules(self):
        """Plural rules of the language whose catalog supplied the entry apply."""
        localizer = make_localizer(
            catalogs={
                "en": DEFAULT_CATALOGS["en"],
                "ja": {"greet": "こんにちは、{name}!"},
            }
        )
        # "items" comes from the English catalog, so English rules decide
        assert localizer.resolve("ja", ByConfig("items", plural_count=1)) == "1 item"

    def test_resolve_canonicalizes_language(self, localizer):
        """Language spellings are canonicalized before lookup."""
        assert localizer.resolve("FR", "farewell") == "Au revoir"

    def test_resolve_uses_bound_language(self, localizer):
        """language=None uses the request-scoped language."""
        with bind_language("fr"):
            assert localizer.resolve(None, "farewell") == "Au revoir"

    def test_resolve_none_without_binding_uses_default(self, localizer):
        """language=None without a bound language uses the default."""
        assert localizer.resolve(None, "farewell") == "Goodbye"

    @pytest.mark.parametrize("language", ["de", "zz", "pt-BR", "", "not a tag"])
    @pytest.mark.parametrize("key", ["farewell", "only_default"])
    def test_unsupported_equals_default(self, localizer, language, key):
        """Any language outside the supported set matches the default rendering."""
        assert localizer.resolve(language, key) == localizer.resolve("en", key)

    def test_resolve_every_key_in_own_catalog(self, localizer):
        """Every key of a supported catalog renders from that catalog."""
        data = {"name": "Sam"}
        for language, messages in DEFAULT_CATALOGS.items():
            for key in messages:
                result = localizer.resolve(
                    language, ByConfig(key, data=data, plural_count=2)
                )
                definition = localizer.store.get(language).get(key)
                expected = definition.other.replace("{name}", "Sam").replace(
                    "{{.PluralCount}}", "2"
                )
                assert result == expected

    def test_default_without_catalog(self):
        """A default language without a catalog still answers lookups."""
        localizer = make_localizer(catalogs={"fr": {"x": "X"}}, default_language="en")
        assert localizer.resolve("de", ByConfig("x", fallback="-")) == "-"
        with pytest.raises(MessageNotFound):
            localizer.resolve("de", "x")


@pytest.mark.unit
class TestMustResolve:
    """Tests for Localizer.must_resolve()."""

    def test_success(self, localizer):
        """must_resolve() returns the rendered text."""
        assert localizer.must_resolve("fr", "farewell") == "Au revoir"

    @pytest.mark.parametrize("request_value", ["missing", "greet", 42, {"data": {}}])
    def test_failure_returns_empty_string(self, localizer, request_value):
        """must_resolve() yields "" for not-found, render and shape errors."""
        assert localizer.must_resolve("en", request_value) == ""

    def test_invalid_language_still_resolves(self, localizer):
        """An unparsable language falls back to the default, not to ""."""
        assert localizer.must_resolve("qqq invalid", "farewell") == "Goodbye"

    @pytest.mark.parametrize(
        "count", [float("inf"), float("nan"), "NaN", "Infinity", "1e999999999"]
    )
    def test_non_finite_count_returns_empty_string(self, localizer, count):
        """Counts without a plural category never escape must_resolve()."""
        request = {"key": "items", "count": count}
        assert localizer.must_resolve("en", request) == ""


@pytest.mark.unit
class TestTryResolve:
    """Tests for Localizer.try_resolve()."""

    def test_success(self, localizer):
        """try_resolve() wraps the text in a successful result."""
        result = localizer.try_resolve("fr", "farewell")
        assert result.is_success
        assert result.data == "Au revoir"

    def test_not_found(self, localizer):
        """Missing messages map to NOT_FOUND."""
        result = localizer.try_resolve("fr", "missing")
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "MessageNotFound"

    def test_render_error(self, localizer):
        """Render failures map to PERMANENT_ERROR."""
        result = localizer.try_resolve("en", "greet")
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "RenderError"

    def test_unsupported_request(self, localizer):
        """Bad request shapes map to PERMANENT_ERROR."""
        result = localizer.try_resolve("en", object())
        assert result.error_code == "UnsupportedRequestShape"

    def test_infinite_count(self, localizer):
        """An infinite plural count maps to PERMANENT_ERROR."""
        result = localizer.try_resolve("en", {"key": "items", "count": float("inf")})
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "UnsupportedRequestShape"


@pytest.mark.unit
class TestLocalizerHelpers:
    """Tests for the remaining Localizer API."""

    def test_has_message_walks_chain(self, localizer):
        """has_message() considers the default language too."""
        assert localizer.has_message("fr", "only_default")
        assert not localizer.has_message("fr", "missing")

    def test_supported_languages(self, localizer):
        """supported_languages lists every prebuilt resolver."""
        assert {str(tag) for tag in localizer.supported_languages} == {"en", "fr"}

    def test_default_language(self, localizer):
        """default_language comes from the registry."""
        assert str(localizer.default_language) == "en"


@pytest.mark.unit
class TestConcurrentResolve:
    """The localizer is shared across threads without per-request state."""

    def test_threads_keep_their_own_language(self, localizer):
        """Concurrent requests with different languages do not interfere."""
        results = {}
        barrier = threading.Barrier(2)

        def worker(language):
            with bind_language(language):
                barrier.wait()
                results[language] = [
                    localizer.resolve(None, "farewell") for _ in range(200)
                ]

        threads = [threading.Thread(target=worker, args=(lng,)) for lng in ("en", "fr")]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert set(results["en"]) == {"Goodbye"}
        assert set(results["fr"]) == {"Au revoir"}
