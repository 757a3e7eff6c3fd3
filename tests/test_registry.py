"""Tests for langdesk.i18n.registry and the ``t()`` wrapper.

Verifies:
- register / unregister by name and by instance.
- Invalid and unhashable references are ignored without raising.
- Default translator selection, including invalid values.
- Language broadcast to every registered translator.
- ``translate`` delegation and key passthrough without a default.
"""

from __future__ import annotations

import gc

import pytest

from langdesk.i18n import Translator, TranslatorRegistry, t


@pytest.fixture
def registry() -> TranslatorRegistry:
    return TranslatorRegistry()


# ---------------------------------------------------------------------------
# register / unregister
# ---------------------------------------------------------------------------


class TestRegister:
    """Test binding and unbinding translators by name."""

    def test_register_and_get(self, registry: TranslatorRegistry) -> None:
        """A registered translator is returned by get() and counted."""
        tr = Translator()
        assert registry.register("foo", tr) is True
        assert registry.get("foo") is tr
        assert "foo" in registry
        assert len(registry) == 1

    def test_unregister_by_name(self, registry: TranslatorRegistry) -> None:
        """Unregistering by name makes get() report absent."""
        registry.register("foo", Translator())
        assert registry.unregister("foo") is True
        assert registry.get("foo") is None

    def test_unregister_by_instance(self, registry: TranslatorRegistry) -> None:
        """Unregistering by instance makes get() report absent."""
        tr = Translator()
        registry.register("foo", tr)
        assert registry.unregister(tr) is True
        assert registry.get("foo") is None

    def test_unregister_instance_removes_all_names(self, registry: TranslatorRegistry) -> None:
        """Every name bound to the instance is removed, others stay."""
        tr = Translator()
        other = Translator()
        registry.register("foo", tr)
        registry.register("bar", tr)
        registry.register("baz", other)
        registry.unregister(tr)
        assert registry.names() == ("baz",)

    @pytest.mark.parametrize("target", ["never", 42, None, ["x"], {}])
    def test_unregister_unknown_is_noop(self, registry: TranslatorRegistry, target: object) -> None:
        """Unknown references return False and leave entries alone."""
        registry.register("foo", Translator())
        assert registry.unregister(target) is False  # type: ignore[arg-type]
        assert "foo" in registry

    @pytest.mark.parametrize("name", [["x"], {}, 42, None])
    def test_lookup_with_non_str_name(self, registry: TranslatorRegistry, name: object) -> None:
        """get() and ``in`` return absent for non-str names instead of raising."""
        registry.register("foo", Translator())
        assert registry.get(name) is None  # type: ignore[arg-type]
        assert (name in registry) is False

    def test_unregister_unregistered_instance(self, registry: TranslatorRegistry) -> None:
        """A translator that was never registered cannot be unregistered."""
        assert registry.unregister(Translator()) is False

    @pytest.mark.parametrize(("name", "value"), [("", Translator()), (42, Translator()), ("foo", {"foo": "bar"})])
    def test_register_rejects_invalid(self, registry: TranslatorRegistry, name: object, value: object) -> None:
        """Empty/non-str names and non-translators are refused."""
        assert registry.register(name, value) is False  # type: ignore[arg-type]
        assert len(registry) == 0

    def test_register_replaces_binding(self, registry: TranslatorRegistry) -> None:
        """Registering an existing name rebinds it."""
        first, second = Translator(), Translator()
        registry.register("foo", first)
        registry.register("foo", second)
        assert registry.get("foo") is second


# ---------------------------------------------------------------------------
# Default translator
# ---------------------------------------------------------------------------


class TestDefaultTranslator:
    """Test set_default_translator() / get_default_translator()."""

    def test_set_by_instance(self, registry: TranslatorRegistry) -> None:
        """An instance can be made the default directly."""
        tr = Translator()
        assert registry.set_default_translator(tr) is True
        assert registry.get_default_translator() is tr

    def test_set_by_name(self, registry: TranslatorRegistry) -> None:
        """A registered name can be made the default."""
        tr = Translator()
        registry.register("foo", tr)
        assert registry.set_default_translator("foo") is True
        assert registry.get_default_translator() is tr

    def test_rejects_unknown_name(self, registry: TranslatorRegistry) -> None:
        """An unknown name returns False and no default is set."""
        assert registry.set_default_translator("nope") is False
        assert registry.get_default_translator() is None

    def test_rejects_non_translator(self, registry: TranslatorRegistry) -> None:
        """A non-translator returns False and keeps the previous default."""
        tr = Translator()
        registry.set_default_translator(tr)
        assert registry.set_default_translator({"foo": "bar"}) is False  # type: ignore[arg-type]
        assert registry.get_default_translator() is tr

    def test_unregister_keeps_default(self, registry: TranslatorRegistry) -> None:
        """Unregistering the default's name does not clear the default."""
        tr = Translator()
        registry.register("foo", tr)
        registry.set_default_translator("foo")
        registry.unregister("foo")
        assert registry.get_default_translator() is tr

    def test_default_is_weak(self, registry: TranslatorRegistry) -> None:
        """The default is dropped once the translator is garbage-collected."""
        tr = Translator()
        registry.set_default_translator(tr)
        del tr
        gc.collect()
        assert registry.get_default_translator() is None


# ---------------------------------------------------------------------------
# Language broadcast
# ---------------------------------------------------------------------------


class TestSetLanguage:
    """Test the registry-wide set_language() broadcast."""

    def test_broadcast(self, registry: TranslatorRegistry) -> None:
        """Every registered translator receives the language."""
        a, b = Translator("fi"), Translator()
        registry.register("a", a)
        registry.register("b", b)
        registry.set_language("de")
        assert a.get_language() == "de"
        assert b.get_language() == "de"
        assert registry.get_language() == "de"

    def test_unregistered_default_not_touched(self, registry: TranslatorRegistry) -> None:
        """A default that is not registered keeps its own language."""
        tr = Translator("fi")
        registry.set_default_translator(tr)
        registry.set_language("de")
        assert tr.get_language() == "fi"

    def test_disable_everywhere(self, registry: TranslatorRegistry) -> None:
        """Broadcasting None turns translation off."""
        tr = Translator("fi", [{"key": "a", "value": "a fi"}])
        registry.register("foo", tr)
        registry.set_default_translator("foo")
        registry.set_language(None)
        assert registry.translate("a") == "a"


# ---------------------------------------------------------------------------
# translate() delegation
# ---------------------------------------------------------------------------


class TestRegistryTranslate:
    """Test translate() / _() delegation to the default translator."""

    def test_simple_string(self, registry: TranslatorRegistry) -> None:
        """Both translate() and _() go through the default translator."""
        tr = Translator(language="fi", records=[{"key": "a", "lang": "fi", "value": "a fi"}])
        registry.register("foo", tr)
        registry.set_default_translator("foo")
        assert registry._("a") == "a fi"
        assert registry.translate("a") == "a fi"

    def test_forwards_params_and_section(self, registry: TranslatorRegistry, translator: Translator) -> None:
        """Params and section are passed through unchanged."""
        registry.set_default_translator(translator)
        assert registry.translate("foo {0} bar {1} baz {2}", ["X", "Y", "Z"], "test") == "xxx X yyy Y zzz Z"

    def test_no_default_returns_key(self, registry: TranslatorRegistry) -> None:
        """Without a default the key comes back as a string, unformatted."""
        assert registry.translate("plain {0}", ["x"]) == "plain {0}"
        assert registry.translate(7) == "7"

    def test_t_wrapper(self, registry: TranslatorRegistry, translator: Translator) -> None:
        """t() translates through the injected registry."""
        registry.set_default_translator(translator)
        assert t("b", "test", registry=registry) == "b test fi"
        assert t("missing", registry=TranslatorRegistry()) == "missing"
