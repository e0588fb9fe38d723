# -*- coding: utf-8 -*-
"""
Unit Tests for the Catalog Registry
"""

import threading

import pytest

from core.registry import CatalogRegistry
from models.catalog_store import CatalogStore
from qcatalog_exceptions import RegistryError, UnknownLocaleError


def _store(locale_id: str, theme: str = "Theme") -> CatalogStore:
    return CatalogStore.build(locale_id, [("Settings", [("Theme", theme)])])


class TestRegistration:
    """Tests for register / unregister."""

    def test_initial_state(self, registry):
        assert registry.get_active() is None
        assert registry.get_fallback() is None
        assert registry.locales() == ()

    def test_register_and_get(self, registry):
        store = _store("zh_CN", "主题")
        registry.register(store)

        assert registry.has_locale("zh_CN")
        assert registry.get_store("zh_CN") is store
        assert registry.get_store("fr") is None

    def test_register_replaces_whole_store(self, registry):
        registry.register(_store("zh_CN", "old"))
        registry.set_active("zh_CN")
        old_snapshot = registry.snapshot()

        registry.register(_store("zh_CN", "new"))

        assert registry.get_store("zh_CN").lookup("Settings", "Theme").translated_text == "new"
        assert registry.get_active() == "zh_CN"
        # A snapshot taken earlier still sees the old store in full
        assert old_snapshot.active_store.lookup("Settings", "Theme").translated_text == "old"

    def test_unregister(self, registry):
        registry.register(_store("fr"))

        assert registry.unregister("fr")
        assert not registry.unregister("fr")
        assert not registry.has_locale("fr")

    def test_unregister_in_use_refused(self, registry):
        registry.register(_store("zh_CN"))
        registry.register(_store("en"))
        registry.set_active("zh_CN")
        registry.set_fallback("en")

        with pytest.raises(RegistryError):
            registry.unregister("zh_CN")
        with pytest.raises(RegistryError):
            registry.unregister("en")


class TestLocaleSelection:
    """Tests for set_active / set_fallback."""

    def test_set_active(self, registry):
        registry.register(_store("zh_CN"))
        registry.set_active("zh_CN")

        assert registry.get_active() == "zh_CN"

    def test_set_active_unknown_keeps_previous(self, registry):
        registry.register(_store("zh_CN"))
        registry.set_active("zh_CN")

        with pytest.raises(UnknownLocaleError) as exc_info:
            registry.set_active("de")

        assert exc_info.value.locale_id == "de"
        assert registry.get_active() == "zh_CN"

    def test_set_active_notifies_before_returning(self, registry):
        registry.register(_store("zh_CN"))
        seen = []
        registry.notifier.subscribe(lambda e: seen.append((e.previous, e.current, registry.get_active())))

        registry.set_active("zh_CN")

        assert seen == [(None, "zh_CN", "zh_CN")]

    def test_reactivating_same_locale_notifies_again(self, registry):
        registry.register(_store("zh_CN"))
        events = []
        registry.notifier.subscribe(events.append)

        registry.set_active("zh_CN")
        registry.set_active("zh_CN")

        assert len(events) == 2
        assert events[1].previous == "zh_CN"

    def test_failed_set_active_does_not_notify(self, registry):
        events = []
        registry.notifier.subscribe(events.append)

        with pytest.raises(UnknownLocaleError):
            registry.set_active("zh_CN")

        assert events == []

    def test_set_fallback(self, registry):
        registry.register(_store("en"))

        registry.set_fallback("en")
        assert registry.get_fallback() == "en"

        registry.set_fallback(None)
        assert registry.get_fallback() is None

    def test_set_fallback_does_not_notify(self, registry):
        registry.register(_store("en"))
        events = []
        registry.notifier.subscribe(events.append)

        registry.set_fallback("en")
        registry.set_fallback(None)

        assert events == []

    def test_set_fallback_unknown(self, registry):
        registry.register(_store("en"))
        registry.set_fallback("en")

        with pytest.raises(UnknownLocaleError):
            registry.set_fallback("de")
        assert registry.get_fallback() == "en"

    def test_subscriber_may_switch_locale(self, registry):
        """Re-entrant set_active from a callback does not deadlock."""
        registry.register(_store("zh_CN"))
        registry.register(_store("en"))
        events = []

        def redirect(event):
            events.append(event.current)
            if event.current == "zh_CN":
                registry.set_active("en")

        registry.notifier.subscribe(redirect)
        registry.set_active("zh_CN")

        assert events == ["zh_CN", "en"]
        assert registry.get_active() == "en"

    def test_independent_registries(self):
        first = CatalogRegistry()
        second = CatalogRegistry()
        first.register(_store("zh_CN"))
        first.set_active("zh_CN")

        assert second.get_active() is None
        assert not second.has_locale("zh_CN")


class TestConcurrency:
    """Readers never observe a half-replaced store."""

    def test_concurrent_reload_and_read(self, registry):
        a = CatalogStore.build("zh_CN", [("Settings", [("Theme", "A"), ("Dark", "A")])])
        b = CatalogStore.build("zh_CN", [("Settings", [("Theme", "B"), ("Dark", "B")])])
        registry.register(a)
        registry.set_active("zh_CN")
        mixed = []
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                store = registry.snapshot().active_store
                values = {e.translated_text for e in store.entries("Settings")}
                if len(values) != 1:
                    mixed.append(values)

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for i in range(500):
            registry.register(b if i % 2 else a)
        stop.set()
        for t in threads:
            t.join()

        assert mixed == []
