# -*- coding: utf-8 -*-
"""
Unit Tests for CatalogStore and TranslationEntry
"""

import pytest

from models.catalog_store import CatalogStore, TranslationEntry


class TestTranslationEntry:
    """Tests for TranslationEntry dataclass."""

    def test_empty_source_rejected(self):
        with pytest.raises(ValueError):
            TranslationEntry("", "x")

    def test_untranslated_entry(self):
        entry = TranslationEntry("Theme")
        assert entry.translated_text == ""
        assert not entry.is_translated

    def test_identical_translation_counts_as_translated(self):
        """An entry translated to its own source text is not 'missing'."""
        entry = TranslationEntry("ZQTPlayer", "ZQTPlayer")
        assert entry.is_translated

    def test_entry_is_frozen(self):
        entry = TranslationEntry("Theme", "主题")
        with pytest.raises(AttributeError):
            entry.translated_text = "other"


class TestCatalogStore:
    """Tests for CatalogStore construction and queries."""

    def test_build_and_lookup(self):
        store = CatalogStore.build("zh_CN", [
            ("Settings", [("Theme", "主题"), ("Dark", "深色")]),
            ("Home", [("Settings", "设置")]),
        ])

        assert store.locale_id == "zh_CN"
        assert store.lookup("Settings", "Theme").translated_text == "主题"
        assert store.lookup("Home", "Settings").translated_text == "设置"
        assert store.lookup("Home", "Theme") is None
        assert store.lookup("Missing", "Theme") is None

    def test_duplicate_key_last_wins(self):
        store = CatalogStore.build("zh_CN", [
            ("Settings", [("Theme", "first"), ("Dark", "深色"), ("Theme", "last")]),
        ])

        assert store.lookup("Settings", "Theme").translated_text == "last"
        assert store.entry_count == 2
        # Overwriting keeps the position of the first occurrence
        assert [e.source_text for e in store.entries("Settings")] == ["Theme", "Dark"]

    def test_repeated_context_is_merged(self):
        store = CatalogStore.build("zh_CN", [
            ("Settings", [("Theme", "主题")]),
            ("Home", [("Settings", "设置")]),
            ("Settings", [("Dark", "深色"), ("Theme", "主题2")]),
        ])

        assert store.contexts() == ("Settings", "Home")
        assert store.lookup("Settings", "Theme").translated_text == "主题2"
        assert store.lookup("Settings", "Dark").translated_text == "深色"

    def test_counts(self):
        store = CatalogStore.build("zh_CN", [
            ("Settings", [("Theme", "主题"), ("Language", "")]),
        ])

        assert store.entry_count == 2
        assert store.translated_count == 1
        assert len(store) == 2

    def test_same_source_in_different_contexts(self):
        store = CatalogStore.build("zh_CN", [
            ("Home", [("Media Info", "媒体信息")]),
            ("MediaInfoDialog", [("Media Info", "媒体详情")]),
        ])

        assert store.lookup("Home", "Media Info").translated_text == "媒体信息"
        assert store.lookup("MediaInfoDialog", "Media Info").translated_text == "媒体详情"

    def test_store_is_read_only(self):
        store = CatalogStore.build("zh_CN", [("Settings", [("Theme", "主题")])])

        with pytest.raises(TypeError):
            store._contexts["Settings"]["Theme"] = TranslationEntry("Theme", "x")
        with pytest.raises(TypeError):
            store._contexts["Other"] = {}

    def test_build_copies_input(self):
        """Later changes to the caller's data do not leak into the store."""
        messages = [("Theme", "主题")]
        store = CatalogStore.build("zh_CN", [("Settings", messages)])
        messages.append(("Dark", "深色"))

        assert store.lookup("Settings", "Dark") is None

    def test_empty_store(self):
        store = CatalogStore.empty("en_US")

        assert store.locale_id == "en_US"
        assert store.entry_count == 0
        assert store.contexts() == ()
        assert store.lookup("Settings", "Theme") is None

    def test_empty_locale_rejected(self):
        with pytest.raises(ValueError):
            CatalogStore.build("", [])

    def test_iter_entries_in_store_order(self):
        store = CatalogStore.build("zh_CN", [
            ("Home", [("Settings", "设置")]),
            ("Settings", [("Theme", "主题"), ("Dark", "深色")]),
        ])

        pairs = [(ctx, e.source_text) for ctx, e in store.iter_entries()]
        assert pairs == [("Home", "Settings"), ("Settings", "Theme"), ("Settings", "Dark")]
