# -*- coding: utf-8 -*-
"""
qcatalog Language Manager

QObject bridge between a TranslationEngine and a Qt/QML user interface:
- Exposes the selectable languages and the current selection as Qt properties
- Persists the chosen language in SettingsModel
- Re-emits engine locale changes as Qt signals so views can re-query text
"""

from typing import Dict, List, Optional, Tuple

import qcatalog_config as config
from qcatalog_exceptions import UnknownLocaleError
from qcatalog_logger import get_logger
from qcatalog_engine import TranslationEngine
from models.catalog_store import CatalogStore
from models.settings_model import SettingsModel
from core.notifier import LocaleChangedEvent
from gui.qt import QObject, Signal, Slot, Property

logger = get_logger("gui.language_manager")


class LanguageManager(QObject):
    """
    Language picker model for the settings page.

    The source language is always selectable: it is registered with an
    empty catalog, so every lookup returns the source string.

    Signals:
        currentIndexChanged: Selection moved to another language
        languageChanged(str): Active locale id after any engine locale change
    """

    currentIndexChanged = Signal()
    languageChanged = Signal(str)

    def __init__(
        self,
        engine: TranslationEngine,
        settings: Optional[SettingsModel] = None,
        languages: Optional[Dict[str, str]] = None,
        parent: Optional[QObject] = None
    ):
        """
        Args:
            engine: Engine whose active locale this manager drives
            settings: Injected settings model (DI)
            languages: locale id -> display name, defaults to config.SUPPORTED_LANGUAGES
            parent: Qt parent object
        """
        super().__init__(parent)
        self._engine = engine
        self._settings = settings or SettingsModel.instance()
        self._langs: List[Tuple[str, str]] = list((languages or config.SUPPORTED_LANGUAGES).items())

        if not engine.registry.has_locale(config.SOURCE_LANGUAGE):
            engine.add_catalog(CatalogStore.empty(config.SOURCE_LANGUAGE))

        self._current_index = self._index_of(self._settings.language)
        if self._current_index < 0:
            self._current_index = 0
        self._token = engine.on_locale_changed(self._on_locale_changed)

    def _index_of(self, locale_id: str) -> int:
        for i, (locale, _) in enumerate(self._langs):
            if locale == locale_id:
                return i
        return -1

    # =========================================================================
    # STARTUP
    # =========================================================================

    def load_initial_translation(self) -> bool:
        """
        Activate the persisted language before the UI is shown.

        Returns:
            False if that language has no catalog; the source language is
            activated instead
        """
        locale = self._settings.language
        try:
            self._engine.set_active_locale(locale)
            return True
        except UnknownLocaleError:
            logger.warning(f"No catalog for saved language '{locale}', using {config.SOURCE_LANGUAGE}")
            self._engine.set_active_locale(config.SOURCE_LANGUAGE)
            return False

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    def available_languages(self) -> List[str]:
        return [name for _, name in self._langs]

    def available_locales(self) -> List[str]:
        return [locale for locale, _ in self._langs]

    def current_index(self) -> int:
        return self._current_index

    def current_language(self) -> str:
        if 0 <= self._current_index < len(self._langs):
            return self._langs[self._current_index][1]
        # Active locale is not one of the picker languages
        return self._engine.active_locale or ""

    def current_locale(self) -> str:
        if 0 <= self._current_index < len(self._langs):
            return self._langs[self._current_index][0]
        return self._engine.active_locale or ""

    @Slot(int)
    def set_current_index(self, index: int):
        """Switch language by picker index; out-of-range and unchanged indices are ignored."""
        if index < 0 or index >= len(self._langs) or index == self._current_index:
            return

        locale = self._langs[index][0]
        if not self._engine.registry.has_locale(locale):
            logger.warning(f"Language '{locale}' selected but no catalog is loaded")
            return

        self._settings.language = locale
        self._settings.save()
        # The engine notification updates the index and emits the Qt signals
        self._engine.set_active_locale(locale)

    availableLanguages = Property(list, available_languages, constant=True)
    currentIndex = Property(int, current_index, set_current_index, notify=currentIndexChanged)
    currentLanguage = Property(str, current_language, notify=currentIndexChanged)

    # =========================================================================
    # TRANSLATION
    # =========================================================================

    @Slot(str, str, result=str)
    def translate(self, context: str, source_text: str) -> str:
        return self._engine.translate(context, source_text)

    def _on_locale_changed(self, event: LocaleChangedEvent):
        # -1 when the engine switched to a locale the picker does not list
        index = self._index_of(event.current)
        if index != self._current_index:
            self._current_index = index
            self.currentIndexChanged.emit()
        self.languageChanged.emit(event.current)

    def dispose(self):
        """Stop listening to the engine."""
        if self._token is not None:
            self._engine.remove_locale_listener(self._token)
            self._token = None
