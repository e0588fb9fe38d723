# -*- coding: utf-8 -*-
"""
qcatalog Models Package

Data models: the immutable per-locale catalog and persisted user settings.
"""

from models.catalog_store import CatalogStore, TranslationEntry
from models.settings_model import SettingsModel

__all__ = ['CatalogStore', 'TranslationEntry', 'SettingsModel']
