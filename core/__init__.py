# -*- coding: utf-8 -*-
"""
qcatalog Core Package

Registry, resolver and change notification for loaded catalogs.
"""

from core.notifier import ChangeNotifier, LocaleChangedEvent
from core.registry import CatalogRegistry, RegistrySnapshot
from core.resolver import LookupResolver
from core.discovery import LoadReport, discover_catalogs, load_directory

__all__ = [
    'ChangeNotifier',
    'LocaleChangedEvent',
    'CatalogRegistry',
    'RegistrySnapshot',
    'LookupResolver',
    'LoadReport',
    'discover_catalogs',
    'load_directory',
]
