# -*- coding: utf-8 -*-
"""
qcatalog Translation Engine

Runtime surface for the host application: load catalogs, pick the
active and fallback locales, translate strings and listen for locale
changes.

Usage:
    engine = TranslationEngine()
    engine.load_catalog(Path("i18n/app_zh_CN.ts").read_bytes())
    engine.set_active_locale("zh_CN")
    engine.translate("Settings", "Theme")   # -> "主题"
"""

from typing import Optional, Tuple

from qcatalog_logger import get_logger
from models.catalog_store import CatalogStore
from parser.ts_loader import CatalogResource, load_catalog
from core.notifier import ChangeNotifier, LocaleCallback
from core.registry import CatalogRegistry
from core.resolver import LookupResolver

logger = get_logger("engine")


class TranslationEngine:
    """
    Facade over the registry, resolver and notifier.

    An engine is an ordinary object: construct it once at startup and hand
    it to the components that display text.
    """

    def __init__(
        self,
        registry: Optional[CatalogRegistry] = None,
        notifier: Optional[ChangeNotifier] = None
    ):
        """
        Args:
            registry: Injected registry; built around `notifier` if omitted
            notifier: Injected notifier, used only when registry is omitted
        """
        self._registry = registry if registry is not None else CatalogRegistry(notifier)
        self._resolver = LookupResolver(self._registry)

    @property
    def registry(self) -> CatalogRegistry:
        return self._registry

    @property
    def resolver(self) -> LookupResolver:
        return self._resolver

    # =========================================================================
    # CATALOGS
    # =========================================================================

    def load_catalog(self, resource: CatalogResource, *, include_unfinished: bool = True) -> CatalogStore:
        """
        Parse a catalog and register it under its declared locale.

        A locale that is already loaded is replaced as a whole.

        Raises:
            LoadError: The catalog is malformed; nothing is registered
        """
        store = load_catalog(resource, include_unfinished=include_unfinished)
        self._registry.register(store)
        return store

    def add_catalog(self, store: CatalogStore) -> None:
        """Register an already built store."""
        self._registry.register(store)

    def available_locales(self) -> Tuple[str, ...]:
        return self._registry.locales()

    # =========================================================================
    # LOCALE SELECTION
    # =========================================================================

    @property
    def active_locale(self) -> Optional[str]:
        return self._registry.get_active()

    @property
    def fallback_locale(self) -> Optional[str]:
        return self._registry.get_fallback()

    def set_active_locale(self, locale_id: str) -> None:
        """Raises UnknownLocaleError if no catalog is loaded for locale_id."""
        self._registry.set_active(locale_id)

    def set_fallback_locale(self, locale_id: Optional[str]) -> None:
        """Raises UnknownLocaleError if no catalog is loaded for locale_id."""
        self._registry.set_fallback(locale_id)

    # =========================================================================
    # LOOKUP & NOTIFICATION
    # =========================================================================

    def translate(self, context: str, source_text: str) -> str:
        return self._resolver.resolve(context, source_text)

    def on_locale_changed(self, callback: LocaleCallback) -> int:
        """Subscribe to locale changes; returns a token for remove_locale_listener()."""
        return self._registry.notifier.subscribe(callback)

    def remove_locale_listener(self, token: int) -> bool:
        return self._registry.notifier.unsubscribe(token)

    def __repr__(self) -> str:
        return f"TranslationEngine({self._registry!r})"
