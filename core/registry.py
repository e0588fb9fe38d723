# -*- coding: utf-8 -*-
"""
Catalog Registry

Owns the loaded catalogs and the active/fallback locale selection.

All state lives in one immutable RegistrySnapshot. Writers build a new
snapshot and swap the reference under a lock; readers grab the current
reference and never lock, so a lookup always sees one consistent state.
"""

import threading
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from qcatalog_exceptions import RegistryError, UnknownLocaleError
from qcatalog_logger import get_logger
from models.catalog_store import CatalogStore
from core.notifier import ChangeNotifier, LocaleChangedEvent

logger = get_logger("core.registry")


@dataclass(frozen=True)
class RegistrySnapshot:
    """Point-in-time view of the registry."""
    stores: Mapping[str, CatalogStore] = field(default_factory=lambda: MappingProxyType({}))
    active_locale: Optional[str] = None
    fallback_locale: Optional[str] = None

    @property
    def active_store(self) -> Optional[CatalogStore]:
        if self.active_locale is None:
            return None
        return self.stores.get(self.active_locale)

    @property
    def fallback_store(self) -> Optional[CatalogStore]:
        if self.fallback_locale is None:
            return None
        return self.stores.get(self.fallback_locale)


class CatalogRegistry:
    """
    Holds CatalogStores keyed by locale id.

    Create one per application and pass it to whatever needs translation;
    tests build as many independent registries as they like.
    """

    def __init__(self, notifier: Optional[ChangeNotifier] = None):
        self._notifier = notifier if notifier is not None else ChangeNotifier()
        self._snapshot = RegistrySnapshot()
        # Re-entrant so a subscriber may switch locale again from its callback
        self._write_lock = threading.RLock()

    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    def snapshot(self) -> RegistrySnapshot:
        """Current state; safe to hold while the registry keeps changing."""
        return self._snapshot

    # =========================================================================
    # WRITES
    # =========================================================================

    def _with_stores(self, current: RegistrySnapshot, stores: dict) -> RegistrySnapshot:
        return replace(current, stores=MappingProxyType(stores))

    def register(self, store: CatalogStore) -> None:
        """Add the store for store.locale_id, replacing any earlier one."""
        with self._write_lock:
            current = self._snapshot
            stores = dict(current.stores)
            replaced = store.locale_id in stores
            stores[store.locale_id] = store
            self._snapshot = self._with_stores(current, stores)

        action = "Replaced" if replaced else "Registered"
        logger.info(f"{action} catalog '{store.locale_id}' ({store.entry_count} entries)")

    def unregister(self, locale_id: str) -> bool:
        """
        Drop a locale's store.

        Returns:
            True if a store was removed

        Raises:
            RegistryError: The locale is currently active or the fallback
        """
        with self._write_lock:
            current = self._snapshot
            if locale_id not in current.stores:
                return False
            if locale_id in (current.active_locale, current.fallback_locale):
                raise RegistryError(f"Cannot unregister locale '{locale_id}' while it is in use",
                                    details={'locale_id': locale_id})
            stores = dict(current.stores)
            del stores[locale_id]
            self._snapshot = self._with_stores(current, stores)

        logger.info(f"Unregistered catalog '{locale_id}'")
        return True

    def set_active(self, locale_id: str) -> None:
        """
        Make `locale_id` the active locale and notify subscribers.

        Subscribers have all been called by the time this returns.

        Raises:
            UnknownLocaleError: No store registered for locale_id; state unchanged
        """
        with self._write_lock:
            current = self._snapshot
            if locale_id not in current.stores:
                logger.warning(f"Cannot activate unknown locale '{locale_id}'")
                raise UnknownLocaleError(locale_id)
            self._snapshot = replace(current, active_locale=locale_id)
            logger.info(f"Active locale: {current.active_locale} -> {locale_id}")
            self._notifier.notify(LocaleChangedEvent(previous=current.active_locale, current=locale_id))

    def set_fallback(self, locale_id: Optional[str]) -> None:
        """
        Set the locale consulted when the active one has no translation.

        Args:
            locale_id: Registered locale id, or None to disable the fallback

        Raises:
            UnknownLocaleError: No store registered for locale_id; state unchanged
        """
        with self._write_lock:
            current = self._snapshot
            if locale_id is not None and locale_id not in current.stores:
                logger.warning(f"Cannot use unknown locale '{locale_id}' as fallback")
                raise UnknownLocaleError(locale_id)
            self._snapshot = replace(current, fallback_locale=locale_id)

        logger.info(f"Fallback locale: {locale_id}")

    # =========================================================================
    # READS
    # =========================================================================

    def get_active(self) -> Optional[str]:
        return self._snapshot.active_locale

    def get_fallback(self) -> Optional[str]:
        return self._snapshot.fallback_locale

    def get_store(self, locale_id: str) -> Optional[CatalogStore]:
        return self._snapshot.stores.get(locale_id)

    def has_locale(self, locale_id: str) -> bool:
        return locale_id in self._snapshot.stores

    def locales(self) -> Tuple[str, ...]:
        return tuple(self._snapshot.stores.keys())

    def __repr__(self) -> str:
        snap = self._snapshot
        return (f"CatalogRegistry(locales={list(snap.stores)}, "
                f"active={snap.active_locale!r}, fallback={snap.fallback_locale!r})")
