# -*- coding: utf-8 -*-
"""
Lookup Resolver

Turns (context, source text) into display text:

    1. active locale's non-empty translation
    2. fallback locale's non-empty translation
    3. the source text itself

Resolution never raises; a missing translation degrades to the source
string.
"""

from typing import Iterable, List, Optional, Tuple

from qcatalog_enums import Resolution
from qcatalog_logger import get_logger
from models.catalog_store import CatalogStore
from core.registry import CatalogRegistry

logger = get_logger("core.resolver")


def _translated(store: Optional[CatalogStore], context: str, source_text: str) -> Optional[str]:
    if store is None:
        return None
    entry = store.lookup(context, source_text)
    if entry is None or not entry.is_translated:
        return None
    return entry.translated_text


class LookupResolver:
    """Answers translation queries against a CatalogRegistry."""

    def __init__(self, registry: CatalogRegistry):
        self._registry = registry

    def resolve_entry(self, context: str, source_text: str) -> Tuple[str, Resolution]:
        """
        Resolve a string and report which tier answered.

        Args:
            context: Context name (e.g. 'Settings')
            source_text: Source string used as the key

        Returns:
            Tuple of (display text, Resolution)
        """
        # One snapshot per call: a concurrent swap cannot mix two states
        snapshot = self._registry.snapshot()

        text = _translated(snapshot.active_store, context, source_text)
        if text is not None:
            return text, Resolution.ACTIVE

        text = _translated(snapshot.fallback_store, context, source_text)
        if text is not None:
            return text, Resolution.FALLBACK

        return source_text, Resolution.SOURCE

    def resolve(self, context: str, source_text: str) -> str:
        """Return the best available display text for (context, source_text)."""
        text, _ = self.resolve_entry(context, source_text)
        return text

    def missing(self, context: str, sources: Iterable[str]) -> List[str]:
        """Sources in `context` that fall through to the raw source string."""
        missing = [source for source in sources
                   if self.resolve_entry(context, source)[1] is Resolution.SOURCE]
        if missing:
            logger.debug(f"{len(missing)} untranslated strings in context '{context}'")
        return missing
