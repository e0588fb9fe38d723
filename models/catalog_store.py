# -*- coding: utf-8 -*-
"""
qcatalog CatalogStore Model

In-memory representation of one locale's translations, grouped by context.
A store is built once and never mutated afterwards; reloading a locale
means building a new store and registering it in place of the old one.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from qcatalog_logger import get_logger

logger = get_logger("models.catalog_store")


@dataclass(frozen=True)
class TranslationEntry:
    """
    A single source string and its localized rendering.

    Attributes:
        source_text (str): Canonical lookup key, never empty.
        translated_text (str): Localized text, empty when untranslated.
    """
    source_text: str
    translated_text: str = ""

    def __post_init__(self):
        if not self.source_text:
            raise ValueError("TranslationEntry.source_text must not be empty")

    @property
    def is_translated(self) -> bool:
        return bool(self.translated_text)


class CatalogStore:
    """
    One locale's full translation set.

    Contexts and the entries inside them keep the order in which they were
    first seen, so a store written back to disk keeps the layout of the
    document it was loaded from.
    """

    __slots__ = ('_locale_id', '_source_locale', '_contexts')

    def __init__(
        self,
        locale_id: str,
        contexts: Dict[str, Dict[str, TranslationEntry]],
        source_locale: Optional[str] = None
    ):
        if not locale_id:
            raise ValueError("CatalogStore.locale_id must not be empty")
        self._locale_id = locale_id
        self._source_locale = source_locale
        self._contexts: Mapping[str, Mapping[str, TranslationEntry]] = MappingProxyType({
            name: MappingProxyType(dict(entries)) for name, entries in contexts.items()
        })

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def build(
        cls,
        locale_id: str,
        contexts: Iterable[Tuple[str, Iterable[Tuple[str, str]]]],
        source_locale: Optional[str] = None
    ) -> 'CatalogStore':
        """
        Build a store from (context name, [(source, translation), ...]) pairs.

        A context name may appear more than once; its messages are merged.
        When the same source string appears twice in one context, the later
        entry wins.

        Args:
            locale_id: Locale this catalog translates into (e.g. 'zh_CN')
            contexts: Context names with their message pairs
            source_locale: Optional locale the source strings are written in

        Returns:
            A new immutable CatalogStore
        """
        grouped: Dict[str, Dict[str, TranslationEntry]] = {}
        for context_name, messages in contexts:
            bucket = grouped.setdefault(context_name, {})
            for source_text, translated_text in messages:
                if source_text in bucket:
                    logger.debug(
                        f"[{locale_id}] duplicate '{source_text}' in context "
                        f"'{context_name}', keeping the later entry"
                    )
                bucket[source_text] = TranslationEntry(source_text, translated_text or "")
        return cls(locale_id, grouped, source_locale)

    @classmethod
    def empty(cls, locale_id: str) -> 'CatalogStore':
        """Store with no entries, e.g. for the language strings are authored in."""
        return cls(locale_id, {}, source_locale=locale_id)

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def locale_id(self) -> str:
        return self._locale_id

    @property
    def source_locale(self) -> Optional[str]:
        return self._source_locale

    def lookup(self, context: str, source_text: str) -> Optional[TranslationEntry]:
        """Return the entry for (context, source_text), or None."""
        entries = self._contexts.get(context)
        if entries is None:
            return None
        return entries.get(source_text)

    def has_context(self, context: str) -> bool:
        return context in self._contexts

    def contexts(self) -> Tuple[str, ...]:
        return tuple(self._contexts.keys())

    def entries(self, context: str) -> Tuple[TranslationEntry, ...]:
        return tuple(self._contexts.get(context, {}).values())

    def iter_entries(self) -> Iterator[Tuple[str, TranslationEntry]]:
        """Yield (context name, entry) for every entry in store order."""
        for context_name, entries in self._contexts.items():
            for entry in entries.values():
                yield context_name, entry

    @property
    def entry_count(self) -> int:
        return sum(len(entries) for entries in self._contexts.values())

    @property
    def translated_count(self) -> int:
        return sum(1 for _, entry in self.iter_entries() if entry.is_translated)

    def __len__(self) -> int:
        return self.entry_count

    def __repr__(self) -> str:
        return (f"CatalogStore(locale_id={self._locale_id!r}, "
                f"contexts={len(self._contexts)}, entries={self.entry_count})")
