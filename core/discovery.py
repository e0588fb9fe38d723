# -*- coding: utf-8 -*-
"""
Catalog discovery for bundled resources.

Finds app_<locale>.ts files in a directory and loads them into an
engine. One broken file does not stop the others from loading, but
every failure is reported back to the caller.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

import qcatalog_config as config
from qcatalog_exceptions import LoadError
from qcatalog_logger import get_logger
from parser.ts_loader import load_catalog_file

logger = get_logger("core.discovery")


@dataclass
class LoadReport:
    """Outcome of loading a catalog directory."""
    loaded: List[str] = field(default_factory=list)          # locale ids
    failed: Dict[Path, LoadError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def discover_catalogs(
    directory: Union[str, Path],
    prefix: str = config.CATALOG_PREFIX,
    suffix: str = config.CATALOG_SUFFIX
) -> Iterator[Tuple[str, Path]]:
    """
    Yield (locale hint, path) for every <prefix><locale><suffix> file, sorted by name.

    The hint comes from the file name; the locale a catalog actually
    registers under is the one declared inside the document.
    """
    root = Path(directory)
    if not root.is_dir():
        logger.warning(f"Catalog directory does not exist: {root}")
        return

    for path in sorted(root.glob(f"{prefix}*{suffix}")):
        locale_hint = path.name[len(prefix):len(path.name) - len(suffix)]
        if locale_hint:
            yield locale_hint, path


def load_directory(engine, directory: Union[str, Path], prefix: str = config.CATALOG_PREFIX) -> LoadReport:
    """
    Load every catalog found in `directory` into `engine`.

    Args:
        engine: TranslationEngine to register the catalogs with
        directory: Folder holding app_<locale>.ts files
        prefix: File name prefix

    Returns:
        LoadReport listing loaded locales and per-file errors
    """
    report = LoadReport()
    for locale_hint, path in discover_catalogs(directory, prefix):
        try:
            store = load_catalog_file(path)
        except LoadError as e:
            logger.error(f"Failed to load catalog {path.name}: {e}")
            report.failed[path] = e
            continue

        if store.locale_id != locale_hint:
            logger.warning(f"{path.name} declares locale '{store.locale_id}', expected '{locale_hint}'")
        engine.add_catalog(store)
        report.loaded.append(store.locale_id)

    logger.info(f"Catalog directory {directory}: {len(report.loaded)} loaded, {len(report.failed)} failed")
    return report
