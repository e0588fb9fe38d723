# -*- coding: utf-8 -*-
"""
qcatalog Parser Package

Reads and writes Qt Linguist .ts catalog documents.
"""

from parser.ts_loader import load_catalog, load_catalog_file
from parser.ts_writer import dump_catalog, write_catalog_file

__all__ = [
    'load_catalog',
    'load_catalog_file',
    'dump_catalog',
    'write_catalog_file',
]
