# -*- coding: utf-8 -*-
"""
Catalog Writer

Serializes a CatalogStore back into a Qt Linguist .ts document, for
export and editing tools. Reloading the output yields the same
context/source/translation content.
"""

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

import qcatalog_config as config
from qcatalog_exceptions import CatalogFileError, ExportError
from qcatalog_logger import get_logger
from models.catalog_store import CatalogStore

logger = get_logger("parser.ts_writer")

XML_HEADER = '<?xml version="1.0" encoding="utf-8"?>\n<!DOCTYPE TS>\n'

# Characters outside the XML 1.0 Char production (C0 controls except tab,
# newline and carriage return; lone surrogates; U+FFFE and U+FFFF)
_XML_ILLEGAL_CHARS = re.compile('[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]')


def _check_text(text: str, what: str, context: str, source_text: str = None):
    match = _XML_ILLEGAL_CHARS.search(text)
    if match:
        raise ExportError(
            f"{what} contains U+{ord(match.group()):04X}, which a .ts document cannot carry",
            context=context, source_text=source_text
        )


def _build_tree(store: CatalogStore) -> ET.Element:
    root = ET.Element('TS', version=config.TS_FORMAT_VERSION, language=store.locale_id)
    if store.source_locale and store.source_locale != store.locale_id:
        root.set('sourcelanguage', store.source_locale)

    for context_name in store.contexts():
        _check_text(context_name, "Context name", context_name)
        context = ET.SubElement(root, 'context')
        ET.SubElement(context, 'name').text = context_name
        for entry in store.entries(context_name):
            _check_text(entry.source_text, "Source text", context_name, entry.source_text)
            _check_text(entry.translated_text, "Translation", context_name, entry.source_text)
            message = ET.SubElement(context, 'message')
            ET.SubElement(message, 'source').text = entry.source_text
            translation = ET.SubElement(message, 'translation')
            if entry.is_translated:
                translation.text = entry.translated_text
            else:
                translation.set('type', config.UNFINISHED_MESSAGE_TYPE)
    return root


def dump_catalog(store: CatalogStore) -> bytes:
    """
    Serialize a store to .ts XML.

    Untranslated entries are written as <translation type="unfinished">.
    Carriage returns are written as &#13; so that XML line-end
    normalization does not turn them into newlines on reload.

    Args:
        store: Catalog to serialize

    Returns:
        UTF-8 encoded document

    Raises:
        ExportError: A context name, source or translation holds a control
            character that XML 1.0 does not allow
    """
    root = _build_tree(store)
    ET.indent(root, space="    ")
    body = ET.tostring(root, encoding='unicode', short_empty_elements=False)
    # Indentation only emits "\n", so every "\r" left in the body is text
    body = body.replace('\r', '&#13;')
    return (XML_HEADER + body + "\n").encode('utf-8')


def write_catalog_file(store: CatalogStore, path: Union[str, Path]) -> Path:
    """Write a store to disk as a .ts file and return the path written."""
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(dump_catalog(store))
    except OSError as e:
        raise CatalogFileError(f"Cannot write catalog file: {e}", file_path=str(file_path)) from e

    logger.info(f"Wrote catalog '{store.locale_id}' ({store.entry_count} entries) to {file_path}")
    return file_path
