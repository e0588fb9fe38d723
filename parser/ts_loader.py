# -*- coding: utf-8 -*-
"""
Catalog Loader

Parses Qt Linguist .ts documents into immutable CatalogStore objects.

Document shape:
    <TS version="2.1" language="zh_CN" sourcelanguage="en_US">
        <context>
            <name>Settings</name>
            <message>
                <source>Theme</source>
                <translation>主题</translation>
            </message>
        </context>
    </TS>

The whole document is validated before a store is built, so a failing
load never yields a partial catalog.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import IO, List, Tuple, Union

import qcatalog_config as config
from qcatalog_exceptions import CatalogFileError, MalformedCatalogError, MissingLocaleIdError
from qcatalog_logger import get_logger
from models.catalog_store import CatalogStore

logger = get_logger("parser.ts_loader")

CatalogResource = Union[bytes, bytearray, str, IO[bytes], IO[str]]
MessagePairs = List[Tuple[str, str]]


def _read_resource(resource: CatalogResource) -> Union[bytes, str]:
    if isinstance(resource, (bytes, bytearray)):
        return bytes(resource)
    if isinstance(resource, str):
        return resource
    if hasattr(resource, 'read'):
        return resource.read()
    raise TypeError(f"Unsupported catalog resource type: {type(resource).__name__}")


def _parse_document(data: Union[bytes, str]) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        line, column = getattr(e, 'position', (None, None))
        # expat columns are 0-based
        column = column + 1 if column is not None else None
        raise MalformedCatalogError(f"Catalog is not well-formed XML: {e}", line=line, column=column) from e


def _translation_text(message: ET.Element, include_unfinished: bool) -> str:
    translation = message.find('translation')
    if translation is None:
        return ""
    if not include_unfinished and translation.get('type') == config.UNFINISHED_MESSAGE_TYPE:
        return ""
    # Plural forms are not supported; the first form stands in for all of them
    numerus_form = translation.find('numerusform')
    if numerus_form is not None:
        return numerus_form.text or ""
    return translation.text or ""


def _is_dropped(message: ET.Element) -> bool:
    translation = message.find('translation')
    if translation is None:
        return False
    return translation.get('type') in config.DROPPED_MESSAGE_TYPES


def _parse_context(context: ET.Element, index: int, include_unfinished: bool) -> Tuple[str, MessagePairs]:
    name = context.findtext('name') or ""
    if not name:
        raise MalformedCatalogError(f"Context #{index + 1} has no <name>")

    messages: MessagePairs = []
    for message_index, message in enumerate(context.findall('message')):
        source = message.findtext('source')
        if not source:
            raise MalformedCatalogError(
                f"Message #{message_index + 1} in context '{name}' has no <source> text"
            )
        if _is_dropped(message):
            continue
        messages.append((source, _translation_text(message, include_unfinished)))
    return name, messages


def load_catalog(resource: CatalogResource, *, include_unfinished: bool = True) -> CatalogStore:
    """
    Parse a serialized catalog into a CatalogStore.

    Args:
        resource: Document bytes, text, or a readable stream
        include_unfinished: Keep translations marked type="unfinished"

    Returns:
        The loaded store

    Raises:
        MalformedCatalogError: Syntax error or missing required element
        MissingLocaleIdError: The <TS> root declares no language
    """
    root = _parse_document(_read_resource(resource))

    if root.tag != 'TS':
        raise MalformedCatalogError(f"Expected <TS> root element, found <{root.tag}>")

    locale_id = (root.get('language') or "").strip()
    if not locale_id:
        raise MissingLocaleIdError("Catalog does not declare a locale (missing 'language' attribute)")

    contexts = [
        _parse_context(context, index, include_unfinished)
        for index, context in enumerate(root.findall('context'))
    ]

    store = CatalogStore.build(locale_id, contexts, source_locale=root.get('sourcelanguage') or None)
    logger.info(
        f"Loaded catalog '{locale_id}': {len(store.contexts())} contexts, "
        f"{store.translated_count}/{store.entry_count} translated"
    )
    return store


def load_catalog_file(path: Union[str, Path], *, include_unfinished: bool = True) -> CatalogStore:
    """
    Read a .ts file from disk and parse it.

    Raises:
        CatalogFileError: The file cannot be read
        MalformedCatalogError, MissingLocaleIdError: As for load_catalog
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise CatalogFileError(f"Cannot read catalog file: {e}", file_path=str(file_path)) from e

    logger.debug(f"Parsing catalog file: {file_path}")
    return load_catalog(data, include_unfinished=include_unfinished)
