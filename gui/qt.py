# -*- coding: utf-8 -*-
"""
Central Qt Import Module for qcatalog

Single source for all Qt imports used by the GUI bridge. The project
uses PySide6 exclusively.

Usage:
    from gui.qt import QObject, Signal, Slot, Property
"""

# =============================================================================
# PySide6 Core
# =============================================================================
from PySide6.QtCore import (
    QCoreApplication,
    QObject,
    Signal,
    Slot,
    Property,
)


def get_qt_binding():
    """Return the name of the Qt binding in use."""
    return "PySide6"


__all__ = [
    'QCoreApplication', 'QObject', 'Signal', 'Slot', 'Property',
    'get_qt_binding',
]
