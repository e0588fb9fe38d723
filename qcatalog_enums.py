"""
qcatalog Enum Definitions

Type-safe enums for lookup outcomes and settings application modes.
"""

from enum import Enum


class Resolution(str, Enum):
    """Which tier answered a lookup"""
    ACTIVE = 'active'
    FALLBACK = 'fallback'
    SOURCE = 'source'


class ApplyMode(str, Enum):
    """When a settings change takes effect"""
    LIVE = 'live'
    RESTART = 'restart'
