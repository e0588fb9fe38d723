import os, sys
from pathlib import Path


def resource_path(relative_path):
    """Get absolute path to resource, works for dev and for PyInstaller."""
    try:
        # PyInstaller creates a temp folder and stores path in _MEIPASS
        base_path = sys._MEIPASS
    except AttributeError:
        base_path = os.path.dirname(os.path.abspath(__file__))

    return os.path.join(base_path, relative_path)


VERSION = "0.2.0"

# Strings in the UI are authored in this locale; it needs no catalog.
SOURCE_LANGUAGE = "en_US"
DEFAULT_LANGUAGE = "en_US"

# locale id -> display name shown in the language picker
SUPPORTED_LANGUAGES = {
    "en_US": "English",
    "zh_CN": "简体中文",
}

# Catalog resources are named app_<locale>.ts
CATALOG_PREFIX = "app_"
CATALOG_SUFFIX = ".ts"
CATALOG_DIR = resource_path("i18n")
TS_FORMAT_VERSION = "2.1"

# Message types dropped at load time, the same way lrelease drops them
DROPPED_MESSAGE_TYPES = {"vanished", "obsolete"}
UNFINISHED_MESSAGE_TYPE = "unfinished"

AVAILABLE_STYLES = ["Fusion", "Material"]
DEFAULT_STYLE = "Fusion"
AVAILABLE_THEMES = ["light", "dark", "system"]
DEFAULT_THEME = "system"

SETTINGS_DIR = Path.home() / ".qcatalog"
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

__all__ = [
    "VERSION", "SOURCE_LANGUAGE", "DEFAULT_LANGUAGE", "SUPPORTED_LANGUAGES",
    "CATALOG_PREFIX", "CATALOG_SUFFIX", "CATALOG_DIR", "TS_FORMAT_VERSION",
    "DROPPED_MESSAGE_TYPES", "UNFINISHED_MESSAGE_TYPE",
    "AVAILABLE_STYLES", "DEFAULT_STYLE", "AVAILABLE_THEMES", "DEFAULT_THEME",
    "SETTINGS_DIR", "SETTINGS_FILE_PATH", "resource_path", "Path",
]

# Import logger at the end to avoid circular imports
from qcatalog_logger import get_logger
_logger = get_logger("config")
_logger.debug("qcatalog_config.py loaded")
