# -*- coding: utf-8 -*-
"""
qcatalog Settings Model

Persisted user preferences that surround the catalog engine:
- Display language (applies live through the engine)
- Color theme (applies live)
- Application style (needs a restart)

Changes are announced to per-key observers.
"""

from typing import Optional, Dict, Any, List, Callable
from pathlib import Path
import json

from qcatalog_enums import ApplyMode
from qcatalog_logger import get_logger
import qcatalog_config as config

logger = get_logger("models.settings")


class SettingsModel:
    """
    JSON-backed application settings.

    Provides:
    - Type-safe property access
    - Change notifications (Observer pattern)
    - Tracking of changes that only apply after a restart
    """

    _instance: Optional['SettingsModel'] = None

    # Setting keys
    KEY_LANGUAGE = "language"
    KEY_THEME = "theme"
    KEY_STYLE = "style"

    APPLY_MODES = {
        KEY_LANGUAGE: ApplyMode.LIVE,
        KEY_THEME: ApplyMode.LIVE,
        KEY_STYLE: ApplyMode.RESTART,
    }

    def __init__(self, settings_path: Optional[Path] = None):
        self._path = Path(settings_path) if settings_path is not None else config.SETTINGS_FILE_PATH
        self._settings: Dict[str, Any] = {}
        self._observers: Dict[str, List[Callable]] = {}
        self._dirty = False
        self._restart_pending = False

        self._load()
        logger.debug(f"SettingsModel initialized from {self._path}")

    # =============================================================================
    # SINGLETON ACCESS
    # =============================================================================

    @classmethod
    def instance(cls) -> 'SettingsModel':
        """Get the shared application instance."""
        if cls._instance is None:
            cls._instance = SettingsModel()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Reset shared instance (for testing)."""
        cls._instance = None

    # =============================================================================
    # PERSISTENCE
    # =============================================================================

    def _get_defaults(self) -> Dict[str, Any]:
        return {
            self.KEY_LANGUAGE: config.DEFAULT_LANGUAGE,
            self.KEY_THEME: config.DEFAULT_THEME,
            self.KEY_STYLE: config.DEFAULT_STYLE,
        }

    def _load(self):
        """Load settings from file."""
        self._settings = self._get_defaults()

        if not self._path.is_file():
            logger.info("Settings file not found, using defaults")
            return

        try:
            with self._path.open('r', encoding='utf-8') as f:
                loaded = json.load(f)
        except json.JSONDecodeError:
            logger.error(f"Settings file corrupted, using defaults: {self._path}")
            return
        except OSError as e:
            logger.error(f"Error loading settings: {e}")
            return

        if isinstance(loaded, dict):
            self._settings.update(loaded)
            self._validate_all()
            logger.debug("Settings loaded successfully")
        else:
            logger.warning("Settings file format invalid, using defaults")

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open('w', encoding='utf-8') as f:
                json.dump(self._settings, f, indent=4, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")
            return False

        self._dirty = False
        logger.info("Settings saved successfully")
        return True

    def _validate_all(self):
        defaults = self._get_defaults()

        # Any locale id string is accepted; the engine decides whether a catalog exists
        language = self._settings.get(self.KEY_LANGUAGE)
        if not isinstance(language, str) or not language:
            self._settings[self.KEY_LANGUAGE] = defaults[self.KEY_LANGUAGE]

        if self._settings.get(self.KEY_THEME) not in config.AVAILABLE_THEMES:
            self._settings[self.KEY_THEME] = defaults[self.KEY_THEME]

        if self._settings.get(self.KEY_STYLE) not in config.AVAILABLE_STYLES:
            self._settings[self.KEY_STYLE] = defaults[self.KEY_STYLE]

    # =============================================================================
    # OBSERVER PATTERN
    # =============================================================================

    def subscribe(self, key: str, callback: Callable[[Any], None]):
        """
        Subscribe to changes on a specific setting.

        Args:
            key: Setting key to watch
            callback: Function called with new value when setting changes
        """
        self._observers.setdefault(key, []).append(callback)

    def unsubscribe(self, key: str, callback: Callable):
        """Unsubscribe from setting changes."""
        if key in self._observers and callback in self._observers[key]:
            self._observers[key].remove(callback)

    def _notify(self, key: str, value: Any):
        for callback in list(self._observers.get(key, [])):
            try:
                callback(value)
            except Exception as e:
                logger.error(f"Error in settings observer for '{key}': {e}")

    # =============================================================================
    # GENERIC ACCESS
    # =============================================================================

    def apply_mode(self, key: str) -> ApplyMode:
        """Whether a change to `key` applies immediately or after a restart."""
        return self.APPLY_MODES.get(key, ApplyMode.LIVE)

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    def set(self, key: str, value: Any, save: bool = False):
        """
        Set a setting value.

        Args:
            key: Setting key
            value: New value
            save: If True, immediately persist to disk
        """
        old_value = self._settings.get(key)
        if old_value == value:
            return

        self._settings[key] = value
        self._dirty = True
        if self.apply_mode(key) is ApplyMode.RESTART:
            self._restart_pending = True
            logger.info(f"Setting '{key}' changed; restart to apply")
        self._notify(key, value)

        if save:
            self.save()

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def restart_pending(self) -> bool:
        """True once a restart-only setting has changed in this session."""
        return self._restart_pending

    # =============================================================================
    # TYPED PROPERTIES
    # =============================================================================

    @property
    def language(self) -> str:
        return self._settings.get(self.KEY_LANGUAGE, config.DEFAULT_LANGUAGE)

    @language.setter
    def language(self, value: str):
        if not value:
            raise ValueError("Language must be a non-empty locale id")
        self.set(self.KEY_LANGUAGE, value)

    @property
    def theme(self) -> str:
        return self._settings.get(self.KEY_THEME, config.DEFAULT_THEME)

    @theme.setter
    def theme(self, value: str):
        if value not in config.AVAILABLE_THEMES:
            raise ValueError(f"Invalid theme: {value}")
        self.set(self.KEY_THEME, value)

    @property
    def style(self) -> str:
        return self._settings.get(self.KEY_STYLE, config.DEFAULT_STYLE)

    @style.setter
    def style(self, value: str):
        if value not in config.AVAILABLE_STYLES:
            raise ValueError(f"Invalid style: {value}")
        self.set(self.KEY_STYLE, value)
