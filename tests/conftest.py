# -*- coding: utf-8 -*-
"""
qcatalog Test Fixtures

Shared fixtures for all tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Qt tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

DATA_DIR = Path(__file__).parent / "data"


# =============================================================================
# CATALOG DOCUMENTS
# =============================================================================

ZH_CN_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.1" language="zh_CN" sourcelanguage="en_US">
    <context>
        <name>Home</name>
        <message>
            <source>ZQTPlayer</source>
            <translation>ZQTPlayer</translation>
        </message>
        <message>
            <source>Settings</source>
            <translation>设置</translation>
        </message>
    </context>
    <context>
        <name>Settings</name>
        <message>
            <source>Theme</source>
            <translation>主题</translation>
        </message>
        <message>
            <source>Restart to apply</source>
            <translation>重启生效</translation>
        </message>
        <message>
            <source>Language</source>
            <translation type="unfinished"></translation>
        </message>
    </context>
</TS>
"""

EN_TS = """<?xml version="1.0" encoding="utf-8"?>
<TS version="2.1" language="en">
    <context>
        <name>Settings</name>
        <message>
            <source>Theme</source>
            <translation>Theme</translation>
        </message>
        <message>
            <source>Language</source>
            <translation>Language</translation>
        </message>
    </context>
</TS>
"""

FR_TS = """<?xml version="1.0" encoding="utf-8"?>
<TS version="2.1" language="fr">
    <context>
        <name>Settings</name>
        <message>
            <source>Style</source>
            <translation>Style</translation>
        </message>
    </context>
</TS>
"""


@pytest.fixture
def zh_cn_ts() -> str:
    return ZH_CN_TS


@pytest.fixture
def en_ts() -> str:
    return EN_TS


@pytest.fixture
def fr_ts() -> str:
    return FR_TS


@pytest.fixture
def sample_catalog_path() -> Path:
    """The full zh_CN catalog shipped with the media player."""
    return DATA_DIR / "app_zh_CN.ts"


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def notifier():
    from core.notifier import ChangeNotifier
    return ChangeNotifier()


@pytest.fixture
def registry(notifier):
    from core.registry import CatalogRegistry
    return CatalogRegistry(notifier)


@pytest.fixture
def engine():
    """Fresh, empty TranslationEngine."""
    from qcatalog_engine import TranslationEngine
    return TranslationEngine()


@pytest.fixture
def loaded_engine(engine, zh_cn_ts, en_ts, fr_ts):
    """Engine with zh_CN, en and fr loaded; nothing active yet."""
    for document in (zh_cn_ts, en_ts, fr_ts):
        engine.load_catalog(document)
    return engine


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def settings_path(tmp_path) -> Path:
    return tmp_path / "settings" / "settings.json"


@pytest.fixture
def settings_model(settings_path):
    """SettingsModel backed by a temporary file."""
    from models.settings_model import SettingsModel
    SettingsModel.reset_instance()
    return SettingsModel(settings_path)
