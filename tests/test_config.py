"""
Obscura: settings tests
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from obscura.config import Settings, load_settings


def test_defaults():
    assert load_settings({}) == Settings(key="", hex_output=True, log_level="WARNING")


def test_from_environment():
    settings = load_settings({
        "OBSCURA_KEY": "secret",
        "OBSCURA_HEX_OUTPUT": "0",
        "OBSCURA_LOG_LEVEL": "debug",
    })
    assert settings.key == "secret"
    assert settings.hex_output is False
    assert settings.log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValueError):
        load_settings({"OBSCURA_LOG_LEVEL": "LOUD"})
