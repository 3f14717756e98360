"""
Pytest configuration and shared fixtures for Kapan testing.
"""

from datetime import datetime
from pathlib import Path
from unittest.mock import Mock
import logging

import pytest
import yaml

from kapan.core.config_manager import ResolverConfig
from kapan.core.logging_manager import LoggingManager
from kapan.interpreter import TemporalInterpreter
from kapan.processors.core.intent_extractor import IntentExtractor
from kapan.processors.core.temporal_resolver import TemporalResolver
from tests.fixtures.sample_data import REFERENCE_INSTANT


@pytest.fixture
def reference_instant() -> datetime:
    """2025-10-19 10:00, read as Jakarta civil time"""
    return REFERENCE_INSTANT


@pytest.fixture
def extractor():
    """Indonesian-locale intent extractor"""
    return IntentExtractor()


@pytest.fixture
def resolver():
    """Resolver for Asia/Jakarta with Indonesian prompts"""
    return TemporalResolver()


@pytest.fixture
def interpreter():
    """Interpreter with default settings"""
    return TemporalInterpreter()


@pytest.fixture
def english_interpreter():
    """Interpreter with English prompts"""
    return TemporalInterpreter(ResolverConfig(locale="en"))


@pytest.fixture
def mock_logger():
    """Logger double for checking diagnostic output"""
    return Mock(spec=logging.Logger)


@pytest.fixture
def temp_config_dir(tmp_path) -> Path:
    """Temporary directory holding a test default_config.yaml"""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    default_config = {
        "app_name": "Kapan-Test",
        "environment": "testing",
        "resolver": {
            "timezone": "Asia/Jakarta",
            "locale": "id",
            "fallback_hour": 9
        },
        "logging": {
            "level": "DEBUG",
            "log_to_console": False,
            "log_to_file": False
        }
    }

    with open(config_dir / "default_config.yaml", "w") as f:
        yaml.dump(default_config, f)

    return config_dir


@pytest.fixture
def clean_env(monkeypatch):
    """Drop any KAPAN_* variables inherited from the host"""
    import os
    for key in list(os.environ):
        if key.startswith("KAPAN_"):
            monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def logging_manager():
    """Logging manager whose handlers are removed after the test"""
    manager = LoggingManager()
    yield manager
    manager.shutdown()
