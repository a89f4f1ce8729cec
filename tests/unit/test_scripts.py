"""Tests for the command line scripts."""

import importlib.util
import logging
from pathlib import Path

import pytest

from betterheart.core.config import Settings


SCRIPTS_DIR = Path(__file__).resolve().parents[2] / "scripts"


@pytest.fixture(scope="module")
def run_assessment():
    spec = importlib.util.spec_from_file_location(
        "run_assessment", SCRIPTS_DIR / "run_assessment.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestResolveLogLevel:
    """Tests for the logging level used by run_assessment."""

    def test_configured_level(self, run_assessment):
        settings = Settings(log_level="warning")
        assert run_assessment.resolve_log_level(False, settings) == logging.WARNING

    def test_verbose_overrides_configured_level(self, run_assessment):
        settings = Settings(log_level="ERROR")
        assert run_assessment.resolve_log_level(True, settings) == logging.DEBUG

    def test_default_level(self, run_assessment, monkeypatch):
        monkeypatch.delenv("BETTERHEART_LOG_LEVEL", raising=False)
        assert run_assessment.resolve_log_level(False, Settings()) == logging.INFO

    def test_unknown_level_falls_back_to_info(self, run_assessment):
        settings = Settings(log_level="chatty")
        assert run_assessment.resolve_log_level(False, settings) == logging.INFO
