"""Tests for environment settings and logging setup."""

import logging

from flowwizard.config import Settings, configure_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv('FLOWWIZARD_LOG_LEVEL', raising=False)
    monkeypatch.delenv('FLOWWIZARD_VERBOSE', raising=False)

    settings = Settings.from_env()

    assert settings.log_level == 'WARNING'
    assert settings.verbose is False
    assert settings.effective_level == 'WARNING'


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv('FLOWWIZARD_LOG_LEVEL', 'info')
    monkeypatch.delenv('FLOWWIZARD_VERBOSE', raising=False)

    assert Settings.from_env().effective_level == 'INFO'


def test_verbose_forces_debug(monkeypatch):
    monkeypatch.setenv('FLOWWIZARD_LOG_LEVEL', 'ERROR')
    monkeypatch.setenv('FLOWWIZARD_VERBOSE', '1')

    assert Settings.from_env().effective_level == 'DEBUG'


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    try:
        configure_logging('DEBUG')
        assert root.level == logging.DEBUG

        configure_logging('nonsense')
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
