"""Shared fixtures for fluent-pytest tests."""

from __future__ import annotations

import locale
from typing import Iterator

import pytest

from fluent_pytest.engine.runner import set_check_logger
from fluent_pytest.logging.check_logger import CheckLogger

# Locales with a decimal comma, used to prove rendering ignores the locale.
FOREIGN_LOCALES = ["fr_FR.UTF-8", "fr_FR.utf8", "de_DE.UTF-8", "de_DE.utf8"]


@pytest.fixture
def recorded_checks() -> Iterator[CheckLogger]:
    """Record checks in a fresh logger, restoring the previous one afterwards."""
    check_log = CheckLogger(name="unit")
    previous = set_check_logger(check_log)
    yield check_log
    set_check_logger(previous)
    check_log.close()


@pytest.fixture
def foreign_locale() -> Iterator[str]:
    """
    Switch the ambient locale to a decimal-comma locale.

    The locale is process-global, so it is always restored on teardown.
    """
    saved = locale.setlocale(locale.LC_ALL)
    selected = None

    for name in FOREIGN_LOCALES:
        try:
            locale.setlocale(locale.LC_ALL, name)
        except locale.Error:
            continue
        selected = name
        break

    if selected is None:
        pytest.skip("No decimal-comma locale installed")

    try:
        yield selected
    finally:
        locale.setlocale(locale.LC_ALL, saved)
