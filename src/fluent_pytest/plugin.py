"""
Pytest plugin for fluent checks.

This module provides fixtures, markers and hooks integrating fluent checks
with pytest.
"""

from __future__ import annotations

import locale
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Generator

import pytest

from fluent_pytest.config.loader import ConfigLoader
from fluent_pytest.config.models import FluentConfig
from fluent_pytest.engine.registry import check_that
from fluent_pytest.engine.runner import set_check_logger
from fluent_pytest.logging.check_logger import CheckLogger

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.config.argparsing import Parser

logger = logging.getLogger(__name__)


# =============================================================================
# Pytest Hooks - Configuration and Options
# =============================================================================


def pytest_addoption(parser: Parser) -> None:
    """Register pytest command-line and ini options."""
    group = parser.getgroup("fluent", "Fluent Check Options")

    group.addoption(
        "--fluent-config",
        dest="fluent_config",
        metavar="PATH",
        help="Path to fluent-pytest YAML configuration file",
    )

    group.addoption(
        "--fluent-log-level",
        dest="fluent_log_level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Check history log level",
    )

    group.addoption(
        "--fluent-log-file",
        dest="fluent_log_file",
        metavar="PATH",
        help="Path to write check logs",
    )

    group.addoption(
        "--fluent-history",
        dest="fluent_history",
        metavar="PATH",
        help="Path to export the check history as JSON",
    )

    parser.addini(
        "fluent_config_file",
        help="Default fluent-pytest configuration file path",
        default="fluent.yaml",
    )

    parser.addini(
        "fluent_log_checks",
        help="Echo every fluent check to the console",
        type="bool",
        default=False,
    )


def pytest_configure(config: Config) -> None:
    """Configure the fluent pytest plugin."""
    config.addinivalue_line(
        "markers",
        "fluent_locale(name): Run the test under the given ambient locale, restored afterwards",
    )


# =============================================================================
# Session-scoped Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def fluent_config(request: pytest.FixtureRequest) -> FluentConfig:
    """
    Load fluent-pytest configuration.

    This fixture loads configuration from:
    1. --fluent-config command line option (must exist)
    2. fluent_config_file ini option (optional)
    3. Default config file search, from the invocation directory up to rootdir

    Command line options then override the loaded values.

    Returns:
        FluentConfig instance.
    """
    config_path = request.config.getoption("fluent_config")
    required = config_path is not None

    if config_path is None:
        config_path = request.config.getini("fluent_config_file")

    history = request.config.getoption("fluent_history")

    return ConfigLoader.load(
        config_path,
        Path(request.config.rootpath),
        start_dir=Path(request.config.invocation_params.dir),
        required=required,
        overrides={
            "log_level": request.config.getoption("fluent_log_level"),
            "log_checks": True if request.config.getini("fluent_log_checks") else None,
            "history_file": Path(history) if history is not None else None,
        },
    )


@pytest.fixture(scope="session")
def check_logger(
    request: pytest.FixtureRequest,
    fluent_config: FluentConfig,
) -> Generator[CheckLogger, None, None]:
    """
    Session-wide check history.

    Installed as the sink of every check evaluated during the session. The
    history is exported to JSON on teardown when a history file is set.

    Returns:
        CheckLogger recording check outcomes.
    """
    log_file = request.config.getoption("fluent_log_file")

    check_log = CheckLogger(
        name="checks",
        level=fluent_config.log_level,
        log_to_console=fluent_config.log_checks,
        log_to_file=Path(log_file) if log_file else None,
        use_colors=fluent_config.use_colors,
        max_history=fluent_config.max_history,
    )
    previous = set_check_logger(check_log)

    yield check_log

    set_check_logger(previous)

    if fluent_config.history_file is not None:
        check_log.export_to_json(fluent_config.history_file)
        logger.info(
            f"Exported {check_log.record_count} check record(s) to {fluent_config.history_file}"
        )

    check_log.close()


# =============================================================================
# Function-scoped Fixtures
# =============================================================================


@pytest.fixture
def check(
    check_logger: CheckLogger,
    request: pytest.FixtureRequest,
) -> Generator[Callable, None, None]:
    """
    Entry point for fluent checks, recording them under the current test.

    Usage:
        def test_something(check):
            check(20).is_after(0).and_.is_not_zero()

    Returns:
        The check_that function.
    """
    check_logger.current_test = request.node.nodeid
    yield check_that
    check_logger.current_test = None


@pytest.fixture(autouse=True)
def _fluent_locale(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Apply the fluent_locale marker, restoring the ambient locale afterwards."""
    marker = request.node.get_closest_marker("fluent_locale")
    if marker is None:
        yield
        return

    saved = locale.setlocale(locale.LC_ALL)
    try:
        locale.setlocale(locale.LC_ALL, marker.args[0])
    except locale.Error:
        pytest.skip(f"Locale {marker.args[0]!r} is not available")

    try:
        yield
    finally:
        locale.setlocale(locale.LC_ALL, saved)


# =============================================================================
# Pytest Hooks - Reporting
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call):
    """Attach the checks evaluated by a test to its report."""
    outcome = yield
    rep = outcome.get_result()

    if hasattr(item, "funcargs"):
        check_log = item.funcargs.get("check_logger")
        if check_log is not None:
            rep.fluent_checks = check_log.get_records(test_name=item.nodeid)


@pytest.hookimpl(optionalhook=True)
def pytest_html_results_table_header(cells):
    """Add a fluent checks column to the pytest-html report."""
    cells.insert(2, "<th>Checks</th>")


@pytest.hookimpl(optionalhook=True)
def pytest_html_results_table_row(report, cells):
    """Add the number of fluent checks to a pytest-html report row."""
    check_count = len(getattr(report, "fluent_checks", []))
    cells.insert(2, f"<td>{check_count}</td>")
