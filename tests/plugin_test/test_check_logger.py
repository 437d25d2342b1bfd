"""Tests for the check history logger."""

import json
import logging
from pathlib import Path

import pytest

from fluent_pytest import FluentCheckError, check_that
from fluent_pytest.logging import CheckLogger, CheckOutcome


@pytest.fixture
def check_log():
    log = CheckLogger(name="history_test")
    yield log
    log.close()


def test_records_each_outcome(check_log: CheckLogger):
    """Each outcome is stored with its details."""
    check_log.log_pass("is_zero", "0")
    check_log.log_failure("is_after", "1", "\nThe checked value is not after the reference value.")
    check_log.log_error("is_before", "'a'", "TypeError: boom", negated=True)

    records = check_log.get_records()

    assert [r.outcome for r in records] == [
        CheckOutcome.PASSED,
        CheckOutcome.FAILED,
        CheckOutcome.ERROR,
    ]
    assert records[2].negated is True
    assert check_log.record_count == 3
    assert check_log.failure_count == 1


def test_filters_by_test_and_outcome(check_log: CheckLogger):
    """Records can be filtered by test and outcome."""
    check_log.current_test = "test_a"
    check_log.log_pass("is_zero", "0")
    check_log.log_failure("is_zero", "1", "failed")
    check_log.current_test = "test_b"
    check_log.log_pass("is_zero", "0")

    assert len(check_log.get_records(test_name="test_a")) == 2
    assert len(check_log.get_records(outcome=CheckOutcome.PASSED)) == 2
    assert len(check_log.get_records(test_name="test_a", outcome=CheckOutcome.FAILED)) == 1


def test_history_is_bounded():
    """The oldest records are dropped first."""
    log = CheckLogger(name="bounded", max_history=2)
    for i in range(3):
        log.log_pass(f"check_{i}", str(i))

    assert [r.check_name for r in log.get_records()] == ["check_1", "check_2"]
    log.close()


def test_clear(check_log: CheckLogger):
    """Clearing empties the history."""
    check_log.log_pass("is_zero", "0")
    check_log.clear()

    assert check_log.record_count == 0


def test_export_to_json(check_log: CheckLogger, tmp_path: Path):
    """The history exports as a JSON list."""
    check_log.current_test = "tests/test_x.py::test_y"
    check_log.log_failure("is_zero", "2", "\nThe checked value is different from zero.")

    out = tmp_path / "history.json"
    check_log.export_to_json(out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data) == 1
    assert data[0]["outcome"] == "failed"
    assert data[0]["check"] == "is_zero"
    assert data[0]["value"] == "2"
    assert data[0]["negated"] is False
    assert data[0]["test"] == "tests/test_x.py::test_y"
    assert data[0]["message"] == "\nThe checked value is different from zero."
    assert "timestamp" in data[0]


def test_console_output(capsys):
    """Console output shows one line per check."""
    log = CheckLogger(name="console", level="DEBUG", log_to_console=True, use_colors=False)
    log.current_test = "test_console"
    log.log_pass("is_after", "20", negated=True)
    log.log_failure("is_zero", "2", "\nThe checked value is different from zero.\nThe checked value:\n\t[2]")
    log.close()

    err = capsys.readouterr().err
    lines = err.strip().splitlines()
    assert lines[0].endswith("[test_console] ✓ not_.is_after(20)")
    assert lines[1].endswith("[test_console] ✗ is_zero(2) The checked value is different from zero.")


def test_level_filters_console_output(capsys):
    """Passed checks are logged at DEBUG and hidden at INFO."""
    log = CheckLogger(name="quiet", level="INFO", log_to_console=True, use_colors=False)
    log.log_pass("is_zero", "0")
    log.log_failure("is_zero", "1", "failed")
    log.close()

    err = capsys.readouterr().err
    assert "✓" not in err
    assert "✗ is_zero(1) failed" in err
    assert log.record_count == 2


def test_log_file(tmp_path: Path):
    """Checks are written to the log file."""
    log_file = tmp_path / "checks.log"
    log = CheckLogger(name="file", level="DEBUG", log_to_file=log_file)
    log.log_pass("is_positive", "3")
    log.close()

    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG - is_positive passed" in content


def test_engine_reports_to_installed_logger(recorded_checks: CheckLogger):
    """Checks evaluated through check_that land in the installed logger."""
    check_that(20).is_not_zero().and_.is_after(0)
    with pytest.raises(FluentCheckError):
        check_that(0).not_.is_zero()

    records = recorded_checks.get_records()
    assert [(r.check_name, r.outcome) for r in records] == [
        ("is_not_zero", CheckOutcome.PASSED),
        ("is_after", CheckOutcome.PASSED),
        ("is_zero", CheckOutcome.FAILED),
    ]
    assert records[2].negated is True
    assert records[2].message == "\nThe checked value is equal to zero whereas it must not."


def test_logger_names_are_namespaced(check_log: CheckLogger):
    """The underlying logger lives under the package namespace."""
    assert check_log.name == "history_test"
    assert logging.getLogger("fluent_pytest.history_test").level == logging.INFO
