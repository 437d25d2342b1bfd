"""Check history logger with console, file and JSON output."""

from __future__ import annotations

import json
import logging
import sys
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Deque, Dict, List, Optional


class CheckOutcome(Enum):
    """Outcome of one check evaluation."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass
class CheckRecord:
    """Represents one logged check evaluation."""

    timestamp: datetime
    outcome: CheckOutcome
    check_name: str
    value: str
    negated: bool = False
    test_name: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "outcome": self.outcome.value,
            "check": self.check_name,
            "value": self.value,
            "negated": self.negated,
            "test": self.test_name,
            "message": self.message,
        }


class ColoredFormatter(logging.Formatter):
    """Formatter with color support for console output."""

    COLORS = {
        "RESET": "\033[0m",
        "GREEN": "\033[92m",
        "RED": "\033[91m",
        "YELLOW": "\033[93m",
    }

    OUTCOME_COLORS = {
        CheckOutcome.PASSED: "GREEN",
        CheckOutcome.FAILED: "RED",
        CheckOutcome.ERROR: "YELLOW",
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        check_record = getattr(record, "check_record", None)

        if check_record and isinstance(check_record, CheckRecord):
            return self._format_check(check_record)

        return super().format(record)

    def _format_check(self, rec: CheckRecord) -> str:
        """Format a check record for console output."""
        timestamp = rec.timestamp.strftime("%H:%M:%S.%f")[:-3]

        symbol = {
            CheckOutcome.PASSED: "✓",
            CheckOutcome.FAILED: "✗",
            CheckOutcome.ERROR: "!",
        }.get(rec.outcome, "?")

        name = f"not_.{rec.check_name}" if rec.negated else rec.check_name
        parts = [f"[{timestamp}]", symbol, f"{name}({rec.value})"]

        if rec.test_name:
            parts.insert(1, f"[{rec.test_name}]")

        if rec.message:
            first_line = rec.message.strip().splitlines()[0]
            parts.append(first_line)

        text = " ".join(parts)

        if self.use_colors:
            color = self.OUTCOME_COLORS.get(rec.outcome, "RESET")
            return f"{self.COLORS[color]}{text}{self.COLORS['RESET']}"
        return text


class CheckLogger:
    """
    Logger for fluent check evaluations.

    Provides:
    - Console output with colors
    - Optional log file
    - Bounded check history with filtering
    - JSON export for debugging
    """

    def __init__(
        self,
        name: str = "checks",
        level: str = "INFO",
        log_to_console: bool = False,
        log_to_file: Optional[Path] = None,
        use_colors: bool = True,
        max_history: int = 10000,
    ):
        """
        Initialize check logger.

        Args:
            name: Logger name.
            level: Logging level (DEBUG, INFO, WARNING, ERROR).
            log_to_console: Whether to log every check to the console.
            log_to_file: Optional path to log file.
            use_colors: Whether to use colors in console output.
            max_history: Maximum number of records kept, oldest dropped first.
        """
        self._name = name
        self._logger = logging.getLogger(f"fluent_pytest.{name}")
        self._logger.setLevel(getattr(logging, level.upper()))
        self._records: Deque[CheckRecord] = deque(maxlen=max_history)
        self.current_test: Optional[str] = None

        # Prevent duplicate handlers
        self._logger.handlers.clear()

        if log_to_console:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(ColoredFormatter(use_colors=use_colors))
            self._logger.addHandler(console_handler)

        if log_to_file:
            file_handler = logging.FileHandler(log_to_file)
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
            )
            self._logger.addHandler(file_handler)

    @property
    def name(self) -> str:
        return self._name

    def log_pass(self, check_name: str, value: str, negated: bool = False) -> CheckRecord:
        """
        Log a check that passed.

        Args:
            check_name: Name of the check method.
            value: Rendered checked value.
            negated: Whether the check was negated.

        Returns:
            The stored record.
        """
        return self._add(CheckOutcome.PASSED, check_name, value, negated, logging.DEBUG)

    def log_failure(
        self,
        check_name: str,
        value: str,
        message: str,
        negated: bool = False,
    ) -> CheckRecord:
        """
        Log a check that failed.

        Args:
            check_name: Name of the check method.
            value: Rendered checked value.
            message: Failure message raised by the check.
            negated: Whether the check was negated.

        Returns:
            The stored record.
        """
        return self._add(CheckOutcome.FAILED, check_name, value, negated, logging.INFO, message)

    def log_error(
        self,
        check_name: str,
        value: str,
        error: str,
        negated: bool = False,
    ) -> CheckRecord:
        """Log a check whose predicate raised something else than a check failure."""
        return self._add(CheckOutcome.ERROR, check_name, value, negated, logging.ERROR, error)

    def _add(
        self,
        outcome: CheckOutcome,
        check_name: str,
        value: str,
        negated: bool,
        level: int,
        message: Optional[str] = None,
    ) -> CheckRecord:
        record = CheckRecord(
            timestamp=datetime.now(),
            outcome=outcome,
            check_name=check_name,
            value=value,
            negated=negated,
            test_name=self.current_test,
            message=message,
        )
        self._records.append(record)
        self._log_record(record, level)
        return record

    def _log_record(self, record: CheckRecord, level: int) -> None:
        """Log a record through the Python logger."""
        if not self._logger.isEnabledFor(level):
            return
        log_record = self._logger.makeRecord(
            name=self._logger.name,
            level=level,
            fn="",
            lno=0,
            msg=f"{record.check_name} {record.outcome.value}",
            args=(),
            exc_info=None,
        )
        log_record.check_record = record
        self._logger.handle(log_record)

    def get_records(
        self,
        test_name: Optional[str] = None,
        outcome: Optional[CheckOutcome] = None,
    ) -> List[CheckRecord]:
        """
        Get logged records with optional filtering.

        Args:
            test_name: Filter by test node id.
            outcome: Filter by outcome.

        Returns:
            List of matching records.
        """
        records = list(self._records)

        if test_name:
            records = [r for r in records if r.test_name == test_name]

        if outcome:
            records = [r for r in records if r.outcome == outcome]

        return records

    def export_to_json(self, filepath: Path | str) -> None:
        """
        Export all records to JSON file.

        Args:
            filepath: Path to output JSON file.
        """
        data = [rec.to_dict() for rec in self._records]

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, default=str)

    def clear(self) -> None:
        """Clear record history."""
        self._records.clear()

    def close(self) -> None:
        """Close and detach the handlers of the underlying logger."""
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)

    @property
    def record_count(self) -> int:
        """Get total number of records kept."""
        return len(self._records)

    @property
    def failure_count(self) -> int:
        """Get number of failed checks kept."""
        return len(self.get_records(outcome=CheckOutcome.FAILED))
