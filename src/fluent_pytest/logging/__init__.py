"""Check history logging."""

from fluent_pytest.logging.check_logger import CheckLogger, CheckOutcome, CheckRecord

__all__ = ["CheckLogger", "CheckOutcome", "CheckRecord"]
