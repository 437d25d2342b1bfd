"""
fluent-pytest: fluent, chainable checks with readable failure messages.

This package provides the fluent check engine, a catalogue of checks built on
it, and a pytest plugin recording every check evaluated during a test run.

Usage:
    from fluent_pytest import check_that

    check_that(20).is_not_zero().and_.is_after(0)
    check_that(2).not_.is_zero()
"""

from fluent_pytest.engine import (
    CheckLink,
    CheckLinkWhich,
    FluentCheck,
    FluentCheckError,
    FluentMessage,
    NoValueToCheckError,
    build_error_message,
    build_message,
    check_that,
    is_instance_of,
    is_not_instance_of,
    register_check,
)
from fluent_pytest.assertions import (
    ComparableCheck,
    Duration,
    DurationCheck,
    NumberCheck,
    ObjectCheck,
    OptionalCheck,
    TimeUnit,
    discover_unit,
)
from fluent_pytest.config import ConfigLoader, FluentConfig
from fluent_pytest.logging import CheckLogger, CheckOutcome, CheckRecord

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "check_that",
    "register_check",
    # Engine
    "FluentCheck",
    "FluentCheckError",
    "NoValueToCheckError",
    "CheckLink",
    "CheckLinkWhich",
    "FluentMessage",
    "build_message",
    "build_error_message",
    "is_instance_of",
    "is_not_instance_of",
    # Checks
    "ObjectCheck",
    "ComparableCheck",
    "NumberCheck",
    "OptionalCheck",
    "DurationCheck",
    "Duration",
    "TimeUnit",
    "discover_unit",
    # Config
    "FluentConfig",
    "ConfigLoader",
    # Logging
    "CheckLogger",
    "CheckOutcome",
    "CheckRecord",
]
