"""Errors raised by the fluent check engine."""

from __future__ import annotations


class FluentCheckError(AssertionError):
    """
    Raised when a fluent check fails.

    Subclasses AssertionError so test runners report it as a regular
    test failure. The message is fully rendered and ready to display.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NoValueToCheckError(FluentCheckError):
    """Raised when pivoting with `which` off a check that produced no value."""
