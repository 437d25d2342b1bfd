"""Checks on numbers."""

from __future__ import annotations

import numbers
from typing import Callable

from fluent_pytest.assertions.comparable import ComparableCheck
from fluent_pytest.engine.errors import FluentCheckError
from fluent_pytest.engine.link import CheckLink
from fluent_pytest.engine.message import FluentMessage, build_message
from fluent_pytest.engine.registry import register_check


@register_check(numbers.Number)
class NumberCheck(ComparableCheck):
    """
    Zero and sign checks, on top of the ordering checks.

    Usage:
        check_that(20).is_not_zero().and_.is_after(0)
        check_that(0).not_.is_not_zero()
    """

    def _check(
        self,
        name: str,
        holds: Callable[[], bool],
        message: FluentMessage,
        negated: FluentMessage,
    ) -> CheckLink:
        def predicate() -> None:
            if not holds():
                raise FluentCheckError(message.render())

        return self.execute_check(predicate, negated.render(), name=name)

    def is_zero(self) -> CheckLink:
        """Check that the value equals zero."""
        return self._check(
            "is_zero",
            lambda: self.value == 0,
            build_message("The {0} is different from zero.").on(self.value),
            build_message("The {0} is equal to zero whereas it must not."),
        )

    def is_not_zero(self) -> CheckLink:
        """Check that the value differs from zero."""
        return self._check(
            "is_not_zero",
            lambda: self.value != 0,
            build_message("The {0} is equal to zero, whereas it must not.").on(self.value),
            build_message("The {0} is different from zero.").on(self.value),
        )

    def is_positive(self) -> CheckLink:
        """Check that the value is strictly positive."""
        return self._check(
            "is_positive",
            lambda: self.value > 0,
            build_message("The {0} is not strictly positive.").on(self.value),
            build_message("The {0} is strictly positive, whereas it must not.").on(self.value),
        )

    def is_negative(self) -> CheckLink:
        """Check that the value is strictly negative."""
        return self._check(
            "is_negative",
            lambda: self.value < 0,
            build_message("The {0} is not strictly negative.").on(self.value),
            build_message("The {0} is strictly negative, whereas it must not.").on(self.value),
        )
