"""Ordering checks for any value supporting comparison operators."""

from __future__ import annotations

import datetime
from typing import Any, Callable

from fluent_pytest.assertions.base import ObjectCheck
from fluent_pytest.engine.errors import FluentCheckError
from fluent_pytest.engine.link import CheckLink
from fluent_pytest.engine.message import build_message
from fluent_pytest.engine.registry import register_check


@register_check(str)
@register_check(bytes)
@register_check(datetime.date)
@register_check(datetime.time)
class ComparableCheck(ObjectCheck):
    """
    Checks on ordered values.

    is_before/is_after and the strict comparisons exclude equality,
    is_less_than/is_greater_than include it. Each entry point keeps its own
    wording in failure messages.

    Usage:
        check_that(2).is_before(20)
        check_that(date.today()).is_after(date(2000, 1, 1))
        check_that(1).is_less_than(1)
    """

    def _compare(
        self,
        name: str,
        reference: Any,
        holds: Callable[[], bool],
        template: str,
        comparison: str,
        negated_template: str,
        negated_comparison: str,
    ) -> CheckLink:
        message = (
            build_message(template).on(self.value).expected(reference).comparison(comparison)
        )
        negated = (
            build_message(negated_template)
            .on(self.value)
            .expected(reference)
            .comparison(negated_comparison)
        )

        def predicate() -> None:
            if not holds():
                raise FluentCheckError(message.render())

        return self.execute_check(predicate, negated.render(), name=name)

    def is_before(self, reference: Any) -> CheckLink:
        """Check that the value is strictly before the reference value."""
        return self._compare(
            "is_before",
            reference,
            lambda: self.value < reference,
            "The {0} is not before the reference value.",
            "before",
            "The {0} is before the reference value whereas it must not.",
            "after",
        )

    def is_after(self, reference: Any) -> CheckLink:
        """Check that the value is strictly after the reference value."""
        return self._compare(
            "is_after",
            reference,
            lambda: self.value > reference,
            "The {0} is not after the reference value.",
            "after",
            "The {0} is after the reference value whereas it must not.",
            "before",
        )

    def is_less_than(self, comparand: Any) -> CheckLink:
        """Check that the value is less than or equal to the comparand."""
        return self._compare(
            "is_less_than",
            comparand,
            lambda: self.value <= comparand,
            "The {0} is greater than the threshold.",
            "less than",
            "The {0} is less than the threshold.",
            "more than",
        )

    def is_greater_than(self, comparand: Any) -> CheckLink:
        """Check that the value is greater than or equal to the comparand."""
        return self._compare(
            "is_greater_than",
            comparand,
            lambda: self.value >= comparand,
            "The {0} is less than the threshold.",
            "more than",
            "The {0} is greater than the threshold.",
            "less than",
        )

    def is_strictly_less_than(self, comparand: Any) -> CheckLink:
        """Check that the value is strictly less than the comparand."""
        return self._compare(
            "is_strictly_less_than",
            comparand,
            lambda: self.value < comparand,
            "The {0} is not strictly less than the comparand.",
            "strictly less than",
            "The {0} is strictly less than the comparand.",
            "more than",
        )

    def is_strictly_greater_than(self, comparand: Any) -> CheckLink:
        """Check that the value is strictly greater than the comparand."""
        return self._compare(
            "is_strictly_greater_than",
            comparand,
            lambda: self.value > comparand,
            "The {0} is not strictly greater than the comparand.",
            "more than",
            "The {0} is strictly greater than the comparand.",
            "less than or equal to",
        )
