"""Checks available on every value: equality and type."""

from __future__ import annotations

from typing import Any

from fluent_pytest.engine.errors import FluentCheckError
from fluent_pytest.engine.instance import (
    build_error_message,
    checked_type,
    is_instance_of,
    is_not_instance_of,
)
from fluent_pytest.engine.link import CheckLink
from fluent_pytest.engine.message import build_message
from fluent_pytest.engine.registry import register_check
from fluent_pytest.engine.runner import FluentCheck


@register_check(object)
class ObjectCheck(FluentCheck):
    """
    Equality and instance-of checks.

    Usage:
        check_that(20).is_equal_to(20)
        check_that(20).not_.is_equal_to(1)
        check_that("abc").is_instance_of(str)
    """

    def is_equal_to(self, expected: Any) -> CheckLink:
        """Check that the value equals the expected one."""
        message = (
            build_message("The {0} is different from the expected one.")
            .on(self.value)
            .expected(expected)
        )
        negated = (
            build_message("The {0} is equal to the expected one whereas it must not.")
            .expected(expected, of_type=type(expected))
            .comparison("different from")
        )

        def is_equal_to() -> None:
            if self.value != expected:
                raise FluentCheckError(message.render())

        return self.execute_check(is_equal_to, negated.render())

    def is_not_equal_to(self, expected: Any) -> CheckLink:
        """Check that the value differs from the expected one."""
        message = (
            build_message("The {0} is equal to the expected one whereas it must not.")
            .expected(expected, of_type=type(expected))
            .comparison("different from")
        )
        negated = (
            build_message("The {0} is different from the expected one.")
            .on(self.value)
            .expected(expected)
        )

        def is_not_equal_to() -> None:
            if self.value == expected:
                raise FluentCheckError(message.render())

        return self.execute_check(is_not_equal_to, negated.render())

    def is_instance_of(self, target_type: Any) -> CheckLink:
        """
        Check that the value is exactly of the given type.

        Subclasses do not match. For Optional[T], a None declared as
        Optional[T] matches.
        """
        negated = build_error_message(self.value, target_type, True, self.declared_type)

        def is_instance() -> None:
            is_instance_of(self.value, target_type, self.declared_type)

        return self.execute_check(is_instance, negated, name="is_instance_of")

    def is_not_instance_of(self, target_type: Any) -> CheckLink:
        """Check that the value is not exactly of the given type."""
        negated = build_error_message(self.value, target_type, False, self.declared_type)

        def is_not_instance() -> None:
            is_not_instance_of(self.value, target_type, self.declared_type)

        return self.execute_check(is_not_instance, negated, name="is_not_instance_of")

    @property
    def checked_type(self) -> Any:
        """Type the value is checked as (declared type first)."""
        return checked_type(self.value, self.declared_type)
