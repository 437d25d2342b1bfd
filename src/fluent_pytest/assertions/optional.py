"""Checks on optional values, i.e. values that may be None."""

from __future__ import annotations

from fluent_pytest.assertions.base import ObjectCheck
from fluent_pytest.engine.errors import FluentCheckError
from fluent_pytest.engine.link import CheckLink, CheckLinkWhich
from fluent_pytest.engine.message import build_message
from fluent_pytest.engine.registry import check_that, register_check


@register_check(type(None))
class OptionalCheck(ObjectCheck):
    """
    Presence checks on an Optional[T] value.

    Used for None values and for any value declared as Optional[T]:

        check_that(maybe, Optional[int]).has_a_value().which.is_after(0)
        check_that(None).has_no_value()
    """

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def has_a_value(self) -> CheckLinkWhich:
        """
        Check that the value is not None.

        Returns:
            Link whose `which` checks the contained value.
        """
        message = build_message("The {0} has no value, which is unexpected.").for_subject(
            "nullable"
        )
        negated = (
            build_message("The {0} has a value, which is unexpected.")
            .for_subject("nullable")
            .on(self.value)
        )

        def has_a_value() -> None:
            if not self.has_value:
                raise FluentCheckError(message.render())

        self.execute_check(has_a_value, negated.render())

        missing = build_message("The {0} has no value to be checked.").for_subject("nullable")
        return CheckLinkWhich(
            self,
            check_that,
            derived=self.value,
            has_derived=self.has_value,
            missing_message=missing.render(),
        )

    def has_no_value(self) -> CheckLink:
        """Check that the value is None."""
        message = build_message("The {0} has a value, whereas it must not.").on(self.value)
        negated = build_message("The {0} has no value, which is unexpected.").for_subject(
            "nullable"
        )

        def has_no_value() -> None:
            if self.has_value:
                raise FluentCheckError(message.render())

        return self.execute_check(has_no_value, negated.render())
