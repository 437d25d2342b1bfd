"""Links returned by successful checks, used to chain further checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from fluent_pytest.engine.errors import NoValueToCheckError

if TYPE_CHECKING:
    from fluent_pytest.engine.runner import FluentCheck

C = TypeVar("C", bound="FluentCheck")


class CheckLink(Generic[C]):
    """
    Result of a successful check.

    Usage:
        check_that(20).is_not_zero().and_.is_after(0)
    """

    def __init__(self, check: C):
        self._check = check

    @property
    def and_(self) -> C:
        """Continue with another check on the same value."""
        return self._check

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._check!r})"


class CheckLinkWhich(CheckLink[C]):
    """
    Link that can also pivot to a value derived by the check.

    Usage:
        check_that(maybe, Optional[int]).has_a_value().which.is_after(0)
    """

    def __init__(
        self,
        check: C,
        pivot: Callable[[Any], FluentCheck],
        derived: Any = None,
        has_derived: bool = True,
        missing_message: str = "",
    ):
        """
        Initialize the link.

        Args:
            check: The chain context the check ran on.
            pivot: Factory building a chain context for the derived value.
            derived: The derived value, when there is one.
            has_derived: Whether the check actually produced a derived value.
            missing_message: Message raised by `which` when there is none.
        """
        super().__init__(check)
        self._pivot = pivot
        self._derived = derived
        self._has_derived = has_derived
        self._missing_message = missing_message

    @property
    def which(self) -> FluentCheck:
        """
        Start checking the derived value.

        Raises:
            NoValueToCheckError: If the check produced no derived value.
        """
        if not self._has_derived:
            raise NoValueToCheckError(self._missing_message)
        return self._pivot(self._derived)
