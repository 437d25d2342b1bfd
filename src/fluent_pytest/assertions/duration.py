"""Unit-aware checks on durations (datetime.timedelta)."""

from __future__ import annotations

import datetime
from enum import Enum
from functools import total_ordering
from typing import Callable, Optional, Union

from fluent_pytest.assertions.comparable import ComparableCheck
from fluent_pytest.engine.errors import FluentCheckError
from fluent_pytest.engine.link import CheckLink
from fluent_pytest.engine.message import build_message
from fluent_pytest.engine.registry import register_check
from fluent_pytest.engine.rendering import render_number


class TimeUnit(Enum):
    """Time units, valued in microseconds."""

    MICROSECONDS = 1
    MILLISECONDS = 1_000
    SECONDS = 1_000_000
    MINUTES = 60 * 1_000_000
    HOURS = 60 * 60 * 1_000_000
    DAYS = 24 * 60 * 60 * 1_000_000
    WEEKS = 7 * 24 * 60 * 60 * 1_000_000

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def convert(self, value: float, unit: TimeUnit) -> float:
        """Convert a value expressed in `unit` to this unit."""
        if unit is self:
            return value
        return value * unit.value / self.value


def discover_unit(duration: datetime.timedelta) -> TimeUnit:
    """
    Pick the unit a duration is naturally expressed in.

    That is the largest unit the duration reaches at least once, e.g.
    SECONDS for 2 seconds and MILLISECONDS for 1500 microseconds.
    Durations under a millisecond (zero included) use MICROSECONDS.
    """
    magnitude = abs(duration) // datetime.timedelta(microseconds=1)
    for unit in sorted(TimeUnit, key=lambda u: u.value, reverse=True):
        if magnitude >= unit.value:
            return unit
    return TimeUnit.MICROSECONDS


@total_ordering
class Duration:
    """
    A duration expressed as a number of time units.

    Durations in different units compare after conversion, so
    Duration(1000, MILLISECONDS) == Duration(1, SECONDS).
    """

    def __init__(self, value: float, unit: TimeUnit):
        self._value = value
        self._unit = unit

    @classmethod
    def from_timedelta(cls, duration: datetime.timedelta, unit: TimeUnit) -> Duration:
        """Express a timedelta in the given unit."""
        microseconds = duration // datetime.timedelta(microseconds=1)
        return cls(unit.convert(microseconds, TimeUnit.MICROSECONDS), unit)

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> TimeUnit:
        return self._unit

    def in_unit(self, unit: TimeUnit) -> float:
        """Value of this duration in another unit."""
        return unit.convert(self._value, self._unit)

    def to_timedelta(self) -> datetime.timedelta:
        return datetime.timedelta(microseconds=self.in_unit(TimeUnit.MICROSECONDS))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._value == other.in_unit(self._unit)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._value < other.in_unit(self._unit)

    def __hash__(self) -> int:
        return hash(self.in_unit(TimeUnit.MICROSECONDS))

    def __str__(self) -> str:
        return f"{render_number(self._value)} {self._unit.label}"

    def __repr__(self) -> str:
        return f"Duration({self._value!r}, TimeUnit.{self._unit.name})"


@register_check(datetime.timedelta)
class DurationCheck(ComparableCheck):
    """
    Duration checks, comparing in a common unit.

    The comparand is either a timedelta, whose unit is discovered, or a
    number together with its unit:

        check_that(timedelta(milliseconds=1000)).is_less_than(timedelta(seconds=2))
        check_that(elapsed).is_greater_than(30, TimeUnit.SECONDS)
    """

    def _durations(
        self,
        comparand: Union[datetime.timedelta, float],
        unit: Optional[TimeUnit],
    ) -> tuple[Duration, Duration]:
        if isinstance(comparand, datetime.timedelta):
            if unit is None:
                unit = discover_unit(comparand)
            expected = Duration.from_timedelta(comparand, unit)
        else:
            if unit is None:
                raise TypeError("A unit is required when the comparand is a number")
            expected = Duration(comparand, unit)
        return Duration.from_timedelta(self.value, unit), expected

    def _check(
        self,
        name: str,
        holds: Callable[[], bool],
        message: str,
        negated: str,
    ) -> CheckLink:
        def predicate() -> None:
            if not holds():
                raise FluentCheckError(message)

        return self.execute_check(predicate, negated, name=name)

    def is_less_than(
        self,
        comparand: Union[datetime.timedelta, float],
        unit: Optional[TimeUnit] = None,
    ) -> CheckLink:
        """Check that the duration is strictly less than the comparand."""
        tested, expected = self._durations(comparand, unit)
        message = (
            build_message("The {0} is more than the limit.")
            .on(tested)
            .expected(expected)
            .comparison("less than")
        )
        negated = (
            build_message("The {0} is not more than the limit.")
            .on(tested)
            .expected(expected)
            .comparison("more than or equal to")
        )
        return self._check(
            "is_less_than", lambda: tested < expected, message.render(), negated.render()
        )

    def is_greater_than(
        self,
        comparand: Union[datetime.timedelta, float],
        unit: Optional[TimeUnit] = None,
    ) -> CheckLink:
        """Check that the duration is strictly greater than the comparand."""
        tested, expected = self._durations(comparand, unit)
        message = (
            build_message("The {0} is not more than the limit.")
            .on(tested)
            .expected(expected)
            .comparison("more than")
        )
        negated = (
            build_message("The {0} is more than the limit.")
            .on(tested)
            .expected(expected)
            .comparison("less than or equal to")
        )
        return self._check(
            "is_greater_than", lambda: tested > expected, message.render(), negated.render()
        )

    def is_equal_to(
        self,
        comparand: Union[datetime.timedelta, float],
        unit: Optional[TimeUnit] = None,
    ) -> CheckLink:
        """Check that the duration equals the comparand."""
        tested, expected = self._durations(comparand, unit)
        message = build_message("The {0} is different from the {1}.").on(tested).expected(expected)
        negated = (
            build_message("The {0} is the same than {1}.")
            .on(tested)
            .expected(expected)
            .comparison("different than")
        )
        return self._check(
            "is_equal_to", lambda: tested == expected, message.render(), negated.render()
        )
