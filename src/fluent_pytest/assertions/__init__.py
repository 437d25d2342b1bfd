"""Checks built on the fluent check engine, registered by value type."""

from fluent_pytest.assertions.base import ObjectCheck
from fluent_pytest.assertions.comparable import ComparableCheck
from fluent_pytest.assertions.duration import Duration, DurationCheck, TimeUnit, discover_unit
from fluent_pytest.assertions.numbers import NumberCheck
from fluent_pytest.assertions.optional import OptionalCheck

__all__ = [
    "ObjectCheck",
    "ComparableCheck",
    "NumberCheck",
    "OptionalCheck",
    "DurationCheck",
    "Duration",
    "TimeUnit",
    "discover_unit",
]
