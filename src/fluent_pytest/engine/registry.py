"""
Entry point of fluent checks and dispatch of check classes by value type.

Check classes register the value types they handle:

    @register_check(numbers.Number)
    class NumberCheck(ComparableCheck):
        ...

`check_that` then picks the most specific registered class for the value,
following the method resolution order (abstract base classes included).
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, Callable, Type, TypeVar

from fluent_pytest.engine.instance import is_optional_type
from fluent_pytest.engine.runner import FluentCheck

F = TypeVar("F", bound=Type[FluentCheck])

_NONE_TYPE = type(None)


@singledispatch
def _check_class_for(value: Any) -> Type[FluentCheck]:
    return FluentCheck


def register_check(value_type: type) -> Callable[[F], F]:
    """
    Register a check class for a value type.

    Args:
        value_type: Type (or ABC) of the values the class checks. Register
            for NoneType to handle optional values.

    Returns:
        Class decorator.
    """

    def decorator(check_class: F) -> F:
        _check_class_for.register(value_type, lambda value: check_class)
        return check_class

    return decorator


def check_class_for(value: Any, declared_type: Any = None) -> Type[FluentCheck]:
    """Resolve the check class used for a value."""
    if value is None or is_optional_type(declared_type):
        lookup = _NONE_TYPE
    elif isinstance(declared_type, type):
        lookup = declared_type
    else:
        lookup = type(value)
    return _check_class_for.dispatch(lookup)(value)


def check_that(value: Any, declared_type: Any = None) -> FluentCheck:
    """
    Start a fluent check on a value.

    Usage:
        check_that(20).is_after(0).and_.is_not_zero()
        check_that(maybe, Optional[int]).has_a_value().which.is_equal_to(1)

    Args:
        value: The checked value.
        declared_type: Optional static type of the value. Needed for
            Optional[T] values, whose type cannot be told from the value.

    Returns:
        Chain context exposing the checks available for the value.
    """
    return check_class_for(value, declared_type)(value, declared_type)
