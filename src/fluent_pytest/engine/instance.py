"""Type introspection helpers for instance-of checks."""

from __future__ import annotations

from typing import Any

from fluent_pytest.engine.errors import FluentCheckError
from fluent_pytest.engine.message import build_message
from fluent_pytest.engine.rendering import optional_inner_type, render_type


def is_optional_type(tp: Any) -> bool:
    """Check whether a type is Optional[T] (or T | None)."""
    return optional_inner_type(tp) is not None


def checked_type(value: Any, declared_type: Any = None) -> Any:
    """
    Type a value is checked as.

    The declared type wins when given, so that a None declared as
    Optional[int] is still an Optional[int].
    """
    if declared_type is not None:
        return declared_type
    return type(value)


def _same_type(actual: Any, target: Any) -> bool:
    actual_inner = optional_inner_type(actual)
    target_inner = optional_inner_type(target)
    if actual_inner is not None or target_inner is not None:
        return actual_inner is not None and target_inner is not None and actual_inner == target_inner
    return actual == target


def build_error_message(
    value: Any,
    target_type: Any,
    is_same_type: bool,
    declared_type: Any = None,
) -> str:
    """
    Build the message of a failed instance-of check.

    Args:
        value: The checked value.
        target_type: The type the value was checked against.
        is_same_type: True when the value is of the target type (and must not
            be), False when it is not (and should be).
        declared_type: Declared type of the value, if any.

    Returns:
        The rendered message.
    """
    actual = checked_type(value, declared_type)
    type_name = render_type(target_type).replace("{", "{{").replace("}", "}}")

    if is_same_type:
        message = (
            build_message(f"The {{0}} is an instance of [{type_name}] whereas it must not.")
            .on(value, of_type=actual)
            .expected_type(target_type)
            .comparison("different from")
        )
    else:
        message = (
            build_message(f"The {{0}} is not an instance of [{type_name}].")
            .on(value, of_type=actual)
            .expected_type(target_type)
        )
    return message.render()


def is_instance_of(value: Any, target_type: Any, declared_type: Any = None) -> None:
    """
    Check that the value is exactly of the target type.

    Raises:
        FluentCheckError: If the value is not of the target type.
    """
    if not _same_type(checked_type(value, declared_type), target_type):
        raise FluentCheckError(build_error_message(value, target_type, False, declared_type))


def is_not_instance_of(value: Any, target_type: Any, declared_type: Any = None) -> None:
    """
    Check that the value is not exactly of the target type.

    Raises:
        FluentCheckError: If the value is of the target type.
    """
    if _same_type(checked_type(value, declared_type), target_type):
        raise FluentCheckError(build_error_message(value, target_type, True, declared_type))
