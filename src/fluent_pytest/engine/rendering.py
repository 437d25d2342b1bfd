"""
Locale-independent rendering of values and types for check messages.

Nothing here goes through the `locale` module, so messages read the same
whatever the ambient locale of the process is.
"""

from __future__ import annotations

import datetime
import typing
from decimal import Decimal
from fractions import Fraction
from typing import Any

_NONE_TYPE = type(None)


def render_number(value: Any) -> str:
    """Render a number, dropping the trailing `.0` of integral floats."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        # shortest round-tripping form: keeps exponents and the sign of -0.0
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def render_value(value: Any) -> str:
    """Render a checked or expected value."""
    if value is None:
        return "None"
    if isinstance(value, (str, bytes)):
        return repr(value)
    if isinstance(value, float):
        return render_number(value)
    if isinstance(value, (int, Decimal, Fraction)):
        return str(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def optional_inner_type(tp: Any) -> Any:
    """Return T for Optional[T] (or T | None), None for anything else."""
    args = typing.get_args(tp)
    if len(args) == 2 and _NONE_TYPE in args:
        return args[0] if args[1] is _NONE_TYPE else args[1]
    return None


def render_type(tp: Any) -> str:
    """Render a type for messages, e.g. `int` or `Optional[int]`."""
    inner = optional_inner_type(tp)
    if inner is not None:
        return f"Optional[{render_type(inner)}]"
    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp).replace("typing.", "")
