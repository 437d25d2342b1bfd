"""
Fluent message builder.

Builds the multi-part failure descriptions raised by checks, e.g.:

    The checked value is more than the limit.
    The checked value:
        [5]
    The expected value: less than
        [3]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from fluent_pytest.engine.rendering import render_type, render_value


@dataclass
class _Block:
    """One rendered value block of a message."""

    value: Any
    of_type: Any = None
    instance_of: bool = False

    def render(self, force_type: Any = None) -> str:
        if self.instance_of:
            return f"\tan instance of type: [{render_type(self.value)}]"
        text = f"\t[{render_value(self.value)}]"
        shown_type = self.of_type if self.of_type is not None else force_type
        if shown_type is not None:
            text += f" of type: [{render_type(shown_type)}]"
        return text


class FluentMessage:
    """
    Builder for a check failure message.

    Usage:
        build_message("The {0} is not before the reference value.")
            .on(20)
            .expected(2)
            .comparison("before")

    `{0}` in the template is replaced by "checked <subject>" and `{1}` by
    "expected value".
    """

    def __init__(self, template: str):
        self._template = template
        self._subject = "value"
        self._checked: Optional[_Block] = None
        self._expected: Optional[_Block] = None
        self._comparison: Optional[str] = None

    def for_subject(self, label: str) -> FluentMessage:
        """Set the noun describing the checked value (default "value")."""
        self._subject = label
        return self

    def on(self, value: Any, of_type: Any = None) -> FluentMessage:
        """Record the checked value, optionally annotated with its type."""
        self._checked = _Block(value, of_type)
        return self

    def expected(self, value: Any, of_type: Any = None) -> FluentMessage:
        """Record the expected value, optionally annotated with its type."""
        self._expected = _Block(value, of_type)
        return self

    def expected_type(self, tp: Any) -> FluentMessage:
        """Record an expected type instead of an expected value."""
        self._expected = _Block(tp, instance_of=True)
        return self

    def comparison(self, phrase: str) -> FluentMessage:
        """Record the phrase describing the relation to the expected value."""
        self._comparison = phrase
        return self

    @property
    def checked_label(self) -> str:
        return f"checked {self._subject}"

    def render(self) -> str:
        """Render the complete message."""
        lines = [
            "",
            self._template.format(self.checked_label, "expected value"),
        ]

        checked_type, expected_type = self._ambiguous_types()

        if self._checked is not None:
            lines.append(f"The {self.checked_label}:")
            lines.append(self._checked.render(checked_type))

        if self._expected is not None:
            header = "The expected value:"
            if self._comparison:
                header += f" {self._comparison}"
            lines.append(header)
            lines.append(self._expected.render(expected_type))

        return "\n".join(lines)

    def _ambiguous_types(self) -> tuple[Any, Any]:
        """Types to show when both values render alike but differ in type."""
        if self._checked is None or self._expected is None or self._expected.instance_of:
            return None, None

        checked_value = self._checked.value
        expected_value = self._expected.value
        if type(checked_value) is type(expected_value):
            return None, None
        if render_value(checked_value) != render_value(expected_value):
            return None, None
        return type(checked_value), type(expected_value)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"FluentMessage({self._template!r})"


def build_message(template: str) -> FluentMessage:
    """Start building a check message from a template."""
    return FluentMessage(template)
