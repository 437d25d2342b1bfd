"""Fluent check engine: chain context, check runner, messages and links."""

from fluent_pytest.engine.errors import FluentCheckError, NoValueToCheckError
from fluent_pytest.engine.instance import (
    build_error_message,
    checked_type,
    is_instance_of,
    is_not_instance_of,
    is_optional_type,
)
from fluent_pytest.engine.link import CheckLink, CheckLinkWhich
from fluent_pytest.engine.message import FluentMessage, build_message
from fluent_pytest.engine.registry import check_class_for, check_that, register_check
from fluent_pytest.engine.rendering import render_number, render_type, render_value
from fluent_pytest.engine.runner import FluentCheck, get_check_logger, set_check_logger

__all__ = [
    # Errors
    "FluentCheckError",
    "NoValueToCheckError",
    # Chain context
    "FluentCheck",
    "CheckLink",
    "CheckLinkWhich",
    "check_that",
    "check_class_for",
    "register_check",
    "get_check_logger",
    "set_check_logger",
    # Messages
    "FluentMessage",
    "build_message",
    "render_number",
    "render_type",
    "render_value",
    # Instance helpers
    "build_error_message",
    "checked_type",
    "is_instance_of",
    "is_not_instance_of",
    "is_optional_type",
]
