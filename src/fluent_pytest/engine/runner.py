"""
Chain context and check runner.

A `FluentCheck` binds the checked value to a single-use negation flag and
runs predicates against it through `execute_check`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from fluent_pytest.engine.errors import FluentCheckError
from fluent_pytest.engine.link import CheckLink
from fluent_pytest.engine.rendering import render_value

if TYPE_CHECKING:
    from fluent_pytest.logging.check_logger import CheckLogger

logger = logging.getLogger(__name__)

T = TypeVar("T")

_active_logger: Optional[CheckLogger] = None


def set_check_logger(check_logger: Optional[CheckLogger]) -> Optional[CheckLogger]:
    """
    Install the logger receiving the outcome of every check.

    Args:
        check_logger: Logger to install, or None to stop recording.

    Returns:
        The previously installed logger, so callers can restore it.
    """
    global _active_logger
    previous = _active_logger
    _active_logger = check_logger
    return previous


def get_check_logger() -> Optional[CheckLogger]:
    """Get the logger currently receiving check outcomes."""
    return _active_logger


class FluentCheck(Generic[T]):
    """
    Chain context for one fluent statement.

    Holds the checked value (never mutated) and the negation flag, which
    applies to the next predicate evaluation only.

    Subclasses add check methods. Each method builds its failure messages,
    then hands a predicate to `execute_check`:

        def is_zero(self):
            message = build_message("The {0} is different from zero.").on(self.value)
            negated = build_message("The {0} is equal to zero whereas it must not.")

            def predicate():
                if self.value != 0:
                    raise FluentCheckError(message.render())

            return self.execute_check(predicate, negated.render(), name="is_zero")
    """

    def __init__(self, value: T, declared_type: Any = None):
        """
        Initialize the chain context.

        Args:
            value: The checked value.
            declared_type: Optional static type of the value, e.g. Optional[int].
        """
        self._value = value
        self._declared_type = declared_type
        self._negated = False

    @property
    def value(self) -> T:
        """The checked value."""
        return self._value

    @property
    def declared_type(self) -> Any:
        """The declared type of the checked value, if any."""
        return self._declared_type

    @property
    def negated(self) -> bool:
        """Whether the next check is negated."""
        return self._negated

    @property
    def not_(self) -> FluentCheck[T]:
        """Negate the next check."""
        self._negated = True
        return self

    def execute_check(
        self,
        predicate: Callable[[], None],
        negated_message: str,
        *,
        name: Optional[str] = None,
    ) -> CheckLink:
        """
        Run a predicate, honoring the negation flag.

        Args:
            predicate: Callable raising FluentCheckError when the (non negated)
                condition does not hold.
            negated_message: Message to raise when the check is negated and
                the predicate succeeds.
            name: Name of the check, for the check history.

        Returns:
            A link to chain further checks.

        Raises:
            FluentCheckError: If the check fails once negation is applied.
        """
        negated = self._negated
        self._negated = False
        check_name = name or getattr(predicate, "__name__", "check")

        try:
            predicate()
        except FluentCheckError as e:
            if negated:
                self._record(check_name, negated, passed=True)
                return self._link()
            self._record(check_name, negated, passed=False, message=e.message)
            raise
        except Exception as e:
            self._record(check_name, negated, passed=False, error=f"{type(e).__name__}: {e}")
            raise

        if negated:
            self._record(check_name, negated, passed=False, message=negated_message)
            raise FluentCheckError(negated_message)

        self._record(check_name, negated, passed=True)
        return self._link()

    def _link(self) -> CheckLink:
        return CheckLink(self)

    def _record(
        self,
        check_name: str,
        negated: bool,
        passed: bool,
        message: Optional[str] = None,
        error: Optional[str] = None,
    ) -> None:
        """Report a check outcome to the active check logger."""
        if error is not None:
            logger.debug(f"Check {check_name} raised {error}")
        else:
            logger.debug(f"Check {check_name} {'passed' if passed else 'failed'}")

        if _active_logger is None:
            return

        rendered = render_value(self._value)
        if error is not None:
            _active_logger.log_error(check_name, rendered, error, negated=negated)
        elif passed:
            _active_logger.log_pass(check_name, rendered, negated=negated)
        else:
            _active_logger.log_failure(check_name, rendered, message or "", negated=negated)

    def __repr__(self) -> str:
        prefix = "not " if self._negated else ""
        return f"{self.__class__.__name__}({prefix}{render_value(self._value)})"
