"""Guards over bool subjects."""

from __future__ import annotations

from dataclasses import dataclass, field

from guard_fluently.checks import Guard
from guard_fluently.config import get_settings
from guard_fluently.constraints import AndConstraint
from guard_fluently.primitives.reference import unsupported_eq


@dataclass(frozen=True, slots=True, eq=False)
class BooleanGuards:
    """
    Checks that a bool argument is in the expected state.

    Every check raises NullSubjectError when the subject is None.

        should(is_active).be_true("account {} is disabled", account_id)
    """

    subject: bool | None
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", get_settings().default_name)

    def be_true(self, message: str = "", *message_args: object) -> AndConstraint[BooleanGuards]:
        """
        Subject must be True.

        message is appended to the failure text, formatted with
        str.format(*message_args) when arguments are given.
        """
        Guard.is_not_null(self.subject, self.name, "bool")
        Guard.is_true(self.subject, self.name, _format(message, message_args))  # type: ignore[arg-type]
        return AndConstraint(self)

    def be_true_with_message(self, message: str, *message_args: object) -> AndConstraint[BooleanGuards]:
        return self.be_true(message, *message_args)

    def be_false(self, message: str = "", *message_args: object) -> AndConstraint[BooleanGuards]:
        """Subject must be False. message works as in be_true()."""
        Guard.is_not_null(self.subject, self.name, "bool")
        Guard.is_false(self.subject, self.name, _format(message, message_args))  # type: ignore[arg-type]
        return AndConstraint(self)

    def be_false_with_message(self, message: str, *message_args: object) -> AndConstraint[BooleanGuards]:
        return self.be_false(message, *message_args)

    def be(self, expected: bool) -> AndConstraint[BooleanGuards]:
        """Subject must equal expected."""
        Guard.is_not_null(self.subject, self.name, "bool")
        Guard.is_equal_to(self.subject, expected, self.name)
        return AndConstraint(self)

    def not_be(self, unexpected: bool) -> AndConstraint[BooleanGuards]:
        """Subject must differ from unexpected."""
        Guard.is_not_null(self.subject, self.name, "bool")
        Guard.is_not_equal_to(self.subject, unexpected, self.name)
        return AndConstraint(self)

    __eq__ = unsupported_eq
    __hash__ = object.__hash__


def _format(message: str, args: tuple[object, ...]) -> str:
    return message.format(*args) if args else message
