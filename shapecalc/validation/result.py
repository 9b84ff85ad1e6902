"""
Result Types
============

Bounded Context: Explicit success/failure values.

Design:
- Immutability: frozen=True prevents accidental mutation
- One error kind ("invalid input") carrying a human-readable message
- Callers branch on is_ok()/is_err() before touching the value
- unwrap() bridges to exceptions for callers that prefer them

Example:
    >>> result = Ok(1.5)
    >>> result.is_ok()
    True
    >>> Err("Width must be positive").message
    'Width must be positive'
"""

from dataclasses import dataclass
from typing import Any, NoReturn


class InvalidInputError(ValueError):
    """Raised by Err.unwrap(); carries the validation message."""


@dataclass(frozen=True)
class Ok:
    """
    Successful outcome.

    Attributes:
        value: Computed value (None for pure checks)
    """

    value: Any = None

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    """
    Failed outcome caused by invalid input.

    Attributes:
        message: Description of the first rule that failed
    """

    message: str

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """
        Raise the failure as an exception.

        Raises:
            InvalidInputError: Always, with this result's message
        """
        raise InvalidInputError(self.message)


Result = Ok | Err
