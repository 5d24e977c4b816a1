"""
models/result.py
----------------
Tagged result type used to report validation failures without raising.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from models.errors import LunchlyError

T = TypeVar("T")
E = TypeVar("E", bound=LunchlyError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def unwrap(self):
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err[E]]
