"""Two-armed result values.

Validators, filters and API calls return ``Ok`` or ``Err`` instead of
raising, so a discovery cycle composes as a left-to-right chain that
short-circuits on the first terminal error.

Examples:
    >>> Ok(2).map(lambda x: x * 3)
    Ok(value=6)
    >>> Err("boom").map(lambda x: x * 3)
    Err(error='boom')
    >>> Ok([1]).and_then(lambda xs: Err("empty") if not xs else Ok(xs))
    Ok(value=[1])
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        """Transform the carried value."""
        return Ok(func(self.value))

    def map_err(self, func: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain another result-producing step."""
        return func(self.value)

    def fold(self, on_err: Callable[[Any], U], on_ok: Callable[[T], U]) -> U:
        """Collapse both arms into one value."""
        return on_ok(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying a typed error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, func: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, func: Callable[[E], F]) -> Err[F]:
        """Transform the carried error."""
        return Err(func(self.error))

    def and_then(self, func: Callable[[Any], Any]) -> Err[E]:
        return self

    def fold(self, on_err: Callable[[E], U], on_ok: Callable[[Any], U]) -> U:
        return on_err(self.error)

    def unwrap(self) -> Any:
        """Return the value of an Ok.

        Raises:
            ValueError: Always, since an Err has no value
        """
        raise ValueError(f"Called unwrap() on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]


def partition(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split results into successful values and errors.

    Input order is preserved within each list.

    Args:
        results: Results to split

    Returns:
        Tuple of (values, errors)
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if isinstance(result, Ok):
            values.append(result.value)
        else:
            errors.append(result.error)
    return values, errors
