"""Result type for explicit error handling without exceptions.

A ``Result[V, E]`` is exactly one of ``Success(value)`` or ``Failure(error)``.
Both variants are frozen, so every transformation returns a new instance.

Steps are chained with ``on_success``. A chain runs left to right and stops
at the first failure: later steps are never called and the final result
carries the error of the step that failed, unchanged::

    result = (
        success(15)
        .on_success(must_be_positive)
        .on_success(must_be_even)      # fails here
        .on_success(must_be_below_100) # never called
    )

Python has no implicit conversions, so the ergonomic "return a value or an
error" style is provided by ``coerce`` and the ``returns_result`` decorator.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from src.railway.error import Error

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    value: T

    @property
    def error(self) -> None:
        return None

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def value_or(self, default: T) -> T:
        return self.value

    def on_success(self, fn: Callable[[T], Union[Result[U, E], U]]) -> Result[U, E]:
        """Run the next step with the held value.

        A ``Success`` or ``Failure`` returned by ``fn`` is passed through as
        is; any other return value is wrapped in ``Success``.
        """
        outcome = fn(self.value)
        if isinstance(outcome, (Success, Failure)):
            return outcome  # type: ignore[return-value]
        return Success(outcome)

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:  # type: ignore[type-var]
        return Success(fn(self.value))

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[Any], R]) -> R:
        return on_success(self.value)


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Failed result containing an error value."""

    error: E

    @property
    def value(self) -> None:
        # Absent rather than raising; check is_success() before trusting it.
        return None

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def value_or(self, default: T) -> T:  # type: ignore[type-var]
        return default

    def on_success(self, fn: Callable[[Any], object]) -> Result[Any, E]:
        return Failure(self.error)

    def map(self, fn: Callable[[Any], object]) -> Result[Any, E]:
        return Failure(self.error)

    def match(self, on_success: Callable[[Any], R], on_failure: Callable[[E], R]) -> R:
        return on_failure(self.error)


Result = Union[Success[T], Failure[E]]


def success(value: T) -> Success[T]:
    """Wrap ``value`` as a successful result."""
    return Success(value)


def failure(error: E) -> Failure[E]:
    """Wrap ``error`` as a failed result."""
    return Failure(error)


def _check_error_type(error_type: object) -> None:
    if not isinstance(error_type, type):
        raise TypeError(f"error_type must be a class, got {error_type!r}")
    if error_type is object:
        raise TypeError("error_type=object cannot be told apart from success values")


def coerce(raw: object, error_type: type = Error) -> Result[Any, Any]:
    """Turn a bare return value into a Result.

    Existing results pass through unchanged, instances of ``error_type``
    become ``Failure`` and everything else becomes ``Success``. A success
    value that is itself an ``error_type`` instance is indistinguishable
    from an error here; return ``Success(...)`` explicitly in that case.

    Raises:
        TypeError: If ``error_type`` is not a class, or is ``object``.
    """
    _check_error_type(error_type)
    if isinstance(raw, (Success, Failure)):
        return raw
    if isinstance(raw, error_type):
        return Failure(raw)
    return Success(raw)


def returns_result(
    error_type: type = Error,
) -> Callable[[Callable[..., object]], Callable[..., Result[Any, Any]]]:
    """Decorator letting a function ``return value`` or ``return error``.

    Args:
        error_type: Return values of this type are treated as failures.

    Raises:
        TypeError: If ``error_type`` is not a class, or is ``object``
            (every value would be read as a failure).
    """
    _check_error_type(error_type)

    def decorator(fn: Callable[..., object]) -> Callable[..., Result[Any, Any]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[Any, Any]:
            return coerce(fn(*args, **kwargs), error_type)

        return wrapper

    return decorator
