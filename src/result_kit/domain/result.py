"""Result pattern for explicit error handling.

Provides the Ok and Err variants of a closed Result type, used to return
failures as values instead of raising exceptions. Every combinator is
defined once on ResultBase; Ok and Err only carry their payload.

Example:
    >>> def divide(a: int, b: int) -> Result[int, str]:
    ...     if b == 0:
    ...         return Err("Cannot divide by zero")
    ...     return Ok(a // b)
    >>> divide(10, 2).match(lambda v: f"Result: {v}", lambda e: f"Error: {e}")
    'Result: 5'
    >>> match divide(10, 0):
    ...     case Ok(value):
    ...         print(value)
    ...     case Err(error):
    ...         print(error)
    Cannot divide by zero
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, final

from result_kit.domain.exceptions import (
    ClosedResultHierarchyError,
    InvalidResultStateError,
)

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")

_VARIANT_NAMES = frozenset({"Ok", "Err"})


class ResultBase(Generic[T, E]):
    """Common base of Ok and Err.

    The family is closed: only Ok and Err, defined in this module, may
    derive from it. Annotate with the ``Result`` alias rather than this
    class so type checkers can verify ``match`` statements are exhaustive.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANT_NAMES:
            raise ClosedResultHierarchyError(cls.__qualname__)

    # =========================================================================
    # Introspection
    # =========================================================================
    def is_ok(self) -> bool:
        """Check if result is success."""
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Check if result is failure."""
        return isinstance(self, Err)

    def unwrap_value(self) -> T:
        """Get the success value.

        Returns:
            The wrapped value

        Raises:
            InvalidResultStateError: If called on Err
        """
        if isinstance(self, Ok):
            return self.value
        raise InvalidResultStateError("unwrap_value", "Err")

    def unwrap_error(self) -> E:
        """Get the error value.

        Returns:
            The wrapped error

        Raises:
            InvalidResultStateError: If called on Ok
        """
        if isinstance(self, Err):
            return self.error
        raise InvalidResultStateError("unwrap_error", "Ok")

    # =========================================================================
    # Pattern dispatch
    # =========================================================================
    def match(self, on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:
        """Dispatch on the variant.

        Exactly one of the callbacks is invoked, once, with the payload of
        the variant held. Exceptions raised by the callback propagate.

        Args:
            on_ok: Called with the value if this is Ok
            on_err: Called with the error if this is Err

        Returns:
            Whatever the invoked callback returns

        Example:
            >>> Ok(5).match(lambda v: v * 2, lambda e: 0)
            10
            >>> Err("x").match(lambda v: 0, lambda e: len(e))
            1
        """
        if isinstance(self, Ok):
            return on_ok(self.value)
        return on_err(self.unwrap_error())

    def fold(self, on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:
        """Collapse both cases into a single value. Alias of ``match``."""
        return self.match(on_ok, on_err)

    def on_ok(self, callback: Callable[[T], Any]) -> None:
        """Call ``callback`` with the value if this is Ok."""
        if isinstance(self, Ok):
            callback(self.value)

    def on_err(self, callback: Callable[[E], Any]) -> None:
        """Call ``callback`` with the error if this is Err."""
        if isinstance(self, Err):
            callback(self.error)

    # =========================================================================
    # Transformation
    # =========================================================================
    def map(self, transform: Callable[[T], R]) -> Result[R, E]:
        """Transform the success value.

        Args:
            transform: Applied to the value if this is Ok

        Returns:
            Ok with the transformed value, or an Err carrying the same error

        Example:
            >>> Ok(5).map(lambda v: v * 2)
            Ok(10)
            >>> Err("e").map(lambda v: v * 2)
            Err('e')
        """
        if isinstance(self, Ok):
            return Ok(transform(self.value))
        return Err(self.unwrap_error())

    def map_err(self, transform: Callable[[E], F]) -> Result[T, F]:
        """Transform the error value.

        Args:
            transform: Applied to the error if this is Err

        Returns:
            Err with the transformed error, or an Ok carrying the same value
        """
        if isinstance(self, Err):
            return Err(transform(self.error))
        return Ok(self.unwrap_value())

    def flat_map(self, transform: Callable[[T], Result[R, E]]) -> Result[R, E]:
        """Chain an operation that can itself fail.

        On Ok, returns ``transform(value)`` as is. On Err, returns an Err
        with the same error without calling ``transform``.

        Args:
            transform: Result-returning function applied to the value

        Returns:
            The chained result

        Example:
            >>> Ok(5).flat_map(lambda v: Ok(v * 2)).flat_map(lambda v: Ok(v + 10))
            Ok(20)
            >>> Err("boom").flat_map(lambda v: Ok(v + 1))
            Err('boom')
        """
        if isinstance(self, Ok):
            return transform(self.value)
        return Err(self.unwrap_error())

    def unwrap_or(self, default: T) -> T:
        """Get the value or default."""
        if isinstance(self, Ok):
            return self.value
        return default

    def unwrap_or_else(self, compute: Callable[[E], T]) -> T:
        """Get the value or compute one from the error.

        Args:
            compute: Called with the error if this is Err

        Returns:
            The wrapped value, or ``compute(error)``
        """
        if isinstance(self, Ok):
            return self.value
        return compute(self.unwrap_error())

    # =========================================================================
    # Representation
    # =========================================================================
    def __str__(self) -> str:
        return self.match(
            lambda value: f"Ok({value})",
            lambda error: f"Err({error})",
        )

    def __repr__(self) -> str:
        return self.match(
            lambda value: f"Ok({value!r})",
            lambda error: f"Err({error!r})",
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ResultBase):
            return NotImplemented
        return self.match(
            lambda value: isinstance(other, Ok) and other.value == value,
            lambda error: isinstance(other, Err) and other.error == error,
        )

    def __hash__(self) -> int:
        return self.match(
            lambda value: hash(("Ok", value)),
            lambda error: hash(("Err", error)),
        )


@final
@dataclass(frozen=True, eq=False, repr=False)
class Ok(ResultBase[T, E]):
    """Successful result.

    Example:
        >>> result: Result[int, str] = Ok(42)
        >>> result.unwrap_value()
        42
    """

    value: T


@final
@dataclass(frozen=True, eq=False, repr=False)
class Err(ResultBase[T, E]):
    """Failed result.

    Example:
        >>> result: Result[int, str] = Err("Something went wrong")
        >>> result.unwrap_error()
        'Something went wrong'
    """

    error: E


# Type alias
Result = Ok[T, E] | Err[T, E]


def ok(value: T) -> Ok[T, Any]:
    """Create an Ok result.

    Args:
        value: The success value

    Returns:
        Ok wrapping the value
    """
    return Ok(value)


def err(error: E) -> Err[Any, E]:
    """Create an Err result.

    Args:
        error: The error value

    Returns:
        Err wrapping the error
    """
    return Err(error)

