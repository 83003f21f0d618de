from __future__ import annotations

"""Result type to represent success or failure of operations."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)

__all__ = [
    "Err",
    "Ok",
    "Result",
    "chain",
    "is_err",
    "is_ok",
    "map",
    "match",
    "of",
    "sequence",
    "traverse",
    "try_",
    "unwrap",
    "unwrap_or",
]


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Represents the result of an operation.

    Attributes:
        ok: True if the operation succeeded, False otherwise.
        value: The value produced on success. Never an exception.
        error: The error produced on failure. Always an exception; a plain
            string message is converted into ``Exception(message)``.
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[E] = None

    def __post_init__(self) -> None:
        if self.ok:
            if isinstance(self.value, Exception):
                raise TypeError("Ok must not be initialized with an exception.")
            if self.error is not None:
                raise TypeError("Ok cannot carry an error.")
            return

        if self.value is not None:
            raise TypeError("Err cannot carry a value.")
        if isinstance(self.error, str):
            object.__setattr__(self, "error", Exception(self.error))
        elif not isinstance(self.error, Exception):
            raise TypeError(
                "Err must be initialized with an exception or a string message."
            )

    @staticmethod
    def Ok(value: Optional[T] = None) -> "Result[T, Any]":
        """Create a successful result.

        Args:
            value: The value to store in the result.

        Returns:
            A Result instance representing success.

        Raises:
            TypeError: If ``value`` is an exception.
        """
        return Result(True, value=value)

    @staticmethod
    def Err(error: Any) -> "Result[Any, Exception]":
        """Create a failed result.

        Args:
            error: The exception to store, or a message to wrap in one.

        Returns:
            A Result instance representing failure.

        Raises:
            TypeError: If ``error`` is neither an exception nor a string.
        """
        return Result(False, error=error)

    @staticmethod
    def of(value: Any) -> "Result[Any, Exception]":
        """Err(value) if ``value`` is an exception, otherwise Ok(value)."""
        if isinstance(value, Exception):
            return Result(False, error=value)
        return Result(True, value=value)

    @staticmethod
    def sequence(results: Iterable["Result[T, E]"]) -> "Result[List[T], E]":
        return sequence(results)

    @staticmethod
    def traverse(
        fn: Callable[[T], U]
    ) -> Callable[[Iterable["Result[T, E]"]], "Result[List[U], E]"]:
        return traverse(fn)

    @staticmethod
    def try_(fn: Callable[..., Any]) -> Callable[..., "Result[Any, Exception]"]:
        return try_(fn)

    def is_ok(self) -> bool:
        return self.ok

    def is_err(self) -> bool:
        return not self.ok

    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":
        """Apply ``fn`` to the value on success; errors pass through untouched."""
        if not self.ok:
            return self  # type: ignore[return-value]
        return Result(True, value=fn(self.value))

    def chain(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Apply a result-returning ``fn`` to the value on success."""
        if not self.ok:
            return self  # type: ignore[return-value]
        return _expect_result(fn(self.value))

    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Call exactly one of the branches and return its result.

        Args:
            ok: Called with the value on success.
            err: Called with the error on failure.
        """
        if self.ok:
            return ok(self.value)
        return err(self.error)

    def unwrap(self) -> Any:
        """Return the value on success, or the error itself on failure.

        The error is returned, not raised. Check :meth:`is_ok` first, or use
        :meth:`match` or :meth:`unwrap_or`.
        """
        return self.value if self.ok else self.error

    def unwrap_or(self, fallback: T) -> T:
        return self.value if self.ok else fallback

    def _key(self) -> Tuple[bool, Any]:
        if self.ok:
            return (True, self.value)
        return (False, (type(self.error), self.error.args))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        if self.ok:
            return hash((True, self.value))
        return hash((False, type(self.error)))

    def __repr__(self) -> str:
        """Return a string representation of the result."""
        if self.ok:
            return f"Ok({self.value!r})"
        return f"Err({self.error!r})"


# Public constructor aliases
Ok = Result.Ok
Err = Result.Err


def _expect_result(value: Any) -> Result[Any, Any]:
    if not isinstance(value, Result):
        raise TypeError(
            f"chain callback must return a Result, got {type(value).__name__}."
        )
    return value


def of(value: Any) -> Result[Any, Exception]:
    return Result.of(value)


def is_ok(result: Result[Any, Any]) -> bool:
    return result.ok


def is_err(result: Result[Any, Any]) -> bool:
    return not result.ok


def map(fn: Callable[[T], U]) -> Callable[[Result[T, E]], Result[U, E]]:
    """Curried form of :meth:`Result.map`."""

    def apply(result: Result[T, E]) -> Result[U, E]:
        return result.map(fn)

    return apply


def chain(
    fn: Callable[[T], Result[U, E]]
) -> Callable[[Result[T, E]], Result[U, E]]:
    """Curried form of :meth:`Result.chain`."""

    def apply(result: Result[T, E]) -> Result[U, E]:
        return result.chain(fn)

    return apply


def match(ok: Callable[[T], U], err: Callable[[E], U]) -> Callable[[Result[T, E]], U]:
    """Curried form of :meth:`Result.match`."""

    def apply(result: Result[T, E]) -> U:
        return result.match(ok=ok, err=err)

    return apply


def unwrap(result: Result[Any, Any]) -> Any:
    return result.unwrap()


def unwrap_or(fallback: T) -> Callable[[Result[T, Any]], T]:
    """Curried form of :meth:`Result.unwrap_or`."""

    def apply(result: Result[T, Any]) -> T:
        return result.unwrap_or(fallback)

    return apply


def sequence(results: Iterable[Result[T, E]]) -> Result[List[T], E]:
    """Collect the values of ``results`` if all of them succeeded.

    Args:
        results: Any iterable of results, consumed left to right.

    Returns:
        Ok(list of values), or the first Err itself. Results after the first
        Err are not inspected.
    """
    values: List[T] = []
    for result in results:
        if not result.ok:
            return result  # type: ignore[return-value]
        values.append(result.value)
    return Result(True, value=values)


def traverse(
    fn: Callable[[T], U]
) -> Callable[[Iterable[Result[T, E]]], Result[List[U], E]]:
    """Build a function mapping ``fn`` over a list of results.

    Failure is detected from the variant, never from the shape of the value,
    and ``fn`` is only called for values preceding the first Err.
    """

    def apply(results: Iterable[Result[T, E]]) -> Result[List[U], E]:
        values: List[U] = []
        for result in results:
            if not result.ok:
                return result  # type: ignore[return-value]
            values.append(fn(result.value))
        return Result(True, value=values)

    return apply


def try_(fn: Callable[..., Any]) -> Callable[..., Result[Any, Exception]]:
    """Wrap ``fn`` so that it returns a Result instead of raising.

    The wrapped function returns Err(exc) when ``fn`` raises an Exception and
    :func:`of` applied to the return value otherwise. A None or falsy return
    value is still Ok.
    """

    def wrapped(*args: Any, **kwargs: Any) -> Result[Any, Exception]:
        try:
            value = fn(*args, **kwargs)
        except Exception as exc:
            return Result(False, error=exc)
        return Result.of(value)

    return wrapped
