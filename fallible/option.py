from __future__ import annotations

"""Option type to represent a value that may or may not be present."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

__all__ = [
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
    "filter",
    "flat_map",
    "is_none",
    "is_some",
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
class Option(Generic[T]):
    """Represents an optional value.

    Attributes:
        some: True if a value is present, False otherwise.
        value: The present value, never None when ``some`` is True.
    """

    some: bool
    value: Optional[T] = None

    def __post_init__(self) -> None:
        if self.some and self.value is None:
            raise TypeError("Some must be initialized with a non-None value.")
        if not self.some and self.value is not None:
            raise TypeError("Nothing cannot carry a value.")

    @staticmethod
    def Some(value: T) -> "Option[T]":
        """Create a present option.

        Args:
            value: The value to wrap. Must not be None.

        Returns:
            An Option instance holding ``value``.

        Raises:
            TypeError: If ``value`` is None.
        """
        return Option(True, value=value)

    @staticmethod
    def Nothing() -> "Option[Any]":
        """Return the shared absent option."""
        return NOTHING

    @staticmethod
    def of(value: Optional[T]) -> "Option[T]":
        """Wrap a possibly absent value.

        Args:
            value: Any value, possibly None.

        Returns:
            Nothing if ``value`` is None, otherwise Some(value).
        """
        return NOTHING if value is None else Option(True, value=value)

    @staticmethod
    def sequence(options: Iterable["Option[T]"]) -> "Option[List[T]]":
        return sequence(options)

    @staticmethod
    def traverse(
        fn: Callable[[T], U]
    ) -> Callable[[Iterable["Option[T]"]], "Option[List[U]]"]:
        return traverse(fn)

    @staticmethod
    def try_(fn: Callable[..., Optional[U]]) -> Callable[..., "Option[U]"]:
        return try_(fn)

    def is_some(self) -> bool:
        return self.some

    def is_none(self) -> bool:
        return not self.some

    def map(self, fn: Callable[[T], U]) -> "Option[U]":
        """Apply ``fn`` to the value if present.

        Raises:
            TypeError: If ``fn`` returns None. Use :meth:`flat_map` to
                signal absence.
        """
        if not self.some:
            return NOTHING
        return Option(True, value=fn(self.value))

    def flat_map(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Apply an option-returning ``fn`` to the value if present."""
        if not self.some:
            return NOTHING
        return _expect_option(fn(self.value))

    def filter(self, predicate: Callable[[T], Any]) -> "Option[T]":
        if self.some and predicate(self.value):
            return self
        return NOTHING

    def match(self, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Call exactly one of the branches and return its result.

        Args:
            some: Called with the value when present.
            none: Called without arguments when absent.
        """
        if self.some:
            return some(self.value)
        return none()

    def unwrap(self) -> Optional[T]:
        """Return the value, or None when absent.

        The result must still be treated as possibly absent. Prefer
        :meth:`unwrap_or` or :meth:`match`.
        """
        return self.value

    def unwrap_or(self, fallback: T) -> T:
        return self.value if self.some else fallback

    def __repr__(self) -> str:
        """Return a string representation of the option."""
        if self.some:
            return f"Some({self.value!r})"
        return "Nothing"


NOTHING: Option[Any] = Option(False)

# Public constructor aliases
Some = Option.Some
Nothing = NOTHING


def _expect_option(value: Any) -> Option[Any]:
    if not isinstance(value, Option):
        raise TypeError(
            f"flat_map callback must return an Option, got {type(value).__name__}."
        )
    return value


def of(value: Optional[T]) -> Option[T]:
    """Nothing if ``value`` is None, otherwise Some(value)."""
    return Option.of(value)


def is_some(option: Option[Any]) -> bool:
    return option.some


def is_none(option: Option[Any]) -> bool:
    return not option.some


def map(fn: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    """Curried form of :meth:`Option.map`."""

    def apply(option: Option[T]) -> Option[U]:
        return option.map(fn)

    return apply


def flat_map(fn: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    """Curried form of :meth:`Option.flat_map`."""

    def apply(option: Option[T]) -> Option[U]:
        return option.flat_map(fn)

    return apply


def filter(predicate: Callable[[T], Any]) -> Callable[[Option[T]], Option[T]]:
    """Curried form of :meth:`Option.filter`."""

    def apply(option: Option[T]) -> Option[T]:
        return option.filter(predicate)

    return apply


def match(
    some: Callable[[T], U], none: Callable[[], U]
) -> Callable[[Option[T]], U]:
    """Curried form of :meth:`Option.match`."""

    def apply(option: Option[T]) -> U:
        return option.match(some=some, none=none)

    return apply


def unwrap(option: Option[T]) -> Optional[T]:
    return option.unwrap()


def unwrap_or(fallback: T) -> Callable[[Option[T]], T]:
    """Curried form of :meth:`Option.unwrap_or`."""

    def apply(option: Option[T]) -> T:
        return option.unwrap_or(fallback)

    return apply


def sequence(options: Iterable[Option[T]]) -> Option[List[T]]:
    """Collect the values of ``options`` if all of them are present.

    Stops at the first Nothing without looking at the remaining options.

    Args:
        options: Any iterable of options, consumed left to right.

    Returns:
        Some(list of values), or Nothing if any option is absent.
    """
    values: List[T] = []
    for option in options:
        if not option.some:
            return NOTHING
        values.append(option.value)
    return Option(True, value=values)


def traverse(
    fn: Callable[[T], U]
) -> Callable[[Iterable[Option[T]]], Option[List[U]]]:
    """Build a function mapping ``fn`` over a list of options.

    ``fn`` is only called for values preceding the first Nothing.
    """

    def apply(options: Iterable[Option[T]]) -> Option[List[U]]:
        values: List[U] = []
        for option in options:
            if not option.some:
                return NOTHING
            values.append(fn(option.value))
        return Option(True, value=values)

    return apply


def try_(fn: Callable[..., Optional[U]]) -> Callable[..., Option[U]]:
    """Wrap ``fn`` so that it returns an Option instead of raising.

    The wrapped function returns Nothing when ``fn`` raises an Exception or
    returns None, and Some(result) otherwise.
    """

    def wrapped(*args: Any, **kwargs: Any) -> Option[U]:
        try:
            result = fn(*args, **kwargs)
        except Exception:
            return NOTHING
        return Option.of(result)

    return wrapped
