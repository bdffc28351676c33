"""Either monad for representing values with two possible types."""

from __future__ import annotations
from typing import TypeVar, Generic, Callable, Any, Iterator
from abc import ABC, abstractmethod
from dataclasses import dataclass

from outcomes.utils.error_manager import UnwrapError, UnmatchedVariantError
from .maybe import Maybe, Some, Nothing

L = TypeVar('L')  # Left type
R = TypeVar('R')  # Right type
T = TypeVar('T')
U = TypeVar('U')


class Either(ABC, Generic[L, R]):
    """
    Either monad representing a value that can be one of two types.
    By convention, Left represents the error case and Right the success case.

    Sequencing with ``flat_map`` is fail-fast: once a Left is produced the
    remaining steps are skipped and that Left is returned as is.
    """

    @abstractmethod
    def is_left(self) -> bool:
        """Check if this is a Left value."""
        pass

    @abstractmethod
    def is_right(self) -> bool:
        """Check if this is a Right value."""
        pass

    @abstractmethod
    def map(self, f: Callable[[R], T]) -> Either[L, T]:
        """Map over the Right value."""
        pass

    @abstractmethod
    def map_left(self, f: Callable[[L], T]) -> Either[T, R]:
        """Map over the Left value."""
        pass

    @abstractmethod
    def flat_map(self, f: Callable[[R], Either[L, T]]) -> Either[L, T]:
        """Monadic bind for Either."""
        pass

    @abstractmethod
    def fold(self, left_f: Callable[[L], T], right_f: Callable[[R], T]) -> T:
        """Fold the Either into a single value."""
        pass

    @abstractmethod
    def swap(self) -> Either[R, L]:
        """Swap Left and Right."""
        pass

    @abstractmethod
    def unwrap(self) -> R:
        """Get the Right value, raising if this is a Left."""
        pass

    @abstractmethod
    def unwrap_left(self) -> L:
        """Get the Left value, raising if this is a Right."""
        pass

    def get_or_else(self, default: R) -> R:
        """Get Right value or default."""
        return self.fold(lambda _: default, lambda x: x)

    def to_maybe(self) -> Maybe[R]:
        """Convert to Maybe, losing the failure cause."""
        return self.fold(lambda _: Nothing(), lambda r: Some(r))

    def __iter__(self) -> Iterator[R]:
        """Allow use in for comprehensions."""
        if self.is_right():
            yield self.unwrap()


@dataclass(frozen=True)
class Left(Either[L, R]):
    """Left variant of Either."""
    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def map(self, f: Callable[[R], T]) -> Either[L, T]:
        return self

    def map_left(self, f: Callable[[L], T]) -> Either[T, R]:
        return Left(f(self.value))

    def flat_map(self, f: Callable[[R], Either[L, T]]) -> Either[L, T]:
        return self

    def fold(self, left_f: Callable[[L], T], right_f: Callable[[R], T]) -> T:
        return left_f(self.value)

    def swap(self) -> Either[R, L]:
        return Right(self.value)

    def unwrap(self) -> R:
        raise UnwrapError(f"Called unwrap on Left value: {self.value}")

    def unwrap_left(self) -> L:
        return self.value


@dataclass(frozen=True)
class Right(Either[L, R]):
    """Right variant of Either."""
    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def map(self, f: Callable[[R], T]) -> Either[L, T]:
        return Right(f(self.value))

    def map_left(self, f: Callable[[L], T]) -> Either[T, R]:
        return Right(self.value)

    def flat_map(self, f: Callable[[R], Either[L, T]]) -> Either[L, T]:
        return f(self.value)

    def fold(self, left_f: Callable[[L], T], right_f: Callable[[R], T]) -> T:
        return right_f(self.value)

    def swap(self) -> Either[R, L]:
        return Left(self.value)

    def unwrap(self) -> R:
        return self.value

    def unwrap_left(self) -> L:
        raise UnwrapError(f"Called unwrap_left on Right value: {self.value}")


# Helper functions
def left(value: L) -> Left[L, Any]:
    """Create a Left value."""
    return Left(value)


def right(value: R) -> Right[Any, R]:
    """Create a Right value."""
    return Right(value)


def match_either(
    either: Either[L, R],
    left_f: Callable[[L], T],
    right_f: Callable[[R], T],
) -> T:
    """Eliminate an Either with one handler per variant, rejecting foreign values."""
    if isinstance(either, Right):
        return right_f(either.value)
    if isinstance(either, Left):
        return left_f(either.value)
    raise UnmatchedVariantError(either, "Left or Right")
