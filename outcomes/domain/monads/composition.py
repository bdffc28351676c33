"""Utilities for composing monadic operations.

This module provides helper functions and combinators for working with
lists of Maybe and Either values.
"""

from typing import TypeVar, Callable, Iterable
from functools import reduce

from .maybe import Maybe, some, nothing
from .either import Either, Left, Right, right

T = TypeVar('T')
U = TypeVar('U')
L = TypeVar('L')  # Left type for Either
R = TypeVar('R')
V = TypeVar('V')  # Additional type variable


# Maybe combinators

def sequence_maybes(maybes: Iterable[Maybe[T]]) -> Maybe[list[T]]:
    """Convert a list of Maybes into a Maybe of list.

    Returns Nothing if any Maybe is Nothing.
    """
    values = []
    for maybe in maybes:
        if maybe.is_nothing():
            return nothing()
        values.append(maybe.unwrap())
    return some(values)


def cat_maybes(maybes: Iterable[Maybe[T]]) -> list[T]:
    """Extract all Some values from a list of Maybes."""
    return [value for maybe in maybes for value in maybe]


def first_some(maybes: Iterable[Maybe[T]]) -> Maybe[T]:
    """Return the first Some value, or Nothing if all are Nothing."""
    for maybe in maybes:
        if maybe.is_some():
            return maybe
    return nothing()


# Either combinators

def sequence_eithers(eithers: Iterable[Either[L, R]]) -> Either[L, list[R]]:
    """Convert a list of Eithers into an Either of list.

    Returns first Left encountered.
    """
    rights_ = []
    for either in eithers:
        if either.is_left():
            return Left(either.unwrap_left())
        rights_.append(either.unwrap())
    return right(rights_)


def traverse_either(
    f: Callable[[T], Either[L, U]],
    items: Iterable[T]
) -> Either[L, list[U]]:
    """Apply an Either-returning function to each item and collect results."""
    return sequence_eithers(f(item) for item in items)


def partition_eithers(
    eithers: Iterable[Either[L, R]]
) -> tuple[list[L], list[R]]:
    """Partition a list of Eithers into lefts and rights."""
    lefts_ = []
    rights_ = []

    for either in eithers:
        either.fold(
            lambda l: lefts_.append(l),
            lambda r: rights_.append(r)
        )

    return lefts_, rights_


def lefts(eithers: Iterable[Either[L, R]]) -> list[L]:
    """Keep only the Left values, in input order."""
    return [either.value for either in eithers if isinstance(either, Left)]


def rights(eithers: Iterable[Either[L, R]]) -> list[R]:
    """Keep only the Right values, in input order."""
    return [either.value for either in eithers if isinstance(either, Right)]


# General combinators

def compose(*functions: Callable) -> Callable:
    """Compose functions from right to left.

    compose(f, g, h)(x) = f(g(h(x)))
    """
    def composed(x):
        return reduce(lambda acc, f: f(acc), reversed(functions), x)
    return composed


def pipe(*functions: Callable) -> Callable:
    """Compose functions from left to right.

    pipe(f, g, h)(x) = h(g(f(x)))
    """
    def piped(x):
        return reduce(lambda acc, f: f(acc), functions, x)
    return piped


# Kleisli composition for Either monad
def kleisli_either(
    f: Callable[[T], Either[L, U]],
    g: Callable[[U], Either[L, V]]
) -> Callable[[T], Either[L, V]]:
    """Compose two Either-returning functions."""
    return lambda x: f(x).flat_map(g)


# Applicative style operations
def lift2_either(
    f: Callable[[T, U], V]
) -> Callable[[Either[L, T], Either[L, U]], Either[L, V]]:
    """Lift a binary function to work with Eithers, keeping the first Left."""
    def lifted(ea: Either[L, T], eb: Either[L, U]) -> Either[L, V]:
        return ea.flat_map(lambda a: eb.map(lambda b: f(a, b)))
    return lifted


def lift2_maybe(
    f: Callable[[T, U], V]
) -> Callable[[Maybe[T], Maybe[U]], Maybe[V]]:
    """Lift a binary function to work with Maybes."""
    def lifted(ma: Maybe[T], mb: Maybe[U]) -> Maybe[V]:
        return ma.flat_map(lambda a: mb.map(lambda b: f(a, b)))
    return lifted
