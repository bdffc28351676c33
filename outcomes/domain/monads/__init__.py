"""Monadic types for functional programming in outcomes."""

from .maybe import Maybe, Some, Nothing, some, nothing, from_optional, match_maybe
from .either import Either, Left, Right, left, right, match_either

__all__ = [
    # Maybe monad
    'Maybe', 'Some', 'Nothing', 'some', 'nothing', 'from_optional', 'match_maybe',
    # Either monad
    'Either', 'Left', 'Right', 'left', 'right', 'match_either',
]
