"""Failure causes reported by the validated person constructors.

The set is closed: EmptyName, InvalidAgeValue and InvalidAgeRange are the only
subclasses, and consumers that dispatch on them reject anything else.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class AppError(ABC):
    """Base class for recoverable application errors."""
    message: str


@dataclass(frozen=True)
class EmptyName(AppError):
    """The provided name was empty."""


@dataclass(frozen=True)
class InvalidAgeValue(AppError):
    """The provided age is not an integer."""


@dataclass(frozen=True)
class InvalidAgeRange(AppError):
    """The provided age is an integer outside the accepted range."""


APP_ERROR_TYPES = (EmptyName, InvalidAgeValue, InvalidAgeRange)
