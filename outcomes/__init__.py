"""
outcomes: optional values and recoverable errors as data

This package provides Maybe and Either monads and the safe constructors
for traffic lights and people built on top of them.
"""

__version__ = "0.1.0"

from .domain.monads import Maybe, Some, Nothing, Either, Left, Right
from .domain.entities import TrafficLight, Person, AppError, EmptyName, InvalidAgeValue, InvalidAgeRange

__all__ = [
    "__version__",
    "Maybe",
    "Some",
    "Nothing",
    "Either",
    "Left",
    "Right",
    "TrafficLight",
    "Person",
    "AppError",
    "EmptyName",
    "InvalidAgeValue",
    "InvalidAgeRange",
]
