"""Domain entities for outcomes.

This package contains the value objects the safe constructors produce
and the failure causes they report.
"""

from .traffic_light import TrafficLight
from .person import Person
from .app_error import AppError, EmptyName, InvalidAgeValue, InvalidAgeRange, APP_ERROR_TYPES

__all__ = [
    "TrafficLight",
    "Person",
    "AppError",
    "EmptyName",
    "InvalidAgeValue",
    "InvalidAgeRange",
    "APP_ERROR_TYPES",
]
