"""Safe constructors built on the Maybe monad.

Each function turns raw input into a domain value wrapped in ``Some`` or
reports plain absence with ``Nothing``; no cause is attached to a failure.
"""

import logging
from typing import Sequence

from outcomes.domain.monads import Maybe, Some, Nothing, match_maybe
from outcomes.domain.entities import Person, TrafficLight
from outcomes.domain.services import is_non_empty_name, is_age_in_range
from outcomes.utils.error_manager import UnmatchedVariantError

logger = logging.getLogger(__name__)

_TRAFFIC_LIGHTS = {
    "red": TrafficLight.RED,
    "green": TrafficLight.GREEN,
    "yellow": TrafficLight.YELLOW,
}


def safe_mean(nums: Sequence[int]) -> Maybe[float]:
    """
    Mean of a sequence of integers.

    Args:
        nums: Integers to average

    Returns:
        Some(sum / count) computed with true division, or Nothing when empty
    """
    if len(nums) == 0:
        logger.debug("safe_mean called with an empty sequence")
        return Nothing()
    return Some(sum(nums) / len(nums))


def mk_traffic_light(text: str) -> Maybe[TrafficLight]:
    """
    Build a TrafficLight from its exact lowercase name.

    Matching is case-sensitive: "red" is accepted, "Red" is not.
    """
    light = _TRAFFIC_LIGHTS.get(text)
    if light is None:
        logger.debug(f"Unknown traffic light: {text!r}")
        return Nothing()
    return Some(light)


def _show_light(light: TrafficLight) -> str:
    if light is TrafficLight.RED:
        return "Traffic light is red"
    if light is TrafficLight.YELLOW:
        return "Traffic light is yellow"
    if light is TrafficLight.GREEN:
        return "Traffic light is green"
    raise UnmatchedVariantError(light, "a TrafficLight member")


def mk_traffic_light_then_show(text: str) -> str:
    """
    Render the outcome of mk_traffic_light.

    Examples:
        "red"    -> "Traffic light is red"
        "bob"    -> "Traffic light `bob` is invalid"
    """
    return match_maybe(
        mk_traffic_light(text),
        lambda: f"Traffic light `{text}` is invalid",
        _show_light,
    )


def mk_person(name: str, age: int) -> Maybe[Person]:
    """
    Build a Person when the name is non-empty and the age is within range.

    Args:
        name: Person's name, must have at least one character
        age: Person's age, must be between 1 and 120 inclusive

    Returns:
        Some(Person) on valid input, Nothing otherwise
    """
    if is_non_empty_name(name) and is_age_in_range(age):
        return Some(Person(name, age))
    logger.debug(f"Rejected person name={name!r} age={age}")
    return Nothing()


def mk_person_then_change_name(old_name: str, age: int, new_name: str) -> Maybe[Person]:
    """
    Build a person, then rebuild it under a new name keeping the original age.

    The second construction only runs if the first succeeded; either failure
    yields Nothing.
    """
    return mk_person(old_name, age).flat_map(lambda old: mk_person(new_name, old.age))
