"""Validated person construction using the Either monad.

Failures are returned as ``Left(AppError)`` values rather than raised, so a
caller can compose validation steps and decide at the boundary how each cause
is presented. Sequencing is fail-fast: the name is checked before the age and
the first failure is the one reported.
"""

import logging
from typing import List, Sequence, Tuple

from outcomes.domain.monads import Either, Left, Right, match_either
from outcomes.domain.monads.composition import lefts, rights, lift2_either
from outcomes.domain.entities import (
    AppError,
    EmptyName,
    InvalidAgeRange,
    InvalidAgeValue,
    Person,
)
from outcomes.domain.services import MIN_AGE, MAX_AGE, is_non_empty_name, is_age_in_range, parse_int
from outcomes.utils.error_manager import UnmatchedVariantError

logger = logging.getLogger(__name__)

# Ordered (name, age) inputs processed by the batch projections
PERSON_STRING_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("Tokyo", "30"),
    ("Moscow", "5o"),
    ("The Professor", "200"),
    ("Berlin", "43"),
    ("Arturo Roman", "0"),
    ("", "30"),
)


def get_name(provided_name: str) -> Either[AppError, str]:
    """
    Validate a name.

    Returns:
        Right(name) unchanged, or Left(EmptyName) if the name has no characters
    """
    if is_non_empty_name(provided_name):
        return Right(provided_name)
    return Left(EmptyName("provided name is empty"))


def get_age(provided_age: str) -> Either[AppError, int]:
    """
    Validate an age given as text.

    Args:
        provided_age: Age as typed by the user

    Returns:
        Right(age) when the text is an integer between 1 and 120 inclusive,
        Left(InvalidAgeValue) when it is not an integer, and
        Left(InvalidAgeRange) when it is an integer outside the range
    """
    def check_range(age: int) -> Either[AppError, int]:
        if is_age_in_range(age):
            return Right(age)
        return Left(
            InvalidAgeRange(f"provided age should be between {MIN_AGE}-{MAX_AGE}: {provided_age}")
        )

    return parse_int(provided_age).fold(
        lambda: Left(InvalidAgeValue(f"provided age is invalid: {provided_age}")),
        check_range,
    )


def create_person(name: str, age: str) -> Either[AppError, Person]:
    """
    Validate a name and an age and build a Person.

    Examples:
        create_person("Fred", "32")        -> Right(Person("Fred", 32))
        create_person("", "32")            -> Left(EmptyName("provided name is empty"))
        create_person("Fred", "ThirtyTwo") -> Left(InvalidAgeValue("provided age is invalid: ThirtyTwo"))
        create_person("Fred", "150")       -> Left(InvalidAgeRange("provided age should be between 1-120: 150"))
    """
    result = get_name(name).flat_map(
        lambda valid_name: get_age(age).map(lambda valid_age: Person(valid_name, valid_age))
    )
    if result.is_left():
        logger.debug(f"create_person({name!r}, {age!r}) failed: {result.unwrap_left()}")
    return result


def create_person_applicative(name: str, age: str) -> Either[AppError, Person]:
    """Same as create_person, with Person lifted over both validations."""
    return lift2_either(Person)(get_name(name), get_age(age))


def make_name_upper_case(name: str, age: str) -> Either[AppError, Person]:
    """
    Build a person and upper-case their name.

    The upper-cased copy is not re-validated; it only exists if the original
    construction succeeded.
    """
    return create_person(name, age).map(lambda person: person.copy(name=name.upper()))


def _show_error(error: AppError) -> str:
    if isinstance(error, EmptyName):
        return "Empty name supplied"
    if isinstance(error, InvalidAgeValue):
        return "Invalid age value supplied"
    if isinstance(error, InvalidAgeRange):
        return "Invalid age range supplied"
    raise UnmatchedVariantError(error, "EmptyName, InvalidAgeValue or InvalidAgeRange")


def create_person_and_show(name: str, age: str) -> str:
    """
    Render the outcome of create_person.

    A success renders the original inputs as "<name> is <age>"; each failure
    cause renders its own fixed message.
    """
    return match_either(
        create_person(name, age),
        _show_error,
        lambda _: f"{name} is {age}",
    )


def create_valid_people(
    pairs: Sequence[Tuple[str, str]] = PERSON_STRING_PAIRS,
) -> List[Person]:
    """People built successfully from ``pairs``, in input order."""
    return rights(create_person(name, age) for name, age in pairs)


def collect_errors(
    pairs: Sequence[Tuple[str, str]] = PERSON_STRING_PAIRS,
) -> List[AppError]:
    """Failure causes produced by ``pairs``, in input order."""
    return lefts(create_person(name, age) for name, age in pairs)
