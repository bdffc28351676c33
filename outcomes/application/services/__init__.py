"""Safe-constructor services."""

from .optional_constructors import (
    safe_mean,
    mk_traffic_light,
    mk_traffic_light_then_show,
    mk_person,
    mk_person_then_change_name,
)
from .person_validation import (
    PERSON_STRING_PAIRS,
    get_name,
    get_age,
    create_person,
    create_person_applicative,
    make_name_upper_case,
    create_person_and_show,
    create_valid_people,
    collect_errors,
)

__all__ = [
    "safe_mean",
    "mk_traffic_light",
    "mk_traffic_light_then_show",
    "mk_person",
    "mk_person_then_change_name",
    "PERSON_STRING_PAIRS",
    "get_name",
    "get_age",
    "create_person",
    "create_person_applicative",
    "make_name_upper_case",
    "create_person_and_show",
    "create_valid_people",
    "collect_errors",
]
