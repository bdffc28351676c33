"""Domain services shared across the application layer."""

from .validation import MIN_AGE, MAX_AGE, is_non_empty_name, is_age_in_range, parse_int

__all__ = ["MIN_AGE", "MAX_AGE", "is_non_empty_name", "is_age_in_range", "parse_int"]
