"""Person value object.

A Person does not validate itself: the safe constructors in the application
layer decide whether one may be built. ``copy`` replaces fields without
re-checking the name or age.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Person:
    """Immutable record of a person's name and age."""
    name: str
    age: int

    def copy(self, **changes) -> 'Person':
        """Create a new person with the given fields replaced (not re-validated)."""
        return replace(self, **changes)
