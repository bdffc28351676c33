"""Unit tests for monadic types."""

import pytest

from outcomes.domain.monads import (
    Maybe, Some, Nothing, some, nothing, match_maybe,
    Either, Left, Right, left, right, match_either,
)
from outcomes.domain.monads.maybe import from_optional, lift_maybe
from outcomes.domain.monads.composition import (
    sequence_maybes, cat_maybes, first_some,
    sequence_eithers, partition_eithers, traverse_either,
    lefts, rights, lift2_either, lift2_maybe,
    compose, pipe, kleisli_either
)
from outcomes.utils.error_manager import UnwrapError, UnmatchedVariantError


class TestMaybe:
    """Tests for Maybe monad."""

    def test_some_creation_and_access(self):
        maybe = some(42)
        assert maybe.is_some()
        assert not maybe.is_nothing()
        assert maybe.get_or_else(0) == 42
        assert maybe.unwrap() == 42
        assert maybe.to_optional() == 42

    def test_nothing_creation_and_access(self):
        maybe = nothing()
        assert maybe.is_nothing()
        assert not maybe.is_some()
        assert maybe.get_or_else(0) == 0
        assert maybe.to_optional() is None

    def test_nothing_unwrap_raises(self):
        with pytest.raises(UnwrapError):
            nothing().unwrap()

    def test_equality(self):
        assert some(1) == Some(1)
        assert some(1) != some(2)
        assert nothing() == Nothing()
        assert some(None) != nothing()
        assert hash(nothing()) == hash(Nothing())

    def test_some_is_immutable(self):
        maybe = some(1)
        with pytest.raises(AttributeError):
            maybe.value = 2

    def test_map_on_some(self):
        maybe = some(5).map(lambda x: x * 2)
        assert maybe == some(10)

    def test_map_on_nothing_does_not_call_function(self):
        calls = []
        maybe = nothing().map(lambda x: calls.append(x))
        assert maybe.is_nothing()
        assert calls == []

    def test_flat_map_on_some(self):
        assert some(5).flat_map(lambda x: some(x * 2)) == some(10)
        assert some(5).flat_map(lambda x: nothing()).is_nothing()

    def test_flat_map_on_nothing(self):
        assert nothing().flat_map(lambda x: some(x)).is_nothing()

    def test_fold(self):
        assert some(5).fold(lambda: 0, lambda v: v * 2) == 10
        assert nothing().fold(lambda: 0, lambda v: v * 2) == 0

    def test_filter(self):
        assert some(5).filter(lambda x: x > 3) == some(5)
        assert some(5).filter(lambda x: x > 10).is_nothing()
        assert nothing().filter(lambda x: True).is_nothing()

    def test_or_else(self):
        assert some(5).or_else(some(10)).get_or_else(0) == 5
        assert nothing().or_else(some(10)).get_or_else(0) == 10

    def test_iteration(self):
        assert list(some(3)) == [3]
        assert list(nothing()) == []

    def test_from_optional(self):
        assert from_optional(42) == some(42)
        assert from_optional(0) == some(0)
        assert from_optional(None).is_nothing()

    def test_lift_maybe(self):
        double = lift_maybe(lambda x: x * 2)
        assert double(some(4)) == some(8)
        assert double(nothing()).is_nothing()

    def test_match_maybe(self):
        assert match_maybe(some("a"), lambda: "none", lambda v: v + "!") == "a!"
        assert match_maybe(nothing(), lambda: "none", lambda v: v + "!") == "none"

    def test_match_maybe_rejects_foreign_values(self):
        with pytest.raises(UnmatchedVariantError):
            match_maybe(None, lambda: "none", lambda v: v)

    def test_maybe_is_abstract(self):
        with pytest.raises(TypeError):
            Maybe()


class TestEither:
    """Tests for Either monad."""

    def test_left_creation_and_access(self):
        either = left("error")
        assert either.is_left()
        assert not either.is_right()
        assert either.get_or_else("default") == "default"
        assert either.unwrap_left() == "error"

    def test_right_creation_and_access(self):
        either = right(42)
        assert either.is_right()
        assert not either.is_left()
        assert either.get_or_else(0) == 42
        assert either.unwrap() == 42

    def test_unwrap_wrong_side_raises(self):
        with pytest.raises(UnwrapError):
            left("error").unwrap()
        with pytest.raises(UnwrapError):
            right(1).unwrap_left()

    def test_variants_are_distinct(self):
        assert Left(1) != Right(1)
        assert Left(1) == left(1)

    def test_map_on_right(self):
        either = right(5).map(lambda x: x * 2)
        assert either.is_right()
        assert either.fold(lambda l: 0, lambda r: r) == 10

    def test_map_on_left(self):
        either = left("error").map(lambda x: x * 2)
        assert either.is_left()
        assert either.fold(lambda l: l, lambda r: 0) == "error"

    def test_map_left(self):
        either = left("error").map_left(lambda x: x.upper())
        assert either == left("ERROR")
        assert right(1).map_left(lambda x: x.upper()) == right(1)

    def test_flat_map(self):
        either = right(5).flat_map(lambda x: right(x * 2))
        assert either.fold(lambda l: 0, lambda r: r) == 10

        either = right(5).flat_map(lambda x: left("failed"))
        assert either.is_left()
        assert either.fold(lambda l: l, lambda r: "") == "failed"

    def test_flat_map_short_circuits_on_left(self):
        calls = []

        def step(x):
            calls.append(x)
            return right(x)

        either = left("first").flat_map(step).flat_map(step)
        assert either == left("first")
        assert calls == []

    def test_left_is_propagated_as_is(self):
        failure = left("error")
        assert failure.map(lambda x: x * 2) is failure
        assert failure.flat_map(lambda x: right(x)) is failure

    def test_swap(self):
        either = right(42).swap()
        assert either.is_left()
        assert either.fold(lambda l: l, lambda r: 0) == 42

        either = left("error").swap()
        assert either.is_right()
        assert either.fold(lambda l: "", lambda r: r) == "error"

    def test_to_maybe(self):
        assert right(42).to_maybe() == some(42)
        assert left("error").to_maybe().is_nothing()

    def test_iteration(self):
        assert list(right(1)) == [1]
        assert list(left("error")) == []

    def test_match_either(self):
        assert match_either(right(2), lambda e: -1, lambda v: v * 2) == 4
        assert match_either(left("e"), lambda e: e * 2, lambda v: v) == "ee"

    def test_match_either_rejects_foreign_values(self):
        with pytest.raises(UnmatchedVariantError):
            match_either("not an either", lambda e: e, lambda v: v)

    def test_either_is_abstract(self):
        with pytest.raises(TypeError):
            Either()


class TestComposition:
    """Tests for composition utilities."""

    def test_sequence_maybes(self):
        # All Some
        assert sequence_maybes([some(1), some(2), some(3)]) == some([1, 2, 3])

        # Contains Nothing
        assert sequence_maybes([some(1), nothing(), some(3)]).is_nothing()

    def test_cat_maybes(self):
        maybes = [some(1), nothing(), some(3), nothing(), some(5)]
        assert cat_maybes(maybes) == [1, 3, 5]

    def test_first_some(self):
        assert first_some([nothing(), some(2), some(3)]) == some(2)
        assert first_some([nothing(), nothing()]).is_nothing()

    def test_sequence_eithers(self):
        assert sequence_eithers([right(1), right(2)]) == right([1, 2])
        assert sequence_eithers([right(1), left("a"), left("b")]) == left("a")

    def test_traverse_either(self):
        def positive(x):
            return right(x) if x > 0 else left(f"not positive: {x}")

        assert traverse_either(positive, [1, 2]) == right([1, 2])
        assert traverse_either(positive, [1, -1, -2]) == left("not positive: -1")

    def test_partition_eithers(self):
        eithers = [right(1), left("a"), right(2), left("b")]
        assert partition_eithers(eithers) == (["a", "b"], [1, 2])

    def test_lefts_and_rights_keep_order(self):
        eithers = [left("x"), right(1), left("y"), right(2)]
        assert lefts(eithers) == ["x", "y"]
        assert rights(eithers) == [1, 2]

    def test_lefts_and_rights_accept_generators(self):
        assert rights(right(n) for n in range(3)) == [0, 1, 2]
        assert lefts(left(n) for n in range(2)) == [0, 1]

    def test_lift2_either_keeps_first_left(self):
        add = lift2_either(lambda a, b: a + b)
        assert add(right(1), right(2)) == right(3)
        assert add(left("first"), left("second")) == left("first")
        assert add(right(1), left("second")) == left("second")

    def test_lift2_maybe(self):
        add = lift2_maybe(lambda a, b: a + b)
        assert add(some(1), some(2)) == some(3)
        assert add(some(1), nothing()).is_nothing()
        assert add(nothing(), some(2)).is_nothing()

    def test_kleisli_either(self):
        parse = lambda s: right(int(s)) if s.isdigit() else left(f"bad: {s}")
        half = lambda n: right(n // 2) if n % 2 == 0 else left(f"odd: {n}")

        parse_then_half = kleisli_either(parse, half)
        assert parse_then_half("8") == right(4)
        assert parse_then_half("7") == left("odd: 7")
        assert parse_then_half("x") == left("bad: x")

    def test_compose(self):
        add1 = lambda x: x + 1
        mul2 = lambda x: x * 2
        sub3 = lambda x: x - 3

        composed = compose(add1, mul2, sub3)
        assert composed(5) == 5  # (5 - 3) * 2 + 1 = 5

    def test_pipe(self):
        add1 = lambda x: x + 1
        mul2 = lambda x: x * 2
        sub3 = lambda x: x - 3

        piped = pipe(add1, mul2, sub3)
        assert piped(5) == 9  # ((5 + 1) * 2) - 3 = 9
