"""Algebraic properties of BigInteger, checked against native int.

Each test runs over a deterministic corpus of signed values that straddle
32-bit digit boundaries (see tests.helpers.values).
"""

import itertools

from bigint import BigInteger
from bigint.digits import is_canonical
from tests.helpers import SIGNED_BOUNDARY_VALUES, make_big


def assert_canonical(x: BigInteger) -> None:
    assert is_canonical(x.magnitude)
    if not x.magnitude:
        assert x.is_negative is False


class TestRoundTrip:
    """from_string(to_string(x, b), b) == x."""

    def test_round_trip(self, sample_values, base):
        """Every value survives formatting and parsing in every base."""
        for x in sample_values:
            text = x.to_string(base)
            assert BigInteger.from_string(text, base) == x
            assert BigInteger.from_string(text.lower(), base) == x

    def test_formatting_matches_int(self, sample_ints, base):
        """Numerals agree with Python's own parser."""
        for value in sample_ints:
            assert int(make_big(value).to_string(base), base) == value

    def test_int_round_trip(self, sample_ints):
        """from_int and int() are inverses."""
        for value in sample_ints:
            assert int(BigInteger.from_int(value)) == value


class TestAdditionLaws:
    """Identity, inverse, commutativity and agreement with int."""

    def test_additive_identity(self, sample_values, zero):
        """x + 0 == x."""
        for x in sample_values:
            assert x.add(zero) == x
            assert zero.add(x) == x

    def test_additive_inverse(self, sample_values):
        """x + (-x) is canonical zero."""
        for x in sample_values:
            result = x.add(x.negate())
            assert result.magnitude == ()
            assert result.is_negative is False

    def test_commutativity(self, sample_values):
        """x + y == y + x."""
        for x, y in itertools.product(sample_values[:30], repeat=2):
            assert x.add(y) == y.add(x)

    def test_add_matches_int(self, sample_ints):
        """Sums agree with native int addition."""
        for x, y in itertools.product(sample_ints, repeat=2):
            result = make_big(x).add(make_big(y))
            assert int(result) == x + y
            assert_canonical(result)


class TestSubtractionLaws:
    """Consistency with addition and agreement with int."""

    def test_subtract_is_add_negated(self, sample_values):
        """x - y == x + (-y)."""
        for x, y in itertools.product(sample_values[:30], repeat=2):
            assert x.subtract(y) == x.add(y.negate())

    def test_subtract_matches_int(self, sample_ints):
        """Differences agree with native int subtraction."""
        for x, y in itertools.product(sample_ints, repeat=2):
            result = make_big(x).subtract(make_big(y))
            assert int(result) == x - y
            assert_canonical(result)

    def test_boundary_pairs(self):
        """Exhaustive over the boundary corpus, both operations."""
        for x, y in itertools.product(SIGNED_BOUNDARY_VALUES, repeat=2):
            bx, by = make_big(x), make_big(y)
            assert int(bx + by) == x + y
            assert int(bx - by) == x - y


class TestOrderLaws:
    """compare agrees with int ordering; is_less_than with abs ordering."""

    def test_compare_matches_int(self, sample_ints):
        """Signed order."""
        for x, y in itertools.product(sample_ints[:40], repeat=2):
            expected = (x > y) - (x < y)
            assert make_big(x).compare(make_big(y)) == expected

    def test_is_less_than_matches_abs(self, sample_ints):
        """Magnitude order."""
        for x, y in itertools.product(sample_ints[:40], repeat=2):
            assert make_big(x).is_less_than(make_big(y)) == (abs(x) < abs(y))

    def test_negate_canonical(self, sample_values):
        """Negation keeps canonical form."""
        for x in sample_values:
            assert_canonical(x.negate())
