"""End-to-end checks of BigDecimal laws over many generated values.

These run the full text -> value -> arithmetic -> text pipeline and compare
every result with exact Fraction arithmetic.
"""

import random
from concurrent.futures import ThreadPoolExecutor
from fractions import Fraction

import pytest

from bigdec import BigDecimal, RoundingMode

from tests.helpers import as_fraction, dec

SEED = 20240601


def _random_decimal(rng: random.Random) -> BigDecimal:
    unscaled = rng.randint(-(10**30), 10**30)
    scale = rng.randint(-8, 20)
    return BigDecimal(unscaled, scale)


@pytest.fixture
def random_pairs() -> list[tuple[BigDecimal, BigDecimal]]:
    rng = random.Random(SEED)
    return [(_random_decimal(rng), _random_decimal(rng)) for _ in range(300)]


class TestExactArithmetic:
    def test_add_sub_mul_match_fractions(self, random_pairs):
        for a, b in random_pairs:
            fa, fb = as_fraction(a), as_fraction(b)
            assert as_fraction(a + b) == fa + fb
            assert as_fraction(a - b) == fa - fb
            assert as_fraction(a * b) == fa * fb
            assert (a + b).scale == max(a.scale, b.scale)
            assert (a * b).scale == a.scale + b.scale

    def test_adding_zero_keeps_value(self, random_pairs):
        """a + 0 equals a for a zero at any scale; the result takes the larger scale."""
        for a, b in random_pairs:
            zero = BigDecimal.zero(b.scale)
            total = a + zero
            assert total == a
            assert total.scale == max(a.scale, b.scale)

    def test_cmp_matches_fractions(self, random_pairs):
        for a, b in random_pairs:
            fa, fb = as_fraction(a), as_fraction(b)
            assert a.cmp(b) == (fa > fb) - (fa < fb)


class TestDivisionMatchesRationalConversion:
    @pytest.mark.parametrize("mode", [m for m in RoundingMode if m is not RoundingMode.UNNECESSARY])
    def test_div_equals_from_rational(self, random_pairs, mode):
        """a.div(b) rounds the same way as converting the exact quotient."""
        for a, b in random_pairs:
            if b.is_zero():
                continue
            exact = as_fraction(a) / as_fraction(b)
            quotient = a.div(b, 6, mode)
            assert quotient.same_repr(BigDecimal.from_rational(exact, 6, mode))

    def test_half_even_error_bound(self, random_pairs):
        for a, b in random_pairs:
            if b.is_zero():
                continue
            exact = as_fraction(a) / as_fraction(b)
            quotient = a.div(b, 4, RoundingMode.HALF_EVEN)
            assert abs(as_fraction(quotient) - exact) <= Fraction(1, 2 * 10**4)


class TestTextRoundTrip:
    def test_format_parse_roundtrip(self, random_pairs):
        for a, _ in random_pairs:
            parsed = dec(str(a))
            assert parsed == a
            if a.scale >= 0:
                assert parsed.same_repr(a)

    def test_scientific_and_plain_agree(self):
        assert dec("1.23e+5") == dec("123000")
        assert dec("-4.5E-2").same_repr(dec("-0.045"))
        assert (dec("123.45") + dec("56.7")).same_repr(BigDecimal(18015, 2))


class TestConcurrentUse:
    def test_parallel_arithmetic(self, random_pairs):
        """Operations share only the power-of-ten cache and agree across threads."""

        def work(pair: tuple[BigDecimal, BigDecimal]) -> str:
            a, b = pair
            total = (a * b).rescale(40, RoundingMode.HALF_EVEN) + a.rescale(60)
            return str(total)

        expected = [work(pair) for pair in random_pairs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            assert list(pool.map(work, random_pairs)) == expected
