"""Tests for the rounding policy."""

import pytest

from bigdec.errors import DivisionByZeroError, InvalidArgumentError, RoundingRequiredError
from bigdec.rounding import RoundingMode, div_trunc, divmod_trunc, round_quotient

R = RoundingMode


class TestShouldRoundUp:
    """Decision table for each mode on a divisor of 10."""

    @pytest.mark.parametrize(
        "mode,remainder,negative,expected",
        [
            (R.DOWN, 3, False, False),
            (R.DOWN, -3, True, False),
            (R.UP, 3, False, True),
            (R.UP, -3, True, True),
            (R.CEILING, 3, False, True),
            (R.CEILING, -3, True, False),
            (R.FLOOR, 3, False, False),
            (R.FLOOR, -3, True, True),
            (R.HALF_UP, 4, False, False),
            (R.HALF_UP, 5, False, True),
            (R.HALF_UP, 6, False, True),
            (R.HALF_UP, -5, True, True),
            (R.HALF_DOWN, 4, False, False),
            (R.HALF_DOWN, 5, False, False),
            (R.HALF_DOWN, 6, False, True),
            (R.HALF_DOWN, -6, True, True),
            (R.HALF_EVEN, 4, False, False),
            (R.HALF_EVEN, 6, False, True),
            (R.HALF_EVEN, -6, True, True),
        ],
    )
    def test_decision(self, mode, remainder, negative, expected):
        assert mode.should_round_up(remainder, 10, quotient=0, negative=negative) is expected

    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_zero_remainder_never_rounds(self, mode):
        """An exact division needs no rounding, even for UNNECESSARY."""
        assert mode.should_round_up(0, 10, quotient=7) is False

    def test_half_even_tie_uses_quotient_parity(self):
        """On a tie the truncated quotient decides, not the remainder."""
        assert R.HALF_EVEN.should_round_up(5, 10, quotient=2) is False
        assert R.HALF_EVEN.should_round_up(5, 10, quotient=3) is True
        assert R.HALF_EVEN.should_round_up(-5, 10, quotient=-3, negative=True) is True
        assert R.HALF_EVEN.should_round_up(-5, 10, quotient=-2, negative=True) is False
        # Remainder 2 of 4 is even, but the odd quotient still rounds up
        assert R.HALF_EVEN.should_round_up(2, 4, quotient=1) is True

    def test_quotient_is_required(self):
        """3.5 is a tie whose outcome depends on the odd quotient 3; it cannot be guessed."""
        with pytest.raises(TypeError):
            R.HALF_EVEN.should_round_up(5, 10)
        assert R.HALF_EVEN.should_round_up(5, 10, quotient=3) is True

    def test_odd_divisor_is_never_a_tie(self):
        """1/3 and 2/3 compare against 1.5 exactly, not a halved 1."""
        assert R.HALF_DOWN.should_round_up(1, 3, quotient=0) is False
        assert R.HALF_DOWN.should_round_up(2, 3, quotient=0) is True
        assert R.HALF_EVEN.should_round_up(1, 3, quotient=1) is False

    def test_negative_divisor(self):
        assert R.HALF_UP.should_round_up(5, -10, quotient=0) is True
        assert R.HALF_UP.should_round_up(4, -10, quotient=0) is False

    def test_unnecessary_raises(self):
        with pytest.raises(RoundingRequiredError):
            R.UNNECESSARY.should_round_up(3, 10, quotient=0)


class TestCoerce:
    def test_member_passthrough(self):
        assert RoundingMode.coerce(R.HALF_EVEN) is R.HALF_EVEN

    @pytest.mark.parametrize("name", ["half_even", "HALF_EVEN", "Half_Even"])
    def test_names(self, name):
        assert RoundingMode.coerce(name) is R.HALF_EVEN

    @pytest.mark.parametrize("bad", ["bankers", "", 3, None])
    def test_unknown_raises(self, bad):
        with pytest.raises(InvalidArgumentError):
            RoundingMode.coerce(bad)

    def test_str(self):
        assert str(R.HALF_UP) == "half_up"


class TestTruncatingDivision:
    @pytest.mark.parametrize(
        "a,b,q,r",
        [(7, 3, 2, 1), (-7, 3, -2, -1), (7, -3, -2, 1), (-7, -3, 2, -1), (6, 3, 2, 0)],
    )
    def test_divmod_trunc(self, a, b, q, r):
        assert divmod_trunc(a, b) == (q, r)
        assert div_trunc(a, b) == q

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            div_trunc(1, 0)
        with pytest.raises(ZeroDivisionError):
            divmod_trunc(1, 0)


class TestRoundQuotient:
    """round_quotient steps away from zero following the exact value's sign."""

    @pytest.mark.parametrize(
        "mode,expected",
        [
            (R.DOWN, [2, -2, 0, 0]),
            (R.UP, [3, -3, 1, -1]),
            (R.CEILING, [3, -2, 1, 0]),
            (R.FLOOR, [2, -3, 0, -1]),
            (R.HALF_UP, [3, -3, 0, 0]),
            (R.HALF_DOWN, [2, -2, 0, 0]),
            (R.HALF_EVEN, [2, -2, 0, 0]),
        ],
    )
    def test_modes(self, mode, expected):
        # 2.5, -2.5, 0.3, -0.3
        cases = [(25, 10), (-25, 10), (3, 10), (-3, 10)]
        assert [round_quotient(n, d, mode) for n, d in cases] == expected

    def test_small_negative_rounds_away_from_zero(self):
        """-0.5 has a truncated quotient of 0 but still rounds UP to -1."""
        assert round_quotient(-5, 10, R.UP) == -1
        assert round_quotient(5, -10, R.UP) == -1

    def test_half_even_ties(self):
        assert round_quotient(35, 10, R.HALF_EVEN) == 4
        assert round_quotient(45, 10, R.HALF_EVEN) == 4
        assert round_quotient(-35, 10, R.HALF_EVEN) == -4

    def test_exact_division_any_mode(self):
        assert round_quotient(300, 100, R.UNNECESSARY) == 3

    def test_unnecessary_inexact_raises(self):
        with pytest.raises(RoundingRequiredError):
            round_quotient(301, 100, R.UNNECESSARY)
