"""
Тесты для констант, экспоненты, логарифмов и корня

Эталонные значения взяты с запасом точности; сравнение с абсолютной
погрешностью, превышающей половину единицы последнего разряда.
"""

import pytest

from src.core.errors import RoundingNecessary, UndefinedValue
from src.core.math.bignum import BigNum
from src.core.math.constants import e, e_fixed, ln2, ln2_fixed, pi, pi_fixed
from src.core.math.context import MathContext, RoundingMode
from src.core.math.exponential import exp, ln, log, sqrt


PI = "3.14159265358979323846264338327950288"
E = "2.71828182845904523536028747135266250"
LN2 = "0.693147180559945309417232121458176568"
LN3 = "1.09861228866810969139524523692252570"
LN10 = "2.30258509299404568401799145468436421"
E_SQUARED = "7.38905609893065022723042746057500781"


def _close(actual: BigNum, expected: str, tolerance: str = "1e-16") -> bool:
    return actual.sub(BigNum.create(expected)).abs() <= BigNum.create(tolerance)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================


class TestConstants:
    """Тесты π, e, ln 2"""

    def test_pi_default(self) -> None:
        assert _close(pi(), PI)

    def test_pi_precision(self) -> None:
        assert str(pi(MathContext(precision=5))) == "3.14159"
        assert str(pi(MathContext(precision=35))) == PI

    def test_e_precision(self) -> None:
        assert str(e(MathContext(precision=30))) == "2.718281828459045235360287471353"

    def test_ln2_precision(self) -> None:
        assert str(ln2(MathContext(precision=20))) == "0.69314718055994530942"

    def test_cache_is_bounded(self) -> None:
        """Кэш значений ограничен 32 последними точностями"""
        for fixed in (pi_fixed, e_fixed, ln2_fixed):
            assert fixed.cache_info().maxsize == 32

    def test_bignum_classmethods(self) -> None:
        ctx = MathContext(precision=25)
        assert BigNum.pi(ctx) == pi(ctx)
        assert BigNum.e(ctx) == e(ctx)

    def test_rounding_mode_applies(self) -> None:
        """π = 3.14159|26...: DOWN и UP различаются в последнем разряде"""
        assert str(pi(MathContext(precision=5, rounding=RoundingMode.DOWN))) == "3.14159"
        assert str(pi(MathContext(precision=5, rounding=RoundingMode.UP))) == "3.1416"

    def test_irrational_unnecessary(self) -> None:
        with pytest.raises(RoundingNecessary):
            pi(MathContext(precision=5, rounding=RoundingMode.UNNECESSARY))


# =============================================================================
# ЭКСПОНЕНТА
# =============================================================================


class TestExp:
    """Тесты exp"""

    def test_zero(self) -> None:
        assert exp(0) == BigNum.ONE

    def test_known_values(self) -> None:
        assert _close(exp(1), E)
        assert _close(exp(2), E_SQUARED)
        assert _close(exp("0.5"), "1.64872127070012814684865078781416357")
        assert _close(exp(-1), "0.367879441171442321595523770161460867")

    def test_large_argument(self) -> None:
        assert _close(exp(10), "22026.465794806716516957900645284244", "1e-12")

    def test_context_precision(self) -> None:
        assert str(exp(1, MathContext(precision=10))) == "2.7182818285"

    def test_method(self) -> None:
        assert BigNum.ONE.exp() == exp(1)


# =============================================================================
# ЛОГАРИФМЫ
# =============================================================================


class TestLn:
    """Тесты ln"""

    def test_ln_one_is_zero(self) -> None:
        assert ln(1) == BigNum.ZERO

    def test_known_values(self) -> None:
        assert _close(ln(2), LN2)
        assert _close(ln(3), LN3)
        assert _close(ln(10), LN10)
        assert _close(ln("0.5"), "-" + LN2)
        assert _close(ln(1000000), "13.8155105579642741041079487281061853")

    def test_tiny_argument(self) -> None:
        assert _close(ln("1e-20"), "-46.0517018598809136803598290936872842", "1e-15")

    @pytest.mark.parametrize("value", ["0", "-1", "-0.5"])
    def test_non_positive(self, value: str) -> None:
        with pytest.raises(UndefinedValue, match="ln"):
            ln(value)

    @pytest.mark.parametrize("value", ["0.3", "1.7", "-2.5", "12"])
    def test_inverse_of_exp(self, value: str) -> None:
        assert _close(ln(exp(value)), value, "1e-15")


class TestLog:
    """Тесты десятичного логарифма"""

    def test_powers_of_ten(self) -> None:
        assert _close(log(10), "1")
        assert _close(log(1000), "3")
        assert _close(log("0.01"), "-2")

    def test_value(self) -> None:
        assert _close(log(2), "0.301029995663981195213738894724493027")

    def test_non_positive(self) -> None:
        with pytest.raises(UndefinedValue):
            log(0)


# =============================================================================
# КОРЕНЬ
# =============================================================================


class TestSqrt:
    """Тесты sqrt"""

    def test_correctly_rounded(self) -> None:
        assert str(sqrt(2)) == "1.41421356237309505"
        assert _close(sqrt(3), "1.73205080756887729352744634150587237")

    def test_exact(self) -> None:
        assert sqrt(4) == 2
        assert sqrt("0.0001") == BigNum.create("0.01")
        assert sqrt(0) == 0

    def test_negative(self) -> None:
        with pytest.raises(UndefinedValue, match="sqrt"):
            sqrt(-1)

    def test_unnecessary(self) -> None:
        ctx = MathContext(precision=5, rounding=RoundingMode.UNNECESSARY)
        assert sqrt("6.25", ctx) == BigNum.create("2.5")
        with pytest.raises(RoundingNecessary):
            sqrt(2, ctx)

    def test_directed_rounding(self) -> None:
        down = MathContext(precision=3, rounding=RoundingMode.DOWN)
        up = MathContext(precision=3, rounding=RoundingMode.UP)
        assert str(sqrt(2, down)) == "1.414"
        assert str(sqrt(2, up)) == "1.415"
