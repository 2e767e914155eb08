"""
Тесты для трансцендентных функций HyperNumber

Проверяет:
1. Обобщённую формулу Эйлера (комплексные и кватернионы)
2. Совпадение с главными ветвями cmath для комплексных аргументов
3. Продолжение вещественных функций за пределы области вдоль e1
4. Особые точки
"""

import cmath

import pytest

from src.core.errors import UndefinedValue
from src.core.math.bignum import BigNum
from src.core.math.constants import pi
from src.core.math import exponential
from src.core.math.context import MathContext
from src.core.math.trigonometry import circular, hyperbolic
from src.hypercomplex import HyperNumber, transcendental


HALF_PI = "1.57079632679489661923132169163975144"
PI = "3.14159265358979323846264338327950288"
ACOSH_2 = "1.31695789692481670862504634730796844"
SIN_1 = "0.841470984807896506652502321630298999"
COS_1 = "0.540302305868139717400936607442976603"

FUNCTIONS = [
    "exp", "ln", "sqrt",
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
]


def _close(actual: BigNum, expected: str, tolerance: str = "1e-16") -> bool:
    return actual.sub(BigNum.create(expected)).abs() <= BigNum.create(tolerance)


def _as_complex(x: HyperNumber) -> complex:
    return complex(float(x[0]), float(x[1]))


# =============================================================================
# ФОРМУЛА ЭЙЛЕРА
# =============================================================================


class TestEuler:
    """Тесты exp на мнимой оси"""

    def test_exp_i_pi(self) -> None:
        """e^(iπ) = −1"""
        z = HyperNumber.complex(0, pi(MathContext(precision=40)))
        assert transcendental.exp(z) == HyperNumber.real(-1)

    def test_quaternion_euler(self) -> None:
        """exp(r·u) = cos r + u·sin r при |u| = 1"""
        result = transcendental.exp(HyperNumber.hyper(0, "0.6", "0.8", 0))
        assert _close(result[0], COS_1)
        assert _close(result[1], "0.504882590884737903991501392978179399")
        assert _close(result[2], "0.673176787846317205322001857304239199")
        assert result[3].is_zero

    def test_method(self) -> None:
        z = HyperNumber.complex("0.5", "0.5")
        assert z.exp() == transcendental.exp(z)


class TestLogarithm:
    """Тесты ln и log"""

    def test_ln_complex(self) -> None:
        value = transcendental.ln(HyperNumber.complex(1, 1))
        assert _close(value[0], "0.346573590279972654708616060729088284")
        assert _close(value[1], "0.785398163397448309615660845819875721")

    @pytest.mark.parametrize("values", [("0.5", "1.5"), (-2, 1), (1, 2, -1, "0.5")])
    def test_exp_of_ln(self, values: tuple) -> None:
        z = HyperNumber.hyper(*values)
        assert transcendental.exp(transcendental.ln(z)).equals(z, MathContext(precision=14))

    def test_ln_negative_real(self) -> None:
        """ln(−1) = π·e1"""
        value = transcendental.ln(HyperNumber.real(-1))
        assert value.dim == 2
        assert value[0].is_zero
        assert _close(value[1], PI)

    def test_ln_zero(self) -> None:
        with pytest.raises(UndefinedValue, match="ln"):
            transcendental.ln(HyperNumber.complex(0, 0))

    def test_log_negative_real(self) -> None:
        value = transcendental.log(HyperNumber.real(-10))
        assert _close(value[0], "1")
        assert float(value[1]) == pytest.approx(1.3643763538418412, abs=1e-15)

    def test_log_method(self) -> None:
        z = HyperNumber.complex(10, 0)
        assert z.log() == HyperNumber.real(1)


class TestSqrt:
    """Тесты sqrt"""

    def test_exact(self) -> None:
        assert transcendental.sqrt(HyperNumber.complex(3, 4)) == HyperNumber.complex(2, 1)

    def test_negative_real(self) -> None:
        assert transcendental.sqrt(HyperNumber.real(-4)) == HyperNumber.complex(0, 2)

    def test_quaternion_square(self) -> None:
        q = HyperNumber.hyper(1, 2, -1, 3)
        root = transcendental.sqrt(q)
        assert root.mul(root).equals(q, MathContext(precision=15))


# =============================================================================
# ВЕЩЕСТВЕННЫЕ АРГУМЕНТЫ
# =============================================================================


class TestRealArguments:
    """Тесты чисто вещественных аргументов"""

    def test_inside_domain_keeps_dim(self) -> None:
        value = transcendental.sin(HyperNumber.hyper(1, 0, 0, 0))
        assert value.dim == 4
        assert _close(value[0], SIN_1)
        assert value.is_real

    def test_real_dim_one(self) -> None:
        assert transcendental.exp(HyperNumber.real(0)) == HyperNumber.real(1)

    def test_asin_outside(self) -> None:
        plus = transcendental.asin(HyperNumber.real(2))
        minus = transcendental.asin(HyperNumber.real(-2))
        assert _close(plus[0], HALF_PI) and _close(plus[1], ACOSH_2)
        assert _close(minus[0], "-" + HALF_PI) and _close(minus[1], ACOSH_2)

    def test_acos_outside(self) -> None:
        plus = transcendental.acos(HyperNumber.real(2))
        minus = transcendental.acos(HyperNumber.real(-2))
        assert plus[0].is_zero and _close(plus[1], "-" + ACOSH_2)
        assert _close(minus[0], PI) and _close(minus[1], "-" + ACOSH_2)

    def test_acosh_outside(self) -> None:
        inside = transcendental.acosh(HyperNumber.real("0.5"))
        below = transcendental.acosh(HyperNumber.real(-2))
        assert inside[0].is_zero
        assert _close(inside[1], "1.04719755119659774615421446109316763")
        assert _close(below[0], ACOSH_2) and _close(below[1], PI)

    def test_atanh_outside(self) -> None:
        value = transcendental.atanh(HyperNumber.real(2))
        assert _close(value[0], "0.549306144334054845697622618461262852")
        assert _close(value[1], HALF_PI)

    def test_branch_keeps_larger_dim(self) -> None:
        assert transcendental.sqrt(HyperNumber.hyper(-9, 0, 0, 0)) == HyperNumber.hyper(0, 3, 0, 0)

    @pytest.mark.parametrize(
        "name, value",
        [("atanh", 1), ("atanh", -1), ("ln", 0)],
    )
    def test_singular_points(self, name: str, value: int) -> None:
        with pytest.raises(UndefinedValue):
            getattr(transcendental, name)(HyperNumber.real(value))

    def test_atan_poles(self) -> None:
        with pytest.raises(UndefinedValue, match="atan"):
            transcendental.atan(HyperNumber.complex(0, 1))


# =============================================================================
# СРАВНЕНИЕ С CMATH
# =============================================================================


class TestAgainstCmath:
    """Тесты главных ветвей против cmath"""

    @pytest.mark.parametrize("name", FUNCTIONS)
    @pytest.mark.parametrize("re, im", [(0.3, 0.4), (-1.5, 0.7), (0.8, -1.2)])
    def test_complex_argument(self, name: str, re: float, im: float) -> None:
        z = HyperNumber.complex(str(re), str(im))
        expected = getattr(cmath, "log" if name == "ln" else name)(complex(re, im))
        actual = _as_complex(getattr(transcendental, name)(z))
        assert actual.real == pytest.approx(expected.real, abs=1e-12)
        assert actual.imag == pytest.approx(expected.imag, abs=1e-12)

    @pytest.mark.parametrize("name", ["sin", "exp", "ln", "atanh"])
    def test_quaternion_argument(self, name: str) -> None:
        """Кватернион вычисляется в комплексной подалгебре {1, u}"""
        q = HyperNumber.hyper("0.5", "0.3", "-0.4", "1.2")
        expected = getattr(cmath, "log" if name == "ln" else name)(complex(0.5, 1.3))
        actual = getattr(transcendental, name)(q)
        assert float(actual[0]) == pytest.approx(expected.real, abs=1e-12)
        for index, weight in ((1, 0.3), (2, -0.4), (3, 1.2)):
            assert float(actual[index]) == pytest.approx(expected.imag * weight / 1.3, abs=1e-12)

    def test_octonion_imaginary_direction(self) -> None:
        """Мнимая часть результата коллинеарна мнимой части аргумента"""
        x = HyperNumber.hyper(1, 0, 0, 0, 0, 0, "0.6", "0.8")
        value = transcendental.cos(x)
        expected = cmath.cos(complex(1, 1))
        assert float(value[0]) == pytest.approx(expected.real, abs=1e-12)
        assert float(value[6]) == pytest.approx(expected.imag * 0.6, abs=1e-12)
        assert float(value[7]) == pytest.approx(expected.imag * 0.8, abs=1e-12)
        assert all(value[i].is_zero for i in range(1, 6))


# =============================================================================
# БОЛЬШИЕ ЗНАЧЕНИЯ
# =============================================================================


class TestLargeMagnitude:
    """Тесты функций с результатом порядка 10^20 и больше"""

    def _reference(self, fn, value: str, precision: int = 80) -> BigNum:
        return fn(BigNum.create(value), MathContext(precision=precision))

    def test_exp_complex(self) -> None:
        """e^(100 + 0.5i) = e^100·(cos 0.5 + i·sin 0.5), e^100 ≈ 2.7e43"""
        value = transcendental.exp(HyperNumber.complex("100", "0.5"))
        magnitude = self._reference(exponential.exp, "100")
        assert _close(value[0], str(magnitude.mul(self._reference(circular.cos, "0.5"))))
        assert _close(value[1], str(magnitude.mul(self._reference(circular.sin, "0.5"))))

    def test_cos_complex(self) -> None:
        """cos(a + bi) = cos a·cosh b − i·sin a·sinh b"""
        value = transcendental.cos(HyperNumber.complex("0.5", "60"))
        re = self._reference(circular.cos, "0.5").mul(self._reference(hyperbolic.cosh, "60"))
        im = self._reference(circular.sin, "0.5").mul(self._reference(hyperbolic.sinh, "60")).neg()
        assert _close(value[0], str(re))
        assert _close(value[1], str(im))

    def test_sinh_quaternion(self) -> None:
        """sinh(a + r·u) = sinh a·cos r + u·cosh a·sin r"""
        value = transcendental.sinh(HyperNumber.hyper("40", 0, "0.3", "0.4"))
        imaginary = self._reference(hyperbolic.cosh, "40").mul(self._reference(circular.sin, "0.5"))
        assert _close(value[0], str(self._reference(hyperbolic.sinh, "40").mul(self._reference(circular.cos, "0.5"))))
        assert value[1].is_zero
        assert _close(value[2], str(imaginary.mul(BigNum.create("0.6"))))
        assert _close(value[3], str(imaginary.mul(BigNum.create("0.8"))))
