"""
Complex plane kernels — функции комплексного переменного над парами BigNum

Комплексное число представлено парой (re, im). Все ядра принимают рабочий
контекст wp и возвращают пару на этой точности без финального округления:
округление к контексту вызывающей стороны выполняет слой
src.hypercomplex.transcendental.

Главные ветви совпадают с общепринятыми (cmath):
- sqrt, ln: разрез по отрицательной вещественной оси
- asin, acos: формулы Халла–Кахана через |z + 1| и |z − 1|
- atan: ½·atan2(2a, 1 − a² − b²) + i·¼·ln(...)
- asinh, acosh, atanh: через ln и sqrt
"""

from typing import Tuple

from src.core.errors import DivisionByZero, UndefinedValue
from src.core.math.bignum import BigNum
from src.core.math.constants import pi
from src.core.math.context import MathContext
from src.core.math.exponential import exp as real_exp
from src.core.math.exponential import ln as real_ln
from src.core.math.exponential import sqrt as real_sqrt
from src.core.math.trigonometry.circular import acos as real_acos
from src.core.math.trigonometry.circular import asin as real_asin
from src.core.math.trigonometry.circular import atan2 as real_atan2
from src.core.math.trigonometry.circular import cos as real_cos
from src.core.math.trigonometry.circular import sin as real_sin
from src.core.math.trigonometry.hyperbolic import acosh as real_acosh
from src.core.math.trigonometry.hyperbolic import cosh as real_cosh
from src.core.math.trigonometry.hyperbolic import sinh as real_sinh


Pair = Tuple[BigNum, BigNum]

ONE: Pair = (BigNum.ONE, BigNum.ZERO)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def c_add(z: Pair, w: Pair) -> Pair:
    return z[0].add(w[0]), z[1].add(w[1])


def c_sub(z: Pair, w: Pair) -> Pair:
    return z[0].sub(w[0]), z[1].sub(w[1])


def c_neg(z: Pair) -> Pair:
    return z[0].neg(), z[1].neg()


def c_mul(z: Pair, w: Pair, wp: MathContext) -> Pair:
    a, b = z
    c, d = w
    return a.mul(c).sub(b.mul(d), wp), a.mul(d).add(b.mul(c), wp)


def c_div(z: Pair, w: Pair, wp: MathContext) -> Pair:
    """
    Частное z / w.

    Raises:
        DivisionByZero: w = 0
    """
    a, b = z
    c, d = w
    denominator = c.mul(c).add(d.mul(d))
    if denominator.is_zero:
        raise DivisionByZero("Cannot divide by zero.")
    re = a.mul(c).add(b.mul(d)).div(denominator, wp)
    im = b.mul(c).sub(a.mul(d)).div(denominator, wp)
    return re, im


def c_abs(z: Pair, wp: MathContext) -> BigNum:
    return real_sqrt(z[0].mul(z[0]).add(z[1].mul(z[1])), wp)


# =============================================================================
# КОРЕНЬ, ЭКСПОНЕНТА, ЛОГАРИФМ
# =============================================================================


def c_sqrt(z: Pair, wp: MathContext) -> Pair:
    """
    Главное значение квадратного корня.

    Меньшая по модулю компонента получается делением b / (2·большая),
    чтобы избежать вычитания близких величин.
    """
    a, b = z
    if b.is_zero:
        if a.sign >= 0:
            return real_sqrt(a, wp), BigNum.ZERO
        return BigNum.ZERO, real_sqrt(a.neg(), wp)

    modulus = c_abs(z, wp)
    if a.sign >= 0:
        re = real_sqrt(modulus.add(a).div(BigNum.TWO, wp), wp)
        return re, b.div(re.mul(BigNum.TWO), wp)
    im = real_sqrt(modulus.sub(a).div(BigNum.TWO, wp), wp)
    if b.sign < 0:
        im = im.neg()
    return b.div(im.mul(BigNum.TWO), wp), im


def c_exp(z: Pair, wp: MathContext) -> Pair:
    """e^a · (cos b + i·sin b)."""
    a, b = z
    magnitude = real_exp(a, wp)
    return magnitude.mul(real_cos(b, wp), wp), magnitude.mul(real_sin(b, wp), wp)


def c_ln(z: Pair, wp: MathContext) -> Pair:
    """
    Главное значение логарифма: (½·ln(a² + b²), atan2(b, a)).

    Raises:
        UndefinedValue: z = 0
    """
    a, b = z
    modulus_sq = a.mul(a).add(b.mul(b))
    if modulus_sq.is_zero:
        raise UndefinedValue("ln", z)
    return real_ln(modulus_sq, wp).div(BigNum.TWO, wp), real_atan2(b, a, wp)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def c_sin(z: Pair, wp: MathContext) -> Pair:
    a, b = z
    return (
        real_sin(a, wp).mul(real_cosh(b, wp), wp),
        real_cos(a, wp).mul(real_sinh(b, wp), wp),
    )


def c_cos(z: Pair, wp: MathContext) -> Pair:
    a, b = z
    return (
        real_cos(a, wp).mul(real_cosh(b, wp), wp),
        real_sin(a, wp).mul(real_sinh(b, wp), wp).neg(),
    )


def c_tan(z: Pair, wp: MathContext) -> Pair:
    return c_div(c_sin(z, wp), c_cos(z, wp), wp)


def c_sinh(z: Pair, wp: MathContext) -> Pair:
    a, b = z
    return (
        real_sinh(a, wp).mul(real_cos(b, wp), wp),
        real_cosh(a, wp).mul(real_sin(b, wp), wp),
    )


def c_cosh(z: Pair, wp: MathContext) -> Pair:
    a, b = z
    return (
        real_cosh(a, wp).mul(real_cos(b, wp), wp),
        real_sinh(a, wp).mul(real_sin(b, wp), wp),
    )


def c_tanh(z: Pair, wp: MathContext) -> Pair:
    return c_div(c_sinh(z, wp), c_cosh(z, wp), wp)


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


def _hull_kahan(z: Pair, wp: MathContext) -> Tuple[BigNum, BigNum]:
    """
    α = (|z + 1| + |z − 1|)/2 >= 1 и β = (|z + 1| − |z − 1|)/2 в [−1, 1].

    Значения зажимаются в допустимые интервалы, чтобы погрешность
    округления не вывела аргумент acosh/asin за область определения.
    """
    a, b = z
    to_plus = c_abs((a.add(BigNum.ONE), b), wp)
    to_minus = c_abs((a.sub(BigNum.ONE), b), wp)
    alpha = to_plus.add(to_minus).div(BigNum.TWO, wp)
    beta = to_plus.sub(to_minus).div(BigNum.TWO, wp)
    alpha = max(alpha, BigNum.ONE)
    beta = min(max(beta, BigNum.ONE.neg()), BigNum.ONE)
    return alpha, beta


def c_asin(z: Pair, wp: MathContext) -> Pair:
    """asin z = asin β + i·sign(b)·acosh α."""
    alpha, beta = _hull_kahan(z, wp)
    im = real_acosh(alpha, wp)
    return real_asin(beta, wp), im.neg() if z[1].sign < 0 else im


def c_acos(z: Pair, wp: MathContext) -> Pair:
    """acos z = acos β − i·sign(b)·acosh α."""
    alpha, beta = _hull_kahan(z, wp)
    im = real_acosh(alpha, wp)
    return real_acos(beta, wp), im if z[1].sign < 0 else im.neg()


def c_atan(z: Pair, wp: MathContext) -> Pair:
    """
    atan z = ½·atan2(2a, 1 − a² − b²) + i·¼·ln((a² + (b + 1)²)/(a² + (b − 1)²)).

    Raises:
        UndefinedValue: z = ±i (полюса)
    """
    a, b = z
    a_sq = a.mul(a)
    upper = a_sq.add(b.add(BigNum.ONE).mul(b.add(BigNum.ONE)))
    lower = a_sq.add(b.sub(BigNum.ONE).mul(b.sub(BigNum.ONE)))
    if upper.is_zero or lower.is_zero:
        raise UndefinedValue("atan", z)
    re = real_atan2(a.mul(BigNum.TWO), BigNum.ONE.sub(a_sq).sub(b.mul(b)), wp)
    im = real_ln(upper.div(lower, wp), wp)
    return re.div(BigNum.TWO, wp), im.div(BigNum.FOUR, wp)


def c_asinh(z: Pair, wp: MathContext) -> Pair:
    """asinh z = ln(z + √(z² + 1)); нечётность для Re z < 0."""
    if z[0].sign < 0:
        return c_neg(c_asinh(c_neg(z), wp))
    root = c_sqrt(c_add(c_mul(z, z, wp), ONE), wp)
    return c_ln(c_add(z, root), wp)


def c_acosh(z: Pair, wp: MathContext) -> Pair:
    """acosh z = ln(z + √(z + 1)·√(z − 1))."""
    root = c_mul(c_sqrt(c_add(z, ONE), wp), c_sqrt(c_sub(z, ONE), wp), wp)
    return c_ln(c_add(z, root), wp)


def c_atanh(z: Pair, wp: MathContext) -> Pair:
    """
    atanh z = ½·(ln(1 + z) − ln(1 − z)).

    Raises:
        UndefinedValue: z = ±1
    """
    plus = c_ln(c_add(ONE, z), wp)
    minus = c_ln(c_sub(ONE, z), wp)
    re, im = c_sub(plus, minus)
    return re.div(BigNum.TWO, wp), im.div(BigNum.TWO, wp)


def half_pi(wp: MathContext) -> BigNum:
    return pi(wp).div(BigNum.TWO, wp)
