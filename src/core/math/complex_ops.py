"""
Complex Ops — Complex Arithmetic for Tetration Rendering

Модуль содержит элементарные операции над комплексными числами, которые
вызываются рендер-циклом escape-time фрактала (tetration) на каждый пиксель и
каждую итерацию:
- Возведение в комплексную степень через полярную форму
- Вычитание
- Модуль (евклидова норма)
- Равномерное случайное целое на отрезке

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операции чистые: входы не мутируются, всегда возвращается новый Complex
2. complex_pow никогда не бросает exception: вырожденный вход даёт NaN/Inf
3. Переполнение даёт Inf (OverflowError/ZeroDivisionError Python не пропагируют)
4. complex_abs никогда не отрицателен, для нуля возвращает 0

ФОРМУЛЫ:
    c = a + ib,  z = x + iy
    r = |c|,  θ = atan2(b, a)
    c^z = exp(z · log(c)) = r^x · e^(−yθ) · (cos φ + i·sin φ)
    φ = (y · ln r + x · θ) mod 2π
"""

import math
import random
from typing import Final, NamedTuple, Sequence

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    validate_finite,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Период для редукции угла
TWO_PI: Final[float] = 2.0 * math.pi

# Максимальное целое, точно представимое в float64.
# Целые показатели за этой границей считаются через общий r ** x
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1


# =============================================================================
# ТИПЫ
# =============================================================================


class Complex(NamedTuple):
    """Комплексное число (re, im) в double precision. Передаётся по значению."""

    re: float
    im: float


class PowerRequest(NamedTuple):
    """Один элемент batch-запроса на возведение в степень."""

    base: Complex
    exponent: Complex


# Любая пара float: Complex, tuple, list
ComplexLike = Sequence[float]


def _unpack(z: ComplexLike) -> tuple[float, float]:
    re, im = z
    return float(re), float(im)


# =============================================================================
# IEEE-ПОМОЩНИКИ
# =============================================================================


def _reciprocal(value: float) -> float:
    # 1 / ±0.0 → ±Inf (Python бросил бы ZeroDivisionError)
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def _real_pow(base: float, exponent: float) -> float:
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def _safe_exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _is_fast_pow_exponent(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and abs(x) <= MAX_SAFE_INTEGER


# =============================================================================
# FAST POW
# =============================================================================


def fast_pow(x: float, n: int) -> float:
    """
    Возведение float в целую степень бинарным методом (square-and-multiply).

    Отрицательные показатели: 1 / fast_pow(x, -n).

    Args:
        x: Основание
        n: Целый показатель (может быть отрицательным)

    Returns:
        x ** n; при переполнении Inf, при 1/0 тоже Inf

    Examples:
        >>> fast_pow(2.0, 10)
        1024.0
        >>> fast_pow(2.0, -2)
        0.25
        >>> fast_pow(5.0, 0)
        1.0
    """
    if n < 0:
        return _reciprocal(fast_pow(x, -n))

    result = 1.0
    while n > 0:
        if n & 1:
            result *= x
        x *= x
        n >>= 1
    return result


# =============================================================================
# COMPLEX POW
# =============================================================================


def complex_pow(base: ComplexLike, exponent: ComplexLike) -> Complex:
    """
    Возведение комплексного числа в комплексную степень через полярную форму.

    c^z = r^x · e^(−yθ) · (cos φ + i·sin φ),  φ = (y·ln r + x·θ) mod 2π

    Если x целое (|x| ≤ 2^53), r^x считается через fast_pow,
    иначе через общий r ** x.

    Вырожденные случаи (exception не бросается никогда):
    - base = 0, Re(exponent) > 0 → (0, 0)
    - base = 0, Re(exponent) ≤ 0 → (NaN, NaN)
    - переполнение модуля → ±Inf компоненты (или NaN при Inf · 0)

    Угол редуцируется оператором % Python: знак результата совпадает со
    знаком делителя, поэтому φ ∈ [0, 2π) и для отрицательных углов.

    Args:
        base: Основание c = (a, b)
        exponent: Показатель z = (x, y)

    Returns:
        Новый Complex c^z

    Examples:
        >>> complex_pow((2.0, 0.0), (3.0, 0.0))
        Complex(re=8.0, im=0.0)
        >>> w = complex_pow((-1.0, 0.0), (0.5, 0.0))  # главный корень из -1
        >>> abs(w.re) < 1e-12 and abs(w.im - 1.0) < 1e-12
        True
    """
    a, b = _unpack(base)
    x, y = _unpack(exponent)

    r = math.hypot(a, b)

    if r == 0.0:
        # 0^z: ln(0) = -Inf, угол не определён. Предел существует только при x > 0
        if x > 0:
            return Complex(0.0, 0.0)
        return Complex(math.nan, math.nan)

    theta = math.atan2(b, a)
    log_r = math.log(r)

    if _is_fast_pow_exponent(x):
        r_pow_x = fast_pow(r, int(x))
    else:
        r_pow_x = _real_pow(r, x)

    angle = x * theta
    # При y == 0 слагаемое y·ln r опускается: 0 · Inf дал бы NaN
    if y != 0.0:
        angle += y * log_r
    angle = angle % TWO_PI

    factor = r_pow_x * _safe_exp(-y * theta)

    return Complex(factor * math.cos(angle), factor * math.sin(angle))


# =============================================================================
# SUB / ABS
# =============================================================================


def complex_sub(a: ComplexLike, b: ComplexLike) -> Complex:
    """Покомпонентное вычитание a - b."""
    a_re, a_im = _unpack(a)
    b_re, b_im = _unpack(b)
    return Complex(a_re - b_re, a_im - b_im)


def complex_abs(z: ComplexLike) -> float:
    """
    Модуль комплексного числа sqrt(re² + im²).

    Returns:
        Неотрицательный float; 0.0 для начала координат
    """
    re, im = _unpack(z)
    return math.sqrt(re * re + im * im)


def complex_is_close(
    a: ComplexLike,
    b: ComplexLike,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Покомпонентное сравнение двух комплексных чисел с толерантностью.

    Args:
        a: Первое число
        b: Второе число
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если обе компоненты близки
    """
    a_re, a_im = _unpack(a)
    b_re, b_im = _unpack(b)
    return is_close(a_re, b_re, rel_tol, abs_tol) and is_close(
        a_im, b_im, rel_tol, abs_tol
    )


# =============================================================================
# RANDOM INT
# =============================================================================


def random_int(min_value: float, max_value: float) -> int:
    """
    Равномерное случайное целое на отрезке [ceil(min), floor(max)].

    Использует генератор модуля random (process-wide, не криптостойкий).

    Args:
        min_value: Нижняя граница (округляется вверх)
        max_value: Верхняя граница (округляется вниз)

    Returns:
        Целое в [ceil(min_value), floor(max_value)]

    Raises:
        ValueError: если границы NaN/Inf или ceil(min) > floor(max)

    Examples:
        >>> 1 <= random_int(1, 6) <= 6
        True
        >>> random_int(2.2, 2.9)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValueError: ...
    """
    lo, hi = resolve_int_range(min_value, max_value)
    return math.floor(random.random() * (hi - lo + 1)) + lo


def resolve_int_range(min_value: float, max_value: float) -> tuple[int, int]:
    """
    Приведение границ random_int к целому отрезку с валидацией.

    Raises:
        ValueError: если границы NaN/Inf или отрезок пустой
    """
    validate_finite(min_value, "min_value")
    validate_finite(max_value, "max_value")

    lo = math.ceil(min_value)
    hi = math.floor(max_value)
    if lo > hi:
        raise ValueError(
            f"Empty integer range: ceil(min_value)={lo} > floor(max_value)={hi}"
        )
    return lo, hi
