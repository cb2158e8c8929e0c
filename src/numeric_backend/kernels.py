"""
Numba kernels — compiled numeric provider

JIT-компилируемые (numba) реализации entry points provider'а. Формулы те же,
что в src.core.math.complex_ops; kernels работают с float64 буферами
(re, im) вместо Complex.

error_model="numpy": деление на ноль даёт ±Inf/NaN вместо ZeroDivisionError,
как и в чистой реализации.
"""

import math
import time
from typing import Final

import numpy as np
from numba import njit

from src.infrastructure.logging import get_logger
from src.numeric_backend.buffers import COMPLEX_WIDTH
from src.numeric_backend.provider import ProviderConfig

logger = get_logger(__name__)

TWO_PI: Final[float] = 2.0 * math.pi
MAX_SAFE_INTEGER: Final[float] = float(2**53 - 1)


# =============================================================================
# KERNELS
# =============================================================================


@njit(cache=True, nogil=True, error_model="numpy")
def fast_pow_kernel(x, n):
    negative = n < 0
    if negative:
        n = -n
    result = 1.0
    while n > 0:
        if n & 1:
            result *= x
        x *= x
        n >>= 1
    if negative:
        return 1.0 / result
    return result


@njit(cache=True, nogil=True, error_model="numpy")
def complex_pow_kernel(a_buf, b_buf, out_buf):
    a = a_buf[0]
    b = a_buf[1]
    x = b_buf[0]
    y = b_buf[1]

    r = math.hypot(a, b)
    if r == 0.0:
        if x > 0.0:
            out_buf[0] = 0.0
            out_buf[1] = 0.0
        else:
            out_buf[0] = np.nan
            out_buf[1] = np.nan
        return

    theta = math.atan2(b, a)
    log_r = math.log(r)

    if math.isfinite(x) and abs(x) <= MAX_SAFE_INTEGER and x == np.floor(x):
        r_pow_x = fast_pow_kernel(r, np.int64(x))
    else:
        r_pow_x = r**x

    angle = x * theta
    if y != 0.0:
        angle += y * log_r
    angle = angle % TWO_PI

    factor = r_pow_x * math.exp(-y * theta)
    out_buf[0] = factor * math.cos(angle)
    out_buf[1] = factor * math.sin(angle)


@njit(cache=True, nogil=True)
def complex_sub_kernel(a_buf, b_buf, out_buf):
    out_buf[0] = a_buf[0] - b_buf[0]
    out_buf[1] = a_buf[1] - b_buf[1]


@njit(cache=True, nogil=True)
def complex_abs_kernel(a_buf):
    return math.sqrt(a_buf[0] * a_buf[0] + a_buf[1] * a_buf[1])


@njit(cache=True, nogil=True)
def random_int_kernel(lo, hi):
    # Генератор numba независим от np.random интерпретатора
    return np.floor(np.random.random() * (hi - lo + 1.0)) + lo


# =============================================================================
# PROVIDER
# =============================================================================


class NumbaProvider:
    """
    NumericProvider поверх numba kernels.

    При warmup=True все kernels компилируются в конструкторе, чтобы первая
    операция рендера не платила за JIT.
    """

    name = "numba"

    def __init__(self, config: ProviderConfig):
        self.config = config
        if config.warmup:
            self.warmup()

    def warmup(self) -> None:
        started = time.perf_counter()

        a = np.ones(COMPLEX_WIDTH, dtype=np.float64)
        b = np.ones(COMPLEX_WIDTH, dtype=np.float64)
        out = np.zeros(COMPLEX_WIDTH, dtype=np.float64)
        complex_pow_kernel(a, b, out)
        complex_sub_kernel(a, b, out)
        complex_abs_kernel(a)
        random_int_kernel(0.0, 1.0)

        logger.info(
            f"Numba kernels compiled in {time.perf_counter() - started:.3f}s"
        )

    def complex_pow(
        self, a_buf: np.ndarray, b_buf: np.ndarray, out_buf: np.ndarray
    ) -> None:
        complex_pow_kernel(a_buf, b_buf, out_buf)

    def complex_sub(
        self, a_buf: np.ndarray, b_buf: np.ndarray, out_buf: np.ndarray
    ) -> None:
        complex_sub_kernel(a_buf, b_buf, out_buf)

    def complex_abs(self, a_buf: np.ndarray) -> float:
        return float(complex_abs_kernel(a_buf))

    def random_int(self, lo: float, hi: float) -> float:
        return float(random_int_kernel(lo, hi))
