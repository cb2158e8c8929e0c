"""
Scratch Buffer Pool — переиспользуемые float64 буферы для provider'а

Compiled provider принимает комплексные числа не по значению, а через
буферы: каждый буфер это непрерывный float64 массив ровно из двух значений
(re, im). Чтобы не аллоцировать массивы на каждый вызов (рендер делает
миллионы вызовов на кадр), пул выделяет три буфера один раз на процесс:

- a:      первый операнд
- b:      второй операнд
- result: результат

КРИТИЧЕСКИЙ ИНВАРИАНТ:
Последовательность write → invoke → read разделяет мутабельные буферы,
поэтому выполняется только под pool.lock (см. NumericBackendAdapter).
"""

import asyncio
from typing import Final

import numpy as np

from src.core.math.complex_ops import Complex, ComplexLike

# Ширина буфера: (re, im)
COMPLEX_WIDTH: Final[int] = 2


class ScratchBufferPool:
    """
    Три фиксированных буфера (a, b, result) по COMPLEX_WIDTH float64.

    Аллоцируются один раз и живут до конца процесса.
    """

    def __init__(self) -> None:
        self.a = np.zeros(COMPLEX_WIDTH, dtype=np.float64)
        self.b = np.zeros(COMPLEX_WIDTH, dtype=np.float64)
        self.result = np.zeros(COMPLEX_WIDTH, dtype=np.float64)

        # Сериализует доступ к буферам между корутинами
        self.lock = asyncio.Lock()

    @staticmethod
    def write(buffer: np.ndarray, z: ComplexLike) -> None:
        re, im = z
        buffer[0] = re
        buffer[1] = im

    @staticmethod
    def read(buffer: np.ndarray) -> Complex:
        return Complex(float(buffer[0]), float(buffer[1]))

    def load_operands(self, a: ComplexLike, b: ComplexLike | None = None) -> None:
        """Запись операндов в буферы a (и b, если передан)."""
        self.write(self.a, a)
        if b is not None:
            self.write(self.b, b)

    def read_result(self) -> Complex:
        return self.read(self.result)


# Единственный пул на процесс
_SCRATCH_POOL = ScratchBufferPool()


def get_scratch_pool() -> ScratchBufferPool:
    """Process-wide пул scratch буферов."""
    return _SCRATCH_POOL
