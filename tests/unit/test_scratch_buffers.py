"""
Тесты для ScratchBufferPool

Проверяет:
1. Размер и dtype буферов (2 × float64)
2. Запись/чтение Complex через буферы
3. Единственность process-wide пула
"""

import numpy as np

from src.core.math.complex_ops import Complex
from src.numeric_backend.buffers import (
    COMPLEX_WIDTH,
    ScratchBufferPool,
    get_scratch_pool,
)


class TestScratchBufferPool:
    def test_buffer_layout(self) -> None:
        pool = ScratchBufferPool()
        for buffer in (pool.a, pool.b, pool.result):
            assert buffer.shape == (COMPLEX_WIDTH,)
            assert buffer.dtype == np.float64
            assert buffer.flags["C_CONTIGUOUS"]

    def test_buffers_are_distinct(self) -> None:
        pool = ScratchBufferPool()
        assert not np.shares_memory(pool.a, pool.b)
        assert not np.shares_memory(pool.a, pool.result)

    def test_write_read(self) -> None:
        pool = ScratchBufferPool()
        pool.write(pool.result, (1.5, -2.5))
        value = pool.read_result()
        assert value == Complex(1.5, -2.5)
        assert type(value.re) is float

    def test_load_operands(self) -> None:
        pool = ScratchBufferPool()
        pool.load_operands((1.0, 2.0), (3.0, 4.0))
        assert pool.a.tolist() == [1.0, 2.0]
        assert pool.b.tolist() == [3.0, 4.0]

    def test_load_single_operand_keeps_b(self) -> None:
        pool = ScratchBufferPool()
        pool.load_operands((1.0, 2.0), (3.0, 4.0))
        pool.load_operands((5.0, 6.0))
        assert pool.a.tolist() == [5.0, 6.0]
        assert pool.b.tolist() == [3.0, 4.0]

    def test_reused_across_calls(self) -> None:
        """Буферы не переаллоцируются: тот же объект после записи."""
        pool = ScratchBufferPool()
        before = pool.a
        pool.load_operands((9.0, 9.0))
        assert pool.a is before


class TestProcessWidePool:
    def test_singleton(self) -> None:
        assert get_scratch_pool() is get_scratch_pool()
