"""
Numeric Backend Adapter — асинхронная обёртка над compiled provider

Те же четыре операции, что в src.core.math.complex_ops, но выполняемые
compiled provider'ом через общий ScratchBufferPool.

Жизненный цикл provider'а:
1. Первый вызов ensure_provider() запускает загрузку в worker thread и
   кэширует in-flight task: конкурентные вызовы ждут ту же инициализацию
2. Успех кэшируется до конца процесса
3. Ошибка тоже кэшируется: adapter становится непригодным, retry нет

Каждая delegated операция (write → invoke → read) выполняется под
pool.lock, поэтому вызывающему коду не нужно дожидаться завершения
предыдущей операции перед следующей. Entry point provider'а может быть
coroutine function: тогда между записью операндов и чтением результата
event loop переключается на другие корутины, и буферы защищает только lock.

Отмена инициализации (например, event loop закрыт до её завершения) не
считается ошибкой загрузки: следующий вызов запускает её заново.

Ограничение: adapter используется из одного event loop thread.
"""

import asyncio
import inspect
from typing import Any, Callable, Iterable, Optional

from src.core.math.complex_ops import (
    Complex,
    ComplexLike,
    random_int,
    resolve_int_range,
)
from src.infrastructure.logging import get_logger
from src.numeric_backend.buffers import ScratchBufferPool, get_scratch_pool
from src.numeric_backend.provider import (
    NumericProvider,
    ProviderConfig,
    ProviderInitializationError,
    load_provider,
)

logger = get_logger(__name__)


async def _invoke(entry_point: Callable[..., Any], *args: Any) -> Any:
    # Entry point: обычная функция или coroutine function
    result = entry_point(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


class NumericBackendAdapter:
    """
    Adapter к compiled numeric provider'у.

    Args:
        config: Конфигурация provider'а (default: ProviderConfig())
        pool: Пул scratch буферов (default: process-wide пул)
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        pool: Optional[ScratchBufferPool] = None,
    ):
        self.config = config or ProviderConfig()
        self._pool = pool or get_scratch_pool()

        self._provider: Optional[NumericProvider] = None
        self._init_task: Optional[asyncio.Future] = None
        self._init_error: Optional[BaseException] = None

    @property
    def is_ready(self) -> bool:
        return self._provider is not None

    @property
    def is_failed(self) -> bool:
        return self._init_error is not None

    # -------------------------------------------------------------------------
    # Инициализация
    # -------------------------------------------------------------------------

    async def ensure_provider(self) -> NumericProvider:
        """
        Идемпотентная инициализация provider'а.

        Returns:
            Готовый provider

        Raises:
            ProviderInitializationError: Если загрузка провалилась
                (сейчас или при любом предыдущем вызове)
        """
        if self._provider is not None:
            return self._provider

        if self._init_error is not None:
            raise ProviderInitializationError(
                f"Numeric provider '{self.config.provider_type}' failed to "
                f"initialize earlier: {self._init_error}"
            ) from self._init_error

        # Отменённая task (закрытый event loop) не является ошибкой загрузки
        if self._init_task is None or self._init_task.cancelled():
            self._init_task = asyncio.ensure_future(self._initialize())

        # shield: отмена одного ожидающего не отменяет общую инициализацию
        return await asyncio.shield(self._init_task)

    async def _initialize(self) -> NumericProvider:
        logger.info(f"Initializing numeric provider: {self.config.provider_type}")

        try:
            provider = await asyncio.to_thread(load_provider, self.config)
        except Exception as e:
            self._init_error = e
            logger.error(
                f"Numeric provider '{self.config.provider_type}' "
                f"initialization failed: {e}"
            )
            raise ProviderInitializationError(
                f"Failed to initialize numeric provider "
                f"'{self.config.provider_type}': {e}"
            ) from e

        self._provider = provider
        logger.info(f"Numeric provider ready: {self.config.provider_type}")
        return provider

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    async def complex_pow(self, base: ComplexLike, exponent: ComplexLike) -> Complex:
        """base ** exponent через provider (см. complex_ops.complex_pow)."""
        provider = await self.ensure_provider()
        pool = self._pool

        async with pool.lock:
            pool.load_operands(base, exponent)
            await _invoke(provider.complex_pow, pool.a, pool.b, pool.result)
            return pool.read_result()

    async def complex_sub(self, a: ComplexLike, b: ComplexLike) -> Complex:
        provider = await self.ensure_provider()
        pool = self._pool

        async with pool.lock:
            pool.load_operands(a, b)
            await _invoke(provider.complex_sub, pool.a, pool.b, pool.result)
            return pool.read_result()

    async def complex_abs(self, z: ComplexLike) -> float:
        provider = await self.ensure_provider()
        pool = self._pool

        async with pool.lock:
            pool.load_operands(z)
            return float(await _invoke(provider.complex_abs, pool.a))

    async def batch_power(
        self, requests: Iterable[tuple[ComplexLike, ComplexLike]]
    ) -> list[Complex]:
        """
        Последовательный complex_pow для каждого (base, exponent).

        Результат выровнен по индексам с запросами. Ошибка на любом
        элементе прерывает весь batch (частичный результат не возвращается).

        Args:
            requests: Пары (base, exponent), например PowerRequest

        Returns:
            Список Complex той же длины
        """
        results: list[Complex] = []
        for base, exponent in requests:
            results.append(await self.complex_pow(base, exponent))
        return results

    async def random_int(self, min_value: float, max_value: float) -> int:
        """
        Случайное целое на [ceil(min), floor(max)] через provider.

        Если вызов provider'а падает по любой причине, значение берётся из
        локального генератора (complex_ops.random_int), ошибка логируется.

        Raises:
            ValueError: Если границы невалидны (до обращения к provider'у)
            ProviderInitializationError: Если provider не инициализирован
        """
        lo, hi = resolve_int_range(min_value, max_value)
        provider = await self.ensure_provider()

        try:
            return int(await _invoke(provider.random_int, float(lo), float(hi)))
        except Exception as e:
            logger.warning(
                f"Provider random_int failed ({e!r}); using local generator"
            )
            return random_int(lo, hi)


# =============================================================================
# DEFAULT ADAPTER
# =============================================================================

_DEFAULT_ADAPTER: Optional[NumericBackendAdapter] = None


def get_default_adapter() -> NumericBackendAdapter:
    """Process-wide adapter с конфигурацией по умолчанию (создаётся лениво)."""
    global _DEFAULT_ADAPTER
    if _DEFAULT_ADAPTER is None:
        _DEFAULT_ADAPTER = NumericBackendAdapter()
    return _DEFAULT_ADAPTER
