"""
Numeric Provider — граница с compiled numeric backend

Provider: внешний (compiled) модуль с четырьмя entry points по имени:

    complex_pow(a_buf, b_buf, out_buf) -> None
    complex_sub(a_buf, b_buf, out_buf) -> None
    complex_abs(a_buf) -> float
    random_int(lo, hi) -> float

Каждый буфер: float64 массив из двух значений (re, im), см. buffers.py.
Entry point может быть и coroutine function (adapter дождётся результата).

Provider'ы регистрируются в ProviderRegistry под именем и создаются
load_provider() по ProviderConfig.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Final, List, Protocol

import numpy as np

from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

# Entry points, которые обязан экспортировать provider
REQUIRED_ENTRY_POINTS: Final[tuple[str, ...]] = (
    "complex_pow",
    "complex_sub",
    "complex_abs",
    "random_int",
)

DEFAULT_PROVIDER_TYPE: Final[str] = "numba"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ProviderInitializationError(RuntimeError):
    """
    Provider не удалось загрузить.

    Фатально для adapter'а: повторная инициализация не выполняется,
    все последующие операции получают эту ошибку.
    """

    pass


class UnknownProviderError(ValueError):
    """Тип provider'а не зарегистрирован в ProviderRegistry."""

    pass


# =============================================================================
# CONFIG & PROTOCOL
# =============================================================================


@dataclass(frozen=True)
class ProviderConfig:
    """Конфигурация provider'а."""

    provider_type: str = DEFAULT_PROVIDER_TYPE
    # Прогрев (компиляция) всех entry points при загрузке
    warmup: bool = True


class NumericProvider(Protocol):
    """Интерфейс compiled provider'а."""

    def complex_pow(
        self, a_buf: np.ndarray, b_buf: np.ndarray, out_buf: np.ndarray
    ) -> None: ...

    def complex_sub(
        self, a_buf: np.ndarray, b_buf: np.ndarray, out_buf: np.ndarray
    ) -> None: ...

    def complex_abs(self, a_buf: np.ndarray) -> float: ...

    def random_int(self, lo: float, hi: float) -> float: ...


ProviderLoader = Callable[[ProviderConfig], NumericProvider]


# =============================================================================
# REGISTRY
# =============================================================================


class ProviderRegistry:
    """
    Реестр доступных provider'ов.

    Loader: callable(ProviderConfig) -> NumericProvider (класс или функция).
    """

    _loaders: Dict[str, ProviderLoader] = {}

    @classmethod
    def register(cls, name: str, loader: ProviderLoader) -> None:
        key = name.lower()
        if key in cls._loaders:
            logger.warning(f"Provider '{key}' already registered. Overwriting")

        cls._loaders[key] = loader
        logger.debug(f"Registered numeric provider: {key}")

    @classmethod
    def create(cls, config: ProviderConfig) -> NumericProvider:
        """
        Создание provider'а по конфигурации.

        Raises:
            UnknownProviderError: Если тип не зарегистрирован
        """
        key = config.provider_type.lower()

        if key not in cls._loaders:
            available = ", ".join(sorted(cls._loaders))
            raise UnknownProviderError(
                f"Unknown provider: {key}. Available providers: {available}"
            )

        return cls._loaders[key](config)

    @classmethod
    def list_providers(cls) -> List[str]:
        return list(cls._loaders.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name.lower() in cls._loaders

    @classmethod
    def unregister(cls, name: str) -> None:
        """Удаление provider'а из реестра (в основном для тестов)."""
        cls._loaders.pop(name.lower(), None)


def register_provider(name: str):
    """
    Decorator для регистрации loader'а provider'а.

    Example:
        @register_provider("numba")
        def _load_numba(config):
            ...
    """

    def decorator(loader):
        ProviderRegistry.register(name, loader)
        return loader

    return decorator


def load_provider(config: ProviderConfig) -> NumericProvider:
    """
    Загрузка provider'а и проверка entry points.

    Блокирующая операция (может включать JIT-компиляцию).

    Raises:
        UnknownProviderError: Если тип не зарегистрирован
        ProviderInitializationError: Если provider не экспортирует entry point
    """
    provider = ProviderRegistry.create(config)

    missing = [
        name
        for name in REQUIRED_ENTRY_POINTS
        if not callable(getattr(provider, name, None))
    ]
    if missing:
        raise ProviderInitializationError(
            f"Provider '{config.provider_type}' is missing entry points: {missing}"
        )

    return provider


# =============================================================================
# BUILT-IN PROVIDERS
# =============================================================================


@register_provider("numba")
def _load_numba_provider(config: ProviderConfig) -> NumericProvider:
    # numba импортируется лениво: ошибка импорта означает ошибку инициализации
    from src.numeric_backend.kernels import NumbaProvider

    return NumbaProvider(config)
