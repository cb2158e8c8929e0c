"""
Numeric Backend: offload комплексной арифметики в compiled provider.

Usage:
    from src.numeric_backend import get_default_adapter

    adapter = get_default_adapter()
    w = await adapter.complex_pow((2.0, 0.0), (3.0, 0.0))
"""

from .adapter import NumericBackendAdapter, get_default_adapter
from .buffers import COMPLEX_WIDTH, ScratchBufferPool, get_scratch_pool
from .provider import (
    DEFAULT_PROVIDER_TYPE,
    REQUIRED_ENTRY_POINTS,
    NumericProvider,
    ProviderConfig,
    ProviderInitializationError,
    ProviderRegistry,
    UnknownProviderError,
    load_provider,
    register_provider,
)

__all__ = [
    # Adapter
    "NumericBackendAdapter",
    "get_default_adapter",
    # Buffers
    "COMPLEX_WIDTH",
    "ScratchBufferPool",
    "get_scratch_pool",
    # Provider
    "DEFAULT_PROVIDER_TYPE",
    "REQUIRED_ENTRY_POINTS",
    "NumericProvider",
    "ProviderConfig",
    "ProviderInitializationError",
    "ProviderRegistry",
    "UnknownProviderError",
    "load_provider",
    "register_provider",
]
