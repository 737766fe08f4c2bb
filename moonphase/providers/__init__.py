"""Phase data providers for moonphase."""

from typing import Optional

from moonphase.providers.base import DataProvider, ProviderConfig
from moonphase.providers.usno import USNOProvider

__all__ = [
    "DataProvider",
    "ProviderConfig",
    "USNOProvider",
    "get_provider",
]


def get_provider(config: Optional[ProviderConfig] = None) -> DataProvider:
    """Get the phase data provider.

    Args:
        config: Provider configuration, read from the environment if omitted

    Returns:
        Provider instance
    """
    return USNOProvider(config or ProviderConfig.from_env())
