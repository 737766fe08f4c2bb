"""Base types and classes for phase data providers."""

import datetime
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from moonphase.constants import DEFAULT_API_URL, DEFAULT_TIMEOUT
from moonphase.env import get_env_var
from moonphase.errors import ConfigurationError
from moonphase.phases import PhaseEvent


@dataclass
class ProviderConfig:
    """Provider configuration."""

    base_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, base_url: Optional[str] = None) -> "ProviderConfig":
        """Create a provider config from the environment.

        Args:
            base_url: Explicit base URL, taking precedence over the environment

        Raises:
            ConfigurationError: If MOONPHASE_TIMEOUT is not a number
        """
        env_url = get_env_var("MOONPHASE_API_URL", "")
        env_timeout = get_env_var("MOONPHASE_TIMEOUT", "")

        try:
            timeout = float(env_timeout) if env_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(
                f"MOONPHASE_TIMEOUT must be a number, got '{env_timeout}'"
            ) from e

        return cls(
            base_url=(base_url or env_url or DEFAULT_API_URL).rstrip("/"),
            timeout=timeout,
        )


class DataProvider(ABC):
    """Abstract base class for phase data providers."""

    def __init__(self, config: Optional[ProviderConfig] = None):
        """Initialize the provider."""
        self.config = config or ProviderConfig()

    @abstractmethod
    def fetch_events(self, start: datetime.date, count: int) -> List[PhaseEvent]:
        """Fetch major phase events on or after a date.

        Args:
            start: Date to start the search from
            count: Number of events to return

        Returns:
            Phase events in ascending chronological order
        """
        raise NotImplementedError  # pragma: no cover
