"""Phase lookup: cache, data provider and resolver wired together."""

import datetime
import logging
from pathlib import Path
from typing import Optional

from moonphase.cache import CacheRecord, load_cache, save_cache
from moonphase.constants import DEFAULT_EVENT_COUNT, LOOKBACK_DAYS
from moonphase.dates import local_midnight
from moonphase.errors import InsufficientDataError
from moonphase.phases import NamedPhase
from moonphase.providers.base import DataProvider
from moonphase.resolver import resolve_phase

logger = logging.getLogger(__name__)


class PhaseService:
    """Looks up the Moon's phase for calendar dates."""

    def __init__(
        self,
        provider: DataProvider,
        tz: datetime.tzinfo,
        cache_path: Optional[Path] = None,
    ):
        """Initialize the service.

        Args:
            provider: Source of major phase events
            tz: Timezone defining the local calendar
            cache_path: Path to the cache file, or None to disable caching
        """
        self.provider = provider
        self.tz = tz
        self.cache_path = cache_path

    def phase_for_date(self, target: datetime.date) -> NamedPhase:
        """Resolve the phase for a date from freshly fetched events."""
        try:
            start = target - datetime.timedelta(days=LOOKBACK_DAYS)
            events = self.provider.fetch_events(start, DEFAULT_EVENT_COUNT)
            return resolve_phase(local_midnight(target, self.tz), events, self.tz)
        except OverflowError as e:
            raise InsufficientDataError(
                f"Date {target.isoformat()} is outside the supported range"
            ) from e

    def lookup(self, target: datetime.date) -> NamedPhase:
        """Get the phase for a date, using the cache when it holds that date."""
        if self.cache_path is not None:
            cached = load_cache(self.cache_path)
            if cached is not None and cached.date == target:
                logger.info("Using cached phase for %s", target)
                return cached.phase

        phase = self.phase_for_date(target)
        logger.info("Resolved phase for %s: %s", target, phase.value)

        if self.cache_path is not None:
            save_cache(self.cache_path, CacheRecord(date=target, phase=phase))
        return phase
