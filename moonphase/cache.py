"""Single-entry cache of the most recently resolved phase."""

import datetime
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from moonphase.dates import format_date, parse_date
from moonphase.errors import CacheFormatError, CacheWriteError, DateParseError
from moonphase.phases import NamedPhase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheRecord:
    """The phase resolved for one date."""

    date: datetime.date
    phase: NamedPhase

    def to_line(self) -> str:
        """Render the record as a ``YYYY-MM-DD,<Phase Name>`` line."""
        return f"{format_date(self.date)},{self.phase.value}"

    @classmethod
    def parse(cls, content: str) -> "CacheRecord":
        """Parse a record from cache file content.

        Raises:
            CacheFormatError: If the content is not a valid record
        """
        parts = content.strip().split(",")
        if len(parts) != 2:
            raise CacheFormatError(f"Expected 'date,phase', got {content!r}")

        date_text, phase_text = parts
        try:
            return cls(
                date=parse_date(date_text),
                phase=NamedPhase.from_name(phase_text),
            )
        except (DateParseError, ValueError) as e:
            raise CacheFormatError(f"Invalid cache record {content!r}: {e}") from e


def load_cache(path: Path) -> Optional[CacheRecord]:
    """Load the cached record.

    A missing, unreadable or malformed cache file is treated as empty.

    Args:
        path: Path to the cache file

    Returns:
        The cached record, or None if there is none
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No cache file at %s", path)
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Ignoring unreadable cache file %s: %s", path, e)
        return None

    try:
        record = CacheRecord.parse(content)
    except CacheFormatError as e:
        logger.debug("Ignoring cache file %s: %s", path, e)
        return None

    logger.debug("Loaded cached phase %s for %s", record.phase.value, record.date)
    return record


def save_cache(path: Path, record: CacheRecord) -> None:
    """Replace the cache file content with a single record.

    Raises:
        CacheWriteError: If the file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(record.to_line() + "\n", encoding="utf-8")
    except OSError as e:
        raise CacheWriteError(f"Could not write cache file {path}: {e}") from e
    logger.debug("Saved phase %s for %s to %s", record.phase.value, record.date, path)
