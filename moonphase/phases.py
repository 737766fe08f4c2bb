"""Phase types for moonphase."""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class NamedPhase(str, Enum):
    """The eight named phases of the Moon."""

    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"

    @classmethod
    def from_name(cls, name: str) -> "NamedPhase":
        """Look up a phase by name.

        Matching ignores case, spaces and underscores, so "Waxing Crescent",
        "WaxingCrescent" and "WAXING_CRESCENT" are the same phase.

        Raises:
            ValueError: If the name is not one of the eight phases
        """
        key = _name_key(name)
        for phase in cls:
            if _name_key(phase.value) == key:
                return phase
        raise ValueError(f"Unknown moon phase: {name!r}")

    @property
    def is_major(self) -> bool:
        """Whether the data provider reports this phase as a dated event."""
        return self in MAJOR_PHASES


def _name_key(name: str) -> str:
    return "".join(name.split()).replace("_", "").casefold()


MAJOR_PHASES = frozenset(
    {
        NamedPhase.NEW_MOON,
        NamedPhase.FIRST_QUARTER,
        NamedPhase.FULL_MOON,
        NamedPhase.LAST_QUARTER,
    }
)


@dataclass(frozen=True)
class PhaseEvent:
    """A major phase occurring on a calendar date."""

    date: datetime.date
    phase: NamedPhase
    time: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.phase.is_major:
            raise ValueError(f"{self.phase.value} is not a major phase")

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PhaseEvent":
        """Create a phase event from a ``phasedata`` entry."""
        return cls(
            date=datetime.date(data["year"], data["month"], data["day"]),
            phase=NamedPhase.from_name(data["phase"]),
            time=data.get("time"),
        )
