"""Resolve the named phase for a date from bracketing major phase events.

The data provider only reports the four major phases, each on a single date.
A target date within ``PROXIMITY_DAYS`` of one of those events is reported as
that major phase. Otherwise it lies in the middle of the interval between two
consecutive major phases and is reported as the intermediate phase named by
that pair.
"""

import datetime
import logging
from typing import Dict, Sequence, Tuple

from moonphase.constants import PROXIMITY_DAYS
from moonphase.dates import local_midnight
from moonphase.errors import InsufficientDataError, PhaseSequenceError
from moonphase.phases import NamedPhase, PhaseEvent

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

INTERMEDIATE_PHASES: Dict[Tuple[NamedPhase, NamedPhase], NamedPhase] = {
    (NamedPhase.NEW_MOON, NamedPhase.FIRST_QUARTER): NamedPhase.WAXING_CRESCENT,
    (NamedPhase.FIRST_QUARTER, NamedPhase.FULL_MOON): NamedPhase.WAXING_GIBBOUS,
    (NamedPhase.FULL_MOON, NamedPhase.LAST_QUARTER): NamedPhase.WANING_GIBBOUS,
    (NamedPhase.LAST_QUARTER, NamedPhase.NEW_MOON): NamedPhase.WANING_CRESCENT,
}


def days_between(start: datetime.datetime, end: datetime.datetime) -> float:
    """Return the elapsed (possibly fractional) number of days from start to end."""
    # Datetimes sharing a tzinfo subtract as wall-clock times, so compare in UTC
    utc = datetime.timezone.utc
    elapsed = end.astimezone(utc) - start.astimezone(utc)
    return elapsed.total_seconds() / SECONDS_PER_DAY


def intermediate_phase(previous: NamedPhase, upcoming: NamedPhase) -> NamedPhase:
    """Get the intermediate phase lying between two consecutive major phases.

    Raises:
        PhaseSequenceError: If the pair is not consecutive in the lunar cycle
    """
    try:
        return INTERMEDIATE_PHASES[(previous, upcoming)]
    except KeyError:
        raise PhaseSequenceError(
            f"Unexpected phase sequence: {previous.value} followed by {upcoming.value}"
        ) from None


def resolve_phase(
    target: datetime.datetime,
    events: Sequence[PhaseEvent],
    tz: datetime.tzinfo,
) -> NamedPhase:
    """Get the named phase at a target instant.

    Args:
        target: Timezone-aware instant, normally local midnight of the target date
        events: Major phase events in ascending chronological order
        tz: Timezone whose midnight each event date is placed at

    Returns:
        The named phase at the target instant

    Raises:
        InsufficientDataError: If no event falls before and after the target
        PhaseSequenceError: If the bracketing events are not consecutive phases
    """
    if target.tzinfo is None:
        raise ValueError("target must be timezone-aware")

    for index, upcoming in enumerate(events):
        upcoming_at = local_midnight(upcoming.date, tz)
        if upcoming_at <= target:
            continue

        if index < 1:
            raise InsufficientDataError(
                f"No phase event before {target.date().isoformat()}; "
                "date range of phase data doesn't have enough history"
            )

        previous = events[index - 1]
        previous_at = local_midnight(previous.date, tz)
        days_since = days_between(previous_at, target)
        days_until = days_between(target, upcoming_at)
        logger.debug(
            "Bracketed by %s on %s (%.2f days ago) and %s on %s (in %.2f days)",
            previous.phase.value,
            previous.date,
            days_since,
            upcoming.phase.value,
            upcoming.date,
            days_until,
        )

        if days_since < PROXIMITY_DAYS:
            return previous.phase
        if days_until < PROXIMITY_DAYS:
            return upcoming.phase
        return intermediate_phase(previous.phase, upcoming.phase)

    raise InsufficientDataError(
        f"No phase event after {target.date().isoformat()}; "
        "date range of phase data doesn't reach far enough"
    )
