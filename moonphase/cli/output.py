"""Output formatting for the CLI."""

from enum import Enum
from typing import Dict

import click

from moonphase.phases import NamedPhase


class OutputMode(str, Enum):
    """Output modes."""

    PLAINTEXT = "plaintext"
    SYMBOLIC = "symbolic"


PHASE_GLYPHS: Dict[NamedPhase, str] = {
    NamedPhase.NEW_MOON: "🌑",
    NamedPhase.WAXING_CRESCENT: "🌒",
    NamedPhase.FIRST_QUARTER: "🌓",
    NamedPhase.WAXING_GIBBOUS: "🌔",
    NamedPhase.FULL_MOON: "🌕",
    NamedPhase.WANING_GIBBOUS: "🌖",
    NamedPhase.LAST_QUARTER: "🌗",
    NamedPhase.WANING_CRESCENT: "🌘",
}


def format_phase(phase: NamedPhase, mode: OutputMode = OutputMode.SYMBOLIC) -> str:
    """Render a phase as its English name or its glyph."""
    if mode == OutputMode.PLAINTEXT:
        return phase.value
    return PHASE_GLYPHS[phase]


class Style:
    """Terminal styling constants."""

    ERROR = click.style("✗", fg="red", bold=True)
    WARNING = click.style("!", fg="yellow", bold=True)

    @staticmethod
    def error(text: str) -> str:
        """Format an error message."""
        return f"{Style.ERROR} {text}"

    @staticmethod
    def warning(text: str) -> str:
        """Format a warning message."""
        return f"{Style.WARNING} {text}"
