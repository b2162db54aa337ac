"""Ranked text report of adopting repositories."""

import sys
from typing import TextIO

from .candidates import CandidateCollection
from .models import DEFAULT_LABEL, Candidate

BOLD = "\033[1m"
RESET = "\033[0m"


def format_line(candidate: Candidate) -> str:
    return f"{candidate.name} with {candidate.stars} stars (using since {candidate.adoption_date})"


def print_report(candidates: CandidateCollection, label: str = DEFAULT_LABEL, out: TextIO | None = None) -> None:
    """Print a count header followed by one line per candidate, most starred first."""
    out = out or sys.stdout
    ranked = candidates.by_stars()

    out.write("\n\n")
    out.write(f"{BOLD}THERE ARE {len(ranked)} REPOSITORIES USING {label.upper()}:{RESET}\n")
    out.write("\n")
    for candidate in ranked:
        out.write(format_line(candidate) + "\n")
    out.flush()
