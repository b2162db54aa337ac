"""Deduplicated collection of candidate repositories."""

from collections.abc import Iterator

from .models import Candidate


class CandidateCollection:
    """Candidates keyed by full name. The first candidate seen for a name wins."""

    def __init__(self) -> None:
        self._by_name: dict[str, Candidate] = {}

    def add(self, candidate: Candidate) -> bool:
        """Add a candidate. Returns False (and keeps the existing one) for a known name."""
        if not candidate.name or candidate.name in self._by_name:
            return False
        self._by_name[candidate.name] = candidate
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._by_name.values())

    def by_stars(self) -> list[Candidate]:
        """Most starred first."""
        return sorted(self._by_name.values(), key=lambda c: c.stars, reverse=True)

    def by_date(self) -> list[Candidate]:
        """Earliest adopter first."""
        return sorted(self._by_name.values(), key=lambda c: c.adoption_date)
