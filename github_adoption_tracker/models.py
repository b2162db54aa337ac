"""Data models and constants for adoption tracking."""

from dataclasses import dataclass, field
from datetime import datetime

GITHUB_SEARCH_RESULT_LIMIT = 1000  # GitHub Code Search API hard limit per query

DEFAULT_FILENAMES = ("goreleaser.yml", "goreleaser.yaml")
DEFAULT_LANGUAGE = "yaml"
DEFAULT_LABEL = "GORELEASER"


@dataclass(frozen=True)
class CodeHit:
    """One code search match: the repository and the matched file path."""

    owner: str
    repo: str
    full_name: str
    path: str


@dataclass
class SearchPage:
    page: int
    total_count: int
    items: list[CodeHit] = field(default_factory=list)
    has_next: bool = False


@dataclass(frozen=True)
class Candidate:
    """A repository confirmed to contain the tracked file."""

    name: str
    stars: int
    adoption_date: datetime
