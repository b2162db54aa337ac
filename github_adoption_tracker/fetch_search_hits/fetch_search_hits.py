from collections.abc import Iterator, Sequence

from ..github import GitHubClient
from ..models import SearchPage


def build_query(filename: str, language: str, qualifiers: Sequence[str] = ()) -> str:
    """Code search query for a filename, e.g. `filename:goreleaser.yml language:yaml`."""
    parts = [f"filename:{filename}", f"language:{language}", *qualifiers]
    return " ".join(parts)


def iter_search_pages(client: GitHubClient, query: str) -> Iterator[SearchPage]:
    """Yield every page of results for a query, starting at page 1.

    Rate limits are retried inside the client on the same page number, so the
    page only advances after a successful response. Other errors propagate.
    """
    page = 1
    while True:
        result = client.search_code(query, page=page)
        yield result
        if not result.has_next:
            break
        page += 1
