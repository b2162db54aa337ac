"""Search every tracked filename and collect unique, resolved candidates."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from ..candidates import CandidateCollection
from ..fetch_search_hits import build_query, iter_search_pages
from ..github import GitHubClient
from ..models import DEFAULT_FILENAMES, DEFAULT_LANGUAGE, Candidate, CodeHit
from .fetch_candidate import EnrichmentError, fetch_candidate

logger = logging.getLogger(__name__)


def _resolve(client: GitHubClient, hit: CodeHit) -> Candidate | None:
    try:
        return fetch_candidate(client, hit)
    except EnrichmentError as e:
        logger.error("%s: %s", e, e.__cause__)
        return None


def _collect_sequential(client: GitHubClient, hits: list[CodeHit], repos: CandidateCollection) -> None:
    for hit in hits:
        if hit.full_name in repos:
            continue
        candidate = _resolve(client, hit)
        if candidate is not None:
            repos.add(candidate)


def _resolve_first(client: GitHubClient, hits: list[tuple[int, CodeHit]]) -> tuple[int, Candidate | None]:
    """Resolve one repository's hits in order, stopping at the first that resolves."""
    for index, hit in hits:
        candidate = _resolve(client, hit)
        if candidate is not None:
            return index, candidate
    return hits[-1][0], None


def _collect_concurrent(
    client: GitHubClient, hits: list[CodeHit], repos: CandidateCollection, workers: int
) -> None:
    # Hits are grouped per repository; a group stops at its first resolved hit
    pending: dict[str, list[tuple[int, CodeHit]]] = {}
    for index, hit in enumerate(hits):
        if hit.full_name not in repos:
            pending.setdefault(hit.full_name, []).append((index, hit))

    with ThreadPoolExecutor(max_workers=workers) as executor:
        resolved = list(executor.map(lambda group: _resolve_first(client, group), pending.values()))

    # Merge in the order a sequential pass would have added them
    for _, candidate in sorted(resolved, key=lambda pair: pair[0]):
        if candidate is not None:
            repos.add(candidate)


def fetch_candidates(
    client: GitHubClient,
    filenames: Sequence[str] = DEFAULT_FILENAMES,
    language: str = DEFAULT_LANGUAGE,
    qualifiers: Sequence[str] = (),
    workers: int = 1,
) -> CandidateCollection:
    """Run the search for each filename variant into a single collection.

    Search errors propagate. Enrichment failures are logged and skipped.
    """
    repos = CandidateCollection()

    for filename in filenames:
        logger.info("looking for repos with a %s file...", filename)
        query = build_query(filename, language, qualifiers)
        for page in iter_search_pages(client, query):
            logger.info("found %d results", len(page.items))
            if workers > 1:
                _collect_concurrent(client, page.items, repos, workers)
            else:
                _collect_sequential(client, page.items, repos)

    logger.info("collected %d repositories", len(repos))
    return repos
