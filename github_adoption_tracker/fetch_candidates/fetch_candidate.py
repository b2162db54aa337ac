"""Resolve a single code search hit into a candidate repository."""

import logging

from ..github import GitHubClient
from ..models import Candidate, CodeHit

logger = logging.getLogger(__name__)


class EnrichmentError(Exception):
    """Repository details could not be fetched for a hit."""

    def __init__(self, repo: str):
        super().__init__(f"failed to get repo details for {repo}")
        self.repo = repo


def fetch_candidate(client: GitHubClient, hit: CodeHit) -> Candidate | None:
    """Look up stars and adoption date for a hit.

    Returns None when the hit should be skipped: an absolute matched path, an
    empty commit history, or a failure while reading history. Raises
    EnrichmentError when the repository itself cannot be fetched.
    """
    try:
        repo = client.get_repo(hit.owner, hit.repo)
    except Exception as e:
        raise EnrichmentError(hit.full_name) from e

    if hit.path.startswith("/"):
        logger.debug("skipping %s: absolute path %s", hit.full_name, hit.path)
        return None

    try:
        sha = client.get_oldest_commit_sha(repo, hit.path)
        if sha is None:
            logger.warning("no commits touching %s in %s, skipping", hit.path, repo.full_name)
            return None
        adopted = client.get_commit_date(repo, sha)
    except Exception as e:
        logger.warning("failed to get history of %s in %s: %s", hit.path, repo.full_name, e)
        return None

    return Candidate(name=repo.full_name, stars=repo.stargazers_count, adoption_date=adopted)
