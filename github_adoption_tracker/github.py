"""GitHub API client using PyGithub with throttling and rate-limit retries."""

import logging
import threading
import time
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from github import Auth, Github, GithubException, RateLimitExceededException
from github.Repository import Repository

from .models import GITHUB_SEARCH_RESULT_LIMIT, CodeHit, SearchPage
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RateLimitRetriesExceeded(RuntimeError):
    """Raised when a request is still rate limited after the retry ceiling."""


def is_rate_limit(e: GithubException) -> bool:
    """Whether a GitHub error is a (primary or secondary) rate-limit response."""
    if isinstance(e, RateLimitExceededException) or e.status == 429:
        return True
    return e.status == 403 and "rate limit" in str(e).lower()


class GitHubClient:
    """GitHub API client using PyGithub.

    Auth is handled via GITHUB_TOKEN (environment or .env).
    Every outbound call goes through `_call`, which sleeps a fixed cooldown
    and re-issues the same request whenever GitHub answers with a rate limit.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._github: Github | None = None
        # Throttle: space API calls evenly to avoid secondary rate limits
        self._throttle_lock = threading.Lock()
        self._last_request_time = 0.0
        self._min_interval = 1.0 / self.settings.requests_per_second

    @property
    def per_page(self) -> int:
        return self.settings.per_page

    @property
    def github(self) -> Github:
        """Lazy-initialize the GitHub client."""
        if self._github is None:
            if not self.settings.github_token:
                raise RuntimeError("GITHUB_TOKEN is not set")
            auth = Auth.Token(self.settings.github_token)
            self._github = Github(auth=auth, retry=3, per_page=self.per_page)
        return self._github

    def _throttle(self) -> None:
        """Wait if needed to maintain steady request rate."""
        with self._throttle_lock:
            now = time.time()
            elapsed = now - self._last_request_time
            if elapsed < self._min_interval:
                time.sleep(self._min_interval - elapsed)
            self._last_request_time = time.time()

    def _call(self, description: str, fn: Callable[[], T]) -> T:
        """Run one logical request, retrying it after a cooldown on rate limits.

        Any error that is not a rate limit propagates unchanged.
        """
        attempts = 0
        while True:
            try:
                self._throttle()
                return fn()
            except GithubException as e:
                if not is_rate_limit(e):
                    raise
                attempts += 1
                ceiling = self.settings.max_rate_limit_retries
                if ceiling is not None and attempts > ceiling:
                    raise RateLimitRetriesExceeded(
                        f"Still rate limited after {attempts - 1} retries: {description}"
                    ) from e
                logger.warning(
                    "hit rate limit on %s, retrying in %ss",
                    description,
                    self.settings.rate_limit_cooldown,
                )
                time.sleep(self.settings.rate_limit_cooldown)

    def search_code(self, query: str, page: int = 1) -> SearchPage:
        """Fetch one page (1-indexed) of code search results."""
        per_page = self.per_page

        def _fetch() -> SearchPage:
            # get_page() is 0-indexed and makes a single API call
            results = self.github.search_code(query=query)
            page_items = results.get_page(page - 1)
            total_count = results.totalCount
            items = [
                CodeHit(
                    owner=item.repository.owner.login,
                    repo=item.repository.name,
                    full_name=item.repository.full_name,
                    path=item.path,
                )
                for item in page_items
            ]
            reachable = min(total_count, GITHUB_SEARCH_RESULT_LIMIT)
            return SearchPage(
                page=page,
                total_count=total_count,
                items=items,
                has_next=bool(items) and page * per_page < reachable,
            )

        try:
            return self._call(f"search {query!r} page {page}", _fetch)
        except GithubException as e:
            if e.status == 422 and page > 1:
                # Past the search pagination ceiling
                return SearchPage(page=page, total_count=0)
            raise

    def get_repo(self, owner: str, name: str) -> Repository:
        return self._call(f"repo {owner}/{name}", lambda: self.github.get_repo(f"{owner}/{name}"))

    def get_oldest_commit_sha(self, repo: Repository, path: str) -> str | None:
        """SHA of the oldest commit touching `path`, or None without history.

        Commits are listed newest first, so only the last page is fetched.
        """

        def _fetch() -> str | None:
            commits = repo.get_commits(path=path)
            total = commits.totalCount
            if not total:
                return None
            last_page = commits.get_page((total - 1) // self.per_page)
            if not last_page:
                return None
            return last_page[-1].sha

        return self._call(f"commits {repo.full_name}:{path}", _fetch)

    def get_commit_date(self, repo: Repository, sha: str) -> datetime:
        """Committer timestamp of a full git commit."""
        commit = self._call(f"commit {repo.full_name}@{sha[:7]}", lambda: repo.get_git_commit(sha))
        return commit.committer.date


_client: GitHubClient | None = None


def get_client() -> GitHubClient:
    """Get or create the process-wide GitHub client."""
    global _client
    if _client is None:
        _client = GitHubClient()
    return _client
