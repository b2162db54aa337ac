"""Unit tests for the candidate collection."""

from datetime import datetime, timezone

from .candidates import CandidateCollection
from .models import Candidate


def _candidate(name: str, stars: int = 0, day: int = 1) -> Candidate:
    return Candidate(name=name, stars=stars, adoption_date=datetime(2020, 1, day, tzinfo=timezone.utc))


def describe_CandidateCollection():

    def describe_add():
        def it_adds_new_names():
            repos = CandidateCollection()

            assert repos.add(_candidate("a/one"))
            assert repos.add(_candidate("b/two"))

            assert len(repos) == 2
            assert "a/one" in repos

        def it_keeps_first_seen_on_duplicate():
            repos = CandidateCollection()
            repos.add(_candidate("a/one", stars=5))

            assert not repos.add(_candidate("a/one", stars=500))

            assert len(repos) == 1
            assert list(repos)[0].stars == 5

        def it_rejects_empty_names():
            repos = CandidateCollection()

            assert not repos.add(_candidate(""))
            assert len(repos) == 0

        def it_iterates_in_insertion_order():
            repos = CandidateCollection()
            for name in ["c/c", "a/a", "b/b"]:
                repos.add(_candidate(name))

            assert [c.name for c in repos] == ["c/c", "a/a", "b/b"]

    def describe_by_stars():
        def it_orders_most_starred_first():
            repos = CandidateCollection()
            for name, stars in [("a/a", 5), ("b/b", 80), ("c/c", 3)]:
                repos.add(_candidate(name, stars=stars))

            assert [c.stars for c in repos.by_stars()] == [80, 5, 3]

        def it_keeps_insertion_order_for_ties():
            repos = CandidateCollection()
            for name in ["a/a", "b/b"]:
                repos.add(_candidate(name, stars=7))

            assert [c.name for c in repos.by_stars()] == ["a/a", "b/b"]

    def describe_by_date():
        def it_orders_earliest_first():
            repos = CandidateCollection()
            repos.add(_candidate("late/x", day=20))
            repos.add(_candidate("early/x", day=2))
            repos.add(_candidate("mid/x", day=10))

            assert [c.name for c in repos.by_date()] == ["early/x", "mid/x", "late/x"]

        def it_does_not_reorder_the_collection():
            repos = CandidateCollection()
            repos.add(_candidate("late/x", day=20))
            repos.add(_candidate("early/x", day=2))

            repos.by_date()

            assert [c.name for c in repos] == ["late/x", "early/x"]
