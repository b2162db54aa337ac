"""E2E tests for the adoption tracker CLI.

No mocks. Real GitHub API, search narrowed to a single repository.
Skip if GITHUB_TOKEN is not set.
"""

import os
import subprocess
import sys

import pytest

pytestmark = pytest.mark.skipif(
    not os.environ.get("GITHUB_TOKEN"),
    reason="GITHUB_TOKEN required for E2E tests",
)


def _run_cli(*args, timeout=300):
    cmd = [sys.executable, "-m", "github_adoption_tracker", *args]
    return subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)


def test_single_repo_run(tmp_path):
    """Searching inside goreleaser/goreleaser finds it and writes a chart."""
    result = _run_cli(
        "--filename", ".goreleaser.yaml",
        "--qualifier", "repo:goreleaser/goreleaser",
        "--output-dir", str(tmp_path),
    )
    assert result.returncode == 0, f"stderr: {result.stderr}\nstdout: {result.stdout}"

    assert "goreleaser/goreleaser with" in result.stdout
    charts = list(tmp_path.glob("chart_*.svg"))
    assert len(charts) == 1
    assert "<svg" in charts[0].read_text()
