"""
GitHub CLI wrapper for gh-viewer.

Fetches the current user's pull requests by shelling out to `gh`, which
handles authentication (gh auth login, GH_TOKEN, GH_HOST) on its own.
"""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any

from .models import PullRequest


logger = logging.getLogger(__name__)

PR_FIELDS = (
    "url",
    "number",
    "state",
    "statusCheckRollup",
    "title",
    "reviewRequests",
    "reviewDecision",
    "isDraft",
)


class GhCliError(Exception):
    """Error from invoking the gh CLI."""
    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


def parse_pull_requests(payload: Any) -> list[PullRequest]:
    """Parse decoded `gh pr list --json` output into PullRequest objects."""
    if not isinstance(payload, list):
        raise GhCliError(f"Expected a JSON list of pull requests, got {type(payload).__name__}")
    return [PullRequest.from_dict(item) for item in payload]


class GhCli:
    """Thin subprocess client around the gh executable."""

    def __init__(self, executable: str = "gh", timeout: float = 30.0):
        self.executable = executable
        self.timeout = timeout

    def _run(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        """Run gh with arguments, raising GhCliError on any failure."""
        cmd = [self.executable, *args]
        logger.debug("Running: %s", " ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise GhCliError(
                f"'{self.executable}' not found. Install the GitHub CLI: https://cli.github.com/"
            )
        except subprocess.TimeoutExpired:
            raise GhCliError(f"'{' '.join(cmd)}' timed out after {self.timeout:g}s")

        logger.debug("gh exited with %d", result.returncode)
        if result.returncode != 0:
            stderr = result.stderr.strip() or "no output"
            raise GhCliError(
                f"gh {' '.join(args[:2])} failed ({result.returncode}): {stderr}",
                result.returncode,
            )
        return result

    def list_pull_requests(
        self,
        author: str = "@me",
        repo: str | None = None,
        limit: int | None = None,
        state: str | None = None,
    ) -> list[PullRequest]:
        """
        List pull requests authored by `author`.

        Args:
            author: gh author filter ("@me" is the authenticated user)
            repo: owner/repo, defaults to the repository of the cwd
            limit: Maximum number of PRs (gh defaults to 30)
            state: open, closed, merged or all (gh defaults to open)

        Returns:
            List of PullRequest objects in gh's order
        """
        args = ["pr", "list", "--author", author, "--json", ",".join(PR_FIELDS)]
        if repo:
            args += ["--repo", repo]
        if limit is not None:
            args += ["--limit", str(limit)]
        if state:
            args += ["--state", state]

        result = self._run(args)
        output = result.stdout.strip()
        if not output:
            return []

        try:
            payload = json.loads(output)
        except json.JSONDecodeError as e:
            raise GhCliError(f"Could not decode gh output: {e}")

        prs = parse_pull_requests(payload)
        logger.debug("Fetched %d pull requests", len(prs))
        return prs

    def open_in_browser(self, url: str) -> None:
        """Open a pull request in the web browser via `gh pr view --web`."""
        self._run(["pr", "view", url, "--web"])
