"""
Configuration management for gh-viewer.

Loads ghviewer.yml from the repository root, falling back to
~/.config/ghviewer/ghviewer.yml. Every setting has a default, so the
file is optional.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


CONFIG_FILENAME = "ghviewer.yml"
GH_PATH_ENV = "GHVIEWER_GH_PATH"


@dataclass
class GhSettings:
    """How to invoke the GitHub CLI."""
    executable: str = "gh"
    author: str = "@me"
    repo: str | None = None  # owner/repo, defaults to the current checkout
    limit: int | None = None  # gh's own default (30) when unset
    state: str | None = None  # open (gh default), closed, merged, all
    timeout: float = 30.0


@dataclass
class DisplaySettings:
    """Terminal rendering settings."""
    success_symbol: str = "🟢"
    in_progress_symbol: str = "⏲️"
    error_symbol: str = "❌"
    color: bool | None = None  # None = auto-detect tty


@dataclass
class GhViewerConfig:
    """Complete gh-viewer configuration."""
    gh: GhSettings = field(default_factory=GhSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    source: Path | None = None

    @classmethod
    def load(cls, repo_root: Path, home: Path | None = None) -> "GhViewerConfig":
        """Load configuration for a repo root, then apply environment overrides."""
        config = cls()

        for path in config_search_paths(repo_root, home):
            if path.exists():
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
                config = cls._parse(data)
                config.source = path
                break

        gh_path = os.environ.get(GH_PATH_ENV)
        if gh_path:
            config.gh.executable = gh_path

        return config

    @classmethod
    def _parse(cls, data: dict[str, Any]) -> "GhViewerConfig":
        """Parse configuration dictionary."""
        config = cls()

        gh_data = data.get("gh", {}) or {}
        limit = gh_data.get("limit")
        config.gh = GhSettings(
            executable=gh_data.get("executable") or "gh",
            author=gh_data.get("author") or "@me",
            repo=gh_data.get("repo"),
            limit=int(limit) if limit is not None else None,
            state=gh_data.get("state"),
            timeout=float(gh_data.get("timeout") or 30.0),
        )

        display_data = data.get("display", {}) or {}
        config.display = DisplaySettings(
            success_symbol=display_data.get("success_symbol") or "🟢",
            in_progress_symbol=display_data.get("in_progress_symbol") or "⏲️",
            error_symbol=display_data.get("error_symbol") or "❌",
            color=display_data.get("color"),
        )

        return config


def config_search_paths(repo_root: Path, home: Path | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    home = home or Path.home()
    return [
        repo_root / CONFIG_FILENAME,
        home / ".config" / "ghviewer" / CONFIG_FILENAME,
    ]


def get_repo_root() -> Path:
    """Find the repository root (directory containing .git)."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    # No .git found, use current directory
    return Path.cwd()
