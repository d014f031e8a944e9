"""
gh-viewer CLI - Summarize your open GitHub PRs in the terminal.

Commands:
    view  - Show CI status and pending reviewers for each open PR (default)
    open  - Open a PR in the browser by its number in the `view` list
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from dotenv import load_dotenv

from . import __version__
from .config import GhViewerConfig, get_repo_root
from .github import GhCli, GhCliError
from .render import render_pull_requests
from .status import summarize


logger = logging.getLogger(__name__)


def load_env() -> None:
    """Load .env from the current directory and the repo root."""
    load_dotenv(Path.cwd() / ".env")
    load_dotenv(get_repo_root() / ".env")


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--color/--no-color", default=None, help="Force colored output on or off")
@click.pass_context
def main(ctx: click.Context, verbose: bool, color: bool | None):
    """gh-viewer - Your open pull requests, their CI status and pending reviews."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    load_env()
    config = GhViewerConfig.load(get_repo_root())
    if config.source:
        logger.debug("Loaded config from %s", config.source)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["color"] = color if color is not None else config.display.color
    ctx.obj["client"] = GhCli(executable=config.gh.executable, timeout=config.gh.timeout)

    if ctx.invoked_subcommand is None:
        ctx.invoke(view)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--repo", default=None, help="Repository to list PRs from (owner/repo)")
@click.option("--limit", default=None, type=click.IntRange(min=1), help="Maximum PRs to fetch")
@click.pass_context
def view(ctx: click.Context, as_json: bool = False, repo: str | None = None, limit: int | None = None):
    """Show CI status and pending reviewers for each open PR.

    Examples:

        ghviewer view                 # PRs in the current repository
        ghviewer view --repo o/r      # PRs in another repository
        ghviewer view --json          # Machine-readable output
    """
    config: GhViewerConfig = ctx.obj["config"]
    client: GhCli = ctx.obj["client"]

    try:
        prs = client.list_pull_requests(
            author=config.gh.author,
            repo=repo or config.gh.repo,
            limit=limit or config.gh.limit,
            state=config.gh.state,
        )
    except GhCliError as e:
        _fail(str(e))

    summaries = [summarize(pr) for pr in prs]

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in summaries], indent=2, ensure_ascii=False))
        return

    for line in render_pull_requests(summaries, config.display):
        click.echo(line, color=ctx.obj["color"])


@main.command("open")
@click.argument("index", type=int)
@click.option("--repo", default=None, help="Repository to list PRs from (owner/repo)")
@click.pass_context
def open_pr(ctx: click.Context, index: int, repo: str | None):
    """Open the INDEX-th PR from `ghviewer view` in the browser."""
    config: GhViewerConfig = ctx.obj["config"]
    client: GhCli = ctx.obj["client"]

    try:
        prs = client.list_pull_requests(
            author=config.gh.author,
            repo=repo or config.gh.repo,
            limit=config.gh.limit,
            state=config.gh.state,
        )
        if not 1 <= index <= len(prs):
            _fail(f"No pull request #{index} in the list ({len(prs)} open)")

        pr = prs[index - 1]
        click.echo(f"Opening {pr.title}: {pr.url}")
        client.open_in_browser(pr.url)
    except GhCliError as e:
        _fail(str(e))
