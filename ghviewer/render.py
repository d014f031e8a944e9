"""
Terminal rendering for PR summaries.

Lines carry ANSI styling from click.style; click.echo strips it when the
output is not a terminal unless color is forced.
"""

from __future__ import annotations

import click

from .config import DisplaySettings
from .status import CIStatus, PRSummary


REVIEWER_BULLET = "✍"
EMPTY_DECISION = "REVIEW_REQUIRED"


def status_symbol(status: CIStatus, display: DisplaySettings) -> str:
    if status == CIStatus.SUCCESS:
        return display.success_symbol
    if status == CIStatus.IN_PROGRESS:
        return display.in_progress_symbol
    return display.error_symbol


def format_review_decision(decision: str) -> str:
    """Bracketed review decision, green when approved and red otherwise."""
    decision = decision or EMPTY_DECISION
    color = "green" if decision == "APPROVED" else "red"
    return "[" + click.style(decision, fg=color, bold=True) + "]"


def render_pull_request(index: int, summary: PRSummary, display: DisplaySettings) -> list[str]:
    """Render one PR block; `index` is the 1-based number shown to the user."""
    pr = summary.pr
    ci = summary.ci
    symbol = status_symbol(ci.status, display)
    prefix = "[DRAFT] " if pr.is_draft else ""

    lines = [click.style(f"{index}. {prefix}{pr.title} - {symbol}", bold=True)]

    # CI section
    if ci.messages:
        heading = "Running jobs" if ci.status == CIStatus.IN_PROGRESS else "Failing jobs"
        lines.append(f" • {heading} : ")
        for message in ci.messages:
            lines.append(f"   • {symbol} {message}")

    # Review section
    if not pr.is_draft:
        lines.append(f" • {format_review_decision(pr.review_decision)} Still waiting for :")
        for reviewer in summary.waiting_for:
            lines.append(f"   • {REVIEWER_BULLET} {reviewer}")

    lines.append("")
    return lines


def render_pull_requests(summaries: list[PRSummary], display: DisplaySettings) -> list[str]:
    if not summaries:
        return ["No open pull requests."]

    lines: list[str] = []
    for index, summary in enumerate(summaries, start=1):
        lines.extend(render_pull_request(index, summary, display))
    return lines
