"""
CI status classification and pending-review extraction.

A PR's check runs collapse into one aggregate status, checked in priority
order: any check still running wins over any failure, and a PR with no
running or failing checks (including no checks at all) is a success.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .models import PullRequest


class CIStatus(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    IN_PROGRESS = "IN_PROGRESS"


IN_PROGRESS_CONCLUSIONS = frozenset({"IN_PROGRESS"})
ERROR_CONCLUSIONS = frozenset({"ERROR", "FAILURE"})


@dataclass
class PRStatusDetails:
    """Aggregate CI status plus the check names that explain it."""
    status: CIStatus
    messages: list[str] = field(default_factory=list)


@dataclass
class PRSummary:
    """Everything the renderer needs for one PR."""
    pr: PullRequest
    ci: PRStatusDetails
    waiting_for: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.pr.number,
            "title": self.pr.title,
            "url": self.pr.url,
            "is_draft": self.pr.is_draft,
            "review_decision": self.pr.review_decision,
            "ci_status": self.ci.status.value,
            "ci_messages": list(self.ci.messages),
            "waiting_for": list(self.waiting_for),
        }


def get_pr_status(pr: PullRequest) -> PRStatusDetails:
    """Classify a PR's check runs into a single CI status."""
    for check in pr.check_runs:
        if check.conclusion in IN_PROGRESS_CONCLUSIONS:
            return PRStatusDetails(CIStatus.IN_PROGRESS, [check.name])

    for check in pr.check_runs:
        if check.conclusion in ERROR_CONCLUSIONS:
            return PRStatusDetails(CIStatus.ERROR, [check.name])

    return PRStatusDetails(CIStatus.SUCCESS, [])


def get_waiting_reviewers(pr: PullRequest) -> list[str]:
    """Names of the reviewers a PR is still waiting on.

    Users are listed by login; teams and apps by name. Requests missing
    the relevant field are skipped.
    """
    reviewers = []
    for request in pr.review_requests:
        if request.typename == "User":
            if request.login:
                reviewers.append(request.login)
        elif request.name:
            reviewers.append(request.name)
    return reviewers


def summarize(pr: PullRequest) -> PRSummary:
    return PRSummary(pr=pr, ci=get_pr_status(pr), waiting_for=get_waiting_reviewers(pr))
