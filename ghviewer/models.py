"""
Pull request records as returned by `gh pr list --json`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CheckRun:
    """One entry of a PR's statusCheckRollup."""
    typename: str
    name: str
    conclusion: str
    status: str = ""
    workflow_name: str = ""
    details_url: str = ""
    started_at: str | None = None
    completed_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CheckRun":
        typename = data.get("__typename", "")
        if typename == "StatusContext":
            # Commit statuses report context/state instead of name/conclusion
            return cls(
                typename=typename,
                name=data.get("context") or "",
                conclusion=data.get("state") or "",
                details_url=data.get("targetUrl") or "",
                started_at=data.get("startedAt"),
            )
        return cls(
            typename=typename,
            name=data.get("name") or "",
            conclusion=data.get("conclusion") or "",
            status=data.get("status") or "",
            workflow_name=data.get("workflowName") or "",
            details_url=data.get("detailsUrl") or "",
            started_at=data.get("startedAt"),
            completed_at=data.get("completedAt"),
        )


@dataclass
class ReviewRequest:
    """A pending review request (User, Team or Bot/App)."""
    typename: str
    login: str | None = None
    name: str | None = None
    slug: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReviewRequest":
        return cls(
            typename=data.get("__typename", ""),
            login=data.get("login"),
            name=data.get("name"),
            slug=data.get("slug"),
        )


@dataclass
class PullRequest:
    """An open pull request with its checks and pending reviews."""
    title: str
    url: str
    number: int = 0
    state: str = ""
    is_draft: bool = False
    review_decision: str = ""
    check_runs: list[CheckRun] = field(default_factory=list)
    review_requests: list[ReviewRequest] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PullRequest":
        return cls(
            title=data.get("title", ""),
            url=data.get("url", ""),
            number=data.get("number") or 0,
            state=data.get("state", ""),
            is_draft=bool(data.get("isDraft", False)),
            review_decision=data.get("reviewDecision") or "",
            check_runs=[
                CheckRun.from_dict(item) for item in data.get("statusCheckRollup") or []
            ],
            review_requests=[
                ReviewRequest.from_dict(item) for item in data.get("reviewRequests") or []
            ],
        )
