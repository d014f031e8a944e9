from __future__ import annotations

from ghviewer.models import CheckRun, PullRequest, ReviewRequest
from ghviewer.status import CIStatus, get_pr_status, get_waiting_reviewers, summarize


def make_pr(checks=None, requests=None, **kwargs) -> PullRequest:
    return PullRequest(
        title=kwargs.pop("title", "Add feature"),
        url=kwargs.pop("url", "https://github.com/o/r/pull/1"),
        check_runs=[CheckRun(typename="CheckRun", name=n, conclusion=c) for n, c in (checks or [])],
        review_requests=requests or [],
        **kwargs,
    )


def test_no_checks_is_success():
    details = get_pr_status(make_pr())
    assert details.status == CIStatus.SUCCESS
    assert details.messages == []


def test_all_successful_checks():
    pr = make_pr(checks=[("lint", "SUCCESS"), ("test", "SUCCESS"), ("docs", "SKIPPED")])
    details = get_pr_status(pr)
    assert details.status == CIStatus.SUCCESS
    assert details.messages == []


def test_failure_reports_check_name():
    pr = make_pr(checks=[("lint", "SUCCESS"), ("test", "FAILURE")])
    details = get_pr_status(pr)
    assert details.status == CIStatus.ERROR
    assert details.messages == ["test"]


def test_error_conclusion_counts_as_error():
    details = get_pr_status(make_pr(checks=[("deploy", "ERROR")]))
    assert details.status == CIStatus.ERROR
    assert details.messages == ["deploy"]


def test_first_failing_check_wins():
    pr = make_pr(checks=[("a", "FAILURE"), ("b", "ERROR")])
    assert get_pr_status(pr).messages == ["a"]


def test_in_progress_takes_priority_over_failure():
    pr = make_pr(checks=[("test", "FAILURE"), ("build", "IN_PROGRESS")])
    details = get_pr_status(pr)
    assert details.status == CIStatus.IN_PROGRESS
    assert details.messages == ["build"]


def test_empty_conclusion_is_not_a_failure():
    """Queued checks have no conclusion yet."""
    details = get_pr_status(make_pr(checks=[("test", "")]))
    assert details.status == CIStatus.SUCCESS


def test_waiting_reviewers_users_by_login_teams_by_name():
    pr = make_pr(requests=[
        ReviewRequest(typename="User", login="alice", name="Alice A."),
        ReviewRequest(typename="Team", name="core-team", slug="core-team"),
        ReviewRequest(typename="Bot", name="review-bot"),
    ])
    assert get_waiting_reviewers(pr) == ["alice", "core-team", "review-bot"]


def test_waiting_reviewers_skips_missing_fields():
    pr = make_pr(requests=[
        ReviewRequest(typename="User", name="No Login"),
        ReviewRequest(typename="Team", slug="only-slug"),
    ])
    assert get_waiting_reviewers(pr) == []


def test_summarize_to_dict():
    pr = make_pr(
        checks=[("test", "FAILURE")],
        requests=[ReviewRequest(typename="User", login="bob")],
        number=7,
        review_decision="REVIEW_REQUIRED",
    )
    data = summarize(pr).to_dict()

    assert data["number"] == 7
    assert data["ci_status"] == "ERROR"
    assert data["ci_messages"] == ["test"]
    assert data["waiting_for"] == ["bob"]
    assert data["is_draft"] is False
