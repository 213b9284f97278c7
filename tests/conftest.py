"""Shared fixtures: an in-memory pull request tracker and a recorded Slack webhook."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
import requests

from dday_labeler import common
from dday_labeler.config import Config
from dday_labeler.models import PullRequest, PullRequestSummary

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


def make_pr(number: int, labels: list[str], title: str = "Fix things", author: str = "octocat") -> PullRequest:
    summary = PullRequestSummary(
        number=number,
        title=title,
        url=f"https://github.com/acme/widgets/pull/{number}",
        author_login=author,
    )
    return PullRequest(summary=summary, labels=list(labels))


class FakePulls:
    """Stand-in for GitHubPulls that stores labels in memory."""

    def __init__(self, pulls: list[PullRequest] | None = None) -> None:
        self.pulls = {pr.number: pr for pr in pulls or []}
        self.set_calls: list[tuple[int, list[str]]] = []
        self.add_calls: list[tuple[int, list[str]]] = []
        self.fail_on: dict[int, Exception] = {}

    def list_open_pulls(self) -> list[PullRequest]:
        return [make_pr(pr.number, pr.labels, pr.summary.title, pr.summary.author_login) for pr in self.pulls.values()]

    def get_pull(self, number: int) -> PullRequest:
        if number not in self.pulls:
            self.pulls[number] = make_pr(number, [])
        return self.pulls[number]

    def set_labels(self, number: int, labels: list[str]) -> None:
        if number in self.fail_on:
            raise self.fail_on[number]
        self.set_calls.append((number, list(labels)))
        self.pulls[number].labels = list(labels)

    def add_labels(self, number: int, labels: list[str]) -> None:
        if number in self.fail_on:
            raise self.fail_on[number]
        self.add_calls.append((number, list(labels)))
        pr = self.get_pull(number)
        pr.labels = pr.labels + [lbl for lbl in labels if lbl not in pr.labels]

    def labels_of(self, number: int) -> list[str]:
        return self.pulls[number].labels


@dataclass
class FakeResponse:
    status_code: int = 200
    text: str = "ok"


@dataclass
class SlackRecorder:
    posts: list[dict] = field(default_factory=list)
    status_code: int = 200
    error: Exception | None = None
    fail_for_pr: set[int] = field(default_factory=set)

    def __call__(self, url, json=None, headers=None, timeout=None):
        if self.error is not None:
            raise self.error
        self.posts.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        for number in self.fail_for_pr:
            if json and json["text"].startswith(f"PR #{number} "):
                return FakeResponse(status_code=500, text="internal_error")
        return FakeResponse(status_code=self.status_code)

    @property
    def payloads(self) -> list[dict]:
        return [p["json"] for p in self.posts]


@pytest.fixture
def slack(monkeypatch) -> SlackRecorder:
    recorder = SlackRecorder()
    monkeypatch.setattr(requests, "post", recorder)
    return recorder


@pytest.fixture
def config() -> Config:
    return Config(
        github_token="ghs_test",
        slack_webhook_url=WEBHOOK_URL,
        repo="acme/widgets",
        event_name="schedule",
    )


@pytest.fixture(autouse=True)
def _reset_verbose():
    common.set_verbose_enabled(False)
    yield
    common.set_verbose_enabled(False)
