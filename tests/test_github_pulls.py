"""Tests for the PyGithub-backed pull request client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from dday_labeler.github_pulls import GitHubPulls, to_pull_request


def _label(name):
    lbl = MagicMock()
    lbl.name = name
    return lbl


def _gh_pr(number, labels, title="Fix things", login="octocat"):
    pr = MagicMock()
    pr.number = number
    pr.title = title
    pr.html_url = f"https://github.com/acme/widgets/pull/{number}"
    if login is None:
        pr.user = None
    else:
        pr.user.login = login
    pr.labels = [_label(n) for n in labels]
    return pr


@pytest.fixture
def gh():
    return MagicMock()


@pytest.fixture
def repo(gh):
    return gh.get_repo.return_value


class TestToPullRequest:
    def test_converts_fields(self):
        pr = to_pull_request(_gh_pr(5, ["D-1", "bug"], title="Refactor"))
        assert pr.number == 5
        assert pr.summary.title == "Refactor"
        assert pr.summary.url == "https://github.com/acme/widgets/pull/5"
        assert pr.summary.author_login == "octocat"
        assert pr.labels == ["D-1", "bug"]

    def test_missing_user(self):
        assert to_pull_request(_gh_pr(5, [], login=None)).summary.author_login == "Unknown"


class TestGitHubPulls:
    def test_repo_lookup(self, gh, repo):
        GitHubPulls("ghs_test", "acme/widgets", gh=gh)
        gh.get_repo.assert_called_once_with("acme/widgets")

    def test_list_open_pulls(self, gh, repo):
        repo.get_pulls.return_value = [_gh_pr(1, ["D-2"]), _gh_pr(2, [])]
        client = GitHubPulls("ghs_test", "acme/widgets", gh=gh)

        pulls = client.list_open_pulls()

        repo.get_pulls.assert_called_once_with(state="open")
        assert [p.number for p in pulls] == [1, 2]
        assert pulls[0].labels == ["D-2"]

    def test_set_labels_reuses_listed_pull(self, gh, repo):
        gh_pr = _gh_pr(1, ["D-2", "bug"])
        repo.get_pulls.return_value = [gh_pr]
        client = GitHubPulls("ghs_test", "acme/widgets", gh=gh)
        client.list_open_pulls()

        client.set_labels(1, ["D-1", "bug"])

        gh_pr.set_labels.assert_called_once_with("D-1", "bug")
        repo.get_pull.assert_not_called()

    def test_add_labels_fetches_unlisted_pull(self, gh, repo):
        gh_pr = _gh_pr(42, [])
        repo.get_pull.return_value = gh_pr
        client = GitHubPulls("ghs_test", "acme/widgets", gh=gh)

        client.add_labels(42, ["D-3"])

        repo.get_pull.assert_called_once_with(42)
        gh_pr.add_to_labels.assert_called_once_with("D-3")

    def test_add_no_labels(self, gh, repo):
        client = GitHubPulls("ghs_test", "acme/widgets", gh=gh)
        client.add_labels(42, [])
        repo.get_pull.assert_not_called()

    def test_get_pull_refetches(self, gh, repo):
        repo.get_pulls.return_value = [_gh_pr(42, [], title="Old title")]
        repo.get_pull.return_value = _gh_pr(42, ["D-3"], title="New title")
        client = GitHubPulls("ghs_test", "acme/widgets", gh=gh)
        client.list_open_pulls()

        pr = client.get_pull(42)

        assert pr.summary.title == "New title"
        assert pr.labels == ["D-3"]

    def test_builds_client_from_token(self, monkeypatch):
        created = {}

        def fake_github(**kwargs):
            created.update(kwargs)
            return MagicMock()

        monkeypatch.setattr("dday_labeler.github_pulls.Github", fake_github)
        GitHubPulls("ghs_test", "acme/widgets", api_url="https://ghe.example.com/api/v3")

        assert created["base_url"] == "https://ghe.example.com/api/v3"
        assert created["auth"].token == "ghs_test"
