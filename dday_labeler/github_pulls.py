#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""GitHub pull request operations via PyGithub – list open pull requests,
fetch one by number, and replace / add labels.

Pull request objects returned by the listing are cached by number so the
label write that follows a read reuses them instead of fetching again.
"""

from __future__ import annotations

from github import Auth, Github
from github.PullRequest import PullRequest as GhPullRequest

from .common import vprint
from .models import UNKNOWN_AUTHOR, PullRequest, PullRequestSummary


def to_pull_request(gh_pr: GhPullRequest) -> PullRequest:
    """Convert a PyGithub pull request into the labeler's snapshot."""
    user = gh_pr.user
    login = (user.login if user is not None else None) or UNKNOWN_AUTHOR
    summary = PullRequestSummary(
        number=int(gh_pr.number),
        title=str(gh_pr.title or ""),
        url=str(gh_pr.html_url or ""),
        author_login=str(login),
    )
    return PullRequest(summary=summary, labels=[lbl.name for lbl in gh_pr.labels])


class GitHubPulls:
    """Pull request access for a single ``owner/repo``."""

    def __init__(self, token: str, repo: str, *, api_url: str | None = None, gh: Github | None = None) -> None:
        if gh is None:
            kwargs = {"base_url": api_url} if api_url else {}
            gh = Github(auth=Auth.Token(token), **kwargs)
        self.repo_full = repo
        self._repo = gh.get_repo(repo)
        self._cache: dict[int, GhPullRequest] = {}

    def _pull(self, number: int) -> GhPullRequest:
        gh_pr = self._cache.get(number)
        if gh_pr is None:
            gh_pr = self._repo.get_pull(number)
            self._cache[number] = gh_pr
        return gh_pr

    def list_open_pulls(self) -> list[PullRequest]:
        pulls: list[PullRequest] = []
        for gh_pr in self._repo.get_pulls(state="open"):
            self._cache[gh_pr.number] = gh_pr
            pulls.append(to_pull_request(gh_pr))
        print(f"Loaded {len(pulls)} open pull request(s) from repository {self.repo_full}")
        return pulls

    def get_pull(self, number: int) -> PullRequest:
        """Fetch the current state of pull request *number*, bypassing the cache."""
        gh_pr = self._repo.get_pull(number)
        self._cache[number] = gh_pr
        return to_pull_request(gh_pr)

    def set_labels(self, number: int, labels: list[str]) -> None:
        """Overwrite the full label set of pull request *number*."""
        vprint(f"PR #{number}: set labels {labels}")
        self._pull(number).set_labels(*labels)

    def add_labels(self, number: int, labels: list[str]) -> None:
        if not labels:
            return
        vprint(f"PR #{number}: add labels {labels}")
        self._pull(number).add_to_labels(*labels)
