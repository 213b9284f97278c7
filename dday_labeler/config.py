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

"""Run configuration – CLI arguments with GitHub Actions environment
defaults, validated once into an immutable :class:`Config`.

Environment variables
---------------------
GITHUB_TOKEN        (required)  Token for the GitHub REST API.
SLACK_WEBHOOK_URL   (required unless --dry-run)  Slack Incoming Webhook URL.
GITHUB_REPOSITORY   (required)  Target repository, ``owner/repo``.
GITHUB_EVENT_NAME   (required)  Name of the triggering event.
GITHUB_EVENT_PATH   (optional)  Path of the event payload JSON.
PR_NUMBER           (optional)  Pull request number, overrides the payload.
GITHUB_API_URL      (optional)  API base URL for GitHub Enterprise Server.
RUNNER_DEBUG        (optional)  ``1`` enables verbose logs.

When running as an action, ``INPUT_GITHUB-TOKEN`` and
``INPUT_SLACK-WEBHOOK-URL`` are accepted as fallbacks.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from urllib.parse import urlparse

from .common import parse_runner_debug

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class Config:
    github_token: str
    slack_webhook_url: str
    repo: str
    event_name: str
    event_path: str | None = None
    pr_number: int | None = None
    api_url: str | None = None
    dry_run: bool = False
    verbose: bool = False


def _env(*keys: str) -> str | None:
    for key in keys:
        value = os.environ.get(key)
        if value:
            return value
    return None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description=(
            "Maintain D-3 … D-0 countdown labels on open pull requests and notify "
            "a Slack channel whenever a label changes."
        ),
    )
    p.add_argument(
        "--github-token",
        default=_env("GITHUB_TOKEN", "INPUT_GITHUB-TOKEN"),
        help="GitHub API token (default: $GITHUB_TOKEN)",
    )
    p.add_argument(
        "--slack-webhook-url",
        default=_env("SLACK_WEBHOOK_URL", "INPUT_SLACK-WEBHOOK-URL"),
        help="Slack Incoming Webhook URL (default: $SLACK_WEBHOOK_URL)",
    )
    p.add_argument(
        "--repo",
        default=os.environ.get("GITHUB_REPOSITORY"),
        help="GitHub repository in owner/repo format (default: $GITHUB_REPOSITORY)",
    )
    p.add_argument(
        "--event-name",
        default=os.environ.get("GITHUB_EVENT_NAME"),
        help="Triggering event name, e.g. schedule, workflow_dispatch, pull_request (default: $GITHUB_EVENT_NAME)",
    )
    p.add_argument(
        "--event-path",
        default=os.environ.get("GITHUB_EVENT_PATH"),
        help="Path to the event payload JSON (default: $GITHUB_EVENT_PATH)",
    )
    p.add_argument(
        "--pr-number",
        type=int,
        default=_env("PR_NUMBER"),
        help="Pull request number for pull_request events; overrides the event payload",
    )
    p.add_argument(
        "--api-url",
        default=_env("GITHUB_API_URL"),
        help=f"GitHub API base URL (default: $GITHUB_API_URL or {DEFAULT_API_URL})",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Do not write labels or post to Slack; only read and print intended actions",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logs (also enabled when RUNNER_DEBUG=1)",
    )
    return p.parse_args(argv)


def _validate_webhook_url(url: str) -> None:
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise SystemExit(f"ERROR: invalid Slack webhook URL {url!r} (expected http(s)://…)")


def load_config(args: argparse.Namespace) -> Config:
    """Validate parsed arguments; any problem aborts before an API call is made."""
    token = (args.github_token or "").strip()
    if not token:
        raise SystemExit("ERROR: No GitHub token provided. Set GITHUB_TOKEN or pass --github-token.")

    dry_run = bool(args.dry_run)
    webhook_url = (args.slack_webhook_url or "").strip()
    if webhook_url:
        _validate_webhook_url(webhook_url)
    elif not dry_run:
        raise SystemExit(
            "ERROR: No Slack webhook URL provided. Set SLACK_WEBHOOK_URL or pass --slack-webhook-url."
        )

    repo = (args.repo or "").strip()
    owner, _, name = repo.partition("/")
    if not owner or not name or "/" in name:
        raise SystemExit(f"ERROR: repository must be in owner/repo format, got {repo!r}")

    event_name = (args.event_name or "").strip()
    if not event_name:
        raise SystemExit("ERROR: No event name provided. Set GITHUB_EVENT_NAME or pass --event-name.")

    return Config(
        github_token=token,
        slack_webhook_url=webhook_url,
        repo=repo,
        event_name=event_name,
        event_path=args.event_path or None,
        pr_number=args.pr_number,
        api_url=args.api_url or None,
        dry_run=dry_run,
        verbose=bool(args.verbose) or parse_runner_debug(),
    )
