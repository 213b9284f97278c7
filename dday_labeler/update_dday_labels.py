#!/usr/bin/env python3
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

"""Update D-day countdown labels on pull requests and notify Slack.

Triggered from a GitHub Actions workflow:

- ``schedule`` / ``workflow_dispatch``: every open pull request moves one
  step down the countdown (D-3 → D-2 → D-1 → D-0, frozen at D-0). Pull
  requests without a D- label enter at D-3.
- ``pull_request`` (opened): the new pull request gets ``D-3``.

Each label change posts one message to the Slack Incoming Webhook.

Requirements:
- GITHUB_TOKEN with ``pull-requests: write`` / ``issues: write``
- SLACK_WEBHOOK_URL

Draft / debug (no writes, no Slack posts):
    `update-dday-labels --repo owner/repo --event-name workflow_dispatch --dry-run`
"""

from __future__ import annotations

from .common import error, set_verbose_enabled
from .config import load_config, parse_args
from .events import TriggerKind, load_event_payload, parse_trigger
from .github_pulls import GitHubPulls
from .updater import PR_ERRORS, dispatch


def main(argv: list[str] | None = None) -> None:
    config = load_config(parse_args(argv))
    set_verbose_enabled(config.verbose)

    payload = load_event_payload(config.event_path)
    trigger = parse_trigger(config.event_name, payload, pr_number=config.pr_number)

    if config.dry_run:
        print("DRY-RUN: no labels will be written and no Slack messages sent")

    try:
        client = None
        if trigger.kind is not TriggerKind.OTHER:
            client = GitHubPulls(config.github_token, config.repo, api_url=config.api_url)
        result = dispatch(client, config, trigger)
    except PR_ERRORS as exc:
        error(str(exc))
        raise SystemExit(1) from exc

    if result is not None and not result.ok:
        error(f"{len(result.failed)} pull request(s) failed:")
        for number, reason in sorted(result.failed.items()):
            error(f"  PR #{number}: {reason}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
