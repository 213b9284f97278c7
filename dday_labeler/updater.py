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

"""D-day label orchestration – the batch countdown over all open pull
requests, the single pull request initializer, and the event dispatcher
that chooses between them.
"""

from __future__ import annotations

import json

import requests
from github import GithubException

from .common import warn
from .config import Config
from .events import Trigger, TriggerKind
from .github_pulls import GitHubPulls
from .labels import MalformedLabelError, dday_labels, find_dday_label, next_dday_label, replace_dday_label
from .models import BatchResult, DdayLabel, PullRequest, PullRequestSummary
from .slack import NotificationError, build_slack_message, send_to_slack

# Failures confined to one pull request; anything else aborts the run.
PR_ERRORS = (MalformedLabelError, GithubException, requests.RequestException, NotificationError)


def notify(config: Config, pr: PullRequestSummary, label: DdayLabel) -> None:
    payload = build_slack_message(pr, label)
    if config.dry_run:
        print(f"DRY-RUN: would notify Slack about PR #{pr.number} ({label})")
        print(json.dumps(payload, indent=2))
        return
    send_to_slack(config.slack_webhook_url, payload)
    print(f"PR #{pr.number}: Slack notification sent")


def update_one(client: GitHubPulls, config: Config, pr: PullRequest) -> bool:
    """Advance one pull request's countdown; return True when labels were written."""
    current = find_dday_label(pr.labels)
    new_label = next_dday_label(pr.labels)

    extra = len(dday_labels(pr.labels)) > 1

    if current is None:
        print(f"PR #{pr.number}: No D- label found, setting to {new_label}")
    else:
        print(f"PR #{pr.number}: Current label is {current}, setting to {new_label}")
    if extra:
        print(f"PR #{pr.number}: Several D- labels found, collapsing to {new_label}")

    if current == new_label and not extra:
        print(f"PR #{pr.number}: Label is already set to {new_label}, no update needed.")
        return False

    labels = replace_dday_label(pr.labels, new_label)
    if config.dry_run:
        print(f"DRY-RUN: would set labels on PR #{pr.number}: {labels}")
    else:
        print(f"PR #{pr.number}: Updating label to {new_label}")
        client.set_labels(pr.number, labels)

    notify(config, pr.summary, new_label)
    return True


def update_pr_labels(client: GitHubPulls, config: Config) -> BatchResult:
    """Move every open pull request one step closer to its due date.

    Each pull request is handled on its own: a malformed label or a failed
    API / webhook call is logged and recorded, and the run moves on.
    """
    result = BatchResult()
    pulls = client.list_open_pulls()

    for pr in pulls:
        try:
            changed = update_one(client, config, pr)
        except PR_ERRORS as exc:
            warn(f"PR #{pr.number}: {exc}")
            result.failed[pr.number] = str(exc)
            continue
        if changed:
            result.updated.append(pr.number)
        else:
            result.unchanged.append(pr.number)

    print(
        f"Processed {len(pulls)} pull request(s): {len(result.updated)} updated, "
        f"{len(result.unchanged)} unchanged, {len(result.failed)} failed"
    )
    return result


def add_dday_label(client: GitHubPulls, config: Config, pr_number: int) -> None:
    """Start the countdown on a freshly opened pull request."""
    label = DdayLabel.D3
    if config.dry_run:
        print(f"DRY-RUN: would add label {label} to PR #{pr_number}")
    else:
        print(f"PR #{pr_number}: Adding label {label}")
        client.add_labels(pr_number, [str(label)])

    pr = client.get_pull(pr_number)
    notify(config, pr.summary, label)


def dispatch(client: GitHubPulls | None, config: Config, trigger: Trigger) -> BatchResult | None:
    """Route the trigger to the batch updater or the single pull request initializer."""
    if trigger.kind is TriggerKind.SCHEDULED_OR_MANUAL:
        print(f"Event {trigger.event_name!r}: updating D-day labels on all open pull requests")
        return update_pr_labels(client, config)

    if trigger.kind is TriggerKind.PULL_REQUEST_OPENED:
        print(f"Event {trigger.event_name!r}: initializing D-day label on PR #{trigger.pr_number}")
        add_dday_label(client, config, int(trigger.pr_number))
        return None

    print(f"Event {trigger.event_name!r} does not trigger D-day labeling – nothing to do")
    return None
