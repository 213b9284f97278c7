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

"""Slack Incoming Webhook notification – builds the Block Kit payload
announcing a D-day label change and delivers it with a single POST.

Payload shape
-------------
``text`` carries the plain-text fallback shown in push notifications;
``blocks`` holds the rendered message:

- a header section naming the pull request,
- a fields section with Title / Label / Author / Link,
- a due-today warning section, only for ``D-0``.

Delivery is best effort: one POST, no retry. Any 2xx response counts as
success; everything else raises :class:`NotificationError`.
"""

from __future__ import annotations

from typing import Any, Dict, List

import requests

from .common import vprint
from .models import DdayLabel, PullRequestSummary

DUE_TODAY_WARNING = ":warning: *This PR is due today!* :warning:"


class NotificationError(RuntimeError):
    """The Slack webhook answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            f"Slack webhook request failed (status {status_code}): {body.strip()[:200]}"
        )
        self.status_code = status_code
        self.body = body


# ---------------------------------------------------------------------------
# Block Kit helpers
# ---------------------------------------------------------------------------

def _mrkdwn(text: str) -> Dict[str, Any]:
    return {"type": "mrkdwn", "text": text}


def _section(text: str) -> Dict[str, Any]:
    return {"type": "section", "text": _mrkdwn(text)}


def _fields_section(fields: List[str]) -> Dict[str, Any]:
    return {"type": "section", "fields": [_mrkdwn(f) for f in fields]}


def build_slack_message(pr: PullRequestSummary, label: DdayLabel | str) -> Dict[str, Any]:
    """Build the webhook JSON payload for *pr* now carrying *label*."""
    blocks: List[Dict[str, Any]] = [
        _section(f"*PR #{pr.number} has been updated*"),
        _fields_section([
            f"*Title:* {pr.title}",
            f"*Label:* {label}",
            f"*Author:* {pr.author_login}",
            f"*Link:* <{pr.url}|View PR>",
        ]),
    ]

    if str(label) == DdayLabel.D0:
        blocks.append(_section(DUE_TODAY_WARNING))

    return {
        "text": f'PR #{pr.number} "{pr.title}" has been labeled with {label}',
        "blocks": blocks,
    }


# ---------------------------------------------------------------------------
# Delivery
# ---------------------------------------------------------------------------

def send_to_slack(webhook_url: str, payload: Dict[str, Any]) -> None:
    """POST *payload* to the Slack Incoming Webhook and raise on failure."""
    resp = requests.post(
        webhook_url,
        json=payload,
        headers={"Content-Type": "application/json"},
        timeout=30,
    )
    if not 200 <= resp.status_code < 300:
        raise NotificationError(resp.status_code, resp.text or "")
    vprint(f"Slack webhook accepted message (status {resp.status_code})")
