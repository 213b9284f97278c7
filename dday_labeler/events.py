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

"""Trigger parsing – turns the GitHub Actions event name and payload into a
tagged :class:`Trigger` once, at the boundary.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

SCHEDULED_EVENTS = {"schedule", "workflow_dispatch"}
PULL_REQUEST_EVENTS = {"pull_request", "pull_request_target"}
OPENED_ACTIONS = {None, "opened"}


class TriggerKind(Enum):
    SCHEDULED_OR_MANUAL = "scheduled_or_manual"
    PULL_REQUEST_OPENED = "pull_request_opened"
    OTHER = "other"


@dataclass(frozen=True)
class Trigger:
    kind: TriggerKind
    event_name: str
    pr_number: int | None = None


def load_event_payload(path: str | None) -> dict[str, Any]:
    """Read the webhook event JSON written by the runner (``GITHUB_EVENT_PATH``)."""
    if not path:
        return {}
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"ERROR: failed to read event payload {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"ERROR: event payload {path} is not a JSON object")
    return data


def _payload_pr_number(payload: dict[str, Any]) -> int | None:
    pr = payload.get("pull_request")
    if not isinstance(pr, dict):
        return None
    try:
        return int(pr.get("number"))
    except (TypeError, ValueError):
        return None


def parse_trigger(event_name: str, payload: dict[str, Any] | None = None, pr_number: int | None = None) -> Trigger:
    """Classify the triggering event.

    ``pr_number`` overrides whatever the payload carries. A pull request
    event that resolves to no number is a configuration error.
    """
    payload = payload or {}
    name = (event_name or "").strip()

    if name in SCHEDULED_EVENTS:
        return Trigger(TriggerKind.SCHEDULED_OR_MANUAL, name)

    if name in PULL_REQUEST_EVENTS:
        action = payload.get("action")
        if action not in OPENED_ACTIONS:
            return Trigger(TriggerKind.OTHER, name)
        number = pr_number if pr_number is not None else _payload_pr_number(payload)
        if number is None:
            raise SystemExit(
                f"ERROR: {name} event carries no pull request number. "
                "Set GITHUB_EVENT_PATH or pass --pr-number."
            )
        return Trigger(TriggerKind.PULL_REQUEST_OPENED, name, number)

    return Trigger(TriggerKind.OTHER, name)
