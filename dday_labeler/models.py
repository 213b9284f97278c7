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

"""Core data models – pull request snapshots, the D-day label enum,
and the aggregated result of a batch run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

UNKNOWN_AUTHOR = "Unknown"


class DdayLabel(StrEnum):
    D3 = "D-3"
    D2 = "D-2"
    D1 = "D-1"
    D0 = "D-0"

    @property
    def days(self) -> int:
        return int(self.value[2:])

    @classmethod
    def from_days(cls, days: int) -> DdayLabel:
        """Return the label for *days* remaining, clamped to ``D-0`` … ``D-3``."""
        clamped = min(max(days, 0), cls.D3.days)
        return cls(f"D-{clamped}")


@dataclass(frozen=True)
class PullRequestSummary:
    """Read-only snapshot of the fields a notification needs."""
    number: int
    title: str
    url: str
    author_login: str = UNKNOWN_AUTHOR


@dataclass
class PullRequest:
    summary: PullRequestSummary
    labels: list[str] = field(default_factory=list)

    @property
    def number(self) -> int:
        return self.summary.number


@dataclass
class BatchResult:
    """Aggregated output of a batch label update."""
    updated: list[int] = field(default_factory=list)
    unchanged: list[int] = field(default_factory=list)
    failed: dict[int, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed
