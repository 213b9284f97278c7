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

"""D-day label parsing and the countdown transition rule.

A *D-label* is any label whose name starts with ``D-``. Only well-formed
D-labels (``D-<non-negative integer>``) take part in the countdown; a
malformed one raises :class:`MalformedLabelError` so the caller can skip
the pull request instead of silently dropping the label on the next write.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .models import DdayLabel

DDAY_PREFIX = "D-"
DDAY_RE = re.compile(r"D-([0-9]+)")


class MalformedLabelError(ValueError):
    """A ``D-`` label whose suffix is not a non-negative integer."""

    def __init__(self, label: str) -> None:
        super().__init__(f"malformed D-day label {label!r}")
        self.label = label


def is_dday_label(name: str) -> bool:
    return name.startswith(DDAY_PREFIX)


def parse_dday(name: str) -> int:
    """Return the remaining days encoded in a D-label."""
    m = DDAY_RE.fullmatch(name)
    if not m:
        raise MalformedLabelError(name)
    return int(m.group(1))


def dday_labels(labels: Iterable[str]) -> list[str]:
    return [name for name in labels if is_dday_label(name)]


def find_dday_label(labels: Iterable[str]) -> str | None:
    """Return the most urgent D-label in *labels*, or None.

    Label order carries no meaning, so with several D-labels the one with
    the fewest days left wins. Every D-label is validated, since the replace
    write drops all but one.
    """
    dday = dday_labels(labels)
    if not dday:
        return None
    return min(dday, key=parse_dday)


def next_dday_label(labels: Iterable[str]) -> DdayLabel:
    """Compute the label a pull request should carry after one countdown step.

    No D-label yet means the PR enters the countdown at ``D-3``. Otherwise the
    day count drops by one and stays at ``D-0`` once reached.
    """
    current_label = find_dday_label(labels)
    if current_label is None:
        return DdayLabel.D3

    current = parse_dday(current_label)
    if current > 0:
        return DdayLabel.from_days(current - 1)
    return DdayLabel.D0


def replace_dday_label(labels: Iterable[str], new_label: DdayLabel | str) -> list[str]:
    """Return the full label set with every D-label replaced by *new_label*."""
    return [str(new_label)] + [name for name in labels if not is_dday_label(name)]
