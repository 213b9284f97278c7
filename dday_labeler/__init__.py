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

"""D-day countdown labels for pull requests.

Modules
-------
common              Shared low-level utilities (verbose logging, WARN/ERROR output).
models              Core data models (PullRequestSummary, PullRequest, DdayLabel, BatchResult).
labels              D-label parsing and the countdown transition rule.
slack               Slack Block Kit payload building and webhook delivery.
github_pulls        GitHub pull request operations via PyGithub (list, get, set/add labels).
events              Trigger parsing from the GitHub Actions event name and payload.
config              CLI / environment configuration and validation.
updater             Batch countdown, single pull request initializer, event dispatch.
update_dday_labels  Command-line entry point.
"""

__version__ = "1.0.0"
