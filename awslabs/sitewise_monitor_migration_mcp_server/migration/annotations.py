# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
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

"""Translation of Monitor Y-axis annotations into application thresholds."""

from awslabs.sitewise_monitor_migration_mcp_server.migration.models import MonitorAnnotations, Threshold
from typing import List, Optional


def translate_annotations(
    annotations: Optional[MonitorAnnotations],
) -> Optional[List[Threshold]]:
    """Convert Monitor Y-axis annotations to application thresholds.

    Returns None, not an empty list, when there is nothing to translate:
    consumers treat a missing thresholds key differently from an empty one.
    """
    if annotations is None or not annotations.y:
        return None

    return [
        Threshold(
            color=annotation.color,
            comparisonOperator=annotation.comparisonOperator,
            value=annotation.value,
            visible=annotation.showValue,
        )
        for annotation in annotations.y
    ]
