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

"""Scaling of Monitor grid coordinates to application pixel coordinates."""

from awslabs.sitewise_monitor_migration_mcp_server.migration.constants import (
    DEFAULT_Z_INDEX,
    GRID_UNIT_HEIGHT,
    GRID_UNIT_WIDTH,
)
from awslabs.sitewise_monitor_migration_mcp_server.migration.models import Geometry


def to_app_geometry(x: int, y: int, width: int, height: int) -> Geometry:
    """Convert a Monitor widget position and size to application pixel space.

    Horizontal values are scaled by GRID_UNIT_WIDTH and vertical values by
    GRID_UNIT_HEIGHT, so a 3x3 Monitor widget at the origin becomes a 99x42
    application widget at the origin.
    """
    return Geometry(
        x=x * GRID_UNIT_WIDTH,
        y=y * GRID_UNIT_HEIGHT,
        z=DEFAULT_Z_INDEX,
        width=width * GRID_UNIT_WIDTH,
        height=height * GRID_UNIT_HEIGHT,
    )
