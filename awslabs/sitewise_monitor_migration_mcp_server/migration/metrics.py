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

"""Grouping of Monitor widget metrics into asset property queries."""

from awslabs.sitewise_monitor_migration_mcp_server.errors import MalformedMetricError
from awslabs.sitewise_monitor_migration_mcp_server.migration.constants import (
    DEFAULT_AGGREGATION_TYPE,
    DEFAULT_RESOLUTION,
)
from awslabs.sitewise_monitor_migration_mcp_server.migration.models import (
    AssetQuery,
    MonitorMetric,
    PropertyQuery,
    Query,
    QueryConfig,
)
from awslabs.sitewise_monitor_migration_mcp_server.validation import validate_metric
from typing import Dict, List, Sequence


def group_by_asset(metrics: Sequence[MonitorMetric]) -> List[AssetQuery]:
    """Group metrics by asset, keeping the order in which assets first appear.

    Properties of an asset keep the order their metrics were declared in.
    Positional consumers compare these structures, so the output order must
    not depend on anything but the input order.

    Args:
        metrics: Metrics of a single Monitor widget

    Returns:
        One AssetQuery per distinct asset ID

    Raises:
        MalformedMetricError: If a metric lacks an asset ID or property ID
    """
    groups: Dict[str, AssetQuery] = {}
    asset_order: List[str] = []

    for index, metric in enumerate(metrics):
        validate_metric(metric, index)
        asset_id = metric.assetId
        if asset_id not in groups:
            groups[asset_id] = AssetQuery(assetId=asset_id, properties=[])
            asset_order.append(asset_id)
        groups[asset_id].properties.append(
            PropertyQuery(
                propertyId=metric.propertyId,
                aggregationType=DEFAULT_AGGREGATION_TYPE,
                resolution=DEFAULT_RESOLUTION,
            )
        )

    return [groups[asset_id] for asset_id in asset_order]


def build_query_config(metrics: Sequence[MonitorMetric]) -> QueryConfig:
    """Build the query configuration of an application widget.

    The source is taken from the first metric. A widget without metrics has no
    source and is rejected.
    """
    if not metrics:
        raise MalformedMetricError('Widget has no metrics to query')

    return QueryConfig(
        source=metrics[0].type,
        query=Query(properties=[], assets=group_by_asset(metrics)),
    )
