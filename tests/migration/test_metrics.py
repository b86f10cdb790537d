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

"""Tests for grouping Monitor metrics into asset property queries."""

import pytest
from awslabs.sitewise_monitor_migration_mcp_server.errors import MalformedMetricError
from awslabs.sitewise_monitor_migration_mcp_server.migration.metrics import build_query_config, group_by_asset
from awslabs.sitewise_monitor_migration_mcp_server.migration.models import MonitorMetric


@pytest.fixture
def metric(make_metric):
    """Build MonitorMetric models from asset and property IDs."""

    def _metric(asset_id, property_id, source='iotsitewise'):
        return MonitorMetric.model_validate(make_metric(asset_id, property_id, source=source))

    return _metric


def _layout(groups):
    return [(group.assetId, [p.propertyId for p in group.properties]) for group in groups]


class TestGroupByAsset:
    """Test cases for group_by_asset."""

    def test_empty_metrics(self):
        """Test that no metrics produce no asset groups."""
        assert group_by_asset([]) == []

    def test_single_metric(self, metric):
        """Test that a single metric produces one asset with one property."""
        groups = group_by_asset([metric('asset-1', 'prop-1')])

        assert len(groups) == 1
        assert groups[0].model_dump() == {
            'assetId': 'asset-1',
            'properties': [
                {'propertyId': 'prop-1', 'aggregationType': 'AVERAGE', 'resolution': '1m'}
            ],
        }

    def test_distinct_assets_keep_declaration_order(self, metric):
        """Test that each asset gets its own group in first-seen order."""
        groups = group_by_asset(
            [metric('asset-b', 'prop-1'), metric('asset-a', 'prop-2'), metric('asset-c', 'prop-3')]
        )

        assert [group.assetId for group in groups] == ['asset-b', 'asset-a', 'asset-c']

    def test_properties_of_same_asset_are_grouped(self, metric):
        """Test that interleaved metrics are grouped by first occurrence of their asset."""
        groups = group_by_asset(
            [
                metric('asset-1', 'prop-1'),
                metric('asset-2', 'prop-2'),
                metric('asset-1', 'prop-3'),
                metric('asset-3', 'prop-4'),
                metric('asset-2', 'prop-5'),
            ]
        )

        assert _layout(groups) == [
            ('asset-1', ['prop-1', 'prop-3']),
            ('asset-2', ['prop-2', 'prop-5']),
            ('asset-3', ['prop-4']),
        ]

    def test_group_counts_match_metric_counts(self, metric):
        """Test that K distinct assets give K groups sized by their metric counts."""
        metrics = [metric(f'asset-{i % 3}', f'prop-{i}') for i in range(10)]

        groups = group_by_asset(metrics)

        assert len(groups) == 3
        assert [len(group.properties) for group in groups] == [4, 3, 3]
        assert sum(len(group.properties) for group in groups) == len(metrics)

    def test_grouping_preserves_order_rather_than_sorting(self, metric):
        """Test that swapping two metrics of the same asset swaps their properties."""
        forward = group_by_asset([metric('asset-1', 'prop-a'), metric('asset-1', 'prop-b')])
        swapped = group_by_asset([metric('asset-1', 'prop-b'), metric('asset-1', 'prop-a')])

        assert _layout(forward) == [('asset-1', ['prop-a', 'prop-b'])]
        assert _layout(swapped) == [('asset-1', ['prop-b', 'prop-a'])]

    def test_duplicate_properties_are_kept(self, metric):
        """Test that the same property listed twice yields two entries."""
        groups = group_by_asset([metric('asset-1', 'prop-1'), metric('asset-1', 'prop-1')])

        assert _layout(groups) == [('asset-1', ['prop-1', 'prop-1'])]

    def test_missing_asset_id(self, metric):
        """Test that a metric without an asset ID is rejected."""
        bad_metric = MonitorMetric(type='iotsitewise', propertyId='prop-1')

        with pytest.raises(MalformedMetricError) as exc_info:
            group_by_asset([metric('asset-1', 'prop-1'), bad_metric])

        assert exc_info.value.metric_index == 1
        assert 'assetId' in str(exc_info.value)

    def test_missing_property_id(self):
        """Test that a metric without a property ID is rejected."""
        bad_metric = MonitorMetric(type='iotsitewise', assetId='asset-1', propertyId='')

        with pytest.raises(MalformedMetricError, match='propertyId'):
            group_by_asset([bad_metric])


class TestBuildQueryConfig:
    """Test cases for build_query_config."""

    def test_source_comes_from_first_metric(self, metric):
        """Test that the source of the first metric is used."""
        query_config = build_query_config(
            [metric('asset-1', 'prop-1', source='iotsitewise'), metric('asset-2', 'prop-2', 'other')]
        )

        assert query_config.source == 'iotsitewise'

    def test_unscoped_properties_are_empty(self, metric):
        """Test that only asset-scoped queries are produced."""
        query_config = build_query_config([metric('asset-1', 'prop-1')])

        assert query_config.query.properties == []
        assert _layout(query_config.query.assets) == [('asset-1', ['prop-1'])]

    def test_matches_application_query_config(self, metric, expected_query_config):
        """Test the dumped query config against the application format."""
        query_config = build_query_config(
            [
                metric(
                    '3d196ab5-85db-4c90-854f-4e29d579b898',
                    'c07c2fa5-265e-4ed4-bbf0-e94fe01e4d54',
                )
            ]
        )

        assert query_config.model_dump() == expected_query_config

    def test_no_metrics(self):
        """Test that a widget without metrics is rejected."""
        with pytest.raises(MalformedMetricError, match='no metrics'):
            build_query_config([])
