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

"""Pytest configuration and fixtures for SiteWise Monitor migration tests."""

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, Mock


WIND_FARM_ASSET_ID = '3d196ab5-85db-4c90-854f-4e29d579b898'
WIND_FARM_POWER_PROPERTY_ID = 'c07c2fa5-265e-4ed4-bbf0-e94fe01e4d54'


@pytest.fixture
def make_metric():
    """Factory for Monitor metric documents."""

    def _make_metric(
        asset_id=WIND_FARM_ASSET_ID,
        property_id=WIND_FARM_POWER_PROPERTY_ID,
        label='Total Average Power (Demo Wind Farm Asset)',
        source='iotsitewise',
    ):
        return {
            'type': source,
            'label': label,
            'assetId': asset_id,
            'propertyId': property_id,
            'dataType': 'DOUBLE',
        }

    return _make_metric


@pytest.fixture
def make_widget(make_metric):
    """Factory for Monitor widget documents, a 3x3 chart at the origin by default."""

    def _make_widget(widget_type, metrics=None, annotations=None, x=0, y=0, width=3, height=3):
        widget = {
            'type': widget_type,
            'title': 'test',
            'x': x,
            'y': y,
            'width': width,
            'height': height,
            'metrics': [make_metric()] if metrics is None else metrics,
            'alarms': [],
            'properties': {'colorDataAcrossThresholds': True},
        }
        if annotations is not None:
            widget['annotations'] = annotations
        return widget

    return _make_widget


@pytest.fixture
def sequential_ref_ids():
    """Deterministic style reference ID factory: ref-0, ref-1, ..."""
    counter = iter(range(1000))
    return lambda: f'ref-{next(counter)}'


@pytest.fixture
def expected_query_config():
    """Query config of a widget showing the wind farm power property."""
    return {
        'source': 'iotsitewise',
        'query': {
            'properties': [],
            'assets': [
                {
                    'assetId': WIND_FARM_ASSET_ID,
                    'properties': [
                        {
                            'aggregationType': 'AVERAGE',
                            'propertyId': WIND_FARM_POWER_PROPERTY_ID,
                            'resolution': '1m',
                        },
                    ],
                },
            ],
        },
    }


@pytest_asyncio.fixture
async def mock_context():
    """Create mock MCP context."""
    context = Mock()
    context.info = AsyncMock()
    context.warning = AsyncMock()
    context.error = AsyncMock()
    return context
