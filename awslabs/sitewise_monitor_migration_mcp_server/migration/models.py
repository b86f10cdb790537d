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

"""Data models for SiteWise Monitor and application dashboard definitions.

Field names follow the camelCase keys of the JSON documents on both sides so
definitions can be validated from, and dumped back to, their wire form as-is.
"""

from awslabs.sitewise_monitor_migration_mcp_server.migration.constants import (
    DEFAULT_AGGREGATION_TYPE,
    DEFAULT_RESOLUTION,
    DEFAULT_Z_INDEX,
)
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Union


class MonitorWidgetType(str, Enum):
    """Widget type tags used by SiteWise Monitor dashboards."""

    LINE_CHART = 'sc-line-chart'
    SCATTER_CHART = 'sc-scatter-chart'
    BAR_CHART = 'sc-bar-chart'
    STATUS_GRID = 'sc-status-grid'
    STATUS_TIMELINE = 'sc-status-timeline'
    KPI = 'sc-kpi'
    TABLE = 'sc-table'


class ComparisonOperator(str, Enum):
    """Comparison operators of Monitor annotations and application thresholds."""

    LT = 'LT'
    GT = 'GT'
    LTE = 'LTE'
    GTE = 'GTE'
    EQ = 'EQ'


class MonitorMetric(BaseModel):
    """A property reference displayed by a Monitor widget.

    ``assetId`` and ``propertyId`` are optional here so that their absence is
    reported by the converter as a malformed metric instead of a parse error.
    """

    model_config = ConfigDict(extra='allow', frozen=True)

    type: str = Field(..., description='Source system of the metric, e.g. iotsitewise')
    label: Optional[str] = Field(None, description='Display label, not migrated')
    assetId: Optional[str] = Field(None, description='ID of the asset owning the property')
    propertyId: Optional[str] = Field(None, description='ID of the asset property')
    dataType: Optional[str] = Field(None, description='Property data type, not migrated')


class MonitorYAnnotation(BaseModel):
    """A horizontal threshold line on a Monitor chart."""

    model_config = ConfigDict(extra='allow', frozen=True)

    color: str
    comparisonOperator: ComparisonOperator
    showValue: bool
    value: Union[int, float]


class MonitorAnnotations(BaseModel):
    """Annotations attached to a Monitor widget."""

    model_config = ConfigDict(extra='allow', frozen=True)

    y: List[MonitorYAnnotation] = Field(default_factory=list)


class MonitorWidget(BaseModel):
    """A single widget of a SiteWise Monitor dashboard.

    ``type`` is kept as a plain string so unknown widget types survive parsing
    and are rejected by the converter with a dedicated error.
    """

    model_config = ConfigDict(extra='allow', frozen=True)

    type: str = Field(..., description='Monitor widget type tag, e.g. sc-line-chart')
    title: str = Field('', description='Widget title')
    x: int = Field(..., ge=0, description='Column position in grid units')
    y: int = Field(..., ge=0, description='Row position in grid units')
    width: int = Field(..., ge=0, description='Width in grid units')
    height: int = Field(..., ge=0, description='Height in grid units')
    metrics: List[MonitorMetric] = Field(default_factory=list)
    alarms: List[Any] = Field(default_factory=list, description='Alarms, not migrated')
    properties: Dict[str, Any] = Field(default_factory=dict)
    annotations: Optional[MonitorAnnotations] = None


class MonitorDashboardDefinition(BaseModel):
    """The dashboardDefinition document of a SiteWise Monitor dashboard."""

    model_config = ConfigDict(extra='allow', frozen=True)

    widgets: List[MonitorWidget] = Field(default_factory=list)


class Geometry(BaseModel):
    """Position and size of an application widget in pixels."""

    x: int
    y: int
    z: int = DEFAULT_Z_INDEX
    width: int
    height: int


class PropertyQuery(BaseModel):
    """Query for a single asset property."""

    propertyId: str
    aggregationType: str = DEFAULT_AGGREGATION_TYPE
    resolution: str = DEFAULT_RESOLUTION


class AssetQuery(BaseModel):
    """Query for the properties of one asset."""

    assetId: str
    properties: List[PropertyQuery] = Field(default_factory=list)


class Query(BaseModel):
    """Asset-scoped and unscoped property queries of a widget."""

    assets: List[AssetQuery] = Field(default_factory=list)
    properties: List[Any] = Field(default_factory=list)


class QueryConfig(BaseModel):
    """Data source binding of an application widget."""

    source: str
    query: Query


class Threshold(BaseModel):
    """A threshold marker on an application chart."""

    color: str
    comparisonOperator: ComparisonOperator
    value: Union[int, float]
    visible: bool


class ApplicationWidget(BaseModel):
    """A single widget of an application dashboard."""

    type: str
    x: int
    y: int
    z: int = DEFAULT_Z_INDEX
    width: int
    height: int
    properties: Dict[str, Any] = Field(default_factory=dict)


class ApplicationDashboardDefinition(BaseModel):
    """An application dashboard definition."""

    widgets: List[ApplicationWidget] = Field(default_factory=list)
