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

"""SiteWise Monitor dashboard validation utilities."""

import re
from awslabs.sitewise_monitor_migration_mcp_server.errors import MalformedMetricError
from awslabs.sitewise_monitor_migration_mcp_server.migration.models import (
    MonitorDashboardDefinition,
    MonitorMetric,
    MonitorWidgetType,
)
from pydantic import BaseModel, Field, ValidationError
from typing import Any, Dict, List, Optional


CONVERTIBLE_WIDGET_TYPES = [
    MonitorWidgetType.LINE_CHART.value,
    MonitorWidgetType.SCATTER_CHART.value,
    MonitorWidgetType.BAR_CHART.value,
]

REQUIRED_WIDGET_FIELDS = ['x', 'y', 'width', 'height']


class DashboardValidationReport(BaseModel):
    """Result of checking a Monitor dashboard definition for conversion compatibility."""

    valid: bool = Field(True, description='Whether the definition can be converted')
    errors: List[str] = Field(default_factory=list, description='Problems that block conversion')
    warnings: List[str] = Field(
        default_factory=list, description='Source features that are not carried over'
    )
    summary: Dict[str, Any] = Field(default_factory=dict, description='Definition statistics')

    def add_error(self, message: str) -> None:
        """Record a blocking problem."""
        self.errors.append(message)
        self.valid = False


def validate_metric(metric: MonitorMetric, metric_index: Optional[int] = None) -> None:
    """Validate that a metric references both an asset and a property."""
    if not metric.assetId:
        raise MalformedMetricError('Missing assetId', metric_index)
    if not metric.propertyId:
        raise MalformedMetricError('Missing propertyId', metric_index)


def validate_resource_id(resource_id: str, name: str = 'Resource ID') -> None:
    """Validate a SiteWise portal, project or dashboard ID."""
    if not resource_id:
        raise ValueError(f'{name} cannot be empty')
    if len(resource_id) > 36:
        raise ValueError(f'{name} cannot exceed 36 characters')
    if not re.match(r'^[a-zA-Z0-9_-]+$', resource_id):
        raise ValueError(f'{name} contains invalid characters')


def validate_region(region: str) -> None:
    """Validate AWS region format."""
    if not region:
        raise ValueError('Region cannot be empty')
    if not re.match(r'^[a-z0-9-]+$', region):
        raise ValueError('Invalid AWS region format')


def _validate_metrics(
    index: int, metrics: List[Any], report: DashboardValidationReport
) -> List[str]:
    """Check the metrics of one widget and return the asset IDs they reference."""
    asset_ids = []
    for j, metric in enumerate(metrics):
        if not isinstance(metric, dict):
            report.add_error(f'Widget {index}, Metric {j}: Expected an object')
            continue
        asset_id = metric.get('assetId')
        if not asset_id:
            report.add_error(f'Widget {index}, Metric {j}: Missing assetId')
        elif not isinstance(asset_id, str):
            report.add_error(f'Widget {index}, Metric {j}: Field "assetId" must be a string')
        else:
            asset_ids.append(asset_id)
        property_id = metric.get('propertyId')
        if not property_id:
            report.add_error(f'Widget {index}, Metric {j}: Missing propertyId')
        elif not isinstance(property_id, str):
            report.add_error(f'Widget {index}, Metric {j}: Field "propertyId" must be a string')
    return asset_ids


def _validate_widget(index: int, widget: Any, report: DashboardValidationReport) -> List[str]:
    """Check one widget and return the asset IDs it references."""
    if not isinstance(widget, dict):
        report.add_error(f'Widget {index}: Expected an object')
        return []

    widget_type = widget.get('type')
    if not widget_type:
        report.add_error(f'Widget {index}: Missing type field')
    elif not isinstance(widget_type, str):
        report.add_error(f'Widget {index}: Field "type" must be a string')
    elif widget_type not in CONVERTIBLE_WIDGET_TYPES:
        report.add_error(f'Widget {index}: Unsupported type "{widget_type}"')

    for field in REQUIRED_WIDGET_FIELDS:
        value = widget.get(field)
        if value is None:
            report.add_error(f'Widget {index}: Missing required field "{field}"')
        elif not isinstance(value, int) or isinstance(value, bool) or value < 0:
            report.add_error(f'Widget {index}: Field "{field}" must be a non-negative integer')

    asset_ids = []
    metrics = widget.get('metrics') or []
    if not isinstance(metrics, list):
        report.add_error(f'Widget {index}: Field "metrics" must be a list')
    elif not metrics:
        report.add_error(f'Widget {index}: No metrics defined')
    else:
        asset_ids = _validate_metrics(index, metrics, report)

    properties = widget.get('properties') or {}
    if not isinstance(properties, dict):
        report.add_error(f'Widget {index}: Field "properties" must be an object')
    elif properties.get('colorDataAcrossThresholds'):
        report.warnings.append(f'Widget {index}: colorDataAcrossThresholds is not migrated')

    if widget.get('alarms'):
        report.warnings.append(f'Widget {index}: Alarms are not migrated')

    return asset_ids


def _validate_schema(dashboard_def: Dict[str, Any], report: DashboardValidationReport) -> None:
    """Check the definition against the Monitor models used by the converter."""
    try:
        MonitorDashboardDefinition.model_validate(dashboard_def)
    except ValidationError as e:
        for error in e.errors():
            location = '.'.join(str(part) for part in error['loc'])
            report.add_error(f'Field "{location}": {error["msg"]}')


def validate_monitor_definition(dashboard_def: Any) -> DashboardValidationReport:
    """Check a decoded Monitor dashboard definition for conversion compatibility.

    Unlike the converter, which stops at the first problem, this collects every
    problem so they can be fixed in one pass. Structural problems (wrong JSON
    shapes, missing geometry or metric references, unsupported widget types)
    are reported first. Once the structure is sound, the definition is also
    checked against the Monitor schema the converter parses with, so field
    values such as annotation operators or metric sources are covered too.
    """
    report = DashboardValidationReport()

    if not isinstance(dashboard_def, dict):
        report.add_error('Dashboard definition must be a JSON object')
        return report

    widgets = dashboard_def.get('widgets')
    if 'widgets' not in dashboard_def:
        report.add_error('Missing required field: widgets')
        widgets = []
    elif not isinstance(widgets, list):
        report.add_error('Field "widgets" must be a list')
        widgets = []

    widget_types: List[str] = []
    asset_ids: List[str] = []
    total_metrics = 0

    for i, widget in enumerate(widgets):
        asset_ids.extend(_validate_widget(i, widget, report))
        if isinstance(widget, dict):
            if isinstance(widget.get('type'), str) and widget['type']:
                widget_types.append(widget['type'])
            if isinstance(widget.get('metrics'), list):
                total_metrics += len(widget['metrics'])

    if report.valid:
        _validate_schema(dashboard_def, report)

    report.summary = {
        'total_widgets': len(widgets),
        'widget_types': sorted(set(widget_types)),
        'unsupported_types': sorted(
            {t for t in widget_types if t not in CONVERTIBLE_WIDGET_TYPES}
        ),
        'total_metrics': total_metrics,
        'total_assets': len(set(asset_ids)),
        'conversion_ready': report.valid,
    }
    return report
