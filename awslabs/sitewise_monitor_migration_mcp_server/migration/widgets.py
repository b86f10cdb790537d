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

"""Mapping of Monitor widget types to application widget types and properties."""

from awslabs.sitewise_monitor_migration_mcp_server.errors import UnsupportedWidgetTypeError
from awslabs.sitewise_monitor_migration_mcp_server.migration.annotations import translate_annotations
from awslabs.sitewise_monitor_migration_mcp_server.migration.constants import (
    APP_WIDGET_BAR_CHART,
    APP_WIDGET_XY_PLOT,
    CONNECTION_STYLE_LINEAR,
    CONNECTION_STYLE_NONE,
    LINE_STYLE_SOLID,
    SYMBOL_STYLE_FILLED_CIRCLE,
)
from awslabs.sitewise_monitor_migration_mcp_server.migration.metrics import build_query_config
from awslabs.sitewise_monitor_migration_mcp_server.migration.models import MonitorWidget, MonitorWidgetType
from awslabs.sitewise_monitor_migration_mcp_server.migration.style import StyleRefIdGenerator
from typing import Any, Callable, Dict, Tuple


WidgetMapping = Tuple[str, Dict[str, Any]]


def _base_properties(widget: MonitorWidget) -> Dict[str, Any]:
    """Properties shared by every chart: title and, when present, thresholds."""
    properties: Dict[str, Any] = {'title': widget.title}
    thresholds = translate_annotations(widget.annotations)
    if thresholds is not None:
        properties['thresholds'] = [threshold.model_dump(mode='json') for threshold in thresholds]
    return properties


def _query_config(widget: MonitorWidget) -> Dict[str, Any]:
    return build_query_config(widget.metrics).model_dump()


def _xy_plot_properties(widget: MonitorWidget, connection_style: str) -> Dict[str, Any]:
    properties = _base_properties(widget)
    properties.update(
        {
            'symbol': {'style': SYMBOL_STYLE_FILLED_CIRCLE},
            'axis': {'yVisible': True, 'xVisible': True},
            'line': {'connectionStyle': connection_style, 'style': LINE_STYLE_SOLID},
            'legend': {'visible': True},
            'queryConfig': _query_config(widget),
        }
    )
    return properties


def _map_line_chart(widget: MonitorWidget, ref_ids: StyleRefIdGenerator) -> WidgetMapping:
    return APP_WIDGET_XY_PLOT, _xy_plot_properties(widget, CONNECTION_STYLE_LINEAR)


def _map_scatter_chart(widget: MonitorWidget, ref_ids: StyleRefIdGenerator) -> WidgetMapping:
    return APP_WIDGET_XY_PLOT, _xy_plot_properties(widget, CONNECTION_STYLE_NONE)


def _map_bar_chart(widget: MonitorWidget, ref_ids: StyleRefIdGenerator) -> WidgetMapping:
    properties = _base_properties(widget)
    properties['axis'] = {'showX': True, 'showY': True}
    properties['queryConfig'] = _query_config(widget)
    # One style entry per series; colors are assigned by the renderer.
    properties['styleSettings'] = {ref_ids.new_ref_id(): {} for _ in widget.metrics}
    return APP_WIDGET_BAR_CHART, properties


WIDGET_MAPPERS: Dict[
    MonitorWidgetType, Callable[[MonitorWidget, StyleRefIdGenerator], WidgetMapping]
] = {
    MonitorWidgetType.LINE_CHART: _map_line_chart,
    MonitorWidgetType.SCATTER_CHART: _map_scatter_chart,
    MonitorWidgetType.BAR_CHART: _map_bar_chart,
}


def is_supported_widget_type(widget_type: str) -> bool:
    """Check whether a Monitor widget type can be converted."""
    return widget_type in {member.value for member in WIDGET_MAPPERS}


def map_widget(widget: MonitorWidget, ref_ids: StyleRefIdGenerator) -> WidgetMapping:
    """Map a Monitor widget to an application widget type and its properties.

    Geometry is not part of the mapping; see grid.to_app_geometry.

    Args:
        widget: The Monitor widget to map
        ref_ids: Source of style reference IDs for the current conversion

    Returns:
        Tuple of the application widget type and its properties

    Raises:
        UnsupportedWidgetTypeError: If the widget type has no application counterpart
        MalformedMetricError: If a widget metric cannot be queried
    """
    if not is_supported_widget_type(widget.type):
        raise UnsupportedWidgetTypeError(widget.type)

    mapper = WIDGET_MAPPERS[MonitorWidgetType(widget.type)]
    return mapper(widget, ref_ids)
