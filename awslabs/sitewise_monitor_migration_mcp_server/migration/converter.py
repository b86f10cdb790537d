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

"""Conversion of SiteWise Monitor dashboard definitions into application definitions."""

import json
from awslabs.sitewise_monitor_migration_mcp_server.errors import ConversionError
from awslabs.sitewise_monitor_migration_mcp_server.migration.grid import to_app_geometry
from awslabs.sitewise_monitor_migration_mcp_server.migration.models import (
    ApplicationDashboardDefinition,
    ApplicationWidget,
    MonitorDashboardDefinition,
)
from awslabs.sitewise_monitor_migration_mcp_server.migration.style import RefIdFactory, StyleRefIdGenerator
from awslabs.sitewise_monitor_migration_mcp_server.migration.widgets import map_widget
from loguru import logger
from typing import Any, Dict, List, Optional, Union


MonitorDefinitionInput = Union[MonitorDashboardDefinition, Dict[str, Any], str]


def parse_monitor_definition(definition: MonitorDefinitionInput) -> MonitorDashboardDefinition:
    """Build a MonitorDashboardDefinition from a model, a dict or a JSON string.

    Raises:
        ValueError: If a JSON string cannot be decoded
        pydantic.ValidationError: If the document does not match the Monitor schema
    """
    if isinstance(definition, MonitorDashboardDefinition):
        return definition
    if isinstance(definition, str):
        try:
            definition = json.loads(definition)
        except json.JSONDecodeError as e:
            raise ValueError(f'Invalid JSON in dashboard definition: {str(e)}') from e
    return MonitorDashboardDefinition.model_validate(definition)


def convert_monitor_to_app_definition(
    definition: MonitorDefinitionInput,
    ref_id_factory: Optional[RefIdFactory] = None,
) -> ApplicationDashboardDefinition:
    """Convert a SiteWise Monitor dashboard definition to an application definition.

    Every Monitor widget yields exactly one application widget, in the same
    order. If any widget cannot be converted the whole conversion fails; no
    partial definition is returned.

    Args:
        definition: The Monitor dashboard definition
        ref_id_factory: Optional source of style reference IDs, uuid4 by default

    Returns:
        The application dashboard definition

    Raises:
        UnsupportedWidgetTypeError: If a widget type has no application counterpart
        MalformedMetricError: If a widget metric cannot be queried
        ConversionError: For any other widget conversion failure
    """
    monitor_definition = parse_monitor_definition(definition)
    ref_ids = StyleRefIdGenerator(ref_id_factory)

    widgets: List[ApplicationWidget] = []
    for index, widget in enumerate(monitor_definition.widgets):
        try:
            geometry = to_app_geometry(widget.x, widget.y, widget.width, widget.height)
            widget_type, properties = map_widget(widget, ref_ids)
        except ConversionError as e:
            e.widget_index = index
            logger.error(f'Failed to convert dashboard definition: {str(e)}')
            raise

        logger.debug(f'Converted widget {index} from {widget.type} to {widget_type}')
        widgets.append(
            ApplicationWidget(type=widget_type, properties=properties, **geometry.model_dump())
        )

    logger.info(f'Converted {len(widgets)} Monitor widgets to application widgets')
    return ApplicationDashboardDefinition(widgets=widgets)
