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

"""SiteWise Monitor dashboard migration tools for MCP server."""

import json
from awslabs.sitewise_monitor_migration_mcp_server.errors import ConversionError
from awslabs.sitewise_monitor_migration_mcp_server.migration.constants import (
    APP_WIDGET_BAR_CHART,
    APP_WIDGET_XY_PLOT,
    CONNECTION_STYLE_LINEAR,
    CONNECTION_STYLE_NONE,
    DEFAULT_AGGREGATION_TYPE,
    DEFAULT_RESOLUTION,
    GRID_UNIT_HEIGHT,
    GRID_UNIT_WIDTH,
    LINE_STYLE_SOLID,
    SYMBOL_STYLE_FILLED_CIRCLE,
)
from awslabs.sitewise_monitor_migration_mcp_server.migration.converter import (
    MonitorDefinitionInput,
    convert_monitor_to_app_definition,
    parse_monitor_definition,
)
from awslabs.sitewise_monitor_migration_mcp_server.migration.models import MonitorDashboardDefinition, MonitorWidgetType
from awslabs.sitewise_monitor_migration_mcp_server.tools.models import (
    ConversionResponse,
    ConversionSummary,
    DashboardMigrationFailure,
    DashboardMigrationResponse,
    MonitorResourceSummary,
    ProjectMigrationResponse,
)
from awslabs.sitewise_monitor_migration_mcp_server.utils.aws_helper import AwsHelper
from awslabs.sitewise_monitor_migration_mcp_server.validation import (
    DashboardValidationReport,
    validate_monitor_definition,
    validate_region,
    validate_resource_id,
)
from botocore.exceptions import ClientError
from loguru import logger
from mcp.server.fastmcp import Context
from pydantic import Field
from typing import Annotated, Any, Dict, List, Optional


def summarize_definition(definition: MonitorDashboardDefinition) -> ConversionSummary:
    """Collect statistics about a Monitor dashboard definition."""
    metrics = [metric for widget in definition.widgets for metric in widget.metrics]
    return ConversionSummary(
        total_widgets=len(definition.widgets),
        widget_types=sorted({widget.type for widget in definition.widgets}),
        total_metrics=len(metrics),
        total_assets=len({metric.assetId for metric in metrics if metric.assetId}),
    )


def convert_definition(dashboard_definition: MonitorDefinitionInput) -> ConversionResponse:
    """Convert a Monitor definition and summarize it."""
    monitor_definition = parse_monitor_definition(dashboard_definition)
    application_definition = convert_monitor_to_app_definition(monitor_definition)
    return ConversionResponse(
        application_definition=application_definition.model_dump(mode='json'),
        summary=summarize_definition(monitor_definition),
    )


class SiteWiseMonitorMigrationTools:
    """SiteWise Monitor dashboard migration tools for MCP server."""

    def _get_sitewise_client(self, region: str):
        """Create an AWS IoT SiteWise client for the specified region."""
        return AwsHelper.create_sitewise_client(region)

    def _resolve_region(self, region: Optional[str]) -> str:
        region = (region or AwsHelper.get_aws_region()).strip()
        validate_region(region)
        return region

    def register(self, mcp):
        """Register all SiteWise Monitor migration tools with the MCP server."""
        mcp.tool(name='convert_monitor_dashboard')(self.convert_monitor_dashboard)
        mcp.tool(name='validate_monitor_dashboard')(self.validate_monitor_dashboard)
        mcp.tool(name='list_monitor_portals')(self.list_monitor_portals)
        mcp.tool(name='list_monitor_projects')(self.list_monitor_projects)
        mcp.tool(name='list_monitor_dashboards')(self.list_monitor_dashboards)
        mcp.tool(name='migrate_monitor_dashboard')(self.migrate_monitor_dashboard)
        mcp.tool(name='migrate_project_dashboards')(self.migrate_project_dashboards)
        mcp.tool(name='get_conversion_rules')(self.get_conversion_rules)

    async def convert_monitor_dashboard(
        self,
        ctx: Context,
        dashboard_definition: Annotated[
            str,
            Field(description='JSON string of the SiteWise Monitor dashboard definition'),
        ],
    ) -> ConversionResponse:
        """Convert a SiteWise Monitor dashboard definition to an application dashboard.

        Line charts and scatter charts become xy-plot widgets, bar charts become
        bar-chart widgets. Widget positions and sizes are scaled from Monitor
        grid units to pixels, metrics are grouped per asset and Y-axis
        annotations become thresholds. The conversion fails as a whole if any
        widget cannot be converted.

        Args:
            ctx: The MCP context object for error handling and logging.
            dashboard_definition: JSON string of the Monitor dashboard definition.

        Returns:
            ConversionResponse: The application definition and conversion statistics.
        """
        try:
            result = convert_definition(dashboard_definition)
            logger.info(f'Converted dashboard with {result.summary.total_widgets} widgets')
            return result
        except ConversionError as e:
            error_msg = f'Conversion error: {str(e)}'
            logger.error(error_msg)
            await ctx.error(error_msg)
            raise
        except ValueError as e:
            error_msg = f'Invalid dashboard definition: {str(e)}'
            logger.error(error_msg)
            await ctx.error(error_msg)
            raise

    async def validate_monitor_dashboard(
        self,
        ctx: Context,
        dashboard_definition: Annotated[
            str,
            Field(description='JSON string of the SiteWise Monitor dashboard definition'),
        ],
    ) -> DashboardValidationReport:
        """Check a SiteWise Monitor dashboard definition for conversion compatibility.

        Every problem that would make the conversion fail is reported, together
        with warnings for source features that are not carried over.

        Args:
            ctx: The MCP context object for error handling and logging.
            dashboard_definition: JSON string of the Monitor dashboard definition.

        Returns:
            DashboardValidationReport: Errors, warnings and definition statistics.
        """
        try:
            dashboard_def = json.loads(dashboard_definition)
        except json.JSONDecodeError as e:
            logger.warning(f'Dashboard definition is not valid JSON: {str(e)}')
            report = DashboardValidationReport()
            report.add_error(f'Invalid JSON: {str(e)}')
            return report

        try:
            report = validate_monitor_definition(dashboard_def)
        except Exception as e:
            error_msg = f'Error in validate_monitor_dashboard: {str(e)}'
            logger.error(error_msg)
            await ctx.error(error_msg)
            raise

        if not report.valid:
            await ctx.warning(f'Dashboard definition has {len(report.errors)} errors')
        return report

    async def list_monitor_portals(
        self,
        ctx: Context,
        region: Annotated[
            Optional[str],
            Field(description='AWS region to query. Defaults to AWS_REGION or us-east-1.'),
        ] = None,
    ) -> List[MonitorResourceSummary]:
        """List the SiteWise Monitor portals of the account.

        Args:
            ctx: The MCP context object for error handling and logging.
            region: AWS region to query.

        Returns:
            List[MonitorResourceSummary]: The portals.
        """
        try:
            region = self._resolve_region(region)
            logger.info(f'Listing portals in region {region}')
            client = self._get_sitewise_client(region)
            return self._paginate(client, 'list_portals', 'portalSummaries')
        except Exception as e:
            error_msg = f'Error in list_monitor_portals: {str(e)}'
            logger.error(error_msg)
            await ctx.error(error_msg)
            raise

    async def list_monitor_projects(
        self,
        ctx: Context,
        portal_id: Annotated[str, Field(description='ID of the SiteWise Monitor portal')],
        region: Annotated[
            Optional[str],
            Field(description='AWS region to query. Defaults to AWS_REGION or us-east-1.'),
        ] = None,
    ) -> List[MonitorResourceSummary]:
        """List the projects of a SiteWise Monitor portal.

        Args:
            ctx: The MCP context object for error handling and logging.
            portal_id: ID of the portal.
            region: AWS region to query.

        Returns:
            List[MonitorResourceSummary]: The projects.
        """
        try:
            validate_resource_id(portal_id, 'Portal ID')
            region = self._resolve_region(region)
            logger.info(f'Listing projects of portal {portal_id} in region {region}')
            client = self._get_sitewise_client(region)
            return self._paginate(client, 'list_projects', 'projectSummaries', portalId=portal_id)
        except Exception as e:
            error_msg = f'Error in list_monitor_projects: {str(e)}'
            logger.error(error_msg)
            await ctx.error(error_msg)
            raise

    async def list_monitor_dashboards(
        self,
        ctx: Context,
        project_id: Annotated[str, Field(description='ID of the SiteWise Monitor project')],
        region: Annotated[
            Optional[str],
            Field(description='AWS region to query. Defaults to AWS_REGION or us-east-1.'),
        ] = None,
    ) -> List[MonitorResourceSummary]:
        """List the dashboards of a SiteWise Monitor project.

        Args:
            ctx: The MCP context object for error handling and logging.
            project_id: ID of the project.
            region: AWS region to query.

        Returns:
            List[MonitorResourceSummary]: The dashboards.
        """
        try:
            validate_resource_id(project_id, 'Project ID')
            region = self._resolve_region(region)
            logger.info(f'Listing dashboards of project {project_id} in region {region}')
            client = self._get_sitewise_client(region)
            return self._list_dashboards(client, project_id)
        except Exception as e:
            error_msg = f'Error in list_monitor_dashboards: {str(e)}'
            logger.error(error_msg)
            await ctx.error(error_msg)
            raise

    async def migrate_monitor_dashboard(
        self,
        ctx: Context,
        dashboard_id: Annotated[
            str, Field(description='ID of the SiteWise Monitor dashboard to migrate')
        ],
        region: Annotated[
            Optional[str],
            Field(description='AWS region to query. Defaults to AWS_REGION or us-east-1.'),
        ] = None,
    ) -> DashboardMigrationResponse:
        """Fetch a SiteWise Monitor dashboard by ID and convert it to an application dashboard.

        Args:
            ctx: The MCP context object for error handling and logging.
            dashboard_id: ID of the dashboard.
            region: AWS region to query.

        Returns:
            DashboardMigrationResponse: The application definition and source metadata.
        """
        try:
            validate_resource_id(dashboard_id, 'Dashboard ID')
            region = self._resolve_region(region)
            client = self._get_sitewise_client(region)
            return self._migrate_dashboard(client, dashboard_id, region)
        except ClientError as e:
            error_code = e.response['Error']['Code']
            error_msg = f'AWS API error in migrate_monitor_dashboard ({error_code}): {str(e)}'
            logger.error(error_msg)
            await ctx.error(error_msg)
            raise
        except Exception as e:
            error_msg = f'Error in migrate_monitor_dashboard: {str(e)}'
            logger.error(error_msg)
            await ctx.error(error_msg)
            raise

    async def migrate_project_dashboards(
        self,
        ctx: Context,
        project_id: Annotated[str, Field(description='ID of the SiteWise Monitor project')],
        region: Annotated[
            Optional[str],
            Field(description='AWS region to query. Defaults to AWS_REGION or us-east-1.'),
        ] = None,
    ) -> ProjectMigrationResponse:
        """Convert every dashboard of a SiteWise Monitor project.

        Dashboards that cannot be converted are reported in the failed list
        with the reason; the remaining dashboards are still converted.

        Args:
            ctx: The MCP context object for error handling and logging.
            project_id: ID of the project.
            region: AWS region to query.

        Returns:
            ProjectMigrationResponse: Migrated dashboards and failures.
        """
        try:
            validate_resource_id(project_id, 'Project ID')
            region = self._resolve_region(region)
            client = self._get_sitewise_client(region)
            dashboards = self._list_dashboards(client, project_id)
        except Exception as e:
            error_msg = f'Error in migrate_project_dashboards: {str(e)}'
            logger.error(error_msg)
            await ctx.error(error_msg)
            raise

        response = ProjectMigrationResponse(project_id=project_id, region=region)
        for dashboard in dashboards:
            try:
                response.migrated.append(self._migrate_dashboard(client, dashboard.id, region))
            except ConversionError as e:
                response.failed.append(self._failure(dashboard, e.error_code, str(e)))
            except ClientError as e:
                response.failed.append(
                    self._failure(dashboard, e.response['Error']['Code'], str(e))
                )
            except ValueError as e:
                response.failed.append(self._failure(dashboard, 'InvalidDefinition', str(e)))

        if response.failed:
            await ctx.warning(
                f'{len(response.failed)} of {len(dashboards)} dashboards could not be migrated'
            )
        logger.info(
            f'Migrated {len(response.migrated)} of {len(dashboards)} dashboards '
            f'of project {project_id}'
        )
        return response

    async def get_conversion_rules(self, ctx: Context) -> Dict[str, Any]:
        """Get the rules used to convert SiteWise Monitor dashboards to application dashboards.

        Args:
            ctx: The MCP context object.

        Returns:
            Dict[str, Any]: Widget mappings, layout scaling and query defaults.
        """
        xy_plot_defaults = {
            'symbol': {'style': SYMBOL_STYLE_FILLED_CIRCLE},
            'axis': {'yVisible': True, 'xVisible': True},
            'line': {'style': LINE_STYLE_SOLID},
            'legend': {'visible': True},
        }
        return {
            'widget_mappings': {
                MonitorWidgetType.LINE_CHART.value: {
                    'application_type': APP_WIDGET_XY_PLOT,
                    'connection_style': CONNECTION_STYLE_LINEAR,
                    'defaults': xy_plot_defaults,
                },
                MonitorWidgetType.SCATTER_CHART.value: {
                    'application_type': APP_WIDGET_XY_PLOT,
                    'connection_style': CONNECTION_STYLE_NONE,
                    'defaults': xy_plot_defaults,
                },
                MonitorWidgetType.BAR_CHART.value: {
                    'application_type': APP_WIDGET_BAR_CHART,
                    'defaults': {'axis': {'showX': True, 'showY': True}},
                    'style_settings': 'One entry per metric keyed by a unique reference ID',
                },
            },
            'unsupported_widget_types': [
                MonitorWidgetType.STATUS_GRID.value,
                MonitorWidgetType.STATUS_TIMELINE.value,
                MonitorWidgetType.KPI.value,
                MonitorWidgetType.TABLE.value,
            ],
            'layout_scaling': {
                'x': GRID_UNIT_WIDTH,
                'width': GRID_UNIT_WIDTH,
                'y': GRID_UNIT_HEIGHT,
                'height': GRID_UNIT_HEIGHT,
                'description': 'Monitor grid units are multiplied into application pixels',
            },
            'query_defaults': {
                'aggregationType': DEFAULT_AGGREGATION_TYPE,
                'resolution': DEFAULT_RESOLUTION,
                'grouping': 'Metrics are grouped per asset in first-seen order',
            },
            'thresholds': 'Y-axis annotations become thresholds; showValue maps to visible',
            'not_migrated': ['alarms', 'metric labels', 'colorDataAcrossThresholds'],
        }

    def _paginate(
        self, client, operation: str, result_key: str, **params
    ) -> List[MonitorResourceSummary]:
        paginator = client.get_paginator(operation)
        summaries = []
        for page in paginator.paginate(**params):
            for item in page.get(result_key, []):
                summaries.append(
                    MonitorResourceSummary(
                        id=item['id'],
                        name=item['name'],
                        description=item.get('description'),
                        last_update_date=item.get('lastUpdateDate'),
                    )
                )
        return summaries

    def _list_dashboards(self, client, project_id: str) -> List[MonitorResourceSummary]:
        return self._paginate(client, 'list_dashboards', 'dashboardSummaries', projectId=project_id)

    def _migrate_dashboard(
        self, client, dashboard_id: str, region: str
    ) -> DashboardMigrationResponse:
        logger.info(f'Fetching dashboard {dashboard_id} from region {region}')
        response = client.describe_dashboard(dashboardId=dashboard_id)

        dashboard_definition = response.get('dashboardDefinition')
        if not dashboard_definition:
            raise ValueError(f'Dashboard {dashboard_id} has no dashboard definition')

        result = convert_definition(dashboard_definition)
        return DashboardMigrationResponse(
            application_definition=result.application_definition,
            summary=result.summary,
            dashboard_id=dashboard_id,
            dashboard_name=response.get('dashboardName'),
            dashboard_description=response.get('dashboardDescription'),
            dashboard_arn=response.get('dashboardArn'),
            project_id=response.get('projectId'),
            last_update_date=response.get('dashboardLastUpdateDate'),
            region=region,
        )

    def _failure(
        self, dashboard: MonitorResourceSummary, error_code: str, error: str
    ) -> DashboardMigrationFailure:
        logger.warning(f'Could not migrate dashboard {dashboard.id}: {error}')
        return DashboardMigrationFailure(
            dashboard_id=dashboard.id,
            dashboard_name=dashboard.name,
            error_code=error_code,
            error=error,
        )
