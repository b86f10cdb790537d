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

"""Data models for SiteWise Monitor migration MCP tools."""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class ConversionSummary(BaseModel):
    """Statistics about a converted dashboard definition."""

    total_widgets: int = Field(..., description='Number of widgets converted')
    widget_types: List[str] = Field(
        default_factory=list, description='Distinct Monitor widget types in the source'
    )
    total_metrics: int = Field(..., description='Number of metrics across all widgets')
    total_assets: int = Field(..., description='Number of distinct assets referenced')


class ConversionResponse(BaseModel):
    """Response containing a converted application dashboard definition."""

    application_definition: Dict[str, Any] = Field(
        ..., description='The application dashboard definition'
    )
    summary: ConversionSummary = Field(..., description='Conversion statistics')


class MonitorResourceSummary(BaseModel):
    """Summary of a SiteWise Monitor portal, project or dashboard."""

    id: str = Field(..., description='ID of the resource')
    name: str = Field(..., description='Name of the resource')
    description: Optional[str] = Field(None, description='Description of the resource')
    last_update_date: Optional[datetime] = Field(None, description='Last update timestamp')


class DashboardMigrationResponse(ConversionResponse):
    """Response containing a migrated SiteWise Monitor dashboard."""

    dashboard_id: str = Field(..., description='ID of the source dashboard')
    dashboard_name: Optional[str] = Field(None, description='Name of the source dashboard')
    dashboard_description: Optional[str] = Field(
        None, description='Description of the source dashboard'
    )
    dashboard_arn: Optional[str] = Field(None, description='ARN of the source dashboard')
    project_id: Optional[str] = Field(None, description='Project owning the source dashboard')
    last_update_date: Optional[datetime] = Field(
        None, description='Last update timestamp of the source dashboard'
    )
    region: str = Field(..., description='AWS region the dashboard was read from')


class DashboardMigrationFailure(BaseModel):
    """A dashboard of a project that could not be migrated."""

    dashboard_id: str = Field(..., description='ID of the source dashboard')
    dashboard_name: Optional[str] = Field(None, description='Name of the source dashboard')
    error_code: str = Field(..., description='Error category')
    error: str = Field(..., description='Error message')


class ProjectMigrationResponse(BaseModel):
    """Response of migrating every dashboard of a SiteWise Monitor project."""

    project_id: str = Field(..., description='ID of the source project')
    region: str = Field(..., description='AWS region the dashboards were read from')
    migrated: List[DashboardMigrationResponse] = Field(
        default_factory=list, description='Dashboards converted successfully'
    )
    failed: List[DashboardMigrationFailure] = Field(
        default_factory=list, description='Dashboards that could not be converted'
    )
