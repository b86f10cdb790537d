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

"""AWS helper for the SiteWise Monitor migration MCP Server."""

import boto3
import os
from awslabs.sitewise_monitor_migration_mcp_server import MCP_SERVER_VERSION
from botocore.config import Config
from loguru import logger
from typing import Optional


DEFAULT_AWS_REGION = 'us-east-1'


class AwsHelper:
    """Helper class for AWS operations.

    This class resolves the region and profile from the environment and creates
    AWS IoT SiteWise clients tagged with the server user agent.
    """

    @staticmethod
    def get_aws_region() -> str:
        """Get the AWS region from the environment if set."""
        aws_region = os.environ.get(
            'AWS_REGION',
        )
        if not aws_region:
            return DEFAULT_AWS_REGION
        return aws_region

    @staticmethod
    def get_aws_profile() -> Optional[str]:
        """Get the AWS profile from the environment if set."""
        return os.environ.get('AWS_PROFILE') or None

    @staticmethod
    def user_agent() -> str:
        """User agent suffix added to every AWS request."""
        return f'awslabs/mcp/sitewise-monitor-migration-mcp-server/{MCP_SERVER_VERSION}'

    @classmethod
    def create_sitewise_client(cls, region: Optional[str] = None):
        """Create an AWS IoT SiteWise client.

        Args:
            region: AWS region, defaults to AWS_REGION or us-east-1

        Returns:
            A boto3 iotsitewise client
        """
        region_name = region or cls.get_aws_region()
        config = Config(user_agent_extra=cls.user_agent())

        try:
            if aws_profile := cls.get_aws_profile():
                return boto3.Session(profile_name=aws_profile, region_name=region_name).client(
                    'iotsitewise', config=config
                )
            return boto3.Session(region_name=region_name).client('iotsitewise', config=config)
        except Exception as e:
            logger.error(f'Error creating iotsitewise client for region {region_name}: {str(e)}')
            raise
