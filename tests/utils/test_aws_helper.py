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

"""Tests for the AWS helper of the SiteWise Monitor migration MCP Server."""

import os
import pytest
from awslabs.sitewise_monitor_migration_mcp_server import __version__
from awslabs.sitewise_monitor_migration_mcp_server.utils.aws_helper import AwsHelper
from botocore.config import Config
from unittest.mock import MagicMock, patch


class TestAwsHelper:
    """Test cases for AwsHelper."""

    @patch.dict(os.environ, {'AWS_REGION': 'eu-west-1'})
    def test_get_aws_region_from_environment(self):
        """Test that AWS_REGION is used when set."""
        assert AwsHelper.get_aws_region() == 'eu-west-1'

    @patch.dict(os.environ, {}, clear=True)
    def test_get_aws_region_default(self):
        """Test that us-east-1 is used when AWS_REGION is not set."""
        assert AwsHelper.get_aws_region() == 'us-east-1'

    @patch.dict(os.environ, {'AWS_PROFILE': 'migration'})
    def test_get_aws_profile(self):
        """Test that AWS_PROFILE is read from the environment."""
        assert AwsHelper.get_aws_profile() == 'migration'

    @patch.dict(os.environ, {}, clear=True)
    def test_get_aws_profile_unset(self):
        """Test that no profile is returned when AWS_PROFILE is not set."""
        assert AwsHelper.get_aws_profile() is None

    def test_user_agent(self):
        """Test the user agent suffix."""
        assert (
            AwsHelper.user_agent()
            == f'awslabs/mcp/sitewise-monitor-migration-mcp-server/{__version__}'
        )


class TestCreateSiteWiseClient:
    """Test cases for AwsHelper.create_sitewise_client."""

    @patch.dict(os.environ, {}, clear=True)
    @patch('awslabs.sitewise_monitor_migration_mcp_server.utils.aws_helper.boto3.Session')
    def test_create_client_default_region(self, mock_session):
        """Test creating a SiteWise client with the default region."""
        mock_client = MagicMock()
        mock_session.return_value.client.return_value = mock_client

        result = AwsHelper.create_sitewise_client()

        mock_session.assert_called_once_with(region_name='us-east-1')
        call_args = mock_session.return_value.client.call_args
        assert call_args[0][0] == 'iotsitewise'
        config = call_args[1]['config']
        assert isinstance(config, Config)
        assert getattr(config, 'user_agent_extra') == AwsHelper.user_agent()
        assert result == mock_client

    @patch.dict(os.environ, {'AWS_PROFILE': 'migration'}, clear=True)
    @patch('awslabs.sitewise_monitor_migration_mcp_server.utils.aws_helper.boto3.Session')
    def test_create_client_with_profile(self, mock_session):
        """Test that AWS_PROFILE selects the session profile."""
        AwsHelper.create_sitewise_client('ap-southeast-2')

        mock_session.assert_called_once_with(
            profile_name='migration', region_name='ap-southeast-2'
        )

    @patch.dict(os.environ, {}, clear=True)
    @patch('awslabs.sitewise_monitor_migration_mcp_server.utils.aws_helper.boto3.Session')
    def test_create_client_error(self, mock_session):
        """Test that client creation errors are raised."""
        mock_session.side_effect = Exception('No credentials')

        with pytest.raises(Exception, match='No credentials'):
            AwsHelper.create_sitewise_client('us-west-2')
