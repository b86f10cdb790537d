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

"""awslabs SiteWise Monitor migration MCP Server implementation."""

import argparse
import os
import sys
from awslabs.sitewise_monitor_migration_mcp_server.tools.dashboard_migration import SiteWiseMonitorMigrationTools
from loguru import logger
from mcp.server.fastmcp import FastMCP


DEFAULT_LOG_LEVEL = 'WARNING'

logger.remove()
logger.add(sys.stderr, level=os.getenv('FASTMCP_LOG_LEVEL', DEFAULT_LOG_LEVEL))


def create_mcp_server(host: str = '0.0.0.0', port: int = 8080) -> FastMCP:
    """
    Create and configure the FastMCP server instance.

    Args:
        host: Host to bind to (for HTTP transport)
        port: Port to bind to (for HTTP transport)

    Returns:
        Configured FastMCP instance
    """
    mcp = FastMCP(
        'awslabs.sitewise-monitor-migration-mcp-server',
        instructions='Use this MCP server to migrate AWS IoT SiteWise Monitor dashboards to application dashboards. Discover portals, projects and dashboards, validate Monitor dashboard definitions, and convert line, scatter and bar chart widgets into xy-plot and bar-chart widgets with their asset property queries, layout and thresholds. Conversion is read-only: converted definitions are returned, not stored.',
        dependencies=[
            'pydantic',
            'loguru',
            'boto3',
        ],
        host=host,
        port=port,
    )

    try:
        migration_tools = SiteWiseMonitorMigrationTools()
        migration_tools.register(mcp)
        logger.info('SiteWise Monitor migration tools registered successfully')
    except Exception as e:
        logger.error(f'Error initializing SiteWise Monitor migration tools: {str(e)}')
        raise

    logger.info('MCP server created and tools registered')
    return mcp


def main():
    """Run the MCP server."""
    parser = argparse.ArgumentParser(description='AWS IoT SiteWise Monitor Migration MCP Server')
    parser.add_argument(
        '--transport',
        choices=['stdio', 'streamable-http'],
        default=os.getenv('MCP_TRANSPORT', 'stdio'),
        help='Transport mode (default: stdio, can be set via MCP_TRANSPORT env var)',
    )
    parser.add_argument(
        '--host',
        default=os.getenv('MCP_HOST', '0.0.0.0'),
        help='Host to bind to for HTTP transport (default: 0.0.0.0, can be set via MCP_HOST env var)',
    )
    parser.add_argument(
        '--port',
        type=int,
        default=int(os.getenv('MCP_PORT', '8080')),
        help='Port to bind to for HTTP transport (default: 8080, can be set via MCP_PORT env var)',
    )

    args = parser.parse_args()

    if args.transport == 'streamable-http':
        logger.info(f'Starting HTTP server on {args.host}:{args.port}')
        mcp = create_mcp_server(host=args.host, port=args.port)
        mcp.run(transport='streamable-http')
    else:
        logger.info('Starting stdio transport')
        mcp = create_mcp_server()
        mcp.run(transport='stdio')


if __name__ == '__main__':
    main()
