#!/usr/bin/env python

from setuptools import find_namespace_packages, setup

if __name__ == "__main__":
    setup(
        name="awslabs-sitewise-monitor-migration-mcp-server",
        version="0.1.0",
        description="An AWS Labs Model Context Protocol (MCP) server for "
        "migrating AWS IoT SiteWise Monitor dashboards to application dashboards",
        python_requires=">=3.10",
        packages=find_namespace_packages(include=["awslabs.*"]),
        install_requires=[
            "boto3>=1.34.0",
            "botocore>=1.34.0",
            "loguru>=0.7.0",
            "mcp[cli]>=1.11.0,<2",
            "pydantic>=2.10.6",
        ],
        extras_require={
            "test": [
                "pytest>=8.0.0",
                "pytest-asyncio>=0.26.0",
                "pytest-cov>=4.1.0",
            ],
        },
        entry_points={
            "console_scripts": [
                "awslabs.sitewise-monitor-migration-mcp-server="
                "awslabs.sitewise_monitor_migration_mcp_server.server:main",
            ],
        },
    )
