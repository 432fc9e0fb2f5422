"""
npm Plus MCP Server

Registers the package research tools with FastMCP and serves them over stdio.
Each tool calls one client operation and renders its result as markdown.
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from ..config import configure_logging, get_config, mcp_logger
from ..packages import DEFAULT_PERIOD, KNOWN_PERIODS, UpstreamError, get_npm_client
from .formatters import (
    format_bundle_size,
    format_comparison,
    format_download_trends,
    format_downloads,
    format_package_info,
    format_search_results,
)

PERIOD_DESCRIPTION = f"Period: {', '.join(KNOWN_PERIODS)}"

PackageName = Annotated[str, Field(description="Package name (e.g. 'express')")]
Period = Annotated[str, Field(description=PERIOD_DESCRIPTION)]

mcp = FastMCP(get_config().server_name)


def _tool_error(tool: str, error: UpstreamError) -> ToolError:
    mcp_logger.error("tool_failed", tool=tool, status_code=error.status_code, error=str(error))
    return ToolError(str(error))


@mcp.tool()
async def search(
    query: Annotated[str, Field(description="Search query (e.g. 'react state management')")],
    size: Annotated[int, Field(ge=1, le=50, description="Number of results (default 10)")] = 10,
) -> str:
    """Search npm packages by query. Returns name, version, description, and keywords."""
    try:
        results = await get_npm_client().search_packages(query, size)
    except UpstreamError as e:
        raise _tool_error("search", e) from e
    return format_search_results(results)


@mcp.tool()
async def package_info(name: PackageName) -> str:
    """Get detailed info about an npm package: description, license, repo, dependencies."""
    try:
        info = await get_npm_client().get_package_info(name)
    except UpstreamError as e:
        raise _tool_error("package_info", e) from e
    return format_package_info(info)


@mcp.tool()
async def downloads(name: PackageName, period: Period = DEFAULT_PERIOD) -> str:
    """Get download statistics for an npm package."""
    try:
        stats = await get_npm_client().get_downloads(name, period)
    except UpstreamError as e:
        raise _tool_error("downloads", e) from e
    return format_downloads(stats)


@mcp.tool()
async def compare_downloads(
    packages: Annotated[list[str], Field(min_length=2, max_length=10, description="Package names to compare")],
    period: Period = DEFAULT_PERIOD,
) -> str:
    """Compare download counts across multiple packages."""
    try:
        results = await get_npm_client().compare_downloads(packages, period)
    except UpstreamError as e:
        raise _tool_error("compare_downloads", e) from e
    return format_comparison(results, period)


@mcp.tool()
async def bundle_size(
    name: Annotated[str, Field(description="Package name (e.g. 'lodash' or 'lodash@4.17.21')")],
) -> str:
    """Get bundle size (minified + gzip) for an npm package via Bundlephobia."""
    try:
        bundle = await get_npm_client().get_bundle_size(name)
    except UpstreamError as e:
        raise _tool_error("bundle_size", e) from e
    return format_bundle_size(bundle)


@mcp.tool()
async def vulnerabilities(name: PackageName) -> str:
    """Get vulnerability info for an npm package. Note: Full audit requires npm audit in project context."""
    try:
        return await get_npm_client().get_vulnerabilities(name)
    except UpstreamError as e:
        raise _tool_error("vulnerabilities", e) from e


@mcp.tool()
async def dependency_tree(name: PackageName) -> str:
    """Get dependency tree for an npm package (direct deps only)."""
    try:
        return await get_npm_client().get_dependency_tree(name)
    except UpstreamError as e:
        raise _tool_error("dependency_tree", e) from e


@mcp.tool()
async def download_trends(name: PackageName, period: Period = DEFAULT_PERIOD) -> str:
    """Get download trends (daily breakdown + sparkline) for an npm package."""
    try:
        trends = await get_npm_client().get_download_trends(name, period)
    except UpstreamError as e:
        raise _tool_error("download_trends", e) from e
    return format_download_trends(trends)


def main():
    """Run the server over stdio."""
    config = get_config()
    configure_logging(config.log_level)
    mcp_logger.info("server_starting", name=config.server_name, registry=config.registry_url)
    mcp.run()


if __name__ == "__main__":
    main()
