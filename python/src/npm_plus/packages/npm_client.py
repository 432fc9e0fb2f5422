"""
NPM Client for Package Research

This module provides the npm registry, download-count and Bundlephobia
operations, normalizing loosely typed upstream JSON into package records.
"""

import asyncio
import logging
import re
import urllib.parse
from typing import Any

import httpx

from ..config import NPMPlusConfig, get_config
from .errors import UpstreamError, VulnerabilityCheckError
from .http_client import fetch_json
from .models import BundleSize, DailyDownloads, DownloadStats, DownloadTrends, PackageInfo, SearchResult
from .trends import render_dependency_tree, summarize_series

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = "last-month"

# Documented period tokens; anything else is forwarded and left to upstream
KNOWN_PERIODS = ("last-day", "last-week", "last-month", "last-year")


class NPMClient:
    """Client for npm registry, download-count and bundle-size operations."""

    def __init__(self, config: NPMPlusConfig | None = None, transport: httpx.AsyncBaseTransport | None = None):
        config = config or get_config()
        self.registry_url = config.registry_url
        self.search_url = f"{config.registry_url}/-/v1/search"
        self.downloads_url = f"{config.downloads_api_url}/downloads"
        self.bundlephobia_url = config.bundlephobia_url
        self.advisory_url = config.advisory_url
        self.timeout = config.timeout
        self.transport = transport

    async def _get(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        data = await fetch_json(url, params=params, timeout=self.timeout, transport=self.transport)
        return data if isinstance(data, dict) else {}

    async def search_packages(self, query: str, size: int = 10) -> list[SearchResult]:
        """Search the registry, keeping upstream ranking order."""
        data = await self._get(self.search_url, params={"text": query, "size": size})

        results = []
        for item in data.get("objects") or []:
            package_data = item.get("package") or {}
            results.append(SearchResult(
                name=package_data.get("name") or "",
                version=package_data.get("version") or "",
                description=package_data.get("description") or "",
                keywords=self._extract_keywords(package_data.get("keywords")),
                downloads=0,
            ))

        return results

    async def get_package_info(self, package_name: str) -> PackageInfo:
        """Get metadata and direct dependencies for the latest version."""
        data = await self._get(f"{self.registry_url}/{_encode(package_name)}")

        latest_version = (data.get("dist-tags") or {}).get("latest") or ""
        version_data = (data.get("versions") or {}).get(latest_version) or {}

        return PackageInfo(
            name=data.get("name") or package_name,
            version=latest_version,
            description=data.get("description") or "",
            license=self._extract_license(data.get("license")),
            homepage=data.get("homepage") or "",
            repository=self._extract_repository(data.get("repository")),
            keywords=self._extract_keywords(data.get("keywords")),
            dependencies=self._extract_dependencies(version_data.get("dependencies")),
            dev_dependencies=self._extract_dependencies(version_data.get("devDependencies")),
        )

    async def get_downloads(self, package_name: str, period: str = DEFAULT_PERIOD) -> DownloadStats:
        """Get the total download count over a period."""
        data = await self._get(f"{self.downloads_url}/point/{period}/{_encode(package_name)}")

        return DownloadStats(
            package=data.get("package") or package_name,
            downloads=_as_count(data.get("downloads")),
            start=data.get("start") or "",
            end=data.get("end") or "",
        )

    async def compare_downloads(self, packages: list[str], period: str = DEFAULT_PERIOD) -> list[DownloadStats]:
        """Fetch download counts for several packages concurrently.

        Results follow input order. Any single failure fails the whole comparison.
        """
        logger.info(f"Comparing downloads for {len(packages)} packages ({period})")
        results = await asyncio.gather(*(self.get_downloads(pkg, period) for pkg in packages))
        return list(results)

    async def get_download_trends(self, package_name: str, period: str = DEFAULT_PERIOD) -> DownloadTrends:
        """Get daily downloads over a period with derived aggregates."""
        data = await self._get(f"{self.downloads_url}/range/{period}/{_encode(package_name)}")

        series = [
            DailyDownloads(day=entry.get("day") or "", downloads=_as_count(entry.get("downloads")))
            for entry in data.get("downloads") or []
            if isinstance(entry, dict)
        ]

        return summarize_series(
            data.get("package") or package_name,
            series,
            start=data.get("start") or "",
            end=data.get("end") or "",
        )

    async def get_bundle_size(self, package_name: str) -> BundleSize:
        """Get minified and gzipped size from Bundlephobia."""
        package_spec = package_name if "@" in package_name else f"{package_name}@latest"
        data = await self._get(self.bundlephobia_url, params={"package": package_spec})

        return BundleSize(
            name=data.get("name") or package_name.split("@")[0],
            version=data.get("version") or "latest",
            size=_as_count(data.get("size")),
            gzip=_as_count(data.get("gzip")),
            dependency_count=_as_count(data.get("dependencyCount")),
        )

    async def get_vulnerabilities(self, package_name: str) -> str:
        """Point at advisory search for a package that exists in the registry.

        There is no public unauthenticated advisory lookup, so the package is
        only checked for existence.
        """
        try:
            info = await self.get_package_info(package_name)
        except UpstreamError as e:
            raise VulnerabilityCheckError.wrap(e) from e

        advisory_url = f"{self.advisory_url}?query={_encode(info.name)}"
        return (
            f'Vulnerability data for "{package_name}" requires `npm audit` in a project that uses it.\n\n'
            f"Public APIs: Run `npm audit` in your project, or check advisories at:\n{advisory_url}\n\n"
            "For automated scanning, consider Snyk or Dependabot."
        )

    async def get_dependency_tree(self, package_name: str) -> str:
        """Render the direct dependencies of the latest version."""
        info = await self.get_package_info(package_name)
        return render_dependency_tree(info)

    def _extract_keywords(self, keywords: Any) -> tuple[str, ...]:
        """Extract keywords from a list, or a single keyword string."""
        if isinstance(keywords, str):
            return (keywords,) if keywords else ()
        if isinstance(keywords, list):
            return tuple(str(k) for k in keywords if k is not None)
        return ()

    def _extract_license(self, license_data: Any) -> str:
        """Extract a license name from string or legacy {"type": ...} formats."""
        if isinstance(license_data, dict):
            license_data = license_data.get("type")
        if isinstance(license_data, str) and license_data:
            return license_data
        return "Unknown"

    def _extract_repository(self, repo_data: Any) -> str:
        """Extract repository URL from various repository data formats."""
        if isinstance(repo_data, dict):
            repo_data = repo_data.get("url")
        if not isinstance(repo_data, str):
            return ""
        return normalize_repository_url(repo_data)

    def _extract_dependencies(self, deps: Any) -> dict[str, str]:
        if not isinstance(deps, dict):
            return {}
        return {str(name): str(version) for name, version in deps.items()}


def normalize_repository_url(url: str) -> str:
    """Strip a leading git+ and a trailing .git."""
    url = re.sub(r"^git\+", "", url)
    return re.sub(r"\.git$", "", url)


def _encode(value: str) -> str:
    # Scoped names keep their "/" inside a single path segment
    return urllib.parse.quote(value, safe="")


def _as_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return max(0, int(value))


# Global client instance
_npm_client: NPMClient | None = None


def get_npm_client() -> NPMClient:
    """Get the global npm client instance."""
    global _npm_client
    if _npm_client is None:
        _npm_client = NPMClient()
    return _npm_client
