"""
npm Package Research Module

Normalizes npm registry, download-count and Bundlephobia responses into
package records, and derives download trends.

Components:
- npm_client: upstream operations
- http_client: JSON fetch adapter
- trends: aggregates, sparkline and dependency listing
- models: package records
- errors: upstream error types
"""

from .errors import UpstreamError, VulnerabilityCheckError
from .models import BundleSize, DailyDownloads, DownloadStats, DownloadTrends, PackageInfo, SearchResult
from .npm_client import DEFAULT_PERIOD, KNOWN_PERIODS, NPMClient, get_npm_client

__all__ = [
    "BundleSize",
    "DailyDownloads",
    "DEFAULT_PERIOD",
    "DownloadStats",
    "DownloadTrends",
    "KNOWN_PERIODS",
    "NPMClient",
    "PackageInfo",
    "SearchResult",
    "UpstreamError",
    "VulnerabilityCheckError",
    "get_npm_client"
]
