"""
npm Package Models

This module defines the records produced from registry, download-count and
bundle-size responses. Every record is built fresh from one upstream response.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class SearchResult:
    """A single hit from the registry search endpoint."""
    name: str
    version: str = ""
    description: str = ""
    keywords: tuple[str, ...] = ()
    downloads: int = 0  # search endpoint never reports downloads


@dataclass(frozen=True)
class PackageInfo:
    """Metadata for the version a package's "latest" dist-tag points at.

    Dependency mappings are read-only views and are left out of the hash.
    """
    name: str
    version: str = ""
    description: str = ""
    license: str = "Unknown"
    homepage: str = ""
    repository: str = ""
    keywords: tuple[str, ...] = ()
    dependencies: Mapping[str, str] = field(default_factory=dict, hash=False)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "dependencies", MappingProxyType(dict(self.dependencies)))
        object.__setattr__(self, "dev_dependencies", MappingProxyType(dict(self.dev_dependencies)))


@dataclass(frozen=True)
class DownloadStats:
    """Download count for one package over a period."""
    package: str
    downloads: int = 0
    start: str = ""
    end: str = ""


@dataclass(frozen=True)
class BundleSize:
    """Minified and gzipped size of a package."""
    name: str
    version: str = "latest"
    size: int = 0
    gzip: int = 0
    dependency_count: int = 0


@dataclass(frozen=True)
class DailyDownloads:
    """Downloads on a single day."""
    day: str
    downloads: int = 0


@dataclass(frozen=True)
class DownloadTrends:
    """Aggregates over a daily download series."""
    package: str
    start: str = ""
    end: str = ""
    total: int = 0
    average: int = 0
    minimum: int = 0
    maximum: int = 0
    sparkline: str = ""
    recent: tuple[DailyDownloads, ...] = ()
