from npm_plus.packages.models import (
    BundleSize,
    DailyDownloads,
    DownloadStats,
    DownloadTrends,
    PackageInfo,
    SearchResult,
)
from npm_plus.server.formatters import (
    format_bundle_size,
    format_comparison,
    format_download_trends,
    format_package_info,
    format_search_results,
    format_size,
)


def test_format_size_units():
    assert format_size(512) == "512 B"
    assert format_size(2048) == "2.00 KB"
    assert format_size(3 * 1024 * 1024) == "3.00 MB"


def test_search_results_numbered():
    text = format_search_results([
        SearchResult(name="lodash", version="4.17.21", description="Utilities", keywords=("util",)),
        SearchResult(name="bare", version="1.0.0"),
    ])
    assert text.startswith("1. **lodash** v4.17.21\n   Utilities\n   Keywords: util")
    assert "2. **bare** v1.0.0\n   (no description)\n   Keywords: —" in text


def test_search_results_empty():
    assert format_search_results([]) == "No packages found."


def test_package_info_table():
    text = format_package_info(PackageInfo(
        name="express", version="4.18.0", description="Fast", license="MIT",
        dependencies={"debug": "2.6.9"},
    ))
    assert text.startswith("# express v4.18.0")
    assert "| License | MIT |" in text
    assert "| Homepage | — |" in text
    assert "| Dependencies | 1 |" in text
    assert "**Dependencies:**\n  - debug: 2.6.9" in text
    assert "Dev dependencies:**" not in text


def test_comparison_sorted_by_downloads():
    text = format_comparison([
        DownloadStats("vue", 1000, "2025-01-01", "2025-01-31"),
        DownloadStats("react", 25000000, "2025-01-01", "2025-01-31"),
    ], "last-month")
    assert "## Download comparison (last-month)" in text
    assert "Period: 2025-01-01 to 2025-01-31" in text
    assert text.index("| react | 25,000,000 |") < text.index("| vue | 1,000 |")


def test_bundle_size_table():
    text = format_bundle_size(BundleSize("lodash", "4.17.21", 71000, 25000, 0))
    assert text.startswith("# lodash@4.17.21 bundle size")
    assert "| Minified | 69.34 KB |" in text
    assert "| Dependencies | 0 |" in text


def test_download_trends_with_sparkline():
    trends = DownloadTrends(
        package="lodash", start="2025-01-01", end="2025-01-02",
        total=3000, average=1500, minimum=1000, maximum=2000, sparkline="▄█",
        recent=(DailyDownloads("2025-01-01", 1000), DailyDownloads("2025-01-02", 2000)),
    )
    text = format_download_trends(trends)
    assert text.splitlines()[0] == "## lodash — 2025-01-01 to 2025-01-02"
    assert "Total: 3,000 | Avg/day: 1,500 | Min: 1,000 | Max: 2,000" in text
    assert "Trend: ▄█" in text
    assert text.endswith("| 2025-01-02 | 2,000 |")


def test_download_trends_without_sparkline():
    text = format_download_trends(DownloadTrends(package="new"))
    assert "Trend:" not in text
    assert text.endswith("| Day | Downloads |\n|-----|-----------|")
