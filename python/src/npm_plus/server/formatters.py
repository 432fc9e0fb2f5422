"""
Markdown rendering for npm Plus tool results.
"""

from ..packages.models import BundleSize, DownloadStats, DownloadTrends, PackageInfo, SearchResult


def format_size(num_bytes: int) -> str:
    """Human-readable byte size in B, KB or MB."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.2f} KB"
    return f"{num_bytes / (1024 * 1024):.2f} MB"


def format_count(value: int) -> str:
    return f"{value:,}"


def format_search_results(results: list[SearchResult]) -> str:
    if not results:
        return "No packages found."

    entries = []
    for i, r in enumerate(results, start=1):
        entries.append(
            f"{i}. **{r.name}** v{r.version}\n"
            f"   {r.description or '(no description)'}\n"
            f"   Keywords: {', '.join(r.keywords) or '—'}"
        )
    return "\n\n".join(entries)


def format_package_info(info: PackageInfo) -> str:
    dep_list = "\n".join(f"  - {k}: {v}" for k, v in info.dependencies.items())
    dev_dep_list = "\n".join(f"  - {k}: {v}" for k, v in info.dev_dependencies.items())

    lines = [
        f"# {info.name} v{info.version}",
        "",
        info.description,
        "",
        "| Field | Value |",
        "|-------|-------|",
        f"| License | {info.license} |",
        f"| Homepage | {info.homepage or '—'} |",
        f"| Repository | {info.repository or '—'} |",
        f"| Dependencies | {len(info.dependencies)} |",
        f"| Dev dependencies | {len(info.dev_dependencies)} |",
        "",
        f"**Keywords:** {', '.join(info.keywords) or '—'}",
        "",
        f"**Dependencies:**\n{dep_list}" if dep_list else "",
        f"\n**Dev dependencies:**\n{dev_dep_list}" if dev_dep_list else "",
    ]
    return "\n".join(line for line in lines if line)


def format_downloads(stats: DownloadStats) -> str:
    return "\n".join([
        f"# {stats.package} downloads",
        "",
        f"Period: {stats.start} to {stats.end}",
        f"Total: **{format_count(stats.downloads)}** downloads",
    ])


def format_comparison(results: list[DownloadStats], period: str) -> str:
    """Table of download counts, most downloaded first."""
    ranked = sorted(results, key=lambda r: r.downloads, reverse=True)
    rows = [f"| {r.package} | {format_count(r.downloads)} |" for r in ranked]
    first = results[0] if results else None

    return "\n".join([
        f"## Download comparison ({period})",
        "",
        f"Period: {first.start if first else '—'} to {first.end if first else '—'}",
        "",
        "| Package | Downloads |",
        "|---------|-----------|",
        *rows,
    ])


def format_bundle_size(bundle: BundleSize) -> str:
    return "\n".join([
        f"# {bundle.name}@{bundle.version} bundle size",
        "",
        "| Metric | Size |",
        "|--------|------|",
        f"| Minified | {format_size(bundle.size)} |",
        f"| Gzipped | {format_size(bundle.gzip)} |",
        f"| Dependencies | {bundle.dependency_count} |",
    ])


def format_download_trends(trends: DownloadTrends) -> str:
    lines = [
        f"## {trends.package} — {trends.start} to {trends.end}",
        "",
        f"Total: {format_count(trends.total)} | Avg/day: {format_count(trends.average)} | "
        f"Min: {format_count(trends.minimum)} | Max: {format_count(trends.maximum)}",
        "",
    ]
    if trends.sparkline:
        lines += [f"Trend: {trends.sparkline}", ""]
    lines += ["| Day | Downloads |", "|-----|-----------|"]
    lines += [f"| {point.day} | {format_count(point.downloads)} |" for point in trends.recent]
    return "\n".join(lines)
