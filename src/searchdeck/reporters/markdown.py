"""MarkdownReporter — Markdown table report."""

from __future__ import annotations

from typing import TYPE_CHECKING

from searchdeck.reporters.base import BaseReporter

if TYPE_CHECKING:
    from searchdeck.core.models import ReportStats, SearchResult


class MarkdownReporter(BaseReporter):
    """Generate a Markdown report of built URLs."""

    @property
    def format_name(self) -> str:
        """Report format name."""
        return "markdown"

    @property
    def file_suffix(self) -> str:
        return "md"

    def render(
        self,
        results: list[SearchResult],
        query: str,
        stats: ReportStats,
    ) -> str:
        """Render results as a Markdown document."""
        timestamp = stats.generated_at.strftime("%Y-%m-%d %H:%M:%S")

        lines = [
            f"# Search Results: {_escape_cell(query)}",
            "",
            f"**Generated:** {timestamp}",
            "",
            "## Summary",
            "",
            "| Metric | Value |",
            "|--------|-------|",
            f"| Enabled Engines | {stats.enabled_engines} |",
            f"| Total Engines | {stats.total_engines} |",
            "",
            "## Engines",
            "",
            "| # | Engine | Category | Status | URL |",
            "|---|--------|----------|--------|-----|",
        ]

        for index, result in enumerate(results, start=1):
            status = "enabled" if result.enabled else "disabled"
            lines.append(
                f"| {index} | {_escape_cell(result.name)} | {_escape_cell(result.category)} "
                f"| {status} | <{result.url}> |"
            )

        lines.append("")
        return "\n".join(lines)


def _escape_cell(text: str) -> str:
    """Escape table pipes in free text."""
    return text.replace("|", "\\|")
