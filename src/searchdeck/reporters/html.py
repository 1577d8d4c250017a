"""HTMLReporter — self-contained HTML report with quick-launch buttons."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, TemplateError

from searchdeck import __version__
from searchdeck.core.exceptions import ReporterError
from searchdeck.reporters.base import BaseReporter

if TYPE_CHECKING:
    from searchdeck.core.models import ReportStats, SearchOptions, SearchResult

TEMPLATE_NAME = "report.html"

# (label, count); None opens every enabled result
BULK_ACTIONS: tuple[tuple[str, int | None], ...] = (
    ("Open first 5", 5),
    ("Open first 10", 10),
    ("Open all", None),
)


class HTMLReporter(BaseReporter):
    """Render results into one styled HTML page."""

    def __init__(self, options: SearchOptions | None = None) -> None:
        super().__init__(options)
        self.env = Environment(
            loader=PackageLoader("searchdeck.reporters", "templates"),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @property
    def format_name(self) -> str:
        return "html"

    @property
    def file_suffix(self) -> str:
        return "html"

    def render(
        self,
        results: list[SearchResult],
        query: str,
        stats: ReportStats,
    ) -> str:
        enabled_urls = [r.url for r in results if r.enabled]
        try:
            template = self.env.get_template(TEMPLATE_NAME)
            return template.render(
                query=query,
                results=results,
                stats=stats,
                generated=stats.generated_at.strftime("%Y-%m-%d %H:%M:%S"),
                enabled_urls=enabled_urls,
                bulk_actions=BULK_ACTIONS,
                stagger_ms=self._options.stagger_ms,
                version=__version__,
            )
        except TemplateError as e:
            msg = f"HTML template rendering failed: {e}"
            raise ReporterError(msg) from e
