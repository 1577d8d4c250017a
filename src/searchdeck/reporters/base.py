"""BaseReporter ABC — report generation interface.

HTMLReporter, MarkdownReporter implement ``render``; ``generate`` handles
filtering, naming and the atomic write shared by every format.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from datetime import datetime  # noqa: TC003
from pathlib import Path
from typing import TYPE_CHECKING

from searchdeck.core.exceptions import ReporterError
from searchdeck.core.models import SearchOptions

if TYPE_CHECKING:
    from searchdeck.core.models import ReportStats, SearchResult

logger = logging.getLogger(__name__)

REPORT_FILENAME_PREFIX = "search_results"


def report_filename(generated_at: datetime, suffix: str, sequence: int = 0) -> str:
    """Report file name for a generation timestamp.

    ``sequence`` > 0 disambiguates reports generated within the same second.
    """
    stamp = f"{generated_at:%Y%m%d_%H%M%S}"
    if sequence:
        stamp = f"{stamp}_{sequence}"
    return f"{REPORT_FILENAME_PREFIX}_{stamp}.{suffix}"


def next_report_path(output_dir: Path, generated_at: datetime, suffix: str) -> Path:
    """First report path in output_dir not already taken."""
    sequence = 0
    while True:
        candidate = output_dir / report_filename(generated_at, suffix, sequence)
        if not candidate.exists():
            return candidate
        sequence += 1


class BaseReporter(ABC):
    """Report generation abstract interface."""

    def __init__(self, options: SearchOptions | None = None) -> None:
        self._options = options or SearchOptions()

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Report format name: 'html', 'markdown'."""
        ...

    @property
    @abstractmethod
    def file_suffix(self) -> str:
        """File extension without the dot."""
        ...

    @abstractmethod
    def render(
        self,
        results: list[SearchResult],
        query: str,
        stats: ReportStats,
    ) -> str:
        """Render the report document as text.

        Args:
            results: Results to show, in registry order.
            query: The search terms the URLs were built from.
            stats: Aggregate counts over the whole registry.
        """
        ...

    def generate(
        self,
        results: list[SearchResult],
        query: str,
        stats: ReportStats,
        output_dir: Path,
    ) -> Path:
        """Render and write one report file into output_dir.

        The file appears only once fully written; on failure no report
        file is left behind.

        Returns:
            Path to the written report.

        Raises:
            ReporterError: If rendering or writing fails.
        """
        visible = self.visible_results(results)
        try:
            content = self.render(visible, query, stats)
            output_dir.mkdir(parents=True, exist_ok=True)
            report_path = next_report_path(output_dir, stats.generated_at, self.file_suffix)
            _atomic_write(report_path, content)
        except Exception as exc:
            if isinstance(exc, ReporterError):
                raise
            msg = f"Report generation failed: {exc}"
            raise ReporterError(msg) from exc

        logger.debug("Wrote %s report: %s", self.format_name, report_path)
        return report_path

    def visible_results(self, results: list[SearchResult]) -> list[SearchResult]:
        """Apply include_disabled_engines; order is kept."""
        if self._options.include_disabled_engines:
            return list(results)
        hidden = [r.name for r in results if not r.enabled]
        if hidden:
            logger.debug("Omitting disabled engines from report: %s", ", ".join(hidden))
        return [r for r in results if r.enabled]


def _atomic_write(path: Path, content: str) -> None:
    """Write content to a temp file beside path, then rename over it."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise
