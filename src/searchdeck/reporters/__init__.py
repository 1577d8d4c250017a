"""Reporter plugin registry."""

from searchdeck.reporters.html import HTMLReporter
from searchdeck.reporters.markdown import MarkdownReporter

REPORTER_REGISTRY: dict[str, type] = {
    "html": HTMLReporter,
    "markdown": MarkdownReporter,
}

__all__ = ["REPORTER_REGISTRY", "HTMLReporter", "MarkdownReporter"]
