"""searchdeck custom exception hierarchy.

All exceptions inherit from SearchDeckError.
BuildError carries the engine name so one failure can be isolated per engine.
"""


class SearchDeckError(Exception):
    """Base exception for all searchdeck errors."""


class ConfigError(SearchDeckError):
    """Configuration file load/validation error."""


class RegistryError(ConfigError):
    """Engine registry defect (duplicate names, etc.)."""


class QueryError(SearchDeckError):
    """No usable search terms could be obtained."""


class BuildError(SearchDeckError):
    """URL build error for a single engine. Recorded, does not abort the run."""

    def __init__(self, message: str, engine: str) -> None:
        self.engine = engine
        super().__init__(f"Engine '{engine}': {message}")


class ReporterError(SearchDeckError):
    """Report generation error."""
