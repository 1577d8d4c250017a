"""searchdeck — multi-engine search launcher."""

__version__ = "0.1.0"
