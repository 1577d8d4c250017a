"""searchdeck data models — Pydantic v2.

This module is a leaf: no internal project imports.
All Enum and Model definitions live here.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

QUERY_PLACEHOLDER = "{query}"

# ============================================================
# Enums
# ============================================================


class EngineKind(StrEnum):
    """How an engine's URL is constructed."""

    PARAMETER = "parameter"
    TEMPLATE = "template"


class ReportFormat(StrEnum):
    """Report output format."""

    HTML = "html"
    MARKDOWN = "markdown"


# ============================================================
# Engine Models
# ============================================================


class EngineDescriptor(BaseModel):
    """Static description of one search engine.

    Either ``query_param`` (appended to ``base_url``) or ``custom_url``
    (a template holding the literal ``{query}`` token) is required.
    When both are present the template wins.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Display label")
    base_url: str = Field(default="", description="Absolute URL for the parameter path")
    query_param: str | None = Field(default=None, description="Query-string key")
    custom_url: str | None = Field(default=None, description="URL template with {query}")
    enabled: bool = Field(default=True)
    category: str = Field(default="web")

    @model_validator(mode="after")
    def validate_url_source(self) -> EngineDescriptor:
        if self.custom_url:
            return self
        if not self.query_param:
            msg = f"Engine '{self.name}' requires query_param or custom_url"
            raise ValueError(msg)
        if not self.base_url:
            msg = f"Engine '{self.name}' requires base_url when custom_url is not set"
            raise ValueError(msg)
        return self

    @property
    def kind(self) -> EngineKind:
        return EngineKind.TEMPLATE if self.custom_url else EngineKind.PARAMETER


# ============================================================
# Config Models
# ============================================================


class SearchOptions(BaseModel):
    """Run options."""

    output_directory: str = Field(default="search_results")
    open_in_browser: bool = Field(default=True)
    prompt_for_search_terms: bool = Field(default=True)
    default_search_terms: str = Field(default="")
    verbose_output: bool = Field(default=True)
    include_disabled_engines: bool = Field(default=True)
    report_format: ReportFormat = Field(default=ReportFormat.HTML)
    stagger_ms: int = Field(default=300, ge=0, le=5000, description="Delay between bulk opens")


class Config(BaseSettings):
    """Project configuration. Merged from YAML + env var + CLI flag."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCHDECK_",
        env_nested_delimiter="__",
    )

    engines: list[EngineDescriptor] = Field(
        default_factory=list,
        description="Engine registry; empty means the built-in defaults",
    )
    options: SearchOptions = Field(default_factory=SearchOptions)

    @field_validator("engines")
    @classmethod
    def unique_engine_names(cls, engines: list[EngineDescriptor]) -> list[EngineDescriptor]:
        seen: set[str] = set()
        for engine in engines:
            if engine.name in seen:
                msg = f"Duplicate engine name in registry: '{engine.name}'"
                raise ValueError(msg)
            seen.add(engine.name)
        return engines


# ============================================================
# Result Models
# ============================================================


class SearchResult(BaseModel):
    """One built URL, in registry order."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    enabled: bool
    category: str = Field(default="web")


class BuildFailure(BaseModel):
    """An engine whose URL could not be built."""

    name: str
    error: str


class BuildOutcome(BaseModel):
    """Results of applying the URL builder across a registry."""

    results: list[SearchResult] = Field(default_factory=list)
    failures: list[BuildFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def visible(self, include_disabled: bool = True) -> list[SearchResult]:
        """Results to display; disabled engines dropped unless include_disabled."""
        if include_disabled:
            return list(self.results)
        return [r for r in self.results if r.enabled]


class ReportStats(BaseModel):
    """Aggregate counts shown in the report header."""

    total_engines: int = Field(ge=0)
    enabled_engines: int = Field(ge=0)
    generated_at: datetime = Field(default_factory=datetime.now)
