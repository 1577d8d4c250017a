"""Tests for core data models."""

import pytest
from pydantic import ValidationError

from searchdeck import __version__
from searchdeck.core.models import (
    BuildFailure,
    BuildOutcome,
    Config,
    EngineDescriptor,
    EngineKind,
    ReportFormat,
    ReportStats,
    SearchOptions,
    SearchResult,
)


def test_version() -> None:
    assert __version__ == "0.1.0"


# ── Enum Tests ──


class TestEnums:
    def test_engine_kind(self) -> None:
        assert EngineKind.PARAMETER == "parameter"
        assert EngineKind.TEMPLATE == "template"

    def test_report_format(self) -> None:
        assert ReportFormat("markdown") is ReportFormat.MARKDOWN
        with pytest.raises(ValueError):
            ReportFormat("pdf")


# ── EngineDescriptor ──


class TestEngineDescriptor:
    def test_parameter_engine(self) -> None:
        engine = EngineDescriptor(name="Google", base_url="https://www.google.com/search", query_param="q")
        assert engine.kind is EngineKind.PARAMETER
        assert engine.enabled is True
        assert engine.category == "web"

    def test_template_engine_needs_no_base_url(self) -> None:
        engine = EngineDescriptor(name="Maps", custom_url="https://maps.example/{query}")
        assert engine.kind is EngineKind.TEMPLATE
        assert engine.base_url == ""

    def test_template_wins_when_both_set(self) -> None:
        engine = EngineDescriptor(
            name="Shop",
            base_url="https://www.google.com/search",
            query_param="q",
            custom_url="https://www.google.com/search?tbm=shop&q={query}",
        )
        assert engine.kind is EngineKind.TEMPLATE

    def test_missing_param_and_template(self) -> None:
        with pytest.raises(ValidationError, match="Engine 'Broken' requires query_param or custom_url"):
            EngineDescriptor(name="Broken", base_url="https://b.example/")

    def test_param_without_base_url(self) -> None:
        with pytest.raises(ValidationError, match="requires base_url"):
            EngineDescriptor(name="NoBase", query_param="q")

    def test_empty_name(self) -> None:
        with pytest.raises(ValidationError):
            EngineDescriptor(name="", custom_url="https://x.example/{query}")

    def test_frozen(self) -> None:
        engine = EngineDescriptor(name="X", custom_url="https://x.example/{query}")
        with pytest.raises(ValidationError):
            engine.enabled = False  # type: ignore[misc]


# ── Options / Results ──


class TestSearchOptions:
    def test_stagger_bounds(self) -> None:
        assert SearchOptions(stagger_ms=0).stagger_ms == 0
        with pytest.raises(ValidationError):
            SearchOptions(stagger_ms=6000)


class TestResults:
    def test_search_result_fields(self) -> None:
        result = SearchResult(name="Bing", url="https://www.bing.com/search?q=a", enabled=False)
        assert result.enabled is False
        assert result.category == "web"

    def test_outcome_ok(self) -> None:
        assert BuildOutcome().ok is True
        outcome = BuildOutcome(failures=[BuildFailure(name="X", error="boom")])
        assert outcome.ok is False

    def test_report_stats_non_negative(self) -> None:
        with pytest.raises(ValidationError):
            ReportStats(total_engines=-1, enabled_engines=0)

    def test_outcome_visible(self) -> None:
        outcome = BuildOutcome(
            results=[
                SearchResult(name="A", url="u1", enabled=True),
                SearchResult(name="B", url="u2", enabled=False),
                SearchResult(name="C", url="u3", enabled=True),
            ]
        )
        assert [r.name for r in outcome.visible()] == ["A", "B", "C"]
        assert [r.name for r in outcome.visible(include_disabled=False)] == ["A", "C"]


class TestConfigModel:
    def test_duplicate_engine_names(self) -> None:
        engine = EngineDescriptor(name="Same", custom_url="https://s.example/{query}")
        with pytest.raises(ValidationError, match="Duplicate engine name"):
            Config(engines=[engine, engine])
