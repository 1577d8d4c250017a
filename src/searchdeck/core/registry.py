"""Engine registry — ordered, read-only collection of engine descriptors.

Order is definition order and is preserved through URL building and
report layout ("first 5" / "first 10" bulk actions follow it).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from searchdeck.core.exceptions import RegistryError
from searchdeck.core.models import EngineDescriptor

if TYPE_CHECKING:
    from searchdeck.core.models import Config


DEFAULT_ENGINES: tuple[EngineDescriptor, ...] = (
    EngineDescriptor(name="Google", base_url="https://www.google.com/search", query_param="q"),
    EngineDescriptor(name="Bing", base_url="https://www.bing.com/search", query_param="q"),
    EngineDescriptor(name="DuckDuckGo", base_url="https://duckduckgo.com/", query_param="q"),
    EngineDescriptor(
        name="Google Shopping",
        base_url="https://www.google.com/search",
        query_param="q",
        custom_url="https://www.google.com/search?tbm=shop&q={query}",
        category="shopping",
    ),
    EngineDescriptor(
        name="Google Maps",
        custom_url="https://www.google.com/maps/search/{query}",
        category="maps",
    ),
    EngineDescriptor(
        name="YouTube",
        base_url="https://www.youtube.com/results",
        query_param="search_query",
        category="video",
    ),
    EngineDescriptor(
        name="Wikipedia",
        base_url="https://en.wikipedia.org/w/index.php",
        query_param="search",
        category="reference",
    ),
    EngineDescriptor(
        name="GitHub",
        base_url="https://github.com/search",
        query_param="q",
        category="code",
    ),
    EngineDescriptor(
        name="Stack Overflow",
        base_url="https://stackoverflow.com/search",
        query_param="q",
        category="code",
    ),
    EngineDescriptor(
        name="Reddit",
        base_url="https://www.reddit.com/search/",
        query_param="q",
        category="social",
    ),
    EngineDescriptor(
        name="Amazon",
        base_url="https://www.amazon.com/s",
        query_param="k",
        category="shopping",
    ),
    EngineDescriptor(
        name="Yahoo",
        base_url="https://search.yahoo.com/search",
        query_param="p",
        enabled=False,
    ),
    EngineDescriptor(
        name="Baidu",
        base_url="https://www.baidu.com/s",
        query_param="wd",
        enabled=False,
    ),
)


class EngineRegistry:
    """Immutable, ordered sequence of EngineDescriptor."""

    def __init__(self, engines: Iterable[EngineDescriptor]) -> None:
        self._engines: tuple[EngineDescriptor, ...] = tuple(engines)
        seen: set[str] = set()
        for engine in self._engines:
            if engine.name in seen:
                msg = f"Duplicate engine name in registry: '{engine.name}'"
                raise RegistryError(msg)
            seen.add(engine.name)

    @classmethod
    def default(cls) -> EngineRegistry:
        """Registry holding the built-in engines."""
        return cls(DEFAULT_ENGINES)

    @classmethod
    def from_config(cls, config: Config) -> EngineRegistry:
        """Registry from configured engines, or the built-ins when none are configured."""
        if not config.engines:
            return cls.default()
        return cls(config.engines)

    def __iter__(self) -> Iterator[EngineDescriptor]:
        return iter(self._engines)

    def __len__(self) -> int:
        return len(self._engines)

    def __getitem__(self, index: int) -> EngineDescriptor:
        return self._engines[index]

    def __repr__(self) -> str:
        return f"EngineRegistry({len(self)} engines, {self.enabled_count} enabled)"

    @property
    def enabled_count(self) -> int:
        return sum(1 for engine in self._engines if engine.enabled)

    def names(self) -> list[str]:
        return [engine.name for engine in self._engines]

    def enabled(self) -> list[EngineDescriptor]:
        return [engine for engine in self._engines if engine.enabled]

    def get(self, name: str) -> EngineDescriptor | None:
        """Look up a descriptor by exact name."""
        for engine in self._engines:
            if engine.name == name:
                return engine
        return None
