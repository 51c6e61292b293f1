"""
Options shared by every decoder during a single load.
"""

from __future__ import annotations

from dataclasses import dataclass

from arazzo_models.config import ArazzoSettings, config


@dataclass(frozen=True)
class LoaderContext:
    strict_list_entries: bool = False

    @classmethod
    def from_settings(cls, settings: ArazzoSettings | None = None) -> "LoaderContext":
        settings = settings or config
        return cls(strict_list_entries=settings.strict_list_entries)
