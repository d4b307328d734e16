"""Data models for the palette fetch pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PageRequest:
    """One page fetch: *page_size* records starting at *offset*."""

    offset: int
    page_size: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

    def params(self) -> dict[str, Any]:
        """Query-string parameters understood by the palettes API."""
        return {
            "format": "json",
            "showPaletteWidths": 1,
            "numResults": self.page_size,
            "resultOffset": self.offset,
        }


@dataclass
class RawRecord:
    """A palette as returned by the remote API, before projection."""

    colors: list[str]
    color_widths: list[float]
    id: int | None = None
    title: str = ""
    url: str = ""


@dataclass(frozen=True)
class Palette:
    """The retained shape: ordered colours and their proportional widths."""

    colors: tuple[str, ...]
    color_widths: tuple[float, ...] = field(default_factory=tuple)

    def to_json(self) -> dict[str, Any]:
        """Serialise to the ``{colors, colorWidths}`` shape consumed by the UI."""
        return {"colors": list(self.colors), "colorWidths": list(self.color_widths)}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Palette:
        return cls(
            colors=tuple(data["colors"]),
            color_widths=tuple(float(w) for w in data["colorWidths"]),
        )
