"""Fetch → filter → project → persist pipeline for palette datasets.

``run`` orchestrates the whole job:

    page 0 → page P → page 2P → … (one request at a time)
        → keep records accepted by the predicate
        → project each to a :class:`Palette`
        → write the concatenated dataset once

Pages stop at the first offset ``>= total``.  Records rejected by the
predicate are not backfilled from extra pages, so a run can return fewer than
``total`` palettes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from gradients.config import settings
from gradients.fetcher.models import PageRequest, Palette, RawRecord
from gradients.fetcher.sink import write_dataset

logger = logging.getLogger(__name__)

Predicate = Callable[[RawRecord], bool]
Projection = Callable[[RawRecord], Palette]
PageFetcher = Callable[[PageRequest], list[RawRecord]]


def color_count_between(low: int, high: int) -> Predicate:
    """Return a predicate keeping records with ``low <= len(colors) <= high``."""
    if low > high:
        raise ValueError(f"empty colour range [{low}, {high}]")

    def _predicate(record: RawRecord) -> bool:
        return low <= len(record.colors) <= high

    return _predicate


def to_palette(record: RawRecord) -> Palette:
    """Drop everything but the colours and their widths."""
    return Palette(colors=tuple(record.colors), color_widths=tuple(record.color_widths))


@dataclass(frozen=True)
class PipelineConfig:
    total: int
    page_size: int
    predicate: Predicate
    projection: Projection = to_palette

    def __post_init__(self) -> None:
        if self.total < 1:
            raise ValueError(f"total must be >= 1, got {self.total}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

    @classmethod
    def build(
        cls,
        total: int | None = None,
        min_colors: int | None = None,
        max_colors: int | None = None,
        projection: Projection = to_palette,
    ) -> PipelineConfig:
        """Resolve a config from explicit overrides, falling back to :data:`settings`.

        The page size is ``min(total, settings.max_page_size)`` so no single
        request asks for more records than the target.
        """
        if total is None:
            total = settings.default_total
        low = settings.min_colors if min_colors is None else min_colors
        high = settings.max_colors if max_colors is None else max_colors
        return cls(
            total=total,
            page_size=min(total, settings.max_page_size),
            predicate=color_count_between(low, high),
            projection=projection,
        )

    def page_offsets(self) -> Iterator[int]:
        """Yield ``0, P, 2P, …`` for every offset below ``total``."""
        offset = 0
        while offset < self.total:
            yield offset
            offset += self.page_size


@dataclass(frozen=True)
class FetchSummary:
    count: int
    path: Path

    def message(self) -> str:
        return f"Saved {self.count} color palettes in {self.path}"


def collect_palettes(config: PipelineConfig, fetch: PageFetcher) -> list[Palette]:
    """Walk every page in offset order and return the filtered, projected dataset.

    Pages are requested strictly one after another.  The first exception
    raised by *fetch* propagates and no further page is requested.
    """
    dataset: list[Palette] = []
    for offset in config.page_offsets():
        records = fetch(PageRequest(offset=offset, page_size=config.page_size))
        kept = [config.projection(r) for r in records if config.predicate(r)]
        logger.info(
            "Page at offset %d: %d records, %d kept", offset, len(records), len(kept)
        )
        dataset.extend(kept)
    return dataset


def run(config: PipelineConfig, fetch: PageFetcher, output: Path) -> FetchSummary:
    """Collect the dataset and write it to *output*.

    Nothing is written unless every page was fetched successfully.

    Returns:
        A :class:`FetchSummary` with the number of palettes and the destination.
    """
    palettes = collect_palettes(config, fetch)
    path = write_dataset(palettes, output)
    logger.info("Wrote %d palettes to %s", len(palettes), path)
    return FetchSummary(count=len(palettes), path=path)
