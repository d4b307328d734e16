"""Fetcher package — paginated palette download, filtering and persistence."""

from gradients.fetcher.client import MalformedPageError, fetch_page
from gradients.fetcher.models import PageRequest, Palette, RawRecord
from gradients.fetcher.pipeline import (
    FetchSummary,
    PipelineConfig,
    collect_palettes,
    color_count_between,
    run,
    to_palette,
)
from gradients.fetcher.sink import read_dataset, write_dataset

__all__ = [
    "fetch_page",
    "MalformedPageError",
    "PageRequest",
    "Palette",
    "RawRecord",
    "FetchSummary",
    "PipelineConfig",
    "collect_palettes",
    "color_count_between",
    "run",
    "to_palette",
    "read_dataset",
    "write_dataset",
]
