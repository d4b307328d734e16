"""Centralised settings for the palette fetcher.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_ROOT = Path(__file__).resolve().parent.parent

# Load .env from the project root (one level up from this package)
load_dotenv(_ROOT / ".env", override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Remote palette API
    # ------------------------------------------------------------------
    api_url: str = field(
        default_factory=lambda: os.environ.get(
            "PALETTES_API_URL", "http://www.colourlovers.com/api/palettes/top"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------
    default_total: int = field(
        default_factory=lambda: int(os.environ.get("PALETTES_TOTAL", "1000"))
    )
    max_page_size: int = field(
        default_factory=lambda: int(os.environ.get("PALETTES_MAX_PAGE_SIZE", "100"))
    )

    # ------------------------------------------------------------------
    # Selection (inclusive colour-count range)
    # ------------------------------------------------------------------
    min_colors: int = field(
        default_factory=lambda: int(os.environ.get("PALETTES_MIN_COLORS", "2"))
    )
    max_colors: int = field(
        default_factory=lambda: int(os.environ.get("PALETTES_MAX_COLORS", "5"))
    )

    # ------------------------------------------------------------------
    # Output / logging
    # ------------------------------------------------------------------
    output_path: Path = field(
        default_factory=lambda: Path(
            os.environ.get("PALETTES_OUTPUT", _ROOT / "public" / "palettes.json")
        )
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "WARNING")
    )


# Module-level singleton — import this everywhere:
#   from gradients.config import settings
settings = Settings()
