"""Persist and reload the palette dataset."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Iterable

from gradients.fetcher.models import Palette


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_dataset(palettes: Iterable[Palette], path: Path) -> Path:
    """Write *palettes* to *path* as a single JSON array.

    The document goes to a temporary file next to *path* first and is then
    renamed over it, so readers only ever see a complete file.

    Returns:
        The destination path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    document = json.dumps([p.to_json() for p in palettes], separators=(",", ":"))

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(document)
            fh.flush()
            os.fsync(fh.fileno())
        # mkstemp creates 0600; published files get the usual umask-derived mode.
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return path


def read_dataset(path: Path) -> list[Palette]:
    """Load a dataset previously written by :func:`write_dataset`."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return [Palette.from_json(item) for item in raw]
