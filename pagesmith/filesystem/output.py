"""Static output writer."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_SAFE_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


def _safe_output_path(output_dir: Path, name: str) -> Path:
    """Resolve ``<name>.html`` within output_dir, rejecting unsafe names."""
    if not _SAFE_NAME_RE.fullmatch(name):
        raise ValueError(f"Unsafe output name: {name!r}")
    path = (output_dir / f"{name}.html").resolve()
    if not path.is_relative_to(output_dir.resolve()):
        raise ValueError(f"Output name escapes output directory: {name!r}")
    return path


def write_html(output_dir: Path, name: str, html: str) -> Path:
    """Write ``<name>.html`` into output_dir, creating the directory if needed."""
    path = _safe_output_path(output_dir, name)
    if not output_dir.exists():
        output_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Created output directory %s", output_dir)
    path.write_text(html, encoding="utf-8")
    logger.info("Generated %s", path)
    return path
