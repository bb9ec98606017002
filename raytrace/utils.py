"""Small string, naming and file helpers."""

from __future__ import annotations

import logging
from datetime import datetime

logger = logging.getLogger(__name__)


def stringify(value: int | bool) -> str:
    """Render an int, or a bool as ``true``/``false``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    raise TypeError(f"cannot stringify {type(value).__name__}")


def current_date_time() -> str:
    """Local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def generate_file_name(
    hres: int,
    vres: int,
    blur: bool,
    npr: int,
    sec_rays: bool,
    lens_radius: float,
    lens_depth: float,
) -> str:
    """Build an output image name describing the render settings."""
    return (
        f"{current_date_time()} - {stringify(hres)}x{stringify(vres)}"
        f" - blur({stringify(blur)}) - NPR({stringify(npr)})"
        f" - secRays({stringify(sec_rays)})"
        f" - lensRadius({stringify(int(lens_radius))})"
        f" - lensDepth({stringify(int(lens_depth))}).ppm"
    )


def split(s: str, delimiter: str) -> list[str]:
    """Split on a single character; a trailing empty field is dropped."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = s.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def get_lines_from_file(filename: str) -> list[str]:
    """Return the file's lines, or an empty list if it cannot be opened."""
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            logger.info("File %s opened successfully.", filename)
            text = handle.read()
    except OSError:
        logger.info("File %s could not be opened.", filename)
        return []
    lines = split(text, "\n")
    logger.info("Read %d lines.", len(lines))
    return lines