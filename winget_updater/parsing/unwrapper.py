"""Undo console-width wrapping of table output.

When the console is narrower than the table, the package manager hard-wraps
every long row at the console width ``W``. Column offsets taken from the
header are only valid once each logical row is back on one physical line.

The separator row is the tell: wrapped, it becomes two consecutive lines of
dashes, and the first of them is exactly ``W`` characters long. A physical
line of exactly ``W`` characters continues on the next line; the first
shorter line ends the logical row.
"""

from __future__ import annotations

import logging

from winget_updater.log_setup import TRACE
from winget_updater.parsing.patterns import DASH_LINE_RE

logger = logging.getLogger(__name__)


def detect_wrap_width(lines: list[str]) -> int | None:
    """Return the wrap width, or None if the output is not wrapped.

    Args:
        lines: Sanitized physical lines.

    Returns:
        Length of the first line of the first pair of adjacent, non-empty,
        all-dash lines. None when no such pair exists.
    """
    for first, second in zip(lines, lines[1:]):
        if DASH_LINE_RE.match(first) and DASH_LINE_RE.match(second):
            return len(first)
    return None


def rejoin(lines: list[str], width: int) -> list[str]:
    """Concatenate physical lines wrapped at ``width`` into logical lines."""
    result: list[str] = []
    buffer = ""
    for line in lines:
        buffer += line
        if len(line) < width:
            result.append(buffer)
            buffer = ""
    if buffer:
        result.append(buffer)
    return result


def unwrap(lines: list[str]) -> list[str]:
    """Rejoin wrapped physical lines into logical lines.

    Output that shows no sign of wrapping is returned unchanged.
    """
    width = detect_wrap_width(lines)
    if width is None:
        logger.log(TRACE, "unwrap: no wrapped separator, %d lines unchanged", len(lines))
        return list(lines)
    result = rejoin(lines, width)
    logger.debug("unwrap: width=%d physical=%d logical=%d", width, len(lines), len(result))
    return result
