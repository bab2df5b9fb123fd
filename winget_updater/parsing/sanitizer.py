"""Resolve terminal artifacts in captured command output.

Package managers render progress spinners and bars by printing a carriage
return and redrawing the same line. Captured to a pipe, all of those frames
end up in one physical line. What a real terminal would finally show is the
text after the last carriage return, which is what we keep.
"""

from __future__ import annotations

import logging

from winget_updater.log_setup import TRACE
from winget_updater.parsing.patterns import ANSI_RE, CURSOR_FORWARD_RE

logger = logging.getLogger(__name__)


def strip_ansi(text: str) -> str:
    """Strip ANSI escape codes, converting cursor-forward to spaces."""
    text = CURSOR_FORWARD_RE.sub(lambda m: " " * int(m.group(1)), text)
    return ANSI_RE.sub("", text)


def collapse_overwrites(line: str) -> str:
    """Return the part of a physical line left after carriage-return overwrites.

    Args:
        line: A single physical line, without its newline.

    Returns:
        The substring after the last ``\\r``, or the line unchanged if it
        contains none.
    """
    if "\r" not in line:
        return line
    return line.rsplit("\r", 1)[1]


def sanitize_lines(text: str) -> list[str]:
    """Split captured output into physical lines free of terminal artifacts.

    CRLF endings are normalized first so that a Windows line ending is not
    mistaken for an overwrite of the whole line. The number of lines equals
    the number of ``\\n``-separated lines in the input.
    """
    text = strip_ansi(text.replace("\r\n", "\n"))
    lines = text.split("\n")
    result = [collapse_overwrites(line) for line in lines]
    overwritten = sum(1 for line in lines if "\r" in line)
    logger.log(TRACE, "sanitize lines=%d overwritten=%d", len(lines), overwritten)
    return result


def sanitize(text: str) -> str:
    """Return text with terminal-overwrite artifacts resolved."""
    return "\n".join(sanitize_lines(text))
