from __future__ import annotations

import logging

from winget_updater.errors import HeaderFormatError
from winget_updater.log_setup import TRACE
from winget_updater.models import ColumnLayout
from winget_updater.parsing.patterns import (
    HEADER_RE,
    NAME_LABEL,
    OFFSET_LABELS,
    SEPARATOR_RE,
    label_re,
)

logger = logging.getLogger(__name__)

_LABEL_RES = {label: label_re(label) for label in OFFSET_LABELS}


def find_header(lines: list[str]) -> int | None:
    """Return the index of the first line naming the Name, Id and Version columns."""
    for idx, line in enumerate(lines):
        if HEADER_RE.search(line):
            logger.log(TRACE, "find_header -> line %d", idx)
            return idx
    return None


def column_layout(header: str) -> ColumnLayout:
    """Derive column start offsets from a header line.

    Labels are searched left to right, each one after the previous label,
    starting after Name.

    Args:
        header: The header line, already unwrapped.

    Returns:
        A ColumnLayout with the start offsets of Id, Version, Available
        and Source.

    Raises:
        HeaderFormatError: If one of those labels is missing.
    """
    offsets: list[int] = []
    name = label_re(NAME_LABEL).search(header)
    pos = name.end() if name else 0
    for label in OFFSET_LABELS:
        m = _LABEL_RES[label].search(header, pos)
        if m is None:
            raise HeaderFormatError(label, header)
        offsets.append(m.start())
        pos = m.end()
    layout = ColumnLayout(*offsets)
    logger.log(TRACE, "column_layout -> %s", layout)
    return layout


def find_data_start(lines: list[str], header_idx: int) -> int:
    """Return the index of the first data line after the header.

    The separator is looked for on the first non-blank line below the
    header. If that line is not a run of dashes, data starts right after
    the header.
    """
    for idx in range(header_idx + 1, len(lines)):
        if not lines[idx].strip():
            continue
        if SEPARATOR_RE.match(lines[idx]):
            return idx + 1
        break
    return header_idx + 1


def locate_table(lines: list[str]) -> tuple[ColumnLayout, int] | None:
    """Find the header, its column layout and where data rows begin.

    Returns:
        ``(layout, data_start)``, or None when no header is present. No
        header is how the tool reports that nothing is upgradable.

    Raises:
        HeaderFormatError: If a header was found but is missing a label.
    """
    header_idx = find_header(lines)
    if header_idx is None:
        logger.debug("No header line among %d lines", len(lines))
        return None
    layout = column_layout(lines[header_idx])
    return layout, find_data_start(lines, header_idx)
