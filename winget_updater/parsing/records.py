from __future__ import annotations

import logging

from winget_updater.log_setup import TRACE
from winget_updater.models import ColumnLayout, PackageRecord
from winget_updater.parsing.header import locate_table
from winget_updater.parsing.patterns import FOOTER_RES
from winget_updater.parsing.sanitizer import sanitize_lines
from winget_updater.parsing.unwrapper import unwrap

logger = logging.getLogger(__name__)


def slice_fields(line: str, layout: ColumnLayout) -> tuple[str, str, str, str, str]:
    """Cut a data line into its five column values.

    Offsets past the end of the line are clamped, so a short line yields
    empty trailing fields. Every field is stripped of surrounding
    whitespace.
    """
    end = len(line)
    bounds = [
        0,
        min(layout.id_offset, end),
        min(layout.version_offset, end),
        min(layout.available_offset, end),
        min(layout.source_offset, end),
        end,
    ]
    name, pkg_id, version, available, source = (
        line[start:stop].strip() for start, stop in zip(bounds, bounds[1:])
    )
    return name, pkg_id, version, available, source


def is_footer(line: str) -> bool:
    """Return True for the summary sentences printed below the table."""
    return any(pattern.search(line) for pattern in FOOTER_RES)


def parse_record(line: str, layout: ColumnLayout) -> PackageRecord | None:
    """Build a PackageRecord from one data line.

    Returns:
        The record, or None if the line has no name or no id. Such lines
        are decorative or damaged and are dropped rather than reported.
    """
    name, pkg_id, version, available, source = slice_fields(line, layout)
    if not name or not pkg_id:
        logger.log(TRACE, "parse_record: dropped %r", line)
        return None
    return PackageRecord(
        name=name,
        id=pkg_id,
        installed_version=version,
        available_version=available,
        source=source,
    )


def parse_records(lines: list[str], layout: ColumnLayout, start: int) -> list[PackageRecord]:
    """Parse data lines from ``start`` until a blank line or a footer."""
    records: list[PackageRecord] = []
    dropped = 0
    for line in lines[start:]:
        if not line.strip() or is_footer(line):
            break
        record = parse_record(line, layout)
        if record is None:
            dropped += 1
            continue
        records.append(record)
    logger.debug("parse_records: %d records, %d dropped", len(records), dropped)
    return records


def parse_upgrade_list(text: str) -> list[PackageRecord]:
    """Turn captured ``winget upgrade`` output into package records.

    Runs the full pipeline: sanitize, unwrap, locate the header, then slice
    each data row by the header's own column offsets. Names containing
    spaces survive intact because nothing is split on whitespace.

    Args:
        text: Raw stdout of the list command.

    Returns:
        Records in output order. Duplicate ids are kept. An empty list when
        the output has no header, which is also what "no updates" looks like.

    Raises:
        HeaderFormatError: If a header was found but is missing a column label.
    """
    lines = unwrap(sanitize_lines(text))
    table = locate_table(lines)
    if table is None:
        return []
    layout, start = table
    return parse_records(lines, layout, start)
