from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from winget_updater.config import AppConfig, ConfigError, load_config
from winget_updater.errors import ParseError
from winget_updater.log_setup import setup_logging
from winget_updater.models import PackageRecord
from winget_updater.parsing import classify_update, parse_upgrade_list
from winget_updater.selection import PackageSelection
from winget_updater.summary import BatchSummary, format_result_row

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2

_COLUMNS = (
    ("Name", "name"),
    ("Id", "id"),
    ("Version", "installed_version"),
    ("Available", "available_version"),
    ("Source", "source"),
)


def _read_text(path: str | None) -> str:
    """Read a captured output file, or stdin when path is None or '-'."""
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


def format_table(records: list[PackageRecord]) -> str:
    """Render records as a left-aligned, space-padded table."""
    rows = [[title for title, _ in _COLUMNS]]
    rows.extend([getattr(r, attr) for _, attr in _COLUMNS] for r in records)
    widths = [max(len(row[i]) for row in rows) for i in range(len(_COLUMNS))]
    return "\n".join(
        "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
        for row in rows
    )


def cmd_parse(args: argparse.Namespace, config: AppConfig) -> int:
    """Parse a captured list output and print the upgradable packages."""
    try:
        records = parse_upgrade_list(_read_text(args.file))
    except ParseError as e:
        logger.error("Cannot parse package list: %s", e)
        return EXIT_ERROR

    if args.select:
        selection = PackageSelection(records)
        missing = selection.select_ids(args.select)
        for pkg_id in missing:
            logger.warning("Package %s is not in the upgrade list", pkg_id)
        records = [item.record for item in selection if item.selected]

    if config.output.format == "json":
        print(json.dumps([r.to_dict() for r in records], indent=2))
    elif records:
        print(format_table(records))
    else:
        print("No upgradable packages.")
    logger.info("%d package(s) available for update", len(records))
    return EXIT_OK


def cmd_classify(args: argparse.Namespace, config: AppConfig) -> int:
    """Classify one captured update invocation."""
    stdout = _read_text(args.stdout) if args.stdout else ""
    stderr = _read_text(args.stderr) if args.stderr else ""
    outcome = classify_update(
        args.id,
        args.exit_code,
        stdout,
        stderr,
        max_detail_length=config.classifier.detail_max_length,
    )
    badge, label = format_result_row(outcome)
    print(f"[{badge}] {label}")
    return EXIT_OK if outcome.is_success else EXIT_FAILED


def cmd_batch(args: argparse.Namespace, config: AppConfig) -> int:
    """Classify a YAML list of captured invocations and print a summary.

    Each entry is a mapping with ``id``, ``exit_code`` and optional
    ``stdout`` / ``stderr`` strings.
    """
    try:
        entries = yaml.safe_load(_read_text(args.file)) or []
    except yaml.YAMLError as e:
        logger.error("Invalid results file: %s", e)
        return EXIT_ERROR
    if not isinstance(entries, list):
        logger.error("Results file must contain a list of invocations")
        return EXIT_ERROR

    summary = BatchSummary()
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("id"):
            logger.warning("Skipping results entry without an id: %r", entry)
            continue
        try:
            exit_code = int(entry.get("exit_code", 0))
        except (TypeError, ValueError):
            logger.warning("Skipping %s: exit_code is not an integer", entry["id"])
            continue
        summary.add(classify_update(
            str(entry["id"]),
            exit_code,
            entry.get("stdout") or "",
            entry.get("stderr") or "",
            max_detail_length=config.classifier.detail_max_length,
        ))
    print(summary.format())
    return EXIT_OK if summary.failed == 0 else EXIT_FAILED


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Parse winget upgrade listings and classify update results"
    )
    parser.add_argument("--config", default=None,
                        help="Path to YAML config file (default: built-in defaults)")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug mode (verbose logging)")
    parser.add_argument("--trace", action="store_true",
                        help="Enable trace mode (writes trace file to debug/)")
    parser.add_argument("--verbose", action="store_true",
                        help="With --trace, also send trace output to terminal")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="List packages from captured 'winget upgrade' output")
    p_parse.add_argument("file", nargs="?", default=None,
                         help="Captured output file (default: stdin)")
    p_parse.add_argument("--select", nargs="+", metavar="ID",
                         help="Only show these package ids")
    p_parse.set_defaults(func=cmd_parse)

    p_classify = sub.add_parser("classify", help="Classify one captured update result")
    p_classify.add_argument("--id", required=True, help="Package id that was updated")
    p_classify.add_argument("--exit-code", type=int, required=True,
                            help="Exit status of the update command")
    p_classify.add_argument("--stdout", help="File holding captured stdout")
    p_classify.add_argument("--stderr", help="File holding captured stderr")
    p_classify.set_defaults(func=cmd_classify)

    p_batch = sub.add_parser("batch", help="Summarize a YAML list of captured update results")
    p_batch.add_argument("file", nargs="?", default=None,
                         help="YAML results file (default: stdin)")
    p_batch.set_defaults(func=cmd_batch)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the winget-updater command."""
    args = _parse_args(argv)
    try:
        config = load_config(args.config)
    except ConfigError as e:
        setup_logging(debug=args.debug, trace=False, verbose=False)
        logger.error("%s", e)
        return EXIT_ERROR

    config.debug.enabled = config.debug.enabled or args.debug
    config.debug.trace = config.debug.trace or args.trace
    config.debug.verbose = config.debug.verbose or args.verbose
    setup_logging(
        debug=config.debug.enabled,
        trace=config.debug.trace,
        verbose=config.debug.verbose,
    )
    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
