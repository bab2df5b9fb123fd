"""Classify the captured result of a single package update.

The package manager's wording is not a stable interface, so matching is
done against small phrase sets and anything unrecognized falls back to the
optimistic reading on the success path and to a generic failure otherwise.
Every call yields exactly one outcome; nothing here raises on odd input.
"""

from __future__ import annotations

import logging

from winget_updater.log_setup import TRACE
from winget_updater.models import OutcomeKind, UpdateOutcome
from winget_updater.parsing.patterns import (
    INSTALLED_PHRASES,
    NEEDS_CLOSE_PHRASES,
    NOT_FOUND_PHRASES,
    UP_TO_DATE_PHRASES,
    contains_any,
)

logger = logging.getLogger(__name__)

DETAIL_MAX_LENGTH = 100

DETAIL_UPDATED = "updated successfully"
DETAIL_COMPLETED = "completed"
DETAIL_UP_TO_DATE = "already up to date"
DETAIL_NEEDS_CLOSE = "needs to be closed before updating"
DETAIL_NOT_FOUND = "package not found"
DETAIL_FAILED = "Update failed"


def _first_nonblank(text: str) -> str | None:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return None


def _last_nonblank(text: str) -> str | None:
    for line in reversed(text.splitlines()):
        if line.strip():
            return line.strip()
    return None


def extract_diagnostic(stdout: str, stderr: str, max_length: int = DETAIL_MAX_LENGTH) -> str:
    """Pick a short, one-line reason for a failed update.

    Prefers the first non-blank stderr line unless it is all stdout says,
    then the last non-blank stdout line, then a fixed default.
    The result is truncated to ``max_length`` characters.
    """
    err_line = _first_nonblank(stderr)
    if err_line and err_line != stdout.strip():
        diagnostic = err_line
    else:
        diagnostic = _last_nonblank(stdout) or err_line or DETAIL_FAILED
    return diagnostic[:max_length]


def _classify_success(stdout: str) -> tuple[OutcomeKind, str]:
    if contains_any(stdout, INSTALLED_PHRASES):
        return OutcomeKind.SUCCESS, DETAIL_UPDATED
    if contains_any(stdout, UP_TO_DATE_PHRASES):
        return OutcomeKind.ALREADY_UP_TO_DATE, DETAIL_UP_TO_DATE
    if contains_any(stdout, NOT_FOUND_PHRASES):
        return OutcomeKind.NOT_FOUND, DETAIL_NOT_FOUND
    return OutcomeKind.SUCCESS, DETAIL_COMPLETED


def classify_update(
    package_id: str,
    exit_code: int,
    stdout: str,
    stderr: str,
    *,
    max_detail_length: int = DETAIL_MAX_LENGTH,
) -> UpdateOutcome:
    """Map one update invocation's exit status and output to an outcome.

    Uses priority-ordered matching, first match wins:
      1. A close-required phrase anywhere in stdout or stderr, whatever
         the exit status.
      2. Exit status 0: installed, up to date or not found phrases in
         stdout, defaulting to a generic success.
      3. Otherwise a generic failure carrying a best-effort diagnostic.

    Args:
        package_id: Id of the package the invocation targeted.
        exit_code: Process exit status, 0 meaning success.
        stdout: Captured standard output.
        stderr: Captured standard error.
        max_detail_length: Truncation limit for failure diagnostics.

    Returns:
        An UpdateOutcome for ``package_id``.
    """
    combined = f"{stdout}\n{stderr}"
    if contains_any(combined, NEEDS_CLOSE_PHRASES):
        kind, detail = OutcomeKind.NEEDS_CLOSE, DETAIL_NEEDS_CLOSE
    elif exit_code == 0:
        kind, detail = _classify_success(stdout)
    else:
        kind = OutcomeKind.GENERIC_FAILURE
        detail = extract_diagnostic(stdout, stderr, max_detail_length)
    logger.log(TRACE, "classify_update %s exit=%d -> %s", package_id, exit_code, kind.name)
    return UpdateOutcome(kind=kind, package_id=package_id, detail=detail)
