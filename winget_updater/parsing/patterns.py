from __future__ import annotations

import re

# --- Terminal artifacts ---

# Cursor forward: ESC[NC, replaced with N spaces to keep columns aligned
CURSOR_FORWARD_RE = re.compile(r"\x1b\[(\d+)C")

# Remaining CSI / OSC / SGR sequences are removed entirely
ANSI_RE = re.compile(
    r"\x1b"
    r"(?:"
    r"\[[0-9;?]*[a-zA-Z]"      # CSI, including private modes ESC[?25l
    r"|\][^\x07\n]*?(?:\x07|\x1b\\)"  # OSC: ESC ] ... BEL or ST, never past a newline
    r"|[()][A-Z0-9]"           # charset selection
    r"|[=>]"                   # keypad modes
    r")"
)

# --- Table structure ---

# Filler line: only dashes. Wrapped separators come out as two of these in a row.
DASH_LINE_RE = re.compile(r"^-+$")

# Separator between header and data; tolerate surrounding whitespace
SEPARATOR_RE = re.compile(r"^\s*-{3,}\s*$")

# Header must carry Name, Id and Version in that order
HEADER_RE = re.compile(r"\bName\b.*\bId\b.*\bVersion\b")

NAME_LABEL = "Name"
ID_LABEL = "Id"
VERSION_LABEL = "Version"
AVAILABLE_LABEL = "Available"
SOURCE_LABEL = "Source"

# Columns whose start offset is read from the header, left to right
OFFSET_LABELS: tuple[str, ...] = (ID_LABEL, VERSION_LABEL, AVAILABLE_LABEL, SOURCE_LABEL)

# Summary lines printed after the table
FOOTER_RES: tuple[re.Pattern[str], ...] = (
    re.compile(r"\bupgrades?\s+available\b", re.IGNORECASE),
    re.compile(r"version numbers that cannot be determined", re.IGNORECASE),
    re.compile(r"require explicit targeting", re.IGNORECASE),
)

# --- Update result phrases ---

NEEDS_CLOSE_PHRASES: tuple[str, ...] = (
    "application must be closed",
    "Close the application",
    "currently in use",
    "close all instances",
)

INSTALLED_PHRASES: tuple[str, ...] = (
    "Successfully installed",
    "successfully",
)

UP_TO_DATE_PHRASES: tuple[str, ...] = (
    "No applicable update found",
    "No newer package versions",
)

NOT_FOUND_PHRASES: tuple[str, ...] = (
    "No package found",
)


def label_re(label: str) -> re.Pattern[str]:
    """Match a column label as a whole word."""
    return re.compile(rf"\b{re.escape(label)}\b")


def contains_any(text: str, phrases: tuple[str, ...]) -> bool:
    """Return True if any phrase occurs in text (case-sensitive)."""
    return any(phrase in text for phrase in phrases)
