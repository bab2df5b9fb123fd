# ---- Captured `winget upgrade` output, rebuilt with the tool's own column widths ----

NAME_WIDTH = 31
ID_WIDTH = 28
VERSION_WIDTH = 15
AVAILABLE_WIDTH = 15


def table_row(name: str, pkg_id: str, version: str, available: str, source: str) -> str:
    """Lay out one row the way winget pads its columns."""
    return (
        name.ljust(NAME_WIDTH)
        + pkg_id.ljust(ID_WIDTH)
        + version.ljust(VERSION_WIDTH)
        + available.ljust(AVAILABLE_WIDTH)
        + source
    )


def wrap_lines(lines: list[str], width: int) -> list[str]:
    """Hard-wrap every line longer than ``width`` like a narrow console does."""
    wrapped: list[str] = []
    for line in lines:
        if len(line) <= width:
            wrapped.append(line)
            continue
        wrapped.extend(line[i:i + width] for i in range(0, len(line), width))
    return wrapped


HEADER = table_row("Name", "Id", "Version", "Available", "Source")
SEPARATOR = "-" * len(HEADER)

VSCODE_ROW = table_row(
    "Microsoft Visual Studio Code", "Microsoft.VisualStudioCode", "1.85.0", "1.85.1", "winget"
)
CHROME_ROW = table_row(
    "Google Chrome", "Google.Chrome", "120.0.6099.109", "120.0.6099.130", "winget"
)
SEVEN_ZIP_ROW = table_row("7-Zip 23.01 (x64)", "7zip.7zip", "23.01", "24.07", "winget")

# Two upgrades with trailing summary line
SAMPLE_LINES = [
    "",
    HEADER,
    SEPARATOR,
    VSCODE_ROW,
    CHROME_ROW,
    "2 upgrades available.",
]
SAMPLE_OUTPUT = "\n".join(SAMPLE_LINES) + "\n"

# Spinner frames redrawn with \r before the header, CRLF line endings
SPINNER_OUTPUT = (
    "   - \r   \\ \r   | \r   / \r" + " " * 40 + "\r" + HEADER + "\r\n"
    + SEPARATOR + "\r\n"
    + VSCODE_ROW + "\r\n"
    + CHROME_ROW + "\r\n"
    + SEVEN_ZIP_ROW + "\r\n"
    + "3 upgrades available.\r\n"
)

# Nothing to upgrade: winget prints no table at all
NO_UPDATES_OUTPUT = (
    "   - \r   \\ \r" + " " * 20 + "\r"
    + "No installed package found matching input criteria.\n"
)

# Table followed by the unknown-version notice and the pinned-packages block
FOOTER_OUTPUT = "\n".join([
    HEADER,
    SEPARATOR,
    CHROME_ROW,
    "1 upgrades available.",
    "",
    "1 package(s) have version numbers that cannot be determined. Use --include-unknown to see all results.",
]) + "\n"

# Header drifted: "Available" column renamed
BROKEN_HEADER = "Name                           Id                          Version        Latest         Source"
BROKEN_HEADER_OUTPUT = "\n".join([BROKEN_HEADER, SEPARATOR, CHROME_ROW]) + "\n"


# ---- Captured `winget upgrade --id` results ----

INSTALL_SUCCESS_STDOUT = (
    "Found Google Chrome [Google.Chrome] Version 120.0.6099.130\n"
    "This application is licensed to you by its owner.\n"
    "Downloading https://dl.google.com/chrome/install/googlechromestandaloneenterprise64.msi\n"
    "  ██████████████████████████████   105 MB /  105 MB\n"
    "Successfully verified installer hash\n"
    "Starting package install...\n"
    "Successfully installed\n"
)

UP_TO_DATE_STDOUT = (
    "No applicable update found.\n"
)

NO_NEWER_STDOUT = (
    "Found an existing package already installed. Trying to upgrade the installed package...\n"
    "No newer package versions are available from the configured sources.\n"
)

NOT_FOUND_STDOUT = (
    "No package found matching input criteria.\n"
)

NEEDS_CLOSE_STDOUT = (
    "Found Microsoft Visual Studio Code [Microsoft.VisualStudioCode] Version 1.85.1\n"
    "Starting package install...\n"
    "Installer failed with exit code: 1\n"
    "The application must be closed before it can be upgraded.\n"
)

FAILED_STDOUT = (
    "Found 7-Zip [7zip.7zip] Version 24.07\n"
    "Downloading https://www.7-zip.org/a/7z2407-x64.msi\n"
    "\n"
    "Installer hash does not match; this cannot be overridden when running as admin\n"
    "\n"
)
