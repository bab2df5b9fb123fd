import pytest

from winget_updater.models import OutcomeKind, PackageRecord, UpdateOutcome


@pytest.fixture
def sample_records():
    """Three upgradable packages in listing order."""
    return [
        PackageRecord("Microsoft Visual Studio Code", "Microsoft.VisualStudioCode", "1.85.0", "1.85.1", "winget"),
        PackageRecord("Google Chrome", "Google.Chrome", "120.0.6099.109", "120.0.6099.130", "winget"),
        PackageRecord("7-Zip 23.01 (x64)", "7zip.7zip", "23.01", "24.07", "winget"),
    ]


@pytest.fixture
def mixed_outcomes():
    """One outcome of every kind."""
    return [
        UpdateOutcome(OutcomeKind.SUCCESS, "Google.Chrome", "updated successfully"),
        UpdateOutcome(OutcomeKind.ALREADY_UP_TO_DATE, "Git.Git", "already up to date"),
        UpdateOutcome(OutcomeKind.NEEDS_CLOSE, "Microsoft.VisualStudioCode", "needs to be closed before updating"),
        UpdateOutcome(OutcomeKind.NOT_FOUND, "Nope.Nope", "package not found"),
        UpdateOutcome(OutcomeKind.GENERIC_FAILURE, "7zip.7zip", "disk full"),
    ]
