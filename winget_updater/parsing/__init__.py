"""Package-manager output pipeline: sanitizer → unwrapper → header → records, plus the update classifier."""

from winget_updater.parsing.classifier import classify_update  # noqa: F401
from winget_updater.parsing.records import parse_upgrade_list  # noqa: F401

__all__ = ["classify_update", "parse_upgrade_list"]
