"""Shared data types for the listing and update pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class PackageRecord:
    """One upgradable package as listed by the package manager.

    Attributes:
        name: Display name, may contain spaces.
        id: Namespaced package identifier (``Publisher.Package``).
        installed_version: Version currently installed.
        available_version: Version offered by the source.
        source: Source the package comes from (e.g. ``"winget"``).
    """

    name: str
    id: str
    installed_version: str
    available_version: str
    source: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "id": self.id,
            "installed_version": self.installed_version,
            "available_version": self.available_version,
            "source": self.source,
        }


@dataclass(frozen=True, slots=True)
class ColumnLayout:
    """Start offsets of the trailing columns, taken from the header line.

    The name column always spans ``[0, id_offset)``.
    """

    id_offset: int
    version_offset: int
    available_offset: int
    source_offset: int


class OutcomeKind(Enum):
    """Possible results of one package update invocation."""

    SUCCESS = "success"
    ALREADY_UP_TO_DATE = "already_up_to_date"
    NEEDS_CLOSE = "needs_close"
    NOT_FOUND = "not_found"
    GENERIC_FAILURE = "generic_failure"


_SUCCESS_LIKE = frozenset({
    OutcomeKind.SUCCESS,
    OutcomeKind.ALREADY_UP_TO_DATE,
    OutcomeKind.NEEDS_CLOSE,
})


@dataclass(frozen=True, slots=True)
class UpdateOutcome:
    """Classified result of updating one package, shown as one result row."""

    kind: OutcomeKind
    package_id: str
    detail: str

    @property
    def is_success(self) -> bool:
        return self.kind in _SUCCESS_LIKE

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def format(self) -> str:
        return f"{self.package_id} - {self.detail}"


@dataclass
class PackageItem:
    """A listed package together with its selection state."""

    record: PackageRecord
    selected: bool = False
