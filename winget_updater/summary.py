from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from winget_updater.models import OutcomeKind, UpdateOutcome

_BADGES = {
    OutcomeKind.SUCCESS: "OK",
    OutcomeKind.ALREADY_UP_TO_DATE: "INFO",
    OutcomeKind.NEEDS_CLOSE: "WARN",
    OutcomeKind.NOT_FOUND: "FAIL",
    OutcomeKind.GENERIC_FAILURE: "FAIL",
}


def format_result_row(outcome: UpdateOutcome) -> tuple[str, str]:
    """Return ``(badge, label)`` for one row of the results summary."""
    return _BADGES[outcome.kind], outcome.format()


@dataclass
class BatchSummary:
    """Outcomes of one batch of updates, in the order they were run."""

    outcomes: list[UpdateOutcome] = field(default_factory=list)

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[UpdateOutcome]) -> BatchSummary:
        return cls(outcomes=list(outcomes))

    def add(self, outcome: UpdateOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.is_success)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.is_failure)

    @property
    def needs_close(self) -> int:
        """Success-like outcomes where the app still has to be closed and retried."""
        return sum(1 for o in self.outcomes if o.kind == OutcomeKind.NEEDS_CLOSE)

    def headline(self) -> str:
        headline = f"{self.succeeded} succeeded, {self.failed} failed"
        if self.needs_close:
            headline += f", {self.needs_close} must be closed"
        return headline

    def rows(self) -> list[tuple[str, str]]:
        return [format_result_row(o) for o in self.outcomes]

    def format(self) -> str:
        """Render the summary as plain text, one outcome per line."""
        width = max((len(badge) for badge in _BADGES.values()), default=0)
        lines = [self.headline()]
        lines.extend(f"[{badge:<{width}}] {label}" for badge, label in self.rows())
        return "\n".join(lines)
