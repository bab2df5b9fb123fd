from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from winget_updater.models import PackageItem, PackageRecord

logger = logging.getLogger(__name__)


class PackageSelection:
    """Ordered list of upgradable packages with per-row selection state."""

    def __init__(self, records: Iterable[PackageRecord] = ()) -> None:
        self._items: list[PackageItem] = []
        self.load(records)

    def load(self, records: Iterable[PackageRecord]) -> None:
        """Replace the list; every new item starts unselected."""
        self._items = [PackageItem(record) for record in records]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PackageItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> PackageItem:
        return self._items[index]

    def toggle(self, index: int) -> None:
        """Flip selection of the item at ``index``. Out-of-range is ignored."""
        if 0 <= index < len(self._items):
            item = self._items[index]
            item.selected = not item.selected

    def select_all(self) -> None:
        for item in self._items:
            item.selected = True

    def deselect_all(self) -> None:
        for item in self._items:
            item.selected = False

    def select_ids(self, ids: Iterable[str]) -> list[str]:
        """Select every item whose id is in ``ids``.

        Returns:
            The requested ids that match no listed package, in request order.
        """
        wanted = list(ids)
        known = set()
        for item in self._items:
            if item.record.id in wanted:
                item.selected = True
                known.add(item.record.id)
        missing = [pkg_id for pkg_id in wanted if pkg_id not in known]
        if missing:
            logger.debug("select_ids: not listed %s", missing)
        return missing

    def selected_ids(self) -> list[str]:
        """Ids of the selected items, in list order."""
        return [item.record.id for item in self._items if item.selected]
