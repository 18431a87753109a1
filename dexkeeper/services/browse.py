"""
Browsing the creature index: name filter plus fixed-size pages.

The page cursor is 1-based and clamped to [1, max(1, page_count)] after
every navigation or filter change, so stepping past either end does nothing.
"""

import math
from dataclasses import dataclass, field

from dexkeeper.config import PAGE_SIZE, SPRITE_URL_TEMPLATE
from dexkeeper.models.creature import CreatureIndexEntry


@dataclass(frozen=True, slots=True)
class BrowseItem:
    """A creature shown on a browse page."""

    id: int | None
    name: str

    @property
    def sprite_url(self) -> str | None:
        if self.id is None:
            return None
        return SPRITE_URL_TEMPLATE.format(id=self.id)


@dataclass
class BrowseState:
    """
    Transient filter and page cursor over the creature index.

    Attributes:
        entries: Full index as fetched (up to ~1000 entries)
        name_filter: Case-insensitive substring matched against names
        page: Current 1-based page
        page_size: Entries per page
    """

    entries: list[CreatureIndexEntry] = field(default_factory=list)
    name_filter: str = ""
    page: int = 1
    page_size: int = PAGE_SIZE

    def filtered(self) -> list[CreatureIndexEntry]:
        needle = self.name_filter.lower()
        if not needle:
            return list(self.entries)
        return [entry for entry in self.entries if needle in entry.name.lower()]

    @property
    def page_count(self) -> int:
        """Number of pages; 0 when nothing matches the filter."""
        return math.ceil(len(self.filtered()) / self.page_size)

    def _clamp(self) -> None:
        self.page = min(max(self.page, 1), max(self.page_count, 1))

    def load(self, entries: list[CreatureIndexEntry]) -> None:
        self.entries = list(entries)
        self._clamp()

    def set_filter(self, text: str) -> None:
        self.name_filter = text
        self._clamp()

    def go_to(self, page: int) -> None:
        self.page = page
        self._clamp()

    def next_page(self) -> None:
        self.go_to(self.page + 1)

    def previous_page(self) -> None:
        self.go_to(self.page - 1)

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def current_items(self) -> list[BrowseItem]:
        start = (self.page - 1) * self.page_size
        window = self.filtered()[start : start + self.page_size]
        return [BrowseItem(id=entry.id, name=entry.name) for entry in window]
