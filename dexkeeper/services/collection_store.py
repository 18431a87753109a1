"""
Collection store.

Owns the four bounded collections (history, favorites, team, compare) and is
the only writer of their storage keys.

Rules:
- History: at most 10 names, unique, most recent first
- Favorites: at most 20 entries, unique ids, toggled, most recent first
- Team: at most 6 entries, unique ids, append order, full/duplicate rejected
- Compare: at most 4 entries, same rules as team, never persisted

Every mutation writes the affected collection straight away. Unreadable
storage is treated as an empty collection.
"""

import logging

from pydantic import TypeAdapter, ValidationError

from dexkeeper.config import (
    COMPARE_LIMIT,
    FAVORITES_KEY,
    FAVORITES_LIMIT,
    HISTORY_KEY,
    HISTORY_LIMIT,
    TEAM_KEY,
    TEAM_LIMIT,
)
from dexkeeper.models.collection import CollectionEntry, CollectionKind
from dexkeeper.models.failure import CollectionFullError, DuplicateEntryError
from dexkeeper.storage.base import StoragePort

logger = logging.getLogger(__name__)

_NAMES = TypeAdapter(list[str])
_ENTRIES = TypeAdapter(list[CollectionEntry])


def _unique_names(names: list[str], limit: int) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result[:limit]


def _unique_entries(entries: list[CollectionEntry], limit: int) -> list[CollectionEntry]:
    seen: set[int] = set()
    result: list[CollectionEntry] = []
    for entry in entries:
        if entry.id not in seen:
            seen.add(entry.id)
            result.append(entry)
    return result[:limit]


class CollectionStore:
    """
    In-memory collections with write-through persistence.

    Construct once per process with a storage port, call `load_all()` at
    startup, then share the instance with whatever needs it.
    """

    def __init__(self, storage: StoragePort) -> None:
        self._storage = storage
        self._history: list[str] = []
        self._favorites: list[CollectionEntry] = []
        self._team: list[CollectionEntry] = []
        self._compare: list[CollectionEntry] = []

    # -------------------------------------------------------------------------
    # Loading and saving
    # -------------------------------------------------------------------------

    def _read(self, key: str, adapter: TypeAdapter) -> list:
        try:
            raw = self._storage.get_item(key)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, starting empty: %s", key, e)
            return []

        if raw is None:
            return []

        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding malformed %s (%d validation errors)", key, e.error_count()
            )
            return []

    def load_all(self) -> None:
        """Populate every persisted collection from storage. Never raises."""
        self._history = _unique_names(self._read(HISTORY_KEY, _NAMES), HISTORY_LIMIT)
        self._favorites = _unique_entries(self._read(FAVORITES_KEY, _ENTRIES), FAVORITES_LIMIT)
        self._team = _unique_entries(self._read(TEAM_KEY, _ENTRIES), TEAM_LIMIT)
        self._compare = []

        logger.info(
            "Loaded collections: %d history, %d favorites, %d team",
            len(self._history),
            len(self._favorites),
            len(self._team),
        )

    def _save_history(self) -> None:
        self._storage.set_item(HISTORY_KEY, _NAMES.dump_json(self._history).decode())

    def _save_favorites(self) -> None:
        self._storage.set_item(
            FAVORITES_KEY, _ENTRIES.dump_json(self._favorites, exclude_none=True).decode()
        )

    def _save_team(self) -> None:
        self._storage.set_item(TEAM_KEY, _ENTRIES.dump_json(self._team, exclude_none=True).decode())

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def favorites(self) -> tuple[CollectionEntry, ...]:
        return tuple(self._favorites)

    @property
    def team(self) -> tuple[CollectionEntry, ...]:
        return tuple(self._team)

    @property
    def compare(self) -> tuple[CollectionEntry, ...]:
        return tuple(self._compare)

    def is_favorite(self, entry_id: int) -> bool:
        return any(entry.id == entry_id for entry in self._favorites)

    def is_in_team(self, entry_id: int) -> bool:
        return any(entry.id == entry_id for entry in self._team)

    def is_in_compare(self, entry_id: int) -> bool:
        return any(entry.id == entry_id for entry in self._compare)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_history(self, name: str) -> None:
        """Move `name` to the front of history, dropping the oldest past the limit."""
        self._history = [name, *(n for n in self._history if n != name)][:HISTORY_LIMIT]
        self._save_history()

    def toggle_favorite(self, entry: CollectionEntry) -> bool:
        """
        Add `entry` to favorites, or remove it if its id is already there.

        Returns:
            True if the entry is a favorite after the call
        """
        if self.is_favorite(entry.id):
            self._favorites = [fav for fav in self._favorites if fav.id != entry.id]
            is_favorite = False
        else:
            self._favorites = [entry, *self._favorites][:FAVORITES_LIMIT]
            is_favorite = True

        self._save_favorites()
        return is_favorite

    def add_to_team(self, entry: CollectionEntry) -> None:
        """
        Append `entry` to the team.

        Raises:
            CollectionFullError: Team already has 6 members
            DuplicateEntryError: Entry's id is already in the team
        """
        if len(self._team) >= TEAM_LIMIT:
            raise CollectionFullError(
                CollectionKind.TEAM.value,
                TEAM_LIMIT,
                f"Team is full! Maximum {TEAM_LIMIT} Pokémon allowed.",
            )
        if self.is_in_team(entry.id):
            raise DuplicateEntryError(
                CollectionKind.TEAM.value, entry.id, "This Pokémon is already in your team!"
            )

        self._team.append(entry)
        self._save_team()

    def remove_from_team(self, entry_id: int) -> None:
        """Remove the member with `entry_id`. Absent ids are ignored."""
        if not self.is_in_team(entry_id):
            return
        self._team = [member for member in self._team if member.id != entry_id]
        self._save_team()

    def add_to_compare(self, entry: CollectionEntry) -> None:
        """
        Append `entry` to the comparison set.

        Raises:
            CollectionFullError: Comparison already has 4 entries
            DuplicateEntryError: Entry's id is already being compared
        """
        if len(self._compare) >= COMPARE_LIMIT:
            raise CollectionFullError(
                CollectionKind.COMPARE.value,
                COMPARE_LIMIT,
                f"Maximum {COMPARE_LIMIT} Pokémon can be compared at once.",
            )
        if self.is_in_compare(entry.id):
            raise DuplicateEntryError(
                CollectionKind.COMPARE.value,
                entry.id,
                "This Pokémon is already being compared!",
            )

        self._compare.append(entry)

    def remove_from_compare(self, entry_id: int) -> None:
        """Remove the entry with `entry_id`. Absent ids are ignored."""
        self._compare = [entry for entry in self._compare if entry.id != entry_id]

    def clear(self, kind: CollectionKind) -> None:
        """Empty the named collection."""
        kind = CollectionKind(kind)
        if kind is CollectionKind.HISTORY:
            self._history = []
            self._save_history()
        elif kind is CollectionKind.FAVORITES:
            self._favorites = []
            self._save_favorites()
        elif kind is CollectionKind.TEAM:
            self._team = []
            self._save_team()
        elif kind is CollectionKind.COMPARE:
            self._compare = []
