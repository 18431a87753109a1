"""
View state for a single user session.

DexSession is what a front end renders: the active tab, the query box, the
latest search result, the browse page and one display error string. Every
user-visible failure from the layers below ends up in `error`.
"""

import logging
import random
from collections.abc import Callable
from enum import Enum

from dexkeeper.clients.pokeapi import FetchError, PokeApiClient
from dexkeeper.models.collection import (
    CollectionEntry,
    CollectionKind,
    compare_entry,
    favorite_entry,
    team_entry,
)
from dexkeeper.models.creature import CreatureRecord
from dexkeeper.models.failure import FailureDetail, FailureKind, KnownError
from dexkeeper.services.browse import BrowseState
from dexkeeper.services.collection_store import CollectionStore
from dexkeeper.services.presentation import random_creature_id
from dexkeeper.services.search_controller import SearchController, SearchResult

logger = logging.getLogger(__name__)


class Tab(str, Enum):
    SEARCH = "search"
    POKEDEX = "pokedex"
    TEAM = "team"
    COMPARE = "compare"
    FAVORITES = "favorites"


class DexSession:
    """
    Ties the collection store, search controller and browse state together.

    Attributes:
        active_tab: Tab currently shown
        query: Text in the search box
        error: Single display string for the latest failure, "" if none
        failure: Structured form of `error`
        show_shiny: Whether the shiny sprite is shown for the current record
    """

    def __init__(
        self,
        client: PokeApiClient,
        store: CollectionStore,
        controller: SearchController | None = None,
        browse: BrowseState | None = None,
    ) -> None:
        self.client = client
        self.store = store
        self.controller = controller or SearchController(client, store)
        self.browse = browse or BrowseState()
        self.active_tab = Tab.SEARCH
        self.query = ""
        self.error = ""
        self.failure: FailureDetail | None = None
        self.show_shiny = False
        self.loading_index = False
        self._index_loaded = False

    def _fail(self, error: KnownError) -> None:
        self.failure = error.to_detail()
        self.error = error.message

    def _clear_error(self) -> None:
        self.failure = None
        self.error = ""

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    @property
    def result(self) -> SearchResult | None:
        return self.controller.current

    @property
    def record(self) -> CreatureRecord | None:
        return self.result.record if self.result else None

    @property
    def loading(self) -> bool:
        return self.controller.loading or self.loading_index

    def sprite(self) -> str | None:
        """Sprite to show for the current record, honouring the shiny toggle."""
        if self.record is None:
            return None
        if self.show_shiny and self.record.shiny_sprite:
            return self.record.shiny_sprite
        return self.record.sprite

    def toggle_shiny(self) -> None:
        self.show_shiny = not self.show_shiny

    def suggestions(self) -> list[str]:
        """Names offered under the search box: recent searches, then favorites."""
        names = list(self.store.history)
        for fav in self.store.favorites:
            if fav.name not in names:
                names.append(fav.name)
        return names

    def is_favorite(self) -> bool:
        return self.record is not None and self.store.is_favorite(self.record.id)

    def is_in_team(self) -> bool:
        return self.record is not None and self.store.is_in_team(self.record.id)

    # -------------------------------------------------------------------------
    # Searching
    # -------------------------------------------------------------------------

    async def search(self, query: str | None = None) -> SearchResult | None:
        """Search `query`, or the search box text when omitted."""
        if query is not None:
            self.query = query
        self._clear_error()
        self.show_shiny = False

        try:
            return await self.controller.search(self.query)
        except KnownError as e:
            self._fail(e)
            return None

    async def search_random(self, rng: random.Random | None = None) -> SearchResult | None:
        return await self.search(str(random_creature_id(rng)))

    async def view_from_browser(self, name: str) -> SearchResult | None:
        self.active_tab = Tab.SEARCH
        return await self.search(name)

    # -------------------------------------------------------------------------
    # Tabs and browsing
    # -------------------------------------------------------------------------

    async def open_tab(self, tab: Tab) -> None:
        self.active_tab = Tab(tab)
        if self.active_tab is Tab.POKEDEX and not self._index_loaded:
            await self.load_index()

    async def load_index(self) -> None:
        """Fetch the creature index into the browse state."""
        self.loading_index = True
        try:
            entries = await self.client.fetch_creature_index()
        except FetchError as e:
            logger.warning("Failed to load creature index: %s", e)
            self._fail(
                KnownError(
                    kind=FailureKind.SERVICE_UNAVAILABLE,
                    message="Failed to load Pokémon list",
                    detail=str(e),
                )
            )
            return
        finally:
            self.loading_index = False

        self.browse.load(entries)
        self._index_loaded = True
        logger.info("Loaded %d index entries", len(entries))

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    def toggle_favorite(self) -> bool | None:
        """Toggle the current record in favorites. Returns membership, None if no record."""
        if self.record is None:
            return None
        return self.store.toggle_favorite(favorite_entry(self.record))

    def _add(self, add: Callable[[CollectionEntry], None], entry: CollectionEntry) -> bool:
        try:
            add(entry)
        except KnownError as e:
            self._fail(e)
            return False
        return True

    def add_to_team(self) -> bool:
        """Add the current record to the team. Returns False and sets `error` if rejected."""
        if self.record is None:
            return False
        added = self._add(self.store.add_to_team, team_entry(self.record))
        if added:
            self._clear_error()
        return added

    def add_to_compare(self) -> bool:
        """Add the current record to the comparison. Returns False and sets `error` if rejected."""
        if self.record is None:
            return False
        return self._add(self.store.add_to_compare, compare_entry(self.record))

    def remove_from_team(self, entry_id: int) -> None:
        self.store.remove_from_team(entry_id)

    def remove_from_compare(self, entry_id: int) -> None:
        self.store.remove_from_compare(entry_id)

    def clear(self, kind: CollectionKind) -> None:
        self.store.clear(kind)
