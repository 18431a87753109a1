import random
from collections.abc import Callable

import pytest

from dexkeeper.clients.pokeapi import FetchError
from dexkeeper.models.collection import CollectionKind
from dexkeeper.models.creature import (
    CreatureIndexEntry,
    CreatureRecord,
    EvolutionChain,
    SpeciesInfo,
)
from dexkeeper.models.failure import FailureKind
from dexkeeper.services.collection_store import CollectionStore
from dexkeeper.session import DexSession, Tab

MakeRecord = Callable[[int, str], CreatureRecord]


class StubClient:
    """In-process stand-in for PokeApiClient. Numeric lookups always resolve."""

    def __init__(
        self,
        make_record: MakeRecord,
        index: list[CreatureIndexEntry] | None = None,
    ) -> None:
        self.make_record = make_record
        self.known = {"pikachu": 25, "bulbasaur": 1}
        self.index = index
        self.index_calls = 0

    async def fetch_creature(self, name_or_id: str | int) -> CreatureRecord:
        key = str(name_or_id).strip().lower()
        if key.isdigit():
            return self.make_record(int(key), f"creature-{key}")
        if key in self.known:
            return self.make_record(self.known[key], key)
        raise FetchError("HTTP 404", url=key, status_code=404)

    async def fetch_species(self, creature_id: int) -> SpeciesInfo:
        return SpeciesInfo()

    async def fetch_evolution_chain(self, url: str) -> EvolutionChain:
        raise FetchError("unused", url=url)

    async def fetch_creature_index(self, limit: int | None = None) -> list[CreatureIndexEntry]:
        self.index_calls += 1
        if self.index is None:
            raise FetchError("HTTP 503", url="index", status_code=503)
        return self.index


@pytest.fixture
def client(make_record: MakeRecord) -> StubClient:
    return StubClient(
        make_record,
        index=[
            CreatureIndexEntry(name="bulbasaur", url="https://pokeapi.co/api/v2/pokemon/1/"),
            CreatureIndexEntry(name="ivysaur", url="https://pokeapi.co/api/v2/pokemon/2/"),
        ],
    )


@pytest.fixture
def session(client: StubClient, store: CollectionStore) -> DexSession:
    return DexSession(client, store)  # type: ignore[arg-type]


class TestSearching:
    @pytest.mark.asyncio
    async def test_search_shows_record(self, session: DexSession) -> None:
        result = await session.search("Pikachu")

        assert result is not None
        assert session.record is not None
        assert session.record.id == 25
        assert session.query == "Pikachu"
        assert session.error == ""
        assert session.store.history == ("pikachu",)

    @pytest.mark.asyncio
    async def test_search_uses_query_box(self, session: DexSession) -> None:
        session.query = "bulbasaur"

        await session.search()

        assert session.record is not None
        assert session.record.name == "bulbasaur"

    @pytest.mark.asyncio
    async def test_empty_query_message(self, session: DexSession) -> None:
        assert await session.search("  ") is None

        assert session.error == "Please enter a Pokémon name or ID"
        assert session.failure is not None
        assert session.failure.kind == FailureKind.EMPTY_QUERY

    @pytest.mark.asyncio
    async def test_not_found_message(self, session: DexSession) -> None:
        await session.search("missingno")

        assert session.error == 'Pokémon "missingno" not found.'
        assert session.record is None

    @pytest.mark.asyncio
    async def test_next_search_clears_error(self, session: DexSession) -> None:
        await session.search("missingno")

        await session.search("pikachu")

        assert session.error == ""
        assert session.failure is None

    @pytest.mark.asyncio
    async def test_random_search(self, session: DexSession) -> None:
        result = await session.search_random(random.Random(3))

        assert result is not None
        assert session.query.isdigit()
        assert 1 <= int(session.query) <= 1010
        assert result.record.id == int(session.query)

    @pytest.mark.asyncio
    async def test_view_from_browser_switches_tab(self, session: DexSession) -> None:
        session.active_tab = Tab.POKEDEX

        await session.view_from_browser("bulbasaur")

        assert session.active_tab is Tab.SEARCH
        assert session.record is not None
        assert session.record.name == "bulbasaur"


class TestShiny:
    @pytest.mark.asyncio
    async def test_toggle_shiny_sprite(self, session: DexSession) -> None:
        await session.search("pikachu")

        assert session.sprite() == "https://sprites.example/25.png"
        session.toggle_shiny()
        assert session.sprite() == "https://sprites.example/shiny/25.png"

    @pytest.mark.asyncio
    async def test_new_search_resets_shiny(self, session: DexSession) -> None:
        await session.search("pikachu")
        session.toggle_shiny()

        await session.search("bulbasaur")

        assert session.show_shiny is False

    def test_no_record_no_sprite(self, session: DexSession) -> None:
        assert session.sprite() is None


class TestCollections:
    @pytest.mark.asyncio
    async def test_favorite_toggle_scenario(self, session: DexSession) -> None:
        await session.search("pikachu")

        assert session.toggle_favorite() is True
        assert [fav.id for fav in session.store.favorites] == [25]
        assert session.is_favorite()

        assert session.toggle_favorite() is False
        assert session.store.favorites == ()

    def test_toggle_without_record(self, session: DexSession) -> None:
        assert session.toggle_favorite() is None
        assert session.add_to_team() is False
        assert session.add_to_compare() is False

    @pytest.mark.asyncio
    async def test_full_team_scenario(self, session: DexSession) -> None:
        for creature_id in range(1, 7):
            await session.search(str(creature_id))
            assert session.add_to_team() is True

        await session.search("7")
        assert session.add_to_team() is False

        assert session.error == "Team is full! Maximum 6 Pokémon allowed."
        assert len(session.store.team) == 6

    @pytest.mark.asyncio
    async def test_duplicate_team_member(self, session: DexSession) -> None:
        await session.search("pikachu")
        session.add_to_team()

        assert session.add_to_team() is False
        assert session.error == "This Pokémon is already in your team!"
        assert session.is_in_team()

    @pytest.mark.asyncio
    async def test_team_success_clears_error(self, session: DexSession) -> None:
        await session.search("pikachu")
        session.add_to_team()
        session.add_to_team()

        session.remove_from_team(25)
        assert session.add_to_team() is True
        assert session.error == ""

    @pytest.mark.asyncio
    async def test_team_entry_keeps_stats(self, session: DexSession) -> None:
        await session.search("pikachu")
        session.add_to_team()

        member = session.store.team[0]
        assert member.stats is not None
        assert member.height is None

    @pytest.mark.asyncio
    async def test_compare_limit(self, session: DexSession) -> None:
        for creature_id in range(1, 5):
            await session.search(str(creature_id))
            session.add_to_compare()

        await session.search("5")
        assert session.add_to_compare() is False

        assert session.error == "Maximum 4 Pokémon can be compared at once."
        assert session.store.compare[0].height == 4

    @pytest.mark.asyncio
    async def test_remove_and_clear(self, session: DexSession) -> None:
        await session.search("pikachu")
        session.add_to_compare()
        session.add_to_team()

        session.remove_from_compare(25)
        session.clear(CollectionKind.TEAM)

        assert session.store.compare == ()
        assert session.store.team == ()

    @pytest.mark.asyncio
    async def test_suggestions(self, session: DexSession) -> None:
        await session.search("bulbasaur")
        session.toggle_favorite()
        await session.search("pikachu")
        session.toggle_favorite()
        await session.search("3")

        assert session.suggestions() == ["creature-3", "pikachu", "bulbasaur"]


class TestTabs:
    @pytest.mark.asyncio
    async def test_pokedex_tab_loads_index_once(
        self, session: DexSession, client: StubClient
    ) -> None:
        await session.open_tab(Tab.POKEDEX)
        await session.open_tab(Tab.TEAM)
        await session.open_tab(Tab.POKEDEX)

        assert client.index_calls == 1
        assert [item.name for item in session.browse.current_items()] == ["bulbasaur", "ivysaur"]
        assert session.loading is False

    @pytest.mark.asyncio
    async def test_index_failure_sets_error(
        self, make_record: MakeRecord, store: CollectionStore
    ) -> None:
        client = StubClient(make_record, index=None)
        session = DexSession(client, store)  # type: ignore[arg-type]

        await session.open_tab(Tab.POKEDEX)

        assert session.error == "Failed to load Pokémon list"
        assert session.failure is not None
        assert session.failure.kind == FailureKind.SERVICE_UNAVAILABLE
        assert session.loading is False

        # Retried on the next visit since nothing was loaded
        await session.open_tab(Tab.POKEDEX)
        assert client.index_calls == 2

    @pytest.mark.asyncio
    async def test_open_tab_accepts_value(self, session: DexSession) -> None:
        await session.open_tab("favorites")  # type: ignore[arg-type]

        assert session.active_tab is Tab.FAVORITES
