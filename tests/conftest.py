from collections.abc import Callable
from typing import Any

import pytest

from dexkeeper.models.collection import CollectionEntry
from dexkeeper.models.creature import CreatureRecord
from dexkeeper.services.collection_store import CollectionStore
from dexkeeper.storage.memory import InMemoryStorage

API = "https://pokeapi.co/api/v2"


def creature_payload(creature_id: int, name: str) -> dict[str, Any]:
    """Minimal /pokemon/{id} response."""
    return {
        "id": creature_id,
        "name": name,
        "height": 4,
        "weight": 60,
        "base_experience": 112,
        "sprites": {
            "front_default": f"https://sprites.example/{creature_id}.png",
            "front_shiny": f"https://sprites.example/shiny/{creature_id}.png",
        },
        "types": [{"slot": 1, "type": {"name": "electric", "url": f"{API}/type/13/"}}],
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": f"{API}/stat/1/"}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": f"{API}/stat/2/"}},
            {
                "base_stat": 50,
                "effort": 0,
                "stat": {"name": "special-attack", "url": f"{API}/stat/4/"},
            },
        ],
        "abilities": [
            {"ability": {"name": "static", "url": f"{API}/ability/9/"}, "is_hidden": False},
            {"ability": {"name": "lightning-rod", "url": f"{API}/ability/31/"}, "is_hidden": True},
        ],
    }


@pytest.fixture
def pikachu_payload() -> dict[str, Any]:
    return creature_payload(25, "pikachu")


@pytest.fixture
def species_payload() -> dict[str, Any]:
    """Trimmed /pokemon-species/25 response."""
    return {
        "flavor_text_entries": [
            {
                "flavor_text": "ピカチュウ",
                "language": {"name": "ja", "url": f"{API}/language/1/"},
            },
            {
                "flavor_text": (
                    "When several of\fthese POKéMON gather,\ftheir electricity could build."
                ),
                "language": {"name": "en", "url": f"{API}/language/9/"},
            },
        ],
        "evolution_chain": {"url": f"{API}/evolution-chain/10/"},
    }


@pytest.fixture
def chain_payload() -> dict[str, Any]:
    """Trimmed /evolution-chain/10 response (pichu -> pikachu -> raichu)."""
    return {
        "id": 10,
        "chain": {
            "species": {"name": "pichu", "url": f"{API}/pokemon-species/172/"},
            "evolves_to": [
                {
                    "species": {"name": "pikachu", "url": f"{API}/pokemon-species/25/"},
                    "evolves_to": [
                        {
                            "species": {"name": "raichu", "url": f"{API}/pokemon-species/26/"},
                            "evolves_to": [],
                        }
                    ],
                }
            ],
        },
    }


@pytest.fixture
def make_entry() -> Callable[..., CollectionEntry]:
    def _make(entry_id: int, name: str | None = None) -> CollectionEntry:
        return CollectionEntry(
            id=entry_id,
            name=name or f"creature-{entry_id}",
            sprite=f"https://sprites.example/{entry_id}.png",
            types=["normal"],
        )

    return _make


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage: InMemoryStorage) -> CollectionStore:
    collection_store = CollectionStore(storage)
    collection_store.load_all()
    return collection_store


@pytest.fixture
def make_record() -> Callable[[int, str], CreatureRecord]:
    def _make(creature_id: int, name: str) -> CreatureRecord:
        return CreatureRecord.model_validate(creature_payload(creature_id, name))

    return _make
