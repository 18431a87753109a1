from dexkeeper.models.collection import (
    CollectionEntry,
    CollectionKind,
    StatValue,
    compare_entry,
    favorite_entry,
    team_entry,
)
from dexkeeper.models.creature import (
    AbilitySlot,
    ChainLink,
    CreatureIndex,
    CreatureIndexEntry,
    CreatureRecord,
    EvolutionChain,
    FlavorTextEntry,
    NamedResource,
    SpeciesInfo,
    Sprites,
    StatSlot,
    TypeSlot,
    parse_resource_id,
)
from dexkeeper.models.failure import (
    CollectionFullError,
    DuplicateEntryError,
    EmptyQueryError,
    FailureDetail,
    FailureKind,
    KnownError,
    NotFoundError,
)

__all__ = [
    "AbilitySlot",
    "ChainLink",
    "CollectionEntry",
    "CollectionFullError",
    "CollectionKind",
    "CreatureIndex",
    "CreatureIndexEntry",
    "CreatureRecord",
    "DuplicateEntryError",
    "EmptyQueryError",
    "EvolutionChain",
    "FailureDetail",
    "FailureKind",
    "FlavorTextEntry",
    "KnownError",
    "NamedResource",
    "NotFoundError",
    "SpeciesInfo",
    "Sprites",
    "StatSlot",
    "StatValue",
    "TypeSlot",
    "compare_entry",
    "favorite_entry",
    "parse_resource_id",
    "team_entry",
]
