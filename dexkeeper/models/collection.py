from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from dexkeeper.models.creature import CreatureRecord


class CollectionKind(str, Enum):
    """The four bounded collections a user keeps."""

    HISTORY = "history"
    FAVORITES = "favorites"
    TEAM = "team"
    COMPARE = "compare"


class StatValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: int = Field(ge=0, le=255)


class CollectionEntry(BaseModel):
    """
    A trimmed copy of a CreatureRecord kept in a collection.

    Fields beyond id/name/sprite/types are only filled for the collection
    kinds that display them (stats for team and compare, height and weight
    for compare). Entries are never edited, only added and removed.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str
    sprite: str | None = None
    types: list[str] = Field(default_factory=list)
    stats: list[StatValue] | None = None
    height: int | None = None
    weight: int | None = None


def _stats_of(record: CreatureRecord) -> list[StatValue]:
    return [StatValue(name=slot.stat.name, value=slot.base_stat) for slot in record.stats]


def favorite_entry(record: CreatureRecord) -> CollectionEntry:
    """Projection stored in favorites: identity, sprite and types."""
    return CollectionEntry(
        id=record.id,
        name=record.name,
        sprite=record.sprite,
        types=record.type_names,
    )


def team_entry(record: CreatureRecord) -> CollectionEntry:
    """Projection stored in the team: favorites fields plus stats."""
    return CollectionEntry(
        id=record.id,
        name=record.name,
        sprite=record.sprite,
        types=record.type_names,
        stats=_stats_of(record),
    )


def compare_entry(record: CreatureRecord) -> CollectionEntry:
    """Projection stored in the comparison: team fields plus height and weight."""
    return CollectionEntry(
        id=record.id,
        name=record.name,
        sprite=record.sprite,
        types=record.type_names,
        stats=_stats_of(record),
        height=record.height,
        weight=record.weight,
    )
