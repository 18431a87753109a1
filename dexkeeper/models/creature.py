"""
Wire models for PokeAPI payloads.

Only the fields the application reads are declared; everything else in the
payload is ignored. Instances are immutable once validated.
"""

from pydantic import BaseModel, ConfigDict, Field


def parse_resource_id(url: str | None) -> int | None:
    """
    Extract the identifier from a PokeAPI resource URL.

    Example: "https://pokeapi.co/api/v2/pokemon-species/25/" -> 25

    Returns:
        The trailing numeric path segment, or None if there is none
    """
    if not url:
        return None
    segment = url.rstrip("/").rsplit("/", 1)[-1]
    return int(segment) if segment.isdigit() else None


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class NamedResource(_WireModel):
    """A {name, url} reference to another resource."""

    name: str
    url: str | None = None


class ResourceLink(_WireModel):
    url: str


class TypeSlot(_WireModel):
    slot: int = 0
    type: NamedResource


class StatSlot(_WireModel):
    stat: NamedResource
    base_stat: int = Field(ge=0, le=255)


class AbilitySlot(_WireModel):
    ability: NamedResource
    is_hidden: bool = False


class Sprites(_WireModel):
    front_default: str | None = None
    front_shiny: str | None = None


class CreatureRecord(_WireModel):
    """
    A creature as returned by GET /pokemon/{nameOrId}.

    Attributes:
        id: National dex number (positive)
        name: Lower-case API name, unique per id
        types: Typed categories in slot order
        stats: Base stats (0-255 each)
        abilities: Abilities with hidden flag
        height: Decimetres
        weight: Hectograms
        sprites: Normal and shiny front sprites, either may be absent
        base_experience: Experience yield, absent for some forms
    """

    id: int = Field(gt=0)
    name: str
    types: list[TypeSlot] = Field(default_factory=list)
    stats: list[StatSlot] = Field(default_factory=list)
    abilities: list[AbilitySlot] = Field(default_factory=list)
    height: int = 0
    weight: int = 0
    sprites: Sprites = Field(default_factory=Sprites)
    base_experience: int | None = None

    @property
    def type_names(self) -> list[str]:
        return [slot.type.name for slot in self.types]

    @property
    def sprite(self) -> str | None:
        return self.sprites.front_default

    @property
    def shiny_sprite(self) -> str | None:
        return self.sprites.front_shiny


class FlavorTextEntry(_WireModel):
    flavor_text: str
    language: NamedResource


class SpeciesInfo(_WireModel):
    """Species metadata from GET /pokemon-species/{id}."""

    flavor_text_entries: list[FlavorTextEntry] = Field(default_factory=list)
    evolution_chain: ResourceLink | None = None


class ChainLink(_WireModel):
    """One stage of an evolution chain with its possible next stages."""

    species: NamedResource
    evolves_to: list["ChainLink"] = Field(default_factory=list)


class EvolutionChain(_WireModel):
    """Evolution chain from GET {evolution_chain.url}."""

    id: int | None = None
    chain: ChainLink


class CreatureIndexEntry(_WireModel):
    """One row of the creature list (GET /pokemon?limit=N)."""

    name: str
    url: str

    @property
    def id(self) -> int | None:
        return parse_resource_id(self.url)


class CreatureIndex(_WireModel):
    results: list[CreatureIndexEntry] = Field(default_factory=list)
