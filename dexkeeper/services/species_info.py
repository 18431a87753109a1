"""
Pure helpers deriving display data from species metadata and evolution chains.
"""

import logging
from dataclasses import dataclass

from dexkeeper.models.creature import ChainLink, EvolutionChain, SpeciesInfo, parse_resource_id

logger = logging.getLogger(__name__)

# Longest real chain has 3 stages; anything past this is bad data
MAX_EVOLUTION_HOPS = 16

# PokeAPI flavor text separates lines with form feeds, sometimes escaped
_FORM_FEEDS = ("\\f", "\f")


def flavor_text(species: SpeciesInfo | None, language: str = "en") -> str:
    """
    Return the first flavor text entry in `language`, form feeds replaced by spaces.

    Returns:
        The cleaned text, or "" if species is absent or has no such entry
    """
    if species is None:
        return ""

    for entry in species.flavor_text_entries:
        if entry.language.name == language:
            text = entry.flavor_text
            for separator in _FORM_FEEDS:
                text = text.replace(separator, " ")
            return text

    return ""


@dataclass(frozen=True, slots=True)
class EvolutionStage:
    """One stage of an evolution sequence."""

    name: str
    id: int | None


@dataclass(slots=True)
class EvolutionNode:
    """Linked form of an evolution chain: each node points at its first next stage."""

    name: str
    id: int | None
    next: "EvolutionNode | None" = None


def link_chain(chain: EvolutionChain | None) -> EvolutionNode | None:
    """
    Flatten the nested chain into a linked list along first `evolves_to` links.

    Branches other than the first are dropped. The walk stops after
    MAX_EVOLUTION_HOPS stages or on revisiting a link.
    """
    if chain is None:
        return None

    head: EvolutionNode | None = None
    tail: EvolutionNode | None = None
    visited: set[int] = set()
    link: ChainLink | None = chain.chain

    while link is not None:
        if id(link) in visited or len(visited) >= MAX_EVOLUTION_HOPS:
            logger.warning("Evolution chain truncated after %d stages", len(visited))
            break
        visited.add(id(link))

        node = EvolutionNode(name=link.species.name, id=parse_resource_id(link.species.url))
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node

        link = link.evolves_to[0] if link.evolves_to else None

    return head


def evolution_sequence(chain: EvolutionChain | None) -> list[EvolutionStage]:
    """
    Ordered stages of an evolution chain, root first.

    Example: bulbasaur chain -> [bulbasaur(1), ivysaur(2), venusaur(3)]
    """
    stages: list[EvolutionStage] = []
    node = link_chain(chain)
    while node is not None:
        stages.append(EvolutionStage(name=node.name, id=node.id))
        node = node.next
    return stages
