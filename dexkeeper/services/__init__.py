"""
dexkeeper services.

Collection management, search orchestration and browsing.
"""

from dexkeeper.services.browse import BrowseItem, BrowseState
from dexkeeper.services.collection_store import CollectionStore
from dexkeeper.services.presentation import (
    ability_label,
    display_name,
    format_dex_number,
    height_meters,
    random_creature_id,
    stat_label,
    stat_percent,
    team_summary,
    weight_kilograms,
)
from dexkeeper.services.search_controller import SearchController, SearchResult
from dexkeeper.services.species_info import (
    MAX_EVOLUTION_HOPS,
    EvolutionNode,
    EvolutionStage,
    evolution_sequence,
    flavor_text,
    link_chain,
)

__all__ = [
    "BrowseItem",
    "BrowseState",
    "CollectionStore",
    "EvolutionNode",
    "EvolutionStage",
    "MAX_EVOLUTION_HOPS",
    "SearchController",
    "SearchResult",
    "ability_label",
    "display_name",
    "evolution_sequence",
    "flavor_text",
    "format_dex_number",
    "height_meters",
    "link_chain",
    "random_creature_id",
    "stat_label",
    "stat_percent",
    "team_summary",
    "weight_kilograms",
]
