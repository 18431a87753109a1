"""Formatting helpers for displaying creatures. No I/O."""

import random

from dexkeeper.config import RANDOM_ID_MAX, TEAM_LIMIT
from dexkeeper.models.creature import AbilitySlot

MAX_BASE_STAT = 255


def display_name(name: str) -> str:
    """Capitalize the first letter: "mr-mime" -> "Mr-mime"."""
    return name[:1].upper() + name[1:]


def format_dex_number(creature_id: int) -> str:
    """Zero-padded dex number: 25 -> "#025", 1010 -> "#1010"."""
    return f"#{creature_id:03d}"


def stat_label(stat_name: str) -> str:
    """Human label for an API stat name: "special-attack" -> "Special attack"."""
    return display_name(stat_name.replace("-", " ", 1))


def ability_label(slot: AbilitySlot) -> str:
    """Human label for an ability, hidden ones suffixed: "Lightning rod (Hidden)"."""
    label = display_name(slot.ability.name.replace("-", " ", 1))
    return f"{label} (Hidden)" if slot.is_hidden else label


def stat_percent(base_stat: int) -> float:
    """Bar width for a base stat as a percentage of the maximum (255)."""
    return min(max(base_stat, 0), MAX_BASE_STAT) / MAX_BASE_STAT * 100


def height_meters(height: int) -> float:
    """Convert API height (decimetres) to metres."""
    return height / 10


def weight_kilograms(weight: int) -> float:
    """Convert API weight (hectograms) to kilograms."""
    return weight / 10


def team_summary(team_size: int) -> str:
    return f"{team_size}/{TEAM_LIMIT}"


def random_creature_id(rng: random.Random | None = None) -> int:
    """Uniformly pick a national dex number in 1..RANDOM_ID_MAX."""
    return (rng or random).randint(1, RANDOM_ID_MAX)
