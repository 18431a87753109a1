"""Creature lookup with locally kept search history, favorites, team and comparison."""

from dexkeeper.main import configure_logging, open_session
from dexkeeper.session import DexSession, Tab

__all__ = [
    "DexSession",
    "Tab",
    "configure_logging",
    "open_session",
]
