import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dexkeeper.clients.pokeapi import PokeApiClient
from dexkeeper.config import Settings, settings
from dexkeeper.services.collection_store import CollectionStore
from dexkeeper.session import DexSession
from dexkeeper.storage.base import StoragePort
from dexkeeper.storage.json_file import JsonFileStorage


def configure_logging(level: int = logging.INFO) -> None:
    """Log to stderr in the standard format. For scripts and notebooks embedding a session."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def open_session(
    config: Settings | None = None,
    storage: StoragePort | None = None,
) -> AsyncIterator[DexSession]:
    """
    Build a ready-to-use session and close its HTTP client on exit.

    Collections are loaded from storage before the session is yielded.
    """
    config = config or settings
    client = PokeApiClient(
        base_url=config.api_base_url,
        timeout=config.request_timeout,
        user_agent=config.user_agent,
        index_limit=config.index_limit,
    )
    store = CollectionStore(storage or JsonFileStorage(config.storage_dir))
    store.load_all()

    try:
        yield DexSession(client, store)
    finally:
        await client.aclose()
