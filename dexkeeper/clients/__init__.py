from dexkeeper.clients.pokeapi import FetchError, PokeApiClient

__all__ = [
    "FetchError",
    "PokeApiClient",
]
