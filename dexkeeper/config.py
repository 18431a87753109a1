from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DEXKEEPER_")

    api_base_url: str = "https://pokeapi.co/api/v2"

    # Seconds; applies to every request of a search
    request_timeout: float = 10.0

    user_agent: str = "dexkeeper/1.0"

    # Directory holding one JSON blob per persisted collection
    storage_dir: Path = Path(".dexkeeper")

    index_limit: int = 1000


settings = Settings()


# =============================================================================
# COLLECTION LIMITS
# =============================================================================

HISTORY_LIMIT = 10
FAVORITES_LIMIT = 20
TEAM_LIMIT = 6
COMPARE_LIMIT = 4


# =============================================================================
# STORAGE KEYS
# =============================================================================

HISTORY_KEY = "pokemonSearchHistory"
FAVORITES_KEY = "pokemonFavorites"
TEAM_KEY = "pokemonTeam"


# =============================================================================
# BROWSING
# =============================================================================

PAGE_SIZE = 20

# Highest national dex number picked by a random search
RANDOM_ID_MAX = 1010

SPRITE_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/{id}.png"
)
