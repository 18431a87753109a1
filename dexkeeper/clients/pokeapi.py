"""
PokeAPI client.

Read-only access to creature records, species metadata, evolution chains
and the creature index. Plain request/response: no retries, no caching.
Every request is bounded by the client timeout.

API docs: https://pokeapi.co/docs/v2
"""

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from dexkeeper.config import settings
from dexkeeper.models.creature import (
    CreatureIndex,
    CreatureIndexEntry,
    CreatureRecord,
    EvolutionChain,
    SpeciesInfo,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class FetchError(Exception):
    """
    Raised when a PokeAPI request fails.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status of the response, None if no response arrived
    """

    def __init__(self, message: str, url: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class PokeApiClient:
    """
    Async PokeAPI client.

    Pass an existing httpx.AsyncClient to share a connection pool; otherwise
    the client owns one and closes it in `aclose()`.
    """

    def __init__(
        self,
        http: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        index_limit: int | None = None,
    ) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.index_limit = index_limit if index_limit is not None else settings.index_limit
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.request_timeout,
            headers={"User-Agent": user_agent or settings.user_agent},
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "PokeApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        logger.debug("GET %s", url)
        try:
            response = await self._http.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Request to {url} failed: HTTP {e.response.status_code}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise FetchError(f"Request to {url} failed: {e!r}", url=url) from e
        except ValueError as e:
            # Body was not JSON
            raise FetchError(f"Request to {url} returned invalid JSON", url=url) from e

    async def _get_model(
        self, model: type[M], url: str, params: dict[str, Any] | None = None
    ) -> M:
        data = await self._get_json(url, params)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise FetchError(
                f"Unexpected {model.__name__} payload from {url}: {e.error_count()} errors",
                url=url,
            ) from e

    async def fetch_creature(self, name_or_id: str | int) -> CreatureRecord:
        """
        Fetch a creature record by name (case-insensitive) or national dex number.

        Raises:
            FetchError: On non-success status, transport failure or bad payload
        """
        key = quote(str(name_or_id).strip().lower(), safe="")
        return await self._get_model(CreatureRecord, f"{self.base_url}/pokemon/{key}")

    async def fetch_species(self, creature_id: int) -> SpeciesInfo:
        """
        Fetch species metadata (flavor text, evolution chain link).

        Raises:
            FetchError: On any failure
        """
        return await self._get_model(SpeciesInfo, f"{self.base_url}/pokemon-species/{creature_id}")

    async def fetch_evolution_chain(self, url: str) -> EvolutionChain:
        """
        Fetch an evolution chain by the absolute URL found on species metadata.

        Raises:
            FetchError: On any failure
        """
        return await self._get_model(EvolutionChain, url)

    async def fetch_creature_index(self, limit: int | None = None) -> list[CreatureIndexEntry]:
        """
        Fetch the name/URL list used for browsing.

        Args:
            limit: Maximum entries to return. Defaults to the client's index_limit

        Raises:
            FetchError: On any failure
        """
        params = {"limit": limit if limit is not None else self.index_limit}
        index = await self._get_model(CreatureIndex, f"{self.base_url}/pokemon", params)
        return index.results
