"""
Search controller.

Resolves a name or national dex number into a creature record plus its
species metadata and evolution chain, fetched strictly in that order.

Only the primary record is required. Species and evolution chain are
best-effort: a failure leaves them absent and the search still succeeds.

Searches do not cancel each other. Each call takes a ticket; when it
resolves, its outcome is applied only if no newer search has started since.
Superseded calls return None and touch neither the displayed state nor
the search history.
"""

import logging
from dataclasses import dataclass

from dexkeeper.clients.pokeapi import FetchError, PokeApiClient
from dexkeeper.models.creature import CreatureRecord, EvolutionChain, SpeciesInfo
from dexkeeper.models.failure import EmptyQueryError, FailureDetail, NotFoundError
from dexkeeper.services.collection_store import CollectionStore
from dexkeeper.services.species_info import EvolutionStage, evolution_sequence, flavor_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """A resolved search: the record plus whatever metadata could be fetched."""

    record: CreatureRecord
    species: SpeciesInfo | None = None
    evolution_chain: EvolutionChain | None = None

    def flavor_text(self) -> str:
        return flavor_text(self.species)

    def evolution(self) -> list[EvolutionStage]:
        return evolution_sequence(self.evolution_chain)


class SearchController:
    """
    Runs searches and holds the state of the latest one.

    Attributes:
        current: Result of the latest completed search, None while searching
            or after a failure
        failure: Why the latest search failed, if it did
        loading: True while the latest search is in flight
    """

    def __init__(self, client: PokeApiClient, store: CollectionStore) -> None:
        self._client = client
        self._store = store
        self._latest_ticket = 0
        self.current: SearchResult | None = None
        self.failure: FailureDetail | None = None
        self.loading = False

    def _issue_ticket(self) -> int:
        self._latest_ticket += 1
        return self._latest_ticket

    def _is_latest(self, ticket: int) -> bool:
        return ticket == self._latest_ticket

    async def _fetch_species(self, record: CreatureRecord) -> SpeciesInfo | None:
        try:
            return await self._client.fetch_species(record.id)
        except FetchError as e:
            logger.warning("Species unavailable for %s: %s", record.name, e)
            return None

    async def _fetch_evolution_chain(self, species: SpeciesInfo | None) -> EvolutionChain | None:
        if species is None or species.evolution_chain is None:
            return None
        try:
            return await self._client.fetch_evolution_chain(species.evolution_chain.url)
        except FetchError as e:
            logger.warning("Evolution chain unavailable: %s", e)
            return None

    async def search(self, query_text: str) -> SearchResult | None:
        """
        Search for a creature by name (case-insensitive) or id.

        Returns:
            The composed result, or None if a newer search started before
            this one finished

        Raises:
            EmptyQueryError: Query is blank; nothing is requested
            NotFoundError: Record lookup failed, whether the creature does not
                exist or the API could not be reached
        """
        query = query_text.strip()
        if not query:
            raise EmptyQueryError()

        ticket = self._issue_ticket()
        self.current = None
        self.failure = None
        self.loading = True

        try:
            try:
                record = await self._client.fetch_creature(query)
            except FetchError as e:
                if not self._is_latest(ticket):
                    logger.debug("Discarding failed superseded search %r", query)
                    return None
                error = NotFoundError(query, status_code=e.status_code, detail=str(e))
                self.failure = error.to_detail()
                raise error from e

            species = None
            chain = None
            if self._is_latest(ticket):
                species = await self._fetch_species(record)
            if self._is_latest(ticket):
                chain = await self._fetch_evolution_chain(species)

            if not self._is_latest(ticket):
                logger.debug("Discarding superseded search %r", query)
                return None

            self._store.add_history(record.name)
            result = SearchResult(record=record, species=species, evolution_chain=chain)
            self.current = result
            logger.info(
                "Resolved %r to #%d %s (species: %s, evolution chain: %s)",
                query,
                record.id,
                record.name,
                species is not None,
                chain is not None,
            )
            return result
        finally:
            if self._is_latest(ticket):
                self.loading = False
