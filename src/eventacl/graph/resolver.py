"""Permission closure over the relationship graph."""

from __future__ import annotations

import logging
from datetime import date

from eventacl.repositories import resolve
from eventacl.repositories.protocols import RelationshipRepository

logger = logging.getLogger(__name__)


class RelationshipGraphResolver:
    """Computes every party a seed party may edit through relationships.

    Breadth-first: the first round collects the seed's direct grants, each
    further round asks the relationship source for the neighbours of the
    whole current result set, and the loop stops once a round adds nothing.
    The party universe is finite and the set only grows, so it terminates
    on cycles too.

    The seed itself is never part of its own closure, even when a cycle
    leads back to it.

    Works with the in-memory ``RelationshipStore`` (sync) and
    ``PostgresRelationshipRepository`` (async).
    """

    def __init__(self, relationships: RelationshipRepository) -> None:
        self._relationships = relationships

    async def resolve(self, seed: int | None, as_of: date | None = None) -> set[int]:
        if not seed or seed <= 0:
            return set()
        # One timestamp for every round.
        day = as_of or date.today()

        result: set[int] = set(
            await resolve(self._relationships.permitted_neighbors({seed}, day))
        )
        result.discard(seed)
        rounds = 1
        while True:
            found = await resolve(self._relationships.permitted_neighbors(result, day))
            new = found - result - {seed}
            if not new:
                break
            result |= new
            rounds += 1
            logger.debug("Closure of %s round %d added %d parties", seed, rounds, len(new))

        logger.debug(
            "Closure of %s at %s: %d parties in %d rounds", seed, day, len(result), rounds
        )
        return result
