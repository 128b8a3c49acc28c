"""Factory helpers for building combatants from PokeAPI data.

Shared by the CLI and the setup tests.
"""
from __future__ import annotations
import random
from typing import Sequence, Tuple

from pokeduel.core.errors import InsufficientMoves, NotFound
from pokeduel.core.logging import logger
from pokeduel.data.models import Creature, Move
from pokeduel.data.moves import CurationResult, curate_moves, MOVES_PER_COMBATANT
from .core import Combatant

# Bot opponents are drawn from the original 151
RANDOM_ID_MIN = 1
RANDOM_ID_MAX = 151

def random_creature_id(rng: random.Random) -> int:
    return rng.randint(RANDOM_ID_MIN, RANDOM_ID_MAX)

def new_combatant(creature: Creature, moves: Sequence[Move] = ()) -> Combatant:
    return Combatant(name=creature.name, moves=list(moves))

def load_player(client, name: str, settings) -> Tuple[Creature, CurationResult]:
    """Resolve the player's creature and make sure it can field 5 moves.

    Raises NotFound / TransportError when the creature cannot be fetched and
    InsufficientMoves when too few offensive moves survive curation.
    """
    creature = client.get_creature(name)
    result = curate_moves(client, creature, settings.data.max_candidates)
    result.require(MOVES_PER_COMBATANT)
    return creature, result

def build_bot(client, rng: random.Random, settings) -> Tuple[Creature, Tuple[Move, ...]]:
    """Draw random creatures until one can field 5 distinct moves.

    Attempts are capped by ``bot_max_attempts``. A creature id the provider
    does not know uses up an attempt; a TransportError propagates since the
    provider itself is unavailable.
    """
    attempts = settings.data.bot_max_attempts
    last_found = 0
    last_name = "random opponent"
    for attempt in range(1, attempts + 1):
        cid = random_creature_id(rng)
        try:
            creature = client.get_creature(cid)
        except NotFound as e:
            logger.warn("BotCreatureMissing", id=cid, attempt=attempt, error=str(e))
            continue
        pool = curate_moves(client, creature, settings.data.max_candidates).top(settings.data.bot_pool_size)
        if len(pool) >= MOVES_PER_COMBATANT:
            chosen = tuple(rng.sample(list(pool), MOVES_PER_COMBATANT))
            logger.info("BotReady", creature=creature.name, attempt=attempt)
            return creature, chosen
        last_found, last_name = len(pool), creature.name
        logger.warn("BotRedraw", creature=creature.name, usable=len(pool), attempt=attempt)
    raise InsufficientMoves(last_name, last_found, MOVES_PER_COMBATANT)

__all__ = ["random_creature_id","new_combatant","load_player","build_bot"]
