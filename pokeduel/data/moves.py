"""Move curation: raw move references -> ranked, battle-usable moves.

Resolution failures are not fatal here. Every dropped move is reported in
``CurationResult.skipped`` with a reason so callers can tell how much of a
creature's move list was unusable.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from pokeduel.core.errors import InsufficientMoves, NotFound, TransportError
from pokeduel.core.logging import logger
from .models import Creature, Move

MOVES_PER_COMBATANT = 5
DEFAULT_MAX_CANDIDATES = 60

@dataclass(frozen=True)
class SkippedMove:
    name: str
    reason: str

@dataclass(frozen=True)
class CurationResult:
    creature: str
    moves: Tuple[Move, ...]
    skipped: Tuple[SkippedMove, ...] = ()

    def __len__(self) -> int:
        return len(self.moves)

    def require(self, count: int = MOVES_PER_COMBATANT) -> Tuple[Move, ...]:
        if len(self.moves) < count:
            raise InsufficientMoves(self.creature, len(self.moves), count)
        return self.moves

    def top(self, n: int) -> Tuple[Move, ...]:
        return self.moves[:n]

def curate_moves(client, creature: Creature, max_candidates: int = DEFAULT_MAX_CANDIDATES) -> CurationResult:
    skipped: List[SkippedMove] = []
    offensive: List[Move] = []
    for ref in creature.moves[:max_candidates]:
        try:
            mv = client.get_move(ref.url)
        except (NotFound, TransportError) as e:
            skipped.append(SkippedMove(ref.name, str(e)))
            continue
        if mv.damage_class == "status":
            skipped.append(SkippedMove(mv.name, "status move"))
        elif mv.power <= 0:
            skipped.append(SkippedMove(mv.name, "no power"))
        else:
            offensive.append(mv)
    # Sorting first means a duplicate always keeps its strongest instance
    offensive.sort(key=lambda m: m.power, reverse=True)
    seen: set[str] = set()
    unique: List[Move] = []
    for mv in offensive:
        if mv.name in seen:
            skipped.append(SkippedMove(mv.name, "duplicate"))
            continue
        seen.add(mv.name)
        unique.append(mv)
    logger.info("MovesCurated", creature=creature.name, usable=len(unique), skipped=len(skipped))
    return CurationResult(creature.name, tuple(unique), tuple(skipped))

__all__ = ["SkippedMove","CurationResult","curate_moves","MOVES_PER_COMBATANT","DEFAULT_MAX_CANDIDATES"]
