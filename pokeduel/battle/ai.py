from __future__ import annotations
import random
from .core import Combatant

def choose_move_index(user: Combatant, rng: random.Random) -> int:
    """Uniform pick among the combatant's moves; no memory between turns."""
    return rng.randrange(len(user.moves))
