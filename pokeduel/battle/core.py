"""Battle core: hit rolls, damage, HP clamping.

No stats, types or status effects: every combatant starts at 300 HP and a
hit deals a power-scaled roll with a flat floor of 10.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Callable, List
import random

from pokeduel.core.types import display_name
from pokeduel.data.models import Move

HP_START = 300
MIN_DAMAGE = 10
VARIANCE_MIN = 85  # percent
VARIANCE_MAX = 100

def clamp(n: int, lo: int, hi: int) -> int: return max(lo, min(hi, n))

@dataclass
class Combatant:
    name: str
    moves: List[Move] = field(default_factory=list)
    hp: int = HP_START
    max_hp: int = HP_START

    def __post_init__(self):
        self.hp = clamp(int(self.hp), 0, self.max_hp)

    @property
    def fainted(self) -> bool:
        return self.hp <= 0

    @property
    def display_name(self) -> str:
        return display_name(self.name)

@dataclass(frozen=True)
class TurnEvent:
    attacker: str
    defender: str
    move: Move
    hit: bool
    damage: int
    defender_hp: int

    def narration(self) -> str:
        if not self.hit:
            return f"{self.attacker} used {self.move.display_name}, but it missed!"
        return f"{self.attacker} used {self.move.display_name} for {self.damage} damage."

class BattleCore:
    def __init__(self, rng: Optional[random.Random] = None, event_cb: Optional[Callable[[TurnEvent], None]] = None):
        self.rng = rng or random.Random()
        # Optional observer for the UI (narration, HP bars)
        self.event_cb = event_cb

    def roll_hit(self, move: Move) -> bool:
        return self.rng.randint(1, 100) <= move.accuracy

    def roll_damage(self, move: Move) -> int:
        pct = self.rng.randint(VARIANCE_MIN, VARIANCE_MAX)
        # power * pct / 100 rounded half-up, in integers to avoid float drift
        raw = (max(0, move.power) * pct + 50) // 100
        return max(MIN_DAMAGE, raw)

    def apply_damage(self, target: Combatant, amount: int) -> int:
        target.hp = clamp(target.hp - amount, 0, target.max_hp)
        return target.hp

    def execute(self, attacker: Combatant, defender: Combatant, move: Move) -> TurnEvent:
        hit = self.roll_hit(move)
        dmg = 0
        if hit:
            dmg = self.roll_damage(move)
            self.apply_damage(defender, dmg)
        ev = TurnEvent(attacker.display_name, defender.display_name, move, hit, dmg, defender.hp)
        if self.event_cb:
            self.event_cb(ev)
        return ev

__all__ = ["HP_START","MIN_DAMAGE","Combatant","TurnEvent","BattleCore","clamp"]
