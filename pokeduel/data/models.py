"""Immutable records parsed from PokeAPI responses.

Only the fields the battle needs are kept; missing optional values fall back
to the same defaults the game always used (accuracy 100, power 0, pp 99).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from pokeduel.core.types import display_name

@dataclass(frozen=True)
class MoveRef:
    name: str
    url: str

@dataclass(frozen=True)
class Creature:
    id: int
    name: str
    moves: Tuple[MoveRef, ...] = ()

    @property
    def display_name(self) -> str:
        return display_name(self.name)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Creature":
        refs = []
        for entry in data.get("moves") or []:
            mv = entry.get("move") if isinstance(entry, dict) else None
            if isinstance(mv, dict) and mv.get("name"):
                refs.append(MoveRef(name=mv["name"], url=mv.get("url") or mv["name"]))
        return cls(id=int(data["id"]), name=data["name"], moves=tuple(refs))

@dataclass(frozen=True)
class Move:
    id: int
    name: str
    accuracy: int = 100
    power: int = 0
    pp: int = 99
    type: str = "unknown"
    damage_class: str = "status"  # physical | special | status

    @property
    def display_name(self) -> str:
        return display_name(self.name)

    @property
    def is_offensive(self) -> bool:
        return self.damage_class != "status" and self.power > 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Move":
        def _named(key: str, default: str) -> str:
            val = data.get(key)
            if isinstance(val, dict) and val.get("name"):
                return val["name"]
            return default
        acc = data.get("accuracy")
        power = data.get("power")
        pp = data.get("pp")
        return cls(
            id=int(data["id"]),
            name=data["name"],
            accuracy=100 if acc is None else int(acc),
            power=0 if power is None else int(power),
            pp=99 if pp is None else int(pp),
            type=_named("type", "unknown"),
            damage_class=_named("damage_class", "status"),
        )

__all__ = ["MoveRef","Creature","Move"]
