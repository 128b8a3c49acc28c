"""
Battle system package.
- core.py (combatants, hit/damage rolls)
- session.py (turn order, state machine, outcome)
- ai.py (opponent move choice)
- factory.py (building combatants from PokeAPI data)
"""
from .core import BattleCore, Combatant, TurnEvent
from .session import BattleSession, classify_outcome
__all__ = ["BattleCore","Combatant","TurnEvent","BattleSession","classify_outcome"]
