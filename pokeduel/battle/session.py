"""Turn orchestration for a single player-vs-bot battle.

States: SELECTING_MOVES -> IN_PROGRESS -> CONCLUDED. The player always acts
first; a bot knocked out in the player's half does not act that turn.
"""
from __future__ import annotations
from typing import List, Literal, Optional, Sequence

from pokeduel.core.errors import BattleStateError, InvalidSelection
from pokeduel.core.logging import logger
from pokeduel.data.models import Move
from .ai import choose_move_index
from .core import BattleCore, Combatant, TurnEvent

MOVES_PER_SIDE = 5

State = Literal["SELECTING_MOVES","IN_PROGRESS","CONCLUDED"]
Outcome = Literal["PLAYER_WIN","PLAYER_LOSS","DRAW","ONGOING"]
Side = Literal["player","bot"]

def classify_outcome(player_hp: int, bot_hp: int) -> Outcome:
    if player_hp <= 0 and bot_hp <= 0:
        return "DRAW"
    if player_hp <= 0:
        return "PLAYER_LOSS"
    if bot_hp <= 0:
        return "PLAYER_WIN"
    return "ONGOING"

class BattleSession:
    def __init__(self, player: Combatant, bot: Combatant, core: Optional[BattleCore] = None):
        self.player = player
        self.bot = bot
        self.core = core or BattleCore()
        self.turn_counter = 0
        self.log: List[str] = []
        self.state: State = "SELECTING_MOVES"
        self._refresh_state()

    def _has_moves(self, c: Combatant) -> bool:
        return len(c.moves) == MOVES_PER_SIDE

    def _refresh_state(self):
        if self.state == "SELECTING_MOVES" and self._has_moves(self.player) and self._has_moves(self.bot):
            self.state = "IN_PROGRESS"
            logger.debug("BattleStart", player=self.player.name, bot=self.bot.name)

    def assign_moves(self, side: Side, moves: Sequence[Move]):
        if self.state != "SELECTING_MOVES":
            raise BattleStateError(f"Moves are locked once the battle has started (state={self.state})")
        if len(moves) != MOVES_PER_SIDE:
            raise InvalidSelection(str(len(moves)), MOVES_PER_SIDE, MOVES_PER_SIDE)
        target = self.player if side == "player" else self.bot
        target.moves = list(moves)
        self._refresh_state()

    def is_over(self) -> bool:
        return self.state == "CONCLUDED"

    def _act(self, attacker: Combatant, defender: Combatant, move: Move) -> TurnEvent:
        ev = self.core.execute(attacker, defender, move)
        self.log.append(ev.narration())
        return ev

    def step(self, player_move_idx: int, bot_move_idx: Optional[int] = None) -> List[TurnEvent]:
        """Resolve one full turn and return the events in order."""
        if self.state != "IN_PROGRESS":
            raise BattleStateError(f"Cannot take a turn in state {self.state}")
        if not 0 <= player_move_idx < len(self.player.moves):
            raise InvalidSelection(str(player_move_idx + 1), 1, len(self.player.moves))
        if bot_move_idx is not None and not 0 <= bot_move_idx < len(self.bot.moves):
            raise InvalidSelection(str(bot_move_idx + 1), 1, len(self.bot.moves))
        self.turn_counter += 1
        events = [self._act(self.player, self.bot, self.player.moves[player_move_idx])]
        if not self.bot.fainted:
            if bot_move_idx is None:
                bot_move_idx = choose_move_index(self.bot, self.core.rng)
            events.append(self._act(self.bot, self.player, self.bot.moves[bot_move_idx]))
        if self.player.fainted or self.bot.fainted:
            self.state = "CONCLUDED"
            logger.info("BattleConcluded", outcome=self.outcome(), turns=self.turn_counter)
        return events

    def run_auto(self, max_turns: int = 500) -> Outcome:
        """Play both sides at random until the battle ends (simulation/debug)."""
        while self.state == "IN_PROGRESS" and self.turn_counter < max_turns:
            self.step(choose_move_index(self.player, self.core.rng))
        return self.outcome()

    def outcome(self) -> Outcome:
        return classify_outcome(self.player.hp, self.bot.hp)

__all__ = ["BattleSession","classify_outcome","MOVES_PER_SIDE"]
