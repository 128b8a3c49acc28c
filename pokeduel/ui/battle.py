"""Terminal battle flow: creature prompt, move picks, the turn loop.

Everything interactive goes through ``input_fn`` and a rich ``Console`` so
tests can drive a full battle with scripted answers and a string buffer.
"""
from __future__ import annotations
import random
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from pokeduel.battle.core import BattleCore, TurnEvent
from pokeduel.battle.factory import build_bot, load_player, new_combatant
from pokeduel.battle.session import BattleSession, Outcome
from pokeduel.core.errors import InsufficientMoves, NotFound
from pokeduel.core.logging import logger
from pokeduel.data.client import PokeAPIClient
from pokeduel.data.models import Creature, Move
from pokeduel.data.moves import CurationResult, MOVES_PER_COMBATANT
from pokeduel.system.settings import Settings
from pokeduel.ui import typewriter as tw
from pokeduel.ui.input import InputFn, choose_from_list, choose_many, prompt_text
from pokeduel.ui.render import (move_menu_label, move_summary, render_event, render_event_result,
                                render_lineup, render_outcome, render_status)

def prompt_player_creature(client: PokeAPIClient, settings: Settings, *, console: Console,
                           input_fn: Optional[InputFn] = None,
                           preset: Optional[str] = None) -> tuple[Creature, CurationResult]:
    """Ask for a creature until one resolves with enough moves.

    With ``preset`` (the --pokemon flag) there is no retry: errors propagate.
    """
    while True:
        name = preset.strip() if preset is not None else prompt_text(
            "Choose your Pokémon (e.g., pikachu, charizard): ", console=console, input_fn=input_fn)
        if not name:
            if preset is not None:
                raise NotFound(client.creature_url(name))
            continue
        console.print(f"\nLoading moves for {escape(name.title())}...")
        try:
            return load_player(client, name, settings)
        except NotFound:
            if preset is not None:
                raise
            console.print("Hmm, couldn't find that Pokémon. Try another name/id.", style="yellow")
        except InsufficientMoves as e:
            if preset is not None:
                raise
            console.print(escape(str(e)), style="yellow")

def select_player_moves(result: CurationResult, settings: Settings, *, console: Console,
                        input_fn: Optional[InputFn] = None) -> List[Move]:
    console.print(f"\nPick {MOVES_PER_COMBATANT} moves from the list below (strongest shown first):")
    return choose_many("Select move", result.top(settings.data.menu_size), MOVES_PER_COMBATANT,
                       move_menu_label, console=console, input_fn=input_fn)

def _attach_narration(session: BattleSession, console: Console, delay: float):
    core = session.core
    prev = core.event_cb
    def cb(ev: TurnEvent):
        render_event(console, ev)
        tw.pause(delay)
        render_event_result(console, ev)
        render_status(console, session.player, session.bot)
        tw.pause(delay)
    core.event_cb = cb
    def restore():
        core.event_cb = prev
    return restore

def run_battle_ui(session: BattleSession, *, console: Console, input_fn: Optional[InputFn] = None,
                  delay: float = 0.0) -> Outcome:
    render_status(console, session.player, session.bot)
    restore = _attach_narration(session, console, delay)
    try:
        while not session.is_over():
            console.rule(f"Turn {session.turn_counter + 1}")
            idx = choose_from_list("Choose your move", session.player.moves, lambda m: escape(move_summary(m)),
                                   console=console, input_fn=input_fn)
            session.step(idx)
    finally:
        restore()
    outcome = session.outcome()
    render_outcome(console, outcome, session.player, session.bot)
    return outcome

def play(settings: Settings, *, console: Console, client: PokeAPIClient, rng: Optional[random.Random] = None,
         input_fn: Optional[InputFn] = None, preset: Optional[str] = None) -> Outcome:
    """Full game: setup both sides then run the battle loop."""
    rng = rng or random.Random()
    delay = settings.data.text_delay
    creature, result = prompt_player_creature(client, settings, console=console, input_fn=input_fn, preset=preset)
    selected = select_player_moves(result, settings, console=console, input_fn=input_fn)

    console.print("\nChoosing a bot opponent...")
    bot_creature, bot_moves = build_bot(client, rng, settings)

    player = new_combatant(creature)
    bot = new_combatant(bot_creature)
    session = BattleSession(player, bot, BattleCore(rng))
    session.assign_moves("player", selected)
    session.assign_moves("bot", bot_moves)
    logger.info("CacheStats", entries=len(client.cache), hits=client.cache.hits, misses=client.cache.misses)

    render_lineup(console, "Your Pokémon", player.display_name, player.moves)
    render_lineup(console, "Opponent", bot.display_name, bot.moves)
    console.print("[dim](Bot moves shown here for transparency.)[/dim]")
    tw.pause(delay * 1.5)
    return run_battle_ui(session, console=console, input_fn=input_fn, delay=delay)

__all__ = ["prompt_player_creature","select_player_moves","run_battle_ui","play"]
