from __future__ import annotations
from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pokeduel.battle.core import Combatant, TurnEvent
from pokeduel.battle.session import Outcome
from pokeduel.core.types import type_abbreviation, type_markup
from pokeduel.data.models import Move

HP_BAR_WIDTH = 22

def hp_bar(current: int, total: int, width: int = HP_BAR_WIDTH) -> str:
    """Fixed-width bar: '[██████░░░░] 180/300'."""
    total = max(1, total)
    cur = max(0, min(current, total))
    # round(cur / total * width), half-up
    filled = (2 * cur * width + total) // (2 * total)
    bar = "█" * filled + "░" * (width - filled)
    return f"[{bar}] {cur}/{total}"

def _hp_color(current: int, total: int) -> str:
    ratio = current / max(1, total)
    if ratio > 0.5:
        return "green"
    if ratio > 0.2:
        return "yellow"
    return "red"

def move_summary(mv: Move) -> str:
    return f"{mv.display_name} (Pow {mv.power}, Acc {mv.accuracy}%)"

def move_menu_label(mv: Move) -> str:
    """Rich markup label used in the move picker."""
    return (f"{escape(mv.display_name)}  —  Type: {type_markup(mv.type)}"
            f"  Pow:{mv.power}  Acc:{mv.accuracy}%")

def render_status(console: Console, player: Combatant, bot: Combatant) -> None:
    table = Table(box=None, show_header=False, padding=(0, 2))
    table.add_column("Name", style="bold bright_white")
    table.add_column("HP")
    for c in (player, bot):
        color = _hp_color(c.hp, c.max_hp)
        table.add_row(escape(c.display_name), f"[{color}]{escape(hp_bar(c.hp, c.max_hp))}[/{color}]")
    console.print(Panel(table, title="[bold]Status[/bold]", box=ROUNDED, expand=False))

def render_lineup(console: Console, title: str, name: str, moves) -> None:
    console.print(f"\n[bold]{escape(title)}:[/bold] {escape(name)}")
    for i, mv in enumerate(moves, 1):
        console.print(f"  {i}. {escape(move_summary(mv))} {type_markup(mv.type, type_abbreviation(mv.type))}")

def render_event(console: Console, ev: TurnEvent) -> None:
    mv = ev.move
    console.print(f"\n[bold]{escape(ev.attacker)}[/bold] uses {type_markup(mv.type, escape(mv.display_name))}!"
                  f" (Pow {mv.power}, Acc {mv.accuracy}%)")

def render_event_result(console: Console, ev: TurnEvent) -> None:
    if not ev.hit:
        console.print("→ The attack missed!", style="dim")
    else:
        console.print(f"→ It hits for [bold red]{ev.damage}[/bold red] damage.")

def render_outcome(console: Console, outcome: Outcome, player: Combatant, bot: Combatant) -> None:
    console.rule("[bold]Result[/bold]")
    if outcome == "DRAW":
        console.print("It's a draw! Both fainted!", style="bold yellow")
    elif outcome == "PLAYER_LOSS":
        console.print(f"You lose… {escape(bot.display_name)} wins.", style="bold red")
    elif outcome == "PLAYER_WIN":
        console.print(f"You win! {escape(player.display_name)} triumphs!", style="bold green")

__all__ = ["HP_BAR_WIDTH","hp_bar","move_summary","move_menu_label","render_status",
           "render_lineup","render_event","render_event_result","render_outcome"]
