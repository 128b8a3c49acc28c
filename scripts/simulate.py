"""Run many bot-vs-bot battles between two Pokémon and print the win rates.

Moves for each side are drawn the same way the bot opponent picks them.

Usage: python scripts/simulate.py pikachu charizard --battles 200 --seed 1
"""
from __future__ import annotations
import argparse
import random
from collections import Counter

from rich.console import Console
from rich.table import Table

from pokeduel.battle.core import BattleCore
from pokeduel.battle.factory import load_player, new_combatant
from pokeduel.battle.session import BattleSession
from pokeduel.data.client import PokeAPIClient
from pokeduel.data.moves import MOVES_PER_COMBATANT
from pokeduel.system.settings import Settings

def simulate(client: PokeAPIClient, settings: Settings, first: str, second: str, battles: int, rng: random.Random) -> Counter:
    a, a_moves = load_player(client, first, settings)
    b, b_moves = load_player(client, second, settings)
    pool_a = list(a_moves.top(settings.data.bot_pool_size))
    pool_b = list(b_moves.top(settings.data.bot_pool_size))
    tally: Counter = Counter()
    for _ in range(battles):
        session = BattleSession(new_combatant(a), new_combatant(b), BattleCore(rng))
        session.assign_moves("player", rng.sample(pool_a, MOVES_PER_COMBATANT))
        session.assign_moves("bot", rng.sample(pool_b, MOVES_PER_COMBATANT))
        tally[session.run_auto()] += 1
    return tally

def main():
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("first")
    ap.add_argument("second")
    ap.add_argument("--battles", type=int, default=100)
    ap.add_argument("--seed", type=int)
    args = ap.parse_args()
    settings = Settings.load()
    client = PokeAPIClient.from_settings(settings)
    try:
        tally = simulate(client, settings, args.first, args.second, args.battles, random.Random(args.seed))
    finally:
        client.close()
    table = Table(title=f"{args.first} vs {args.second} ({args.battles} battles)")
    table.add_column("Outcome")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")
    labels = {"PLAYER_WIN": f"{args.first} wins", "PLAYER_LOSS": f"{args.second} wins", "DRAW": "draw", "ONGOING": "unfinished"}
    for key, label in labels.items():
        n = tally.get(key, 0)
        table.add_row(label, str(n), f"{n / max(1, args.battles):.0%}")
    Console().print(table)

if __name__ == "__main__":
    main()
