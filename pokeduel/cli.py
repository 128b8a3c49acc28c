from __future__ import annotations
import argparse
import random
import sys
from typing import Optional, Sequence

from rich.console import Console

from pokeduel import __version__
from pokeduel.core.errors import PokeduelError
from pokeduel.core.logging import logger
from pokeduel.data.client import PokeAPIClient
from pokeduel.system.settings import Settings, LOG_LEVELS
from pokeduel.ui.battle import play
from pokeduel.ui.input import InputFn

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pokeduel", description="Turn-based Pokémon battle against a random bot.")
    p.add_argument("--pokemon", help="name or id of your Pokémon (skips the prompt)")
    p.add_argument("--seed", type=int, help="seed for the bot and all battle rolls")
    p.add_argument("--fast", action="store_true", help="no pause between battle messages")
    p.add_argument("--log-level", choices=LOG_LEVELS, help="override the configured log level")
    p.add_argument("--api-base", help="PokeAPI base URL")
    p.add_argument("--timeout", type=float, help="per-request timeout in seconds")
    p.add_argument("--save-settings", action="store_true", help="persist the overrides above")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p

def run(argv: Optional[Sequence[str]] = None, *, console: Optional[Console] = None,
        err_console: Optional[Console] = None, input_fn: Optional[InputFn] = None,
        client: Optional[PokeAPIClient] = None) -> int:
    """Entry point; returns the process exit code (0 played, 1 setup error)."""
    args = build_parser().parse_args(argv)
    console = console or Console()
    err_console = err_console or Console(stderr=True)

    settings = Settings.load()
    settings.override(log_level=args.log_level, api_base=args.api_base, request_timeout=args.timeout)
    logger.set_level(settings.data.log_level)  # type: ignore[arg-type]
    if args.save_settings:
        settings.save()
    # --fast applies to this run only and is never saved
    if args.fast:
        settings.override(text_delay=0.0)

    client = client or PokeAPIClient.from_settings(settings)
    rng = random.Random(args.seed)
    try:
        outcome = play(settings, console=console, client=client, rng=rng, input_fn=input_fn, preset=args.pokemon)
    except PokeduelError as e:
        logger.error("SetupFailed", error=type(e).__name__)
        err_console.print(f"\nError: {e}", style="bold red", markup=False, highlight=False)
        return 1
    except (KeyboardInterrupt, EOFError):
        err_console.print("\nAborted.", style="bold red")
        return 1
    finally:
        client.close()
    logger.debug("Finished", outcome=outcome)
    return 0

def main():
    sys.exit(run())
