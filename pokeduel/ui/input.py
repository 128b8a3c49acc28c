"""
Line-based prompts and numbered-menu selection.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Sequence, TypeVar

from rich.console import Console
from rich.markup import escape

from pokeduel.core.errors import InvalidSelection

T = TypeVar("T")
InputFn = Callable[[str], str]

def parse_choice(raw: str, count: int) -> int:
    """Turn a 1-based menu answer into a 0-based index.

    Raises InvalidSelection for anything that is not an integer in range.
    """
    text = raw.strip()
    try:
        num = int(text)
    except ValueError:
        raise InvalidSelection(text, 1, count)
    if not 1 <= num <= count:
        raise InvalidSelection(text, 1, count)
    return num - 1

def prompt_text(prompt: str, *, console: Console, input_fn: Optional[InputFn] = None) -> str:
    ask = input_fn or console.input
    return ask(prompt).strip()

def choose_from_list(prompt: str, items: Sequence[T], fmt: Callable[[T], str], *,
                     console: Console, input_fn: Optional[InputFn] = None) -> int:
    """
    Display a numbered menu and return the 0-based index of the choice.

    Re-prompts until a valid in-range integer is entered. ``fmt`` may return
    rich markup.
    """
    ask = input_fn or console.input
    for i, item in enumerate(items, 1):
        console.print(f"{i:>2}. {fmt(item)}")
    while True:
        answer = ask(f"{prompt} (1-{len(items)}): ")
        try:
            return parse_choice(answer, len(items))
        except InvalidSelection:
            console.print(escape("Please enter a valid number."), style="yellow")

def choose_many(prompt: str, items: Sequence[T], count: int, fmt: Callable[[T], str], *,
                console: Console, input_fn: Optional[InputFn] = None) -> List[T]:
    """Pick ``count`` distinct items one at a time; each pick leaves the menu."""
    available = list(items)
    chosen: List[T] = []
    for n in range(1, count + 1):
        idx = choose_from_list(f"{prompt} #{n}", available, fmt, console=console, input_fn=input_fn)
        chosen.append(available.pop(idx))
    return chosen
