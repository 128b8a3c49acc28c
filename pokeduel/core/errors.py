"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class PokeduelError(Exception):
    pass

class TransportError(PokeduelError):
    def __init__(self, url: str, detail: str):
        super().__init__(f"Request to {url} failed: {detail}")
        self.url = url
        self.detail = detail

class NotFound(PokeduelError):
    def __init__(self, url: str):
        super().__init__(f"Nothing found at {url}")
        self.url = url

class InsufficientMoves(PokeduelError):
    def __init__(self, name: str, found: int, needed: int = 5):
        super().__init__(f"Not enough usable moves found for {name} ({found}/{needed}). Try another Pokémon.")
        self.name = name
        self.found = found
        self.needed = needed

class InvalidSelection(PokeduelError):
    def __init__(self, value: str, low: int, high: int):
        super().__init__(f"'{value}' is not a number between {low} and {high}")
        self.value = value
        self.low = low
        self.high = high

class BattleStateError(PokeduelError):
    pass
