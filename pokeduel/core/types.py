"""Global type metadata: colours, abbreviations and display names.

Provides:
  TYPE_COLORS_HEX: mapping type -> hex colour string (#RRGGBB)
  TYPE_ABBREVIATIONS: mapping type -> 3-letter abbreviation (upper)
  helpers producing rich markup for coloured type labels.
"""
from __future__ import annotations
from typing import Dict

TYPE_COLORS_HEX: Dict[str, str] = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
}

TYPE_ABBREVIATIONS: Dict[str, str] = {
    "normal": "NRM",
    "fire": "FIR",
    "water": "WTR",
    "grass": "GRS",
    "electric": "ELE",
    "ice": "ICE",
    "fighting": "FGT",
    "poison": "PSN",
    "ground": "GRN",
    "flying": "FLY",
    "psychic": "PSY",
    "bug": "BUG",
    "rock": "RCK",
    "ghost": "GHO",
    "dragon": "DRA",
    "dark": "DRK",
    "steel": "STL",
    "fairy": "FAI",
}

def display_name(slug: str) -> str:
    """'thunder-punch' -> 'Thunder Punch'."""
    return slug.replace("-", " ").title()

def type_abbreviation(type_name: str) -> str:
    return TYPE_ABBREVIATIONS.get(type_name.lower(), type_name[:3].upper())

def type_markup(type_name: str, text: str | None = None) -> str:
    """Wrap text (default: the type's display name) in rich colour markup."""
    label = text if text is not None else display_name(type_name)
    hex_color = TYPE_COLORS_HEX.get(type_name.lower())
    if not hex_color:
        return label
    return f"[{hex_color}]{label}[/{hex_color}]"

__all__ = [
    'TYPE_COLORS_HEX','TYPE_ABBREVIATIONS',
    'display_name','type_abbreviation','type_markup'
]
