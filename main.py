#!/usr/bin/env python3
"""
Pokéduel - terminal battle against a random opponent.

Thin wrapper around :mod:`pokeduel.cli`.

To run: python main.py [--pokemon pikachu]
"""

from pokeduel.cli import main

if __name__ == "__main__":
    main()
