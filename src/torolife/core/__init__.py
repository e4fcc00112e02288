"""Core cellular automata logic."""

from .universe import Cell, Universe, UniverseConfig, default_seed, wrap_index
from .patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Universe", "UniverseConfig", "default_seed", "wrap_index", "Pattern", "PatternLibrary"]
