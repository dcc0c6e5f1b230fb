"""Core Game of Life logic."""

from .grid import Grid
from .engine import EngineState, GridEngine
from .patterns import Pattern, PatternLibrary

__all__ = ["Grid", "GridEngine", "EngineState", "Pattern", "PatternLibrary"]
