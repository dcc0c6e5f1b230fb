"""Frontend interfaces for the Game of Life engine."""

from .cli import main

__all__ = ["main"]
