"""Frontend interfaces for the toroidal universe."""

from .cli import CLIUniverse

__all__ = ["CLIUniverse"]
