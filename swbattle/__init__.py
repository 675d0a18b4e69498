"""Tick-based grid battle simulation of swordsmen and hunters, driven by a command file."""

__version__ = "0.1.0"
__all__ = ["__version__"]