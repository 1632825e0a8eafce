"""Crossing-to-crossing routes, walls and drive commands for a grid robot, with a serial console."""

__version__ = "0.1.0"
__all__ = ["grid", "obstacle", "movement", "console"]