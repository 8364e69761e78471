"""Langton's Ant: many ants on one toroidal grid, rendered in real time."""

__version__ = "0.1.0"
