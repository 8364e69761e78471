"""Interactive front end for Langton's Ant simulation."""

from .pygame_renderer import PygameRenderer

__all__ = ['PygameRenderer']
