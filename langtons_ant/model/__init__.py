"""Model package for Langton's Ant simulation."""

from .state import (AntSnapshot, CellState, Direction, DisplayColor,
                    DrawUpdate, SimulationState)
from .grid import Grid, GridIndexError, wrap_step
from .ant import Ant, TurnRule
from .engine import SimulationEngine

__all__ = [
    'AntSnapshot',
    'CellState',
    'Direction',
    'DisplayColor',
    'DrawUpdate',
    'SimulationState',
    'Grid',
    'GridIndexError',
    'wrap_step',
    'Ant',
    'TurnRule',
    'SimulationEngine',
]
