"""State snapshot dataclasses for Langton's Ant simulation."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Dict
import numpy as np


class CellState(Enum):
    """Two-valued cell state stored by the grid."""
    UNMARKED = False
    MARKED = True


class Direction(Enum):
    """Ant heading. Clockwise order is UP -> RIGHT -> DOWN -> LEFT -> UP."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def next(self) -> "Direction":
        """Rotate one step clockwise."""
        return _CLOCKWISE[(self.value + 1) % 4]

    def prev(self) -> "Direction":
        """Rotate one step counter-clockwise."""
        return _CLOCKWISE[(self.value - 1) % 4]

    @property
    def label(self) -> str:
        return self.name.lower()


_CLOCKWISE = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


class DisplayColor(Enum):
    """Colors the renderer paints. AGENT is never stored in the grid."""
    UNMARKED = "unmarked"
    MARKED = "marked"
    AGENT = "agent"

    @classmethod
    def for_cell(cls, cell: CellState) -> "DisplayColor":
        return cls.MARKED if cell is CellState.MARKED else cls.UNMARKED


@dataclass(frozen=True)
class DrawUpdate:
    """A single (grid position, display color) pair emitted by a step."""
    position: int
    color: DisplayColor


@dataclass(frozen=True)
class AntSnapshot:
    """Immutable snapshot of an ant's state at a given tick."""
    ant_id: int
    x: int
    y: int
    heading: str  # "up", "right", "down", "left"


@dataclass
class SimulationState:
    """Complete snapshot of simulation state at a given tick."""
    tick: int
    steps: int
    ants: List[AntSnapshot]
    grid: np.ndarray  # Copy of the cells, shape (height, width)

    @property
    def marked_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def to_csv_rows(self) -> List[Dict]:
        """Convert to CSV-compatible format."""
        return [
            {
                "tick": self.tick,
                "ant_id": a.ant_id,
                "x": a.x,
                "y": a.y,
                "heading": a.heading
            }
            for a in self.ants
        ]
