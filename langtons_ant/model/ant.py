"""Ant implementation with the Langton turn rule."""

from enum import Enum
from typing import List
import numpy as np

from .grid import Grid
from .state import CellState, Direction, DisplayColor, DrawUpdate


class TurnRule(Enum):
    """
    Which cell an ant inspects to decide its turn.

    ARRIVAL:   move, inspect the new cell, turn, flip the new cell.
    DEPARTURE: inspect the current cell, turn, flip it, then move.
    """
    ARRIVAL = "arrival"
    DEPARTURE = "departure"


class Ant:
    """
    Single agent on a shared toroidal grid.

    Turns clockwise on an unmarked cell and counter-clockwise on a
    marked one. Ants never see each other except through the cells
    they flip.
    """

    def __init__(self, ant_id: int, position: int, heading: Direction):
        self.id = ant_id
        self.position = position
        self.heading = heading

    @classmethod
    def random(cls, ant_id: int, area: int,
               rng: np.random.Generator) -> "Ant":
        """Place an ant uniformly at random with a uniform heading."""
        position = int(rng.integers(0, area))
        heading = Direction(int(rng.integers(0, 4)))
        return cls(ant_id, position, heading)

    def move(self, grid: Grid) -> None:
        """Translate one cell along the current heading."""
        self.position = grid.neighbor(self.position, self.heading)

    def turn(self, cell: CellState) -> None:
        """Rotate according to the color of the inspected cell."""
        if cell is CellState.UNMARKED:
            self.heading = self.heading.next()
        else:
            self.heading = self.heading.prev()

    def step(self, grid: Grid,
             rule: TurnRule = TurnRule.ARRIVAL) -> List[DrawUpdate]:
        """
        Perform one simulated step and return the cells to repaint.

        The first update restores the departed cell's stored color, the
        second paints the flipped cell. Agent markers are left to the
        caller so they can be drawn after every ant has moved.
        """
        departed = self.position
        updates = [DrawUpdate(departed, DisplayColor.for_cell(grid.get(departed)))]

        if rule is TurnRule.ARRIVAL:
            self.move(grid)
            self.turn(grid.get(self.position))
            flipped = self.position
        else:
            self.turn(grid.get(departed))
            flipped = departed
            self.move(grid)

        cell = grid.invert(flipped)
        updates.append(DrawUpdate(flipped, DisplayColor.for_cell(cell)))
        return updates

    def __repr__(self) -> str:
        return (f"Ant(id={self.id}, pos={self.position}, "
                f"heading={self.heading.label})")
