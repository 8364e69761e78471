"""Simulation engine for Langton's Ant."""

import numpy as np
from typing import List, Dict, Optional, TYPE_CHECKING, Any

from .grid import Grid
from .ant import Ant
from .state import SimulationState, AntSnapshot, DisplayColor, DrawUpdate

if TYPE_CHECKING:
    from ..config import SimulationConfig


class SimulationEngine:
    """
    Orchestrates the discrete-time simulation loop.

    Owns one grid and a fixed-size collection of ants. Each tick runs
    `steps` simulated steps; within a step ants are processed in
    collection order, each one reading and flipping the shared grid.
    """

    def __init__(self, config: "SimulationConfig",
                 ants: Optional[List[Ant]] = None,
                 rng: Optional[np.random.Generator] = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)

        self.grid = Grid(config.grid_width, config.grid_height)

        self.ants: List[Ant] = []
        if ants is not None:
            for ant in ants:
                if not 0 <= ant.position < self.grid.area:
                    raise ValueError(f"{ant!r} is outside the grid")
            self.ants = list(ants)
        else:
            self._spawn_ants()

        self.tick = 0
        self.steps_taken = 0

    def _spawn_ants(self) -> None:
        """Create ants at uniformly random positions and headings."""
        self.ants = [
            Ant.random(ant_id, self.grid.area, self.rng)
            for ant_id in range(self.config.ant_count)
        ]

    def step(self) -> List[DrawUpdate]:
        """
        Perform one simulated step for every ant, in collection order.

        Agent markers come last, so a cell left by one ant and entered
        by another still shows the marker.
        """
        updates: List[DrawUpdate] = []
        for ant in self.ants:
            updates.extend(ant.step(self.grid, self.config.turn_rule))
        updates.extend(
            DrawUpdate(ant.position, DisplayColor.AGENT) for ant in self.ants)
        self.steps_taken += 1
        return updates

    def advance(self, steps: Optional[int] = None) -> List[DrawUpdate]:
        """
        Run one tick of `steps` simulated steps.

        Returns the draw updates in the order they were produced; later
        updates for the same cell supersede earlier ones.
        """
        if steps is None:
            steps = self.config.steps_per_tick
        updates: List[DrawUpdate] = []
        for _ in range(steps):
            updates.extend(self.step())
        self.tick += 1
        return updates

    def reset(self) -> None:
        """Clear the grid and scatter a fresh set of ants."""
        self.grid.reset()
        self._spawn_ants()
        self.tick = 0
        self.steps_taken = 0

    def full_redraw(self) -> List[DrawUpdate]:
        """Updates that repaint every marked cell and every ant."""
        updates = [
            DrawUpdate(int(i), DisplayColor.MARKED)
            for i in np.flatnonzero(self.grid.cells)
        ]
        updates.extend(
            DrawUpdate(ant.position, DisplayColor.AGENT) for ant in self.ants)
        return updates

    def snapshot(self) -> SimulationState:
        """Create a copy of the current simulation state."""
        ant_snapshots = []
        for ant in self.ants:
            x, y = self.grid.to_coords(ant.position)
            ant_snapshots.append(AntSnapshot(
                ant_id=ant.id,
                x=x,
                y=y,
                heading=ant.heading.label
            ))

        return SimulationState(
            tick=self.tick,
            steps=self.steps_taken,
            ants=ant_snapshots,
            grid=self.grid.as_array()
        )

    def is_finished(self) -> bool:
        """Only bounded runs finish; interactive runs go until quit."""
        return 0 < self.config.max_ticks <= self.tick

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the simulation."""
        return {
            'total_ticks': self.tick,
            'total_steps': self.steps_taken,
            'ants': len(self.ants),
            'marked_cells': self.grid.marked_count(),
            'grid': f"{self.grid.width}x{self.grid.height}",
            'turn_rule': self.config.turn_rule.value,
        }
