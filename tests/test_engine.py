"""Tests for langtons_ant.model.engine: ticks, reset and snapshots."""

import numpy as np
import pytest

from langtons_ant.config import SimulationConfig
from langtons_ant.model.ant import Ant, TurnRule
from langtons_ant.model.engine import SimulationEngine
from langtons_ant.model.state import CellState, Direction, DisplayColor


class TestSimulationEngine:
    """Tick orchestration."""

    def test_engine_initialises(self, config_20x20: SimulationConfig) -> None:
        engine = SimulationEngine(config_20x20)
        assert engine.tick == 0
        assert engine.grid.width == 20
        assert engine.grid.area == 400
        assert len(engine.ants) == config_20x20.ant_count
        assert engine.grid.marked_count() == 0

    def test_advance_counts_ticks_and_steps(self, grid_config) -> None:
        config = grid_config(10, 10, ant_count=3, steps_per_tick=4, seed=1)
        engine = SimulationEngine(config)
        updates = engine.advance()
        assert engine.tick == 1
        assert engine.steps_taken == 4
        # three updates per ant per step
        assert len(updates) == 3 * 3 * 4

    def test_advance_explicit_steps(self, config_4x4: SimulationConfig) -> None:
        engine = SimulationEngine(config_4x4, ants=[Ant(0, 5, Direction.UP)])
        engine.advance(2)
        ant = engine.ants[0]
        assert ant.position == 2
        assert ant.heading is Direction.DOWN
        assert engine.grid.get(1) is CellState.MARKED
        assert engine.grid.get(2) is CellState.MARKED
        assert engine.grid.marked_count() == 2

    def test_last_update_per_ant_is_agent_marker(self, config_20x20) -> None:
        engine = SimulationEngine(config_20x20)
        updates = engine.advance()
        markers = [u for u in updates if u.color is DisplayColor.AGENT]
        assert [u.position for u in markers] == [a.position for a in engine.ants]

    def test_marker_survives_handoff_between_ants(self, config_4x4) -> None:
        """An ant stepping onto the cell another ant just left keeps its marker."""
        # ant 0 arrives on 6 in the same step ant 1 departs from it
        engine = SimulationEngine(config_4x4, ants=[
            Ant(0, 5, Direction.RIGHT), Ant(1, 6, Direction.UP)])
        updates = engine.advance(1)
        assert [a.position for a in engine.ants] == [6, 2]

        final = {}
        for update in updates:
            final[update.position] = update.color
        assert final[6] is DisplayColor.AGENT
        assert final[2] is DisplayColor.AGENT
        assert final[5] is DisplayColor.UNMARKED

    def test_injected_ant_outside_grid_rejected(self, config_4x4) -> None:
        with pytest.raises(ValueError):
            SimulationEngine(config_4x4, ants=[Ant(0, 16, Direction.UP)])

    def test_departure_rule_from_config(self, grid_config) -> None:
        config = grid_config(4, 4, ant_count=1, turn_rule="departure")
        engine = SimulationEngine(config, ants=[Ant(0, 5, Direction.UP)])
        engine.advance(1)
        assert config.turn_rule is TurnRule.DEPARTURE
        assert engine.ants[0].position == 6
        assert engine.grid.get(5) is CellState.MARKED

    def test_determinism(self, grid_config) -> None:
        """Same seed gives identical state after N ticks."""
        config = grid_config(16, 12, ant_count=5, seed=777)
        a = SimulationEngine(config)
        b = SimulationEngine(config)
        for _ in range(50):
            a.advance()
            b.advance()
        assert np.array_equal(a.grid.cells, b.grid.cells)
        assert [(x.position, x.heading) for x in a.ants] == \
            [(y.position, y.heading) for y in b.ants]

    def test_indices_stay_in_bounds(self, grid_config) -> None:
        config = grid_config(7, 5, ant_count=6, steps_per_tick=10, seed=5)
        engine = SimulationEngine(config)
        for _ in range(30):
            for update in engine.advance():
                assert 0 <= update.position < engine.grid.area

    def test_multi_ant_matches_solo_runs_while_apart(self, config_20x20) -> None:
        """Far-apart ants on one grid follow their solo trajectories."""
        grid_w = config_20x20.grid_width
        start = [(grid_w * 3 + 3, Direction.UP), (grid_w * 15 + 15, Direction.LEFT)]

        shared = SimulationEngine(
            config_20x20, ants=[Ant(i, p, h) for i, (p, h) in enumerate(start)])
        solos = [SimulationEngine(config_20x20, ants=[Ant(0, p, h)])
                 for p, h in start]

        for _ in range(10):
            shared.advance(1)
            for solo in solos:
                solo.advance(1)
            for ant, solo in zip(shared.ants, solos):
                assert ant.position == solo.ants[0].position
                assert ant.heading is solo.ants[0].heading

        combined = solos[0].grid.cells ^ solos[1].grid.cells
        assert np.array_equal(shared.grid.cells, combined)


class TestReset:
    """Reset clears the grid and respawns ants."""

    def test_reset_clears_state(self, grid_config) -> None:
        config = grid_config(10, 8, ant_count=4, seed=9)
        engine = SimulationEngine(config)
        for _ in range(40):
            engine.advance()
        assert engine.grid.marked_count() > 0

        engine.reset()
        assert engine.grid.marked_count() == 0
        assert engine.tick == 0
        assert engine.steps_taken == 0
        assert len(engine.ants) == 4
        for ant in engine.ants:
            assert 0 <= ant.position < engine.grid.area
            assert isinstance(ant.heading, Direction)

    def test_reset_is_idempotent(self, config_20x20) -> None:
        engine = SimulationEngine(config_20x20)
        engine.advance()
        engine.reset()
        engine.reset()
        assert engine.grid.marked_count() == 0
        assert len(engine.ants) == config_20x20.ant_count


class TestSnapshots:
    """Read-only views for export and redraw."""

    def test_snapshot_copies_grid(self, config_4x4) -> None:
        engine = SimulationEngine(config_4x4, ants=[Ant(0, 5, Direction.UP)])
        engine.advance(2)
        state = engine.snapshot()
        assert state.tick == 1
        assert state.steps == 2
        assert state.grid.shape == (4, 4)
        assert state.marked_count == 2
        assert state.ants[0].x == 2 and state.ants[0].y == 0
        assert state.ants[0].heading == "down"

        engine.reset()
        assert state.marked_count == 2

    def test_csv_rows(self, config_4x4) -> None:
        engine = SimulationEngine(config_4x4, ants=[Ant(3, 5, Direction.UP)])
        engine.advance(1)
        assert engine.snapshot().to_csv_rows() == [
            {"tick": 1, "ant_id": 3, "x": 1, "y": 0, "heading": "right"}
        ]

    def test_full_redraw(self, config_4x4) -> None:
        engine = SimulationEngine(config_4x4, ants=[Ant(0, 5, Direction.UP)])
        engine.advance(2)
        updates = engine.full_redraw()
        marked = {u.position for u in updates if u.color is DisplayColor.MARKED}
        agents = [u.position for u in updates if u.color is DisplayColor.AGENT]
        assert marked == {1, 2}
        assert agents == [2]
        assert updates[-1].color is DisplayColor.AGENT

    def test_summary(self, config_4x4) -> None:
        engine = SimulationEngine(config_4x4, ants=[Ant(0, 5, Direction.UP)])
        engine.advance(2)
        summary = engine.get_summary()
        assert summary["total_ticks"] == 1
        assert summary["total_steps"] == 2
        assert summary["marked_cells"] == 2
        assert summary["grid"] == "4x4"
        assert summary["turn_rule"] == "arrival"

    def test_is_finished_only_when_bounded(self, grid_config) -> None:
        unbounded = SimulationEngine(grid_config(4, 4, ant_count=1))
        for _ in range(5):
            unbounded.advance()
        assert not unbounded.is_finished()

        bounded = SimulationEngine(grid_config(4, 4, ant_count=1, max_ticks=3))
        bounded.advance()
        bounded.advance()
        assert not bounded.is_finished()
        bounded.advance()
        assert bounded.is_finished()
