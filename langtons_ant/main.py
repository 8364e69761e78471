#!/usr/bin/env python3
"""
Langton's Ant Simulation

Many independent ants on one toroidal black/white grid, drawn in real
time with Pygame or run headless with image/CSV export.

Usage:
    langtons-ant [options]

Examples:
    langtons-ant --ants 50 --fps 120
    langtons-ant --config configs/default.yaml --rule departure
    langtons-ant --headless --ticks 2000 --gif --csv --out-dir results/
    langtons-ant --screen-width 800 --screen-height 800 --cell-size 4 --seed 42
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from langtons_ant.config import ConfigError, SimulationConfig, load_config
from langtons_ant.model.ant import TurnRule
from langtons_ant.model.engine import SimulationEngine
from langtons_ant.export.csv_writer import CSVWriter
from langtons_ant.export.visualizer import Visualizer
from langtons_ant.export.reporter import Reporter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='langtons-ant',
        description="Langton's Ant with many ants on a shared grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Keys (interactive):
    R            reset grid and ants
    Up / Down    tick rate +/- step (never below 1)
    Cmd/Ctrl+W   quit (also Escape or closing the window)
        """
    )

    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file')

    # Simulation
    parser.add_argument('-a', '--ants', dest='ant_count', type=int, default=None,
                        help='Number of ants (default: 20)')
    parser.add_argument('-f', '--fps', dest='tick_rate', type=int, default=None,
                        help='Target ticks per second (default: 60)')
    parser.add_argument('-s', '--steps', dest='steps_per_tick', type=int,
                        default=None,
                        help='Simulated steps per tick (default: 1)')
    parser.add_argument('--rule', dest='turn_rule',
                        choices=[r.value for r in TurnRule], default=None,
                        help='Which cell decides the turn (default: arrival)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    parser.add_argument('--ticks', dest='max_ticks', type=int, default=None,
                        help='Stop after this many ticks (required with --headless)')

    # Display
    parser.add_argument('--screen-width', type=int, default=None,
                        help='Window width in pixels (default: 1280)')
    parser.add_argument('--screen-height', type=int, default=None,
                        help='Window height in pixels (default: 720)')
    parser.add_argument('-c', '--cell-size', type=int, default=None,
                        help='Pixel edge of one cell (default: 5)')

    # Headless run and exports
    parser.add_argument('--headless', action='store_true', default=False,
                        help='Run without a window')
    parser.add_argument('--out-dir', type=Path, default=None,
                        help='Output directory for exports (default: ./output)')
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable trajectory CSV export')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable trajectory CSV export (default)')
    parser.add_argument('--snapshot', dest='snapshot', action='store_true',
                        default=None,
                        help='Enable final snapshot (default)')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final snapshot')
    parser.add_argument('--gif', dest='gif', action='store_true', default=None,
                        help='Enable GIF animation export')

    parser.add_argument('--quiet', action='store_true', default=None,
                        help='Suppress stdout output')

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Defaults, then the YAML file, then CLI flags; validated."""
    config = load_config(args.config)
    config = config.with_overrides(
        ant_count=args.ant_count,
        tick_rate=args.tick_rate,
        steps_per_tick=args.steps_per_tick,
        turn_rule=args.turn_rule,
        seed=args.seed,
        max_ticks=args.max_ticks,
        screen_width=args.screen_width,
        screen_height=args.screen_height,
        cell_size=args.cell_size,
        out_dir=args.out_dir,
        csv=args.csv,
        snapshot=args.snapshot,
        gif=args.gif,
        quiet=args.quiet,
    )
    config.validate()
    if args.headless and config.max_ticks == 0:
        raise ConfigError("--headless needs a positive --ticks")
    return config


def run_headless(config: SimulationConfig, engine: SimulationEngine,
                 config_path: Optional[Path]) -> int:
    """Run a bounded simulation and write the enabled exports."""
    export = config.export

    csv_writer = None
    if export.csv:
        csv_writer = CSVWriter(export.out_dir / 'simulation_log.csv')
        csv_writer.open()

    visualizer = Visualizer(config.grid_width, config.grid_height)
    if export.gif:
        visualizer.buffer_frame(engine.snapshot())

    if not config.quiet:
        print(f"\nRunning {config.max_ticks} ticks...")

    try:
        while not engine.is_finished():
            engine.advance()

            if csv_writer or (export.gif and engine.tick % export.gif_every == 0):
                state = engine.snapshot()
                if csv_writer:
                    csv_writer.append(state)
                if export.gif and engine.tick % export.gif_every == 0:
                    visualizer.buffer_frame(state)

            if not config.quiet and engine.tick % 500 == 0:
                print(f"  Tick {engine.tick}: "
                      f"{engine.grid.marked_count()} marked cells")

    except KeyboardInterrupt:
        if not config.quiet:
            print("\nSimulation interrupted by user.")
    finally:
        if csv_writer:
            csv_writer.close()

    if csv_writer and not config.quiet:
        print(f"\nCSV saved: {export.out_dir / 'simulation_log.csv'}")

    if export.snapshot:
        snapshot_path = export.out_dir / 'final_state.png'
        visualizer.save_snapshot(engine.snapshot(), snapshot_path)
        if not config.quiet:
            print(f"Snapshot saved: {snapshot_path}")

    if export.gif:
        gif_path = export.out_dir / 'simulation.gif'
        if not config.quiet:
            print(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(gif_path, fps=10)
        if not config.quiet:
            print(f"Animation saved: {gif_path}")

    if not config.quiet:
        reporter = Reporter(str(config_path) if config_path else None,
                            config.seed)
        print(reporter.generate_summary(
            engine.get_summary(),
            export.out_dir,
            export.csv,
            export.snapshot,
            export.gif
        ))

    return 0


def run_interactive(config: SimulationConfig, engine: SimulationEngine) -> int:
    """Open the window and run until quit."""
    # Imported here so headless runs never initialise SDL
    import pygame
    from langtons_ant.ui.pygame_renderer import PygameRenderer

    try:
        renderer = PygameRenderer(engine, config)
        renderer.run()
    except pygame.error as e:
        print(f"Error: display unavailable: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        if not config.quiet:
            print("\nSimulation interrupted by user.")

    if not config.quiet:
        summary = engine.get_summary()
        print(f"Stopped after {summary['total_ticks']} ticks "
              f"({summary['marked_cells']} marked cells).")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.quiet:
        print("Initializing simulation...")
        print(f"  Grid: {config.grid_width}x{config.grid_height}")
        print(f"  Ants: {config.ant_count}")
        print(f"  Steps per tick: {config.steps_per_tick}")
        print(f"  Turn rule: {config.turn_rule.value}")

    engine = SimulationEngine(config)

    if args.headless:
        return run_headless(config, engine, args.config)
    return run_interactive(config, engine)


if __name__ == '__main__':
    sys.exit(main())
