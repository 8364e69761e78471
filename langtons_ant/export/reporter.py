"""Summary report generation for Langton's Ant simulation."""

from typing import Dict, Any, Optional
from pathlib import Path


class Reporter:
    """Formats the end-of-run text report."""

    def __init__(self, config_path: Optional[str], seed: Optional[int]):
        self.config_path = config_path
        self.seed = seed

    def generate_summary(self, summary: Dict[str, Any],
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        lines = [
            "",
            "=" * 60,
            "             LANGTON'S ANT SIMULATION REPORT",
            "=" * 60,
            f"Configuration: {self.config_path or '(defaults)'}",
            f"Random Seed:   {self.seed if self.seed is not None else 'None (random)'}",
            "",
            "RUN",
            "-" * 40,
            f"Grid:          {summary['grid']}",
            f"Turn Rule:     {summary['turn_rule']}",
            f"Ants:          {summary['ants']}",
            f"Ticks:         {summary['total_ticks']}",
            f"Steps:         {summary['total_steps']}",
            f"Marked Cells:  {summary['marked_cells']}",
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'simulation_log.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'simulation.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 60)

        return "\n".join(lines)
