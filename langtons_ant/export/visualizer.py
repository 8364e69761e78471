"""Visualization and export for Langton's Ant simulation."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import List, TYPE_CHECKING
from PIL import Image
import io

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Visualizer:
    """
    Generates visual outputs using matplotlib.

    Supports:
    - Single PNG snapshots
    - Animated GIF compilation
    """

    # Same palette as the interactive window
    COLORS = {
        'unmarked': '#000000',
        'marked': '#FFFFFF',
        'agent': '#E62937',
    }

    def __init__(self, grid_width: int, grid_height: int):
        self.width = grid_width
        self.height = grid_height
        self.frames: List[Image.Image] = []

    def render_rgb(self, state: "SimulationState") -> np.ndarray:
        """Render cells and ants into a (height, width, 3) float image."""
        image = np.empty((self.height, self.width, 3))
        image[:, :] = to_rgb(self.COLORS['unmarked'])
        image[state.grid] = to_rgb(self.COLORS['marked'])
        agent_rgb = to_rgb(self.COLORS['agent'])
        for ant in state.ants:
            image[ant.y, ant.x] = agent_rgb
        return image

    def _create_figure(self, state: "SimulationState") -> plt.Figure:
        """Create matplotlib figure for state visualization."""
        aspect = self.width / self.height
        fig_height = 6
        fig_width = max(6, fig_height * aspect)
        fig, ax = plt.subplots(figsize=(fig_width, fig_height))

        # Row 0 is the top of the window, as on screen
        ax.imshow(self.render_rgb(state), origin='upper', aspect='equal',
                  interpolation='nearest')

        ax.set_title(f'Tick {state.tick} | Ants: {len(state.ants)} | '
                     f'Marked cells: {state.marked_count}')
        ax.set_xticks([])
        ax.set_yticks([])

        plt.tight_layout()
        return fig

    def buffer_frame(self, state: "SimulationState") -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(state)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def save_snapshot(self, state: "SimulationState", output_path: Path) -> None:
        """Save single PNG image of current state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(state)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 10) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        """Clear buffered frames."""
        self.frames.clear()
