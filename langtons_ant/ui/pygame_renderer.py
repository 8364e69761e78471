"""Real-time Pygame window for Langton's Ant simulation."""

from typing import Iterable, List, TYPE_CHECKING

import pygame

from ..control import ControlAction, TickRateControl, apply_actions
from ..model.state import DisplayColor, DrawUpdate

if TYPE_CHECKING:
    from ..config import SimulationConfig
    from ..model.engine import SimulationEngine


class PygameRenderer:
    """
    Draws the cells reported by the engine and paces the frame loop.

    Keeps a persistent canvas and only repaints changed cells each
    frame. Input is polled once per frame; held keys repeat.

    Keys:
        R            reset the simulation
        Up / Down    raise / lower the tick rate
        Cmd/Ctrl+W   quit (as does Escape or closing the window)
    """

    COLORS = {
        DisplayColor.UNMARKED: (0, 0, 0),        # Black
        DisplayColor.MARKED: (255, 255, 255),    # White
        DisplayColor.AGENT: (230, 41, 55),       # Red
    }

    def __init__(self, engine: "SimulationEngine", config: "SimulationConfig"):
        self.engine = engine
        self.config = config
        self.cell_size = config.display.cell_size
        self.tick_rate = TickRateControl(config.control.tick_rate,
                                         config.control.tick_rate_step)

        pygame.init()
        size = (config.display.screen_width, config.display.screen_height)
        self.screen = pygame.display.set_mode(size)
        self.canvas = pygame.Surface(size)
        self.clock = pygame.time.Clock()
        self.clear()

    def clear(self) -> None:
        """Blank the canvas and repaint whatever the engine holds."""
        self.canvas.fill(self.COLORS[DisplayColor.UNMARKED])
        self.draw(self.engine.full_redraw())

    def draw(self, updates: Iterable[DrawUpdate]) -> None:
        """Paint updates in order; later ones win for the same cell."""
        width = self.engine.grid.width
        size = self.cell_size
        for update in updates:
            x = update.position % width
            y = update.position // width
            self.canvas.fill(self.COLORS[update.color],
                             pygame.Rect(x * size, y * size, size, size))

    def poll_actions(self) -> List[ControlAction]:
        """Translate this frame's window events and held keys."""
        actions = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                actions.append(ControlAction.QUIT)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                actions.append(ControlAction.QUIT)

        keys = pygame.key.get_pressed()
        mods = pygame.key.get_mods()
        if keys[pygame.K_r]:
            actions.append(ControlAction.RESET)
        if keys[pygame.K_w] and mods & (pygame.KMOD_GUI | pygame.KMOD_CTRL):
            actions.append(ControlAction.QUIT)
        if keys[pygame.K_UP]:
            actions.append(ControlAction.SPEED_UP)
        if keys[pygame.K_DOWN]:
            actions.append(ControlAction.SPEED_DOWN)
        return actions

    def present(self) -> None:
        self.screen.blit(self.canvas, (0, 0))
        pygame.display.flip()
        pygame.display.set_caption(
            f"Langton's ant | {self.tick_rate.rate} ticks/s | "
            f"tick {self.engine.tick}")

    def run(self) -> None:
        """Frame loop: poll, control, advance, draw, present, pace."""
        running = True
        try:
            while running:
                actions = self.poll_actions()
                running = apply_actions(actions, self.engine, self.tick_rate)
                if not running:
                    break
                if ControlAction.RESET in actions:
                    self.clear()

                self.draw(self.engine.advance(self.config.steps_per_tick))
                self.present()
                if self.engine.is_finished():
                    break
                self.clock.tick(self.tick_rate.rate)
        finally:
            pygame.quit()
