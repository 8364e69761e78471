"""Runtime control surface: tick-rate adjustment and control actions."""

from enum import Enum
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .model.engine import SimulationEngine


class ControlAction(Enum):
    RESET = "reset"
    SPEED_UP = "speed_up"
    SPEED_DOWN = "speed_down"
    QUIT = "quit"


class TickRateControl:
    """
    Current tick rate, adjustable between frames.

    Read at the top of each frame; never drops below `floor`.
    """

    def __init__(self, initial: int, step: int = 5, floor: int = 1):
        self.rate = max(initial, floor)
        self.step = step
        self.floor = floor

    def speed_up(self) -> int:
        self.rate += self.step
        return self.rate

    def speed_down(self) -> int:
        self.rate = max(self.rate - self.step, self.floor)
        return self.rate


def apply_actions(actions: Iterable[ControlAction],
                  engine: "SimulationEngine",
                  tick_rate: TickRateControl) -> bool:
    """
    Apply one frame's polled actions. Returns False when the loop
    should stop.
    """
    running = True
    for action in actions:
        if action is ControlAction.QUIT:
            running = False
        elif action is ControlAction.RESET:
            engine.reset()
        elif action is ControlAction.SPEED_UP:
            tick_rate.speed_up()
        elif action is ControlAction.SPEED_DOWN:
            tick_rate.speed_down()
    return running
