"""CSV export of ant trajectories."""

import csv
from pathlib import Path
from typing import Optional, TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from ..model.state import SimulationState


class CSVWriter:
    """
    Writes one row per ant per tick, flushed as it goes.

    Output format:
        tick,ant_id,x,y,heading
        1,0,17,42,left
        ...
    """

    FIELDS = ['tick', 'ant_id', 'x', 'y', 'heading']

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.file: Optional[TextIO] = None
        self.writer: Optional[csv.DictWriter] = None

    @property
    def is_open(self) -> bool:
        return self.file is not None

    def open(self) -> None:
        """Initialize file and write header."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.file = open(self.output_path, 'w', newline='')
        self.writer = csv.DictWriter(self.file, fieldnames=self.FIELDS)
        self.writer.writeheader()

    def append(self, state: "SimulationState") -> None:
        """Write the ants of one tick."""
        if not self.is_open:
            self.open()
        self.writer.writerows(state.to_csv_rows())
        self.file.flush()

    def close(self) -> None:
        if self.file:
            self.file.close()
            self.file = None
            self.writer = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
