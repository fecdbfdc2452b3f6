# logger.py
"""
CSV logger for per-frame pipeline statistics.

Each row contains:
- Frame index
- Active stages, joined with "+"
- Rotation in degrees
- Whether the frame was recorded
- FPS
- Elapsed time
"""

import csv
import os
from typing import Optional, Sequence


class FrameLogger:
    """
    Append one row per processed frame to a CSV file.
    """

    HEADER = ["frame", "stages", "rotation", "recording", "fps", "elapsed_seconds"]

    def __init__(self, filename: str = "filtercam_log.csv"):
        """
        :param filename: Path to the CSV file.
        """
        self.filename = filename
        self._file = None
        self._writer: Optional[csv.writer] = None

        # Header only for a new (or empty) file
        need_header = not os.path.exists(self.filename) or os.path.getsize(self.filename) == 0

        self._file = open(self.filename, mode="a", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)

        if need_header:
            self._writer.writerow(self.HEADER)

    def log(
        self,
        frame_index: int,
        stages: Sequence[str],
        rotation: int,
        recording: bool,
        fps: float,
        elapsed: float,
    ) -> None:
        """Append a single row to the CSV file."""
        if self._writer is None:
            return
        self._writer.writerow(
            [
                frame_index,
                "+".join(stages) or "none",
                rotation,
                int(recording),
                f"{fps:.3f}",
                f"{elapsed:.3f}",
            ]
        )

    def close(self) -> None:
        """Close the underlying file handle."""
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None
