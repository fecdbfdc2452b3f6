# recorder.py
"""
Video file sink for processed frames.

The channel layout is fixed from the first captured frame. Frames that no
longer match it (e.g. after grayscale or edge detection) are converted, and
frames whose size changed (half size, rotation) are resized to the fixed
output size, since cv2.VideoWriter silently drops mismatched frames.
"""

from typing import Optional, Tuple

import cv2
import numpy as np

from image_filters import channels


class RecorderError(RuntimeError):
    """The video writer could not be opened."""


class VideoRecorder:
    """
    Append frames to a single video file.

    The writer is created on the first write() and kept open until close(),
    so toggling recording off and on again keeps appending to the same file.
    """

    def __init__(
        self,
        path: str,
        fourcc: str = "XVID",
        fps: float = 32.0,
        frame_size: Tuple[int, int] = (640, 480),
        is_color: bool = True,
    ) -> None:
        """
        :param path: Output file path.
        :param fourcc: Four-character codec code.
        :param fps: Output frame rate.
        :param frame_size: Output (width, height).
        :param is_color: Whether the file stores 3-channel frames.
        """
        self.path = path
        self.fourcc = fourcc
        self.fps = float(fps)
        self.frame_size = (int(frame_size[0]), int(frame_size[1]))
        self.is_color = bool(is_color)
        self.frames_written = 0
        self._writer: Optional[cv2.VideoWriter] = None

    @classmethod
    def from_first_frame(cls, frame: np.ndarray, path: str, **kwargs) -> "VideoRecorder":
        """Build a recorder whose colour mode follows ``frame``."""
        return cls(path, is_color=channels(frame) == 3, **kwargs)

    @property
    def is_open(self) -> bool:
        return self._writer is not None

    def _open(self) -> None:
        writer = cv2.VideoWriter(
            self.path,
            cv2.VideoWriter_fourcc(*self.fourcc),
            self.fps,
            self.frame_size,
            self.is_color,
        )
        if not writer.isOpened():
            raise RecorderError(f"Could not open video writer: {self.path}")
        self._writer = writer
        print(f"Recording started: {self.path}")

    def prepare(self, frame: np.ndarray) -> np.ndarray:
        """Match ``frame`` to the writer's channel layout and size."""
        if self.is_color and channels(frame) == 1:
            frame = cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
        elif not self.is_color and channels(frame) == 3:
            frame = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)

        height, width = frame.shape[:2]
        if (width, height) != self.frame_size:
            frame = cv2.resize(frame, self.frame_size, interpolation=cv2.INTER_LINEAR)
        return frame

    def write(self, frame: np.ndarray) -> None:
        if self._writer is None:
            self._open()
        self._writer.write(self.prepare(frame))
        self.frames_written += 1

    def close(self) -> None:
        """Release the writer (safe to call more than once)."""
        if self._writer is not None:
            self._writer.release()
            self._writer = None
            print(f"Recording saved: {self.path} ({self.frames_written} frames)")

    def __enter__(self) -> "VideoRecorder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
