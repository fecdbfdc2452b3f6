# capture_loop.py
"""
Interactive webcam filter demo.

This app:
- opens a camera,
- shows the raw feed in one window,
- runs the toggled pipeline stages and shows the result in a second window,
- exposes blur / edge / brightness / contrast sliders on that window,
- optionally records the processed feed to a video file,
- logs per-frame statistics to CSV.

Keys (see input_controller.py): ESC quits, 1-9 and A-C toggle stages,
D toggles recording.
"""

import sys
from typing import Optional

import cv2
import numpy as np

from config import AppConfig
from image_filters import FrameProcessor
from input_controller import InputController
from logger import FrameLogger
from params import ParameterStore
from recorder import RecorderError, VideoRecorder
from sliders import ParameterSliders
from stats import StatsTracker
from toggles import ToggleState


class CaptureUnavailable(RuntimeError):
    """The camera could not be opened."""


class CaptureLoop:
    """
    Pull, process, display and record frames until ESC or end of stream.

    Toggle state and parameters are explicit objects shared with the input
    controller and the sliders; both only change them between frames.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        toggles: Optional[ToggleState] = None,
        params: Optional[ParameterStore] = None,
        capture=None,
        controller: Optional[InputController] = None,
        processor: Optional[FrameProcessor] = None,
    ):
        self.config = config or AppConfig()
        self.toggles = toggles or ToggleState()
        self.params = params or ParameterStore()
        self.controller = controller or InputController(
            wait_ms=self.config.key_wait_ms,
            recording_supported=self.config.recording_supported,
        )
        self.processor = processor or FrameProcessor()

        # Video capture / sinks
        self.cap = capture
        self.recorder: Optional[VideoRecorder] = None
        self.sliders: Optional[ParameterSliders] = None
        self.logger: Optional[FrameLogger] = None

        self.stats: Optional[StatsTracker] = None
        self.frame_index = 0
        self._windows_open = False

    # ------------------------------------------------------------------
    # Source
    # ------------------------------------------------------------------
    def open(self) -> None:
        """Open the camera unless a capture object was supplied."""
        if self.cap is None:
            self.cap = cv2.VideoCapture(self.config.camera_index)
        if not self.cap.isOpened():
            self.cap.release()
            self.cap = None
            raise CaptureUnavailable(
                f"could not open camera index {self.config.camera_index}"
            )

    def _read(self) -> Optional[np.ndarray]:
        """Next frame, or None once the stream is exhausted."""
        ret, frame = self.cap.read()
        if not ret or frame is None or frame.size == 0:
            return None
        return frame

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def run(self) -> int:
        """
        Run until ESC is pressed or the camera runs dry.

        :return: Number of processed frames.
        :raises CaptureUnavailable: if the camera cannot be opened.
        """
        self.open()
        try:
            frame = self._read()
            if frame is None:
                print("No frames from camera")
                return 0

            self._setup(frame)

            while self.toggles.capturing:
                if self.sliders is not None:
                    self.sliders.drain()

                if frame is None:
                    frame = self._read()
                    if frame is None:
                        print("End of stream")
                        break

                self._process_frame(frame)
                frame = None

                self.controller.update(self.toggles)

            return self.frame_index
        finally:
            self.close()

    def _setup(self, first_frame: np.ndarray) -> None:
        """Create windows and sinks; the first frame fixes the recorder's colour mode."""
        cfg = self.config

        if cfg.recording_supported:
            self.recorder = VideoRecorder.from_first_frame(
                first_frame,
                cfg.output_path,
                fourcc=cfg.fourcc,
                fps=cfg.record_fps,
                frame_size=cfg.record_size,
            )

        cv2.namedWindow(cfg.raw_window)
        cv2.namedWindow(cfg.processed_window)
        self._windows_open = True
        if cfg.sliders_enabled:
            self.sliders = ParameterSliders(cfg.processed_window, self.params)
            self.sliders.create()

        if cfg.log_path:
            self.logger = FrameLogger(cfg.log_path)

        self.stats = StatsTracker()
        self.frame_index = 0

    def _process_frame(self, frame: np.ndarray) -> None:
        """Display raw, process, display processed, record and log one frame."""
        cfg = self.config
        self.frame_index += 1

        if cfg.show_stats:
            cv2.imshow(cfg.raw_window, self._draw_stats(frame))
        else:
            cv2.imshow(cfg.raw_window, frame)

        processed = self.processor.process(frame, self.toggles, self.params)
        cv2.imshow(cfg.processed_window, processed)

        recorded = self.toggles.recording and self.recorder is not None
        if recorded:
            recorded = self._record(processed)

        self.stats.update()

        if self.logger is not None:
            self.logger.log(
                frame_index=self.frame_index,
                stages=self.toggles.active_stages(),
                rotation=self.toggles.rotation_quadrants * 90,
                recording=recorded,
                fps=self.stats.fps,
                elapsed=self.stats.elapsed,
            )

    def _record(self, frame: np.ndarray) -> bool:
        """Write one frame; a writer that cannot open turns recording off."""
        try:
            self.recorder.write(frame)
        except RecorderError as exc:
            print(f"Recording disabled: {exc}")
            self.recorder = None
            self.toggles.recording = False
            return False
        return True

    def _draw_stats(self, frame: np.ndarray) -> np.ndarray:
        """FPS and active stages drawn on a copy of the raw frame."""
        out = frame.copy()
        stages = ", ".join(self.toggles.active_stages()) or "none"
        cv2.putText(out, f"FPS: {self.stats.fps:.1f}", (10, 20),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, (255, 255, 255), 2, cv2.LINE_AA)
        cv2.putText(out, f"Stages: {stages}", (10, 45),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.6, (255, 255, 255), 2, cv2.LINE_AA)
        if self.toggles.recording:
            cv2.putText(out, "REC", (10, 70),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 0, 255), 2, cv2.LINE_AA)
        return out

    # ------------------------------------------------------------------
    # Cleanup / main
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Release the camera, the recorder and the log file."""
        if self.cap is not None:
            self.cap.release()
            self.cap = None
        if self.recorder is not None:
            self.recorder.close()
            self.recorder = None
        if self.logger is not None:
            self.logger.close()
            self.logger = None
        if self._windows_open:
            cv2.destroyAllWindows()
            self._windows_open = False


def main(**overrides) -> int:
    """Run the demo; keyword arguments override AppConfig fields."""
    config = AppConfig(**overrides)
    loop = CaptureLoop(config)
    try:
        frames = loop.run()
    except (CaptureUnavailable, RecorderError) as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Processed {frames} frames")
    return 0


if __name__ == "__main__":
    sys.exit(main())
