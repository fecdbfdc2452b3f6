# config.py
"""
Run-time settings for the filter demo.

Everything that is fixed for the lifetime of one run lives here:
camera index, window labels, recording target and the optional extras
(sliders, CSV log, stats overlay).
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class AppConfig:
    camera_index: int = 0

    raw_window: str = "This is you, smile! :)"
    processed_window: str = "You, but processed!"

    # Recording sink: fixed file, codec, rate and size
    output_path: str = "footage.avi"
    fourcc: str = "XVID"
    record_fps: float = 32.0
    record_size: Tuple[int, int] = (640, 480)  # (width, height)

    # Simpler variants of the demo turn these off
    recording_supported: bool = True
    sliders_enabled: bool = True

    log_path: Optional[str] = "filtercam_log.csv"  # None disables the CSV log
    show_stats: bool = True
    key_wait_ms: int = 1
