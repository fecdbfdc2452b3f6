# toggles.py
"""
On/off switches for every stage of the filter pipeline.
"""

from dataclasses import dataclass, fields
from typing import List


# Stage flags in the order the pipeline applies them
STAGE_FLAGS = (
    "blur",
    "edge",
    "gradient",
    "brightness",
    "contrast",
    "negative",
    "grayscale",
    "half_x",
    "half_y",
)


@dataclass
class ToggleState:
    """
    Which operations are active for the next frame.

    Flags are independent; any combination is valid. ``rotation_quadrants``
    counts 90 degree clockwise turns and wraps at 4.
    """

    capturing: bool = True
    blur: bool = False
    edge: bool = False
    gradient: bool = False
    brightness: bool = False
    contrast: bool = False
    negative: bool = False
    grayscale: bool = False
    half_x: bool = False
    half_y: bool = False
    rotation_quadrants: int = 0
    mirror_x: bool = False
    mirror_y: bool = False
    recording: bool = False

    def toggle(self, flag: str) -> bool:
        """Invert one boolean flag and return its new value."""
        if flag == "capturing" or flag not in _BOOL_FLAGS:
            raise KeyError(f"not a toggle flag: {flag}")
        value = not getattr(self, flag)
        setattr(self, flag, value)
        return value

    def rotate(self) -> int:
        self.rotation_quadrants = (self.rotation_quadrants + 1) % 4
        return self.rotation_quadrants

    def stop(self) -> None:
        self.capturing = False

    def active_stages(self) -> List[str]:
        """Names of the enabled stages, in pipeline order."""
        stages = [name for name in STAGE_FLAGS if getattr(self, name)]
        if self.rotation_quadrants:
            stages.append(f"rotate{self.rotation_quadrants * 90}")
        if self.mirror_x and self.mirror_y:
            stages.append("mirror_xy")
        elif self.mirror_x:
            stages.append("mirror_x")
        elif self.mirror_y:
            stages.append("mirror_y")
        return stages


_BOOL_FLAGS = frozenset(f.name for f in fields(ToggleState) if f.type in (bool, "bool"))
