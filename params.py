# params.py
"""
Tunable numeric parameters of the filter pipeline.

Four integer knobs, each kept inside its valid range at all times:
- blur_size:      Gaussian kernel side, odd and >= 3
- edge_threshold: Canny high threshold, 0-255
- brightness:     additive offset stored as 0-510 (255 = no change)
- contrast:       gain stored as 0-200 (100 = x1.0)

Writes are never rejected; out-of-range values are corrected in place and
the corrected value is returned so a slider can be moved to match it.
"""

from typing import NamedTuple, Tuple


BRIGHTNESS_MAX = 510
BRIGHTNESS_NEUTRAL = 255
CONTRAST_MAX = 200
CONTRAST_NEUTRAL = 100
EDGE_THRESHOLD_MAX = 255
BLUR_SIZE_MIN = 3
BLUR_SLIDER_MAX = 100


class ParameterChange(NamedTuple):
    """A slider reported a new raw value for one parameter."""

    name: str
    value: int


class SliderSpec(NamedTuple):
    name: str
    label: str
    maximum: int


SLIDERS: Tuple[SliderSpec, ...] = (
    SliderSpec("blur_size", "Gaussian Blur", BLUR_SLIDER_MAX),
    SliderSpec("edge_threshold", "Canny High Threshold", EDGE_THRESHOLD_MAX),
    SliderSpec("brightness", "Brightness (+255)", BRIGHTNESS_MAX),
    SliderSpec("contrast", "Contrast (x100)", CONTRAST_MAX),
)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, int(value)))


class ParameterStore:
    """
    Hold and validate the pipeline parameters.
    """

    def __init__(
        self,
        blur_size: int = BLUR_SIZE_MIN,
        edge_threshold: int = EDGE_THRESHOLD_MAX,
        brightness: int = BRIGHTNESS_NEUTRAL,
        contrast: int = CONTRAST_NEUTRAL,
    ) -> None:
        self.blur_size = BLUR_SIZE_MIN
        self.edge_threshold = EDGE_THRESHOLD_MAX
        self.brightness = BRIGHTNESS_NEUTRAL
        self.contrast = CONTRAST_NEUTRAL

        self.set_blur_size(blur_size)
        self.set_edge_threshold(edge_threshold)
        self.set_brightness(brightness)
        self.set_contrast(contrast)

    # ------------------------------------------------------------------
    def set_blur_size(self, value: int) -> int:
        """Force an odd kernel size of at least 3."""
        value = int(value)
        if value % 2 == 0:
            value += 1
        if value < BLUR_SIZE_MIN:
            value = BLUR_SIZE_MIN
        self.blur_size = value
        return value

    def set_edge_threshold(self, value: int) -> int:
        self.edge_threshold = _clamp(value, 0, EDGE_THRESHOLD_MAX)
        return self.edge_threshold

    def set_brightness(self, value: int) -> int:
        self.brightness = _clamp(value, 0, BRIGHTNESS_MAX)
        return self.brightness

    def set_contrast(self, value: int) -> int:
        self.contrast = _clamp(value, 0, CONTRAST_MAX)
        return self.contrast

    # ------------------------------------------------------------------
    def apply(self, change: ParameterChange) -> int:
        """
        Apply one slider message and return the corrected value.

        Raises KeyError for a parameter name the store does not know.
        """
        setters = {
            "blur_size": self.set_blur_size,
            "edge_threshold": self.set_edge_threshold,
            "brightness": self.set_brightness,
            "contrast": self.set_contrast,
        }
        if change.name not in setters:
            raise KeyError(f"unknown parameter: {change.name}")
        return setters[change.name](change.value)

    # ------------------------------------------------------------------
    @property
    def brightness_offset(self) -> int:
        """Additive offset in [-255, 255]."""
        return self.brightness - BRIGHTNESS_NEUTRAL

    @property
    def contrast_gain(self) -> float:
        """Multiplicative factor in [0.0, 2.0]."""
        return self.contrast / float(CONTRAST_NEUTRAL)

    @property
    def edge_low_threshold(self) -> float:
        """Canny low threshold, a third of the high one."""
        return self.edge_threshold / 3.0

    def __repr__(self) -> str:
        return (
            f"ParameterStore(blur_size={self.blur_size}, "
            f"edge_threshold={self.edge_threshold}, "
            f"brightness={self.brightness}, contrast={self.contrast})"
        )
