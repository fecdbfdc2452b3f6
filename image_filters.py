# image_filters.py
"""
Frame processing pipeline.

Provides:
- One function per stage (frame in, new frame out)
- A FrameProcessor class that runs the enabled stages in a fixed order

Stage order:
    blur -> edge -> gradient -> brightness -> contrast -> negative
    -> grayscale -> half width -> half height -> rotation -> mirroring

The order matters: stages do not commute and each one consumes the
previous stage's output (e.g. Canny turns a colour frame into a
single-channel edge map before the gradient stage sees it).
"""

import cv2
import numpy as np

from params import ParameterStore
from toggles import ToggleState


def channels(frame: np.ndarray) -> int:
    """Number of colour channels (1 for a 2-D grayscale frame)."""
    if frame.ndim == 2:
        return 1
    return frame.shape[2]


def convert(frame: np.ndarray, alpha: float, beta: float) -> np.ndarray:
    """
    Linear pixel transform ``alpha * value + beta`` at the frame's own depth.

    Integer frames are rounded (half to even) and saturated to the range of
    their dtype; float frames are left unclipped.
    """
    out = frame.astype(np.float64) * alpha + beta
    if np.issubdtype(frame.dtype, np.integer):
        info = np.iinfo(frame.dtype)
        out = np.clip(np.rint(out), info.min, info.max)
    return out.astype(frame.dtype)


# ----------------------------------------------------------------------
# Stages
# ----------------------------------------------------------------------
def gaussian_blur(frame: np.ndarray, size: int) -> np.ndarray:
    return cv2.GaussianBlur(frame, (size, size), 0, borderType=cv2.BORDER_DEFAULT)


def canny_edges(frame: np.ndarray, high_threshold: int, low_threshold: float) -> np.ndarray:
    """Single-channel edge map."""
    return cv2.Canny(
        frame,
        high_threshold,
        low_threshold,
        apertureSize=3,
        L2gradient=True,
    )


def sobel_gradient(frame: np.ndarray) -> np.ndarray:
    """Average of the x and y first derivatives, kept at the frame's depth."""
    grad_x = cv2.Sobel(frame, -1, 1, 0, ksize=3, borderType=cv2.BORDER_DEFAULT)
    grad_y = cv2.Sobel(frame, -1, 0, 1, ksize=3, borderType=cv2.BORDER_DEFAULT)
    return cv2.addWeighted(grad_x, 0.5, grad_y, 0.5, 0)


def adjust_brightness(frame: np.ndarray, offset: int) -> np.ndarray:
    return convert(frame, 1.0, offset)


def adjust_contrast(frame: np.ndarray, gain: float) -> np.ndarray:
    return convert(frame, gain, 0.0)


def negative(frame: np.ndarray) -> np.ndarray:
    return convert(frame, -1.0, 255.0)


def to_grayscale(frame: np.ndarray) -> np.ndarray:
    """Convert BGR to single-channel; anything else passes through."""
    if channels(frame) == 3:
        return cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
    return frame


def half_width(frame: np.ndarray) -> np.ndarray:
    return cv2.resize(frame, (0, 0), fx=0.5, fy=1.0, interpolation=cv2.INTER_LINEAR)


def half_height(frame: np.ndarray) -> np.ndarray:
    return cv2.resize(frame, (0, 0), fx=1.0, fy=0.5, interpolation=cv2.INTER_LINEAR)


def rotate_quadrants(frame: np.ndarray, quadrants: int) -> np.ndarray:
    """Rotate by 90 degrees clockwise, ``quadrants`` times in a row."""
    for _ in range(quadrants % 4):
        frame = cv2.rotate(frame, cv2.ROTATE_90_CLOCKWISE)
    return frame


def mirror(frame: np.ndarray, mirror_x: bool, mirror_y: bool) -> np.ndarray:
    """
    Flip around the x axis, the y axis, or both at once.

    With both flags set this is a single cv2.flip(-1) call.
    """
    if mirror_x and mirror_y:
        return cv2.flip(frame, -1)
    if mirror_x:
        return cv2.flip(frame, 0)
    if mirror_y:
        return cv2.flip(frame, 1)
    return frame


# ----------------------------------------------------------------------
class FrameProcessor:
    """
    Apply the enabled pipeline stages to a frame.

    The processor keeps no state between calls; the output depends only on
    (frame, toggles, params). The input buffer is never written to.
    """

    def process(
        self, frame: np.ndarray, toggles: ToggleState, params: ParameterStore
    ) -> np.ndarray:
        """
        :param frame: BGR or grayscale frame as returned by OpenCV.
        :param toggles: Which stages to run.
        :param params: Current numeric parameters.
        :return: New processed frame (may differ in size and channels).
        """
        if toggles.blur:
            frame = gaussian_blur(frame, params.blur_size)

        if toggles.edge:
            frame = canny_edges(frame, params.edge_threshold, params.edge_low_threshold)

        if toggles.gradient:
            frame = sobel_gradient(frame)

        if toggles.brightness:
            frame = adjust_brightness(frame, params.brightness_offset)

        if toggles.contrast:
            frame = adjust_contrast(frame, params.contrast_gain)

        if toggles.negative:
            frame = negative(frame)

        if toggles.grayscale:
            frame = to_grayscale(frame)

        if toggles.half_x:
            frame = half_width(frame)

        if toggles.half_y:
            frame = half_height(frame)

        frame = rotate_quadrants(frame, toggles.rotation_quadrants)

        return mirror(frame, toggles.mirror_x, toggles.mirror_y)
