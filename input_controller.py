# input_controller.py
"""
Keyboard control of the pipeline toggles.

Key -> transition lookup is a plain table so it can be tested without a
window; InputController only adds polling via cv2.waitKey and status
output.

    ESC  stop capturing
    1-9  blur, edge, gradient, brightness, contrast, negative,
         grayscale, half width, half height
    A    rotate 90 degrees clockwise (wraps after 4)
    B/C  mirror in x / y
    D    record
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional

import cv2

from toggles import ToggleState

KEY_ESC = 27


class Action(Enum):
    STOP = "stop"
    TOGGLE = "toggle"
    ROTATE = "rotate"


class Transition(NamedTuple):
    """One state change requested from the keyboard."""

    action: Action
    flag: Optional[str] = None

    def apply(self, toggles: ToggleState) -> None:
        if self.action is Action.STOP:
            toggles.stop()
        elif self.action is Action.ROTATE:
            toggles.rotate()
        else:
            toggles.toggle(self.flag)

    def describe(self, toggles: ToggleState) -> str:
        """Status line for the state after this transition was applied."""
        if self.action is Action.STOP:
            return "capture stopped"
        if self.action is Action.ROTATE:
            return f"rotation -> {toggles.rotation_quadrants * 90} deg"
        state = "on" if getattr(toggles, self.flag) else "off"
        return f"{self.flag} -> {state}"


KEY_TRANSITIONS: Dict[int, Transition] = {
    KEY_ESC: Transition(Action.STOP),
    ord("1"): Transition(Action.TOGGLE, "blur"),
    ord("2"): Transition(Action.TOGGLE, "edge"),
    ord("3"): Transition(Action.TOGGLE, "gradient"),
    ord("4"): Transition(Action.TOGGLE, "brightness"),
    ord("5"): Transition(Action.TOGGLE, "contrast"),
    ord("6"): Transition(Action.TOGGLE, "negative"),
    ord("7"): Transition(Action.TOGGLE, "grayscale"),
    ord("8"): Transition(Action.TOGGLE, "half_x"),
    ord("9"): Transition(Action.TOGGLE, "half_y"),
    ord("A"): Transition(Action.ROTATE),
    ord("B"): Transition(Action.TOGGLE, "mirror_x"),
    ord("C"): Transition(Action.TOGGLE, "mirror_y"),
    ord("D"): Transition(Action.TOGGLE, "recording"),
}


def transition_for_key(
    key: Optional[int], recording_supported: bool = True
) -> Optional[Transition]:
    """Return the transition bound to ``key``, or None for a no-op."""
    if key is None or key < 0:
        return None
    transition = KEY_TRANSITIONS.get(key)
    if transition is not None and transition.flag == "recording" and not recording_supported:
        return None
    return transition


class InputController:
    """
    Poll one key per loop iteration and apply it to the toggle state.
    """

    def __init__(self, wait_ms: int = 1, recording_supported: bool = True) -> None:
        self.wait_ms = max(1, int(wait_ms))
        self.recording_supported = recording_supported

    def poll_key(self) -> Optional[int]:
        """Wait at most ``wait_ms`` for a key; None when nothing is pending."""
        key = cv2.waitKey(self.wait_ms)
        if key < 0:
            return None
        return key & 0xFF

    def handle_key(self, key: Optional[int], toggles: ToggleState) -> Optional[Transition]:
        transition = transition_for_key(key, self.recording_supported)
        if transition is None:
            return None
        transition.apply(toggles)
        print(transition.describe(toggles))
        return transition

    def update(self, toggles: ToggleState) -> Optional[Transition]:
        return self.handle_key(self.poll_key(), toggles)
