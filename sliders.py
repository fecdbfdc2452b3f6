# sliders.py
"""
Trackbars on the processed window, bound to a ParameterStore.

OpenCV fires trackbar callbacks from inside cv2.waitKey. The callback only
records a ParameterChange; the loop calls drain() before reading the next
frame, so parameters never change while a frame is being processed.
"""

from collections import deque
from typing import Deque, List

import cv2

from params import SLIDERS, ParameterChange, ParameterStore


class ParameterSliders:
    def __init__(self, window: str, store: ParameterStore) -> None:
        self.window = window
        self.store = store
        self._queue: Deque[ParameterChange] = deque()
        self._specs = {spec.name: spec for spec in SLIDERS}

    def create(self) -> None:
        """Create one trackbar per parameter, starting at its stored value."""
        for spec in SLIDERS:
            cv2.createTrackbar(
                spec.label,
                self.window,
                getattr(self.store, spec.name),
                spec.maximum,
                self._callback(spec.name),
            )

    def _callback(self, name: str):
        def on_change(position: int) -> None:
            self._queue.append(ParameterChange(name, int(position)))

        return on_change

    @property
    def pending(self) -> int:
        return len(self._queue)

    def drain(self) -> List[ParameterChange]:
        """
        Apply queued changes in arrival order.

        A slider left on an invalid position (e.g. an even blur size) is
        moved to the corrected value. Returns the applied changes with
        their corrected values.
        """
        applied: List[ParameterChange] = []
        while self._queue:
            change = self._queue.popleft()
            corrected = self.store.apply(change)
            spec = self._specs[change.name]
            # a slider cannot show a value past its maximum (blur 100 -> 101)
            if corrected != change.value and corrected <= spec.maximum:
                cv2.setTrackbarPos(spec.label, self.window, corrected)
            applied.append(ParameterChange(change.name, corrected))
        return applied
