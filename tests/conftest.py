"""Shared pytest fixtures for the filter demo tests."""

import sys
from pathlib import Path

import cv2
import numpy as np
import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeWriter:
    """Stands in for cv2.VideoWriter and keeps written frames in memory."""

    instances = []

    def __init__(self, path, fourcc, fps, size, is_color=True):
        self.path = path
        self.fourcc = fourcc
        self.fps = fps
        self.size = size
        self.is_color = is_color
        self.frames = []
        self.released = False
        self.opened = True
        FakeWriter.instances.append(self)

    def isOpened(self):
        return self.opened

    def write(self, frame):
        self.frames.append(frame)

    def release(self):
        self.released = True


class FakeGui:
    """Records the highgui calls made during a test."""

    def __init__(self):
        self.shown = []
        self.windows = []
        self.trackbars = {}
        self.positions = []
        self.destroyed = 0

    def imshow(self, name, frame):
        self.shown.append((name, frame))

    def namedWindow(self, name, *args):
        self.windows.append(name)

    def destroyAllWindows(self):
        self.destroyed += 1

    def createTrackbar(self, label, window, value, maximum, on_change):
        self.trackbars[label] = (window, value, maximum, on_change)

    def setTrackbarPos(self, label, window, position):
        self.positions.append((label, window, position))


@pytest.fixture()
def fake_writer(monkeypatch):
    FakeWriter.instances = []
    monkeypatch.setattr(cv2, "VideoWriter", FakeWriter)
    return FakeWriter


@pytest.fixture()
def fake_gui(monkeypatch):
    gui = FakeGui()
    for name in ("imshow", "namedWindow", "destroyAllWindows", "createTrackbar", "setTrackbarPos"):
        monkeypatch.setattr(cv2, name, getattr(gui, name))
    return gui


@pytest.fixture()
def color_frame():
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(12, 16, 3), dtype=np.uint8)


@pytest.fixture()
def gray_frame():
    rng = np.random.default_rng(11)
    return rng.integers(0, 256, size=(12, 16), dtype=np.uint8)
