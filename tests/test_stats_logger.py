import csv

import pytest

from logger import FrameLogger
from stats import StatsTracker


class FakeClock:
    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now


def test_stats_average_fps_over_window():
    clock = FakeClock()
    stats = StatsTracker(window=0.5, clock=clock)

    for _ in range(3):
        clock.now += 0.125
        stats.update()
    assert stats.fps == 0.0  # window not complete yet

    clock.now += 0.125
    stats.update()
    assert stats.fps == pytest.approx(8.0)
    assert stats.total_frames == 4
    assert stats.elapsed == pytest.approx(0.5)


def test_logger_writes_header_once(tmp_path):
    path = tmp_path / "log.csv"

    logger = FrameLogger(str(path))
    logger.log(1, ["blur", "edge"], 90, True, 29.5, 0.25)
    logger.close()
    logger.close()

    logger = FrameLogger(str(path))
    logger.log(2, [], 0, False, 30.0, 0.5)
    logger.close()

    with open(path, newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))

    assert rows[0] == FrameLogger.HEADER
    assert rows[1] == ["1", "blur+edge", "90", "1", "29.500", "0.250"]
    assert rows[2] == ["2", "none", "0", "0", "30.000", "0.500"]
    assert len(rows) == 3


def test_logger_ignores_rows_after_close(tmp_path):
    path = tmp_path / "log.csv"
    logger = FrameLogger(str(path))
    logger.close()
    logger.log(1, [], 0, False, 0.0, 0.0)
    assert path.read_text(encoding="utf-8").count("\n") == 1
