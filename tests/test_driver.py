#!/usr/bin/env python3
"""
Tests for AnimationDriver.

What matters:
1. idle -> running -> idle transitions, with start/stop idempotent
2. animate() only ticks while running and always schedules the next frame
3. A tick that raises is logged and does not stop the loop
"""

import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ball_line_updown.driver import AnimationDriver


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_start_requests_immediate_redraw():
    requests = []
    driver = AnimationDriver(requests.append, frame_delay=0.02)

    assert not driver.running
    driver.start()
    assert driver.running
    assert requests == [0.0]

    driver.start()
    assert requests == [0.0], "start() while running must not request again"


def test_animate_while_idle_does_nothing():
    requests = []
    ticks = []
    driver = AnimationDriver(requests.append)

    assert driver.animate(lambda: ticks.append(1)) is False
    assert ticks == []
    assert requests == []


def test_animate_ticks_and_schedules_next_frame():
    print("\n=== Test: animate() Schedules Next Frame ===")

    requests = []
    ticks = []
    driver = AnimationDriver(requests.append, frame_delay=0.05)
    driver.start()

    for _ in range(3):
        assert driver.animate(lambda: ticks.append(1)) is True

    assert len(ticks) == 3
    assert requests == [0.0, 0.05, 0.05, 0.05]

    print("✓ One tick and one redraw request per frame")


def test_stop_from_inside_tick():
    requests = []
    driver = AnimationDriver(requests.append, frame_delay=0.05)
    driver.start()

    driver.animate(driver.stop)
    assert not driver.running
    # The frame showing the settled state is still requested
    assert requests == [0.0, 0.05]

    assert driver.animate(lambda: None) is False
    assert requests == [0.0, 0.05]


def test_stop_when_idle_is_noop():
    driver = AnimationDriver()
    driver.stop()
    assert not driver.running


def test_failed_tick_is_logged_and_loop_continues():
    print("\n=== Test: Failing Tick ===")

    handler = RecordingHandler()
    logger = logging.getLogger("ball_line_updown.driver")
    logger.addHandler(handler)
    try:
        requests = []
        driver = AnimationDriver(requests.append, frame_delay=0.05)
        driver.start()

        def broken_tick():
            raise ValueError("boom")

        assert driver.animate(broken_tick) is True
    finally:
        logger.removeHandler(handler)

    assert driver.running, "Driver must keep running after a failed tick"
    assert requests == [0.0, 0.05], "Next frame must still be scheduled"
    assert any(r.levelno == logging.ERROR and r.exc_info for r in handler.records)

    print("✓ Failed tick logged, next frame scheduled")


def test_driver_without_host_hook():
    driver = AnimationDriver()
    driver.start()
    ticks = []
    driver.animate(lambda: ticks.append(1))
    assert ticks == [1]


if __name__ == "__main__":
    test_start_requests_immediate_redraw()
    test_animate_while_idle_does_nothing()
    test_animate_ticks_and_schedules_next_frame()
    test_stop_from_inside_tick()
    test_stop_when_idle_is_noop()
    test_failed_tick_is_logged_and_loop_continues()
    test_driver_without_host_hook()
    print("\nAll AnimationDriver tests passed!")
