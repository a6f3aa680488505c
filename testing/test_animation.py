import pytest

from curvascope.animation import (AnimationClock, FrameLoop, ManualScheduler,
                                  TIME_FACTOR)

@pytest.fixture
def scheduler():
    return ManualScheduler()

@pytest.fixture
def frames():
    return []

@pytest.fixture
def loop(scheduler, frames):
    return FrameLoop(scheduler, frames.append)

def test_clock_wraps():
    clock = AnimationClock()
    assert clock.delta(1000.) == 0.
    assert clock.delta(1500.) == 500.

    clock.advance(4000.)
    assert clock.time == pytest.approx(4000. * TIME_FACTOR)

    clock.advance(4000.)
    assert 0 <= clock.time < 1
    assert clock.time == pytest.approx((8000. * TIME_FACTOR) % 1)

def test_first_frame_has_zero_delta(loop, scheduler, frames):
    loop.start()
    scheduler.run_frame(123456.)
    assert frames == [0.]
    assert loop.clock.time == 0.

    scheduler.run_frame(123456. + 1000.)
    assert frames[-1] == 0.
    assert loop.clock.time == pytest.approx(1000. * TIME_FACTOR)

def test_loop_reschedules(loop, scheduler, frames):
    loop.start()
    for t in range(10):
        scheduler.run_frame(t * 16.)

    assert len(frames) == 10
    assert scheduler.pending == 1
    assert frames == sorted(frames)

def test_start_twice(loop, scheduler):
    loop.start()
    loop.start()
    assert scheduler.pending == 1

def test_cancel_and_resume(loop, scheduler, frames):
    loop.start()
    scheduler.run_frame(0.)
    scheduler.run_frame(100.)
    time_before = loop.clock.time

    loop.cancel()
    assert not loop.running
    assert scheduler.pending == 0
    scheduler.run_frame(200.)
    assert len(frames) == 2

    # resuming after a long pause doesn't jump forward
    loop.start()
    scheduler.run_frame(100000.)
    assert frames[-1] == pytest.approx(time_before)
    assert loop.clock.time == pytest.approx(time_before)

def test_cancel_from_callback(scheduler):
    calls = []

    def on_frame(time):
        calls.append(time)
        loop.cancel()

    loop = FrameLoop(scheduler, on_frame)
    loop.start()
    scheduler.run_frame(0.)
    scheduler.run_frame(16.)

    assert len(calls) == 1
    assert scheduler.pending == 0

def test_failing_frame_can_restart(scheduler, frames):
    def on_frame(time):
        frames.append(time)
        if len(frames) == 2:
            raise RuntimeError("renderer failed")

    loop = FrameLoop(scheduler, on_frame)
    loop.start()
    scheduler.run_frame(0.)

    with pytest.raises(RuntimeError):
        scheduler.run_frame(16.)

    assert not loop.running
    assert scheduler.pending == 0

    loop.start()
    assert loop.running
    scheduler.run_frame(5000.)
    assert len(frames) == 3
    assert scheduler.pending == 1
