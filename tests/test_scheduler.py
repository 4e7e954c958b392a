import pytest

from galton.sim.scheduler import Scheduler


def test_interval_fires_when_due():
    sch = Scheduler()
    hits = []
    sch.set_interval(lambda: hits.append(sch.now_ms), 100)
    sch.tick(50)
    assert hits == []
    sch.tick(50)
    assert hits == [100]
    sch.tick(100)
    assert hits == [100, 200]


def test_long_tick_runs_interval_once():
    sch = Scheduler()
    hits = []
    sch.set_interval(lambda: hits.append(sch.now_ms), 100)
    sch.tick(350)
    assert hits == [350]
    # next run is one period after the late one, missed periods are dropped
    sch.tick(50)
    assert hits == [350]
    sch.tick(50)
    assert hits == [350, 450]


def test_each_due_interval_runs_once_per_tick():
    sch = Scheduler()
    hits = []
    sch.set_interval(lambda: hits.append("a"), 10)
    sch.set_interval(lambda: hits.append("b"), 30)
    sch.tick(100)
    assert hits == ["a", "b"]


def test_interval_can_clear_itself():
    sch = Scheduler()
    hits = []

    def cb():
        hits.append(1)
        if len(hits) == 2:
            sch.clear_interval(handle)

    handle = sch.set_interval(cb, 10)
    for _ in range(5):
        sch.tick(10)
    assert len(hits) == 2
    assert not sch.has_interval(handle)
    assert sch.idle


def test_frames_run_once_and_rerequest_on_next_tick():
    sch = Scheduler()
    runs = []

    def frame():
        runs.append(sch.now_ms)
        if len(runs) < 3:
            sch.request_frame(frame)

    sch.request_frame(frame)
    sch.tick(16)
    assert runs == [16]
    sch.tick(16)
    sch.tick(16)
    sch.tick(16)
    assert runs == [16, 32, 48]
    assert sch.idle


def test_intervals_run_before_frames():
    sch = Scheduler()
    order = []
    sch.set_interval(lambda: order.append("interval"), 10)
    sch.request_frame(lambda: order.append("frame"))
    sch.tick(10)
    assert order == ["interval", "frame"]


def test_cancel_is_idempotent():
    sch = Scheduler()
    h = sch.request_frame(lambda: None)
    sch.cancel_frame(h)
    sch.cancel_frame(h)
    sch.cancel_frame(None)
    sch.clear_interval(None)
    sch.clear_interval(12345)
    assert sch.idle


def test_cancelled_frame_in_same_tick_does_not_run():
    sch = Scheduler()
    runs = []
    second = {}

    def first():
        runs.append("first")
        sch.cancel_frame(second["h"])

    sch.request_frame(first)
    second["h"] = sch.request_frame(lambda: runs.append("second"))
    sch.tick(16)
    assert runs == ["first"]


def test_non_positive_interval_rejected():
    with pytest.raises(ValueError):
        Scheduler().set_interval(lambda: None, 0)
