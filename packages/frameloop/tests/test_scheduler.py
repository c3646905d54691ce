"""Tests for task registration, cancellation, pacing and lifecycle hooks."""

import pytest
from frameloop import Scheduler, SchedulerClosedError, TickContext, VirtualClock, WallClock


def test_scheduler_defaults_to_virtual_clock():
    scheduler = Scheduler()
    assert isinstance(scheduler.clock, VirtualClock)
    assert scheduler.clock.fps == 60


def test_scheduler_custom_fps():
    scheduler = Scheduler(fps=30)
    assert scheduler.clock.fps == 30


def test_scheduler_uses_given_clock():
    clock = WallClock(fps=60)
    scheduler = Scheduler(clock=clock)
    assert scheduler.clock is clock


# --- every() ---

def test_every_runs_each_frame():
    scheduler = Scheduler(fps=50)
    frames = []
    scheduler.every(lambda ctx: frames.append(ctx.frame_number))
    scheduler.run(3)
    assert frames == [1, 2, 3]


def test_tasks_run_in_registration_order():
    scheduler = Scheduler()
    order = []
    scheduler.every(lambda ctx: order.append("first"))
    scheduler.every(lambda ctx: order.append("second"))
    scheduler.step()
    assert order == ["first", "second"]


def test_all_tasks_share_one_context_per_frame():
    scheduler = Scheduler(fps=50)
    seen: list[TickContext] = []
    scheduler.every(seen.append)
    scheduler.every(seen.append)
    scheduler.step()
    assert seen[0] is seen[1]
    assert seen[0].now == 20.0
    assert seen[0].dt == 20.0


def test_task_added_during_frame_runs_next_frame():
    scheduler = Scheduler()
    calls = []

    def late(ctx):
        calls.append(("late", ctx.frame_number))

    def spawner(ctx):
        if ctx.frame_number == 1:
            scheduler.every(late)

    scheduler.every(spawner)
    scheduler.step()
    assert calls == []
    scheduler.step()
    assert calls == [("late", 2)]


# --- cancel() ---

def test_cancel_stops_task():
    scheduler = Scheduler()
    calls = []
    handle = scheduler.every(lambda ctx: calls.append(ctx.frame_number), name="count")
    scheduler.step()
    scheduler.cancel(handle)
    scheduler.run(3)
    assert calls == [1]
    assert not handle.active
    assert scheduler.tasks() == []


def test_cancel_is_idempotent():
    scheduler = Scheduler()
    handle = scheduler.every(lambda ctx: None)
    scheduler.cancel(handle)
    scheduler.cancel(handle)
    scheduler.cancel(None)
    assert scheduler.tasks() == []


def test_cancel_mid_frame_skips_later_task():
    scheduler = Scheduler()
    calls = []
    handles = {}

    def killer(ctx):
        scheduler.cancel(handles["victim"])

    scheduler.every(killer)
    handles["victim"] = scheduler.every(lambda ctx: calls.append("victim"))
    scheduler.run(2)
    assert calls == []


def test_task_can_cancel_itself():
    scheduler = Scheduler()
    calls = []
    handles = {}

    def once(ctx):
        calls.append(ctx.frame_number)
        scheduler.cancel(handles["once"])

    handles["once"] = scheduler.every(once)
    scheduler.run(3)
    assert calls == [1]


# --- close() ---

def test_close_cancels_everything():
    scheduler = Scheduler()
    a = scheduler.every(lambda ctx: None)
    b = scheduler.every(lambda ctx: None)
    scheduler.close()
    assert scheduler.closed
    assert not a.active and not b.active
    assert scheduler.tasks() == []


def test_every_after_close_raises():
    scheduler = Scheduler()
    scheduler.close()
    with pytest.raises(SchedulerClosedError, match="closed scheduler"):
        scheduler.every(lambda ctx: None, name="late")


# --- run / run_for / stop ---

def test_run_calls_start_and_stop_hooks():
    scheduler = Scheduler()
    events = []
    scheduler.on_start(lambda ctx: events.append("start"))
    scheduler.on_stop(lambda ctx: events.append("stop"))
    scheduler.every(lambda ctx: events.append(f"frame-{ctx.frame_number}"))
    scheduler.run(2)
    assert events == ["start", "frame-1", "frame-2", "stop"]


def test_step_does_not_call_hooks():
    scheduler = Scheduler()
    events = []
    scheduler.on_start(lambda ctx: events.append("start"))
    scheduler.on_stop(lambda ctx: events.append("stop"))
    scheduler.step()
    assert events == []


def test_request_stop_ends_run():
    scheduler = Scheduler()
    frames = []

    def stopper(ctx):
        frames.append(ctx.frame_number)
        if ctx.frame_number == 3:
            ctx.request_stop()

    scheduler.every(stopper)
    scheduler.run(10)
    assert frames == [1, 2, 3]


def test_run_for_covers_virtual_span():
    scheduler = Scheduler(fps=60)
    scheduler.run_for(1000)
    assert scheduler.clock.frame_number == 60
    assert scheduler.clock.now() == 1000.0


def test_run_forever_exits_on_request_stop():
    scheduler = Scheduler(fps=1000)
    events = []
    scheduler.on_stop(lambda ctx: events.append("stop"))

    def stopper(ctx):
        if ctx.frame_number == 5:
            ctx.request_stop()

    scheduler.every(stopper)
    scheduler.run_forever()
    assert scheduler.clock.frame_number == 5
    assert events == ["stop"]


# --- randomness ---

def test_seeded_random_is_deterministic():
    a = Scheduler(seed=42)
    b = Scheduler(seed=42)
    assert a.seed == 42
    assert [a.random.random() for _ in range(5)] == [b.random.random() for _ in range(5)]


def test_context_exposes_scheduler_rng():
    scheduler = Scheduler(seed=7)
    seen = []
    scheduler.every(lambda ctx: seen.append(ctx.random))
    scheduler.step()
    assert seen[0] is scheduler.random


def test_run_forever_paces_wall_clock_frames():
    scheduler = Scheduler(clock=WallClock(fps=200))
    stamps = []
    events = []
    scheduler.on_start(lambda ctx: events.append("start"))

    def stopper(ctx):
        stamps.append(ctx.now)
        if ctx.frame_number == 4:
            ctx.request_stop()

    scheduler.every(stopper)
    scheduler.run_forever()
    assert events == ["start"]
    assert len(stamps) == 4
    # Three full frame sleeps separate the first and last frames.
    assert stamps[-1] - stamps[0] >= 3 * scheduler.clock.frame_ms * 0.9


def test_run_forever_exits_when_closed_by_a_task():
    scheduler = Scheduler(fps=1000)

    def closer(ctx):
        if ctx.frame_number == 2:
            scheduler.close()

    scheduler.every(closer)
    scheduler.run_forever()
    assert scheduler.clock.frame_number == 2
