"""
Tests for the SortCoordinator state machine and its background worker.
"""

import threading
import time

import pytest

import algorithms
from algorithms import AlgoInfo, REGISTRY
from engine import RunState


PACED = {"fast": 0.01, "slow": 0.01}
STEP_DELAY = 0.5
SLOW = {"fast": STEP_DELAY, "slow": STEP_DELAY}


def _is_sorted(values):
    return all(values[i] <= values[i + 1] for i in range(len(values) - 1))


def _wait_for_steps(coordinator, count):
    """Register a listener that sets an Event once ``count`` steps were published."""
    reached = threading.Event()

    def listener(step):
        if step.step_number >= count:
            reached.set()

    coordinator.listeners.append(listener)
    return reached


# ---------------------------------------------------------------------------
# Full runs
# ---------------------------------------------------------------------------
def test_starts_idle_with_random_values(make_coordinator):
    c = make_coordinator(size=30)
    frame = c.snapshot()
    assert c.state is RunState.IDLE
    assert frame.status == "Idle"
    assert len(frame.values) == 30
    assert frame.comparisons == 0


def test_run_to_done(make_coordinator):
    c = make_coordinator(values=[5, 3, 8, 1])
    assert c.start("quick") is True
    assert c.wait(5.0)

    frame = c.snapshot()
    assert c.state is RunState.DONE
    assert frame.state == "done"
    assert frame.status == "Done"
    assert frame.values == (1, 3, 5, 8)
    assert frame.comparisons == 5
    assert frame.highlight_a is None and frame.highlight_b is None
    assert c.algorithm.key == "quick"


@pytest.mark.parametrize("key", list(REGISTRY))
def test_every_algorithm_sorts_in_the_background(make_coordinator, rng, key):
    values = [rng.randrange(500) for _ in range(120)]
    c = make_coordinator(values=values)
    assert c.start(key)
    assert c.wait(10.0)

    frame = c.snapshot()
    assert frame.status == "Done"
    assert list(frame.values) == sorted(values)


def test_listeners_see_steps_in_order_then_final_status(make_coordinator, rng):
    seen = []
    c = make_coordinator(values=[rng.randrange(500) for _ in range(30)], on_step=seen.append)
    c.start("insertion")
    assert c.wait(5.0)

    steps, final = seen[:-1], seen[-1]
    assert [s.step_number for s in steps] == list(range(1, len(steps) + 1))
    assert all(s.status == "Sorting: Insertion Sort" for s in steps)
    assert final.status == "Done"
    assert final.comparisons == c.snapshot().comparisons


@pytest.mark.parametrize("values", [[], [42]])
def test_degenerate_input_finishes_immediately(make_coordinator, values):
    seen = []
    c = make_coordinator(values=values, on_step=seen.append)
    for key in REGISTRY:
        seen.clear()
        assert c.start(key, values=values)
        assert c.wait(2.0)
        frame = c.snapshot()
        assert frame.status == "Done"
        assert frame.comparisons == 0
        assert list(frame.values) == values
        # only the final status change is published
        assert [s.status for s in seen] == ["Done"]


def test_all_equal_input_completes(make_coordinator):
    c = make_coordinator(values=[9] * 64)
    c.start("binary-insertion")
    assert c.wait(5.0)
    assert c.snapshot().values == (9,) * 64


def test_start_from_done_regenerates_values(make_coordinator):
    c = make_coordinator(values=[3, 2, 1] * 20)
    c.start("merge")
    assert c.wait(5.0)
    first = c.snapshot().values

    assert c.start("bubble")
    assert c.wait(10.0)
    frame = c.snapshot()
    assert frame.status == "Done"
    assert frame.comparisons == 60 * 59 // 2
    assert frame.values != first
    assert _is_sorted(frame.values)


def test_unknown_algorithm_is_rejected(make_coordinator):
    c = make_coordinator(values=[1, 2])
    with pytest.raises(ValueError):
        c.start("bogo")
    assert c.state is RunState.IDLE


def test_invalid_values_are_rejected(make_coordinator):
    c = make_coordinator(values=[1, 2])
    with pytest.raises(ValueError):
        c.start("merge", values=[3, -1])
    assert c.state is RunState.IDLE


# ---------------------------------------------------------------------------
# Start-while-running policy
# ---------------------------------------------------------------------------
def test_start_while_running_only_requests_stop(make_coordinator, rng):
    c = make_coordinator(values=[rng.randrange(500) for _ in range(200)], presets=PACED)
    assert c.start("bubble") is True

    assert c.start("merge") is False
    assert c.state in (RunState.STOPPING, RunState.DONE)
    assert c.wait(2.0)
    assert c.state is RunState.DONE
    assert c.snapshot().status == "Stopped"
    # the second request was not queued
    assert c.algorithm.key == "bubble"

    # an explicit second start runs the new algorithm
    c.pacer.presets.update(fast=0.0)
    assert c.start("merge") is True
    assert c.wait(5.0)
    assert c.snapshot().status == "Done"
    assert c.algorithm.key == "merge"


# ---------------------------------------------------------------------------
# Pause / resume
# ---------------------------------------------------------------------------
def test_pause_holds_progress_and_resume_continues(make_coordinator, rng):
    c = make_coordinator(values=[rng.randrange(500) for _ in range(200)], presets=PACED)
    reached = _wait_for_steps(c, 3)
    c.start("bubble")
    assert reached.wait(2.0)

    assert c.toggle_pause() is True
    assert c.state is RunState.PAUSED
    assert c.snapshot().status == "Paused: Bubble Sort"

    time.sleep(0.05)
    held = c.snapshot().comparisons
    time.sleep(0.15)
    assert c.snapshot().comparisons == held

    assert c.toggle_pause() is False
    assert c.state is RunState.RUNNING
    assert c.snapshot().status == "Sorting: Bubble Sort"
    time.sleep(0.1)
    assert c.snapshot().comparisons > held


def test_stop_while_paused(make_coordinator, rng):
    c = make_coordinator(values=[rng.randrange(500) for _ in range(200)], presets=SLOW)
    reached = _wait_for_steps(c, 1)
    c.start("quick")
    assert reached.wait(2.0)
    assert c.toggle_pause() is True

    t0 = time.monotonic()
    assert c.request_stop() is True
    assert c.wait(STEP_DELAY)
    assert time.monotonic() - t0 < STEP_DELAY
    assert c.snapshot().status == "Stopped"


def test_controls_are_noops_when_idle(make_coordinator):
    c = make_coordinator(values=[1, 2, 3])
    assert c.toggle_pause() is None
    assert c.request_stop() is False
    assert c.state is RunState.IDLE


def test_fast_mode_is_tunable(make_coordinator):
    c = make_coordinator(values=[1], presets={"fast": 0.001, "slow": 0.2})
    assert c.fast_mode is True
    c.set_fast_mode(False)
    assert c.fast_mode is False
    assert c.pacer.step_delay() == 0.2


# ---------------------------------------------------------------------------
# Stop latency
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("key", list(REGISTRY))
def test_stop_reaches_done_within_one_step_delay(make_coordinator, rng, key):
    c = make_coordinator(values=[rng.randrange(500) for _ in range(300)], presets=SLOW)
    reached = _wait_for_steps(c, 1)
    c.start(key)
    assert reached.wait(2.0)

    # the worker is now inside its step delay
    t0 = time.monotonic()
    assert c.request_stop() is True
    assert c.wait(STEP_DELAY)
    elapsed = time.monotonic() - t0

    frame = c.snapshot()
    assert c.state is RunState.DONE
    assert frame.status == "Stopped"
    assert len(frame.values) == 300
    assert elapsed < STEP_DELAY


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------
def test_reset_is_idempotent_without_a_run(make_coordinator):
    c = make_coordinator(size=25)
    for _ in range(2):
        c.reset()
        frame = c.snapshot()
        assert c.state is RunState.IDLE
        assert frame.comparisons == 0
        assert frame.status == "Idle"
        assert len(frame.values) == 25


def test_reset_stops_an_active_run(make_coordinator, rng):
    c = make_coordinator(values=[rng.randrange(500) for _ in range(200)], presets=PACED)
    c.start("insertion")
    c.reset()

    frame = c.snapshot()
    assert c.state is RunState.IDLE
    assert frame.status == "Idle"
    assert frame.comparisons == 0
    assert c.algorithm is None
    assert len(frame.values) == 200


def test_reset_with_explicit_values(make_coordinator):
    c = make_coordinator(size=10)
    c.reset(values=[4, 4, 1])
    assert c.snapshot().values == (4, 4, 1)


# ---------------------------------------------------------------------------
# Faults
# ---------------------------------------------------------------------------
def _broken_sort(seq):
    seq.highlight(0)
    yield seq.step()
    seq.get(len(seq))


def test_algorithm_fault_ends_the_run_with_error_status(make_coordinator, monkeypatch):
    monkeypatch.setitem(
        algorithms.REGISTRY, "broken",
        AlgoInfo(key="broken", label="Broken Sort", fn=_broken_sort),
    )
    c = make_coordinator(values=[3, 1, 2])
    assert c.start("broken")
    assert c.wait(2.0)

    frame = c.snapshot()
    assert c.state is RunState.DONE
    assert frame.status.startswith("Error:")

    # the coordinator and the store are still usable
    c.reset(values=[3, 1, 2])
    assert c.start("merge")
    assert c.wait(2.0)
    assert c.snapshot().values == (1, 2, 3)


def test_reset_from_worker_thread_is_refused(make_coordinator):
    errors = []
    c = make_coordinator(values=[2, 1, 3])

    def listener(step):
        if not errors:
            try:
                c.reset()
            except RuntimeError as exc:
                errors.append(exc)

    c.listeners.append(listener)
    c.start("bubble")
    assert c.wait(2.0)
    assert len(errors) == 1


# ---------------------------------------------------------------------------
# Observers
# ---------------------------------------------------------------------------
def test_snapshot_names_the_algorithm(make_coordinator):
    c = make_coordinator(values=[3, 1, 2])
    assert c.snapshot().algorithm is None

    c.start("radix")
    assert c.wait(2.0)
    frame = c.snapshot()
    assert frame.algorithm == "radix"
    assert frame.to_dict()["algorithm"] == "radix"

    c.reset()
    assert c.snapshot().algorithm is None


def test_final_status_reaches_listeners_before_the_next_run(make_coordinator):
    seen = []
    done_seen = threading.Event()
    release = threading.Event()

    def listener(step):
        if step.status == "Done" and not done_seen.is_set():
            done_seen.set()
            release.wait(2.0)
        seen.append(step.status)

    c = make_coordinator(values=[3, 2, 1], on_step=listener)
    c.start("insertion")
    assert done_seen.wait(2.0)

    starter = threading.Thread(target=c.start, args=("bubble",), kwargs={"values": [2, 1]})
    starter.start()
    time.sleep(0.1)
    # the next start waits for the final notification to finish
    assert c.state is RunState.DONE
    assert c.algorithm.key == "insertion"

    release.set()
    starter.join(2.0)
    assert c.wait(2.0)

    first_done = seen.index("Done")
    assert all(s == "Sorting: Insertion Sort" for s in seen[:first_done])
    assert all(s != "Sorting: Insertion Sort" for s in seen[first_done + 1:])
    assert seen[first_done + 1:] and seen[-1] == "Done"
    assert "Sorting: Bubble Sort" in seen[first_done + 1:]
