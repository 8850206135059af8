"""
coordinator.py — Sort Coordinator
===================================
The SortCoordinator is the ONLY object the presentation layer talks to.
It owns the shared SequenceStore and the Pacer, serializes control
requests, spawns one SortWorker per run and publishes status changes.

State machine:
    IDLE / DONE  →  start()            →  RUNNING
    RUNNING      →  toggle_pause()     →  PAUSED
    PAUSED       →  toggle_pause()     →  RUNNING
    RUNNING / PAUSED → request_stop()  →  STOPPING
    RUNNING / PAUSED → start()         →  STOPPING   (toggle policy)
    STOPPING     →  (worker exits)     →  DONE  "Stopped"
    RUNNING      →  (algorithm ends)   →  DONE  "Done"
    any          →  reset()            →  IDLE

Start-while-running policy:
    Pressing start while a sort is active only requests a stop; it does
    NOT queue the new algorithm.  start() returns False in that case and
    the caller starts again once the state is DONE.

Thread safety:
    Control calls may come from any thread.  They and the worker's finish
    hook are serialized by one lock.  snapshot() holds that lock only for
    the copy of the values, so it never stalls the worker for longer.
"""

import logging
import random
import threading
from enum import Enum
from typing import Callable, Iterable, List, Optional

from algorithms import AlgoInfo, get_algorithm
from sequence import SequenceStore, StepSnapshot, Frame, DEFAULT_SIZE
from engine.pacing import Pacer
from engine.worker import SortWorker, OUTCOME_DONE, OUTCOME_STOPPED


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    PAUSED   = "paused"
    STOPPING = "stopping"
    DONE     = "done"


ACTIVE_STATES = (RunState.RUNNING, RunState.PAUSED, RunState.STOPPING)


# ---------------------------------------------------------------------------
# SortCoordinator
# ---------------------------------------------------------------------------
class SortCoordinator:
    """
    Attributes:
        store     : The shared SequenceStore (persists across runs).
        pacer     : Speed flag and step delay shared by every run.
        listeners : Callbacks fired with every published StepSnapshot,
                    including the final status change of a run.  They run
                    on the worker thread and must not block.  The final
                    status is published under the coordinator lock.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        values: Optional[Iterable[int]] = None,
        fast_mode: bool = True,
        presets: Optional[dict] = None,
        seed: Optional[int] = None,
        on_step: Optional[Callable[[StepSnapshot], None]] = None,
    ):
        self.store:     SequenceStore = SequenceStore()
        self.pacer:     Pacer         = Pacer(fast_mode=fast_mode, presets=presets)
        self.listeners: List[Callable[[StepSnapshot], None]] = []
        if on_step:
            self.listeners.append(on_step)

        self._rng    = random.Random(seed)
        self._lock   = threading.RLock()
        self._state:  RunState              = RunState.IDLE
        self._worker: Optional[SortWorker]  = None
        self._algo:   Optional[AlgoInfo]    = None

        if values is not None:
            self.store.load(values)
        else:
            self.store.regenerate(size, self._rng)
        self.store.set_status("Idle")

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> RunState:
        return self._state

    @property
    def algorithm(self) -> Optional[AlgoInfo]:
        """The algorithm of the current or most recent run."""
        return self._algo

    @property
    def fast_mode(self) -> bool:
        return self.pacer.fast_mode

    def snapshot(self) -> Frame:
        """Consistent copy of values, highlight pair, comparisons, status, state and algorithm."""
        with self._lock:
            key = self._algo.key if self._algo else None
            return self.store.frame(self._state.value, key)

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Optional[Iterable[int]] = None) -> bool:
        """
        Start ``algo_key`` on a background worker.

        Returns True if a run was started.  While a run is active this only
        requests a stop and returns False.  From DONE the sequence is
        regenerated first; explicit ``values`` are loaded in any case.
        """
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        with self._lock:
            if self._state in ACTIVE_STATES:
                logger.info("Start %r while %s: stop requested instead", algo_key, self._state.value)
                self._request_stop_locked()
                return False

            if values is not None:
                self.store.load(values)
            elif self._state is RunState.DONE:
                self.store.regenerate(rng=self._rng)
            else:
                self.store.reset_metrics()

            self._algo  = info
            self._state = RunState.RUNNING
            self.store.set_status(f"Sorting: {info.label}")
            self._worker = SortWorker(
                info, self.store, self.pacer,
                on_step=self._notify, on_finish=self._finished,
            )
            self._worker.start()
        return True

    def toggle_pause(self) -> Optional[bool]:
        """Flip pause while RUNNING / PAUSED.  Returns the new paused flag, else None."""
        with self._lock:
            if self._state not in (RunState.RUNNING, RunState.PAUSED):
                return None
            paused = self._worker.signals.toggle_pause()
            self._state = RunState.PAUSED if paused else RunState.RUNNING
            prefix = "Paused" if paused else "Sorting"
            self.store.set_status(f"{prefix}: {self._algo.label}")
            logger.debug("Pause toggled: paused=%s", paused)
            return paused

    def request_stop(self) -> bool:
        """Ask the worker to stop at its next checkpoint.  Returns False if nothing runs."""
        with self._lock:
            return self._request_stop_locked()

    def reset(self, values: Optional[Iterable[int]] = None) -> None:
        """Stop any run, regenerate (or load) the sequence, zero metrics, go IDLE."""
        with self._lock:
            worker = self._worker
            if worker is not None and worker.is_current_thread:
                raise RuntimeError("reset() cannot be called from the sort worker thread")
            self._request_stop_locked()

        if worker is not None:
            worker.join()

        with self._lock:
            if values is not None:
                self.store.load(values)
            else:
                self.store.regenerate(rng=self._rng)
            self._worker = None
            self._algo   = None
            self._state  = RunState.IDLE
            self.store.set_status("Idle")
        logger.debug("Reset: %d fresh values", len(self.store))

    def set_fast_mode(self, fast: bool) -> None:
        self.pacer.fast_mode = bool(fast)
        logger.debug("Fast mode: %s", self.pacer.fast_mode)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the current worker exits.  Returns False on timeout."""
        worker = self._worker
        if worker is None:
            return True
        return worker.join(timeout)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _request_stop_locked(self) -> bool:
        if self._state not in (RunState.RUNNING, RunState.PAUSED):
            return False
        self._worker.signals.request_stop()
        self._state = RunState.STOPPING
        self.store.set_status("Stopping")
        logger.debug("Stop requested for %s", self._algo.label)
        return True

    def _finished(self, worker: SortWorker) -> None:
        with self._lock:
            if worker is not self._worker:
                return
            if worker.outcome == OUTCOME_DONE:
                status = "Done"
            elif worker.outcome == OUTCOME_STOPPED:
                status = "Stopped"
            else:
                status = f"Error: {worker.error}"
            self.store.clear_highlight()
            final = self.store.set_status(status)
            self._state = RunState.DONE
            # still locked: a new start() cannot publish before this run's final status
            self._notify(final)

    def _notify(self, step: StepSnapshot) -> None:
        for listener in list(self.listeners):
            listener(step)
