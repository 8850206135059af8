"""
worker.py — Background Sort Worker
====================================
One SortWorker per run.  It owns the thread and the run's ControlSignals,
drives the algorithm generator over the shared SequenceStore, and reports
how the run ended.

The generator yields a StepSnapshot after every visible mutation.  At each
yield the worker:
    1. hands the snapshot to the on_step callback (observers)
    2. calls Pacer.wait, the only place a run ever blocks
    3. stops pulling steps if the wait reports a stop request

Stopping closes the generator where it stands.  The sequence keeps
whatever partial order it reached.
"""

import logging
import threading
from typing import Callable, Optional

from algorithms import AlgoInfo
from sequence import SequenceStore, StepSnapshot
from engine.pacing import Pacer, ControlSignals


logger = logging.getLogger(__name__)


OUTCOME_DONE    = "done"
OUTCOME_STOPPED = "stopped"
OUTCOME_ERROR   = "error"


class SortWorker:
    """
    Attributes:
        info     : The algorithm being run.
        signals  : Pause / stop token for this run only.
        outcome  : OUTCOME_* once the run has ended, else None.
        error    : The exception that aborted the run, if any.
        steps    : Number of steps pulled from the generator.
    """

    def __init__(
        self,
        info: AlgoInfo,
        store: SequenceStore,
        pacer: Pacer,
        on_step: Optional[Callable[[StepSnapshot], None]] = None,
        on_finish: Optional[Callable[["SortWorker"], None]] = None,
    ):
        self.info:    AlgoInfo                = info
        self.signals: ControlSignals          = ControlSignals()
        self.outcome: Optional[str]           = None
        self.error:   Optional[BaseException] = None
        self.steps:   int                     = 0

        self._store     = store
        self._pacer     = pacer
        self._on_step   = on_step
        self._on_finish = on_finish
        self._thread    = threading.Thread(
            target=self._run, name=f"sort-{info.key}", daemon=True,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the thread.  Returns True if it has exited."""
        self._thread.join(timeout)
        return not self._thread.is_alive()

    @property
    def is_current_thread(self) -> bool:
        return threading.current_thread() is self._thread

    # ------------------------------------------------------------------
    # Thread body
    # ------------------------------------------------------------------
    def _run(self) -> None:
        logger.info("Run started: %s on %d values", self.info.label, len(self._store))
        generator = self.info.fn(self._store)
        outcome = OUTCOME_DONE
        try:
            for step in generator:
                self.steps += 1
                if self._on_step:
                    self._on_step(step)
                if not self._pacer.wait(self.signals):
                    outcome = OUTCOME_STOPPED
                    break
        except Exception as exc:
            logger.exception("Run aborted: %s raised", self.info.label)
            self.error = exc
            outcome = OUTCOME_ERROR
        finally:
            generator.close()

        self.outcome = outcome
        logger.info(
            "Run %s: %s after %d steps, %d comparisons",
            outcome, self.info.label, self.steps, self._store.comparisons,
        )
        if self._on_finish:
            self._on_finish(self)
