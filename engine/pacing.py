"""
pacing.py — Pacing Controller & Control Signals
=================================================
The worker's only suspension point.

ControlSignals is the per-run pause / stop token shared by the
coordinator (writer of the flags) and the worker (reader).  Pacer turns
the global speed flag into a per-step delay and implements the wait the
worker performs after every published step:

    worker:  for step in algorithm:
                 notify(step)
                 if not pacer.wait(signals):   # False → stop requested
                     break

Rules:
  - While paused the worker blocks on a condition variable.  resume()
    and request_stop() both wake it, so a pause never holds up a stop.
  - The step delay is slept on the same condition, so a stop cuts it
    short; a stopped run never pays the delay.
  - Flags are last-writer-wins.  Nothing is queued.
"""

import threading
from typing import Dict, Optional


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS: Dict[str, float] = {
    "fast": 0.005,
    "slow": 0.030,
}


# ---------------------------------------------------------------------------
# ControlSignals
# ---------------------------------------------------------------------------
class ControlSignals:
    """
    Attributes:
        paused  : True while the run should hold at its next checkpoint.
        stopped : True once a stop was requested.  Never cleared; a new run
                  gets a new ControlSignals.
    """

    def __init__(self):
        self._cond    = threading.Condition()
        self._paused  = False
        self._stopped = False

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def stopped(self) -> bool:
        return self._stopped

    def pause(self) -> None:
        with self._cond:
            self._paused = True
            self._cond.notify_all()

    def resume(self) -> None:
        with self._cond:
            self._paused = False
            self._cond.notify_all()

    def toggle_pause(self) -> bool:
        """Flip the paused flag; returns the new value."""
        with self._cond:
            self._paused = not self._paused
            self._cond.notify_all()
            return self._paused

    def request_stop(self) -> None:
        with self._cond:
            self._stopped = True
            self._cond.notify_all()

    def wait_while_paused(self) -> bool:
        """Block while paused.  Returns False if a stop was requested."""
        with self._cond:
            self._cond.wait_for(lambda: self._stopped or not self._paused)
            return not self._stopped

    def sleep(self, seconds: float) -> bool:
        """Sleep up to ``seconds``, waking early on stop.  Returns False if stopped."""
        with self._cond:
            if seconds > 0:
                self._cond.wait_for(lambda: self._stopped, timeout=seconds)
            return not self._stopped


# ---------------------------------------------------------------------------
# Pacer
# ---------------------------------------------------------------------------
class Pacer:
    """
    Attributes:
        fast_mode : Global speed flag, tunable while a run is in progress.
        presets   : {"fast": seconds, "slow": seconds}.
    """

    def __init__(self, fast_mode: bool = True, presets: Optional[Dict[str, float]] = None):
        self.fast_mode: bool             = fast_mode
        self.presets:   Dict[str, float] = dict(SPEED_PRESETS)
        if presets:
            self.presets.update(presets)

    def step_delay(self, fast_mode: Optional[bool] = None) -> float:
        if fast_mode is None:
            fast_mode = self.fast_mode
        return self.presets["fast" if fast_mode else "slow"]

    def wait(self, signals: ControlSignals) -> bool:
        """
        Called by the worker after every visible mutation.  Blocks while
        paused, then sleeps one step delay.  Returns False as soon as a
        stop is observed, without paying the delay.
        """
        if not signals.wait_while_paused():
            return False
        return signals.sleep(self.step_delay())
