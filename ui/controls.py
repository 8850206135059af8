"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • control_panel       – pause/resume, stop, reset, speed toggle
  • algorithm_buttons   – one start button per registered algorithm
  • status_panel        – status label, time complexity, comparison count
  • comparison_panel    – side-by-side metrics of two headless runs

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import Optional, List

from algorithms import AlgoInfo
from engine import ComparisonResult
from sequence import Frame


# ---------------------------------------------------------------------------
# Control Panel
# ---------------------------------------------------------------------------
def control_panel(
    state: str = "idle",
    fast_mode: bool = True,
) -> str:
    active = state in ("running", "paused")
    pause_label = "▶ Resume" if state == "paused" else "⏸ Pause"
    speed_label = "Speed: Fast" if fast_mode else "Speed: Slow"

    return f"""
    <div class="panel control-panel">
      <div class="button-row">
        <button id="btn-pause" {'' if active else 'disabled'}>{pause_label}</button>
        <button id="btn-stop" {'' if active else 'disabled'}>⏹ Stop</button>
        <button id="btn-reset">⟳ Reset</button>
        <button id="btn-speed" data-fast="{'1' if fast_mode else '0'}">{speed_label}</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Buttons
# ---------------------------------------------------------------------------
def algorithm_buttons(algorithms: List[AlgoInfo]) -> str:
    buttons = []
    for algo in algorithms:
        buttons.append(
            f'<button class="btn-algo" data-key="{algo.key}" '
            f'title="{algo.description}">'
            f'{algo.label.replace(" Sort", "")}</button>'
        )

    return f"""
    <div class="panel algorithm-buttons">
      {''.join(buttons)}
    </div>
    """


# ---------------------------------------------------------------------------
# Status Panel
# ---------------------------------------------------------------------------
def status_panel(frame: Optional[Frame] = None, algo: Optional[AlgoInfo] = None) -> str:
    if frame is None:
        return """
        <div class="panel status-panel">
          <span id="status">Status: Idle</span>
          <span id="info">Time: - | Comparisons: 0</span>
        </div>
        """

    complexity = algo.complexity_time if algo else "-"
    return f"""
    <div class="panel status-panel">
      <span id="status">Status: {frame.status}</span>
      <span id="info">Time: {complexity} | Comparisons: {frame.comparisons}</span>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison Mode</h3>
          <p class="placeholder">Run two algorithms on the same values to compare.</p>
        </div>
        """

    left = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {winner_label}"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison: {left.algo_label} vs {right.algo_label}</h3>
      <table class="comparison-table">
        <thead>
          <tr>
            <th>Metric</th>
            <th>{left.algo_label}</th>
            <th>{right.algo_label}</th>
            <th>Winner</th>
          </tr>
        </thead>
        <tbody>
          <tr>
            <td>Comparisons</td>
            <td>{left.comparisons}</td>
            <td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Steps</td>
            <td>{left.total_steps}</td>
            <td>{right.total_steps}</td>
            <td>{winner_badge(comp.winner_steps)}</td>
          </tr>
          <tr>
            <td>Wall Time</td>
            <td>{left.wall_time_ms:.2f} ms</td>
            <td>{right.wall_time_ms:.2f} ms</td>
            <td>{winner_badge(comp.winner_time)}</td>
          </tr>
          <tr>
            <td>Complexity</td>
            <td>{left.complexity_time}</td>
            <td>{right.complexity_time}</td>
            <td>—</td>
          </tr>
        </tbody>
      </table>
    </div>
    """
