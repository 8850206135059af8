"""
main.py — Sorting Visualizer Flask App
========================================
The web server that powers the visualizer.

Routes:
  GET  /                  – main UI
  GET  /api/algorithms    – registered algorithms
  GET  /api/state         – latest snapshot (the page polls this)
  POST /api/start         – start algorithm X (or stop the active run)
  POST /api/pause         – toggle pause / resume
  POST /api/stop          – request stop
  POST /api/reset         – new random values, back to Idle
  POST /api/speed         – set fast / slow pacing
  POST /api/compare       – headless side-by-side run of two algorithms

State management:
  One SortCoordinator per process.  Only one sort may run at a time
  system-wide, so the coordinator is shared by every browser tab; the
  page just renders whatever snapshot it reads.

Environment:
  SORTVIZ_SIZE       number of bars (default 150)
  SORTVIZ_HOST       bind address (default 127.0.0.1)
  SORTVIZ_PORT       port (default 5000)
  SORTVIZ_LOG_LEVEL  logging level name (default INFO)
"""

import logging
import os
import random

from flask import Flask, render_template_string, request, jsonify

from algorithms import get_algorithm, list_algorithms
from engine import SortCoordinator, Recorder, compare
from sequence import DEFAULT_SIZE, VALUE_RANGE
from ui import (
    render_bars,
    control_panel,
    algorithm_buttons,
    status_panel,
    comparison_panel,
)


MAX_COMPARE_SIZE = 1000

logger = logging.getLogger(__name__)

app = Flask(__name__)
coordinator = SortCoordinator(size=int(os.environ.get("SORTVIZ_SIZE", DEFAULT_SIZE)))


# ---------------------------------------------------------------------------
# State Helpers
# ---------------------------------------------------------------------------
def get_payload():
    return request.get_json(silent=True) or {}


def get_state():
    """Return the current snapshot plus rendered panels as a dict."""
    frame = coordinator.snapshot()
    algo = get_algorithm(frame.algorithm) if frame.algorithm else None
    return {
        "frame":     frame.to_dict(),
        "fast_mode": coordinator.fast_mode,
        "svg":       render_bars(frame),
        "status":    status_panel(frame, algo),
        "controls":  control_panel(state=frame.state, fast_mode=coordinator.fast_mode),
        "running":   frame.state in ("running", "paused", "stopping"),
    }


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    state = get_state()
    html = render_template_string(INDEX_TEMPLATE,
        svg=state["svg"],
        status=state["status"],
        controls=state["controls"],
        algo_buttons=algorithm_buttons(list_algorithms()),
        comparison=comparison_panel(),
    )
    return html


# ---------------------------------------------------------------------------
# API: Queries
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([
        {
            "key":              a.key,
            "label":            a.label,
            "complexity_time":  a.complexity_time,
            "complexity_space": a.complexity_space,
            "stable":           a.stable,
            "description":      a.description,
        }
        for a in list_algorithms()
    ])


@app.route("/api/state")
def api_state():
    return jsonify(get_state())


# ---------------------------------------------------------------------------
# API: Control
# ---------------------------------------------------------------------------
@app.route("/api/start", methods=["POST"])
def api_start():
    algo_key = get_payload().get("algo", "")
    try:
        started = coordinator.start(algo_key)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"started": started, **get_state()})


@app.route("/api/pause", methods=["POST"])
def api_pause():
    paused = coordinator.toggle_pause()
    return jsonify({"paused": paused, **get_state()})


@app.route("/api/stop", methods=["POST"])
def api_stop():
    stopping = coordinator.request_stop()
    return jsonify({"stopping": stopping, **get_state()})


@app.route("/api/reset", methods=["POST"])
def api_reset():
    coordinator.reset()
    return jsonify(get_state())


@app.route("/api/speed", methods=["POST"])
def api_speed():
    data = get_payload()
    if "fast" in data:
        if not isinstance(data["fast"], bool):
            return jsonify({"error": "fast must be true or false"}), 400
        coordinator.set_fast_mode(data["fast"])
    else:
        coordinator.set_fast_mode(not coordinator.fast_mode)
    return jsonify({"fast_mode": coordinator.fast_mode})


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = get_payload()
    left_key  = data.get("left", "")
    right_key = data.get("right", "")
    for key in (left_key, right_key):
        if get_algorithm(key) is None:
            return jsonify({"error": f"Unknown algorithm: {key}"}), 400

    try:
        size = int(data.get("size", len(coordinator.store)))
    except (TypeError, ValueError):
        return jsonify({"error": "size must be an integer"}), 400
    if not 0 <= size <= MAX_COMPARE_SIZE:
        return jsonify({"error": f"size must be between 0 and {MAX_COMPARE_SIZE}"}), 400

    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, str))):
        return jsonify({"error": "seed must be an integer or string"}), 400

    rng = random.Random(seed)
    values = [rng.randrange(VALUE_RANGE) for _ in range(size)]

    left, right = Recorder(), Recorder()
    left.start(left_key, values)
    right.start(right_key, values)
    left.run_to_completion()
    right.run_to_completion()
    result = compare(left, right)
    logger.info("Compared %s vs %s on %d values", left_key, right_key, size)

    return jsonify({
        "left":   result.left.__dict__,
        "right":  result.right.__dict__,
        "winner_comparisons": result.winner_comparisons,
        "winner_steps":       result.winner_steps,
        "winner_time":        result.winner_time,
        "panel":  comparison_panel(result),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #141414;
      --bg-panel: #1e1e1e;
      --button: #3c3c3c;
      --button-hover: #5a5a5a;
      --border: #2a2a2a;
      --text-primary: #ffffff;
      --text-secondary: #7d8590;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
      background: var(--bg-dark);
      color: var(--text-primary);
      display: flex;
      flex-direction: column;
      align-items: center;
      min-height: 100vh;
    }

    .panel { padding: 10px 16px; display: flex; gap: 8px; flex-wrap: wrap; justify-content: center; }
    .status-panel { width: 900px; justify-content: space-between; font-size: 14px; }
    #canvas-svg { margin: 8px 0; }

    button {
      background: var(--button);
      color: var(--text-primary);
      border: 1px solid var(--border);
      padding: 6px 14px;
      font-weight: 700;
      font-size: 15px;
      cursor: pointer;
    }
    button:hover:not(:disabled) { background: var(--button-hover); }
    button:disabled { opacity: 0.4; cursor: default; }

    .comparison-panel { flex-direction: column; align-items: center; }
    .comparison-table { border-collapse: collapse; font-size: 13px; }
    .comparison-table td, .comparison-table th { border: 1px solid var(--border); padding: 4px 10px; }
    .placeholder { color: var(--text-secondary); }
  </style>
</head>
<body>
  <div id="status-panel">{{ status|safe }}</div>
  <div id="canvas-svg">{{ svg|safe }}</div>
  <div id="controls">{{ controls|safe }}</div>
  <div id="algo-buttons">{{ algo_buttons|safe }}</div>
  <div id="compare">
    <div class="panel">
      <select id="compare-left"></select>
      <select id="compare-right"></select>
      <button id="btn-compare">⚖️ Compare</button>
    </div>
    <div id="comparison">{{ comparison|safe }}</div>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function render(state) {
      if (!state || !state.svg) return;
      document.getElementById('canvas-svg').innerHTML = state.svg;
      document.getElementById('status-panel').innerHTML = state.status;
      document.getElementById('controls').innerHTML = state.controls;
    }

    // Control buttons are re-rendered on every poll, so delegate clicks
    document.addEventListener('click', async (e) => {
      const id = e.target.id;
      if (id === 'btn-pause') render(await post('/api/pause'));
      else if (id === 'btn-stop') render(await post('/api/stop'));
      else if (id === 'btn-reset') render(await post('/api/reset'));
      else if (id === 'btn-speed') {
        await post('/api/speed', {fast: e.target.dataset.fast !== '1'});
        render(await (await fetch('/api/state')).json());
      } else if (e.target.classList.contains('btn-algo')) {
        render(await post('/api/start', {algo: e.target.dataset.key}));
      } else if (id === 'btn-compare') {
        const data = await post('/api/compare', {
          left: document.getElementById('compare-left').value,
          right: document.getElementById('compare-right').value,
        });
        if (data.panel) document.getElementById('comparison').innerHTML = data.panel;
      }
    });

    // Comparison selectors
    fetch('/api/algorithms').then((r) => r.json()).then((algos) => {
      for (const sel of ['compare-left', 'compare-right']) {
        const el = document.getElementById(sel);
        el.innerHTML = algos.map((a) => `<option value="${a.key}">${a.label}</option>`).join('');
      }
      document.getElementById('compare-right').selectedIndex = 3;
    });

    // Poll the latest snapshot; frames in between are simply skipped
    setInterval(async () => {
      render(await (await fetch('/api/state')).json());
    }, 60);
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("SORTVIZ_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.environ.get("SORTVIZ_HOST", "127.0.0.1")
    port = int(os.environ.get("SORTVIZ_PORT", "5000"))
    print("=" * 60)
    print("  Sorting Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://{host}:{port}")
    print("=" * 60)
    try:
        app.run(host=host, port=port, threaded=True)
    finally:
        coordinator.request_stop()
