"""
main.py — Sorting Visualizer Flask App
=======================================
The web server that exposes the playback engine.

Routes:
  GET  /                       – minimal control page
  GET  /api/state              – current engine state (values, marks, counters, cursor…)
  GET  /api/algorithms         – registry cards
  POST /api/config/algo        – select algorithm (always reshuffles)
  POST /api/config/speed       – set speed level 1..10
  POST /api/config/size        – set array size (one of SIZE_OPTIONS)
  POST /api/shuffle            – fresh permutation, back to idle
  POST /api/step/play          – toggle play/pause (reshuffle once finished)
  POST /api/step/next          – run exactly one step while paused
  POST /api/advance            – per-frame advance by dt seconds
  POST /api/run                – headless metrics for the current permutation

State management:
  One Stepper per process, held in memory.  Steps are live objects and
  are not serialisable, so nothing goes into the Flask session.  Every
  route takes `_lock` before touching it, so requests are serialised
  whether the app runs under `python main.py` (threaded=False) or a
  threaded server such as `flask run`.
"""

from flask import Flask, render_template_string, request, jsonify
import functools
import logging
import os
import sys
import threading

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import list_algorithms
from dataset import SIZE_OPTIONS, DEFAULT_SIZE
from engine import Stepper, Recorder, MIN_SPEED, MAX_SPEED


logger = logging.getLogger(__name__)

DEFAULT_ALGO = "bubble"
HOST         = os.environ.get("SORTVIS_HOST", "0.0.0.0")
PORT         = int(os.environ.get("SORTVIS_PORT", "5000"))


app = Flask(__name__)
stepper = Stepper(algo_key=DEFAULT_ALGO, size=DEFAULT_SIZE)
_lock = threading.Lock()

# int()/float() failures on client-supplied numbers (1e400 parses to inf)
_BAD_NUMBER = (TypeError, ValueError, OverflowError)


def _locked(fn):
    """Serialise access to the shared Stepper."""
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        with _lock:
            return fn(*args, **kwargs)
    return wrapper


def _json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def _bad_request(err: Exception):
    return jsonify({"error": str(err)}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
@_locked
def index():
    return render_template_string(
        INDEX_TEMPLATE,
        algorithms=list_algorithms(),
        selected=stepper.algo_key,
        sizes=SIZE_OPTIONS,
        size=len(stepper.dataset),
        speed=stepper.speed,
        min_speed=MIN_SPEED,
        max_speed=MAX_SPEED,
    )


# ---------------------------------------------------------------------------
# API: State
# ---------------------------------------------------------------------------
@app.route("/api/state")
@_locked
def api_state():
    return jsonify(stepper.to_dict())


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([a.to_dict() for a in list_algorithms()])


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
@_locked
def api_config_algo():
    algo_key = _json_body().get("algo_key", DEFAULT_ALGO)
    if not isinstance(algo_key, str):
        return _bad_request(TypeError(f"algo_key must be a string, got {algo_key!r}"))
    try:
        stepper.select_algorithm(algo_key)
    except ValueError as e:
        return _bad_request(e)
    return jsonify(stepper.to_dict())


@app.route("/api/config/speed", methods=["POST"])
@_locked
def api_config_speed():
    try:
        stepper.set_speed(int(_json_body().get("speed", stepper.speed)))
    except _BAD_NUMBER as e:
        return _bad_request(e)
    return jsonify({"speed": stepper.speed, "steps_per_tick": stepper.steps_per_tick})


@app.route("/api/config/size", methods=["POST"])
@_locked
def api_config_size():
    try:
        stepper.set_size(int(_json_body().get("size", DEFAULT_SIZE)))
    except _BAD_NUMBER as e:
        return _bad_request(e)
    return jsonify(stepper.to_dict())


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@app.route("/api/shuffle", methods=["POST"])
@_locked
def api_shuffle():
    stepper.shuffle()
    return jsonify(stepper.to_dict())


@app.route("/api/step/play", methods=["POST"])
@_locked
def api_step_play():
    stepper.toggle_play()
    return jsonify(stepper.to_dict())


@app.route("/api/step/next", methods=["POST"])
@_locked
def api_step_next():
    if not stepper.step_once():
        return jsonify({"error": "No step to run (playing or finished)"}), 400
    return jsonify(stepper.to_dict())


@app.route("/api/advance", methods=["POST"])
@_locked
def api_advance():
    try:
        dt = float(_json_body().get("dt", 0.0))
    except _BAD_NUMBER as e:
        return _bad_request(e)
    executed = stepper.advance(dt)
    return jsonify({"executed": executed, **stepper.to_dict()})


@app.route("/api/run", methods=["POST"])
@_locked
def api_run():
    rec = Recorder()
    rec.start(stepper.algo_key, stepper.dataset.values)
    return jsonify(rec.run_to_completion().to_dict())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Sorting Visualizer</title>
  <style>
    body { font-family: sans-serif; background: #0a0c14; color: #dce0f0; margin: 16px; }
    #bars { display: flex; align-items: flex-end; height: 60vh; gap: 1px; }
    .bar { flex: 1; background: #4682d2; }
    .bar.comparing { background: #ffd23c; }
    .bar.swapping  { background: #ff5a5a; }
    .bar.sorted    { background: #50e682; }
    #status { margin: 12px 0; }
    #pseudocode .current { background: #2a3350; }
  </style>
</head>
<body>
  <div id="controls">
    <select id="algo">
      {% for a in algorithms %}
      <option value="{{ a.key }}" {% if a.key == selected %}selected{% endif %}>{{ a.label }} ({{ a.complexity_time }})</option>
      {% endfor %}
    </select>
    <select id="size">
      {% for s in sizes %}
      <option value="{{ s }}" {% if s == size %}selected{% endif %}>{{ s }}</option>
      {% endfor %}
    </select>
    <input id="speed" type="range" min="{{ min_speed }}" max="{{ max_speed }}" value="{{ speed }}">
    <button id="btn-play">Start / Pause</button>
    <button id="btn-next">Step</button>
    <button id="btn-shuffle">Shuffle</button>
  </div>
  <div id="status"></div>
  <div id="bars"></div>
  <p id="explanation"></p>
  <pre id="pseudocode"></pre>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function render(s) {
      if (!s.values) return;
      const n = s.values.length;
      document.getElementById('bars').innerHTML = s.values.map((v, i) =>
        `<div class="bar ${s.marks[i]}" style="height:${100 * v / n}%"></div>`).join('');
      document.getElementById('status').textContent =
        `${s.algo_label} | ${s.state.toUpperCase()} | Comparisons: ${s.counters.comparisons}` +
        ` | Swaps: ${s.counters.swaps} | Step ${s.cursor}/${s.total_steps} | Speed: ${s.speed}`;
      document.getElementById('explanation').textContent = s.explanation;
      const pre = document.getElementById('pseudocode');
      pre.innerHTML = '';
      s.pseudocode.forEach((line, i) => {
        const div = document.createElement('div');
        div.textContent = line || ' ';
        if (i === s.pseudocode_line) div.className = 'current';
        pre.appendChild(div);
      });
    }

    let last = performance.now();
    async function frame(now) {
      const dt = (now - last) / 1000;
      last = now;
      render(await post('/api/advance', {dt: dt}));
      requestAnimationFrame(frame);
    }

    document.getElementById('algo').addEventListener('change', async e =>
      render(await post('/api/config/algo', {algo_key: e.target.value})));
    document.getElementById('size').addEventListener('change', async e =>
      render(await post('/api/config/size', {size: +e.target.value})));
    document.getElementById('speed').addEventListener('input', async e =>
      await post('/api/config/speed', {speed: +e.target.value}));
    document.getElementById('btn-play').addEventListener('click', async () =>
      render(await post('/api/step/play')));
    document.getElementById('btn-next').addEventListener('click', async () =>
      render(await post('/api/step/next')));
    document.getElementById('btn-shuffle').addEventListener('click', async () =>
      render(await post('/api/shuffle')));

    requestAnimationFrame(frame);
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    print("=" * 60)
    print("  Sorting Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://localhost:{PORT}")
    print("=" * 60)
    app.run(debug=True, host=HOST, port=PORT, threaded=False, use_reloader=False)
