import pytest

import main
from engine import RunState

from conftest import NO_DELAY


@pytest.fixture
def client():
    coordinator = main.coordinator
    saved = dict(coordinator.pacer.presets)
    coordinator.pacer.presets.update(NO_DELAY)
    coordinator.reset(values=[5, 3, 8, 1])
    main.app.config["TESTING"] = True
    with main.app.test_client() as c:
        yield c
    coordinator.reset()
    coordinator.pacer.presets.update(saved)
    coordinator.set_fast_mode(True)


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "Sorting Visualizer" in body
    assert 'data-key="binary-insertion"' in body


def test_algorithms_endpoint(client):
    data = client.get("/api/algorithms").get_json()
    assert [a["key"] for a in data][:2] == ["bubble", "insertion"]
    assert len(data) == 8


def test_state_endpoint(client):
    data = client.get("/api/state").get_json()
    assert data["frame"]["values"] == [5, 3, 8, 1]
    assert data["frame"]["state"] == "idle"
    assert data["frame"]["status"] == "Idle"
    assert data["svg"].startswith("<svg")
    assert data["running"] is False


def test_start_runs_the_algorithm(client):
    res = client.post("/api/start", json={"algo": "quick"})
    assert res.status_code == 200
    assert res.get_json()["started"] is True

    assert main.coordinator.wait(5.0)
    frame = client.get("/api/state").get_json()["frame"]
    assert frame["values"] == [1, 3, 5, 8]
    assert frame["comparisons"] == 5
    assert frame["status"] == "Done"


def test_start_unknown_algorithm(client):
    res = client.post("/api/start", json={"algo": "bogo"})
    assert res.status_code == 400
    assert "Unknown algorithm" in res.get_json()["error"]


def test_pause_and_stop_when_idle(client):
    assert client.post("/api/pause").get_json()["paused"] is None
    assert client.post("/api/stop").get_json()["stopping"] is False


def test_speed_toggle(client):
    assert client.post("/api/speed", json={"fast": False}).get_json()["fast_mode"] is False
    assert client.post("/api/speed").get_json()["fast_mode"] is True


@pytest.mark.parametrize("fast", ["false", 0, None, [True]])
def test_speed_rejects_non_bool_flags(client, fast):
    res = client.post("/api/speed", json={"fast": fast})
    assert res.status_code == 400
    assert main.coordinator.fast_mode is True


def test_reset_endpoint(client):
    client.post("/api/start", json={"algo": "merge"})
    main.coordinator.wait(5.0)
    data = client.post("/api/reset").get_json()
    assert data["frame"]["state"] == "idle"
    assert data["frame"]["comparisons"] == 0
    assert main.coordinator.state is RunState.IDLE


def test_compare_endpoint(client):
    res = client.post("/api/compare", json={"left": "bubble", "right": "merge", "size": 100, "seed": 3})
    assert res.status_code == 200
    data = res.get_json()
    assert data["left"]["comparisons"] == 100 * 99 // 2
    assert data["winner_comparisons"] == "Merge Sort"
    assert data["left"]["is_sorted"] and data["right"]["is_sorted"]
    assert "Bubble Sort vs Merge Sort" in data["panel"]


@pytest.mark.parametrize("payload", [
    {"left": "bubble", "right": "nope"},
    {"left": "bubble", "right": "merge", "size": 5000},
    {"left": "bubble", "right": "merge", "size": "many"},
    {"left": "bubble", "right": "merge", "size": 5, "seed": [1]},
    {"left": "bubble", "right": "merge", "size": 5, "seed": {"a": 1}},
    {"left": "bubble", "right": "merge", "size": 5, "seed": True},
    {"left": ["bubble"], "right": "merge"},
])
def test_compare_rejects_bad_requests(client, payload):
    assert client.post("/api/compare", json=payload).status_code == 400


def test_compare_accepts_string_seeds(client):
    payload = {"left": "insertion", "right": "counting", "size": 20, "seed": "demo"}
    first = client.post("/api/compare", json=payload).get_json()
    second = client.post("/api/compare", json=payload).get_json()
    assert first["left"]["comparisons"] == second["left"]["comparisons"]


def test_start_rejects_non_string_algorithm(client):
    assert client.post("/api/start", json={"algo": ["quick"]}).status_code == 400


def test_state_status_panel_follows_the_frame_algorithm(client):
    client.post("/api/start", json={"algo": "counting"})
    main.coordinator.wait(5.0)
    data = client.get("/api/state").get_json()
    assert data["frame"]["algorithm"] == "counting"
    assert "O(n + k)" in data["status"]
