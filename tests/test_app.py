from unittest import mock

from fastapi.testclient import TestClient

from app import AppConfig, app, get_config
from main import REPETITIONS, run_demo
from seeded_random import RAND_MAX, SeededRandom, generate_random_numbers

client = TestClient(app)


def override_config(max_count):
    config = AppConfig(max_count=max_count)
    app.dependency_overrides[get_config] = lambda: config
    return config


def teardown_function():
    app.dependency_overrides.clear()


def test_rand_returns_seeded_draws():
    response = client.get("/rand", params={"seed": 1, "count": 3})

    assert response.status_code == 200
    payload = response.json()
    rng = SeededRandom(1)
    assert payload == {
        "seed": 1,
        "rand_max": RAND_MAX,
        "numbers": [rng.rand() for _ in range(3)],
    }
    assert payload["numbers"][0] == 288545017


def test_rand_without_seed_uses_clock():
    response = client.get("/rand", params={"count": 2})

    assert response.status_code == 200
    payload = response.json()
    assert len(payload["numbers"]) == 2
    assert all(0 <= n <= RAND_MAX for n in payload["numbers"])


def test_rand_range_matches_library():
    response = client.get("/rand-range", params={"low": 20, "high": 30, "count": 50, "seed": 9})

    assert response.status_code == 200
    payload = response.json()
    assert payload["low"] == 20
    assert payload["high"] == 30
    assert payload["numbers"] == generate_random_numbers(9, 50, 20, 30)


def test_rand_range_single_value():
    response = client.get("/rand-range", params={"low": 5, "high": 5, "count": 4, "seed": 2})

    assert response.status_code == 200
    assert response.json()["numbers"] == [5, 5, 5, 5]


def test_rand_range_rejects_inverted_range():
    response = client.get("/rand-range", params={"low": 300, "high": 200, "seed": 1})

    assert response.status_code == 422
    assert response.json() == {"detail": "high must not be less than low"}


def test_rand_range_rejects_inverted_range_with_zero_count():
    response = client.get("/rand-range", params={"low": 300, "high": 200, "count": 0, "seed": 1})

    assert response.status_code == 422
    assert response.json() == {"detail": "high must not be less than low"}


def test_count_above_limit_is_rejected():
    override_config(max_count=5)

    response = client.get("/rand", params={"count": 6, "seed": 1})

    assert response.status_code == 400
    assert response.json() == {"detail": "count must not exceed 5"}


def test_negative_count_is_rejected():
    response = client.get("/rand", params={"count": -1})

    assert response.status_code == 422


def test_demo_returns_driver_transcript():
    response = client.get("/demo", params={"seed": 1})

    assert response.status_code == 200
    payload = response.json()
    assert payload["seed"] == 1
    assert len(payload["lines"]) == 2 * REPETITIONS + 2
    assert payload["lines"][1] == "288545017"
    assert all(200 <= int(v) <= 300 for v in payload["lines"][REPETITIONS + 2 :])


def test_demo_without_seed_uses_clock():
    with mock.patch("seeded_random.time.time", return_value=1_700_000_000.4):
        response = client.get("/demo")

    assert response.status_code == 200
    payload = response.json()
    assert payload["seed"] == 1_700_000_000
    assert len(payload["lines"]) == 2 * REPETITIONS + 2
    expected: list[str] = []
    run_demo(SeededRandom(1_700_000_000), write=expected.append)
    assert payload["lines"] == expected
