import pytest

import prime_server


@pytest.fixture
def client():
    prime_server.app.config["TESTING"] = True
    with prime_server.app.test_client() as c:
        yield c


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "bases": [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37]}

def test_query_prime(client):
    r = client.get("/api/is_prime?n=104729")
    body = r.get_json()
    assert r.status_code == 200
    assert body["ok"] is True
    assert body["n"] == "104729"
    assert body["result"] == "prime"
    assert isinstance(body["duration_ms"], int)

def test_query_composite(client):
    r = client.get("/api/is_prime", query_string={"n": "3215031751"})
    assert r.get_json()["result"] == "composite"

@pytest.mark.parametrize("qs", ["", "?n=", "?n=abc", "?n=4", "?n=3", "?n=-5",
                                "?n=18446744073709551617"])
def test_query_rejects_bad_n(client, qs):
    r = client.get("/api/is_prime" + qs)
    assert r.status_code == 400
    body = r.get_json()
    assert body["ok"] is False
    assert body["error"]

def test_post_accepts_int_and_string(client):
    for n in (2305843009213693951, "2305843009213693951"):
        r = client.post("/api/is_prime", json={"n": n})
        assert r.status_code == 200
        assert r.get_json()["result"] == "prime"

def test_post_rejects_bool_and_non_object(client):
    assert client.post("/api/is_prime", json={"n": True}).status_code == 400
    assert client.post("/api/is_prime", json=[7]).status_code == 400
    assert client.post("/api/is_prime", data="not json",
                       content_type="application/json").status_code == 400

def test_batch(client):
    r = client.post("/api/batch", json={"numbers": [5, "9", 341, 104729]})
    assert r.status_code == 200
    assert r.get_json()["results"] == [
        {"n": "5", "result": "prime"},
        {"n": "9", "result": "composite"},
        {"n": "341", "result": "composite"},
        {"n": "104729", "result": "prime"},
    ]

def test_batch_rejects_invalid_member(client):
    r = client.post("/api/batch", json={"numbers": [5, 8]})
    assert r.status_code == 400

def test_batch_cap(client, monkeypatch):
    monkeypatch.setattr(prime_server, "MAX_BATCH", 2)
    r = client.post("/api/batch", json={"numbers": [5, 7, 11]})
    assert r.status_code == 400
    assert "cap is 2" in r.get_json()["error"]

def test_batch_requires_list(client):
    assert client.post("/api/batch", json={"numbers": "5,7"}).status_code == 400

@pytest.mark.parametrize("op,expected", [
    ("add", (18446744073709551614 + 18446744073709551613) % 18446744073709551615),
    ("sub", (18446744073709551614 - 18446744073709551613) % 18446744073709551615),
    ("mul", (18446744073709551614 * 18446744073709551613) % 18446744073709551615),
    ("pow", pow(18446744073709551614, 18446744073709551613, 18446744073709551615)),
])
def test_modular_ops(client, op, expected):
    r = client.post(f"/api/modular/{op}", json={
        "a": "18446744073709551614", "b": "18446744073709551613", "m": "18446744073709551615",
    })
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "op": op, "result": str(expected)}

def test_modular_zero_modulus(client):
    r = client.post("/api/modular/add", json={"a": 1, "b": 2, "m": 0})
    assert r.status_code == 400

def test_modular_unknown_op(client):
    r = client.post("/api/modular/div", json={"a": 1, "b": 2, "m": 3})
    assert r.status_code == 404
    assert r.get_json()["ok"] is False

@pytest.mark.parametrize("missing", ["a", "b", "m"])
def test_modular_missing_operand(client, missing):
    payload = {"a": 1, "b": 2, "m": 7}
    del payload[missing]
    r = client.post("/api/modular/mul", json=payload)
    assert r.status_code == 400
    assert r.get_json()["error"] == f"missing {missing}"

def test_post_without_n(client):
    r = client.post("/api/is_prime", json={})
    assert r.status_code == 400
    assert r.get_json()["error"] == "missing n"
