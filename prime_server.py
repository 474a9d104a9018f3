import os, time
from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest, NotFound

from detprime import (
    InvalidInput, WITNESS_BASES, is_prime,
    modular_add, modular_sub, modular_mul, modular_pow,
)

HOST      = os.getenv("DETPRIME_HOST", "127.0.0.1")
PORT      = int(os.getenv("DETPRIME_PORT", "8082"))
MAX_BATCH = int(os.getenv("DETPRIME_MAX_BATCH", "1000"))

_MODULAR_OPS = {
    "add": modular_add,
    "sub": modular_sub,
    "mul": modular_mul,
    "pow": modular_pow,
}

app = Flask(__name__)

# ------------------ helpers ------------------
def _to_int(name: str, raw) -> int:
    """Accept JSON integers or decimal strings; anything else is a 400."""
    if raw is None:
        raise BadRequest(f"missing {name}")
    if isinstance(raw, bool):
        raise BadRequest(f"{name} must be integer")
    if isinstance(raw, int):
        return raw
    s = str(raw).strip()
    if not s:
        raise BadRequest(f"missing {name}")
    try:
        return int(s, 10)
    except ValueError:
        raise BadRequest(f"{name} must be integer")

def _classify(n: int) -> dict:
    t0 = time.perf_counter()
    try:
        verdict = is_prime(n)
    except InvalidInput as e:
        app.logger.warning("rejected n=%s: %s", n, e)
        raise BadRequest(str(e))
    dt_ms = int((time.perf_counter() - t0) * 1000)
    return {"ok": True, "n": str(n), "result": str(verdict), "duration_ms": dt_ms}

def _json_body() -> dict:
    data = request.get_json(force=True, silent=False)
    if not isinstance(data, dict):
        raise BadRequest("payload must be a JSON object")
    return data

@app.errorhandler(BadRequest)
def _bad_request(e):
    return jsonify(ok=False, error=e.description), 400

@app.errorhandler(NotFound)
def _not_found(e):
    return jsonify(ok=False, error=e.description), 404

# ------------------ API ------------------
@app.get("/api/health")
def api_health():
    return jsonify(ok=True, bases=list(WITNESS_BASES))

# /api/is_prime?n=104729
@app.get("/api/is_prime")
def api_is_prime_query():
    return jsonify(_classify(_to_int("n", request.args.get("n", ""))))

@app.post("/api/is_prime")
def api_is_prime():
    data = _json_body()
    return jsonify(_classify(_to_int("n", data.get("n"))))

@app.post("/api/batch")
def api_batch():
    data = _json_body()
    numbers = data.get("numbers")
    if not isinstance(numbers, list):
        raise BadRequest("numbers must be a list")
    if len(numbers) > MAX_BATCH:
        raise BadRequest(f"batch too large; cap is {MAX_BATCH}")
    app.logger.info("batch of %d", len(numbers))
    results = []
    for raw in numbers:
        r = _classify(_to_int("n", raw))
        results.append({"n": r["n"], "result": r["result"]})
    return jsonify(ok=True, results=results)

@app.post("/api/modular/<op>")
def api_modular(op):
    fn = _MODULAR_OPS.get(op)
    if fn is None:
        raise NotFound(f"unknown op {op!r}; use one of {', '.join(_MODULAR_OPS)}")
    data = _json_body()
    a, b, m = (_to_int(k, data.get(k)) for k in ("a", "b", "m"))
    try:
        r = fn(a, b, m)
    except InvalidInput as e:
        app.logger.warning("rejected %s(%s, %s, %s): %s", op, a, b, m, e)
        raise BadRequest(str(e))
    return jsonify(ok=True, op=op, result=str(r))

if __name__ == "__main__":
    app.run(HOST, PORT)
