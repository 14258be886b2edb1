import azure.functions as func
import os, time, json, logging
import numpy as np

from strassen_shared import config
from strassen_shared.errors import StrassenError
from strassen_shared.padding import padded_size
from strassen_shared.runlog import cd, get_logger, jlog, new_run_id
from strassen_shared.strassen_module import strassen

JSON_CT = "application/json"


def _respond(body: dict, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(body), status_code=status_code, mimetype=JSON_CT)


def _bad_request(err: Exception) -> func.HttpResponse:
    return _respond({"error": type(err).__name__, "message": str(err)}, status_code=400)


def _to_matrix(rows, label: str) -> np.ndarray:
    if not isinstance(rows, list) or not rows or not all(isinstance(r, list) for r in rows):
        raise ValueError(f"{label} must be a non-empty list of rows.")
    if len({len(r) for r in rows}) != 1:
        raise ValueError(f"{label} has rows of different lengths.")
    try:
        return np.array(rows, dtype=np.float64)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must contain only numbers.")


def _to_int(value, label: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be an integer, got {value!r}.")


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = get_logger("router")
    try:
        body = req.get_json()
    except ValueError:
        return _bad_request(ValueError("Request body must be JSON."))
    if not isinstance(body, dict):
        return _bad_request(ValueError("Request body must be a JSON object."))

    run_id = body.get("run_id") or new_run_id()
    try:
        A = _to_matrix(body.get("matrix_a"), "matrix_a")
        B = _to_matrix(body.get("matrix_b"), "matrix_b")
        threshold = _to_int(body.get("threshold", config.STRASSEN_THRESHOLD), "threshold")
        scheme = str(body.get("scheme", config.PADDING_SCHEME)).lower()

        N = int(A.shape[0])
        if N > config.MAX_DIM_SINGLE:
            raise ValueError(f"N={N} exceeds MAX_DIM_SINGLE={config.MAX_DIM_SINGLE}")
        logger.info("matmul_router.begin", extra=cd(runId=run_id, N=N, threshold=threshold, scheme=scheme))

        t0 = time.time()
        C = strassen(A, B, threshold=threshold, scheme=scheme, logger=logger)
        t1 = time.time()
        P = padded_size(N, threshold, scheme)
    except (StrassenError, ValueError) as e:
        logger.warning(f"matmul_router: rejected run={run_id}: {e}")
        jlog({"run_id": run_id, "op": "matmul_router", "success": False,
              "error": type(e).__name__}, logger_name="router")
        return _bad_request(e)
    except Exception:
        logging.exception("matmul_router: unhandled exception; run=%s", run_id)
        return _respond({"error": "InternalError", "message": "unhandled exception"}, status_code=500)

    rec = jlog({
        "run_id": run_id, "op": "matmul_router",
        "N": N, "padded_N": P, "pad_ratio": round(P / float(N), 6),
        "threshold": threshold, "scheme": scheme,
        "dur_ms": int((t1 - t0) * 1000),
        "host_pid": os.getpid(),
    }, logger_name="router")
    return _respond({"result": C.tolist(), "run": rec})
