import os, json, time, uuid, logging

from .config import BLAS_THREAD_VARS

FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def cd(**k):  # custom dimensions helper
    return {'custom_dimensions': k}


def get_logger(name: str = "strassen"):
    lg = logging.getLogger(name)
    if not lg.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(FORMAT))
        lg.addHandler(h)
        lg.setLevel(logging.INFO)
    # keep single-threaded BLAS on Functions
    for v in BLAS_THREAD_VARS:
        os.environ.setdefault(v, "1")
    return lg


def new_run_id() -> str:
    return f"run_{uuid.uuid4().hex[:8]}"


def jlog(rec: dict, logger_name: str = "strassen") -> dict:
    """Emit one JSON line per run; fills in the fields the summariser expects."""
    base = {
        "ts": time.time(),
        "run_id": rec.get("run_id") or os.getenv("RUN_ID") or new_run_id(),
        "op": rec.get("op", "strassen"),
    }
    base.update(rec)
    if "dur_ms" in base and "duration_ms" not in base:
        base["duration_ms"] = base["dur_ms"]
    base.setdefault("success", True)

    logging.getLogger(logger_name).info(json.dumps(base, ensure_ascii=False))
    return base
