"""
Telemetry: one single-line JSON log record per API call and per flow run.

Records go through the "studytrack.telemetry" logger only, so whatever ships
the application logs also ships telemetry. Fields that are None are left out.
"""
import time
import json
import logging
import inspect
from typing import Optional
from functools import wraps

logger = logging.getLogger("studytrack.telemetry")


def emit_event(event: str, **fields) -> dict:
    payload = {"event": event}
    payload.update({k: v for k, v in fields.items() if v is not None})
    payload["ts"] = time.time()
    logger.info("telemetry=%s", json.dumps(payload, separators=(",", ":"), default=str))
    return payload


def record_flow_run(flow: str, *, version: str, latency_ms: int, ok: bool,
                    repairs: int = 0, used_fallback: bool = False,
                    error_type: Optional[str] = None) -> dict:
    """Log the outcome of one generation flow run."""
    return emit_event(
        "flow_run",
        flow=flow,
        version=version,
        latency_ms=latency_ms,
        ok=ok,
        repairs=repairs,
        fallback=used_fallback or None,
        error_type=error_type,
    )


def _status_of(exc: Exception) -> int:
    # HTTPException carries the mapped domain error; anything else is a 500
    return getattr(exc, "status_code", 500)


def instrument(route: str, version: str):
    """Emit an "api_call" record around a route handler, sync or async.

    The handler's flow_name and user_id path parameters are copied onto the
    record when present.
    """
    def deco(fn):
        def finish(t0, kwargs, exc=None):
            emit_event(
                "api_call",
                route=route,
                version=version,
                flow=kwargs.get("flow_name"),
                user_id=kwargs.get("user_id"),
                latency_ms=int((time.time() - t0) * 1000),
                ok=exc is None,
                status=200 if exc is None else _status_of(exc),
                error_type=None if exc is None else exc.__class__.__name__,
            )

        if inspect.iscoroutinefunction(fn):
            @wraps(fn)
            async def wrapped_async(*args, **kwargs):
                t0 = time.time()
                try:
                    out = await fn(*args, **kwargs)
                except Exception as e:
                    finish(t0, kwargs, e)
                    raise
                finish(t0, kwargs)
                return out
            return wrapped_async

        @wraps(fn)
        def wrapped(*args, **kwargs):
            t0 = time.time()
            try:
                out = fn(*args, **kwargs)
            except Exception as e:
                finish(t0, kwargs, e)
                raise
            finish(t0, kwargs)
            return out
        return wrapped
    return deco
