import logging
import time

from flask import g, request

logger = logging.getLogger(__name__)


# -------------------- 요청 로깅 --------------------

def _mark_start():
    g.request_started = time.perf_counter()


def _log_request(resp):
    if request.path.startswith("/health"):
        return resp
    started = getattr(g, "request_started", None)
    elapsed_ms = int((time.perf_counter() - started) * 1000) if started else -1
    logger.info(
        "[HTTP] %s %s -> %s (%sms) origin=%s",
        request.method,
        request.path,
        resp.status_code,
        elapsed_ms,
        request.headers.get("Origin"),
    )
    return resp


def register_hooks(app):
    app.before_request(_mark_start)
    app.after_request(_log_request)
