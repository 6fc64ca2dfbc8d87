import logging
import time
import uuid

from flask import g, has_request_context, request

logger = logging.getLogger("catalog.requests")


class RequestIdFilter(logging.Filter):
    """Attach the current request id to every LogRecord so the formatter can include it."""

    def filter(self, record):
        record.request_id = g.get("request_id", "-") if has_request_context() else "-"
        return True


def setup_logging(level="INFO"):
    """
    Configure the root logger once with a stream handler whose format
    includes the request id. Repeated calls (app factory in tests) only
    adjust the level.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if any(isinstance(f, RequestIdFilter) for h in root.handlers for f in h.filters):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"
    ))
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)


def init_request_logging(app):
    @app.before_request
    def start_request():
        g.request_id = str(uuid.uuid4())
        g.request_start = time.perf_counter()
        logger.info("request.start %s %s", request.method, request.full_path.rstrip("?"))

    @app.after_request
    def end_request(response):
        duration_ms = int((time.perf_counter() - g.get("request_start", time.perf_counter())) * 1000)
        logger.info("request.end %s %s -> %s (%d ms)",
                    request.method, request.path, response.status_code, duration_ms)
        return response
