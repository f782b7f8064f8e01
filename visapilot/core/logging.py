"""Application logger and per-request access logging."""

import logging
import sys
import time
import uuid

from fastapi import Request

from visapilot.config import settings


REQUEST_ID_HEADER = "X-Request-ID"

# Driver chatter that drowns out request logs at DEBUG
NOISY_LOGGERS = ("pymongo", "motor", "passlib")


def setup_logging() -> logging.Logger:
    """Configure and return the ``visapilot`` logger."""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    
    logger = logging.getLogger("visapilot")
    logger.setLevel(level)
    logger.propagate = False
    
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)
    
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    
    return logger


logger = setup_logging()
access_logger = logger.getChild("access")


def request_id_for(request: Request) -> str:
    """Reuse the caller's request id when it sent one."""
    return request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]


async def log_requests(request: Request, call_next):
    """HTTP middleware: one access line per request, tagged with its id."""
    request_id = request_id_for(request)
    request.state.request_id = request_id
    started = time.perf_counter()
    
    response = await call_next(request)
    
    elapsed_ms = (time.perf_counter() - started) * 1000
    access_logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({elapsed_ms:.1f} ms) request_id={request_id}"
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
