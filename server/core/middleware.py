# server/core/middleware.py

import logging
import time
from fastapi import FastAPI, Request


logger = logging.getLogger("blog_api.requests")


def register_request_logger(app: FastAPI):
    """
    Logs method, path, status and duration of every request.
    Bodies are never logged since they may carry passwords.
    """

    @app.middleware("http")
    async def request_logger(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %s (%.1f ms)",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )
