import logging
import time
import uuid
from pico_ioc import PicoContainer

access_logger = logging.getLogger("pico_greeting.access")

def _cleanup_scope(container: PicoContainer, scope_name: str, scope_id: str) -> None:
    if hasattr(container, "_caches"):
        container._caches.cleanup_scope(scope_name, scope_id)

class RequestScopeMiddleware:
    def __init__(self, app, container: PicoContainer):
        self.app = app
        self.container = container

    async def __call__(self, scope, receive, send):
        with self.container.as_current():
            if scope["type"] != "http":
                await self.app(scope, receive, send)
                return
            request_id = str(uuid.uuid4())
            try:
                with self.container.scope("request", request_id):
                    await self.app(scope, receive, send)
            finally:
                _cleanup_scope(self.container, "request", request_id)

class AccessLogMiddleware:
    """Logs one line per HTTP request: method, path, status and elapsed time."""

    def __init__(self, app, logger: logging.Logger = access_logger):
        self.app = app
        self.logger = logger

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        status = {"code": 500}
        started = time.perf_counter()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status["code"] = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            self.logger.info(
                "%s %s -> %d (%.1f ms)",
                scope.get("method", "-"),
                scope.get("path", "-"),
                status["code"],
                elapsed_ms,
            )
