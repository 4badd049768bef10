import logging
from fastapi import FastAPI
from pico_ioc import component
from .config import FastApiConfigurer, LoggingSettings
from .middleware import AccessLogMiddleware

PACKAGE_LOGGER = "pico_greeting"

@component
class LoggingConfigurer(FastApiConfigurer):
    # Negative priority: installed outside the request scope middleware.
    priority = -100

    def __init__(self, settings: LoggingSettings):
        self.settings = settings

    def configure(self, app: FastAPI) -> None:
        logging.getLogger(PACKAGE_LOGGER).setLevel(self.settings.level.upper())
        if self.settings.access_log:
            app.add_middleware(AccessLogMiddleware)
