from .config import FastApiConfigurer, FastApiSettings, GreetingSettings, LoggingSettings
from .decorators import controller, get
from .factory import FastApiAppFactory
from .registry import GREETINGS, GreetingEntry, GreetingRegistry, LanguageType
from .responses import ServiceResponse
from .exceptions import (
    PicoGreetingError,
    InvalidConfigurerError,
    NoControllersFoundError,
    DuplicateLanguageError,
    UnknownLanguageError,
)

__all__ = [
    "FastApiConfigurer",
    "FastApiSettings",
    "GreetingSettings",
    "LoggingSettings",
    "controller",
    "get",
    "FastApiAppFactory",
    "GREETINGS",
    "GreetingEntry",
    "GreetingRegistry",
    "LanguageType",
    "ServiceResponse",
    "PicoGreetingError",
    "InvalidConfigurerError",
    "NoControllersFoundError",
    "DuplicateLanguageError",
    "UnknownLanguageError",
]
