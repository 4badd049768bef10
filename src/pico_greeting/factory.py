import dataclasses
import inspect
import logging
from contextlib import asynccontextmanager
from typing import Any, Iterator, List, Tuple
from fastapi import FastAPI, APIRouter
from starlette.responses import JSONResponse, PlainTextResponse, Response
from pico_ioc import factory, provides, component, PicoContainer, configure
from .config import FastApiSettings, FastApiConfigurer
from .middleware import RequestScopeMiddleware
from .decorators import PICO_ROUTE_KEY, PICO_CONTROLLER_META, IS_CONTROLLER_ATTR
from .exceptions import InvalidConfigurerError, NoControllersFoundError

logger = logging.getLogger(__name__)

def _priority_of(obj: Any) -> int:
    try:
        return int(getattr(obj, "priority", 0))
    except (TypeError, ValueError):
        return 0

def _normalize_http_result(result: Any) -> Response:
    if isinstance(result, Response):
        return result
    if isinstance(result, str):
        return PlainTextResponse(content=result)
    if dataclasses.is_dataclass(result) and not isinstance(result, type):
        return JSONResponse(content=dataclasses.asdict(result))
    return JSONResponse(content=result)

def _create_http_handler(container: PicoContainer, controller_cls: type, method_name: str, sig: inspect.Signature):
    async def http_route_handler(**kwargs):
        controller_instance = await container.aget(controller_cls)
        method_to_call = getattr(controller_instance, method_name)
        res = method_to_call(**kwargs)
        if inspect.isawaitable(res):
            res = await res
        return _normalize_http_result(res)
    params = list(sig.parameters.values())[1:]
    http_route_handler.__signature__ = sig.replace(parameters=params, return_annotation=inspect.Signature.empty)
    return http_route_handler

def _find_controller_classes(container: PicoContainer) -> List[type]:
    locator = getattr(container, "_locator", None)
    if not locator:
        raise NoControllersFoundError()
    controller_classes = [
        key for key in locator._metadata
        if isinstance(key, type) and getattr(key, IS_CONTROLLER_ATTR, False)
    ]
    if not controller_classes:
        raise NoControllersFoundError()
    return controller_classes

def _iter_routes(cls: type) -> Iterator[Tuple[str, Any, dict]]:
    # Class body order, base classes first, so literal paths can be declared
    # ahead of templated ones. Overrides keep the position of the base method.
    members = {}
    for klass in reversed(cls.__mro__):
        members.update(vars(klass))
    for name, member in members.items():
        route_info = getattr(member, PICO_ROUTE_KEY, None)
        if inspect.isfunction(member) and route_info:
            yield name, member, route_info

def register_controllers(app: FastAPI, container: PicoContainer) -> None:
    for cls in _find_controller_classes(container):
        meta = getattr(cls, PICO_CONTROLLER_META, {}) or {}
        router = APIRouter(
            prefix=meta.get("prefix", ""),
            tags=meta.get("tags", None),
            dependencies=meta.get("dependencies", None),
            responses=meta.get("responses", None),
        )
        for name, method, route_info in _iter_routes(cls):
            handler_func = _create_http_handler(container, cls, name, inspect.signature(method))
            router.add_api_route(
                path=route_info["path"],
                endpoint=handler_func,
                methods=[route_info["method"]],
                **route_info["kwargs"],
            )
            logger.debug("Registered %s %s%s -> %s.%s", route_info["method"], router.prefix, route_info["path"], cls.__name__, name)
        app.include_router(router)

def _validate_configurers(configurers: List[Any]) -> List[FastApiConfigurer]:
    for c in configurers:
        if not isinstance(c, FastApiConfigurer) or not callable(getattr(c, "configure", None)):
            raise InvalidConfigurerError(c)
    return list(configurers)

def _split_configurers_by_priority(configurers: List[FastApiConfigurer]) -> Tuple[List[FastApiConfigurer], List[FastApiConfigurer]]:
    sorted_configurers = sorted(configurers, key=_priority_of)
    inner = [c for c in sorted_configurers if _priority_of(c) >= 0]
    outer = [c for c in sorted_configurers if _priority_of(c) < 0]
    return inner, outer

@component
class PicoLifespanConfigurer:
    @configure
    def setup_fastapi(
        self,
        container: PicoContainer,
        app: FastAPI,
        configurers: List[FastApiConfigurer],
    ) -> None:
        inner_configurers, outer_configurers = _split_configurers_by_priority(_validate_configurers(configurers))

        for configurer in inner_configurers:
            configurer.configure(app)

        app.add_middleware(RequestScopeMiddleware, container=container)

        for configurer in outer_configurers:
            configurer.configure(app)

        register_controllers(app, container)

        @asynccontextmanager
        async def lifespan_manager(app_instance):
            yield
            await container.cleanup_all_async()
            container.shutdown()

        app.router.lifespan_context = lifespan_manager

@factory
class FastApiAppFactory:
    @provides(FastAPI, scope="singleton")
    def create_fastapi_app(
        self,
        settings: FastApiSettings,
    ) -> FastAPI:
        return FastAPI(**dataclasses.asdict(settings))
