from typing import Any, Callable, Dict, Optional, Type, TypeVar, ParamSpec, TypedDict, cast
from pico_ioc import component

P = ParamSpec("P")
R = TypeVar("R")

class RouteInfo(TypedDict):
    method: str
    path: str
    kwargs: Dict[str, Any]

PICO_ROUTE_KEY: str = "_pico_route_info"
PICO_CONTROLLER_META: str = "_pico_controller_meta"
IS_CONTROLLER_ATTR: str = "_pico_is_controller"

def controller(cls: Optional[Type[Any]] = None, *, scope: str = "request", **kwargs: Any) -> Callable[[Type[Any]], Type[Any]] | Type[Any]:
    def decorate(c: Type[Any]) -> Type[Any]:
        setattr(c, PICO_CONTROLLER_META, kwargs)
        setattr(c, IS_CONTROLLER_ATTR, True)
        return component(c, scope=scope)
    return decorate if cls is None else decorate(cls)

def get(path: str, **kwargs: Any) -> Callable[[Callable[P, R]], Callable[P, R]]:
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        route_info: RouteInfo = {"method": "GET", "path": path, "kwargs": kwargs}
        setattr(func, PICO_ROUTE_KEY, cast(RouteInfo, route_info))
        return func
    return decorator
