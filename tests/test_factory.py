"""Unit tests for pico_greeting factory module."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.testclient import TestClient

from pico_greeting.config import FastApiConfigurer, FastApiSettings
from pico_greeting.decorators import controller, get
from pico_greeting.exceptions import InvalidConfigurerError, NoControllersFoundError
from pico_greeting.factory import (
    FastApiAppFactory,
    _find_controller_classes,
    _normalize_http_result,
    _priority_of,
    _split_configurers_by_priority,
    _validate_configurers,
    register_controllers,
)
from pico_greeting.responses import ServiceResponse


def _container_with(*controllers, instance=None):
    container = MagicMock()
    container._locator._metadata = {cls: {} for cls in controllers}
    container.aget = AsyncMock(return_value=instance)
    return container


class TestPriorityOf:
    def test_returns_zero_without_priority(self):
        assert _priority_of(object()) == 0

    def test_returns_priority_value(self):
        class WithPriority:
            priority = -100

        assert _priority_of(WithPriority()) == -100

    def test_converts_string(self):
        class StringPriority:
            priority = "42"

        assert _priority_of(StringPriority()) == 42

    def test_none_priority_is_zero(self):
        class NonePriority:
            priority = None

        assert _priority_of(NonePriority()) == 0


class TestNormalizeHttpResult:
    def test_response_unchanged(self):
        response = Response(content="x")
        assert _normalize_http_result(response) is response

    def test_string_is_plain_text(self):
        result = _normalize_http_result("Good morning!")
        assert isinstance(result, PlainTextResponse)
        assert result.body == b"Good morning!"

    def test_dataclass_is_json(self):
        result = _normalize_http_result(ServiceResponse(timestamp=7, data=["a", "b"]))
        assert isinstance(result, JSONResponse)
        assert result.body == b'{"timestamp":7,"data":["a","b"]}'

    def test_dict_is_json(self):
        assert isinstance(_normalize_http_result({"k": "v"}), JSONResponse)


class TestConfigurers:
    class Inner(FastApiConfigurer):
        priority = 10

        def configure(self, app):
            pass

    class Outer(FastApiConfigurer):
        priority = -10

        def configure(self, app):
            pass

    def test_validate_accepts_configurers(self):
        configurers = [self.Inner(), self.Outer()]
        assert _validate_configurers(configurers) == configurers

    def test_validate_rejects_other_objects(self):
        with pytest.raises(InvalidConfigurerError):
            _validate_configurers([self.Inner(), object()])

    def test_split_by_priority(self):
        inner, outer = self.Inner(), self.Outer()
        assert _split_configurers_by_priority([inner, outer]) == ([inner], [outer])


class TestRegisterControllers:
    def test_raises_when_no_locator(self):
        container = MagicMock()
        del container._locator
        with pytest.raises(NoControllersFoundError):
            register_controllers(FastAPI(), container)

    def test_raises_when_no_controllers(self):
        class NotAController:
            pass

        with pytest.raises(NoControllersFoundError):
            _find_controller_classes(_container_with(NotAController))

    def test_routes_keep_definition_order(self):
        @controller(prefix="/api")
        class OrderedController:
            @get("/items/all")
            def zzz_all(self):
                return "all"

            @get("/items/{name}")
            def aaa_item(self, name: str):
                return f"item:{name}"

        app = FastAPI()
        register_controllers(app, _container_with(OrderedController, instance=OrderedController()))

        with TestClient(app) as client:
            assert client.get("/api/items/all").text == "all"
            assert client.get("/api/items/apple").text == "item:apple"

    def test_inherited_routes_are_registered(self):
        class BaseController:
            @get("/ping")
            def ping(self):
                return "pong"

            @get("/items/{name}")
            def item(self, name: str):
                return f"item:{name}"

        @controller(prefix="/api")
        class ChildController(BaseController):
            @get("/health")
            def health(self):
                return "ok"

        app = FastAPI()
        register_controllers(app, _container_with(ChildController, instance=ChildController()))

        with TestClient(app) as client:
            assert client.get("/api/ping").text == "pong"
            assert client.get("/api/items/pear").text == "item:pear"
            assert client.get("/api/health").text == "ok"

    def test_handler_resolves_controller_per_request(self):
        @controller(prefix="/api")
        class EchoController:
            @get("/echo/{word}")
            async def echo(self, word: str):
                return word

        container = _container_with(EchoController, instance=EchoController())
        app = FastAPI()
        register_controllers(app, container)

        with TestClient(app) as client:
            res = client.get("/api/echo/hola")

        assert res.status_code == 200
        assert res.text == "hola"
        container.aget.assert_awaited_with(EchoController)


class TestFastApiAppFactory:
    def test_creates_fastapi_from_settings(self):
        app = FastApiAppFactory().create_fastapi_app(FastApiSettings(title="T", version="2.0.0", debug=True))
        assert isinstance(app, FastAPI)
        assert app.title == "T"
        assert app.version == "2.0.0"
        assert app.debug is True
