import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient
from pico_ioc import init, configuration, YamlTreeSource
from pico_greeting.main import MODULES

@pytest.fixture(scope="session")
def config_file(tmp_path_factory):
    tmp = tmp_path_factory.mktemp("cfg")
    cfg = tmp / "config.yml"
    cfg.write_text(
        "fastapi:\n"
        "  title: 'Integration Test API'\n"
        "  version: '9.9.9'\n"
        "  debug: true\n"
        "greeting:\n"
        "  default_language: 'EN'\n"
        "logging:\n"
        "  level: 'DEBUG'\n"
        "  access_log: true\n",
        encoding="utf-8",
    )
    return cfg

@pytest.fixture(scope="session")
def container(config_file):
    cfg = configuration(YamlTreeSource(str(config_file)))
    return init(modules=MODULES, config=cfg)

@pytest.fixture(scope="session")
def app(container):
    return container.get(FastAPI)

@pytest.fixture(scope="session")
def client(app):
    with TestClient(app) as c:
        yield c
