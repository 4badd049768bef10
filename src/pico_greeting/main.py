import logging
from fastapi import FastAPI
from pico_ioc import init, configuration, YamlTreeSource

MODULES = [
    "pico_greeting.config",
    "pico_greeting.registry",
    "pico_greeting.logging_setup",
    "pico_greeting.factory",
    "pico_greeting.controllers",
]


def create_app(config_path: str = "application.yaml") -> FastAPI:
    config = configuration(YamlTreeSource(config_path))
    container = init(modules=MODULES, config=config)
    return container.get(FastAPI)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
