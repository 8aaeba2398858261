"""ASGI entrypoint for the food registry API."""

from food_registry.api.app import create_app
from food_registry.containers import build_container

app = create_app(build_container())
