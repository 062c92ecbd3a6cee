"""ASGI entrypoint for the caffeine counter API."""

from caffeine_counter.api.app import create_app
from caffeine_counter.containers import build_container

app = create_app(build_container())
