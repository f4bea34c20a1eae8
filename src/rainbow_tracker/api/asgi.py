"""ASGI entrypoint for the rainbow tracker API."""

from rainbow_tracker.api.app import create_app
from rainbow_tracker.containers import build_container

app = create_app(build_container())
