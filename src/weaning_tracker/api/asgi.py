"""ASGI entrypoint for the weaning tracker API."""

from weaning_tracker.api.app import create_app
from weaning_tracker.containers import build_container

app = create_app(build_container())
