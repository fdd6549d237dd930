"""ASGI entrypoint for the form progress API."""

from form_progress.api.app import create_app
from form_progress.containers import build_container

app = create_app(build_container())
