"""ASGI entrypoint for the supplement comparison API."""

from supplement_compare.api.app import create_app
from supplement_compare.containers import build_container

app = create_app(build_container())
