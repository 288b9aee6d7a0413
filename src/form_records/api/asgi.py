"""ASGI entrypoint for the form records app."""

from form_records.api.app import create_app
from form_records.containers import build_container

app = create_app(build_container())
