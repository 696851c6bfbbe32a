"""Allow ``python -m slingdeploy``."""

from __future__ import annotations

from .cli import run

run()
