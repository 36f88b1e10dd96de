"""Flask frontend exposing the suggestion engine over HTTP."""
from __future__ import annotations
from .web import app, main

__all__ = ["app", "main"]
