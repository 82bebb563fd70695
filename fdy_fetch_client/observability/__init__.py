"""Observability layer: structured logging and the debug diagnostic sink."""

from .logging import ClientLogger

__all__ = ["ClientLogger"]
