"""Observability — logging setup."""

from solrengine.observability.logging import setup_logging

__all__ = ["setup_logging"]
