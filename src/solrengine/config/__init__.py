"""Configuration."""

from solrengine.config.settings import Settings

__all__ = ["Settings"]
