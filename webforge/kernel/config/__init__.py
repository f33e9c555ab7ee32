"""Configuration models for webforge."""

from webforge.kernel.config.models import LoggingConfig

__all__ = ["LoggingConfig"]
