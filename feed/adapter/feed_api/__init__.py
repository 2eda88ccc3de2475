"""Feed API adapter."""

from .client import FeedApiClient

__all__ = ["FeedApiClient"]
