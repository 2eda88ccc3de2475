"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class TransportError(AdapterError):
    """A request to the feed API did not complete.

    Covers network failures, timeouts, undecodable bodies and unexpected
    status codes. Nothing is retried automatically.
    """

    pass
