"""Typed identifiers for feed entities.

Identifiers are opaque strings. The stores generate UUID strings, but any
non-empty string supplied by a client is accepted as-is.
"""

from typing import NewType

PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
