"""HTTP client for the feed API.

Used by comment viewers: it is the CommentSource behind CommentAggregator
outside of tests. Each call opens a short-lived httpx.AsyncClient.
"""

from collections.abc import Callable
from typing import Any, TypeVar

import httpx
import logfire

from feed.adapter.error import TransportError
from feed.application.aggregator import CommentSource
from feed.config import ClientSettings
from feed.domain.error import IdempotencyConflictError, ValidationError
from feed.domain.model.comment import Comment, CommentDraft
from feed.domain.model.post import Post
from feed.domain.value import PostId

T = TypeVar("T")


class FeedApiClient(CommentSource):
    """Client for the comment and post endpoints.

    Errors:
    - 400/422 responses raise ValidationError with the server's detail
    - 409 on comment creation raises IdempotencyConflictError
    - anything else that fails raises TransportError
    """

    def __init__(self, base_url: str, timeout_seconds: float = 10.0) -> None:
        """Initialize feed API client.

        Args:
            base_url: API root, e.g. http://localhost:8000
            timeout_seconds: Per-request timeout
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "FeedApiClient":
        """Build a client from the ``client`` settings section."""
        return cls(base_url=settings.base_url, timeout_seconds=settings.timeout_seconds)

    async def list_comments(self, post_id: PostId) -> list[Comment]:
        """Fetch all comments of a post in creation order."""
        response = await self._send("GET", f"/posts/{post_id}/comments")
        data = self._decode(response)
        return self._parse(lambda: [Comment.model_validate(c) for c in data["comments"]])

    async def create_comment(self, draft: CommentDraft) -> Comment:
        """Submit a comment and return the stored record.

        A draft with an ``id`` sends it as the Idempotency-Key header, so
        resubmitting after a transport failure cannot create a duplicate.
        """
        headers = {"Idempotency-Key": draft.id} if draft.id else {}
        body = draft.model_dump(
            include={"parent_id", "text", "image", "gif"}, exclude_none=True
        )
        response = await self._send(
            "POST", f"/posts/{draft.post_id}/comments", json=body, headers=headers
        )
        if response.status_code == httpx.codes.CONFLICT and draft.id:
            raise IdempotencyConflictError(draft.id)
        data = self._decode(response)
        return self._parse(lambda: Comment.model_validate(data))

    async def list_posts(self) -> list[Post]:
        """Fetch the feed, newest post first."""
        response = await self._send("GET", "/posts")
        data = self._decode(response)
        return self._parse(lambda: [Post.model_validate(p) for p in data["posts"]])

    async def create_post(
        self,
        text: str,
        file_url: str | None = None,
        file_name: str | None = None,
    ) -> Post:
        """Create a post and return the stored record."""
        body = {"text": text, "file_url": file_url, "file_name": file_name}
        response = await self._send("POST", "/posts", json=body)
        data = self._decode(response)
        return self._parse(lambda: Post.model_validate(data))

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send one request, wrapping network failures in TransportError."""
        with logfire.span("feed_api_client.request", method=method, path=path):
            try:
                async with httpx.AsyncClient(
                    base_url=self.base_url, timeout=self.timeout_seconds
                ) as client:
                    response = await client.request(method, path, **kwargs)
            except httpx.HTTPError as e:
                logfire.error(
                    "Feed API request failed", method=method, path=path, error=str(e)
                )
                raise TransportError(f"{method} {path} failed: {e}") from e

            logfire.info(
                "Feed API response",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Return the JSON body of a successful response."""
        if response.status_code in (
            httpx.codes.BAD_REQUEST,
            httpx.codes.UNPROCESSABLE_ENTITY,
        ):
            raise ValidationError(_error_detail(response))
        if response.is_error:
            raise TransportError(
                f"Unexpected status {response.status_code}: {_error_detail(response)}"
            )
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON in response: {e}") from e

    @staticmethod
    def _parse(build: Callable[[], T]) -> T:
        """Run ``build``, turning malformed payloads into TransportError."""
        try:
            return build()
        except (KeyError, TypeError, ValueError) as e:
            raise TransportError(f"Unexpected response payload: {e}") from e


def _error_detail(response: httpx.Response) -> str:
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        detail = None
    return str(detail) if detail is not None else response.text
