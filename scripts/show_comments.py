#!/usr/bin/env python3
"""Print the comment thread of a post, optionally adding a comment first.

Usage:
    python scripts/show_comments.py <post_id> [text] [parent_id]

The API root is read from CLIENT__BASE_URL (default http://localhost:8000).
"""

import asyncio
import sys
from uuid import uuid4

import logfire

from feed.adapter.feed_api import FeedApiClient
from feed.application.aggregator import CommentAggregator
from feed.config import Settings
from feed.domain.model.comment import CommentDraft, CommentNode
from feed.domain.service import walk
from feed.domain.value import CommentId, PostId
from feed.util.observability import configure_logfire, instrument_httpx


def render(tree: list[CommentNode]) -> None:
    """Print the reply tree, indenting replies under their parent."""
    for node, depth in walk(tree):
        comment = node.comment
        parts = [part for part in (comment.text, comment.image, comment.gif) if part]
        print(f"{'  ' * depth}- [{comment.id}] {' | '.join(parts)}")


async def run(post_id: PostId, text: str | None, parent_id: CommentId | None) -> None:
    settings = Settings()
    client = FeedApiClient.from_settings(settings.client)
    aggregator = CommentAggregator(
        client,
        on_count_change=lambda count: print(f"{count} comment(s)"),
        detect_cycles=settings.comments.detect_cycles,
    )

    await aggregator.initialize(post_id)

    if text:
        # Fresh key per invocation; a retry inside this run would reuse it
        draft = CommentDraft(
            id=CommentId(str(uuid4())),
            post_id=post_id,
            parent_id=parent_id,
            text=text,
        )
        await aggregator.submit(draft)

    render(aggregator.tree)


def main() -> int:
    """Fetch and print a post's comments, logging failures to Logfire."""
    if len(sys.argv) < 2:
        print(__doc__)
        return 2

    post_id = PostId(sys.argv[1])
    text = sys.argv[2] if len(sys.argv) > 2 else None
    parent_id = CommentId(sys.argv[3]) if len(sys.argv) > 3 else None

    configure_logfire(Settings())
    instrument_httpx()

    try:
        asyncio.run(run(post_id, text, parent_id))
        return 0

    except Exception as e:
        logfire.error(
            "Showing comments failed",
            post_id=post_id,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
