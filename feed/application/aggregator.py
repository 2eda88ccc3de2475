"""Client-side comment working set.

A viewer fetches a post's comments once, then adds each comment it creates
to its local copy instead of fetching the whole list again. CommentAggregator
holds that copy for the post currently on screen and rebuilds the reply tree
whenever it changes.

Responses can arrive after the viewer has moved to another post. Every update
is therefore checked against the active post, and stale updates are dropped.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional

import logfire

from feed.domain.model.comment import Comment, CommentDraft, CommentNode
from feed.domain.service.comment_tree import build_comment_tree
from feed.domain.value import CommentId, PostId

CountObserver = Callable[[int], None]
TreeObserver = Callable[[list[CommentNode]], None]


class CommentSource(ABC):
    """Where a viewer reads comments from and sends new ones to."""

    @abstractmethod
    async def list_comments(self, post_id: PostId) -> list[Comment]:
        """Fetch all comments of a post in creation order."""
        pass

    @abstractmethod
    async def create_comment(self, draft: CommentDraft) -> Comment:
        """Submit a comment and return the stored record."""
        pass


class CommentAggregator:
    """Working set of comments for the post being viewed.

    Observers are told the comment count and the rebuilt reply tree after
    every change.
    """

    def __init__(
        self,
        source: CommentSource,
        on_count_change: Optional[CountObserver] = None,
        on_tree_change: Optional[TreeObserver] = None,
        detect_cycles: bool = True,
    ) -> None:
        """Initialize comment aggregator.

        Args:
            source: Comment source (usually the HTTP API client)
            on_count_change: Called with the new count after each change
            on_tree_change: Called with the new reply tree after each change
            detect_cycles: Passed through to the tree builder
        """
        self.source = source
        self.on_count_change = on_count_change
        self.on_tree_change = on_tree_change
        self.detect_cycles = detect_cycles

        self._post_id: Optional[PostId] = None
        self._generation = 0
        self._comments: list[Comment] = []
        self._ids: set[CommentId] = set()
        self._tree: list[CommentNode] = []

    @property
    def post_id(self) -> Optional[PostId]:
        """The post currently viewed."""
        return self._post_id

    @property
    def comments(self) -> list[Comment]:
        """Copy of the flat working set, in the order comments were added."""
        return list(self._comments)

    @property
    def count(self) -> int:
        return len(self._comments)

    @property
    def tree(self) -> list[CommentNode]:
        """Reply tree for the current working set."""
        return self._tree

    async def initialize(self, post_id: PostId) -> list[Comment]:
        """Switch to ``post_id`` and load its comments.

        The working set is cleared and published immediately, so observers
        stop showing the previous post even if the fetch fails. Comments
        appended while the fetch is in flight are kept after the fetched
        baseline. If another ``initialize`` starts before this fetch returns,
        this result is discarded.

        Args:
            post_id: Post to view

        Returns:
            The working set after loading
        """
        with logfire.span("comment_aggregator.initialize", post_id=post_id):
            self._generation += 1
            generation = self._generation
            self._post_id = post_id
            self._reset()
            self._publish()

            fetched = await self.source.list_comments(post_id)

            if generation != self._generation:
                logfire.info(
                    "Discarding comments fetched for a superseded view",
                    post_id=post_id,
                    active_post_id=self._post_id,
                )
                return self.comments

            appended_meanwhile = self._comments
            self._reset()
            for comment in [*fetched, *appended_meanwhile]:
                self._add(comment)

            logfire.info("Comments loaded", post_id=post_id, count=self.count)
            self._publish()
            return self.comments

    def append_local(self, comment: Comment) -> bool:
        """Merge a comment returned by the server into the working set.

        Args:
            comment: Canonical stored comment

        Returns:
            True if merged; False if it belongs to another post or is
            already present
        """
        if comment.post_id != self._post_id:
            logfire.info(
                "Dropping comment for a post no longer viewed",
                comment_id=comment.id,
                post_id=comment.post_id,
                active_post_id=self._post_id,
            )
            return False

        if not self._add(comment):
            logfire.debug("Comment already in working set", comment_id=comment.id)
            return False

        self._publish()
        return True

    async def submit(self, draft: CommentDraft) -> Comment:
        """Create a comment through the source and merge the result.

        Nothing changes locally if the source raises; the caller keeps its
        form contents and may retry.

        Args:
            draft: Comment to submit

        Returns:
            The stored comment
        """
        comment = await self.source.create_comment(draft)
        self.append_local(comment)
        return comment

    def _add(self, comment: Comment) -> bool:
        if comment.id in self._ids:
            return False
        self._ids.add(comment.id)
        self._comments.append(comment)
        return True

    def _reset(self) -> None:
        self._comments = []
        self._ids = set()
        self._tree = []

    def _publish(self) -> None:
        self._tree = build_comment_tree(self._comments, detect_cycles=self.detect_cycles)
        if self.on_count_change is not None:
            self.on_count_change(len(self._comments))
        if self.on_tree_change is not None:
            self.on_tree_change(self._tree)
