"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from feed.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from feed.domain.error import IdempotencyConflictError, ValidationError

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    parent_id: str | None = None  # Parent comment ID for replies
    text: str | None = Field(default=None, max_length=10000)
    image: str | None = None  # Data URL
    gif: str | None = None  # URL from the GIF catalog


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    idempotency_key: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    At least one of text, image or gif is required. Sending an
    ``Idempotency-Key`` header makes retries safe: the key becomes the
    comment's ID, and repeating the request returns the same comment.

    Args:
        post_id: Post ID
        request: Comment content and optional parent
        create_comment_use_case: Create comment use case from DI
        idempotency_key: Optional client-chosen comment ID

    Returns:
        Created comment

    Raises:
        HTTPException: 400 on missing content, 409 on a reused key
    """
    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            parent_id=request.parent_id,
            text=request.text,
            image=request.image,
            gif=request.gif,
            comment_id=idempotency_key,
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except IdempotencyConflictError as e:
        logfire.warn("Idempotency key reused", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get all comments for a post as a flat list in creation order.

    A post without comments, or an unknown post, returns an empty list.

    Args:
        post_id: Post ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Flat comment list with total count
    """
    request = GetCommentsRequest(post_id=post_id)
    return await get_comments_use_case.execute(request)


@router.get("/{post_id}/comments/tree", response_model=GetCommentTreeResponse)
async def get_comment_tree(
    post_id: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
) -> GetCommentTreeResponse:
    """Get all comments for a post as a reply tree.

    The tree is flattened in display order; each comment carries its depth
    and the ids of its direct replies.

    Args:
        post_id: Post ID
        get_comment_tree_use_case: Get comment tree use case from DI

    Returns:
        Root ids and placed comments in display order
    """
    request = GetCommentTreeRequest(post_id=post_id)
    return await get_comment_tree_use_case.execute(request)
