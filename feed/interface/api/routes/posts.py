"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from feed.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsResponse,
    ListPostsUseCase,
)
from feed.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    text: str | None = Field(default=None, max_length=10000)
    file_url: str | None = None  # Data URL of the attachment
    file_name: str | None = None


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a new post.

    Args:
        request: Post text and optional attachment
        create_post_use_case: Create post use case from DI

    Returns:
        Created post

    Raises:
        HTTPException: 400 if the text is missing
    """
    try:
        use_case_request = CreatePostRequest(
            text=request.text,
            file_url=request.file_url,
            file_name=request.file_name,
        )
        return await create_post_use_case.execute(use_case_request)
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> ListPostsResponse:
    """List all posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI

    Returns:
        Posts with total count
    """
    return await list_posts_use_case.execute()


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a single post.

    Args:
        post_id: Post ID
        get_post_use_case: Get post use case from DI

    Returns:
        Post details

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
