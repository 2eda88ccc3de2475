"""GIF catalog routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from feed.application.usecase.gif import (
    ListGifsRequest,
    ListGifsResponse,
    ListGifsUseCase,
)

router = APIRouter(prefix="/gifs", tags=["gifs"], route_class=DishkaRoute)


@router.get("", response_model=ListGifsResponse)
async def list_gifs(
    list_gifs_use_case: FromDishka[ListGifsUseCase],
    q: str | None = Query(default=None, description="Filter by name"),
) -> ListGifsResponse:
    """List the GIF catalog, optionally filtered by name.

    Args:
        list_gifs_use_case: List GIFs use case from DI
        q: Case-insensitive substring of the GIF name

    Returns:
        Matching GIFs with total count
    """
    return await list_gifs_use_case.execute(ListGifsRequest(query=q))
