"""Bookmark API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from src.api.dependencies import get_bookmark_service, get_identity
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.services.bookmark_service import BookmarkService
from src.services.session import Identity

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

# Ids are stored as 32-bit integers; larger values are rejected before any query
BookmarkId = Annotated[int, Path(ge=1, le=2**31 - 1)]


@router.get("", response_model=list[BookmarkResponse])
async def get_bookmarks(
    identity: Annotated[Identity, Depends(get_identity)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get all bookmarks owned by the current user."""
    return bookmark_service.list(identity)


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    bookmark_data: BookmarkCreate,
    identity: Annotated[Identity, Depends(get_identity)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Create a new bookmark."""
    return bookmark_service.create(
        identity,
        title=bookmark_data.title,
        link=bookmark_data.link,
        description=bookmark_data.description,
    )


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: BookmarkId,
    identity: Annotated[Identity, Depends(get_identity)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get a specific bookmark."""
    return bookmark_service.get_by_id(identity, bookmark_id)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def edit_bookmark(
    bookmark_id: BookmarkId,
    bookmark_data: BookmarkUpdate,
    identity: Annotated[Identity, Depends(get_identity)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Update a bookmark."""
    return bookmark_service.edit(
        identity, bookmark_id, bookmark_data.model_dump(exclude_unset=True)
    )


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bookmark(
    bookmark_id: BookmarkId,
    identity: Annotated[Identity, Depends(get_identity)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Delete a bookmark."""
    bookmark_service.delete(identity, bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
