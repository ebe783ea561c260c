"""
Post API endpoints.

Mounted at /api/posts.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user
from api.dependencies import get_post_service
from api.models import MessageResponse
from modules.users.exceptions import UserNotFoundError
from shared.models import AuthenticatedUser

from .interfaces import IPostService
from .models import (
    Comment,
    CreateCommentRequest,
    CreatePostRequest,
    Like,
    Post,
)
from .exceptions import (
    CommentNotFoundError,
    PostAccessDeniedError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
)

router = APIRouter()


@router.post("", response_model=Post)
async def create_post(
    request: CreatePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    """Create a post as the current user."""
    try:
        return await service.create(user, request.text)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")


@router.get("", response_model=list[Post])
async def list_posts(
    service: IPostService = Depends(get_post_service),
) -> list[Post]:
    """List all posts, most recent first. Public."""
    return await service.list_all()


@router.api_route("/{post_id}", methods=["GET", "POST"], response_model=Post)
async def get_post(
    post_id: str,
    service: IPostService = Depends(get_post_service),
) -> Post:
    """
    Get a post by ID. Public.

    Also answers POST, which older clients use for this lookup.
    """
    try:
        return await service.get_post(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="No post found with that ID")


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post. Only its author may do this."""
    try:
        await service.delete(post_id, user)
    except PostNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except PostAccessDeniedError as e:
        raise HTTPException(status_code=403, detail=e.message)
    return MessageResponse(msg="Post deleted successfully")


@router.put("/like/{post_id}", response_model=list[Like])
async def like_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Like]:
    try:
        return await service.like(post_id, user)
    except PostNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except PostAlreadyLikedError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.put("/unlike/{post_id}", response_model=list[Like])
async def unlike_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Like]:
    try:
        return await service.unlike(post_id, user)
    except (PostNotFoundError, PostNotLikedError) as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/comment/{post_id}", response_model=list[Comment])
async def add_comment(
    post_id: str,
    request: CreateCommentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Comment]:
    try:
        return await service.add_comment(post_id, user, request.text)
    except PostNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[Comment])
async def remove_comment(
    post_id: str,
    comment_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Comment]:
    try:
        return await service.remove_comment(post_id, comment_id)
    except (PostNotFoundError, CommentNotFoundError) as e:
        raise HTTPException(status_code=404, detail=e.message)
