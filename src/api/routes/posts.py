"""Post API routes: posts, likes and comments."""

from uuid import UUID

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_post_service
from api.schemas.common import MessageResponse
from api.schemas.post import CommentResponse, LikeResponse, PostResponse, TextBody
from domain.services.post_service import PostService

router = APIRouter(prefix="/post", tags=["posts"])


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List all posts",
    responses={200: {"description": "Posts, newest first"}},
)
async def list_posts(
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    posts = await service.get_all()
    return [PostResponse.from_entity(p) for p in posts]


@router.post(
    "",
    response_model=PostResponse,
    summary="Create a post",
    responses={
        200: {"description": "The created post"},
        400: {"description": "Validation error"},
        401: {"description": "Missing or invalid token"},
    },
)
async def create_post(
    body: TextBody,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """
    Create a post as the caller.

    The author's name and avatar are copied onto the post and are not updated
    afterwards.
    """
    post = await service.create(user.id, body.text)
    return PostResponse.from_entity(post)


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses={404: {"description": "Post not found"}},
)
async def get_post(
    post_id: UUID,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Get a post with its likes and comments."""
    return PostResponse.from_entity(await service.get_by_id(post_id))


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
    responses={
        401: {"description": "Caller is not the author"},
        404: {"description": "Post not found"},
    },
)
async def delete_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete one of the caller's posts with its likes and comments."""
    await service.delete(post_id, user.id)
    return MessageResponse(msg="Post removed")


@router.post(
    "/like/{post_id}",
    response_model=list[LikeResponse],
    summary="Like a post",
    responses={
        400: {"description": "Post already liked by the caller"},
        404: {"description": "Post not found"},
    },
)
async def like_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Like a post; returns the post's likes."""
    likes = await service.add_like(post_id, user.id)
    return [LikeResponse.from_entity(like) for like in likes]


@router.delete(
    "/like/{post_id}",
    response_model=list[LikeResponse],
    summary="Unlike a post",
    responses={404: {"description": "Post not found"}},
)
async def unlike_post(
    post_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    """Remove the caller's like; returns the post's likes."""
    likes = await service.remove_like(post_id, user.id)
    return [LikeResponse.from_entity(like) for like in likes]


@router.post(
    "/comment/{post_id}",
    response_model=list[CommentResponse],
    summary="Comment on a post",
    responses={
        400: {"description": "Validation error"},
        404: {"description": "Post not found"},
    },
)
async def add_comment(
    post_id: UUID,
    body: TextBody,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Append a comment; returns the post's comments."""
    comments = await service.add_comment(post_id, user.id, body.text)
    return [CommentResponse.from_entity(c) for c in comments]


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=list[CommentResponse],
    summary="Delete a comment",
    responses={
        401: {"description": "Caller did not write the comment"},
        404: {"description": "Post or comment not found"},
    },
)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    """Delete one of the caller's comments; returns the post's comments."""
    comments = await service.delete_comment(post_id, comment_id, user.id)
    return [CommentResponse.from_entity(c) for c in comments]
