"""Posts router."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, joinedload

from blog_api.core.errors import server_error
from blog_api.core.validation import POST_RULES, validated_body
from blog_api.database import get_db
from blog_api.models.post import Post
from blog_api.models.user import User
from blog_api.schemas.post import PostCreate, PostRead
from blog_api.schemas.responses import PostCreatedResponse, PostListResponse, PostWithUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=PostCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: Annotated[PostCreate, Depends(validated_body(PostCreate, POST_RULES))],
    db: Annotated[Session, Depends(get_db)],
) -> PostCreatedResponse:
    """Create a post owned by the user named in ``userUuid``.

    There is no separate existence check for the owner: an unknown or missing
    ``userUuid`` fails the insert and is reported like any other database failure.

    Args:
        post_data: Validated post data (title, optional body, userUuid)
        db: Database session

    Returns:
        PostCreatedResponse: The created post

    Raises:
        ApiError: 500 if the owner cannot be resolved or the insert fails
    """
    try:
        owner = db.query(User).filter(User.uuid == post_data.user_uuid).first()
        if owner is None:
            raise LookupError(f"No user with uuid {post_data.user_uuid!r} to connect the post to")

        new_post = Post(title=post_data.title, body=post_data.body, user=owner)

        db.add(new_post)
        db.commit()
        db.refresh(new_post)
    except Exception as e:
        db.rollback()
        logger.exception(f"Failed to create post for user {post_data.user_uuid}: {e}")
        raise server_error("Something Wrong", e) from e

    logger.info(f"Created post {new_post.id} for user {post_data.user_uuid}")

    return PostCreatedResponse(
        message="post created successfully",
        data=PostRead.model_validate(new_post),
    )


@router.get("", response_model=PostListResponse)
def list_posts(
    db: Annotated[Session, Depends(get_db)],
) -> PostListResponse:
    """List every post, newest first, each with its owner.

    Args:
        db: Database session

    Returns:
        PostListResponse: All posts ordered by creation time, descending
    """
    try:
        posts = (
            db.query(Post)
            .options(joinedload(Post.user))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .all()
        )
        data = [PostWithUser.model_validate(post) for post in posts]
    except Exception as e:
        logger.exception(f"Failed to list posts: {e}")
        raise server_error("Something Wrong", e) from e

    return PostListResponse(
        status="success",
        message="posts fetched successfully",
        data=data,
    )
