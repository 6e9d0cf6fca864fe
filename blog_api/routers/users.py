"""Users router."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session, selectinload

from blog_api.config import settings
from blog_api.core.errors import ApiError, email_taken, not_found, server_error
from blog_api.core.validation import USER_RULES, validated_body
from blog_api.database import get_db
from blog_api.models.user import User
from blog_api.schemas.responses import (
    UserCreatedResponse,
    UserDeletedResponse,
    UserDetailResponse,
    UserListResponse,
    UserProjection,
    UserUpdatedResponse,
    UserWithPosts,
)
from blog_api.schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserCreatedResponse, status_code=status.HTTP_200_OK)
def create_user(
    user_data: Annotated[UserCreate, Depends(validated_body(UserCreate, USER_RULES))],
    db: Annotated[Session, Depends(get_db)],
) -> UserCreatedResponse:
    """Create a new user.

    Args:
        user_data: Validated user data (name, email, optional role)
        db: Database session

    Returns:
        UserCreatedResponse: Created user and a status message

    Raises:
        ApiError: 401 if the email is already registered, 500 on database failure
    """
    try:
        existing_user = db.query(User).filter(User.email == user_data.email).first()
        if existing_user:
            raise email_taken()

        new_user = User(name=user_data.name, email=user_data.email)
        role = user_data.role or settings.default_user_role
        if role is not None:
            new_user.role = role

        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except ApiError:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Failed to create user {user_data.email}: {e}")
        raise server_error("Something went Wrong!!", e) from e

    logger.info(f"Created user {new_user.uuid}")

    return UserCreatedResponse(user=UserRead.model_validate(new_user), message="Successful")


@router.get("", response_model=UserListResponse)
def list_users(
    db: Annotated[Session, Depends(get_db)],
) -> UserListResponse:
    """List every user together with their posts.

    Args:
        db: Database session

    Returns:
        UserListResponse: All users, each with its posts
    """
    try:
        users = db.query(User).options(selectinload(User.posts)).order_by(User.id).all()
        data = [UserWithPosts.model_validate(user) for user in users]
    except Exception as e:
        logger.exception(f"Failed to list users: {e}")
        raise server_error("Something went wrong", e) from e

    return UserListResponse(
        message="Here are the users you requested for!! Thank you hitting this endpoint",
        data=data,
    )


@router.get("/{uuid}", response_model=UserDetailResponse)
def get_user(
    uuid: str,
    db: Annotated[Session, Depends(get_db)],
) -> UserDetailResponse:
    """Get the public view of a user by uuid.

    Args:
        uuid: User uuid
        db: Database session

    Returns:
        UserDetailResponse: uuid, name, role and the titles/bodies of the user's posts

    Raises:
        ApiError: 404 if no user has this uuid
    """
    try:
        user = db.query(User).options(selectinload(User.posts)).filter(User.uuid == uuid).first()
        if user is None:
            raise not_found()
        projection = UserProjection.model_validate(user)
    except ApiError:
        raise
    except Exception as e:
        logger.exception(f"Failed to fetch user {uuid}: {e}")
        raise server_error("Something wrong", e) from e

    return UserDetailResponse(status="success", data=projection)


@router.put("/{uuid}", response_model=UserUpdatedResponse)
def update_user(
    uuid: str,
    db: Annotated[Session, Depends(get_db)],
    user_data: Annotated[UserUpdate | None, Body()] = None,
) -> UserUpdatedResponse:
    """Update a user's name, email and role.

    Only the keys present in the body are written. No rule set runs here, so
    empty strings are stored as given; values the database rejects end up as a 500.

    Args:
        uuid: User uuid
        db: Database session
        user_data: Fields to overwrite. A missing body changes nothing

    Returns:
        UserUpdatedResponse: The updated user

    Raises:
        ApiError: 404 if no user has this uuid, 500 on database failure
    """
    try:
        user = db.query(User).filter(User.uuid == uuid).first()
        if user is None:
            raise not_found()

        changes = user_data.model_dump(exclude_unset=True) if user_data else {}
        for field, value in changes.items():
            setattr(user, field, value)

        db.commit()
        db.refresh(user)
    except ApiError:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Failed to update user {uuid}: {e}")
        raise server_error("Something went wrong", e) from e

    logger.info(f"Updated user {uuid}")

    return UserUpdatedResponse(message="Updated successfully", data=UserRead.model_validate(user))


@router.delete("/{uuid}", response_model=UserDeletedResponse)
def delete_user(
    uuid: str,
    db: Annotated[Session, Depends(get_db)],
) -> UserDeletedResponse:
    """Delete a user by uuid.

    A user that still owns posts cannot be deleted; the foreign key rejects it.

    Args:
        uuid: User uuid
        db: Database session

    Returns:
        UserDeletedResponse: Confirmation message

    Raises:
        ApiError: 404 if no user has this uuid, 500 on database failure
    """
    try:
        user = db.query(User).filter(User.uuid == uuid).first()
        if user is None:
            raise not_found()

        db.delete(user)
        db.commit()
    except ApiError:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Failed to delete user {uuid}: {e}")
        raise server_error("Something went Wrong!!", e) from e

    logger.info(f"Deleted user {uuid}")

    return UserDeletedResponse(message="user deleted successfully!")
