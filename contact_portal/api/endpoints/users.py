import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_portal.core.database import aget_db
from contact_portal.core.errors import not_found, server_error
from contact_portal.core.security import hash_password
from contact_portal.models.base import parse_record_id
from contact_portal.models.user import User
from contact_portal.schemas.userSchema import UserCountResponse, UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(db: AsyncSession = Depends(aget_db)):
    try:
        result = await db.execute(select(User))
        return result.scalars().all()
    except Exception as e:
        logger.error(f"Error fetching users: {e}")
        return server_error("Failed to fetch users", e)


@router.get("/count", response_model=UserCountResponse)
async def count_users(db: AsyncSession = Depends(aget_db)):
    try:
        count = await db.scalar(select(func.count()).select_from(User))
        return {"totalUsers": count}
    except Exception as e:
        logger.error(f"Error fetching user count: {e}")
        return server_error("Failed to fetch user count", e)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, db: AsyncSession = Depends(aget_db)):
    try:
        user = await db.get(User, parse_record_id(user_id))
        if not user:
            return not_found("User")
        return user
    except Exception as e:
        logger.error(f"Error fetching user {user_id}: {e}")
        return server_error("Failed to fetch user", e)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    db: AsyncSession = Depends(aget_db)
):
    """
    Update username and email with the fields that were sent.
    The password is re-hashed on every call; leaving it out stores the hash
    of an empty password.
    """
    try:
        hashed_password = hash_password(payload.password or "")
        user = await db.get(User, parse_record_id(user_id))
        if not user:
            return not_found("User")

        changes = payload.model_dump(exclude_unset=True, exclude={"password"})
        for field, value in changes.items():
            setattr(user, field, value)
        user.password = hashed_password

        await db.commit()
        await db.refresh(user)
        return {
            "message": "User updated successfully",
            "updatedUser": UserResponse.model_validate(user),
        }
    except Exception as e:
        await db.rollback()
        logger.error(f"Error updating user {user_id}: {e}")
        return server_error("Failed to update user", e)


@router.delete("/{user_id}")
async def delete_user(user_id: str, db: AsyncSession = Depends(aget_db)):
    try:
        user = await db.get(User, parse_record_id(user_id))
        if not user:
            return not_found("User")

        await db.delete(user)
        await db.commit()
        return {"message": "User deleted successfully"}
    except Exception as e:
        await db.rollback()
        logger.error(f"Error deleting user {user_id}: {e}")
        return server_error("Failed to delete user", e)
