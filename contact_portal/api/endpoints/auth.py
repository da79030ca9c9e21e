import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_portal.core.database import aget_db
from contact_portal.core.errors import auth_error
from contact_portal.core.security import create_jwt_token, hash_password, verify_password
from contact_portal.models.user import User
from contact_portal.schemas.userSchema import LoginRequest, LoginResponse, SignupRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def invalid_credentials() -> JSONResponse:
    """Same response for an unknown account and a wrong password."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid credentials"},
    )


# -----------------------------
# Signup
# -----------------------------
@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(payload: SignupRequest, db: AsyncSession = Depends(aget_db)):
    """
    Create an account. The password is stored as a bcrypt hash.
    Duplicate usernames/emails are rejected by the database and reported as 500.
    """
    try:
        user = User(
            username=payload.username,
            email=payload.email,
            password=hash_password(payload.password),
        )
        db.add(user)
        await db.commit()
        return {"message": "User created successfully"}
    except Exception as e:
        await db.rollback()
        logger.error(f"Error creating user: {e}")
        return auth_error("Error creating user", e)


# -----------------------------
# Login
# -----------------------------
@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, db: AsyncSession = Depends(aget_db)):
    """
    Find the account by username or email and issue a one-hour token
    carrying the user's id.
    """
    try:
        result = await db.execute(
            select(User)
            .where(or_(User.username == payload.username, User.email == payload.email))
            .limit(1)
        )
        user = result.scalars().first()
        if not user:
            return invalid_credentials()

        if not verify_password(payload.password, user.password):
            return invalid_credentials()

        token = create_jwt_token({"id": user.id})
        logger.info(f"User {user.id} logged in")
        return {"token": token}
    except Exception as e:
        logger.error(f"Error logging in: {e}")
        return auth_error("Error logging in", e)
