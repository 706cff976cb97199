"""Authentication service for registration, login and session tokens."""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.schemas import UserCreate, LoginRequest
from app.db.repositories import (
    create_user as db_create_user,
    get_user as db_get_user,
    get_user_by_email as db_get_user_by_email,
)
from app.core.security import create_access_token, verify_password
from app.core.logging import logger
from fastapi import HTTPException, status


class AuthService:
    """
    Service layer for authentication operations.

    Handles user registration, login and current-user lookup.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def register(self, payload: UserCreate) -> dict:
        """
        Register a new user and issue a session token.

        Args:
            payload: User registration data containing name, email and password

        Returns:
            Dictionary with the signed token

        Raises:
            HTTPException: If the email is already registered
        """
        existing = await db_get_user_by_email(self.session, payload.email)
        if existing:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

        try:
            user = await db_create_user(self.session, payload)
        except IntegrityError:
            # another request registered the same email after the lookup above
            await self.session.rollback()
            logger.warning(f"Concurrent registration for {payload.email}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")
        logger.info(f"Registered user {user.id}")
        return {"token": create_access_token(user.id, user.role.value)}

    async def login(self, form_data: LoginRequest) -> dict:
        """
        Authenticate a user and issue a session token.

        Unknown email and wrong password produce the same error.

        Raises:
            HTTPException: If credentials are invalid
        """
        user = await db_get_user_by_email(self.session, form_data.email)
        if not user or not verify_password(form_data.password, user.hashed_password):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

        logger.info(f"User {user.id} logged in")
        return {"token": create_access_token(user.id, user.role.value)}

    async def get_user(self, user_id):
        """
        Load the user behind a session token.

        Raises:
            HTTPException: 401 if the user no longer exists
        """
        user = await db_get_user(self.session, user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token is not valid")
        return user
