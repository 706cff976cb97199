from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from pydantic import ValidationError
from app.core.security import decode_token
from app.core.logging import logger
from app.schemas import CurrentUser

# Session tokens travel in a custom header rather than an Authorization: Bearer header
token_header = APIKeyHeader(name="x-auth-token", auto_error=False)


async def get_current_user(token: Optional[str] = Depends(token_header)) -> CurrentUser:
    """
    Resolve the caller's identity from the ``x-auth-token`` header.

    Only the token is checked; the user record is not loaded here.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )

    try:
        claim = decode_token(token)
        return CurrentUser(**claim)
    except (ValueError, ValidationError) as e:
        logger.debug(f"Rejected session token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is not valid",
        )
