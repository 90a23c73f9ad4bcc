"""
Dependency Injection
"""
from typing import Any, Dict, Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncConnection

from app.core.database import get_db
from app.core.errors import UnauthorizedError
from app.core.security import decode_token
from app.repositories.job_repository import JobRepository


# Security
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Dict[str, Any]]:
    """
    Get token claims of the caller, if any.

    A missing or invalid token is not an error here: anonymous callers are
    allowed on public routes, and guarded routes check via require_admin.
    """
    if credentials is None:
        return None
    return decode_token(credentials.credentials)


async def require_admin(
    current_user: Optional[Dict[str, Any]] = Depends(get_current_user),
) -> Dict[str, Any]:
    """Only admins pass"""
    if not current_user or current_user.get("isAdmin") is not True:
        raise UnauthorizedError()
    return current_user


def get_job_repository(db: AsyncConnection = Depends(get_db)) -> JobRepository:
    """Job repository bound to the request's connection"""
    return JobRepository(db)
