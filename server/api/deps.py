# server/api/deps.py

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from core.auth import AuthService
from core.errors import Unauthorized
from database import get_db
from models import User


_bearer = HTTPBearer(auto_error=False)


async def bearer_token(request: Request) -> str | None:
    creds: HTTPAuthorizationCredentials | None = await _bearer(request)
    if creds is None or creds.scheme.lower() != "bearer":
        return None
    return creds.credentials


def get_auth(request: Request) -> AuthService:
    return request.app.state.auth


def require_user(
    request: Request,
    token: str | None = Depends(bearer_token),
    auth: AuthService = Depends(get_auth),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolves the bearer token to a user and stores it on request.state.
    Nothing past this dependency runs without a valid token.
    """
    user = auth.verify(db, token)
    request.state.user = user
    return user


def require_account_owner(id: str, user: User = Depends(require_user)) -> User:
    if user.id != id:
        raise Unauthorized("Token does not grant access to this account")
    return user
