# server/core/auth.py

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from core import credentials
from core.errors import InvalidCredentials, Unauthorized, UserNotFound
from models import User


logger = logging.getLogger("postboard.auth")


class AuthService:
    """
    Password hashing, login and stateless bearer-token verification.

    One instance is built per application from its settings and kept on
    `app.state.auth`; routes reach it through the `require_user` dependency.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_seconds: int = 432000):
        if not secret_key:
            raise ValueError("A signing secret must be provided")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.expire_seconds = expire_seconds
        self._pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    # -------------------------------
    # Passwords
    # -------------------------------

    def hash_password(self, password: str) -> str:
        return self._pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False

    # -------------------------------
    # Tokens
    # -------------------------------

    def issue_token(self, user: User, expires_delta: timedelta | None = None) -> str:
        expire = datetime.now(timezone.utc) + (expires_delta or timedelta(seconds=self.expire_seconds))
        payload = {"id": user.id, "username": user.username, "exp": expire}
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_token(self, token: str) -> dict:
        """
        Checks signature and expiry and returns the payload.
        Raises Unauthorized on any failure.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as e:
            logger.warning("Rejected bearer token: %s", e)
            raise Unauthorized()

        if not payload.get("id"):
            raise Unauthorized()
        return payload

    # -------------------------------
    # Flows
    # -------------------------------

    def login(self, db: Session, username: str, password: str) -> tuple[str, User]:
        user = credentials.find_by_username(db, username)
        if user is None:
            logger.info("Login attempt for unknown user %s", username)
            raise UserNotFound()

        if not self.verify_password(password, user.hashed_password):
            logger.warning("Failed login attempt for %s", username)
            raise InvalidCredentials()

        logger.info("User %s logged in", user.id)
        return self.issue_token(user), user

    def verify(self, db: Session, token: str | None) -> User:
        if not token:
            raise Unauthorized("Missing bearer token")

        payload = self.decode_token(token)
        user = credentials.find_by_id(db, payload["id"])
        if user is None:
            raise Unauthorized()
        return user
