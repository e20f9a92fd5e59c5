# server/core/credentials.py

import logging
from typing import Callable
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.errors import DocumentNotFound, DuplicateUsername
from models import User


logger = logging.getLogger("postboard.credentials")


# -------------------------------
# Lookups
# -------------------------------

def find_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def find_by_id(db: Session, user_id: str) -> User | None:
    """
    Returns the user with its post references resolved, or None.
    """
    return db.get(User, user_id)


def get_or_404(db: Session, user_id: str) -> User:
    user = find_by_id(db, user_id)
    if user is None:
        raise DocumentNotFound()
    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.username.asc()).all()


# -------------------------------
# Mutations
# -------------------------------

def create(db: Session, username: str, password: str, name: str, hash_password: Callable[[str], str]) -> User:
    """
    Stores a new user with an empty post list.
    The password is only hashed once the username is known to be free.
    """
    if find_by_username(db, username) is not None:
        raise DuplicateUsername()

    user = User(username=username, hashed_password=hash_password(password), name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent signup for the same name
        db.rollback()
        raise DuplicateUsername()

    db.refresh(user)
    logger.info("Created user %s (%s)", user.id, user.username)
    return user


def update(db: Session, user_id: str, fields: dict) -> User:
    """
    Applies a partial update. `fields` may hold username, name and
    hashed_password; unknown keys are ignored.
    """
    user = get_or_404(db, user_id)

    new_username = fields.get("username")
    if new_username is not None and new_username != user.username:
        if find_by_username(db, new_username) is not None:
            raise DuplicateUsername()
        user.username = new_username

    if fields.get("name") is not None:
        user.name = fields["name"]
    if fields.get("hashed_password") is not None:
        user.hashed_password = fields["hashed_password"]

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateUsername()

    db.refresh(user)
    return user


def delete(db: Session, user_id: str) -> User:
    """
    Removes the user and its reference rows. Posts it pointed at stay
    in the posts table.
    """
    user = get_or_404(db, user_id)
    posts = list(user.posts)

    db.delete(user)
    db.commit()

    logger.info("Deleted user %s, leaving %d unreferenced post(s)", user_id, len(posts))
    return user
