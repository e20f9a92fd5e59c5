# server/core/posts.py

import logging
from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session
from core.credentials import get_or_404
from core.errors import DocumentNotFound
from models import Post, User, user_posts


logger = logging.getLogger("postboard.posts")

EDITABLE_FIELDS = ("author", "title", "content")


def list_posts(db: Session, user_id: str) -> list[Post]:
    return list(get_or_404(db, user_id).posts)


def add_post(db: Session, user_id: str, fields: dict) -> User:
    """
    Creates a post and appends it to the user's reference list.
    Both rows are written in one transaction, and the append is a single
    INSERT, so concurrent adds for the same user never overwrite each other.
    """
    user = get_or_404(db, user_id)

    post = Post(**{k: v for k, v in fields.items() if k in EDITABLE_FIELDS and v is not None})
    db.add(post)
    try:
        db.flush()
        db.execute(insert(user_posts).values(user_id=user.id, post_id=post.id))
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(user)
    logger.info("Added post %s to user %s", post.id, user.id)
    return user


def _owned_post_query(user_id: str, post_id: str):
    return (
        select(Post)
        .join(user_posts, user_posts.c.post_id == Post.id)
        .where(user_posts.c.user_id == user_id, Post.id == post_id)
    )


def get_post(db: Session, user_id: str, post_id: str) -> Post | None:
    """
    Returns the post if the user references it, otherwise None.
    """
    get_or_404(db, user_id)
    return db.execute(_owned_post_query(user_id, post_id)).scalar_one_or_none()


def update_post(db: Session, user_id: str, post_id: str, fields: dict) -> Post:
    """
    Updates a post the user owns. A post referenced by another user
    (or by nobody) is reported as not found.
    """
    post = get_post(db, user_id, post_id)
    if post is None:
        raise DocumentNotFound()

    for key in EDITABLE_FIELDS:
        if fields.get(key) is not None:
            setattr(post, key, fields[key])

    db.commit()
    db.refresh(post)
    return post


def remove_post(db: Session, user_id: str, post_id: str) -> User:
    """
    Drops one reference from the user's list with a single DELETE.
    The post row is left in place; unknown ids are a no-op.
    """
    user = get_or_404(db, user_id)

    result = db.execute(
        delete(user_posts).where(
            user_posts.c.user_id == user.id,
            user_posts.c.post_id == post_id,
        )
    )
    db.commit()

    if result.rowcount:
        logger.info("Removed post %s from user %s", post_id, user.id)

    db.refresh(user)
    return user
