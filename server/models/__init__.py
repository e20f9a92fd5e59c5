# server/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()


from .post import Post  # noqa: E402
from .user import User, user_posts  # noqa: E402

__all__ = ["Base", "Post", "User", "user_posts"]
