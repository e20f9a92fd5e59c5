# server/models/user.py

from sqlalchemy import Column, ForeignKey, Integer, String, Table, UniqueConstraint
from sqlalchemy.orm import relationship
from . import Base
from .post import new_id


# -------------------------------
# User -> Post reference list
# -------------------------------

# One row per reference. `seq` keeps list order, so appending and removing
# a reference are single-row writes.
user_posts = Table(
    "user_posts",
    Base.metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("post_id", String(32), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint("user_id", "post_id", name="uq_user_posts_user_post"),
)


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores username, display name and hashed password for authentication.
    """
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    name = Column(String, nullable=False, default="")

    posts = relationship(
        "Post",
        secondary=user_posts,
        order_by=user_posts.c.seq,
        lazy="selectin",
        viewonly=True,
    )
