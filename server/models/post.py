# server/models/post.py

import uuid
from sqlalchemy import Column, String, Text
from . import Base


def new_id() -> str:
    return uuid.uuid4().hex


class Post(Base):
    """
    Blog post. Stored independently of its author;
    ownership lives in the user's reference list.
    """
    __tablename__ = "posts"

    id = Column(String(32), primary_key=True, default=new_id)
    author = Column(String, nullable=False, default="")
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False, default="")
