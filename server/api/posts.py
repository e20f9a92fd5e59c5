# server/api/posts.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from api.schemas import PostCreate, PostOut, PostUpdate, UserOut
from core import posts
from core.errors import DocumentNotFound
from database import get_db


router = APIRouter(tags=["posts"])


@router.get("/users/{id}/posts", response_model=list[PostOut])
def list_posts(id: str, db: Session = Depends(get_db)):
    return posts.list_posts(db, id)


@router.post("/users/{id}/posts", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def add_post(id: str, req: PostCreate, db: Session = Depends(get_db)):
    return posts.add_post(db, id, req.model_dump())


@router.get("/users/{id}/posts/{post_id}", response_model=PostOut)
def get_post(id: str, post_id: str, db: Session = Depends(get_db)):
    post = posts.get_post(db, id, post_id)
    if post is None:
        raise DocumentNotFound()
    return post


@router.put("/users/{id}/posts/{post_id}", response_model=PostOut)
def update_post(id: str, post_id: str, req: PostUpdate, db: Session = Depends(get_db)):
    return posts.update_post(db, id, post_id, req.model_dump(exclude_unset=True))


@router.delete("/users/{id}/posts/{post_id}", response_model=UserOut)
def remove_post(id: str, post_id: str, db: Session = Depends(get_db)):
    return posts.remove_post(db, id, post_id)
