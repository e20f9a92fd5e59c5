# server/api/users.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from api.deps import get_auth
from api.schemas import UserOut, UserUpdate
from core import credentials
from core.auth import AuthService
from database import get_db


router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)):
    return credentials.list_users(db)


@router.get("/users/{id}", response_model=UserOut)
def get_user(id: str, db: Session = Depends(get_db)):
    return credentials.get_or_404(db, id)


@router.put("/users/{id}", response_model=UserOut)
def update_user(id: str, req: UserUpdate, db: Session = Depends(get_db), auth: AuthService = Depends(get_auth)):
    """
    Partial update of username, name or password.
    A new password is hashed before it is stored.
    """
    fields = req.model_dump(exclude_unset=True, exclude={"password"})
    if req.password is not None:
        fields["hashed_password"] = auth.hash_password(req.password)
    return credentials.update(db, id, fields)


@router.delete("/users/{id}", response_model=UserOut)
def delete_user(id: str, db: Session = Depends(get_db)):
    return credentials.delete(db, id)
