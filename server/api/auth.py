# server/api/auth.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from api.deps import get_auth, require_account_owner
from api.schemas import AccountResponse, LoginRequest, LoginResponse, UserCreate, UserOut
from core import credentials
from core.auth import AuthService
from database import get_db
from models import User


router = APIRouter(tags=["auth"])


# -------------------------------
# Signup & Login
# -------------------------------

@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(req: UserCreate, db: Session = Depends(get_db), auth: AuthService = Depends(get_auth)):
    """
    Creates a user. Responds 409 if the username is taken.
    """
    return credentials.create(db, req.username, req.password, req.name, auth.hash_password)


@router.post("/users/login", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
def login(req: LoginRequest, db: Session = Depends(get_db), auth: AuthService = Depends(get_auth)):
    token, user = auth.login(db, req.username, req.password)
    return {"success": True, "token": token, "user": user}


# -------------------------------
# Protected account pages
# -------------------------------

# Each of these gates a form in the client; they only confirm the token.

@router.get("/users/{id}/account", response_model=AccountResponse)
def read_account(user: User = Depends(require_account_owner)):
    return {"user": user}


@router.get("/users/{id}/account/update", response_model=AccountResponse)
def read_account_update(user: User = Depends(require_account_owner)):
    return {"user": user}


@router.get("/users/{id}/account/update/password", response_model=AccountResponse)
def read_account_password(user: User = Depends(require_account_owner)):
    return {"user": user}


@router.get("/users/{id}/account/delete", response_model=AccountResponse)
def read_account_delete(user: User = Depends(require_account_owner)):
    return {"user": user}
