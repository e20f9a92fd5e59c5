# server/api/schemas.py

from pydantic import BaseModel, ConfigDict, Field


# -------------------------------
# Request bodies
# -------------------------------

class UserCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    name: str = ""


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str
    password: str


class UserUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str | None = Field(None, min_length=1)
    name: str | None = None
    password: str | None = Field(None, min_length=1)


class PostCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1)
    author: str = ""
    content: str = ""


class PostUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, min_length=1)
    author: str | None = None
    content: str | None = None


# -------------------------------
# Responses
# -------------------------------

class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    author: str
    title: str
    content: str


class UserOut(BaseModel):
    """
    Public view of a user. The password hash is never part of it.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    name: str
    posts: list[PostOut] = []


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    user: UserOut


class AccountResponse(BaseModel):
    status: int = 200
    message: str = "login successful"
    user: UserOut
