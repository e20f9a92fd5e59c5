from types import SimpleNamespace

import pytest
from fastapi import Depends, Request
from fastapi.testclient import TestClient

import core.posts
from api.deps import require_user
from core.auth import AuthService
from main import create_app


PASSWORD = "super-secret-password"


def signup(client, username="alice", password=PASSWORD, name="Alice"):
    response = client.post("/users", json={"username": username, "password": password, "name": name})
    assert response.status_code == 201
    return response.json()


def login(client, username="alice", password=PASSWORD):
    response = client.post("/users/login", json={"username": username, "password": password})
    assert response.status_code == 201
    return response.json()["token"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


# -------------------------------
# Signup & login
# -------------------------------

def test_signup_hides_password(client) -> None:
    user = signup(client)

    assert user["username"] == "alice"
    assert user["name"] == "Alice"
    assert user["posts"] == []
    assert "password" not in user
    assert "hashed_password" not in user


def test_duplicate_signup_returns_409(client) -> None:
    signup(client)
    response = client.post("/users", json={"username": "alice", "password": "x", "name": "Again"})

    assert response.status_code == 409
    assert response.json() == {
        "error": {"name": "DuplicateUsername", "message": "username already exists"}
    }
    assert len(client.get("/users").json()) == 1


def test_signup_validates_body(client) -> None:
    response = client.post("/users", json={"username": "alice"})
    assert response.status_code == 422
    assert response.json()["error"]["name"] == "ValidationError"
    assert "password" in response.json()["error"]["message"]

    response = client.post("/users", json={"username": "bob", "password": "pw", "admin": True})
    assert response.status_code == 422


def test_login_status_codes(client) -> None:
    user = signup(client)

    unknown = client.post("/users/login", json={"username": "ghost", "password": PASSWORD})
    assert unknown.status_code == 400
    assert unknown.json()["error"]["name"] == "UserNotFound"

    wrong = client.post("/users/login", json={"username": "alice", "password": "nope"})
    assert wrong.status_code == 401
    assert wrong.json()["error"]["name"] == "InvalidCredentials"

    ok = client.post("/users/login", json={"username": "alice", "password": PASSWORD})
    assert ok.status_code == 201
    body = ok.json()
    assert body["success"] is True
    assert body["token"]
    assert body["user"]["id"] == user["id"]
    assert "hashed_password" not in body["user"]


# -------------------------------
# Protected account routes
# -------------------------------

@pytest.mark.parametrize("suffix", ["", "/update", "/update/password", "/delete"])
def test_account_routes_accept_own_token(client, suffix) -> None:
    user = signup(client)
    token = login(client)

    response = client.get(f"/users/{user['id']}/account{suffix}", headers=bearer(token))

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == 200
    assert body["user"]["id"] == user["id"]


def test_account_rejects_missing_and_tampered_tokens(client) -> None:
    user = signup(client)
    token = login(client)
    path = f"/users/{user['id']}/account"

    missing = client.get(path)
    assert missing.status_code == 401
    assert missing.json()["error"]["name"] == "Unauthorized"
    assert missing.headers["www-authenticate"] == "Bearer"

    header, payload, signature = token.split(".")
    forged = AuthService("wrong-secret").issue_token(SimpleNamespace(id=user["id"], username="alice"))
    other_secret = client.get(path, headers=bearer(forged))
    assert other_secret.status_code == 401

    wrong_scheme = client.get(path, headers={"Authorization": f"Basic {token}"})
    assert wrong_scheme.status_code == 401

    tampered = client.get(path, headers=bearer(f"{header}.{payload}.{signature[::-1]}"))
    assert tampered.status_code == 401
    assert tampered.json()["error"]["name"] == "Unauthorized"


def test_account_rejects_token_for_other_user(client) -> None:
    signup(client)
    bob = signup(client, username="bob", name="Bob")
    alice_token = login(client)

    response = client.get(f"/users/{bob['id']}/account", headers=bearer(alice_token))
    assert response.status_code == 401


# -------------------------------
# User CRUD
# -------------------------------

NOT_FOUND = {
    "error": {
        "name": "DocumentNotFound",
        "message": "The provided ID doesn't match any documents",
    }
}


def test_user_crud(client) -> None:
    user = signup(client)
    user_id = user["id"]

    assert client.get(f"/users/{user_id}").json()["username"] == "alice"

    updated = client.put(f"/users/{user_id}", json={"name": "Alice Liddell", "password": "new-password"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Alice Liddell"

    assert client.post("/users/login", json={"username": "alice", "password": PASSWORD}).status_code == 401
    login(client, password="new-password")

    deleted = client.delete(f"/users/{user_id}")
    assert deleted.status_code == 200
    assert deleted.json()["id"] == user_id

    assert client.get(f"/users/{user_id}").status_code == 404


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/users/missing"),
        ("delete", "/users/missing"),
        ("get", "/users/missing/posts"),
    ],
)
def test_missing_user_returns_document_not_found(client, method, path) -> None:
    response = getattr(client, method)(path)
    assert response.status_code == 404
    assert response.json() == NOT_FOUND


def test_update_to_taken_username(client) -> None:
    signup(client)
    bob = signup(client, username="bob", name="Bob")

    response = client.put(f"/users/{bob['id']}", json={"username": "alice"})
    assert response.status_code == 409


# -------------------------------
# Posts
# -------------------------------

def test_post_lifecycle(client) -> None:
    user_id = signup(client)["id"]
    base = f"/users/{user_id}/posts"

    created = client.post(base, json={"title": "t", "author": "Alice", "content": "hello"})
    assert created.status_code == 201
    posts = created.json()["posts"]
    assert [p["title"] for p in posts] == ["t"]
    post_id = posts[0]["id"]

    listed = client.get(base).json()
    assert [p["id"] for p in listed] == [post_id]

    single = client.get(f"{base}/{post_id}")
    assert single.status_code == 200
    assert single.json()["content"] == "hello"

    edited = client.put(f"{base}/{post_id}", json={"content": "edited"})
    assert edited.status_code == 200
    assert edited.json()["content"] == "edited"
    assert edited.json()["title"] == "t"

    removed = client.delete(f"{base}/{post_id}")
    assert removed.status_code == 200
    assert removed.json()["posts"] == []
    assert client.get(base).json() == []


def test_unknown_post_is_404(client) -> None:
    user_id = signup(client)["id"]

    response = client.get(f"/users/{user_id}/posts/nope")
    assert response.status_code == 404
    assert response.json() == NOT_FOUND


def test_post_update_checks_owner(client) -> None:
    alice_id = signup(client)["id"]
    bob_id = signup(client, username="bob", name="Bob")["id"]
    post_id = client.post(f"/users/{alice_id}/posts", json={"title": "mine"}).json()["posts"][0]["id"]

    response = client.put(f"/users/{bob_id}/posts/{post_id}", json={"title": "stolen"})
    assert response.status_code == 404
    assert client.get(f"/users/{alice_id}/posts/{post_id}").json()["title"] == "mine"


def test_post_requires_title(client) -> None:
    user_id = signup(client)["id"]
    response = client.post(f"/users/{user_id}/posts", json={"content": "no title"})
    assert response.status_code == 422


def test_users_listing_includes_posts(client) -> None:
    user_id = signup(client)["id"]
    client.post(f"/users/{user_id}/posts", json={"title": "one"})

    users = client.get("/users").json()
    assert users[0]["posts"][0]["title"] == "one"


# -------------------------------
# Unexpected failures
# -------------------------------

def test_unexpected_errors_are_redacted(settings, monkeypatch) -> None:
    def explode(db, user_id):
        raise RuntimeError("connection string with password")

    monkeypatch.setattr(core.posts, "list_posts", explode)
    app = create_app(settings)

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/users/anything/posts")

    assert response.status_code == 500
    assert response.json() == {"error": {"name": "InternalError", "message": "Internal Server Error"}}
    assert "password" not in response.text


def test_require_user_attaches_user_to_request(settings) -> None:
    app = create_app(settings)
    calls = []

    @app.get("/whoami")
    def whoami(request: Request, user=Depends(require_user)):
        calls.append(user.id)
        return {"id": request.state.user.id}

    with TestClient(app) as client:
        user = signup(client)
        token = login(client)

        ok = client.get("/whoami", headers=bearer(token))
        assert ok.status_code == 200
        assert ok.json() == {"id": user["id"]}
        assert calls == [user["id"]]

        header, payload, signature = token.split(".")
        for headers in ({}, bearer(f"{header}.{payload}.{signature[::-1]}"), bearer("garbage")):
            denied = client.get("/whoami", headers=headers)
            assert denied.status_code == 401
        assert calls == [user["id"]]


def test_login_rejects_unknown_fields(client) -> None:
    signup(client)
    response = client.post(
        "/users/login",
        json={"username": "alice", "password": PASSWORD, "remember": True},
    )
    assert response.status_code == 422
    assert response.json()["error"]["name"] == "ValidationError"
