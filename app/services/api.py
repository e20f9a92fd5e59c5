# app/services/api.py

import os
import requests

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("POSTBOARD_API_URL", "http://localhost:8000")


def _error_message(res) -> str:
    """
    Pulls the message out of an `{"error": {"name", "message"}}` body.
    """
    try:
        error = res.json().get("error")
    except ValueError:
        return f"오류 발생: {res.status_code}"
    if isinstance(error, dict):
        return error.get("message", error.get("name", ""))
    return str(error) if error else f"오류 발생: {res.status_code}"


def _result(res, expected=(200,)):
    if res.status_code in expected:
        return {"status": "success", "data": res.json()}
    return {"status": "error", "code": res.status_code, "message": _error_message(res)}


def _call(method, path, expected=(200,), **kwargs):
    try:
        res = requests.request(method, f"{FASTAPI_URL}{path}", timeout=10, **kwargs)
    except requests.RequestException as e:
        return {"status": "error", "code": None, "message": str(e)}
    return _result(res, expected)


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(username, password, name):
    """
    Creates an account. Returns the new user under 'data'.
    """
    payload = {"username": username, "password": password, "name": name}
    return _call("POST", "/users", expected=(201,), json=payload)


def login_user(username, password):
    """
    Logs in a user; 'data' holds the token and the user.
    """
    payload = {"username": username, "password": password}
    return _call("POST", "/users/login", expected=(201,), json=payload)


def get_account(user_id, access_token, page=""):
    """
    Reads a protected account page (""/update/update/password/delete).
    """
    suffix = f"/{page}" if page else ""
    return _call(
        "GET",
        f"/users/{user_id}/account{suffix}",
        headers={"Authorization": f"Bearer {access_token}"},
    )


# -------------------------
# Users
# -------------------------

def list_users():
    return _call("GET", "/users")


def get_user(user_id):
    return _call("GET", f"/users/{user_id}")


def update_user(user_id, **fields):
    payload = {k: v for k, v in fields.items() if v}
    return _call("PUT", f"/users/{user_id}", json=payload)


def delete_user(user_id):
    return _call("DELETE", f"/users/{user_id}")


# -------------------------
# Posts
# -------------------------

def list_posts(user_id):
    return _call("GET", f"/users/{user_id}/posts")


def create_post(user_id, author, title, content):
    payload = {"author": author, "title": title, "content": content}
    return _call("POST", f"/users/{user_id}/posts", expected=(201,), json=payload)


def get_post(user_id, post_id):
    return _call("GET", f"/users/{user_id}/posts/{post_id}")


def update_post(user_id, post_id, **fields):
    payload = {k: v for k, v in fields.items() if v}
    return _call("PUT", f"/users/{user_id}/posts/{post_id}", json=payload)


def delete_post(user_id, post_id):
    return _call("DELETE", f"/users/{user_id}/posts/{post_id}")
