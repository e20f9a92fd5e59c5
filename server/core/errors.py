# server/core/errors.py


class PostboardError(Exception):
    """
    Base class for errors that map to a structured API response.
    Subclasses set the error `name` shown to clients and the HTTP status.
    """
    name = "InternalError"
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": {"name": self.name, "message": self.message}}


class DuplicateUsername(PostboardError):
    name = "DuplicateUsername"
    status_code = 409
    default_message = "username already exists"


class UserNotFound(PostboardError):
    name = "UserNotFound"
    status_code = 400
    default_message = "user does not exist in database"


class InvalidCredentials(PostboardError):
    name = "InvalidCredentials"
    status_code = 401
    default_message = "Invalid username or password"


class Unauthorized(PostboardError):
    name = "Unauthorized"
    status_code = 401
    default_message = "Could not validate credentials"


class DocumentNotFound(PostboardError):
    name = "DocumentNotFound"
    status_code = 404
    default_message = "The provided ID doesn't match any documents"


class InternalError(PostboardError):
    pass
