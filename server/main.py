# server/main.py

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from api import auth, posts, users
from config import Settings
from core.auth import AuthService
from core.errors import InternalError, PostboardError, Unauthorized
from database import create_db_engine, create_session_factory, init_db


logger = logging.getLogger("postboard.api")


# -------------------------------
# Error responses
# -------------------------------

async def handle_postboard_error(request: Request, exc: PostboardError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content={"error": {"name": "ValidationError", "message": details}},
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=InternalError().to_dict())


# -------------------------------
# Application factory
# -------------------------------

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    engine = create_db_engine(settings.database_url)
    init_db(engine)

    app = FastAPI(title="Postboard")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.auth = AuthService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_seconds=settings.token_expire_seconds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PostboardError, handle_postboard_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # auth first: POST /users/login must not be shadowed
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(posts.router)

    logger.info("Postboard API ready (database: %s)", engine.url.render_as_string(hide_password=True))
    return app


app = create_app()
