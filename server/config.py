# server/config.py

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


load_dotenv()


# -------------------------------
# Defaults
# -------------------------------

DEFAULT_DATABASE_URL = "sqlite:///./data/app.db"

# 5 days
DEFAULT_TOKEN_EXPIRE_SECONDS = 432000


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration for the API server.
    Values are read from the environment (and a local .env file).
    """
    jwt_secret: str
    database_url: str = DEFAULT_DATABASE_URL
    jwt_algorithm: str = "HS256"
    token_expire_seconds: int = DEFAULT_TOKEN_EXPIRE_SECONDS
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        secret = os.getenv("JWT_SECRET_KEY")
        if not secret:
            raise RuntimeError("JWT_SECRET_KEY must be set")

        return cls(
            jwt_secret=secret,
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            token_expire_seconds=int(
                os.getenv("ACCESS_TOKEN_EXPIRE_SECONDS", str(DEFAULT_TOKEN_EXPIRE_SECONDS))
            ),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")) or ["*"],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
