"""Runtime settings, read from the environment."""
import logging
import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+pysqlite:///./local.db")

SECRET_KEY = os.getenv("PICKER_SECRET_KEY", "dev-secret-change-me")  # in production load from a secret store
ALGORITHM = os.getenv("PICKER_JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("PICKER_TOKEN_EXPIRE_MINUTES", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Route that serves the picker popup; providers link to it by name.
BACKEND_ROUTE = "contao_backend"

DEFAULT_MESSAGES = {
    "MSC": {
        "eventPicker": "Event picker",
    },
}


def cors_origins() -> list[str]:
    cors_origins_env = os.getenv("CORS_ALLOW_ORIGINS")
    if cors_origins_env:
        return [o.strip() for o in cors_origins_env.split(",") if o.strip()]
    return ["http://localhost:3000"]


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
