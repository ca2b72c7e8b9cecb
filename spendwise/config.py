import os  # lets us read environment variables (from the OS)
from functools import (
    lru_cache,  # tiny built-in cache; we use it to reuse one Settings object
)

from dotenv import load_dotenv  # loads variables from a local .env file
from pydantic import BaseModel  # Pydantic gives us a typed, validated settings class

load_dotenv()  # read .env and put those key=value pairs into environment variables


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):  # our typed container for config values
    # signs the session cookie that carries the user id (must be secret)
    secret_key: str = os.getenv("SECRET_KEY", "dev-secret-change")

    # database connection string; default is a SQLite file in the project folder
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./spendwise.db")

    # the cookie that holds the signed credential
    # change effect: renames the cookie; users will be signed out on rename
    session_cookie: str = os.getenv("SESSION_COOKIE_NAME", "token")

    # seconds until the credential expires (checked when the cookie is read)
    session_max_age: int = int(os.getenv("SESSION_MAX_AGE", str(7 * 24 * 3600)))

    # "production" switches cookies to Secure + SameSite=None
    environment: str = os.getenv("ENVIRONMENT", "development")

    # front-end origin allowed by CORS (with credentials)
    client_url: str = os.getenv("CLIENT_URL", "http://localhost:5173")

    # create missing tables on startup; turn off when Alembic owns the schema
    auto_create_tables: bool = _env_flag("AUTO_CREATE_TABLES", "1")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache  # make sure Settings() is created once and reused (fast + consistent)
def get_settings() -> Settings:
    return Settings()  # build from env (already loaded by load_dotenv())
