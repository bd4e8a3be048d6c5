"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings

from todo_app.core.constants import PersistenceBackend


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    POSTGRES_USER: str = "todos_user"
    POSTGRES_PASSWORD: str = "todos_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "todo_lists"

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 5

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg)."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def DATABASE_URL_SYNC(self) -> str:
        """Sync URL for Alembic migrations (psycopg2)."""
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── Persistence ───────────────────────────
    PERSISTENCE_BACKEND: PersistenceBackend = PersistenceBackend.POSTGRES

    # ── Auth ──────────────────────────────────
    BCRYPT_ROUNDS: int = 12

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
