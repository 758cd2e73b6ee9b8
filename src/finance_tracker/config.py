"""Application configuration via pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# URL schemes rewritten to the asyncpg driver
ASYNC_SCHEMES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
}


class Settings(BaseSettings):
    """Finance tracker settings, read from the environment or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Routing and paging
    api_prefix: str = "/api"
    default_page_size: int = 10
    max_page_size: int = 100

    # Postgres connection; DATABASE_URL wins over the individual parts
    database_url: str | None = None
    database_host: str = "localhost"
    database_port: int = 5432
    database_name: str = "finance_tracker"
    database_user: str = "finance"
    database_password: str = ""
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Tokens and password hashing
    jwt_secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_expires_hours: int = 24
    bcrypt_rounds: int = 12

    # Regular payment windows, in days
    upcoming_days_default: int = 30
    due_soon_days: int = 7

    @property
    def async_database_url(self) -> str:
        """SQLAlchemy URL using an async driver."""
        if not self.database_url:
            return (
                f"postgresql+asyncpg://{self.database_user}:{self.database_password}"
                f"@{self.database_host}:{self.database_port}/{self.database_name}"
            )
        for scheme, async_scheme in ASYNC_SCHEMES.items():
            if self.database_url.startswith(scheme):
                return async_scheme + self.database_url[len(scheme):]
        return self.database_url

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")

    @property
    def has_database(self) -> bool:
        """Whether a connection was configured explicitly."""
        return bool(self.database_url or self.database_password)


settings = Settings()
