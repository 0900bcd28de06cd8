from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql://postgres:postgres@db:5432/gutcheck"

    # Identity used when no X-User-Id header is supplied
    default_user_id: str = "demo"

    # CORS origin for the web frontend
    frontend_url: str = "http://localhost:5173"

    # Privacy export document version
    export_version: str = "1.0"

    # Entry date rules
    entry_max_age_days: int = 365

    class Config:
        env_file = ".env"


settings = Settings()
