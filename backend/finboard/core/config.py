from typing import Literal

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    database_url: str = "sqlite+pysqlite:///./finboard.db"
    cors_origins: str = "http://localhost:5173"
    log_level: str = "INFO"

    record_store_backend: Literal["sql", "http"] = "sql"
    record_store_url: str = ""
    record_store_project_id: str = ""
    record_store_public_key: str = ""
    record_store_timeout_seconds: float = 15.0

    trend_months: int = 6

    class Config:
        env_prefix = ""
        case_sensitive = False
        env_file = ".env"

settings = Settings()
