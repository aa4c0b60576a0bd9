from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SEATLOCKER_")

    database_url: str = "sqlite+pysqlite:///:memory:"
    openapi_path : Path = Path(__file__).resolve().parents[1] / "openapi/openapi.yaml"
    # seconds a SQLite writer waits for the database lock before failing
    sqlite_busy_timeout: float = 30.0
    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
