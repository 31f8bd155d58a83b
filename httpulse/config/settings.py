from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Backend configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "httpulse"
    db_username: str = "httpulse"
    db_password: str = "secret"
    db_connect_timeout_seconds: float = 10.0

    http_timeout_seconds: float = 30.0
    cookie_jar_path: str = "cookies.txt"
