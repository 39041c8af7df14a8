from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COMPOSITE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    app_version: str = "0.1.0"
    default_timeout: str = "30m"
    default_interval: str = "30s"
    default_api_url: str = "https://api.github.com"
    http_timeout_seconds: float = 30.0
    compare_page_size: int = 100
    log_level: str = "INFO"
    log_json: bool = True


settings = Settings()
