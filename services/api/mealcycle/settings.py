from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Meal Cycle Measurements API"
    version: str = "0.1.0"

    # Routing
    api_prefix: str = "/api"

    # Logging
    log_level: str = "INFO"

    # Per-IP rate limit (slowapi syntax)
    rate_limit: str = "100/minute"
    rate_limit_enabled: bool = True

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]


settings = Settings()
