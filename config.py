from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Support Desk API"
    debug: bool = False
    log_level: str = "INFO"

    # In-memory by default: records live as long as the process
    database_url: str = "sqlite+aiosqlite:///:memory:"
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    seed_sample_data: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
