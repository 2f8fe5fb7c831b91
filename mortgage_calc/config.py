from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_title: str = "Mortgage Calculator"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]


settings = Settings()
