from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Engine limits
    max_amortization_months: int = 1200  # Safety ceiling, 100 years
    max_projection_years: int = 100

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


settings = Settings()
