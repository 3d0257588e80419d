from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    GAMMA_EXPONENT: float = 2.2

    APP_ENV: str = "development"
    LOG_LEVEL: int = 0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "BMPCANVAS_",
    }


settings = Settings()
