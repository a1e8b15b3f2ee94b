from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./pipe_quotes.db"
    APP_NAME: str = "Pipe & Bend Quoting Engine"
    LOG_LEVEL: str = "INFO"

    # Reference data: seed the bundled tables into an empty database on startup
    SEED_REFERENCE_DATA: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
