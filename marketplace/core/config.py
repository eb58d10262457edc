# marketplace/core/config.py
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # "memory" keeps everything in process; "sql" persists through SQLAlchemy
    STORAGE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite:///./marketplace.db"

    SECRET_KEY: str = "replace-this-with-a-real-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    CLOUDINARY_URL: str | None = None
    UPLOAD_FOLDER: str = "marketplace"

    # Applied to every vendor created through onboarding
    ONBOARDING_VENDOR_RATING: float = 4.8
    ONBOARDING_DELIVERY_TIME: str = "15-20 min"

    class Config:
        env_file = ".env"


settings = Settings()
