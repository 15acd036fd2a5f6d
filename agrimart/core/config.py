from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "AgriMart API"
    DATABASE_URL: str = "sqlite:///./agrimart.db"

    # Anonymous cart identity
    SESSION_COOKIE_NAME: str = "agrimart_session_id"
    SESSION_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 365 # 1 year

    # Display
    CURRENCY_SYMBOL: str = "₹"

    # Largest quantity a single cart request may carry
    MAX_CART_QUANTITY: int = 9999

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
