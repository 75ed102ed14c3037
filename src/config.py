from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "HyderTrack Metro Journey Planner"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]  # React dev servers

    # Network
    HOP_MINUTES: float = 2.5  # per adjacent-station ride including dwell

    # Fares
    FARE_CURRENCY: str = "INR"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
