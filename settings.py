"""
Configuration settings for the Exam Portal API.
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings:
    """Application settings loaded from environment."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./exams.db")

    # Operator secret for the admin attempts listing
    ADMIN_KEY: str = os.getenv("ADMIN_KEY", "string-admin-2025")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 8000))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    CORS_ORIGINS: List[str] = _split_origins(os.getenv("CORS_ORIGINS", "*"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def validate(self):
        """Validate critical settings."""
        if not self.DATABASE_URL:
            raise ValueError("DATABASE_URL environment variable is empty")
        if not self.ADMIN_KEY:
            raise ValueError("ADMIN_KEY environment variable is empty")
        return True


# Global settings instance
settings = Settings()
