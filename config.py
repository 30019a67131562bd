"""
Configuration module - loads all settings from environment variables.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
try:
    load_dotenv()
except Exception as e:
    print(f"Warning: Failed to load .env file: {e}")
    print("Continuing with environment variables or defaults...")


class Config:
    """Application configuration loaded from environment variables."""

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Safely parse integer environment variable."""
        try:
            return int(os.getenv(key, str(default)))
        except (ValueError, TypeError) as e:
            print(f"Warning: Invalid integer for {key}, using default {default}: {e}")
            return default

    @staticmethod
    def _get_list(key: str, default: str) -> List[str]:
        """Parse a comma separated environment variable."""
        raw = os.getenv(key, default)
        return [item.strip() for item in raw.split(",") if item.strip()]

    # Gemini API (API_KEY is accepted for deployments that only expose that name)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "") or os.getenv("API_KEY", "")
    TEXT_MODEL: str = os.getenv("TEXT_MODEL", "gemini-2.5-flash")
    IMAGE_MODEL: str = os.getenv("IMAGE_MODEL", "imagen-4.0-generate-001")
    IMAGE_MIME_TYPE: str = os.getenv("IMAGE_MIME_TYPE", "image/png")

    # Rendering
    RESULT_STAGGER_MS: int = _get_int.__func__("RESULT_STAGGER_MS", 100)

    # Server
    CORS_ORIGINS: List[str] = _get_list.__func__("CORS_ORIGINS", "*")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_int.__func__("PORT", 8000)

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        if not cls.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY (or API_KEY) environment variable is required")

    @classmethod
    def get_gemini_api_key(cls) -> str:
        """Get GEMINI_API_KEY, raise error if not set."""
        if not cls.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY must be set in environment variables")
        return cls.GEMINI_API_KEY
