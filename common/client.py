"""Process-wide Gemini client handle."""
from typing import Optional

from google import genai

from config import Config
from utils.logger import get_logger

logger = get_logger("client")

_client: Optional[genai.Client] = None


def init_client(api_key: Optional[str] = None) -> genai.Client:
    """Create the shared client. Raises ValueError when no API key is configured."""
    global _client
    key = api_key or Config.get_gemini_api_key()
    _client = genai.Client(api_key=key)
    logger.info("Gemini client initialized")
    return _client


def get_genai_client() -> genai.Client:
    """FastAPI dependency returning the shared client."""
    if _client is None:
        raise RuntimeError("Gemini client has not been initialized")
    return _client
