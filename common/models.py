"""Shared generation models."""
import re
from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field

from utils.logger import get_logger

logger = get_logger("models")

_LEADING_INT = re.compile(r"[+-]?\d+")


class AspectRatio(str, Enum):
    """Aspect ratios supported by the image endpoint."""
    SQUARE = "1:1"
    WIDE = "16:9"
    TALL = "9:16"


def parse_seed(value: Any) -> Optional[int]:
    """
    Parse a seed form value.

    Blank values mean "no seed". Like a base-10 parseInt, the leading integer
    is kept ("42abc" -> 42, "4.5" -> 4); text with no leading digits is
    dropped with a warning instead of failing the request.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    match = _LEADING_INT.match(text)
    if match is None:
        logger.warning(f"Ignoring non-integer seed value: {text!r}")
        return None
    return int(match.group(0), 10)


class GenerationInputs(BaseModel):
    """Fields fed to the visual brief normalizer. Built fresh per submission."""
    brand: str = Field("", description="Brand name")
    character_description: str = Field("", description="Recurring character description")
    palette_hex: str = Field("", description="Palette as HEX codes")
    season: Optional[str] = Field(None, description="Season hint")
    scene_description: str = Field("", description="Free-form scene description")
    title_localized: Optional[str] = Field(None, description="Localized (KO) title")
    title_default: Optional[str] = Field(None, description="Default (EN) title")
    negative_prompt: str = Field("", description="Negative prompt appended to every image prompt")
    seed: Optional[int] = Field(None, description="Shared image seed")


class ImageRequestSpec(BaseModel):
    """One image request in a batch."""
    aspect_ratio: AspectRatio
    label: str
    seed: Optional[int] = None
    final_prompt: str


class RenderedImage(BaseModel):
    """A display entry for one generated image."""
    index: int = Field(..., description="Position of the item in its batch")
    label: str
    image_src: str = Field(..., description="Embeddable data URI")
    download_href: str = Field(..., description="Same data URI, offered for download")
    download_filename: str = Field(..., description="Suggested filename derived from the label")
    delay_ms: int = Field(0, description="Presentation stagger")
