"""Result rendering - turns generated image bytes into display entries."""
import base64
import re
from typing import Union

from config import Config
from common.models import RenderedImage


def label_to_filename(label: str) -> str:
    """'Shorts Cover' -> 'shorts-cover.png'. Each whitespace character or slash becomes a hyphen."""
    slug = re.sub(r"[\s/]", "-", label).lower()
    return f"{slug}.png"


def to_data_uri(image_bytes: Union[bytes, str], mime_type: str = None) -> str:
    """Build an embeddable data URI. Strings are taken to be base64 already."""
    mime_type = mime_type or Config.IMAGE_MIME_TYPE
    if isinstance(image_bytes, str):
        encoded = image_bytes
    else:
        encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def render_image(image_bytes: Union[bytes, str], label: str, index: int) -> RenderedImage:
    """Pair an image with its label and a same-encoding download link."""
    uri = to_data_uri(image_bytes)
    return RenderedImage(
        index=index,
        label=label,
        image_src=uri,
        download_href=uri,
        download_filename=label_to_filename(label),
        delay_ms=index * Config.RESULT_STAGGER_MS,
    )
