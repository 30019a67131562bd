"""Image generation services - Imagen fan-out."""
import asyncio
from typing import List, Optional, Tuple

from google import genai
from google.genai import types

from config import Config
from common.models import AspectRatio, ImageRequestSpec, RenderedImage
from image.render import render_image
from utils.logger import get_logger

logger = get_logger("image.services")


# Series pack formats, in display order
SERIES_FORMATS: List[Tuple[AspectRatio, str]] = [
    (AspectRatio.SQUARE, "Album Cover"),
    (AspectRatio.WIDE, "Thumbnail"),
    (AspectRatio.TALL, "Shorts Cover"),
]


def build_series_specs(brief: str, negative: str, seed: Optional[int] = None) -> List[ImageRequestSpec]:
    """One spec per series format, all sharing the same prompt."""
    final_prompt = f"{brief}, {negative}"
    return [
        ImageRequestSpec(aspect_ratio=ratio, label=label, seed=seed, final_prompt=final_prompt)
        for ratio, label in SERIES_FORMATS
    ]


def build_story_specs(
    brief: str,
    cuts: List[str],
    negative: str,
    aspect_ratio: AspectRatio,
    seed: Optional[int] = None
) -> List[ImageRequestSpec]:
    """One spec per story cut, labelled Frame 1..N."""
    return [
        ImageRequestSpec(
            aspect_ratio=aspect_ratio,
            label=f"Frame {i}",
            seed=seed,
            final_prompt=f"{brief}. Scene: {cut}. {negative}",
        )
        for i, cut in enumerate(cuts, start=1)
    ]


def build_image_config(spec: ImageRequestSpec) -> types.GenerateImagesConfig:
    """Imagen request config. The seed is only sent when one was given."""
    params = {
        "number_of_images": 1,
        "output_mime_type": Config.IMAGE_MIME_TYPE,
        "aspect_ratio": spec.aspect_ratio.value,
    }
    if spec.seed is not None:
        params["seed"] = spec.seed
    return types.GenerateImagesConfig(**params)


async def request_image(client: genai.Client, spec: ImageRequestSpec) -> types.GenerateImagesResponse:
    logger.debug(f"Dispatching image request '{spec.label}' ({spec.aspect_ratio.value})")
    return await client.aio.models.generate_images(
        model=Config.IMAGE_MODEL,
        prompt=spec.final_prompt,
        config=build_image_config(spec),
    )


def first_image_bytes(response: types.GenerateImagesResponse) -> Optional[bytes]:
    """Bytes of the first generated image, or None when the response has none."""
    generated = getattr(response, "generated_images", None)
    if not generated:
        return None
    image = getattr(generated[0], "image", None)
    return getattr(image, "image_bytes", None) if image else None


async def generate_image_batch(client: genai.Client, specs: List[ImageRequestSpec]) -> List[RenderedImage]:
    """
    Generate one image per spec concurrently and render them in input order.

    All requests are dispatched at once and joined as a unit: if any of them
    raises, the exception propagates and nothing is rendered. A request that
    succeeds without returning an image is skipped with a warning.

    Args:
        client: Gemini client
        specs: Image requests for this batch

    Returns:
        Rendered entries for every item that produced an image
    """
    logger.info(f"Generating batch of {len(specs)} image(s) with {Config.IMAGE_MODEL}")
    responses = await asyncio.gather(*(request_image(client, spec) for spec in specs))

    rendered = []
    for index, (spec, response) in enumerate(zip(specs, responses)):
        image_bytes = first_image_bytes(response)
        if not image_bytes:
            logger.warning(f"No image generated for {spec.label}")
            continue
        rendered.append(render_image(image_bytes, spec.label, index))

    logger.info(f"Batch complete: {len(rendered)}/{len(specs)} image(s) rendered")
    return rendered
