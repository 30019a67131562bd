"""
Series pack and story frames orchestration.

Both flows share the same shape: one text call to normalize the form into a
visual brief, then a single concurrent batch of image calls built from that
brief. The story flow first expands its theme into storyboard cuts.
"""
from typing import List, Optional

from google import genai

from brief.services import generate_visual_brief, generate_story_cuts
from common.error_messages import ErrorCode
from common.exceptions import MissingInputError
from common.models import AspectRatio, GenerationInputs, RenderedImage
from image.services import build_series_specs, build_story_specs, generate_image_batch
from utils.logger import get_logger

logger = get_logger("scenes.services")


async def run_series_pack(client: genai.Client, inputs: GenerationInputs) -> List[RenderedImage]:
    """Brief once, then one image per series format (album, thumbnail, shorts)."""
    brief = await generate_visual_brief(client, inputs)
    specs = build_series_specs(brief, inputs.negative_prompt, inputs.seed)
    return await generate_image_batch(client, specs)


def validate_story_inputs(theme: str, character: str) -> None:
    """Raise MissingInputError for a blank theme or character."""
    if not theme or not theme.strip():
        raise MissingInputError(error_code=ErrorCode.MISSING_STORY_THEME)
    if not character or not character.strip():
        raise MissingInputError(error_code=ErrorCode.MISSING_CHARACTER)


async def run_story_frames(
    client: genai.Client,
    theme: str,
    character: str,
    aspect_ratio: AspectRatio = AspectRatio.WIDE,
    brand: str = "",
    palette: str = "",
    negative_prompt: str = "",
    seed: Optional[int] = None
) -> List[RenderedImage]:
    """
    Expand the theme into cuts, brief once, then one image per cut.

    Raises:
        MissingInputError: theme or character is blank (no network call made)
        StoryExpansionError: the storyboard came back empty (no image call made)
    """
    validate_story_inputs(theme, character)

    cuts = await generate_story_cuts(client, theme)

    inputs = GenerationInputs(
        brand=brand,
        character_description=character,
        palette_hex=palette,
        scene_description=f"A story sequence in {len(cuts)} parts based on the theme: {theme}",
        negative_prompt=negative_prompt,
        seed=seed,
    )
    brief = await generate_visual_brief(client, inputs)

    specs = build_story_specs(brief, cuts, negative_prompt, aspect_ratio, seed)
    return await generate_image_batch(client, specs)
