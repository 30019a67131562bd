"""Text generation services - visual brief and storyboard prompts."""
from typing import List

from google import genai
from google.genai import types

from config import Config
from common.exceptions import StoryExpansionError
from common.models import GenerationInputs
from utils.logger import get_logger

logger = get_logger("brief.services")


VISUAL_BRIEF_INSTRUCTION = """You are a creative director for consistent brand visuals.
TASK: Normalize the scene description into one concise English visual brief that preserves the brand/character consistency and palette.
OUTPUT (one paragraph, ≤ 40 words):
- Keep character’s facial features & hairstyle consistent.
- Reference the palette subtly.
- Include ambiance & composition hints (foreground/background, lighting).
- Avoid camera jargon unless critical."""

STORYBOARD_INSTRUCTION = (
    "You are a storyboard writer. Given a theme, create a 6-part story. "
    "Each part should be a concise, visual scene description suitable for an image generation prompt. "
    "Output each of the 6 parts on a new line. Do not use numbering or bullet points."
)


def build_brief_prompt(inputs: GenerationInputs) -> str:
    """Interpolate the form fields into the brief template."""
    return (
        "\n"
        f"- Brand: {inputs.brand}\n"
        f"- Character: {inputs.character_description}\n"
        f"- Palette HEX: {inputs.palette_hex}\n"
        f"- Season: {inputs.season or 'any'}\n"
        f"- Scene: {inputs.scene_description}\n"
        f"- Titles: KO={inputs.title_localized or ''}, EN={inputs.title_default or ''}\n"
    )


async def generate_visual_brief(client: genai.Client, inputs: GenerationInputs) -> str:
    """
    Normalize the form fields into a short English visual brief.

    Issues exactly one text-generation call. The response text is returned as
    is (no trimming or length check); errors from the client propagate.

    Args:
        client: Gemini client
        inputs: Form fields for this submission

    Returns:
        The raw brief text ("" when the response carries no text)
    """
    user_prompt = build_brief_prompt(inputs)
    logger.info(f"Requesting visual brief from {Config.TEXT_MODEL} for brand '{inputs.brand}'")
    logger.debug(f"Brief prompt: {user_prompt!r}")

    response = await client.aio.models.generate_content(
        model=Config.TEXT_MODEL,
        contents=user_prompt,
        config=types.GenerateContentConfig(system_instruction=VISUAL_BRIEF_INSTRUCTION),
    )
    brief = response.text or ""
    logger.info(f"Visual brief received ({len(brief)} chars)")
    return brief


def split_story_cuts(text: str) -> List[str]:
    """Split storyboard text into non-blank lines, keeping each line as written."""
    return [line for line in (text or "").split("\n") if line.strip() != ""]


async def generate_story_cuts(client: genai.Client, theme: str) -> List[str]:
    """
    Expand a theme into storyboard scene lines.

    Raises:
        StoryExpansionError: if the response has no non-blank lines
    """
    logger.info(f"Requesting storyboard for theme: {theme[:50]}...")
    response = await client.aio.models.generate_content(
        model=Config.TEXT_MODEL,
        contents=f"Theme: {theme}",
        config=types.GenerateContentConfig(system_instruction=STORYBOARD_INSTRUCTION),
    )
    cuts = split_story_cuts(response.text)
    if not cuts:
        raise StoryExpansionError()
    logger.info(f"Storyboard expanded into {len(cuts)} cut(s)")
    return cuts
