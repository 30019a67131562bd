"""Visual brief and storyboard module."""
from brief.services import (
    VISUAL_BRIEF_INSTRUCTION,
    STORYBOARD_INSTRUCTION,
    build_brief_prompt,
    generate_visual_brief,
    split_story_cuts,
    generate_story_cuts
)

__all__ = [
    "VISUAL_BRIEF_INSTRUCTION",
    "STORYBOARD_INSTRUCTION",
    "build_brief_prompt",
    "generate_visual_brief",
    "split_story_cuts",
    "generate_story_cuts"
]
