"""Series pack and story frames module."""
from scenes.models import SeriesPackRequest, StoryFramesRequest, GenerationResponse
from scenes.services import run_series_pack, run_story_frames, validate_story_inputs

__all__ = [
    "SeriesPackRequest",
    "StoryFramesRequest",
    "GenerationResponse",
    "run_series_pack",
    "run_story_frames",
    "validate_story_inputs"
]
