"""Image generation module."""
from image.render import label_to_filename, to_data_uri, render_image
from image.services import (
    SERIES_FORMATS,
    build_series_specs,
    build_story_specs,
    build_image_config,
    generate_image_batch
)

__all__ = [
    "label_to_filename",
    "to_data_uri",
    "render_image",
    "SERIES_FORMATS",
    "build_series_specs",
    "build_story_specs",
    "build_image_config",
    "generate_image_batch"
]
