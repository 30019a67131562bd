"""Shared pytest fixtures: a fake async Gemini client."""
import os
from types import SimpleNamespace
from typing import Callable, List, Optional

import pytest

os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")


def image_response(image_bytes: Optional[bytes]):
    """Shape of a GenerateImagesResponse; None means no image came back."""
    if image_bytes is None:
        return SimpleNamespace(generated_images=[])
    return SimpleNamespace(generated_images=[SimpleNamespace(image=SimpleNamespace(image_bytes=image_bytes))])


class FakeModels:
    """Records calls to client.aio.models and replays scripted responses."""

    def __init__(self, texts: List[str], image_handler: Optional[Callable] = None):
        self.texts = list(texts)
        self.image_handler = image_handler
        self.text_calls = []
        self.image_calls = []

    async def generate_content(self, model, contents, config=None):
        self.text_calls.append({"model": model, "contents": contents, "config": config})
        return SimpleNamespace(text=self.texts.pop(0))

    async def generate_images(self, model, prompt, config=None):
        index = len(self.image_calls)
        self.image_calls.append({"model": model, "prompt": prompt, "config": config})
        if self.image_handler is not None:
            return await self.image_handler(index, prompt, config)
        return image_response(f"image-{index}".encode())


class FakeClient:
    def __init__(self, texts: List[str], image_handler: Optional[Callable] = None):
        self.models = FakeModels(texts, image_handler)
        self.aio = SimpleNamespace(models=self.models)


@pytest.fixture
def make_client():
    """Factory: make_client(texts, image_handler=None) -> FakeClient."""
    return FakeClient


@pytest.fixture
def series_inputs():
    from common.models import GenerationInputs

    return GenerationInputs(
        brand="Luma",
        character_description="a fox with blue eyes",
        palette_hex="#112233",
        season="",
        scene_description="walking in rain",
        negative_prompt="no text, no watermark",
        seed=42,
    )


@pytest.fixture
def story_text():
    """Six storyboard lines with blank lines mixed in."""
    return "\n".join([
        "The keeper climbs the spiral stairs at dusk.",
        "",
        "He lights the great lamp as a storm gathers.",
        "A ship struggles against the waves.",
        "   ",
        "The beam cuts through the rain toward the ship.",
        "The ship reaches the harbor safely.",
        "At dawn the keeper waves from the gallery.",
    ])
