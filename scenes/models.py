"""Request and response models for the series pack and story frames flows."""
from typing import Optional, List, Union
from pydantic import BaseModel, Field, field_validator

from common.models import AspectRatio, GenerationInputs, RenderedImage, parse_seed


class SeriesPackRequest(BaseModel):
    """Series pack form fields."""
    brand: str = ""
    character: str = Field("", description="Character description")
    palette: str = Field("", description="Palette HEX string")
    season: Optional[str] = None
    scene: str = ""
    title_ko: Optional[str] = None
    title_en: Optional[str] = None
    negative_prompt: str = ""
    seed: Optional[Union[int, str]] = Field(None, description="Optional integer seed; non-integers are ignored")

    def to_inputs(self) -> GenerationInputs:
        return GenerationInputs(
            brand=self.brand,
            character_description=self.character,
            palette_hex=self.palette,
            season=self.season,
            scene_description=self.scene,
            title_localized=self.title_ko,
            title_default=self.title_en,
            negative_prompt=self.negative_prompt,
            seed=parse_seed(self.seed),
        )


class StoryFramesRequest(BaseModel):
    """Story frames form fields. The character comes from the series pack form."""
    theme: str = ""
    aspect_ratio: AspectRatio = AspectRatio.WIDE
    character: str = ""
    brand: str = ""
    palette: str = ""
    negative_prompt: str = ""
    seed: Optional[Union[int, str]] = None

    @field_validator("aspect_ratio")
    @classmethod
    def _story_ratio(cls, value: AspectRatio) -> AspectRatio:
        if value == AspectRatio.SQUARE:
            raise ValueError("story frames support 16:9 or 9:16 only")
        return value


class GenerationResponse(BaseModel):
    """Rendered results of one flow, in input order."""
    flow: str
    results: List[RenderedImage] = Field(default_factory=list)
