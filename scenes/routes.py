"""Series pack and story frames routes."""
from typing import Awaitable, Callable, List

from fastapi import APIRouter, HTTPException, Depends
from google import genai

from common.client import get_genai_client
from common.error_messages import ErrorCode, get_error_response
from common.exceptions import GenerationBusyError, MissingInputError
from common.lifecycle import RequestLifecycle, LifecycleSnapshot, get_lifecycle
from common.models import RenderedImage, parse_seed
from scenes.models import SeriesPackRequest, StoryFramesRequest, GenerationResponse
from scenes.services import run_series_pack, run_story_frames
from utils.logger import get_logger

logger = get_logger("scenes")
router = APIRouter(tags=["scenes"])


async def _run_flow(
    flow: str,
    lifecycle: RequestLifecycle,
    failure_code: ErrorCode,
    run: Callable[[], Awaitable[List[RenderedImage]]]
) -> GenerationResponse:
    """
    Drive one flow through the lifecycle.

    Missing inputs surface their own message; every other failure is logged
    with detail and reported with the flow's single generic message. A
    cancelled flow also returns the lifecycle to Idle before propagating.
    """
    try:
        lifecycle.begin(flow)
    except GenerationBusyError as e:
        message, status_code = get_error_response(e.error_code)
        raise HTTPException(status_code=status_code, detail=message)

    try:
        results = await run()
    except MissingInputError as e:
        message, status_code = get_error_response(e.error_code)
        lifecycle.fail(message)
        raise HTTPException(status_code=status_code, detail=message)
    except Exception as e:
        logger.error(f"Error generating {flow}: {e}", exc_info=True)
        message, status_code = get_error_response(failure_code)
        lifecycle.fail(message)
        raise HTTPException(status_code=status_code, detail=message)
    except BaseException:
        # Cancellation (client disconnect, shutdown) must still leave Loading
        logger.warning(f"Flow '{flow}' was interrupted before completing")
        message, _ = get_error_response(failure_code)
        lifecycle.fail(message)
        raise

    lifecycle.succeed(results)
    return GenerationResponse(flow=flow, results=results)


@router.post("/api/series-pack", response_model=GenerationResponse)
async def generate_series_pack(
    req: SeriesPackRequest,
    client: genai.Client = Depends(get_genai_client),
    lifecycle: RequestLifecycle = Depends(get_lifecycle)
):
    """
    Generate the album cover, thumbnail and shorts cover for one scene.

    Accepts:
      { brand, character, palette, season?, scene, title_ko?, title_en?, negative_prompt, seed? }
    """
    inputs = req.to_inputs()
    logger.info(f"Series pack request for brand '{inputs.brand}' (seed={inputs.seed})")
    return await _run_flow(
        "series",
        lifecycle,
        ErrorCode.SERIES_PACK_FAILED,
        lambda: run_series_pack(client, inputs),
    )


@router.post("/api/story-frames", response_model=GenerationResponse)
async def generate_story_frames(
    req: StoryFramesRequest,
    client: genai.Client = Depends(get_genai_client),
    lifecycle: RequestLifecycle = Depends(get_lifecycle)
):
    """
    Expand a theme into storyboard frames and render one image per frame.

    Accepts:
      { theme, aspect_ratio?: "16:9" | "9:16", character, brand?, palette?, negative_prompt?, seed? }
    """
    seed = parse_seed(req.seed)
    logger.info(f"Story frames request: theme={req.theme[:50]!r}, aspect_ratio={req.aspect_ratio.value}")
    return await _run_flow(
        "story",
        lifecycle,
        ErrorCode.STORY_FRAMES_FAILED,
        lambda: run_story_frames(
            client,
            theme=req.theme,
            character=req.character,
            aspect_ratio=req.aspect_ratio,
            brand=req.brand,
            palette=req.palette,
            negative_prompt=req.negative_prompt,
            seed=seed,
        ),
    )


@router.get("/api/state", response_model=LifecycleSnapshot)
def get_state(lifecycle: RequestLifecycle = Depends(get_lifecycle)):
    """What the front end currently shows: loader, results or the error message."""
    return lifecycle.snapshot()
