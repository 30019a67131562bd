"""API tests for the generation routes, using FastAPI's TestClient."""
import asyncio

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from app import create_app
from common.client import get_genai_client
from common.error_messages import ERROR_MESSAGES, ErrorCode
from common.lifecycle import RequestLifecycle, get_lifecycle
from conftest import image_response
from scenes.routes import _run_flow

SERIES_BODY = {
    "brand": "Luma",
    "character": "a fox with blue eyes",
    "palette": "#112233",
    "season": "",
    "scene": "walking in rain",
    "negative_prompt": "no text, no watermark",
    "seed": "42",
}


@pytest.fixture
def lifecycle():
    return RequestLifecycle()


@pytest.fixture
def api(lifecycle):
    """Returns a function building a TestClient bound to the given fake Gemini client."""
    app = create_app()
    app.dependency_overrides[get_lifecycle] = lambda: lifecycle

    def bind(fake_client):
        app.dependency_overrides[get_genai_client] = lambda: fake_client
        return TestClient(app)

    return bind


def test_healthz(api, make_client):
    response = api(make_client([])).get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_series_pack(api, make_client, lifecycle):
    fake = make_client(["A fox in teal rain"])

    response = api(fake).post("/api/series-pack", json=SERIES_BODY)

    assert response.status_code == 200
    body = response.json()
    assert body["flow"] == "series"
    assert [r["label"] for r in body["results"]] == ["Album Cover", "Thumbnail", "Shorts Cover"]
    assert [r["download_filename"] for r in body["results"]] == ["album-cover.png", "thumbnail.png", "shorts-cover.png"]
    assert body["results"][0]["image_src"].startswith("data:image/png;base64,")
    assert all(c["config"].seed == 42 for c in fake.models.image_calls)

    view = lifecycle.snapshot()
    assert view.results_visible is True
    assert view.error_visible is False
    assert len(view.results) == 3


def test_series_pack_ignores_non_numeric_seed(api, make_client):
    fake = make_client(["brief"])

    response = api(fake).post("/api/series-pack", json={**SERIES_BODY, "seed": "abc"})

    assert response.status_code == 200
    assert all(c["config"].seed is None for c in fake.models.image_calls)


def test_series_pack_failure_is_generic(api, make_client, lifecycle):
    async def handler(index, prompt, config):
        raise RuntimeError("upstream 500: internal detail")

    response = api(make_client(["brief"], image_handler=handler)).post("/api/series-pack", json=SERIES_BODY)

    assert response.status_code == 502
    detail = response.json()["detail"]
    assert detail == ERROR_MESSAGES[ErrorCode.SERIES_PACK_FAILED]
    assert "internal detail" not in detail

    view = lifecycle.snapshot()
    assert view.error_message == detail
    assert view.results_visible is False
    assert view.results == []
    assert view.submit_enabled is True


def test_story_frames(api, make_client, story_text):
    fake = make_client([story_text, "brief"])

    response = api(fake).post("/api/story-frames", json={
        "theme": "a lonely lighthouse keeper",
        "aspect_ratio": "9:16",
        "character": "an old keeper",
    })

    assert response.status_code == 200
    assert [r["label"] for r in response.json()["results"]] == [f"Frame {i}" for i in range(1, 7)]
    assert len(fake.models.image_calls) == 6


def test_story_frames_missing_theme(api, make_client, lifecycle):
    fake = make_client([])

    response = api(fake).post("/api/story-frames", json={"theme": "", "character": "a fox"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a story theme."
    assert fake.models.text_calls == []
    assert lifecycle.snapshot().error_message == "Please enter a story theme."


def test_story_frames_missing_character(api, make_client):
    response = api(make_client([])).post("/api/story-frames", json={"theme": "storm"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a Character Description in the Series Pack tab."


def test_story_frames_empty_expansion(api, make_client):
    fake = make_client(["\n\n"])

    response = api(fake).post("/api/story-frames", json={"theme": "storm", "character": "a fox"})

    assert response.status_code == 502
    assert response.json()["detail"] == ERROR_MESSAGES[ErrorCode.STORY_FRAMES_FAILED]
    assert fake.models.image_calls == []


def test_story_frames_rejects_square_ratio(api, make_client):
    response = api(make_client([])).post(
        "/api/story-frames", json={"theme": "storm", "character": "a fox", "aspect_ratio": "1:1"}
    )
    assert response.status_code == 422


def test_submission_rejected_while_loading(api, make_client, lifecycle):
    fake = make_client(["brief"])
    lifecycle.begin("story")

    client = api(fake)
    series = client.post("/api/series-pack", json=SERIES_BODY)
    story = client.post("/api/story-frames", json={"theme": "storm", "character": "a fox"})

    assert series.status_code == 409
    assert story.status_code == 409
    assert fake.models.text_calls == []
    assert lifecycle.snapshot().flow == "story"


def test_state_endpoint(api, make_client):
    async def handler(index, prompt, config):
        return image_response(None if index == 0 else b"png")

    client = api(make_client(["brief"], image_handler=handler))
    client.post("/api/series-pack", json=SERIES_BODY)

    state = client.get("/api/state").json()
    assert state["state"] == "idle"
    assert state["outcome"] == "success"
    assert state["submit_enabled"] is True
    assert [r["label"] for r in state["results"]] == ["Thumbnail", "Shorts Cover"]


def test_cancelled_flow_returns_lifecycle_to_idle(lifecycle):
    async def cancelled():
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(_run_flow("series", lifecycle, ErrorCode.SERIES_PACK_FAILED, cancelled))

    view = lifecycle.snapshot()
    assert lifecycle.is_loading is False
    assert view.submit_enabled is True
    assert view.error_message == ERROR_MESSAGES[ErrorCode.SERIES_PACK_FAILED]
    assert view.results_visible is False


def test_next_flow_runs_after_a_cancelled_one(lifecycle):
    async def cancelled():
        raise asyncio.CancelledError()

    async def finished():
        return []

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(_run_flow("series", lifecycle, ErrorCode.SERIES_PACK_FAILED, cancelled))

    response = asyncio.run(_run_flow("story", lifecycle, ErrorCode.STORY_FRAMES_FAILED, finished))

    assert response.flow == "story"
    assert lifecycle.snapshot().error_visible is False


def test_generic_failure_still_raises_http_error(lifecycle):
    async def broken():
        raise RuntimeError("boom")

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(_run_flow("story", lifecycle, ErrorCode.STORY_FRAMES_FAILED, broken))

    assert exc_info.value.status_code == 502
    assert lifecycle.is_loading is False
