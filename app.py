"""
FastAPI application for Scenora brand visual generation with Gemini AI.

Features:
- Series pack: one visual brief, three Imagen formats (album, thumbnail, shorts)
- Story frames: a theme expanded into storyboard cuts, one image per cut
- Request lifecycle snapshot for the front end
"""
import time
import json
from typing import Any

import uvicorn
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Config
from common.client import init_client
from common.error_messages import ErrorCode, get_error_response
from scenes.routes import router as scenes_router
from utils.logger import get_logger

logger = get_logger("main")

# Sensitive fields that should be masked in logs
SENSITIVE_FIELDS = {
    "api_key", "apikey", "token", "access_token", "secret", "authorization", "password"
}
MAX_LOGGED_BODY = 2000


def mask_sensitive_data(data: Any, mask_value: str = "***MASKED***") -> Any:
    """
    Recursively mask sensitive fields in data structures.

    Strings holding a JSON object or array are parsed, masked and re-serialized.
    """
    if isinstance(data, dict):
        return {
            key: mask_value if key.lower() in SENSITIVE_FIELDS else mask_sensitive_data(value, mask_value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive_data(item, mask_value) for item in data]
    if isinstance(data, str):
        try:
            parsed = json.loads(data)
        except (json.JSONDecodeError, ValueError):
            return data
        if isinstance(parsed, (dict, list)):
            return json.dumps(mask_sensitive_data(parsed, mask_value))
    return data


async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions globally."""
    if isinstance(exc, HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    message, status_code = get_error_response(ErrorCode.UNKNOWN_ERROR)
    return JSONResponse(status_code=status_code, content={"detail": message})


async def log_requests(request: Request, call_next):
    """Log each request with its (masked) body, status and timing."""
    start_time = time.time()
    log_msg = f"→ {request.method} {request.url.path} - Client: {request.client.host if request.client else 'unknown'}"

    if request.method in ("POST", "PUT", "PATCH"):
        body_bytes = await request.body()
        if body_bytes:
            masked_body = mask_sensitive_data(body_bytes.decode("utf-8", errors="replace"))
            if len(masked_body) > MAX_LOGGED_BODY:
                masked_body = masked_body[:MAX_LOGGED_BODY] + "... [truncated]"
            log_msg += f"\n  Request Body: {masked_body}"
    logger.info(log_msg)

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = (time.time() - start_time) * 1000
        logger.error(f"← {request.method} {request.url.path} - Error: {e} - Time: {process_time:.2f}ms")
        raise

    # Response bodies carry base64 images, so only status and timing are logged
    process_time = (time.time() - start_time) * 1000
    logger.info(f"← {request.method} {request.url.path} - Status: {response.status_code} - Time: {process_time:.2f}ms")
    return response


def health():
    """Health check endpoint."""
    logger.debug("Health check requested")
    return {"status": "ok"}


def create_app() -> FastAPI:
    """
    Build the application.

    Fails with ValueError before any route is wired when no API key is configured.
    """
    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        logger.error("Please set required environment variables in .env file")
        raise
    logger.info("Configuration validated successfully")

    init_client(Config.get_gemini_api_key())

    app = FastAPI(
        title="Scenora Visual Generation API",
        description="Brand-consistent series packs and story frames built on Gemini text and Imagen image generation.",
        version="1.0.0"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(scenes_router)
    logger.info("Scenes router included")

    app.add_api_route("/healthz", health, methods=["GET"])

    logger.info("=" * 80)
    logger.info(f"Scenora ready - text model: {Config.TEXT_MODEL}, image model: {Config.IMAGE_MODEL}")
    logger.info("=" * 80)
    return app


# Run server directly
if __name__ == "__main__":
    logger.info(f"Starting server on {Config.HOST}:{Config.PORT}")
    uvicorn.run(
        "app:create_app",
        factory=True,
        host=Config.HOST,
        port=Config.PORT,
        reload=True,
        log_level="info"
    )
