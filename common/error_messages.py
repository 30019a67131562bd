"""
User-friendly error messages and status codes.

Every failure a flow can surface maps to one ErrorCode. The message is what
the end user sees; technical detail only ever goes to the log.
"""
from typing import Tuple
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for different types of failures."""

    # Validation Errors (400)
    MISSING_STORY_THEME = "MISSING_STORY_THEME"
    MISSING_CHARACTER = "MISSING_CHARACTER"

    # Lifecycle Errors (409)
    GENERATION_IN_PROGRESS = "GENERATION_IN_PROGRESS"

    # Generation Errors (502)
    SERIES_PACK_FAILED = "SERIES_PACK_FAILED"
    STORY_FRAMES_FAILED = "STORY_FRAMES_FAILED"
    NO_STORY_CUTS = "NO_STORY_CUTS"

    # Generic Errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


ERROR_MESSAGES = {
    ErrorCode.MISSING_STORY_THEME: "Please enter a story theme.",
    ErrorCode.MISSING_CHARACTER: "Please enter a Character Description in the Series Pack tab.",

    ErrorCode.GENERATION_IN_PROGRESS: "A generation is already running. Please wait for it to finish.",

    ErrorCode.SERIES_PACK_FAILED: "Failed to generate the visual pack. Please check the server logs for details.",
    ErrorCode.STORY_FRAMES_FAILED: "Failed to generate story frames. Please check the server logs for details.",
    ErrorCode.NO_STORY_CUTS: "AI failed to generate story cuts from the theme.",

    ErrorCode.UNKNOWN_ERROR: "Something unexpected happened. Please try again.",
}


ERROR_STATUS_CODES = {
    ErrorCode.MISSING_STORY_THEME: 400,
    ErrorCode.MISSING_CHARACTER: 400,

    ErrorCode.GENERATION_IN_PROGRESS: 409,

    ErrorCode.SERIES_PACK_FAILED: 502,
    ErrorCode.STORY_FRAMES_FAILED: 502,
    ErrorCode.NO_STORY_CUTS: 502,

    ErrorCode.UNKNOWN_ERROR: 500,
}


def get_error_response(error_code: ErrorCode) -> Tuple[str, int]:
    """
    Get user-friendly error message and HTTP status code.

    Args:
        error_code: The error code enum

    Returns:
        Tuple of (error_message, status_code)
    """
    message = ERROR_MESSAGES.get(error_code, ERROR_MESSAGES[ErrorCode.UNKNOWN_ERROR])
    status_code = ERROR_STATUS_CODES.get(error_code, 500)

    return message, status_code
