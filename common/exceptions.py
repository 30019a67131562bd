"""Exceptions raised by the generation flows."""
from common.error_messages import ErrorCode, ERROR_MESSAGES


class ScenoraError(Exception):
    """Base error carrying the ErrorCode used to build the user-facing response."""

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str = None, error_code: ErrorCode = None):
        if error_code is not None:
            self.error_code = error_code
        super().__init__(message or ERROR_MESSAGES[self.error_code])


class MissingInputError(ScenoraError):
    """A required form field was left blank. Raised before any network call."""


class StoryExpansionError(ScenoraError):
    """The storyboard call returned no usable lines."""

    error_code = ErrorCode.NO_STORY_CUTS


class GenerationBusyError(ScenoraError):
    """A flow was submitted while another one is still loading."""

    error_code = ErrorCode.GENERATION_IN_PROGRESS
