"""
Request lifecycle for the generation flows.

Tracks what the front end shows: whether the submit actions are enabled, the
loader, the results grid and the single error message. Only one flow runs at
a time; begin() is a synchronous check-and-set on the event loop, so two
submissions can never both enter Loading.
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from common.exceptions import GenerationBusyError
from common.models import RenderedImage
from utils.logger import get_logger

logger = get_logger("lifecycle")


class LifecycleState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"


class LifecycleOutcome(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class LifecycleSnapshot(BaseModel):
    """Current view of the UI."""
    state: LifecycleState
    outcome: Optional[LifecycleOutcome] = None
    flow: Optional[str] = Field(None, description="Flow that last entered Loading")
    submit_enabled: bool = True
    loader_visible: bool = False
    results_visible: bool = True
    error_visible: bool = False
    error_message: Optional[str] = None
    results: List[RenderedImage] = Field(default_factory=list)


class RequestLifecycle:
    """Idle -> Loading -> (Success | Error) -> Idle."""

    def __init__(self):
        self.state = LifecycleState.IDLE
        self.outcome: Optional[LifecycleOutcome] = None
        self.flow: Optional[str] = None
        self.results: List[RenderedImage] = []
        self.results_visible = True
        self.error_message: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.state == LifecycleState.LOADING

    def begin(self, flow: str) -> None:
        """Enter Loading. Raises GenerationBusyError while another flow is in flight."""
        if self.is_loading:
            logger.warning(f"Rejected '{flow}' submission: '{self.flow}' is still loading")
            raise GenerationBusyError()
        self.state = LifecycleState.LOADING
        self.outcome = None
        self.flow = flow
        self.results = []
        self.results_visible = False
        self.error_message = None
        logger.info(f"Flow '{flow}' started")

    def succeed(self, results: List[RenderedImage]) -> None:
        self.state = LifecycleState.IDLE
        self.outcome = LifecycleOutcome.SUCCESS
        self.results = list(results)
        self.results_visible = True
        self.error_message = None
        logger.info(f"Flow '{self.flow}' finished with {len(self.results)} result(s)")

    def fail(self, message: str) -> None:
        """Back to Idle showing one message; prior results are discarded."""
        self.state = LifecycleState.IDLE
        self.outcome = LifecycleOutcome.ERROR
        self.results = []
        self.results_visible = False
        self.error_message = message
        logger.info(f"Flow '{self.flow}' failed: {message}")

    def snapshot(self) -> LifecycleSnapshot:
        loading = self.is_loading
        return LifecycleSnapshot(
            state=self.state,
            outcome=self.outcome,
            flow=self.flow,
            submit_enabled=not loading,
            loader_visible=loading,
            results_visible=self.results_visible,
            error_visible=self.error_message is not None,
            error_message=self.error_message,
            results=self.results,
        )


lifecycle = RequestLifecycle()


def get_lifecycle() -> RequestLifecycle:
    """FastAPI dependency returning the shared lifecycle."""
    return lifecycle
