"""Generation session for interactive front ends.

A session owns one in-progress flag, so a front end can forward every user
action here without tracking generation state itself. Requests and
responses are typed messages with a closed set of tags:

Requests:
- generate: Generate a message for the diff from the session's diff provider
- generate-from-diff: Generate a message for diff text sent with the request
- load-diff: Fetch the diff from the diff provider for display

Responses:
- message-ready: Carries a CommitMessageResult
- diff-ready: Carries a DiffSource plus its rendered rows
- error: Carries a user-facing error message
"""

import logging
import threading
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict

from commitflow.diff import DisplayRow, RenderOptions, parse_diff, render_hunks
from commitflow.exceptions import CommitFlowError, GenerationInProgressError
from commitflow.llm import BaseModelRunner, LLMError
from commitflow.message import (
    CommitMessageResult,
    DiffSource,
    generate_commit_message,
    generate_commit_message_from_diff,
)

logger = logging.getLogger(__name__)

DiffProvider = Callable[[], DiffSource]


class RequestType(str, Enum):
    """Request tags accepted by a session."""

    GENERATE = "generate"
    GENERATE_FROM_DIFF = "generate-from-diff"
    LOAD_DIFF = "load-diff"


class ResponseType(str, Enum):
    """Response tags produced by a session."""

    MESSAGE_READY = "message-ready"
    DIFF_READY = "diff-ready"
    ERROR = "error"


class Request(BaseModel):
    """A request sent to a session."""

    type: RequestType
    diff: Optional[str] = None
    fallback_message: Optional[str] = None


class Response(BaseModel):
    """A response produced by a session."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    type: ResponseType
    result: Optional[CommitMessageResult] = None
    source: Optional[DiffSource] = None
    rows: list[DisplayRow] = []
    error: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "Response":
        return cls(type=ResponseType.ERROR, error=message)


class GenerationSession:
    """Serializes generation requests from a single front end.

    While a generation runs, further generation requests are answered with
    an error response instead of starting a second model call.
    """

    def __init__(
        self,
        runner: BaseModelRunner,
        diff_provider: Optional[DiffProvider] = None,
        render_options: Optional[RenderOptions] = None,
    ):
        """Initialize the session.

        Args:
            runner: Model runner used for generation.
            diff_provider: Callable returning the diff for 'generate' and
                'load-diff' requests (e.g., the staged changes).
            render_options: Options used to render loaded diffs.
        """
        self.runner = runner
        self.diff_provider = diff_provider
        self.render_options = render_options or RenderOptions()
        self._lock = threading.Lock()
        self._in_progress = False

    @property
    def in_progress(self) -> bool:
        return self._in_progress

    def _begin(self) -> None:
        with self._lock:
            if self._in_progress:
                raise GenerationInProgressError("A commit message generation is already in progress.")
            self._in_progress = True

    def _end(self) -> None:
        with self._lock:
            self._in_progress = False

    def _provide_diff(self) -> DiffSource:
        if self.diff_provider is None:
            raise CommitFlowError("No diff provider configured for this session.")
        return self.diff_provider()

    def handle(self, request: Request) -> Response:
        """Handle one request.

        Args:
            request: The request to handle.

        Returns:
            The response. Failures are reported as 'error' responses.
        """
        logger.debug("Handling request: %s", request.type.value)
        try:
            if request.type is RequestType.LOAD_DIFF:
                return self._load_diff()
            return self._generate(request)
        except (CommitFlowError, LLMError) as e:
            logger.debug("Request %s failed: %s", request.type.value, e)
            return Response.failure(str(e))

    def _load_diff(self) -> Response:
        source = self._provide_diff()
        rows = render_hunks(parse_diff(source.diff), self.render_options)
        return Response(type=ResponseType.DIFF_READY, source=source, rows=rows)

    def _generate(self, request: Request) -> Response:
        self._begin()
        try:
            if request.type is RequestType.GENERATE_FROM_DIFF:
                result = generate_commit_message_from_diff(
                    request.diff or "",
                    runner=self.runner,
                    fallback_message=request.fallback_message,
                )
            else:
                result = generate_commit_message(
                    self._provide_diff(),
                    runner=self.runner,
                    fallback_message=request.fallback_message,
                )
        finally:
            self._end()
        return Response(type=ResponseType.MESSAGE_READY, result=result)
