"""Tests for commitflow.session module."""

from commitflow import config
from commitflow.diff import RenderOptions, RowKind
from commitflow.llm import LLMError
from commitflow.message import DiffSource
from commitflow.session import (
    GenerationSession,
    Request,
    RequestType,
    Response,
    ResponseType,
)


class ReentrantRunner:
    """Runner that sends a second request while the first is running."""

    model = "test-model"

    def __init__(self):
        self.session = None
        self.nested = None

    def run(self, prompt):
        self.nested = self.session.handle(Request(type=RequestType.GENERATE_FROM_DIFF, diff="+x"))
        return "fix: nested"


class FailingRunner:
    """Runner whose model call fails."""

    model = "test-model"

    def run(self, prompt):
        raise LLMError("Cannot reach Ollama")


class TestRequestModels:
    """Tests for the request/response message types."""

    def test_request_accepts_tag_strings(self):
        """Test that requests can be built from their wire tags."""
        request = Request.model_validate({"type": "generate-from-diff", "diff": "+a"})

        assert request.type is RequestType.GENERATE_FROM_DIFF
        assert request.diff == "+a"

    def test_failure_response(self):
        """Test the error response helper."""
        response = Response.failure("boom")

        assert response.type is ResponseType.ERROR
        assert response.error == "boom"
        assert response.result is None


class TestGenerate:
    """Tests for generation requests."""

    def test_generate_from_diff(self, fake_runner):
        """Test a generate-from-diff request."""
        session = GenerationSession(fake_runner)

        response = session.handle(Request(type=RequestType.GENERATE_FROM_DIFF, diff="+a"))

        assert response.type is ResponseType.MESSAGE_READY
        assert response.result.message == "feat: add greeting"
        assert response.result.context == "custom"
        assert not session.in_progress

    def test_generate_from_diff_uses_custom_fallback(self, fake_runner):
        """Test the manual-input fallback for an empty model reply."""
        fake_runner.reply = "   "
        session = GenerationSession(fake_runner)

        response = session.handle(Request(type=RequestType.GENERATE_FROM_DIFF, diff="+a"))

        assert response.result.message == config.CUSTOM_DIFF_FALLBACK_MESSAGE
        assert response.result.used_fallback

    def test_generate_uses_provider(self, fake_runner, sample_diff):
        """Test a generate request reads from the diff provider."""
        session = GenerationSession(
            fake_runner,
            diff_provider=lambda: DiffSource(diff=sample_diff, context="staged"),
        )

        response = session.handle(Request(type=RequestType.GENERATE))

        assert response.type is ResponseType.MESSAGE_READY
        assert response.result.context == "staged"
        assert sample_diff in fake_runner.prompts[0]

    def test_generate_without_provider_is_error(self, fake_runner):
        """Test that a generate request needs a diff provider."""
        response = GenerationSession(fake_runner).handle(Request(type=RequestType.GENERATE))

        assert response.type is ResponseType.ERROR
        assert "diff provider" in response.error

    def test_empty_diff_is_error(self, fake_runner):
        """Test that a blank diff is reported as an error response."""
        session = GenerationSession(fake_runner)

        response = session.handle(Request(type=RequestType.GENERATE_FROM_DIFF, diff="  \n"))

        assert response.type is ResponseType.ERROR
        assert fake_runner.prompts == []
        assert not session.in_progress

    def test_model_failure_is_error(self):
        """Test that model errors become error responses and release the flag."""
        session = GenerationSession(FailingRunner())

        response = session.handle(Request(type=RequestType.GENERATE_FROM_DIFF, diff="+a"))

        assert response.type is ResponseType.ERROR
        assert "Cannot reach Ollama" in response.error
        assert not session.in_progress

    def test_second_generation_rejected_while_running(self):
        """Test that a request arriving mid-generation is refused."""
        runner = ReentrantRunner()
        session = GenerationSession(runner)
        runner.session = session

        response = session.handle(Request(type=RequestType.GENERATE_FROM_DIFF, diff="+a"))

        assert response.type is ResponseType.MESSAGE_READY
        assert response.result.message == "fix: nested"
        assert runner.nested.type is ResponseType.ERROR
        assert "already in progress" in runner.nested.error
        assert not session.in_progress


class TestLoadDiff:
    """Tests for load-diff requests."""

    def test_load_diff_renders_rows(self, fake_runner, long_context_diff):
        """Test that load-diff returns the source and its rendered rows."""
        source = DiffSource(diff=long_context_diff, context="staged")
        session = GenerationSession(fake_runner, diff_provider=lambda: source)

        response = session.handle(Request(type=RequestType.LOAD_DIFF))

        assert response.type is ResponseType.DIFF_READY
        assert response.source == source
        assert any(row.kind is RowKind.COLLAPSED for row in response.rows)
        assert fake_runner.prompts == []

    def test_load_diff_honors_render_options(self, fake_runner, long_context_diff):
        """Test that the session's render options are applied."""
        session = GenerationSession(
            fake_runner,
            diff_provider=lambda: DiffSource(diff=long_context_diff),
            render_options=RenderOptions(collapse_context=False),
        )

        response = session.handle(Request(type=RequestType.LOAD_DIFF))

        assert not any(row.kind is RowKind.COLLAPSED for row in response.rows)
        assert len(response.rows) == 30
