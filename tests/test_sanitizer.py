"""Tests for commitflow.message.sanitizer module."""

import pytest

from commitflow.message.sanitizer import (
    JSON_MESSAGE_FIELDS,
    extract_message_from_json,
    sanitize_commit_message,
    strip_code_fences,
    strip_empty_edges,
    strip_outer_quotes,
)


class TestStripEmptyEdges:
    """Tests for strip_empty_edges function."""

    def test_drops_blank_edge_lines(self):
        """Test removal of blank lines at both ends."""
        assert strip_empty_edges("\n  \nfeat: x\n\nbody\n \n") == "feat: x\n\nbody"

    def test_strips_trailing_whitespace(self):
        """Test that trailing spaces are removed from every line."""
        assert strip_empty_edges("feat: x   \nbody\t") == "feat: x\nbody"

    def test_keeps_leading_indentation(self):
        """Test that leading spaces inside lines are kept."""
        assert strip_empty_edges("feat: x\n  - item") == "feat: x\n  - item"

    def test_handles_crlf(self):
        """Test that CRLF line endings are split."""
        assert strip_empty_edges("\r\nfeat: x\r\n\r\n") == "feat: x"

    def test_blank_input_gives_empty_string(self):
        """Test that whitespace-only input collapses to empty."""
        assert strip_empty_edges(" \n\t\n") == ""


class TestStripCodeFences:
    """Tests for strip_code_fences function."""

    def test_removes_fence_with_language(self):
        """Test removal of a ```text fence pair."""
        assert strip_code_fences("```text\nfix: y\n```") == "fix: y"

    def test_removes_only_one_layer(self):
        """Test that a single fence line is dropped at each end."""
        assert strip_code_fences("```\n```\nfix: y\n```\n```") == "```\nfix: y\n```"

    def test_keeps_interior_fences(self):
        """Test that fences in the middle are kept."""
        text = "feat: x\n```\ncode\n```\nend"
        assert strip_code_fences(text) == text

    def test_indented_fence(self):
        """Test that fence detection ignores surrounding whitespace."""
        assert strip_code_fences("  ```\nfix: y\n  ```  ") == "fix: y"


class TestStripOuterQuotes:
    """Tests for strip_outer_quotes function."""

    @pytest.mark.parametrize(
        "text",
        [
            '"chore: z"',
            "'chore: z'",
            "`chore: z`",
            "“chore: z”",
            "‘chore: z’",
            "«chore: z»",
            '```"chore: z"```',
        ],
    )
    def test_strips_quote_runs(self, text):
        """Test each supported quote style."""
        assert strip_outer_quotes(text) == "chore: z"

    def test_ends_are_independent(self):
        """Test that a quote on one side only is still removed."""
        assert strip_outer_quotes('"chore: z') == "chore: z"

    def test_keeps_inner_quotes(self):
        """Test that quotes inside the message survive."""
        assert strip_outer_quotes("fix: handle 'null' values") == "fix: handle 'null' values"


class TestExtractMessageFromJson:
    """Tests for extract_message_from_json function."""

    def test_field_priority_order(self):
        """Test that fields are tried in the documented order."""
        assert JSON_MESSAGE_FIELDS == ("message", "commit", "response", "text", "content")
        assert extract_message_from_json('{"content": "c", "commit": "b"}') == "b"

    def test_skips_blank_and_non_string_fields(self):
        """Test that blank or non-string candidates are skipped."""
        text = '{"message": "  ", "commit": {"title": "x"}, "response": 5, "text": "fix: t"}'
        assert extract_message_from_json(text) == "fix: t"

    def test_json_string(self):
        """Test that a JSON string is used directly."""
        assert extract_message_from_json('"  feat: s  "') == "feat: s"

    def test_invalid_json_returns_none(self):
        """Test that parse errors are swallowed."""
        assert extract_message_from_json('{"message": ') is None

    def test_unknown_fields_return_none(self):
        """Test an object without any known field."""
        assert extract_message_from_json('{"title": "x"}') is None

    def test_array_returns_none(self):
        """Test that non-object JSON values are ignored."""
        assert extract_message_from_json('["feat: x"]') is None

    def test_deeply_nested_json_returns_none(self):
        """Test that JSON too deep for the decoder is treated as unusable."""
        text = '{"message":' * 100000 + '"x"' + "}" * 100000
        assert extract_message_from_json(text) is None


class TestSanitizeCommitMessage:
    """Tests for sanitize_commit_message function."""

    def test_code_fence(self):
        """Test stripping a fenced block."""
        assert sanitize_commit_message("```\nfeat: add x\n```") == "feat: add x"

    def test_json_object(self):
        """Test unwrapping a JSON object."""
        assert sanitize_commit_message('{"message": "fix: y"}') == "fix: y"

    def test_quoted(self):
        """Test stripping outer quotes."""
        assert sanitize_commit_message('"chore: z"') == "chore: z"

    def test_blank_is_absent(self):
        """Test that whitespace-only output yields None."""
        assert sanitize_commit_message("   \n\n  ") is None

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_is_absent(self, raw):
        """Test that missing output yields None."""
        assert sanitize_commit_message(raw) is None

    def test_clean_message_round_trip(self):
        """Test that a clean message only loses surrounding whitespace."""
        assert sanitize_commit_message("  feat(cli): add --json flag  ") == "feat(cli): add --json flag"

    def test_fenced_json(self):
        """Test a JSON reply inside a ```json fence."""
        raw = '```json\n{"commit": "refactor: split parser"}\n```'
        assert sanitize_commit_message(raw) == "refactor: split parser"

    def test_multiline_message_kept(self):
        """Test that title and body lines survive."""
        raw = "\n\nfeat: add x\n\nAdd the x command.   \n\n"
        assert sanitize_commit_message(raw) == "feat: add x\n\nAdd the x command."

    def test_invalid_json_kept_as_text(self):
        """Test that broken JSON falls through as plain text."""
        assert sanitize_commit_message("{not json}") == "{not json}"

    def test_json_without_known_field_kept(self):
        """Test that unmatched JSON is kept unchanged."""
        assert sanitize_commit_message('{"title": "x"}') == '{"title": "x"}'

    def test_only_quotes_is_absent(self):
        """Test output consisting only of quotes."""
        assert sanitize_commit_message('""') is None

    def test_only_fences_is_absent(self):
        """Test output consisting only of a fence pair."""
        assert sanitize_commit_message("```\n```") is None

    def test_quotes_inside_fence(self):
        """Test quotes and fences together."""
        assert sanitize_commit_message("```\n“docs: update readme”\n```") == "docs: update readme"

    def test_deeply_nested_json_kept_as_text(self):
        """Test that undecodable nesting never raises."""
        text = '{"message":' * 100000 + '"x"' + "}" * 100000
        assert sanitize_commit_message(text) == text
