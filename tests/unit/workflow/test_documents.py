"""Tests for document buffer parsing and rendering."""

import pytest

from ingestview.core.exceptions import ParseError
from ingestview.workflow.documents import (
    interpret_ingest_response,
    parse_document,
    render_document,
)


class TestParseDocument:
    """Tests for parse_document."""

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_buffer(self, text):
        """An empty buffer has nothing to index."""
        with pytest.raises(ParseError, match="^Nothing to index$"):
            parse_document(text)

    def test_whitespace_is_a_syntax_error(self):
        """Whitespace only is not empty, so it fails as malformed JSON."""
        with pytest.raises(ParseError, match="Expecting value"):
            parse_document("   ")

    def test_malformed_json(self):
        """Malformed JSON should raise with the decoder's message."""
        with pytest.raises(ParseError) as exc_info:
            parse_document('{"name": "Widget",}')

        assert str(exc_info.value)
        assert "line 1" in str(exc_info.value)

    def test_non_standard_constants_rejected(self):
        """NaN and Infinity are not valid JSON."""
        with pytest.raises(ParseError, match="NaN"):
            parse_document('{"price": NaN}')

    def test_parses_object(self):
        """Well-formed JSON should be decoded."""
        assert parse_document('{"name": "Widget", "price": 9.99}') == {
            "name": "Widget",
            "price": 9.99,
        }

    def test_parses_array(self):
        """A list of documents is a valid payload."""
        assert parse_document('[{"id": 1}, {"id": 2}]') == [{"id": 1}, {"id": 2}]


class TestRenderDocument:
    """Tests for render_document."""

    def test_two_space_indent(self):
        """Output should use a two space indent."""
        assert render_document({"name": "Widget", "price": 9.99}) == (
            '{\n  "name": "Widget",\n  "price": 9.99\n}'
        )

    def test_preserves_key_order(self):
        """Keys should not be sorted."""
        rendered = render_document({"z": 1, "a": 2})

        assert rendered.index('"z"') < rendered.index('"a"')

    def test_keeps_unicode(self):
        """Non-ASCII characters should be written as-is."""
        assert render_document({"name": "Café"}) == '{\n  "name": "Café"\n}'

    def test_rendering_is_idempotent(self):
        """Re-parsing and re-rendering should be stable."""
        text = render_document(parse_document('{"a":[1,2,{"b":null}],"c":true}'))

        assert render_document(parse_document(text)) == text


class TestInterpretIngestResponse:
    """Tests for interpret_ingest_response."""

    def test_reads_count(self):
        """count should be taken from the response."""
        outcome = interpret_ingest_response({"count": 5, "took": 3})

        assert outcome.count == 5
        assert outcome.label == "5 records have been indexed."
        assert outcome.response == {"count": 5, "took": 3}

    @pytest.mark.parametrize("response", [{}, {"count": "7"}, {"count": True}, [1, 2], None])
    def test_missing_count_is_zero(self, response):
        """Responses without an integer count report nothing indexed."""
        assert interpret_ingest_response(response).count == 0


class TestOutOfRangeNumbers:
    """Numbers that overflow a float cannot round-trip as JSON."""

    def test_overflowing_number_rejected(self):
        """1e400 is valid syntax but not a finite number."""
        with pytest.raises(ParseError, match="Number out of range: 1e400"):
            parse_document('{"price": 1e400}')

    def test_render_non_finite_raises(self):
        """Rendering refuses non-finite floats."""
        with pytest.raises(ValueError):
            render_document({"price": float("inf")})
