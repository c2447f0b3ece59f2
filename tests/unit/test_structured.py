"""Tests for structured data extraction."""

from profile_search.parsing.structured import extract_structured_data


class TestFencedBlocks:
    """Tests for ```json fenced blocks."""

    def test_fenced_cards(self):
        """Test a fenced cards payload."""
        text = '```json\n{"cards":[{"id":"1","title":"A","description":"d"}]}\n```'
        data = extract_structured_data(text)
        assert data is not None
        assert data["cards"][0]["title"] == "A"

    def test_fence_preferred_over_other_braces(self):
        """Test the fenced block wins over surrounding braces."""
        text = (
            'Use {curly} braces.\n'
            '```json\n{"title": "Inside"}\n```\n'
            'and {more} here'
        )
        assert extract_structured_data(text) == {"title": "Inside"}

    def test_invalid_fenced_json(self):
        """Test malformed fenced JSON returns None."""
        assert extract_structured_data("```json\n{not valid}\n```") is None


class TestBareObjects:
    """Tests for the first-brace to last-brace fallback."""

    def test_bare_object(self):
        """Test an unfenced object in prose."""
        text = 'Here it is: {"title": "Services", "cards": []} enjoy'
        assert extract_structured_data(text) == {"title": "Services", "cards": []}

    def test_spans_first_to_last_brace(self):
        """Test two objects in prose do not parse as one."""
        text = '{"a": 1} and {"b": 2}'
        assert extract_structured_data(text) is None

    def test_unknown_keys_still_returned(self):
        """Test objects without recognised keys are returned."""
        assert extract_structured_data('{"foo": "bar"}') == {"foo": "bar"}


class TestNoData:
    """Tests for text without a payload."""

    def test_not_json(self):
        """Test plain text returns None without raising."""
        assert extract_structured_data("not json at all") is None

    def test_json_array_is_ignored(self):
        """Test a non-object JSON value returns None."""
        assert extract_structured_data('```json\n[1, 2, 3]\n```') is None

    def test_empty(self):
        """Test empty input."""
        assert extract_structured_data("") is None
