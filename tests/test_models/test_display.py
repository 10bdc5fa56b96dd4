from __future__ import annotations

import pytest
from rich.text import Text

from upgradepick.models.display import DisplayField, Fragment


@pytest.mark.unit
class TestDisplayField:
    """Tests for DisplayField."""

    def test_of_builds_single_fragment(self) -> None:
        """Test of() wraps text and style in one fragment."""
        field = DisplayField.of("rimraf", "yellow")

        assert field.fragments == (Fragment("rimraf", "yellow"),)
        assert field.plain == "rimraf"

    @pytest.mark.parametrize("text", [None, ""], ids=["none", "empty"])
    def test_of_empty(self, text: object) -> None:
        """Test empty input gives a field with no fragments."""
        field = DisplayField.of(text, "bold")  # type: ignore[arg-type]

        assert field.fragments == ()
        assert field.plain == ""
        assert not field
        assert len(field) == 0

    def test_concatenation(self) -> None:
        """Test + joins fragments in order."""
        field = DisplayField.of("a", "red") + DisplayField.of(" b", "green")

        assert field.plain == "a b"
        assert len(field) == 3
        assert [f.style for f in field.fragments] == ["red", "green"]

    def test_to_text_keeps_styles(self) -> None:
        """Test Rich conversion carries one span per styled fragment."""
        text = (DisplayField.of("name", "yellow") + DisplayField.of(" devDep", "green")).to_text()

        assert isinstance(text, Text)
        assert text.plain == "name devDep"
        assert [(s.start, s.end, str(s.style)) for s in text.spans] == [
            (0, 4, "yellow"),
            (4, 11, "green"),
        ]

    def test_unstyled_fragment_has_no_span(self) -> None:
        """Test fragments without a style add no span."""
        text = DisplayField.of("plain").to_text()

        assert text.plain == "plain"
        assert text.spans == []
