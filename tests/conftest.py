"""Shared fixtures for structured-text tests."""

import pytest

from structured_text.fonts import Font
from structured_text.theme import Styling


@pytest.fixture
def theme() -> Styling:
    """Theme with round numbers, distinct from the defaults."""
    return Styling(
        base_font=Font("Body", 10.0),
        text_color="#111111",
        quote_color="#777777",
        indentation_multiplier=8.0,
    )
