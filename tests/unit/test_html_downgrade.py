"""Unit tests for best-effort HTML to JIRA conversion."""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2jira.utils.html import downgrade_html


@pytest.mark.unit
class TestDowngradeHtml:
    """Test the inline tag substitutions."""

    @pytest.mark.parametrize(
        "html,expected",
        [
            ("x<sup>2</sup>", "x^2^"),
            ("H<sub>2</sub>O", "H~2~O"),
            ("a<br>b", "a\\\\b"),
            ("a<br/>b", "a\\\\b"),
            ("a<br />b", "a\\\\b"),
            ("<strong>s</strong>", "*s*"),
            ("<b>s</b>", "*s*"),
            ("<em>e</em>", "_e_"),
            ("<i>e</i>", "_e_"),
            ("<code>c</code>", "{{c}}"),
            ("<del>d</del>", "-d-"),
            ("<s>d</s>", "-d-"),
            ("<u>u</u>", "+u+"),
        ],
    )
    def test_known_tags(self, html: str, expected: str) -> None:
        """Test each recognized tag pair."""
        assert downgrade_html(html) == expected

    def test_unknown_tags_stripped(self) -> None:
        """Test unrecognized tags are removed and their text kept."""
        assert downgrade_html('<span class="x">text</span>') == "text"

    def test_known_tag_inside_unknown(self) -> None:
        """Test a recognized tag converts before its wrapper is stripped."""
        assert downgrade_html("<div><b>bold</b></div>") == "*bold*"

    def test_nested_known_tags(self) -> None:
        """Test nested recognized tags only convert the innermost pair."""
        # each stage runs once, so the bold stage has already passed
        assert downgrade_html("<b><i>x</i></b>") == "_x_"

    def test_mismatched_tags_stripped(self) -> None:
        """Test an unpaired tag is simply removed."""
        assert downgrade_html("a<sup>b") == "ab"

    def test_plain_text_unchanged(self) -> None:
        """Test text without tags is returned unchanged."""
        assert downgrade_html("no tags here") == "no tags here"

    def test_case_sensitive(self) -> None:
        """Test upper-case tags are only stripped."""
        assert downgrade_html("<B>x</B>") == "x"

    @given(st.text(alphabet=st.characters(blacklist_characters="<>")))
    def test_tag_free_text_is_identity(self, text: str) -> None:
        """Test text without angle brackets passes through untouched."""
        assert downgrade_html(text) == text

    @given(st.text())
    def test_output_has_no_complete_tags(self, text: str) -> None:
        """Test no '<...>' sequence survives the final stage."""
        assert re.search(r"<[^>]+>", downgrade_html(text)) is None
