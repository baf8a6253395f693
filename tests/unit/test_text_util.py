"""Unit tests for the text matching helpers.

Tests cover:
- Wildcard matching and its anchoring
- Label colons, which only names ignore
- Path segment helpers used by tree selection
"""

from widgetmatch.util.text_util import (
    format_values,
    get_first_segment,
    get_next_segments,
    matches,
    matches_label,
    remove_newline,
)


class TestMatches:
    """Test wildcard matching of component texts."""

    def test_exact_match(self) -> None:
        assert matches("Customer", "Customer")

    def test_match_is_case_sensitive(self) -> None:
        assert not matches("customer", "Customer")

    def test_match_is_anchored(self) -> None:
        """Without wildcards a prefix or substring does not match."""
        assert not matches("Customer Name", "Customer")
        assert not matches("My Customer", "Customer")

    def test_trailing_wildcard(self) -> None:
        assert matches("Customer Name", "Customer*")

    def test_leading_and_inner_wildcards(self) -> None:
        assert matches("Total amount due", "*amount*")
        assert matches("Order 2024-01", "Order*-01")
        assert not matches("Order 2024-02", "Order*-01")

    def test_lone_wildcard_matches_empty_text(self) -> None:
        assert matches("", "*")

    def test_regex_characters_are_literal(self) -> None:
        assert matches("a.b", "a.b")
        assert not matches("axb", "a.b")
        assert matches("(1+1)", "(1+1)")

    def test_trailing_colon_is_significant(self) -> None:
        """Values are compared exactly, a colon is part of the value."""
        assert not matches("Bob:", "Bob")
        assert matches("Bob:", "Bob:")
        assert matches("Bob:", "Bob*")

    def test_none_never_matches(self) -> None:
        assert not matches(None, "x")
        assert not matches("x", None)


class TestMatchesLabel:
    """Test matching of field labels."""

    def test_trailing_colon_is_ignored(self) -> None:
        """Field labels often end with a colon the script does not repeat."""
        assert matches_label("City:", "City")
        assert matches_label("City :", "City")
        assert matches_label("City:", "City:")
        assert matches_label("City", "City")

    def test_wildcards_still_apply(self) -> None:
        assert matches_label("Customer name:", "Customer*")
        assert not matches_label("Town:", "City")

    def test_none_never_matches(self) -> None:
        assert not matches_label(None, "City")
        assert not matches_label("City:", None)


class TestFormatting:
    """Test newline flattening and value list formatting."""

    def test_remove_newline(self) -> None:
        assert remove_newline("Amount\nin EUR") == "Amount in EUR"
        assert remove_newline("Amount \r\n  in EUR\n") == "Amount in EUR"

    def test_format_values(self) -> None:
        assert format_values(["Alice", "42"]) == "[Alice | 42]"
        assert format_values(["one"]) == "[one]"


class TestPathSegments:
    """Test splitting of ``>`` separated paths."""

    def test_first_segment(self) -> None:
        assert get_first_segment("Orders > 2024 > Open") == "Orders"
        assert get_first_segment("Orders") == "Orders"

    def test_next_segments(self) -> None:
        assert get_next_segments("Orders > 2024 > Open") == "2024 > Open"
        assert get_next_segments("Orders") == ""

    def test_custom_separator(self) -> None:
        assert get_first_segment("a/b", "/") == "a"
        assert get_next_segments("a/b", "/") == "b"
