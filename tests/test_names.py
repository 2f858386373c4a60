"""Tests for wren.names — HeaderName and name casing helpers."""

import pytest

from wren.errors import InvalidHeaderName
from wren.names import HeaderName, canonicalize, display, is_token


class TestHeaderName:
    def test_equality_ignores_case(self) -> None:
        assert HeaderName("Content-Type") == HeaderName("content-type")
        assert HeaderName("Content-Type") == HeaderName("CONTENT-TYPE")

    def test_hash_ignores_case(self) -> None:
        assert hash(HeaderName("Accept")) == hash(HeaderName("ACCEPT"))
        assert {HeaderName("Accept"): 1}[HeaderName("accept")] == 1

    def test_keeps_original_spelling(self) -> None:
        name = HeaderName("X-Request-ID")
        assert str(name) == "X-Request-ID"
        assert name.key == "x-request-id"
        assert repr(name) == "HeaderName('X-Request-ID')"

    def test_ordering_ignores_case(self) -> None:
        names = sorted([HeaderName("b"), HeaderName("A"), HeaderName("c")])
        assert [str(n) for n in names] == ["A", "b", "c"]

    def test_not_equal_to_other_types(self) -> None:
        assert HeaderName("A") != 1

    def test_not_equal_to_plain_str(self) -> None:
        """Equal objects must hash equally, so a str never compares equal."""
        name = HeaderName("Cookie")
        assert name != "Cookie"
        assert "Cookie" not in {name}
        assert name in {HeaderName("COOKIE")}

    def test_immutable(self) -> None:
        name = HeaderName("A")
        with pytest.raises(AttributeError):
            name._name = "B"  # type: ignore[misc]

    @pytest.mark.parametrize("bad", ["", "Bad Name", "Colon:", "New\nLine", "Ünicode"])
    def test_invalid_names_rejected(self, bad: str) -> None:
        with pytest.raises(InvalidHeaderName):
            HeaderName(bad)

    def test_non_str_rejected(self) -> None:
        with pytest.raises(InvalidHeaderName):
            HeaderName(b"Accept")  # type: ignore[arg-type]

    def test_validation_can_be_skipped(self) -> None:
        assert HeaderName("Bad Name", validate=False).key == "bad name"


class TestCasing:
    def test_is_token(self) -> None:
        assert is_token("X-Custom_Header.1")
        assert not is_token("a b")

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("content-type", "Content-Type"),
            ("ACCEPT", "Accept"),
            ("x-request-id", "X-Request-Id"),
            ("etag", "ETag"),
            ("www-authenticate", "WWW-Authenticate"),
            ("te", "TE"),
        ],
    )
    def test_canonicalize(self, name: str, expected: str) -> None:
        assert canonicalize(name) == expected

    def test_display_modes(self) -> None:
        assert display("X-Foo", "preserve") == "X-Foo"
        assert display("X-Foo", "lower") == "x-foo"
        assert display("x-foo", "canonical") == "X-Foo"
