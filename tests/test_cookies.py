"""Tests for wren.header.cookie and wren.header.set_cookie."""

import pytest

from wren.header.cookie import Cookie, CookieHeader, parse_cookie_pairs
from wren.header.set_cookie import SetCookie, SetCookieHeader
from wren.headers import Headers


class TestParseCookiePairs:
    def test_empty_string(self) -> None:
        assert parse_cookie_pairs("") == []

    def test_multiple_cookies(self) -> None:
        result = parse_cookie_pairs("session=abc; theme=dark; lang=en")
        assert result == [Cookie("session", "abc"), Cookie("theme", "dark"), Cookie("lang", "en")]

    def test_whitespace_handling(self) -> None:
        result = parse_cookie_pairs("  session = abc ;  theme = dark  ")
        assert result == [Cookie("session", "abc"), Cookie("theme", "dark")]

    def test_value_with_equals(self) -> None:
        """Values can contain '=' (e.g. base64)."""
        assert parse_cookie_pairs("token=abc=def=") == [Cookie("token", "abc=def=")]

    def test_empty_value(self) -> None:
        assert parse_cookie_pairs("flag=") == [Cookie("flag", "")]

    def test_no_equals_kept_with_none(self) -> None:
        result = parse_cookie_pairs("session=abc; broken; theme=dark")
        assert result == [Cookie("session", "abc"), Cookie("broken"), Cookie("theme", "dark")]

    def test_null_marker_reads_as_none(self) -> None:
        assert parse_cookie_pairs("One=null; Two= null") == [Cookie("One"), Cookie("Two")]

    def test_empty_tokens_skipped(self) -> None:
        assert parse_cookie_pairs("a=1;; ;b=2") == [Cookie("a", "1"), Cookie("b", "2")]


class TestCookieHeader:
    def test_canonical_form(self) -> None:
        header = CookieHeader.from_values(["d", "e", "f"])
        assert header.values == ("d=null; e=null; f=null",)

    def test_values_across_lines_combined(self) -> None:
        header = CookieHeader.from_values(["a=1; b=2", "c=3"])
        assert header.values == ("a=1; b=2; c=3",)

    def test_nothing_parseable_is_none(self) -> None:
        assert CookieHeader.from_values(["", " ; "]) is None

    def test_duplicates_kept_in_order(self) -> None:
        header = CookieHeader.from_values(["a=1; a=2"])
        assert len(header) == 2
        assert header.get("a") == "2"
        assert header.as_dict() == {"a": "2"}

    def test_get_default(self) -> None:
        header = CookieHeader.from_values(["a=1"])
        assert header.get("b") is None
        assert header.get("b", "x") == "x"

    @pytest.mark.parametrize(
        "cookies",
        [
            (Cookie("a", "1"),),
            (Cookie("session", "abc=="), Cookie("theme", "")),
            (Cookie("a", "1"), Cookie("a", "2")),
            (Cookie("a", None),),
            (Cookie("a", None), Cookie("b", "2")),
        ],
    )
    def test_round_trip(self, cookies: tuple[Cookie, ...]) -> None:
        header = CookieHeader(cookies)
        assert CookieHeader.from_values(header.values) == header

    def test_frozen(self) -> None:
        header = CookieHeader((Cookie("a", "1"),))
        with pytest.raises(AttributeError):
            header.cookies = ()  # type: ignore[misc]


class TestSetCookie:
    def test_minimal(self) -> None:
        assert SetCookie(name="session", value="abc").to_header_value() == "session=abc"

    def test_all_attributes(self) -> None:
        c = SetCookie(
            name="session",
            value="abc",
            max_age=3600,
            path="/app",
            domain=".example.com",
            secure=True,
            httponly=True,
            samesite="Strict",
        )
        header = c.to_header_value()

        assert "Max-Age=3600" in header
        assert "Path=/app" in header
        assert "Domain=.example.com" in header
        assert "Secure" in header
        assert "HttpOnly" in header
        assert "SameSite=Strict" in header

    def test_parse(self) -> None:
        c = SetCookie.parse("id=a3fWa; Max-Age=2592000; Path=/; Secure; HttpOnly")
        assert c == SetCookie(
            name="id", value="a3fWa", max_age=2592000, path="/", secure=True, httponly=True
        )

    def test_unknown_attributes_kept(self) -> None:
        c = SetCookie.parse("id=1; Partitioned; Priority=High")
        assert c.extensions == ("Partitioned", "Priority=High")
        assert c.to_header_value() == "id=1; Partitioned; Priority=High"

    def test_bad_max_age_kept_as_extension(self) -> None:
        c = SetCookie.parse("id=1; Max-Age=soon")
        assert c.max_age is None
        assert c.extensions == ("Max-Age=soon",)

    def test_round_trip(self) -> None:
        c = SetCookie(name="a", value="b", expires="Wed, 21 Oct 2015 07:28:00 GMT", samesite="Lax")
        assert SetCookie.parse(c.to_header_value()) == c

    def test_frozen(self) -> None:
        c = SetCookie(name="a", value="b")
        with pytest.raises(AttributeError):
            c.name = "c"  # type: ignore[misc]


class TestSetCookieHeader:
    def test_lines_stay_independent(self) -> None:
        headers = Headers()
        headers.put("Set-Cookie", ["a=1; Path=/", "b=2; Secure"])
        assert headers.get("set-cookie").values == ("a=1; Path=/", "b=2; Secure")

    def test_typed_view(self) -> None:
        headers = Headers()
        headers.add("Set-Cookie", "a=1")
        headers.add(SetCookieHeader((SetCookie(name="b", value="2", httponly=True),)))
        header = headers.get_typed(SetCookieHeader.TAG)
        assert [c.name for c in header.cookies] == ["a", "b"]
        assert header.get("b").httponly is True
        assert header.get("missing") is None
