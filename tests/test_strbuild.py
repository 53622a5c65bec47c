import pytest

from fractol.chars import toupper
from fractol.strbuild import split, strjoin, strmapi, striteri, strtrim, substr


def test_substr_takes_slice():
    assert substr("hello world", 6, 5) == "world"


def test_substr_invariants():
    s = "fractal explorer"
    for start in range(len(s) + 1):
        for length in range(0, 6):
            part = substr(s, start, length)
            assert len(part) <= length
            assert s.startswith(part, start)


def test_substr_start_past_end_is_empty():
    assert substr("abc", 10, 2) == ""


def test_substr_length_larger_than_string():
    assert substr("abc", 0, 100) == "abc"


def test_substr_stops_at_nul():
    assert substr("ab\0cd", 0, 5) == "ab"


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_substr_rejects_negative_length():
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin_concatenates():
    a, b = "mandel", "brot"
    joined = strjoin(a, b)
    assert len(joined) == len(a) + len(b)
    assert joined.startswith(a)
    assert joined.endswith(b)


def test_strjoin_with_empty():
    assert strjoin("", "julia") == "julia"
    assert strjoin("ship", "") == "ship"


def test_strtrim_removes_both_ends():
    assert strtrim("xxabcxx", "x") == "abc"


def test_strtrim_invariants():
    s, charset = "  -- value --  ", " -"
    trimmed = strtrim(s, charset)
    assert trimmed in s
    assert trimmed[0] not in charset
    assert trimmed[-1] not in charset


def test_strtrim_everything_trimmed_gives_empty():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_string():
    assert strtrim("  abc  ", "") == "  abc  "


def test_strtrim_empty_input():
    assert strtrim("", "abc") == ""


def test_split_drops_empty_words():
    assert split("  julia  mandelbrot ship ", " ") == ["julia", "mandelbrot", "ship"]


def test_split_invariants():
    s, sep = ",,a,bc,,,def,", ","
    words = split(s, sep)
    assert all(words)
    assert all(sep not in word for word in words)
    assert "".join(words) == s.replace(sep, "")


def test_split_only_separators():
    assert split(",,,,", ",") == []


def test_split_empty_string():
    assert split("", ",") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_identity_roundtrip():
    s = "escape time"
    assert strmapi(s, lambda i, ch: ch) == s


def test_strmapi_passes_indices_in_order():
    seen = []

    def record(i, ch):
        seen.append(i)
        return ch

    s = "hooks"
    result = strmapi(s, record)
    assert result == s
    assert seen == list(range(len(s)))


def test_strmapi_uppercases():
    assert strmapi("abc", lambda i, ch: toupper(ch)) == "ABC"


def test_striteri_replaces_items_in_place():
    chars = list("zoom")
    striteri(chars, lambda i, ch: toupper(ch) if i % 2 == 0 else None)
    assert chars == ["Z", "o", "O", "m"]


def test_striteri_visits_every_index():
    seen = []
    data = bytearray(b"\x01\x02\x03")
    striteri(data, lambda i, b: seen.append((i, b)))
    assert seen == [(0, 1), (1, 2), (2, 3)]
    assert data == bytearray(b"\x01\x02\x03")