import pytest

from ftlib.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen():
    assert strlen("") == 0
    assert strlen("Hola Josu que tal") == len("Hola Josu que tal")


@pytest.mark.parametrize(
    "text, expected",
    [
        (" \t\n\v\f\r-42abc", -42),
        ("+17", 17),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("+-5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_ignores_non_ascii_digits():
    assert atoi("\u0663") == 0


@pytest.mark.parametrize("n", [0, -9, 7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values_from_source():
    assert itoa(-9) == "-9"
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")


def test_split_single_word():
    assert split("hello!", " ") == ["hello!"]


def test_split_drops_empty_words():
    assert split("  a  bc d ", " ") == ["a", "bc", "d"]
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_join_invariant():
    words = split("one,two,,three,", ",")
    assert ",".join(words) == "one,two,three"
    assert all(words)


def test_split_requires_single_char():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_and_strrchr():
    text = "banana"
    assert strchr(text, "a") == text.index("a")
    assert strrchr(text, "a") == text.rindex("a")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_search_for_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strdup_equal_copy():
    original = "Hola Josu que tal"
    assert strdup(original) == original


def test_striteri_modifies_in_place():
    buf = list("abc")
    result = striteri(buf, lambda i, ch: ch.upper() if i != 1 else None)
    assert result is buf
    assert buf == ["A", "b", "C"]


def test_striteri_stops_at_nul():
    buf = list("ab\0cd")
    seen = []
    striteri(buf, lambda i, ch: seen.append(i))
    assert seen == [0, 1]


def test_striteri_bytearray():
    buf = bytearray(b"xyz")
    striteri(buf, lambda i, b: b - 32)
    assert buf == bytearray(b"XYZ")


def test_strmapi_passes_indexes():
    assert strmapi("abc", lambda i, ch: str(i)) == "012"
    assert strmapi("MiXeD", lambda i, ch: ch.lower()) == "MiXeD".lower()


def test_strjoin():
    assert strjoin("Hola ", "Josu") == "Hola Josu"
    assert strjoin("", "") == ""


@pytest.mark.parametrize(
    "first, second, n",
    [("abc", "abd", 2), ("abc", "abc", 10), ("", "", 5), ("abc", "xyz", 0)],
)
def test_strncmp_equal(first, second, n):
    assert strncmp(first, second, n) == 0


def test_strncmp_signs():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "ab", 3) > 0
    assert strncmp("ab", "abc", 3) < 0


def test_strncmp_high_char_against_empty():
    assert strncmp("\x80", "\0", 1) > 0
    assert strncmp("\x80", "", 1) == ord("\x80")


def test_strncmp_antisymmetric():
    assert strncmp("hello", "help", 5) == -strncmp("help", "hello", 5)


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_empty_needle():
    assert strnstr("Hola Josu que tal", "", 15) == 0


def test_strnstr_within_length():
    hay = "Hola Josu que tal"
    assert strnstr(hay, "Josu", 15) == hay.index("Josu")
    assert strnstr(hay, "tal", 15) is None
    assert strnstr(hay, "tal", len(hay)) == hay.index("tal")
    assert strnstr(hay, "Josu", 8) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strtrim_all_removed():
    assert strtrim("abababababbbaa", "ab") == ""


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("", "ab") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr_from_source():
    assert substr("Hola Josu que tal", 3, 20) == "a Josu que tal"


def test_substr_bounds():
    text = "Hola Josu que tal"
    assert substr(text, 0, 4) == "Hola"
    assert substr(text, len(text), 5) == ""
    assert substr(text, len(text) + 10, 5) == ""
    assert len(substr(text, 2, 3)) == 3


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)