import pytest

from minitalk.strtools import (
    memchr,
    memcmp,
    split,
    strchr,
    strlcat,
    strlcpy,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


# split

def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_text():
    assert split("", ",") == []


def test_split_only_separators():
    assert split(",,,,", ",") == []


@pytest.mark.parametrize("text", ["a,b,,c", ",lead", "trail,", "none"])
def test_split_words_are_clean_and_rejoin(text):
    words = split(text, ",")
    assert all(word and "," not in word for word in words)
    assert "".join(words) == text.replace(",", "")


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("abc", "")
    with pytest.raises(ValueError):
        split("abc", "ab")


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  abc  ", "") == "  abc  "


def test_strtrim_all_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_keeps_inner_characters():
    assert strtrim("-a-b-", "-") == "a-b"


# substr

def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 42, 1) == ""


def test_substr_length_clamped():
    assert substr("hello", 1, 100) == "ello"


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


# strnstr

def test_strnstr_found_within_limit():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index : index + 3] == "bar"
    assert haystack.find("bar") == index


def test_strnstr_match_must_fit_limit():
    haystack = "foo bar"
    assert strnstr(haystack, "bar", len(haystack) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_zero_limit():
    assert strnstr("abc", "a", 0) is None


def test_strnstr_missing():
    assert strnstr("abcdef", "xyz", 6) is None


# strncmp

def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_limit_hides_difference():
    assert strncmp("abc", "abd", 2) == 0


@pytest.mark.parametrize(
    "first, second",
    [("abc", "abd"), ("ab", "abc"), ("", "a"), ("Apple", "apple")],
)
def test_strncmp_ordering_and_antisymmetry(first, second):
    forward = strncmp(first, second, 10)
    backward = strncmp(second, first, 10)
    assert forward < 0
    assert backward == -forward


def test_strncmp_zero_limit():
    assert strncmp("a", "b", 0) == 0


# memcmp

def test_memcmp_equal():
    assert memcmp(b"\x00\x01\x02", b"\x00\x01\x02", 3) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0
    assert memcmp(b"\x01", b"\xff", 1) == -memcmp(b"\xff", b"\x01", 1)


def test_memcmp_compares_past_nul():
    assert memcmp(b"a\x00b", b"a\x00c", 3) < 0
    assert memcmp(b"a\x00b", b"a\x00c", 2) == 0


def test_memcmp_limit_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


# memchr

def test_memchr_first_occurrence():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 3) is None


def test_memchr_value_is_masked_to_byte():
    assert memchr(b"hello", 256 + ord("h"), 5) == 0


def test_memchr_limit_too_large():
    with pytest.raises(ValueError):
        memchr(b"abc", 0, 4)


# strchr / strrchr

def test_strchr_first_and_strrchr_last():
    text = "hello world"
    first = strchr(text, "o")
    last = strrchr(text, "o")
    assert text[first] == "o" and text[last] == "o"
    assert first < last
    assert "o" not in text[:first]
    assert "o" not in text[last + 1 :]


def test_strchr_nul_gives_length():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", 0) == len("hello")


def test_strchr_missing():
    assert strchr("hello", "z") is None
    assert strrchr("hello", "z") is None


def test_strchr_accepts_code():
    assert strchr("hello", ord("e")) == strchr("hello", "e")
    assert strrchr("hello", ord("l") + 256) == strrchr("hello", "l")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("hello", "he")


# strlcpy

def test_strlcpy_truncates():
    text, length = strlcpy("hello", 3)
    assert text == "he"
    assert length == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_fits():
    assert strlcpy("hello", 64) == ("hello", len("hello"))


# strlcat

def test_strlcat_fits():
    assert strlcat("ab", "cd", 10) == ("abcd", len("abcd"))


def test_strlcat_truncates_to_buffer():
    text, length = strlcat("ab", "cdef", 4)
    assert len(text) == 4 - 1
    assert text.startswith("ab") and "abcdef".startswith(text)
    assert length == len("abcdef")


def test_strlcat_full_destination_unchanged():
    text, length = strlcat("abcd", "xyz", 2)
    assert text == "abcd"
    assert length == 2 + len("xyz")