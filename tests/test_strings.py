import pytest

from pipex.strings import (
    atoi,
    itoa,
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 1, -1, 7, -2147483648, 2147483647, 123456])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi("\t\n\v\f\r 123abc") == 123


def test_atoi_single_signs():
    assert atoi("-17") == -17
    assert atoi("+17") == 17


def test_atoi_multiple_signs_yield_zero():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("") == 0


def test_strchr_finds_first():
    s = "banana"
    assert strchr(s, "a") == s.index("a")
    assert strchr(s, ord("n")) == s.index("n")


def test_strchr_missing_and_nul():
    assert strchr("banana", "z") is None
    assert strchr("banana", "\0") == len("banana")
    assert strchr("banana", 0) == len("banana")


def test_strrchr_finds_last():
    s = "banana"
    assert strrchr(s, "a") == s.rindex("a")
    assert strrchr(s, "z") is None
    assert strrchr(s, "\0") == len(s)


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string_counts_as_nul():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_found_within_limit():
    big = "hello world"
    assert strnstr(big, "world", len(big)) == big.index("world")


def test_strnstr_not_wholly_inside_limit():
    big = "hello world"
    assert strnstr(big, "world", len(big) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strlcpy_truncates():
    assert strlcpy("hello", 3) == ("he", len("hello"))
    assert strlcpy("hello", 100) == ("hello", len("hello"))
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_appends():
    assert strlcat("ab", "cde", 10) == ("abcde", len("abcde"))


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 4)
    assert result == "abc"
    assert total == len("ab") + len("cdef")


def test_strlcat_size_not_larger_than_dest():
    assert strlcat("abcd", "xy", 2) == ("abcd", len("xy") + 2)


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 99, 2) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strtrim():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("  a b  ", "") == "  a b  "


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_nul_separator():
    assert split("abc", "\0") == ["abc"]


def test_split_join_round_trip():
    words = ["one", "two", "three"]
    assert split(",".join(words), ",") == words


def test_strmapi():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"
    assert strmapi("aaa", lambda i, ch: str(i)) == "012"


def test_striteri_mutates_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C"]


def test_striteri_sees_every_index():
    seen = []
    striteri(list("xyz"), lambda i, ch: seen.append((i, ch)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]