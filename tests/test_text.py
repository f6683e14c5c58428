import pytest

from algobox.text import (
    find_substring,
    is_valid_word,
    kth_character,
    kth_character_with_operations,
    largest_good_integer,
    make_fancy_string,
    maximum_69_number,
    maximum_gain,
    push_dominoes,
    zigzag_convert,
)


def _mirror(dominoes):
    swap = {"L": "R", "R": "L", ".": "."}
    return "".join(swap[c] for c in reversed(dominoes))


def test_zigzag_worked_example():
    assert zigzag_convert("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


@pytest.mark.parametrize("text", ["", "A", "ABCDEF", "PAYPALISHIRING"])
def test_zigzag_single_row_is_identity(text):
    assert zigzag_convert(text, 1) == text


def test_zigzag_enough_rows_is_identity():
    text = "ABCDEFG"
    assert zigzag_convert(text, len(text)) == text
    assert zigzag_convert(text, len(text) + 5) == text


@pytest.mark.parametrize("rows", [2, 3, 4, 5])
def test_zigzag_is_permutation(rows):
    text = "THEQUICKBROWNFOX"
    result = zigzag_convert(text, rows)
    assert sorted(result) == sorted(text)
    assert result[0] == text[0]


def test_zigzag_rejects_zero_rows():
    with pytest.raises(ValueError):
        zigzag_convert("abc", 0)


@pytest.mark.parametrize(
    "haystack,needle",
    [("sadbutsad", "sad"), ("mississippi", "issip"), ("aaaaab", "aab")],
)
def test_find_substring_first_occurrence(haystack, needle):
    index = find_substring(haystack, needle)
    assert haystack[index : index + len(needle)] == needle
    assert needle not in haystack[: index + len(needle) - 1]


def test_find_substring_missing_and_empty():
    assert find_substring("leetcode", "leeto") == -1
    assert find_substring("abc", "") == 0
    assert find_substring("", "a") == -1


def test_push_dominoes_worked_example():
    assert push_dominoes(".L.R...LR..L..") == "LL.RR.LLRRLL.."


@pytest.mark.parametrize("state", ["RR.L", ".L.R...LR..L..", "R....", "....L", "R.L", "......"])
def test_push_dominoes_invariants(state):
    result = push_dominoes(state)
    assert len(result) == len(state)
    for before, after in zip(state, result):
        if before != ".":
            assert after == before
    assert push_dominoes(_mirror(state)) == _mirror(result)
    assert push_dominoes(result) == result


def test_push_dominoes_untouched_row():
    assert push_dominoes("....") == "...."


@pytest.mark.parametrize("num", [9669, 9996, 9999, 6, 6666, 969])
def test_maximum_69_number(num):
    result = maximum_69_number(num)
    assert result >= num
    before, after = str(num), str(result)
    assert len(before) == len(after)
    differing = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
    if "6" in before:
        assert differing == [before.index("6")]
        assert after[differing[0]] == "9"
    else:
        assert result == num


def test_maximum_gain_worked_example():
    assert maximum_gain("cdbcbbaaabab", 4, 5) == 19


def test_maximum_gain_symmetric_in_reversal():
    text = "aabbaaxybbaabb"
    assert maximum_gain(text, 4, 5) == maximum_gain(text[::-1], 5, 4)


def test_maximum_gain_single_pairs():
    assert maximum_gain("ab", 3, 1) == 3
    assert maximum_gain("ba", 3, 1) == 1
    assert maximum_gain("xyzbbb", 7, 9) == 0


@pytest.mark.parametrize("text", ["aabbaaxybbaabb", "ababab", "bbbaaa", "cab"])
def test_maximum_gain_upper_bound(text):
    x, y = 4, 5
    pairs = min(text.count("a"), text.count("b"))
    assert 0 <= maximum_gain(text, x, y) <= pairs * max(x, y)


@pytest.mark.parametrize("text", ["leeetcode", "aaabaaaa", "aab", "", "zzzzzzz", "abc"])
def test_make_fancy_string(text):
    result = make_fancy_string(text)
    assert all(not (a == b == c) for a, b, c in zip(result, result[1:], result[2:]))
    chars = iter(text)
    assert all(ch in chars for ch in result)
    assert make_fancy_string(result) == result
    assert set(result) == set(text)


def test_make_fancy_string_keeps_clean_text():
    assert make_fancy_string("aabbaa") == "aabbaa"


def test_largest_good_integer():
    assert largest_good_integer("6777133339") == "777"
    assert largest_good_integer("2300019") == "000"
    assert largest_good_integer("42352338") == ""


def test_is_valid_word_accepts():
    assert is_valid_word("234Adas")
    assert is_valid_word("bcA")


@pytest.mark.parametrize("word", ["b3", "a3$e", "aeiou", "bcd", "123", "ab", "héllo"])
def test_is_valid_word_rejects(word):
    assert not is_valid_word(word)


def test_kth_character_first_is_a():
    assert kth_character(1) == "a"


@pytest.mark.parametrize("k", range(1, 200))
def test_kth_character_matches_all_shift_operations(k):
    assert kth_character(k) == kth_character_with_operations(k, [1] * 10)


@pytest.mark.parametrize("k", [1, 5, 10, 1000])
def test_kth_character_copy_operations_stay_a(k):
    assert kth_character_with_operations(k, [0] * 10) == "a"


def test_kth_character_second_half_is_shifted_first_half():
    ops = [1, 0, 1, 1, 0]
    for k in range(1, 17):
        first = kth_character_with_operations(k, ops)
        second = kth_character_with_operations(k + 16, ops)
        assert (ord(second) - ord(first)) % 26 == ops[4] % 26


def test_kth_character_errors():
    with pytest.raises(ValueError):
        kth_character(0)
    with pytest.raises(ValueError):
        kth_character_with_operations(0, [1])
    with pytest.raises(ValueError):
        kth_character_with_operations(100, [1, 1])