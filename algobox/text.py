"""String puzzles: zigzag layout, searching, dominoes, scoring and character games."""

from __future__ import annotations

from collections.abc import Sequence

_VOWELS = frozenset("aeiou")


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    row = 0
    step = 0 if num_rows == 1 else -1
    for char in s:
        rows[row].append(char)
        if row in (0, num_rows - 1):
            step = -step
        row += step
    return "".join("".join(chars) for chars in rows)


def find_substring(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def push_dominoes(dominoes: str) -> str:
    """Final state of a row of dominoes pushed left ('L') and right ('R')."""
    n = len(dominoes)
    forces = [0] * n

    force = 0
    for i, state in enumerate(dominoes):
        if state == "R":
            force = n
        elif state == "L":
            force = 0
        else:
            force = max(force - 1, 0)
        forces[i] += force

    force = 0
    for i in reversed(range(n)):
        state = dominoes[i]
        if state == "L":
            force = n
        elif state == "R":
            force = 0
        else:
            force = max(force - 1, 0)
        forces[i] -= force

    return "".join("R" if f > 0 else "L" if f < 0 else "." for f in forces)


def maximum_69_number(num: int) -> int:
    """Largest number reachable by turning at most one digit 6 into a 9."""
    return int(str(num).replace("6", "9", 1))


def _remove_pairs(chars: Sequence[str], gain: int) -> tuple[list[str], int]:
    """Greedily drop every 'b' that follows an 'a' on the stack."""
    stack: list[str] = []
    total = 0
    for char in chars:
        if char == "b" and stack and stack[-1] == "a":
            stack.pop()
            total += gain
        else:
            stack.append(char)
    return stack, total


def maximum_gain(s: str, x: int, y: int) -> int:
    """Best score from removing "ab" (worth ``x``) and "ba" (worth ``y``)."""
    if x < y:
        return maximum_gain(s[::-1], y, x)
    remaining, first_gain = _remove_pairs(s, x)
    _, second_gain = _remove_pairs(remaining[::-1], y)
    return first_gain + second_gain


def make_fancy_string(s: str) -> str:
    """Delete characters so that no three consecutive characters are equal."""
    result: list[str] = []
    for char in s:
        if len(result) < 2 or result[-1] != char or result[-2] != char:
            result.append(char)
    return "".join(result)


def largest_good_integer(num: str) -> str:
    """Largest substring of three equal digits, or an empty string."""
    for digit in "9876543210":
        triplet = digit * 3
        if triplet in num:
            return triplet
    return ""


def is_valid_word(word: str) -> bool:
    """Whether ``word`` has 3+ ASCII letters/digits with a vowel and a consonant."""
    if len(word) < 3:
        return False
    has_vowel = False
    has_consonant = False
    for char in word:
        if char.isascii() and char.isalpha():
            if char.lower() in _VOWELS:
                has_vowel = True
            else:
                has_consonant = True
        elif not (char.isascii() and char.isdigit()):
            return False
    return has_vowel and has_consonant


def kth_character(k: int) -> str:
    """The k-th character (1-based) of the doubling "next letter" word game."""
    if k < 1:
        raise ValueError("k must be at least 1")
    # Each character is shifted once per set bit of its zero-based position.
    shift = bin(k - 1).count("1")
    return chr(ord("a") + shift % 26)


def kth_character_with_operations(k: int, operations: Sequence[int]) -> str:
    """The k-th character when each doubling step copies (0) or shifts (1)."""
    if k < 1:
        raise ValueError("k must be at least 1")
    power = 1
    levels = 0
    while power < k:
        power *= 2
        levels += 1
    if len(operations) < levels:
        raise ValueError(f"at least {levels} operations are needed for k={k}")

    shift = 0
    index = levels
    while power > 1:
        half = power // 2
        if k > half:
            k -= half
            shift += operations[index - 1]
        power = half
        index -= 1
    return chr(ord("a") + shift % 26)