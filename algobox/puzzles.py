"""Game and probability puzzles: 24 game, soup, blackjack-style draws and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cache
from itertools import combinations, groupby

MOD = 1_000_000_007
_EPSILON = 1e-6
_SOUP_LIMIT = 4800


class FindSumPairs:
    """Counts pairs (one value from each list) summing to a total, with updates."""

    def __init__(self, nums1: Iterable[int], nums2: Iterable[int]) -> None:
        self._nums1 = list(nums1)
        self._nums2 = list(nums2)
        self._counts: Counter[int] = Counter(self._nums2)

    def add(self, index: int, value: int) -> None:
        """Add ``value`` to the element at ``index`` of the second list."""
        old = self._nums2[index]
        new = old + value
        self._counts[old] -= 1
        if self._counts[old] == 0:
            del self._counts[old]
        self._counts[new] += 1
        self._nums2[index] = new

    def count(self, total: int) -> int:
        """Number of index pairs whose values sum to ``total``."""
        return sum(self._counts.get(total - value, 0) for value in self._nums1)


def _combine(a: float, b: float) -> list[float]:
    results = [a + b, a - b, b - a, a * b]
    if abs(b) >= _EPSILON:
        results.append(a / b)
    if abs(a) >= _EPSILON:
        results.append(b / a)
    return results


def _reaches_24(numbers: list[float]) -> bool:
    if not numbers:
        return False
    if len(numbers) == 1:
        return abs(numbers[0] - 24.0) < _EPSILON
    for i, j in combinations(range(len(numbers)), 2):
        rest = [value for k, value in enumerate(numbers) if k not in (i, j)]
        for result in _combine(numbers[i], numbers[j]):
            if _reaches_24([*rest, result]):
                return True
    return False


def judge_point_24(nums: Iterable[int]) -> bool:
    """Whether +, -, * and / over the numbers, with any grouping, can make 24."""
    return _reaches_24([float(value) for value in nums])


def soup_servings(n: int) -> float:
    """Probability that soup A runs out first, plus half that both run out together."""
    if n > _SOUP_LIMIT:
        return 1.0

    @cache
    def probability(a: int, b: int) -> float:
        if a <= 0 and b <= 0:
            return 0.5
        if a <= 0:
            return 1.0
        if b <= 0:
            return 0.0
        return 0.25 * (
            probability(a - 4, b)
            + probability(a - 3, b - 1)
            + probability(a - 2, b - 2)
            + probability(a - 1, b - 3)
        )

    units = (n + 24) // 25
    return probability(units, units)


def new_21_game(n: int, k: int, max_pts: int) -> float:
    """Probability of ending with at most ``n`` points when drawing until ``k``."""
    if k == 0 or n >= k - 1 + max_pts:
        return 1.0
    if max_pts < 1:
        raise ValueError("max_pts must be at least 1")
    answer = 0.0
    dp = [0.0] * (n + 1)
    dp[0] = 1.0
    window = 1.0
    for i in range(1, n + 1):
        dp[i] = window / max_pts
        if i < k:
            window += dp[i]
        else:
            answer += dp[i]
        if i - max_pts >= 0:
            window -= dp[i - max_pts]
    return answer


def earliest_and_latest(n: int, first_player: int, second_player: int) -> list[int]:
    """Earliest and latest rounds in which the two given players can meet."""
    if not 1 <= first_player < second_player <= n:
        raise ValueError("players must satisfy 1 <= first_player < second_player <= n")

    @cache
    def solve(left: int, right: int, players: int) -> tuple[int, int]:
        if left == right:
            return 1, 1
        if left > right:
            left, right = right, left
        half = (players + 1) // 2
        outcomes = [
            solve(i, j, half)
            for i in range(1, left + 1)
            for j in range(left - i + 1, right - i + 1)
            if left + right - players // 2 <= i + j <= half
        ]
        return (
            min(x for x, _ in outcomes) + 1,
            max(y for _, y in outcomes) + 1,
        )

    earliest, latest = solve(first_player, n - second_player + 1, n)
    return [earliest, latest]


def possible_string_count(word: str, k: int) -> int:
    """Originals of length at least ``k`` that long-pressing could turn into ``word``."""
    groups = [sum(1 for _ in run) for _, run in groupby(word)]
    total = 1
    for size in groups:
        total = total * size % MOD
    if k <= len(groups):
        return total

    dp = [0] * k
    dp[0] = 1
    for i, size in enumerate(groups):
        new_dp = [0] * k
        window = 0
        for j in range(i, k):
            new_dp[j] = (new_dp[j] + window) % MOD
            window = (window + dp[j]) % MOD
            if j >= size:
                window = (window - dp[j - size]) % MOD
        dp = new_dp

    invalid = sum(dp) % MOD
    return (total - invalid) % MOD