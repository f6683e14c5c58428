"""Bit tricks, powers and bitwise-OR problems over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007
_MAX_POWER_OF_THREE = 3**19
_POWER_LIMIT = 10**9


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def is_power_of_three(n: int) -> bool:
    """Whether ``n`` is a power of three within the 32-bit range."""
    return n > 0 and _MAX_POWER_OF_THREE % n == 0


def is_power_of_four(n: int) -> bool:
    """Whether ``n`` is a positive power of four."""
    return n > 0 and bin(n).count("1") == 1 and (n - 1) % 3 == 0


def _digit_counts(n: int) -> Counter[str]:
    return Counter(str(n))


def reordered_power_of_2(n: int) -> bool:
    """Whether the digits of ``n`` can be rearranged into a power of two."""
    if n <= 0:
        return False
    wanted = _digit_counts(n)
    power = 1
    while power <= _POWER_LIMIT:
        if _digit_counts(power) == wanted:
            return True
        power <<= 1
    return False


def subarray_bitwise_ors(arr: Sequence[int]) -> int:
    """Number of distinct bitwise ORs over all non-empty subarrays."""
    seen: set[int] = set()
    running = 0
    for end, value in enumerate(arr):
        running |= value
        acc = 0
        for start in range(end, -1, -1):
            acc |= arr[start]
            seen.add(acc)
            if acc == running:
                break
    return len(seen)


def count_max_or_subsets(nums: Iterable[int]) -> int:
    """Number of subsets (the empty one included) whose OR is the maximum OR."""
    counts: Counter[int] = Counter({0: 1})
    best = 0
    for value in nums:
        best |= value
        extended = Counter(counts)
        for acc, ways in counts.items():
            extended[acc | value] += ways
        counts = extended
    return counts[best]


def smallest_subarrays(nums: Sequence[int]) -> list[int]:
    """For each start, the shortest subarray length reaching the maximum suffix OR."""
    last_seen = [-1] * 32
    answer = [0] * len(nums)
    for i in reversed(range(len(nums))):
        length = 1
        for bit in range(32):
            if (nums[i] >> bit) & 1:
                last_seen[bit] = i
            elif last_seen[bit] != -1:
                length = max(length, last_seen[bit] - i + 1)
        answer[i] = length
    return answer


def product_queries(n: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Products, modulo 1e9+7, of ranges of the powers of two that sum to ``n``."""
    powers: list[int] = []
    while n > 0:
        lowest = n & -n
        powers.append(lowest)
        n -= lowest

    answers = []
    for start, end in queries:
        product = 1
        for power in powers[start : end + 1]:
            product = product * power % MOD
        answers.append(product)
    return answers


def number_of_ways(n: int, x: int) -> int:
    """Ways, modulo 1e9+7, to write ``n`` as a sum of distinct x-th powers."""
    ways = [0] * (n + 1)
    ways[0] = 1
    for base in range(1, n + 1):
        power = base**x
        if power > n:
            break
        for total in range(n, power - 1, -1):
            ways[total] = (ways[total] + ways[total - power]) % MOD
    return ways[n]