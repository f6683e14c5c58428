"""Greedy, sliding-window and counting problems over integer sequences."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


def jump(nums: Sequence[int]) -> int:
    """Fewest jumps from the first to the last index, each at most ``nums[i]`` long."""
    if not nums:
        raise ValueError("nums must not be empty")
    jumps = 0
    farthest = 0
    end = 0
    for i, reach in enumerate(nums[:-1]):
        farthest = max(farthest, i + reach)
        if i == end:
            jumps += 1
            end = farthest
    return jumps


def can_jump(nums: Iterable[int]) -> bool:
    """Whether the last index can be reached from the first."""
    max_reachable = 0
    for i, reach in enumerate(nums):
        if max_reachable < i:
            return False
        max_reachable = max(max_reachable, i + reach)
    return True


def majority_element(nums: Iterable[int]) -> int:
    """The element that occurs more than half the time (Boyer-Moore vote)."""
    candidate: int | None = None
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    if candidate is None:
        raise ValueError("nums must not be empty")
    return candidate


def h_index(citations: Sequence[int]) -> int:
    """Largest h such that at least h papers have at least h citations."""

    def has_h_papers(h: int) -> bool:
        return sum(1 for cited in citations if cited >= h) >= h

    low, high = 0, len(citations)
    while low <= high:
        mid = (low + high) // 2
        if has_h_papers(mid):
            low = mid + 1
        else:
            high = mid - 1
    return high


def four_sum_count(
    nums1: Iterable[int],
    nums2: Iterable[int],
    nums3: Iterable[int],
    nums4: Iterable[int],
) -> int:
    """Number of index tuples whose four values sum to zero."""
    nums2 = list(nums2)
    nums4 = list(nums4)
    pair_sums = Counter(a + b for a in nums1 for b in nums2)
    return sum(pair_sums[-c - d] for c in nums3 for d in nums4)


def total_fruit(fruits: Sequence[int]) -> int:
    """Longest contiguous run holding at most two distinct fruit types."""
    best = 0
    window: Counter[int] = Counter()
    left = 0
    for right, fruit in enumerate(fruits):
        window[fruit] += 1
        while len(window) > 2:
            dropped = fruits[left]
            window[dropped] -= 1
            if window[dropped] == 0:
                del window[dropped]
            left += 1
        best = max(best, right - left + 1)
    return best


def find_lucky(arr: Sequence[int]) -> int:
    """Largest value equal to its own frequency, or -1."""
    counts = Counter(value for value in arr if value <= len(arr))
    for value in range(len(arr), 0, -1):
        if counts[value] == value:
            return value
    return -1


def longest_subarray(nums: Sequence[int]) -> int:
    """Longest run of ones after deleting exactly one element."""
    size = len(nums)
    left = [0] * size
    right = [0] * size
    for i in range(1, size):
        if nums[i - 1] == 1:
            left[i] = left[i - 1] + 1
    for i in range(size - 2, -1, -1):
        if nums[i + 1] == 1:
            right[i] = right[i + 1] + 1
    return max((a + b for a, b in zip(left, right)), default=0)


def maximum_unique_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a contiguous subarray with all elements distinct."""
    prefix = [0, *accumulate(nums)]
    last_end: dict[int, int] = {}
    start = 0
    best = 0
    for end, value in enumerate(nums, start=1):
        start = max(start, last_end.get(value, 0))
        best = max(best, prefix[end] - prefix[start])
        last_end[value] = end
    return best


def minimum_difference(nums: Sequence[int]) -> int:
    """Smallest (first part - second part) after removing a third of 3n numbers."""
    total_len = len(nums)
    if total_len == 0 or total_len % 3:
        raise ValueError("nums must hold a positive multiple of three elements")
    n = total_len // 3

    prefix = [0] * (total_len + 2)
    max_heap: list[int] = []
    running = 0
    for i, value in enumerate(nums[: 2 * n], start=1):
        running += value
        heapq.heappush(max_heap, -value)
        if len(max_heap) > n:
            running += heapq.heappop(max_heap)
        prefix[i] = running

    suffix = [0] * (total_len + 2)
    min_heap: list[int] = []
    running = 0
    for i in range(total_len, n, -1):
        value = nums[i - 1]
        running += value
        heapq.heappush(min_heap, value)
        if len(min_heap) > n:
            running -= heapq.heappop(min_heap)
        suffix[i] = running

    return min(prefix[i] - suffix[i + 1] for i in range(n, 2 * n + 1))


def count_hill_valley(nums: Sequence[int]) -> int:
    """Number of hills and valleys, treating equal neighbours as one."""
    count = 0
    previous = 0
    for current in range(1, len(nums) - 1):
        value, following = nums[current], nums[current + 1]
        if value == following:
            continue
        before = nums[previous]
        if value > before and value > following:
            count += 1
        if value < before and value < following:
            count += 1
        previous = current
    return count


def zero_filled_subarray(nums: Iterable[int]) -> int:
    """Number of subarrays made only of zeros."""
    total = 0
    run = 0
    for value in nums:
        run = run + 1 if value == 0 else 0
        total += run
    return total


def maximum_length_mod(nums: Iterable[int], k: int) -> int:
    """Longest subsequence whose adjacent pair sums share one remainder mod ``k``."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dp = [[0] * k for _ in range(k)]
    for value in nums:
        r = value % k
        for y in range(k):
            dp[r][y] = dp[y][r] + 1
    return max(max(row) for row in dp)


def maximum_length_parity(nums: Iterable[int]) -> int:
    """Longest subsequence whose adjacent pair sums all share one parity."""
    return maximum_length_mod(nums, 2)


def max_subarrays(n: int, conflicting_pairs: Iterable[Sequence[int]]) -> int:
    """Most subarrays of 1..n avoiding every conflict after dropping one pair."""
    conflicts: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in conflicting_pairs:
        conflicts[max(a, b)].append(min(a, b))

    valid = 0
    max_left = 0
    second_max_left = 0
    gains = [0] * (n + 1)
    for right in range(1, n + 1):
        for left in conflicts[right]:
            if left > max_left:
                second_max_left = max_left
                max_left = left
            elif left > second_max_left:
                second_max_left = left
        valid += right - max_left
        gains[max_left] += max_left - second_max_left
    return valid + max(gains)


def max_sum(nums: Sequence[int]) -> int:
    """Largest sum of distinct values kept after deleting any elements."""
    if not nums:
        raise ValueError("nums must not be empty")
    largest = max(nums)
    if largest <= 0:
        return largest
    return sum({value for value in nums if value >= 0})