"""Interval scheduling, room booking, matching and basket-filling problems."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections import defaultdict
from collections.abc import Iterable, Sequence


class MaxSegmentTree:
    """Segment tree over integers answering "leftmost value at least x" queries."""

    def __init__(self, values: Sequence[int]) -> None:
        self._size = len(values)
        self._tree = [0] * (4 * max(self._size, 1))
        if self._size:
            self._build(1, 0, self._size - 1, values)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, lo: int, hi: int, values: Sequence[int]) -> None:
        if lo == hi:
            self._tree[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def _update(self, node: int, lo: int, hi: int, index: int, value: int) -> None:
        if lo == hi:
            self._tree[node] = value
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * node, lo, mid, index, value)
        else:
            self._update(2 * node + 1, mid + 1, hi, index, value)
        self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def update(self, index: int, value: int) -> None:
        """Set the element at ``index`` to ``value``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for {self._size} elements")
        self._update(1, 0, self._size - 1, index, value)

    def first_at_least(self, value: int) -> int:
        """Index of the leftmost element that is at least ``value``, or -1."""
        if not self._size or self._tree[1] < value:
            return -1
        node, lo, hi = 1, 0, self._size - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if self._tree[2 * node] >= value:
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1
        return lo


def max_events(events: Iterable[Sequence[int]]) -> int:
    """Most events attendable, one per day, each on a day inside its range."""
    ends_by_start: defaultdict[int, list[int]] = defaultdict(list)
    for start, end in events:
        ends_by_start[start].append(end)
    if not ends_by_start:
        return 0
    first_day = min(ends_by_start)
    last_day = max(end for ends in ends_by_start.values() for end in ends)

    open_ends: list[int] = []
    attended = 0
    for day in range(first_day, last_day + 1):
        while open_ends and open_ends[0] < day:
            heapq.heappop(open_ends)
        for end in ends_by_start.get(day, ()):
            heapq.heappush(open_ends, end)
        if open_ends:
            heapq.heappop(open_ends)
            attended += 1
    return attended


def max_value(events: Iterable[Sequence[int]], k: int) -> int:
    """Largest total value from at most ``k`` non-overlapping (start, end, value) events."""
    ordered = sorted(tuple(event) for event in events)
    starts = [event[0] for event in ordered]
    count = len(ordered)
    following = [bisect_right(starts, end, lo=i) for i, (_, end, _) in enumerate(ordered)]

    best = [0] * (count + 1)
    for _ in range(k):
        current = [0] * (count + 1)
        for i in range(count - 1, -1, -1):
            current[i] = max(ordered[i][2] + best[following[i]], current[i + 1])
        best = current
    return best[0]


def max_total_fruits(fruits: Sequence[Sequence[int]], start_pos: int, k: int) -> int:
    """Most fruit gathered walking at most ``k`` steps from ``start_pos``."""
    best = 0
    window_sum = 0
    left = 0
    for right, (position, amount) in enumerate(fruits):
        window_sum += amount
        while left <= right:
            left_pos = fruits[left][0]
            cost = position - left_pos + min(abs(start_pos - left_pos), abs(start_pos - position))
            if cost <= k:
                break
            window_sum -= fruits[left][1]
            left += 1
        best = max(best, window_sum)
    return best


def most_booked(n: int, meetings: Iterable[Sequence[int]]) -> int:
    """Room that hosts the most meetings, delayed meetings keeping their length."""
    if n < 1:
        raise ValueError("n must be at least 1")
    bookings = [0] * n
    free_at = [(0, room) for room in range(n)]
    heapq.heapify(free_at)
    for start, end in sorted(tuple(meeting) for meeting in meetings):
        while free_at[0][0] < start:
            _, room = heapq.heappop(free_at)
            heapq.heappush(free_at, (start, room))
        time, room = heapq.heappop(free_at)
        bookings[room] += 1
        heapq.heappush(free_at, (time + end - start, room))
    return bookings.index(max(bookings))


def match_players_and_trainers(players: Iterable[int], trainers: Iterable[int]) -> int:
    """Most player-trainer pairs where the trainer's capacity covers the player."""
    available = iter(sorted(trainers))
    matches = 0
    for ability in sorted(players):
        for capacity in available:
            if capacity >= ability:
                matches += 1
                break
        else:
            break
    return matches


def _gaps(event_time: int, start_time: Sequence[int], end_time: Sequence[int]) -> list[int]:
    if not start_time or len(start_time) != len(end_time):
        raise ValueError("start_time and end_time must be non-empty and of equal length")
    inner = [start - end for start, end in zip(start_time[1:], end_time)]
    return [start_time[0], *inner, event_time - end_time[-1]]


def max_free_time(
    event_time: int, k: int, start_time: Sequence[int], end_time: Sequence[int]
) -> int:
    """Longest free stretch after shifting up to ``k`` meetings, order kept."""
    gaps = _gaps(event_time, start_time, end_time)
    width = k + 1
    window = sum(gaps[:width])
    best = window
    for i in range(width, len(gaps)):
        window += gaps[i] - gaps[i - width]
        best = max(best, window)
    return best


def max_free_time_movable(
    event_time: int, start_time: Sequence[int], end_time: Sequence[int]
) -> int:
    """Longest free stretch after moving one meeting anywhere it fits."""
    gaps = _gaps(event_time, start_time, end_time)
    n = len(start_time)
    best_before = list(gaps[:n])
    for i in range(1, n):
        best_before[i] = max(best_before[i - 1], gaps[i])
    best_after = list(gaps[1:])
    for i in range(n - 2, -1, -1):
        best_after[i] = max(best_after[i + 1], gaps[i + 1])

    best = 0
    for i, (start, end) in enumerate(zip(start_time, end_time)):
        duration = end - start
        fits_elsewhere = (i > 0 and best_before[i - 1] >= duration) or (
            i < n - 1 and best_after[i + 1] >= duration
        )
        free = gaps[i] + gaps[i + 1] + (duration if fits_elsewhere else 0)
        best = max(best, free)
    return best


def unplaced_fruits(fruits: Iterable[int], baskets: Sequence[int]) -> int:
    """Fruits left over when each goes into the leftmost free basket large enough."""
    used = [False] * len(baskets)
    unplaced = 0
    for fruit in fruits:
        for i, capacity in enumerate(baskets):
            if not used[i] and capacity >= fruit:
                used[i] = True
                break
        else:
            unplaced += 1
    return unplaced


def unplaced_fruits_fast(fruits: Iterable[int], baskets: Sequence[int]) -> int:
    """Same as :func:`unplaced_fruits`, in O(log n) per fruit."""
    tree = MaxSegmentTree(baskets)
    unplaced = 0
    for fruit in fruits:
        index = tree.first_at_least(fruit)
        if index < 0:
            unplaced += 1
        else:
            tree.update(index, 0)
    return unplaced