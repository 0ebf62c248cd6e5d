"""Array, search and matrix routines, plus parsers for bracketed number lists."""

from __future__ import annotations

import operator
import re
from bisect import bisect_left, bisect_right
from collections import Counter, deque
from collections.abc import Iterator, MutableSequence, Sequence
from itertools import accumulate, islice

_PIECE_PATTERN = re.compile(r"[\[\],]|[+-]?\d+|\S")


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the given vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] <= height[right]:
            left += 1
        else:
            right -= 1
    return best


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers present in ``nums``."""
    values = set(nums)
    best = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end in values:
            end += 1
        best = max(best, end - start)
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triplets of ``nums`` that sum to zero."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    last = len(ordered) - 1
    for i, first in enumerate(ordered):
        if i > 0 and ordered[i - 1] == first:
            continue
        if first > 0:
            break
        left, right = i + 1, last
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                result.append([first, ordered[left], ordered[right]])
                while left < right and ordered[left] == ordered[left + 1]:
                    left += 1
                while left < right and ordered[right] == ordered[right - 1]:
                    right -= 1
                left += 1
                right -= 1
    return result


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = list(nums[-k:]) + list(nums[:-k]) if k else list(nums)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair summing to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            return [seen[partner], index]
        seen[value] = index
    return []


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    values = list(nums)
    if not values:
        return []
    prefix = accumulate(values[:-1], operator.mul, initial=1)
    suffix = list(accumulate(reversed(values[1:]), operator.mul, initial=1))
    suffix.reverse()
    return [before * after for before, after in zip(prefix, suffix)]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive elements."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size {k} out of range for {len(nums)} elements")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(nums):
        if i >= k and nums[i - k] == window[0]:
            window.popleft()
        while window and window[-1] < value:
            window.pop()
        window.append(value)
        if i >= k - 1:
            result.append(window[0])
    return result


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix whose rows and columns are ascending."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value > target:
            col -= 1
        elif value < target:
            row += 1
        else:
            return True
    return False


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending array, or -1."""
    n = len(nums)
    if n == 0:
        return -1
    if n == 1:
        return 0 if nums[0] == target else -1
    left, right = 0, n - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[0] <= nums[mid]:
            if nums[0] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[n - 1]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    start = bisect_left(nums, target)
    if start == len(nums) or nums[start] != target:
        return [-1, -1]
    return [start, bisect_right(nums, target) - 1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] > target:
            high = mid - 1
        elif nums[mid] < target:
            low = mid + 1
        else:
            return mid
    return low


def trap(height: Sequence[int]) -> int:
    """Units of rain water trapped between bars of the given heights."""
    if len(height) <= 2:
        return 0
    total = 0
    stack = [0]
    for i in range(1, len(height)):
        current = height[i]
        if current < height[stack[-1]]:
            stack.append(i)
        elif current == height[stack[-1]]:
            stack[-1] = i
        else:
            while stack and current > height[stack[-1]]:
                bottom = stack.pop()
                if stack:
                    depth = min(current, height[stack[-1]]) - height[bottom]
                    total += depth * (i - stack[-1] - 1)
            stack.append(i)
    return total


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous slice of ``nums``."""
    if not nums:
        raise ValueError("max_subarray() arg is an empty sequence")
    best = running = nums[0]
    for value in islice(nums, 1, None):
        running = value + running if running > 0 else value
        best = max(best, running)
    return best


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of ``matrix`` read clockwise from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    result: list[int] = []
    left, right = 0, len(matrix[0]) - 1
    up, down = 0, len(matrix) - 1
    while True:
        result.extend(matrix[up][j] for j in range(left, right + 1))
        up += 1
        if up > down:
            break
        result.extend(matrix[i][right] for i in range(up, down + 1))
        right -= 1
        if right < left:
            break
        result.extend(matrix[down][j] for j in range(right, left - 1, -1))
        down -= 1
        if down < up:
            break
        result.extend(matrix[i][left] for i in range(down, up - 1, -1))
        left += 1
        if left > right:
            break
    return result


def subarray_sum(nums: Sequence[int], target: int) -> int:
    """Number of contiguous slices of ``nums`` whose sum equals ``target``."""
    seen = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        count += seen[prefix - target]
        seen[prefix] += 1
    return count


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals into sorted disjoint ones."""
    result: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if result and start <= result[-1][1]:
            result[-1][1] = max(result[-1][1], end)
        else:
            result.append([start, end])
    return result


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column of ``matrix`` that holds a zero."""
    rows = {i for i, row in enumerate(matrix) if 0 in row}
    cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        row[:] = [
            0 if i in rows or j in cols else value for j, value in enumerate(row)
        ]


def _pieces(text: str) -> Iterator[str]:
    for match in _PIECE_PATTERN.finditer(text):
        yield match.group()


def _is_number(piece: str) -> bool:
    return piece.lstrip("+-").isdigit()


def parse_int_list(text: str) -> list[int]:
    """Integers of a text such as ``[1, -2, 3]``; reading stops at a stray character."""
    numbers: list[int] = []
    for piece in _pieces(text):
        if piece in "[],":
            continue
        if not _is_number(piece):
            break
        numbers.append(int(piece))
    return numbers


def parse_matrix(text: str) -> list[list[int]]:
    """Rows of a text such as ``[[1,2],[3,4]]``; reading stops at a stray character."""
    matrix: list[list[int]] = []
    row: list[int] = []
    for piece in _pieces(text):
        if piece in "[,":
            continue
        if piece == "]":
            if row:
                matrix.append(row)
                row = []
        elif _is_number(piece):
            row.append(int(piece))
        else:
            break
    return matrix