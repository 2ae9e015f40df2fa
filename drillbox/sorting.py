"""In-place comparison sorts over mutable sequences of comparable items."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, TypeVar

T = TypeVar("T", bound=MutableSequence[Any])


def bubble_sort(nums: T) -> T:
    """Sort ``nums`` in place by repeatedly bubbling the largest item to the end."""
    n = len(nums)
    for end in range(n - 1, 0, -1):
        for j in range(end):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
    return nums


def binary_search(nums: MutableSequence[Any], target: Any, low: int, high: int) -> int:
    """Return where ``target`` belongs in the ascending slice ``nums[low:high + 1]``.

    If an equal item is found its index is returned; otherwise the index at
    which ``target`` would have to be inserted to keep the slice ordered.
    """
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] < target:
            low = mid + 1
        elif nums[mid] > target:
            high = mid - 1
        else:
            return mid
    return low


def insertion_sort(nums: T) -> T:
    """Sort ``nums`` in place, placing each item into the sorted prefix by binary search."""
    for i in range(1, len(nums)):
        position = binary_search(nums, nums[i], 0, i - 1)
        if position < i:
            nums.insert(position, nums.pop(i))
    return nums


def _merge(nums: MutableSequence[Any], low: int, mid: int, high: int) -> None:
    left = list(nums[low : mid + 1])
    right = list(nums[mid + 1 : high + 1])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    nums[low : high + 1] = merged


def _merge_sort(nums: MutableSequence[Any], low: int, high: int) -> None:
    if low >= high:
        return
    mid = low + (high - low) // 2
    _merge_sort(nums, low, mid)
    _merge_sort(nums, mid + 1, high)
    _merge(nums, low, mid, high)


def merge_sort(nums: T) -> T:
    """Sort ``nums`` in place by recursive halving and merging."""
    _merge_sort(nums, 0, len(nums) - 1)
    return nums


def partition(nums: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``nums[low:high + 1]`` around its last item and return that item's final index.

    Afterwards every item left of the returned index is ``<=`` the pivot and
    every item right of it is ``>`` the pivot.
    """
    pivot = nums[high]
    i = low
    for j in range(low, high):
        if nums[j] <= pivot:
            nums[i], nums[j] = nums[j], nums[i]
            i += 1
    nums[i], nums[high] = nums[high], nums[i]
    return i


def quick_sort(nums: T) -> T:
    """Sort ``nums`` in place by Lomuto partitioning around the last item of each range."""
    ranges = [(0, len(nums) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        pivot_index = partition(nums, low, high)
        ranges.append((low, pivot_index - 1))
        ranges.append((pivot_index + 1, high))
    return nums