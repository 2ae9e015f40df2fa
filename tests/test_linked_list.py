import random

import pytest

from drillbox.linked_list import (
    ListNode,
    format_list,
    from_iterable,
    iter_values,
    main,
    merge_lists,
    sort_list,
)

SOURCE_CASES = [
    [4, 2, 1, 3],
    [1, 2, 3, 4],
    [],
    [1],
    [3, 1, 4, 1, 2],
]


def _nodes(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


@pytest.mark.parametrize("values", SOURCE_CASES)
def test_round_trip(values):
    assert list(iter_values(from_iterable(values))) == values


def test_from_iterable_empty_is_none():
    assert from_iterable([]) is None


def test_from_iterable_accepts_generator():
    head = from_iterable(x for x in (5, 6, 7))
    assert list(iter_values(head)) == [5, 6, 7]


def test_list_node_defaults():
    node = ListNode()
    assert node.val == 0
    assert node.next is None


@pytest.mark.parametrize("values", SOURCE_CASES)
def test_sort_list_source_cases(values):
    head = sort_list(from_iterable(values))
    assert list(iter_values(head)) == sorted(values)


def test_sort_list_random():
    rng = random.Random(99)
    for _ in range(25):
        values = [rng.randint(-20, 20) for _ in range(rng.randint(0, 50))]
        assert list(iter_values(sort_list(from_iterable(values)))) == sorted(values)


def test_sort_list_reuses_nodes():
    head = from_iterable([5, 3, 8, 1])
    original = {id(node) for node in _nodes(head)}
    result = sort_list(head)
    assert {id(node) for node in _nodes(result)} == original


def test_sort_list_none():
    assert sort_list(None) is None


def test_merge_lists_interleaves():
    first = from_iterable([1, 4, 6])
    second = from_iterable([2, 3, 7, 9])
    merged = merge_lists(first, second)
    assert list(iter_values(merged)) == sorted([1, 4, 6, 2, 3, 7, 9])


def test_merge_lists_with_empty_side():
    only = from_iterable([1, 2])
    assert merge_lists(None, only) is only
    assert merge_lists(only, None) is only
    assert merge_lists(None, None) is None


def test_merge_lists_ties_take_second_first():
    first = ListNode(2)
    second = ListNode(2)
    merged = merge_lists(first, second)
    assert merged is second
    assert merged.next is first


def test_format_list():
    assert format_list(from_iterable([4, 2, 1, 3])) == "4 -> 2 -> 1 -> 3"


def test_format_list_single_and_empty():
    assert format_list(from_iterable([1])) == "1"
    assert format_list(None) == ""


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Original list: (empty)" in out
    sorted_lines = [line for line in out.splitlines() if line.startswith("Sorted list:")]
    assert len(sorted_lines) == len(SOURCE_CASES)
    assert sorted_lines[0] == "Sorted list: " + format_list(from_iterable(sorted([4, 2, 1, 3])))
    assert sorted_lines[2] == "Sorted list: "


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])