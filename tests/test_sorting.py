import functools
import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    selection_sort,
)

_NAMES = ("bubble", "heap", "insertion", "merge", "quick", "selection")


def _sort_with_each(data):
    """Sort ``data`` with every algorithm, keyed by algorithm name."""
    return {
        "bubble": bubble_sort(data),
        "heap": heap_sort(data),
        "insertion": insertion_sort(data),
        "merge": merge_sort(data),
        "quick": quick_sort(data),
        "selection": selection_sort(data),
    }


@functools.total_ordering
class _Keyed:
    def __init__(self, key, label):
        self.key = key
        self.label = label

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key


@pytest.mark.parametrize(
    "data, expected",
    [
        ([], []),
        ([7], [7]),
        ([5, -2, 9, 0, 5, -2, 3], [-2, -2, 0, 3, 5, 5, 9]),
        (["pear", "apple", "fig", "banana"], ["apple", "banana", "fig", "pear"]),
    ],
)
def test_known_inputs(data, expected):
    assert _sort_with_each(data) == dict.fromkeys(_NAMES, expected)


def test_input_is_not_modified():
    data = [3, 1, 2]
    assert _sort_with_each(data) == dict.fromkeys(_NAMES, [1, 2, 3])
    assert data == [3, 1, 2]


@pytest.mark.parametrize(
    "sort", [bubble_sort, heap_sort, insertion_sort, merge_sort, quick_sort, selection_sort]
)
def test_accepts_any_iterable(sort):
    assert sort(x for x in (4, 2, 8, 6)) == [2, 4, 6, 8]


@given(st.lists(st.integers()))
def test_matches_builtin_sorted(data):
    assert _sort_with_each(data) == dict.fromkeys(_NAMES, sorted(data))


@given(st.lists(st.integers(min_value=-50, max_value=50)))
def test_result_is_permutation_in_order(data):
    for result in _sort_with_each(data).values():
        assert sorted(result) == sorted(data)
        assert all(a <= b for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("sort", [bubble_sort, insertion_sort, merge_sort])
def test_stable_sorts_keep_equal_items_in_order(sort):
    items = [_Keyed(k, i) for i, k in enumerate([2, 1, 2, 1, 3, 2])]
    result = sort(items)
    assert [x.label for x in result] == [1, 3, 0, 2, 5, 4]


@pytest.mark.parametrize("sort", [heap_sort, quick_sort, merge_sort])
def test_large_presorted_input(sort):
    data = list(range(3000))
    assert sort(data) == data
    assert sort(reversed(data)) == data


def test_main_bubble_output_format(capsys):
    assert main(["bubble", "3", "1", "2"]) == 0
    assert capsys.readouterr().out == "[1,2,3,]\n"


def test_main_heap_output_format(capsys):
    assert main(["heap", "3", "1", "2"]) == 0
    assert capsys.readouterr().out == "Sorted array is :-\n1 2 3 \n"


def test_main_merge_shows_given_and_sorted(capsys):
    assert main(["merge", "9", "4"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Given array is :-\n9 4 \n")
    assert "Sorted array is :-\n4 9 \n" in out


def test_main_quick_uses_double_spacing(capsys):
    assert main(["quick", "2", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Unsorted Array"
    assert lines[1] == "2  1  "
    assert lines[3] == "1  2  "


def test_main_selection_negative_values(capsys):
    assert main(["selection", "-3", "5", "-7"]) == 0
    assert capsys.readouterr().out == "Sorted array: \n-7 -3 5 \n"


def test_main_reads_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n5 4 6\n"))
    assert main(["insertion"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("enter no of elements : enter the elements :- \n")
    assert out.endswith("4 5 6 \n")


def test_main_bubble_prompts_for_each_value(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 8 3"))
    assert main(["bubble"]) == 0
    out = capsys.readouterr().out
    assert "enter value no 1 : " in out
    assert "enter value no 2 : " in out
    assert out.endswith("[3,8,]\n")


def test_main_rejects_too_many_values_for_bubble(capsys):
    assert main(["bubble"] + [str(i) for i in range(21)]) == 1
    assert "20" in capsys.readouterr().err


def test_main_rejects_count_over_capacity_on_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("101\n"))
    assert main(["heap"]) == 1
    assert "100" in capsys.readouterr().err


def test_main_missing_values_on_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2"))
    assert main(["merge"]) == 1
    assert "missing" in capsys.readouterr().err


def test_main_bad_token_on_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 x"))
    assert main(["quick"]) == 1
    assert "'x'" in capsys.readouterr().err


def test_main_unknown_algorithm_exits():
    with pytest.raises(SystemExit) as info:
        main(["shell", "1"])
    assert info.value.code == 2