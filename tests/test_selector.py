"""Unit tests for ffdh.core.selector."""

from __future__ import annotations

import math

import pytest

from ffdh.api.exceptions import (
    InvalidBatchCountError,
    InvalidBatchIndexError,
    NoSelectionCriteriaError,
)
from ffdh.constants import ErrorKind, MAX_BATCHES
from ffdh.core.selector import (
    batch_bounds,
    batch_functions,
    format_only_argument,
    search_functions,
    select,
    validate_batch_mode,
)
from ffdh.models import BatchMode, SearchMode

NAMES = ("fnAX", "fnB", "other", "fnX", "AfnX", "otherX")


def test_search_prefix_and_suffix() -> None:
    result = select(["fnAX", "fnB", "other"], SearchMode(starts_with="fn", ends_with="X"))
    assert result == ("fnAX",)


def test_search_prefix_only() -> None:
    assert search_functions(NAMES, SearchMode(starts_with="fn")) == ("fnAX", "fnB", "fnX")


def test_search_suffix_only() -> None:
    assert search_functions(NAMES, SearchMode(ends_with="X")) == ("fnAX", "fnX", "AfnX", "otherX")


def test_search_is_case_sensitive() -> None:
    assert search_functions(NAMES, SearchMode(starts_with="FN")) == ()


def test_search_treats_pattern_characters_literally() -> None:
    names = ("a.b", "axb", "a*")
    assert search_functions(names, SearchMode(starts_with="a.")) == ("a.b",)
    assert search_functions(names, SearchMode(ends_with="*")) == ("a*",)


def test_search_keeps_manifest_order_and_duplicates() -> None:
    names = ("zeta", "alpha", "zeta", "beta")
    assert search_functions(names, SearchMode(ends_with="a")) == ("zeta", "alpha", "zeta", "beta")


@pytest.mark.parametrize(
    "mode",
    [SearchMode(), SearchMode(starts_with="", ends_with=""), SearchMode(starts_with=None, ends_with="")],
)
def test_search_without_criteria_is_rejected(mode: SearchMode) -> None:
    with pytest.raises(NoSelectionCriteriaError) as excinfo:
        select(NAMES, mode)
    assert excinfo.value.kind is ErrorKind.NO_SELECTION_CRITERIA


SEARCH_CRITERIA = [
    (start, end)
    for start in (None, "fn", "other", "zzz")
    for end in (None, "X", "B", "")
    if start or end
]


@pytest.mark.parametrize("start, end", SEARCH_CRITERIA)
def test_search_is_sound_and_complete(start: str | None, end: str | None) -> None:
    mode = SearchMode(starts_with=start, ends_with=end)

    result = search_functions(NAMES, mode)

    def predicate(name: str) -> bool:
        return (not start or name.startswith(start)) and (not end or name.endswith(end))

    assert all(predicate(name) for name in result)
    assert [name for name in NAMES if predicate(name)] == list(result)


def test_batch_example_five_names_two_batches() -> None:
    names = ["a", "b", "c", "d", "e"]
    assert select(names, BatchMode(total_batches=2, batch_index=1)) == ("a", "b", "c")
    assert select(names, BatchMode(total_batches=2, batch_index=2)) == ("d", "e")


def test_batch_past_the_end_is_empty() -> None:
    names = ["a", "b", "c", "d"]
    # ceil(4 / 3) == 2 -> [a, b], [c, d], []
    assert batch_functions(names, BatchMode(3, 3)) == ()


def test_more_batches_than_names_gives_empty_batches() -> None:
    names = ["a", "b"]
    assert batch_functions(names, BatchMode(5, 1)) == ("a",)
    assert batch_functions(names, BatchMode(5, 2)) == ("b",)
    assert batch_functions(names, BatchMode(5, 3)) == ()


def test_batch_of_empty_list_is_empty() -> None:
    assert batch_functions([], BatchMode(4, 2)) == ()
    assert batch_bounds(0, BatchMode(4, 2)) == (0, 0)


@pytest.mark.parametrize("total", range(1, MAX_BATCHES + 1))
def test_batches_reconstruct_the_list(total: int) -> None:
    for length in range(0, 41):
        names = [f"fn{i}" for i in range(length)]
        size = math.ceil(length / total)
        joined: list[str] = []
        for index in range(1, total + 1):
            batch = batch_functions(names, BatchMode(total, index))
            assert len(batch) <= size
            joined.extend(batch)
        assert joined == names


@pytest.mark.parametrize("total", [0, -1, MAX_BATCHES + 1, 100])
def test_invalid_batch_count_is_rejected(total: int) -> None:
    with pytest.raises(InvalidBatchCountError) as excinfo:
        validate_batch_mode(BatchMode(total, 1))
    assert excinfo.value.kind is ErrorKind.INVALID_BATCH_COUNT
    assert excinfo.value.error_code == "FF009"


@pytest.mark.parametrize("index", [0, -2, 4])
def test_invalid_batch_index_is_rejected(index: int) -> None:
    with pytest.raises(InvalidBatchIndexError) as excinfo:
        select(["a", "b", "c"], BatchMode(3, index))
    assert excinfo.value.kind is ErrorKind.INVALID_BATCH_INDEX
    assert "Must be 1-3" in str(excinfo.value)


def test_batch_limits_are_inclusive() -> None:
    validate_batch_mode(BatchMode(1, 1))
    validate_batch_mode(BatchMode(MAX_BATCHES, MAX_BATCHES))


def test_format_only_argument_prefixes_and_joins() -> None:
    assert format_only_argument(["a", "b"]) == "functions:a,functions:b"
    assert format_only_argument(["a"], namespace_prefix="fn") == "fn:a"


def test_format_only_argument_of_nothing_is_empty() -> None:
    assert format_only_argument([]) == ""


def test_select_rejects_unknown_modes() -> None:
    with pytest.raises(TypeError, match="Unsupported selection mode: object"):
        select(NAMES, object())  # type: ignore[arg-type]
