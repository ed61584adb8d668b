# ffdh/core/selector.py
"""Function subset selection"""

import logging
import math
from typing import Iterable, Sequence, Tuple

from ..api.exceptions import (
    NoSelectionCriteriaError,
    InvalidBatchCountError,
    InvalidBatchIndexError,
)
from ..constants import MAX_BATCHES, DEFAULT_NAMESPACE_PREFIX, NAME_SEPARATOR
from ..models.selection import SelectionMode, SearchMode, BatchMode

logger = logging.getLogger(__name__)


def validate_batch_mode(mode: BatchMode) -> None:
    """
    Check batch parameters before any selection runs

    Raises:
        InvalidBatchCountError: If total_batches is outside 1..MAX_BATCHES
        InvalidBatchIndexError: If batch_index is outside 1..total_batches
    """
    if not 1 <= mode.total_batches <= MAX_BATCHES:
        raise InvalidBatchCountError(mode.total_batches)
    if not 1 <= mode.batch_index <= mode.total_batches:
        raise InvalidBatchIndexError(mode.batch_index, mode.total_batches)


def batch_bounds(count: int, mode: BatchMode) -> Tuple[int, int]:
    """
    Slice bounds of one batch

    The list is cut into contiguous batches of ceil(count / total_batches)
    names. The last batch may be shorter and trailing batches may be empty.

    Args:
        count: Number of functions in the manifest
        mode: Validated batch mode

    Returns:
        (start, end) with end exclusive and both clamped to count
    """
    batch_size = math.ceil(count / mode.total_batches)
    start = min(batch_size * (mode.batch_index - 1), count)
    end = min(start + batch_size, count)
    return start, end


def search_functions(functions: Sequence[str], mode: SearchMode) -> Tuple[str, ...]:
    """Names matching the prefix and/or suffix, in manifest order"""
    if not mode.has_criteria:
        raise NoSelectionCriteriaError()
    return tuple(name for name in functions if mode.matches(name))


def batch_functions(functions: Sequence[str], mode: BatchMode) -> Tuple[str, ...]:
    """One contiguous batch of names, in manifest order"""
    validate_batch_mode(mode)
    start, end = batch_bounds(len(functions), mode)
    logger.debug(
        f"Batch size: {math.ceil(len(functions) / mode.total_batches)}, "
        f"returning [{start}:{end}] of {len(functions)}"
    )
    return tuple(functions[start:end])


def select(functions: Sequence[str], mode: SelectionMode) -> Tuple[str, ...]:
    """
    Compute the ordered subset of functions to deploy

    Args:
        functions: Function names in manifest order
        mode: SearchMode or BatchMode

    Returns:
        Selected names; may be empty

    Raises:
        SelectionError: On missing criteria or invalid batch parameters
    """
    if not isinstance(mode, (BatchMode, SearchMode)):
        raise TypeError(f"Unsupported selection mode: {type(mode).__name__}")

    logger.debug(f"Selecting functions ({mode.describe()})")

    if isinstance(mode, BatchMode):
        selected = batch_functions(functions, mode)
    else:
        selected = search_functions(functions, mode)

    logger.info(f"Selected {len(selected)} of {len(functions)} function(s)")
    return selected


def format_only_argument(names: Iterable[str],
                         namespace_prefix: str = DEFAULT_NAMESPACE_PREFIX) -> str:
    """
    Build the deploy scoping argument

    Example:
        format_only_argument(['a', 'b']) -> 'functions:a,functions:b'
    """
    return NAME_SEPARATOR.join(f"{namespace_prefix}:{name}" for name in names)
