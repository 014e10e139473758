# knapsack/solvers/classic/algorithms.py
# -*- coding: utf-8 -*-


'''
This module provides dynamic programming solvers for three variants of the knapsack problem.
Algorithms list:
- 0/1 Knapsack Problem, with a 2D table and a 1D (rolling array) strategy
- Unbounded (complete) Knapsack Problem, with the same two strategies
- Multiple (bounded) Knapsack Problem, naive enumeration over repetition counts
- Multiple (bounded) Knapsack Problem, binary splitting reduced to 0/1
- A traced 2D table build that logs every row, for inspecting small instances

Every solver returns only the maximum total value, not the chosen items.
'''


# Library imports
import logging
from typing import List, Sequence

from knapsack.exceptions import InvalidArgumentError
from knapsack.solvers.classic.items import (
    BoundedItem,
    Item,
    as_bounded_items,
    as_items,
    validate_capacity,
    validate_items,
)

logger = logging.getLogger(__name__)

STRATEGIES = ("table", "rolling")


def _check_strategy(strategy: str) -> None:
    if strategy not in STRATEGIES:
        raise InvalidArgumentError(f"Unknown strategy '{strategy}'. Expected one of {STRATEGIES}.")


def _log_table(title: str, dp: List[list]) -> None:
    logger.info(f"----- {title} -----")
    logger.info("      " + " ".join(f"{j:>6}" for j in range(len(dp[0]))))
    for r_idx, row in enumerate(dp):
        logger.info(f"Item {r_idx:<2d}| " + " ".join(f"{val:>6}" for val in row))


def _table_01(items: Sequence[Item], capacity: int) -> List[list]:
    n = len(items)
    # dp[i][j] stores the maximum value using the first 'i' items
    # with a knapsack capacity of 'j'.
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        current_weight = items[i - 1].weight
        current_value = items[i - 1].value

        for j in range(capacity + 1):
            # Case 1: Don't include the current item
            dp[i][j] = dp[i - 1][j]

            # Case 2: Include the current item (if capacity allows)
            if j >= current_weight:
                dp[i][j] = max(dp[i][j], current_value + dp[i - 1][j - current_weight])

    return dp


def _knapsack_01_1d(items: Sequence[Item], capacity: int):
    # dp[j] stores the maximum value for a knapsack with capacity 'j'.
    dp = [0] * (capacity + 1)

    for item in items:
        # Iterate through capacities in reverse order so that dp[j - weight]
        # still holds the value from before this item was considered.
        for j in range(capacity, item.weight - 1, -1):
            dp[j] = max(dp[j], item.value + dp[j - item.weight])

    return dp[capacity]


def _table_unbounded(items: Sequence[Item], capacity: int) -> List[list]:
    n = len(items)
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        current_weight = items[i - 1].weight
        current_value = items[i - 1].value

        for j in range(capacity + 1):
            dp[i][j] = dp[i - 1][j]

            # Reads row 'i', not 'i - 1': the item may already be in dp[i][j - weight].
            if j >= current_weight:
                dp[i][j] = max(dp[i][j], current_value + dp[i][j - current_weight])

    return dp


def _knapsack_unbounded_1d(items: Sequence[Item], capacity: int):
    dp = [0] * (capacity + 1)

    for item in items:
        # Forward order: dp[j - weight] may already include this item.
        for j in range(item.weight, capacity + 1):
            dp[j] = max(dp[j], item.value + dp[j - item.weight])

    return dp[capacity]


def _table_multiple(items: Sequence[BoundedItem], capacity: int) -> List[list]:
    n = len(items)
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        weight, value, count = items[i - 1].weight, items[i - 1].value, items[i - 1].count

        for j in range(capacity + 1):
            max_k = count if weight == 0 else min(count, j // weight)
            best = dp[i - 1][j]
            for k in range(1, max_k + 1):
                best = max(best, dp[i - 1][j - k * weight] + k * value)
            dp[i][j] = best

    return dp


def _knapsack_01_2d(items: Sequence[Item], capacity: int):
    return _table_01(items, capacity)[-1][capacity]


def _knapsack_unbounded_2d(items: Sequence[Item], capacity: int):
    return _table_unbounded(items, capacity)[-1][capacity]


_SOLVERS_01 = {"table": _knapsack_01_2d, "rolling": _knapsack_01_1d}
_SOLVERS_UNBOUNDED = {"table": _knapsack_unbounded_2d, "rolling": _knapsack_unbounded_1d}


# 0/1 knapsack: every item is taken at most once
def solve_01(items: Sequence, capacity: int, strategy: str = "rolling"):
    """
    Solves the 0/1 knapsack problem.

    Time Complexity: O(n * capacity).
    Space Complexity: O(n * capacity) for "table", O(capacity) for "rolling".

    Args:
        items (Sequence): Items, (weight, value) tuples or {'weight', 'value'} mappings.
        capacity (int): The maximum capacity of the knapsack.
        strategy (str): "table" for the full 2D DP table, "rolling" for a single array.

    Returns:
        The maximum total value that can be obtained (0 for no items).

    Raises:
        InvalidArgumentError: If any item, the capacity or the strategy is invalid.
    """
    items = as_items(items)
    validate_items(items)
    validate_capacity(capacity)
    _check_strategy(strategy)

    logger.debug(f"0/1 knapsack: n={len(items)}, capacity={capacity}, strategy={strategy}")
    return _SOLVERS_01[strategy](items, capacity)


# Unbounded (complete) knapsack: every item may be taken any number of times
def solve_unbounded(items: Sequence, capacity: int, strategy: str = "rolling"):
    """
    Solves the unbounded knapsack problem.

    The two strategies differ from solve_01 only in where the "take" branch
    reads from, which is what allows an item to be repeated.

    Args:
        items (Sequence): Items, (weight, value) tuples or {'weight', 'value'} mappings.
        capacity (int): The maximum capacity of the knapsack.
        strategy (str): "table" or "rolling".

    Returns:
        The maximum total value that can be obtained.

    Raises:
        InvalidArgumentError: On invalid input, or for a zero-weight item with a
            positive value, since its optimum has no upper bound.
    """
    items = as_items(items)
    validate_items(items)
    validate_capacity(capacity)
    _check_strategy(strategy)
    for index, item in enumerate(items):
        if item.weight == 0 and item.value > 0:
            raise InvalidArgumentError(
                f"Item {index} has zero weight and positive value; the unbounded optimum is infinite."
            )

    logger.debug(f"Unbounded knapsack: n={len(items)}, capacity={capacity}, strategy={strategy}")
    return _SOLVERS_UNBOUNDED[strategy](items, capacity)


# Multiple (bounded) knapsack, enumerating every repetition count
def solve_multiple_naive(items: Sequence, capacity: int):
    """
    Solves the multiple knapsack problem by trying every feasible count k of
    each item: dp[i][j] = max over k of dp[i-1][j - k*weight] + k*value.

    Time Complexity: O(n * capacity * K), K being the largest count.
    Space Complexity: O(n * capacity).

    Args:
        items (Sequence): BoundedItems, (weight, value, count) tuples or mappings.
        capacity (int): The maximum capacity of the knapsack.

    Returns:
        The maximum total value that can be obtained.
    """
    items = as_bounded_items(items)
    validate_items(items, bounded=True)
    validate_capacity(capacity)

    logger.debug(f"Multiple knapsack (naive): n={len(items)}, capacity={capacity}")
    return _table_multiple(items, capacity)[-1][capacity]


def binary_split(count: int) -> List[int]:
    """
    Splits a count into batch sizes 1, 2, 4, ... plus a remainder, so that
    every integer in [0, count] is a sum of a subset of the batches.

    Example: 10 -> [1, 2, 4, 3]
    """
    batches = []
    k = 1
    remaining = count
    while k <= remaining:
        batches.append(k)
        remaining -= k
        k *= 2
    if remaining > 0:
        batches.append(remaining)
    return batches


def expand_bounded_items(items: Sequence) -> List[Item]:
    """
    Replaces every BoundedItem by one single-use Item per binary batch,
    with weight and value scaled by the batch size.
    """
    items = as_bounded_items(items)
    validate_items(items, bounded=True)

    expanded = []
    for item in items:
        for k in binary_split(item.count):
            expanded.append(Item(weight=item.weight * k, value=item.value * k))
    return expanded


# Multiple (bounded) knapsack, reduced to 0/1 by binary splitting
def solve_multiple_optimized(items: Sequence, capacity: int, strategy: str = "rolling"):
    """
    Solves the multiple knapsack problem by expanding each item into
    O(log count) single-use items and delegating to solve_01.
    Returns exactly what solve_multiple_naive returns.

    Time Complexity: O(n * capacity * log K).

    Args:
        items (Sequence): BoundedItems, (weight, value, count) tuples or mappings.
        capacity (int): The maximum capacity of the knapsack.
        strategy (str): Strategy forwarded to solve_01.

    Returns:
        The maximum total value that can be obtained.
    """
    validate_capacity(capacity)
    _check_strategy(strategy)
    expanded = expand_bounded_items(items)

    logger.debug(f"Multiple knapsack (binary split): {len(expanded)} expanded items")
    return solve_01(expanded, capacity, strategy=strategy)


_TABLE_BUILDERS = {"0-1": _table_01, "unbounded": _table_unbounded, "multiple": _table_multiple}


# This function is to inspect how the DP table is filled, row by row.
def knapsack_table_with_trace(items: Sequence, capacity: int, model: str = "0-1"):
    """
    Builds the full DP table of one model and logs it row by row at INFO level.
    Meant for small instances; the timed solvers above never log their tables.

    Args:
        items (Sequence): Items for "0-1"/"unbounded", BoundedItems for "multiple".
        capacity (int): The maximum capacity of the knapsack.
        model (str): "0-1", "unbounded" or "multiple".

    Returns:
        The maximum total value, the same as the matching solve_* function.
    """
    if model not in _TABLE_BUILDERS:
        raise InvalidArgumentError(f"Unknown model '{model}'. Expected one of {tuple(_TABLE_BUILDERS)}.")

    if model == "multiple":
        items = as_bounded_items(items)
        validate_items(items, bounded=True)
    else:
        items = as_items(items)
        validate_items(items)
    validate_capacity(capacity)
    if model == "unbounded" and any(item.weight == 0 and item.value > 0 for item in items):
        raise InvalidArgumentError("A zero-weight item with positive value makes the unbounded optimum infinite.")

    logger.info(f"Items: {[(item.weight, item.value) for item in items]} (weight, value)")
    logger.info(f"Knapsack Capacity: {capacity}")
    dp = _TABLE_BUILDERS[model](items, capacity)
    _log_table(f"{model} DP table", dp)

    logger.info(f"Max Value (dp[{len(items)}][{capacity}]): {dp[-1][capacity]}")
    return dp[-1][capacity]
