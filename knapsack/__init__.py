# knapsack/__init__.py
'''
Dynamic programming solvers for the 0-1, unbounded and multiple knapsack problems.
'''

from knapsack.exceptions import InvalidArgumentError, InstanceFormatError
from knapsack.solvers.classic.items import Item, BoundedItem
from knapsack.solvers.classic.algorithms import (
    solve_01,
    solve_unbounded,
    solve_multiple_naive,
    solve_multiple_optimized,
    binary_split,
    expand_bounded_items,
    knapsack_table_with_trace,
)

__version__ = "0.1.0"
