from knapsack.solvers.classic.algorithms import (
    binary_split,
    expand_bounded_items,
    solve_01,
    solve_multiple_naive,
    solve_multiple_optimized,
    solve_unbounded,
)
from knapsack.solvers.classic.items import BoundedItem, Item
