#!/usr/bin/env python3
"""Tests for the item model, input coercion and validation."""

import dataclasses
import math

import pytest

from knapsack import (
    BoundedItem,
    InvalidArgumentError,
    Item,
    solve_01,
    solve_multiple_naive,
    solve_multiple_optimized,
    solve_unbounded,
)
from knapsack.solvers.classic.items import (
    as_bounded_items,
    as_items,
    validate_capacity,
    validate_items,
)


class TestItemModel:

    def test_items_are_immutable(self):
        item = Item(weight=2, value=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.weight = 5

    def test_bounded_item_is_an_item(self):
        item = BoundedItem(weight=2, value=3, count=4)
        assert isinstance(item, Item)
        assert (item.weight, item.value, item.count) == (2, 3, 4)


class TestCoercion:

    def test_tuples_and_mappings(self):
        items = as_items([(2, 3), {'weight': 4, 'value': 5}, Item(1, 1)])
        assert items == [Item(2, 3), Item(4, 5), Item(1, 1)]

    def test_bounded_tuples_and_mappings(self):
        items = as_bounded_items([(2, 3, 2), {'weight': 4, 'value': 5, 'count': 1}])
        assert items == [BoundedItem(2, 3, 2), BoundedItem(4, 5, 1)]

    def test_bounded_keeps_bounded_items(self):
        item = BoundedItem(2, 3, 2)
        assert as_bounded_items([item])[0] is item

    def test_plain_item_rejected_for_bounded_model(self):
        with pytest.raises(InvalidArgumentError):
            as_bounded_items([Item(2, 3)])

    def test_count_is_ignored_for_plain_items(self):
        items = as_items([(2, 3, 5), {'weight': 4, 'value': 5, 'count': 2}])
        assert items == [Item(2, 3), Item(4, 5)]
        assert solve_01([(2, 3, 1)], 10) == 3

    @pytest.mark.parametrize("entry", [
        (2,),
        (2, 3, 4, 5),
        {'weight': 2},
        7,
    ])
    def test_malformed_plain_entries(self, entry):
        with pytest.raises(InvalidArgumentError, match="Item 1"):
            as_items([(1, 1), entry])

    @pytest.mark.parametrize("entry", [
        (2, 3),
        (2, 3, 4, 5),
        {'weight': 2, 'value': 3},
        None,
    ])
    def test_malformed_bounded_entries(self, entry):
        with pytest.raises(InvalidArgumentError, match="Item 1"):
            as_bounded_items([(1, 1, 1), entry])

    def test_solvers_report_malformed_entries(self):
        with pytest.raises(InvalidArgumentError):
            solve_multiple_naive([{'weight': 2, 'value': 3}], 10)
        with pytest.raises(InvalidArgumentError):
            solve_multiple_optimized([(2, 3)], 10)
        with pytest.raises(InvalidArgumentError):
            solve_unbounded([(2,)], 10)


class TestValidation:

    @pytest.mark.parametrize("item", [
        Item(-1, 3),
        Item(2.5, 3),
        Item(True, 3),
        Item(2, -1),
        Item(2, math.nan),
        Item(2, "3"),
    ])
    def test_invalid_items(self, item):
        with pytest.raises(InvalidArgumentError):
            validate_items([item])

    @pytest.mark.parametrize("count", [0, -2, 1.5, None])
    def test_invalid_counts(self, count):
        with pytest.raises(InvalidArgumentError):
            validate_items([BoundedItem(2, 3, count)], bounded=True)

    def test_error_names_the_offending_item(self):
        with pytest.raises(InvalidArgumentError, match="Item 1"):
            validate_items([Item(1, 1), Item(-1, 1)])

    def test_valid_items_pass(self):
        validate_items([Item(0, 0), Item(3, 2.5)])
        validate_items([BoundedItem(0, 0, 1), BoundedItem(3, 2.5, 7)], bounded=True)

    @pytest.mark.parametrize("capacity", [-1, 2.0, "10", None])
    def test_invalid_capacity(self, capacity):
        with pytest.raises(InvalidArgumentError):
            validate_capacity(capacity)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_capacity(-1)
