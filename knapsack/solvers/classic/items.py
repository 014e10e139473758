# knapsack/solvers/classic/items.py
# -*- coding: utf-8 -*-

'''
Item model shared by every knapsack solver, plus the input checks that run
before any DP table is allocated.
'''

import math
import numbers
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping

from knapsack.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Item:
    """
    One resource unit with a cost and a payoff.

    Attributes
    ----------
    weight : non-negative int, the capacity consumed when the item is taken
    value  : non-negative number, the payoff collected when the item is taken
    """
    weight: int
    value: float


@dataclass(frozen=True)
class BoundedItem(Item):
    """An Item that may be selected at most `count` times."""
    count: int = 1


def _is_integer(x: Any) -> bool:
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def as_items(raw: Iterable[Any]) -> List[Item]:
    """
    Coerces Item instances, {'weight', 'value'} mappings or (weight, value)
    tuples into a list of Items. Item instances (including BoundedItems) are
    kept as they are; a count in a mapping or a third tuple field is ignored.

    Raises:
        InvalidArgumentError: If an entry lacks a weight or a value, or is a
            tuple of the wrong length.
    """
    items = []
    for index, entry in enumerate(raw):
        if isinstance(entry, Item):
            items.append(entry)
            continue
        try:
            if isinstance(entry, Mapping):
                weight, value = entry['weight'], entry['value']
            else:
                fields = tuple(entry)
                weight, value = fields[:2] if len(fields) == 3 else fields
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Item {index}: expected (weight, value[, count]), got {entry!r}.") from e
        items.append(Item(weight=weight, value=value))
    return items


def as_bounded_items(raw: Iterable[Any]) -> List[BoundedItem]:
    """Same as as_items, but every entry must also carry a count."""
    items = []
    for index, entry in enumerate(raw):
        if isinstance(entry, BoundedItem):
            items.append(entry)
            continue
        if isinstance(entry, Item):
            raise InvalidArgumentError(f"Item {index}: {entry!r} has no count; use BoundedItem for the multiple model.")
        try:
            if isinstance(entry, Mapping):
                weight, value, count = entry['weight'], entry['value'], entry['count']
            else:
                weight, value, count = entry
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Item {index}: expected (weight, value, count), got {entry!r}.") from e
        items.append(BoundedItem(weight=weight, value=value, count=count))
    return items


def validate_capacity(capacity: Any) -> None:
    if not _is_integer(capacity):
        raise InvalidArgumentError(f"Capacity must be an integer, got {capacity!r}.")
    if capacity < 0:
        raise InvalidArgumentError(f"Capacity must be non-negative, got {capacity}.")


def validate_items(items: List[Item], bounded: bool = False) -> None:
    """
    Checks every item before a solve starts.

    Args:
        items (List[Item]): The items to check.
        bounded (bool): Whether each item must also carry a valid count.

    Raises:
        InvalidArgumentError: On the first item with a non-integer or negative
            weight, a negative or non-numeric value, or (bounded) a count below 1.
    """
    for index, item in enumerate(items):
        if not _is_integer(item.weight):
            raise InvalidArgumentError(f"Item {index}: weight must be an integer, got {item.weight!r}.")
        if item.weight < 0:
            raise InvalidArgumentError(f"Item {index}: weight must be non-negative, got {item.weight}.")
        if not isinstance(item.value, numbers.Real) or isinstance(item.value, bool):
            raise InvalidArgumentError(f"Item {index}: value must be a real number, got {item.value!r}.")
        if math.isnan(item.value) or item.value < 0:
            raise InvalidArgumentError(f"Item {index}: value must be non-negative, got {item.value}.")
        if bounded:
            count = getattr(item, 'count', None)
            if not _is_integer(count):
                raise InvalidArgumentError(f"Item {index}: count must be an integer, got {count!r}.")
            if count < 1:
                raise InvalidArgumentError(f"Item {index}: count must be at least 1, got {count}.")
