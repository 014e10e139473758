# knapsack/utils/generator.py
# -*- coding: utf-8 -*-


'''
This module provides functions to generate knapsack instances and to save and load them as csv files.
'''

import random
from typing import List, Tuple
import os
import csv
import logging

from knapsack.exceptions import InstanceFormatError
from knapsack.solvers.classic.items import BoundedItem

logger = logging.getLogger(__name__)

CORRELATION_TYPES = ['uncorrelated', 'weakly_correlated', 'strongly_correlated', 'subset_sum']


# Function to generate a knapsack instance with one constraint
def generate_knapsack_instance(
    n: int,
    correlation: str = 'uncorrelated',
    max_weight: int = 1000,
    max_value: int = 1000,
    capacity_ratio: float = 0.5,
    max_count: int = 1,
    seed: int = None
) -> Tuple[List[BoundedItem], int]:

    """
    Generate an instance of the knapsack problem.

    Args:
        n (int): Number of items to generate.
        correlation (str): Type of correlation between item values and weights.
            Options: 'uncorrelated', 'weakly_correlated',
                    'strongly_correlated', 'subset_sum'.
        max_weight (int): Maximum weight for a single item.
        max_value (int): Maximum value for a single item (used when uncorrelated).
        capacity_ratio (float): Ratio of knapsack capacity to the total weight of all copies of all items (0.0, 1.0].
        max_count (int): Maximum number of copies of a single item. 1 gives a plain 0-1 instance.
        seed (int, optional): Seed for a private random generator, for reproducible instances.

    Returns:
        Tuple[List[BoundedItem], int]:
            - A list of items.
            - The computed knapsack capacity.
    """

    if correlation not in CORRELATION_TYPES:
        raise ValueError("Correlation type must be one of 'uncorrelated', 'weakly_correlated', 'strongly_correlated', or 'subset_sum'")
    if not (0.0 < capacity_ratio <= 1.0):
        raise ValueError("Capacity ratio must be between 0.0 and 1.0")
    if max_count < 1:
        raise ValueError("max_count must be at least 1")

    rng = random.Random(seed)
    items = []
    total_weight = 0

    for _ in range(n):
        weight = rng.randint(1, max_weight)
        value = 0

        if correlation == 'uncorrelated':
            value = rng.randint(1, max_value)
        elif correlation == 'weakly_correlated':
            # The noise range is around 25% of the maximum value
            noise = int(max_value / 4)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'strongly_correlated':
            # The noise range is around 10% of the maximum value
            noise = int(max_value / 10)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'subset_sum':
            value = weight

        count = rng.randint(1, max_count)
        items.append(BoundedItem(weight=weight, value=value, count=count))
        total_weight += weight * count

    capacity = int(total_weight * capacity_ratio)

    return items, capacity


def save_instance_to_file(items: List[BoundedItem], capacity: int, filename: str):
    """Saves an instance to a csv file. Plain Items are written with count 1."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w', newline='') as f:
        # First line: number of items and capacity
        f.write(f"{len(items)} {capacity}\n")
        writer = csv.writer(f)
        writer.writerow(['value', 'weight', 'count'])
        for item in items:
            writer.writerow([item.value, item.weight, getattr(item, 'count', 1)])

    logger.info(f"Instance successfully saved to {filename}")


def _parse_number(text: str):
    try:
        return int(text)
    except ValueError:
        return float(text)


def load_instance_from_file(filename: str) -> Tuple[List[BoundedItem], int]:
    """
    Loads a knapsack instance from a csv file.
    Assumes first line is 'num_items capacity', then a header row naming the
    'value', 'weight' and optional 'count' columns (in any order), then one row
    per item. A missing count column means count 1.

    Returns:
        Tuple[List[BoundedItem], int]: (items, capacity)

    Raises:
        InstanceFormatError: If the first line, the header row or a data row cannot be parsed.
    """
    items = []

    with open(filename, 'r', newline='') as f:
        # 1. Read meta-data from the first line
        meta_line = f.readline().strip()
        try:
            num_items_str, capacity_str = meta_line.split()
            expected_num_items = int(num_items_str)
            capacity = int(capacity_str)
        except ValueError as e:
            raise InstanceFormatError(f"Invalid header line in '{filename}': {meta_line!r}") from e

        reader = csv.reader(f)

        # 2. Map column names to positions; columns may come in any order
        header = next(reader, None)
        if header is None:
            logger.warning(f"File '{filename}' contains no data rows.")
            header = ['value', 'weight']
        columns = {name.strip(): position for position, name in enumerate(header)}
        missing = [name for name in ('value', 'weight') if name not in columns]
        if missing:
            raise InstanceFormatError(f"Header row in '{filename}' lacks column(s) {missing}: {header}")
        count_column = columns.get('count')

        # 3. Read each data row
        for line_no, row in enumerate(reader, start=3):
            if not row:
                continue
            try:
                value = _parse_number(row[columns['value']])
                weight = int(row[columns['weight']])
                count = 1 if count_column is None else int(row[count_column])
            except (ValueError, IndexError) as e:
                raise InstanceFormatError(f"Invalid row {line_no} in '{filename}': {row}") from e
            items.append(BoundedItem(weight=weight, value=value, count=count))

    # 4. Check that the number of items matches the header
    if len(items) != expected_num_items:
        logger.warning(f"Inconsistent data in '{filename}'. "
                       f"Header specified {expected_num_items} items, but file contained {len(items)} items.")

    logger.debug(f"Instance loaded from {filename} ({len(items)} items).")
    return items, capacity
