#!/usr/bin/env python3
"""Tests for the dataset generation script."""

import os

import pytest

from Scripts.generate_data import create_dataset
from knapsack.utils.generator import load_instance_from_file


PARAMS = {
    'correlation': 'uncorrelated',
    'max_weight': 20,
    'max_value': 20,
    'max_count': 3,
    'capacity_ratio': 0.5,
    'seed': 42,
}


def test_n_range_is_inclusive(tmp_path):
    written = create_dataset("Test-Set", str(tmp_path), PARAMS, n_range=(5, 15, 5), num_instances=2)
    assert len(written) == 6
    assert sorted(os.listdir(tmp_path)) == sorted(
        f"instance_n{n}_uncorrelated_{i}.csv" for n in (5, 10, 15) for i in (1, 2)
    )
    items, _ = load_instance_from_file(os.path.join(tmp_path, "instance_n15_uncorrelated_2.csv"))
    assert len(items) == 15


def test_fixed_size(tmp_path):
    written = create_dataset("Fixed", str(tmp_path), PARAMS, n_fixed=4, num_instances=3)
    assert [os.path.basename(p) for p in written] == [
        "instance_n4_uncorrelated_1.csv", "instance_n4_uncorrelated_2.csv", "instance_n4_uncorrelated_3.csv"
    ]


def test_seeded_runs_are_reproducible(tmp_path):
    first = create_dataset("A", str(tmp_path / "a"), PARAMS, n_fixed=6, num_instances=2)
    second = create_dataset("B", str(tmp_path / "b"), PARAMS, n_fixed=6, num_instances=2)
    for path_a, path_b in zip(first, second):
        assert load_instance_from_file(path_a) == load_instance_from_file(path_b)


def test_requires_a_size(tmp_path):
    with pytest.raises(ValueError):
        create_dataset("Empty", str(tmp_path), PARAMS)
