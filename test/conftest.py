import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from knapsack import BoundedItem, Item


@pytest.fixture
def items01():
    """The four-item 0-1 example, capacity 10."""
    return [Item(2, 3), Item(3, 4), Item(4, 5), Item(5, 8)]


@pytest.fixture
def items_unbounded():
    return [Item(2, 3), Item(3, 4), Item(4, 5)]


@pytest.fixture
def items_multiple():
    return [BoundedItem(2, 3, 2), BoundedItem(3, 4, 3), BoundedItem(4, 5, 1)]


@pytest.fixture
def project_root():
    return PROJECT_ROOT
