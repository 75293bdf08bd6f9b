"""
Shared pytest fixtures for multiset tests.
"""

import random

import pytest

from avl_multiset.models.multiset import Multiset
from avl_multiset.models.sortedcontainers import MultisetAVLTree


@pytest.fixture
def tree():
    """Provide a fresh empty MultisetAVLTree."""
    return MultisetAVLTree()


@pytest.fixture
def multiset():
    """Provide a fresh Multiset that validates after every mutation."""
    return Multiset(check_invariants=True)


@pytest.fixture
def rng():
    """Provide a seeded random generator for reproducible stress tests."""
    return random.Random(0)


@pytest.fixture
def shuffled_values(rng):
    """Provide 0..999 in a shuffled order."""
    values = list(range(1000))
    rng.shuffle(values)
    return values
