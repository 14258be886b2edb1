import numpy as np
import pytest

from strassen_shared.strassen_module import naive_multiply


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_pair(rng):
    """Factory for a pair of n x n matrices with entries in [-100, 100]."""
    def make(n):
        return rng.uniform(-100.0, 100.0, (n, n)), rng.uniform(-100.0, 100.0, (n, n))
    return make


@pytest.fixture
def reference():
    return naive_multiply
