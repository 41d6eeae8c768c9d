"""
Shared pytest fixtures for the ldagibbs test suite.

The two-cluster corpus: documents 0 and 1 use "cat", "dog" and "pet",
documents 2 and 3 use "car" and "bus", and "the" appears in all four.
"""

import pytest

from ldagibbs import DocumentTermMatrix, RandomSource

TERMS = ["the", "cat", "dog", "car", "bus", "pet"]

TWO_CLUSTER_COUNTS = [
    [1, 8, 7, 0, 0, 2],
    [1, 6, 9, 0, 0, 1],
    [1, 0, 0, 8, 7, 0],
    [1, 0, 0, 6, 9, 0],
]


class CountingRandomSource(RandomSource):
    """RandomSource that records how many draws were requested."""

    def __init__(self, seed=None):
        super(CountingRandomSource, self).__init__(seed)
        self.n_calls = 0

    def uniform(self):
        self.n_calls += 1
        return super(CountingRandomSource, self).uniform()

    def randint(self, high, size=None):
        self.n_calls += 1
        return super(CountingRandomSource, self).randint(high, size=size)

    def categorical(self, weights):
        self.n_calls += 1
        return super(CountingRandomSource, self).categorical(weights)


@pytest.fixture
def two_cluster_dtm():
    return DocumentTermMatrix(TWO_CLUSTER_COUNTS, terms=TERMS,
                              doc_names=["pets-a", "pets-b", "roads-a", "roads-b"])


@pytest.fixture
def counting_rng():
    return CountingRandomSource(seed=7)
