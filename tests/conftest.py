import os

os.environ.setdefault("MPLBACKEND", "Agg")

import random
from collections import deque

import pytest


class ZeroRandom:
    """Random source that always picks index 0."""

    def randrange(self, n: int) -> int:
        return 0


def is_spanning_tree(grid) -> bool:
    """True when the open edges connect every cell without a cycle."""
    edges = grid.open_edges()
    if len(edges) != grid.size() - 1:
        return False
    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        for neighbour in grid.linked_neighbours(*cell):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    # Connected with n - 1 edges implies acyclic
    return len(seen) == grid.size()


@pytest.fixture
def zero_rng() -> ZeroRandom:
    return ZeroRandom()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)
