"""Maximum flow through a capacity matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _augmenting_parents(residual: list[list[int]], source: int) -> dict[int, int | None]:
    parents: dict[int, int | None] = {source: None}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, capacity in enumerate(residual[u]):
            if v not in parents and capacity > 0:
                parents[v] = u
                queue.append(v)
    return parents


def ford_fulkerson(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Return the maximum flow from ``source`` to ``sink``.

    Augmenting paths are found breadth-first over the residual capacities.
    The capacity matrix itself is left unchanged.
    """
    size = len(capacity)
    if any(len(row) != size for row in capacity):
        raise ValueError("capacity must be a square matrix")
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise IndexError(f"vertex {vertex} out of range for {size} vertices")
    if source == sink:
        raise ValueError("source and sink must differ")

    residual = [list(row) for row in capacity]
    max_flow = 0
    while True:
        parents = _augmenting_parents(residual, source)
        if sink not in parents:
            return max_flow
        path: list[tuple[int, int]] = []
        v = sink
        while v != source:
            u = parents[v]
            assert u is not None
            path.append((u, v))
            v = u
        path_flow = min(residual[u][v] for u, v in path)
        for u, v in path:
            residual[u][v] -= path_flow
            residual[v][u] += path_flow
        max_flow += path_flow