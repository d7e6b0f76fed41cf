"""Shortest paths and minimum spanning trees on weighted undirected graphs."""

from __future__ import annotations

import heapq
from typing import List, Sequence, Set, Tuple

from algokit.disjoint_set import DisjointSet

UNREACHABLE = 10**9

_Adjacency = List[List[Tuple[int, int]]]


def _adjacency(vertex_count: int, edges: Sequence[Sequence[int]]) -> _Adjacency:
    adj: _Adjacency = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        adj[u].append((v, weight))
        adj[v].append((u, weight))
    return adj


def dijkstra(vertex_count: int, edges: Sequence[Sequence[int]], source: int) -> List[int]:
    """Return distances from source over undirected [u, v, w] edges, using a heap.

    Vertices that cannot be reached keep the distance UNREACHABLE.
    """
    adj = _adjacency(vertex_count, edges)
    dist = [UNREACHABLE] * vertex_count
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbour, weight in adj[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return dist


def dijkstra_ordered(
    vertex_count: int, edges: Sequence[Sequence[int]], source: int
) -> List[int]:
    """Return the same distances as dijkstra, keeping one pending entry per vertex."""
    adj = _adjacency(vertex_count, edges)
    dist = [UNREACHABLE] * vertex_count
    dist[source] = 0
    pending: Set[Tuple[int, int]] = {(0, source)}
    while pending:
        entry = min(pending)
        pending.remove(entry)
        distance, node = entry
        for neighbour, weight in adj[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                pending.discard((dist[neighbour], neighbour))
                dist[neighbour] = candidate
                pending.add((candidate, neighbour))
    return dist


def spanning_tree_weight(
    vertex_count: int, adjacency: Sequence[Sequence[Sequence[int]]]
) -> int:
    """Return the total weight of a minimum spanning forest (Kruskal).

    adjacency[i] lists [neighbour, weight] pairs for vertex i.
    """
    edges = sorted(
        (weight, node, neighbour)
        for node, neighbours in enumerate(adjacency[:vertex_count])
        for neighbour, weight in neighbours
    )
    sets = DisjointSet(vertex_count)
    total = 0
    for weight, u, v in edges:
        if sets.find(u) != sets.find(v):
            total += weight
            sets.union_by_size(u, v)
    return total