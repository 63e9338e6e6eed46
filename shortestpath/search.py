"""
Generic shortest-path search over an implicit graph.

The graph is never materialized: it is described by a successor function
returning (neighbor, cost) pairs for a node. Nodes only need to be hashable.

Search is a uniform-cost (Dijkstra) sweep with lazy deletion: a node is
pushed again whenever its distance improves and outdated heap entries are
skipped when popped. Several nodes may satisfy the target predicate; the
cheapest one wins.
"""

from typing import Callable, Dict, Hashable, List, Optional, Tuple, TypeVar
import heapq
import itertools

T = TypeVar('T', bound=Hashable)

Successors = Callable[[T], List[Tuple[T, int]]]


def reconstruct_path(
    predecessors: Dict[T, Optional[T]],
    target: T
) -> List[T]:
    """
    Walk predecessor links back from target and return the path in order.

    The start node (the one without a predecessor) is not included, so the
    returned path begins with the first step taken and ends at target.

    Args:
        predecessors: Map node -> predecessor (None for the start node)
        target: Node the path should end at

    Returns:
        List of nodes from the first step to target
    """
    path = []
    node = target
    while predecessors[node] is not None:
        path.append(node)
        node = predecessors[node]
    path.reverse()
    return path


def shortest_path_with_cost(
    start: T,
    is_target: Callable[[T], bool],
    successors: Successors,
    stop_at_first_target: bool = False
) -> Optional[Tuple[List[T], int]]:
    """
    Find the cheapest path from start to any node accepted by is_target.

    All edge costs must be non-negative; this is not checked. successors
    must return a finite list for every node, and the part of the graph
    reachable from start must be finite since the search explores all of it.

    Args:
        start: Start node
        is_target: Predicate accepting destination nodes
        successors: Function returning (neighbor, cost) pairs for a node
        stop_at_first_target: Return as soon as an accepted node is popped
            instead of exhausting the frontier. Gives the same cost, since
            pop order is non-decreasing in distance.

    Returns:
        (path, total_cost) where path excludes start, or None if no accepted
        node is reachable. If start itself is accepted, returns ([], 0).
    """
    distances: Dict[T, int] = {start: 0}
    predecessors: Dict[T, Optional[T]] = {start: None}
    targets: Dict[T, None] = {}

    if is_target(start):
        targets[start] = None

    # Heap entries: (distance, counter, node); counter keeps nodes uncompared
    counter = itertools.count()
    heap = [(0, next(counter), start)]

    while heap:
        dist, _, current = heapq.heappop(heap)

        if dist > distances[current]:
            continue

        if stop_at_first_target and current in targets:
            break

        for neighbor, cost in successors(current):
            if is_target(neighbor):
                targets[neighbor] = None

            new_dist = dist + cost
            if neighbor not in distances or new_dist < distances[neighbor]:
                distances[neighbor] = new_dist
                predecessors[neighbor] = current
                heapq.heappush(heap, (new_dist, next(counter), neighbor))

    if not targets:
        return None

    best = min(targets, key=lambda node: distances[node])
    return reconstruct_path(predecessors, best), distances[best]


def shortest_path(
    start: T,
    is_target: Callable[[T], bool],
    successors: Successors,
    stop_at_first_target: bool = False
) -> Optional[List[T]]:
    """Like shortest_path_with_cost, but returns only the path."""
    found = shortest_path_with_cost(start, is_target, successors, stop_at_first_target)
    if found is None:
        return None
    return found[0]
