"""Graph algorithms: topological ordering, cheapest flights and cloning."""

import math
from collections import deque


class Node:
    """A graph vertex holding a value and its neighbouring nodes."""

    def __init__(self, val=0, neighbors=None):
        self.val = val
        self.neighbors = list(neighbors) if neighbors else []

    def __repr__(self):
        return f"Node({self.val!r})"


def topological_sort(adjacency):
    """Order the vertices of a DAG given as adjacency lists, using depth-first search."""
    graph = [list(children) for children in adjacency]
    visited = [False] * len(graph)
    order = []
    for root in range(len(graph)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            vertex, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(graph[child])))
                    break
            else:
                stack.pop()
                order.append(vertex)
    order.reverse()
    return order


def topological_sort_kahn(adjacency):
    """Order the vertices of a DAG with Kahn's algorithm.

    Vertices on a cycle, or reachable only through one, never reach in-degree
    zero and are left out of the result.
    """
    graph = [list(children) for children in adjacency]
    indegree = [0] * len(graph)
    for children in graph:
        for child in children:
            indegree[child] += 1
    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for child in graph[vertex]:
            indegree[child] -= 1
            if indegree[child] == 0:
                queue.append(child)
    return order


def cheapest_flight(n, flights, src, dst, stops):
    """Cheapest price from src to dst using at most ``stops`` intermediate cities.

    ``flights`` holds (origin, destination, price) triples. Returns None when
    no such route exists.
    """
    routes = [tuple(flight) for flight in flights]
    previous = [math.inf] * n
    previous[src] = 0
    for _ in range(stops + 1):
        current = [math.inf] * n
        current[src] = 0
        for origin, target, price in routes:
            current[target] = min(current[target], previous[origin] + price)
        previous = current
    return None if previous[dst] == math.inf else previous[dst]


def clone_graph(node):
    """Deep-copy the connected graph reachable from node; None stays None."""
    if node is None:
        return None
    copies = {node: Node(node.val)}
    queue = deque([node])
    while queue:
        current = queue.popleft()
        for neighbor in current.neighbors:
            if neighbor not in copies:
                copies[neighbor] = Node(neighbor.val)
                queue.append(neighbor)
            copies[current].neighbors.append(copies[neighbor])
    return copies[node]