"""Shortest paths on grids: binary mazes and minimum-effort routes."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

Grid = Sequence[Sequence[int]]
Cell = tuple[int, int]

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _dimensions(grid: Grid) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    return len(grid), len(grid[0])


def _check_cell(cell: Cell, rows: int, cols: int) -> None:
    r, c = cell
    if not (0 <= r < rows and 0 <= c < cols):
        raise IndexError(f"cell {cell} lies outside the grid")


def _neighbours(r: int, c: int, rows: int, cols: int):
    for dr, dc in _DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def shortest_path_binary_maze_bruteforce(grid: Grid, source: Cell, destination: Cell) -> int:
    """Length of the shortest path through 1-cells by trying every path; -1 if none."""
    rows, cols = _dimensions(grid)
    visited: set[Cell] = set()

    def explore(r: int, c: int) -> int | None:
        if not (0 <= r < rows and 0 <= c < cols) or grid[r][c] == 0 or (r, c) in visited:
            return None
        if (r, c) == tuple(destination):
            return 0
        visited.add((r, c))
        best = None
        for dr, dc in _DIRECTIONS:
            dist = explore(r + dr, c + dc)
            if dist is not None and (best is None or dist + 1 < best):
                best = dist + 1
        visited.discard((r, c))
        return best

    result = explore(*source)
    return -1 if result is None else result


def shortest_path_binary_maze(grid: Grid, source: Cell, destination: Cell) -> int:
    """Length of the shortest path through 1-cells by breadth-first search; -1 if none."""
    rows, cols = _dimensions(grid)
    _check_cell(source, rows, cols)
    _check_cell(destination, rows, cols)
    source, destination = tuple(source), tuple(destination)
    if grid[source[0]][source[1]] == 0 or grid[destination[0]][destination[1]] == 0:
        return -1

    queue = deque([(0, source)])
    visited = {source}
    while queue:
        dist, cell = queue.popleft()
        if cell == destination:
            return dist
        for nxt in _neighbours(*cell, rows, cols):
            if grid[nxt[0]][nxt[1]] == 1 and nxt not in visited:
                visited.add(nxt)
                queue.append((dist + 1, nxt))
    return -1


def minimum_effort_bruteforce(heights: Grid) -> int:
    """Minimum over all paths of the largest height step, by exhaustive search."""
    rows, cols = _dimensions(heights)
    target = (rows - 1, cols - 1)
    visited: set[Cell] = set()

    def explore(r: int, c: int) -> int | None:
        if (r, c) == target:
            return 0
        visited.add((r, c))
        best = None
        for nr, nc in _neighbours(r, c, rows, cols):
            if (nr, nc) in visited:
                continue
            step = abs(heights[nr][nc] - heights[r][c])
            rest = explore(nr, nc)
            if rest is not None:
                total = max(step, rest)
                if best is None or total < best:
                    best = total
        visited.discard((r, c))
        return best

    result = explore(0, 0)
    return -1 if result is None else result


def minimum_effort(heights: Grid) -> int:
    """Minimum over all paths of the largest height step, by Dijkstra's algorithm."""
    rows, cols = _dimensions(heights)
    efforts = {(0, 0): 0}
    heap = [(0, 0, 0)]
    while heap:
        effort, r, c = heapq.heappop(heap)
        if effort > efforts[(r, c)]:
            continue
        if (r, c) == (rows - 1, cols - 1):
            return effort
        for nr, nc in _neighbours(r, c, rows, cols):
            new_effort = max(effort, abs(heights[nr][nc] - heights[r][c]))
            if new_effort < efforts.get((nr, nc), float("inf")):
                efforts[(nr, nc)] = new_effort
                heapq.heappush(heap, (new_effort, nr, nc))
    return -1