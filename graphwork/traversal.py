"""Depth-first traversal, flood fill and capturing surrounded regions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    if n <= 0:
        raise ValueError("graph must have at least one node")
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def dfs_recursive(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Depth-first order from node 0, reported as 1-based labels."""
    adj = _adjacency(n, edges)
    visited = [False] * n
    order: list[int] = []

    def visit(node: int) -> None:
        visited[node] = True
        order.append(node + 1)
        for neighbour in adj[node]:
            if not visited[neighbour]:
                visit(neighbour)

    visit(0)
    return order


def dfs_iterative(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Depth-first order from node 0 using an explicit stack, as 1-based labels."""
    adj = _adjacency(n, edges)
    visited = [False] * n
    order: list[int] = []
    stack = [0]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node + 1)
        stack.extend(nb for nb in reversed(adj[node]) if not visited[nb])
    return order


def _copy(grid: Sequence[Sequence]) -> list[list]:
    return [list(row) for row in grid]


def flood_fill_bruteforce(image: Sequence[Sequence[int]], sr: int, sc: int, new_color: int) -> list[list[int]]:
    """Repaint the region of ``image[sr][sc]`` breadth-first; returns a new image."""
    if not image:
        return []
    result = _copy(image)
    rows, cols = len(result), len(result[0])
    initial = result[sr][sc]
    if initial == new_color:
        return result
    result[sr][sc] = new_color
    queue = deque([(sr, sc)])
    while queue:
        r, c = queue.popleft()
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and result[nr][nc] == initial:
                result[nr][nc] = new_color
                queue.append((nr, nc))
    return result


def flood_fill(image: Sequence[Sequence[int]], sr: int, sc: int, new_color: int) -> list[list[int]]:
    """Repaint the region of ``image[sr][sc]`` depth-first; returns a new image."""
    result = _copy(image)
    initial = result[sr][sc]
    if initial == new_color:
        return result
    rows, cols = len(result), len(result[0])
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < rows and 0 <= c < cols) or result[r][c] != initial:
            continue
        result[r][c] = new_color
        stack.extend([(r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)])
    return result


def fill_surrounded_bruteforce(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Turn every 'O' region not touching the border into 'X', region by region."""
    result = _copy(board)
    rows = len(result)
    cols = len(result[0]) if rows else 0
    if rows <= 2 or cols <= 2:
        return result

    visited = [[False] * cols for _ in range(rows)]
    for i in range(1, rows - 1):
        for j in range(1, cols - 1):
            if result[i][j] != "O" or visited[i][j]:
                continue
            component = []
            touches_border = False
            stack = [(i, j)]
            while stack:
                r, c = stack.pop()
                if not (0 <= r < rows and 0 <= c < cols) or visited[r][c] or board[r][c] == "X":
                    continue
                visited[r][c] = True
                component.append((r, c))
                if r in (0, rows - 1) or c in (0, cols - 1):
                    touches_border = True
                    continue
                stack.extend((r + dr, c + dc) for dr, dc in _DIRECTIONS)
            if not touches_border:
                for r, c in component:
                    result[r][c] = "X"
    return result


def fill_surrounded(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Turn every 'O' region not touching the border into 'X', marking from the border."""
    result = _copy(board)
    rows = len(result)
    cols = len(result[0]) if rows else 0
    if rows == 0 or cols == 0:
        return result

    border = [(0, j) for j in range(cols)] + [(rows - 1, j) for j in range(cols)]
    border += [(i, 0) for i in range(rows)] + [(i, cols - 1) for i in range(rows)]
    stack = [cell for cell in border if result[cell[0]][cell[1]] == "O"]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < rows and 0 <= c < cols) or result[r][c] != "O":
            continue
        result[r][c] = "#"
        stack.extend((r + dr, c + dc) for dr, dc in _DIRECTIONS)

    for row in result:
        for j, value in enumerate(row):
            if value == "O":
                row[j] = "X"
            elif value == "#":
                row[j] = "O"
    return result