"""Island problems on grids: enclaves, counting, online additions, largest island."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from graphwork.disjoint_set import DisjointSet

_FOUR = ((-1, 0), (0, 1), (1, 0), (0, -1))
_EIGHT = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1))


def count_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Number of land cells (1) from which the border cannot be reached."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = {
        (r, c)
        for r in range(rows)
        for c in range(cols)
        if (r in (0, rows - 1) or c in (0, cols - 1)) and grid[r][c] == 1
    }
    queue = deque(seen)
    while queue:
        r, c = queue.popleft()
        for dr, dc in _FOUR:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and grid[nr][nc] == 1 and (nr, nc) not in seen:
                seen.add((nr, nc))
                queue.append((nr, nc))
    return sum(
        1
        for r in range(rows)
        for c in range(cols)
        if grid[r][c] == 1 and (r, c) not in seen
    )


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of islands of '1' cells, joining cells in all eight directions."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    count = 0
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] != "1" or (r, c) in seen:
                continue
            count += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                for dr, dc in _EIGHT:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid[nr][nc] == "1"
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        queue.append((nr, nc))
    return count


def _check_position(r: int, c: int, n: int, m: int) -> None:
    if not (0 <= r < n and 0 <= c < m):
        raise IndexError(f"position ({r}, {c}) lies outside the {n}x{m} grid")


def islands_after_additions_bruteforce(
    n: int, m: int, positions: Iterable[Sequence[int]]
) -> list[int]:
    """Island count after each land addition, recounting the whole grid every time."""
    land: set[tuple[int, int]] = set()
    counts: list[int] = []
    for r, c in positions:
        _check_position(r, c, n, m)
        land.add((r, c))
        seen: set[tuple[int, int]] = set()
        islands = 0
        for cell in land:
            if cell in seen:
                continue
            islands += 1
            seen.add(cell)
            stack = [cell]
            while stack:
                cr, cc = stack.pop()
                for dr, dc in _FOUR:
                    nxt = (cr + dr, cc + dc)
                    if nxt in land and nxt not in seen:
                        seen.add(nxt)
                        stack.append(nxt)
        counts.append(islands)
    return counts


def islands_after_additions(n: int, m: int, positions: Iterable[Sequence[int]]) -> list[int]:
    """Island count after each land addition, tracked with a disjoint set."""
    dsu = DisjointSet(n * m)
    land: set[tuple[int, int]] = set()
    islands = 0
    counts: list[int] = []
    for r, c in positions:
        _check_position(r, c, n, m)
        if (r, c) in land:
            counts.append(islands)
            continue
        land.add((r, c))
        islands += 1
        cell_id = r * m + c
        for dr, dc in _FOUR:
            nr, nc = r + dr, c + dc
            if (nr, nc) in land and dsu.union_by_rank(cell_id, nr * m + nc):
                islands -= 1
        counts.append(islands)
    return counts


def largest_island(grid: Sequence[Sequence[int]]) -> int:
    """Size of the largest island in a square 0/1 grid after turning at most one 0 into 1."""
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    if n == 0:
        return 0
    dsu = DisjointSet(n * n)

    def neighbours(r: int, c: int):
        for dr, dc in _FOUR:
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n:
                yield nr, nc

    for r in range(n):
        for c in range(n):
            if grid[r][c] == 0:
                continue
            for nr, nc in neighbours(r, c):
                if grid[nr][nc] == 1:
                    dsu.union_by_size(r * n + c, nr * n + nc)

    best = max(dsu.component_size(cell) for cell in range(n * n))
    for r in range(n):
        for c in range(n):
            if grid[r][c] == 1:
                continue
            roots = {dsu.find(nr * n + nc) for nr, nc in neighbours(r, c) if grid[nr][nc] == 1}
            best = max(best, 1 + sum(dsu.component_size(root) for root in roots))
    return best