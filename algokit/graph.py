"""Grid reachability and snakes-and-ladders shortest throws."""

from collections import deque

BOARD_END = 30
DIE_FACES = 6

_SOURCE = 1
_DESTINATION = 2
_WALL = 0


def path_exists(grid):
    """Tell whether the destination (2) can be reached from the source (1).

    Moves go up, down, left and right through any non-wall (non-zero) cell.
    When several cells hold 1, the last one in row-major order is the source.
    Raises ValueError when the grid has no source.
    """
    cells = [list(row) for row in grid]
    sources = [
        (i, j) for i, row in enumerate(cells) for j, value in enumerate(row) if value == _SOURCE
    ]
    if not sources:
        raise ValueError("grid has no source cell")
    start = sources[-1]
    seen = {start}
    pending = [start]
    while pending:
        i, j = pending.pop()
        if cells[i][j] == _DESTINATION:
            return True
        for u, v in ((i - 1, j), (i + 1, j), (i, j + 1), (i, j - 1)):
            if (
                0 <= u < len(cells)
                and 0 <= v < len(cells[u])
                and (u, v) not in seen
                and cells[u][v] != _WALL
            ):
                seen.add((u, v))
                pending.append((u, v))
    return False


def snake_and_ladder(jumps):
    """Return the fewest die throws to get from cell 1 to cell 30, or -1.

    ``jumps`` maps a cell to where a snake or ladder on it leads; a mapping or
    an iterable of ``(from, to)`` pairs is accepted.
    """
    targets = dict(jumps)
    queue = deque([(1, 0)])
    seen = {1}
    while queue:
        cell, throws = queue.popleft()
        if cell == BOARD_END:
            return throws
        for landing in range(cell + 1, min(cell + DIE_FACES, BOARD_END) + 1):
            destination = targets.get(landing, landing)
            if destination not in seen:
                seen.add(destination)
                queue.append((destination, throws + 1))
    return -1