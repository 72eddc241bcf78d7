"""Backtracking searches: N queens, boggle words and maze paths."""

_NEIGHBOURS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

_MAZE_MOVES = (("L", 0, -1), ("D", 1, 0), ("U", -1, 0), ("R", 0, 1))


def n_queens(n):
    """Return every placement of ``n`` non-attacking queens.

    Each solution lists, column by column, the 1-based row of the queen.
    Solutions come in lexicographic order; an empty list means none exist.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions = []
    rows = []

    def is_safe(row):
        column = len(rows)
        return all(
            placed != row and abs(placed - row) != column - placed_column
            for placed_column, placed in enumerate(rows)
        )

    def place():
        if len(rows) == n:
            solutions.append([row + 1 for row in rows])
            return
        for row in range(n):
            if is_safe(row):
                rows.append(row)
                place()
                rows.pop()

    place()
    return solutions


def boggle_words(dictionary, board):
    """Return, sorted, the dictionary words that can be traced on ``board``.

    Paths move to any of the eight neighbours and use each cell at most once.
    A word is reported once; once found, a search does not extend it further.
    """
    words = list(dictionary)
    remaining = set(words)
    max_len = max((len(word) for word in words), default=0)
    grid = [list(row) for row in board]
    found = []

    def search(i, j, prefix, visited):
        word = prefix + grid[i][j]
        if len(word) > max_len:
            return
        if word in remaining:
            found.append(word)
            remaining.discard(word)
            return
        visited = visited | {(i, j)}
        for di, dj in _NEIGHBOURS:
            u, v = i + di, j + dj
            if 0 <= u < len(grid) and 0 <= v < len(grid[u]) and (u, v) not in visited:
                search(u, v, word, visited)

    for i, row in enumerate(grid):
        for j in range(len(row)):
            search(i, j, "", frozenset())
    return sorted(found)


def rat_in_maze(maze):
    """Return, sorted, every path from the top-left to the bottom-right cell.

    ``maze`` is a square grid where 1 marks an open cell. Paths are strings of
    the moves L, D, U and R and never revisit a cell.
    """
    size = len(maze)
    if size == 0 or maze[0][0] == 0 or maze[size - 1][size - 1] == 0:
        return []
    paths = []
    visited = set()
    goal = (size - 1, size - 1)

    def walk(i, j, path):
        if (i, j) == goal:
            paths.append(path)
            return
        if 0 <= i < size and 0 <= j < size and maze[i][j] == 1 and (i, j) not in visited:
            visited.add((i, j))
            for step, di, dj in _MAZE_MOVES:
                walk(i + di, j + dj, path + step)
            visited.discard((i, j))

    walk(0, 0, "")
    return sorted(paths)