# line-by-line backtracking: enumerate every legal way to place the camps a
# row (or column) still needs, then keep whatever all of those ways agree on.
#
# the snapshot compared is the whole grid, so grass forced into the
# neighboring rows/columns by a placement counts too.

from .errors import ContradictionError, PlacementError
from .tile import UNASSIGNED


def possibilities(grid, line, count):
  """every grid reachable by placing exactly `count` camps on unassigned cells of `line`.

  `line` is an ordered list of (row, column). placements go through
  set_camp(), so touching camps are pruned as soon as they're tried. a
  negative count (line already over its sum) has no possibilities.
  """
  found = []
  # (grid so far, camps still to place, next index into line)
  stack = [(grid, count, 0)]
  while stack:
    current, remaining, index = stack.pop()
    if remaining == 0:
      found.append(current)
      continue
    if remaining < 0 or remaining > len(line) - index:
      continue # not enough room left
    row, column = line[index]
    # don't assign here
    stack.append((current, remaining, index + 1))
    if current[row, column] == UNASSIGNED:
      # try assigning here
      attempt = current.copy()
      try:
        attempt.set_camp(row, column)
      except PlacementError:
        continue
      stack.append((attempt, remaining - 1, index + 1))
  return found


def intersection(possibilities, board=None):
  """Find the intersection of all possibilities.

  a cell keeps its value if it is the same in every possibility, otherwise
  it is unassigned. no possibilities at all means the board is inconsistent.
  """
  if len(possibilities) == 0:
    raise ContradictionError(board, "no legal camp placement for a row/column")
  grid = possibilities[0].copy()
  for other in possibilities[1:]:
    for row in range(grid.num_rows()):
      for column in range(grid.num_columns()):
        if grid[row, column] != other[row, column]:
          grid[row, column] = UNASSIGNED
  return grid


def process_line(board, line, count):
  new_grid = intersection(possibilities(board.grid, line, count), board)
  changed = (new_grid != board.grid)
  board.grid = new_grid
  return changed


def process_intersections(board, changed=False):
  """Loop through every possibility for each row and column and apply their intersections.

  a column can narrow a row that was already processed, so the whole
  sweep repeats until it changes nothing.
  """
  while True:
    swept = False
    for row in range(len(board.rows)):
      swept |= process_line(board, board.row_cells(row), board.camps_left_in_row(row))
    for column in range(len(board.columns)):
      swept |= process_line(board, board.column_cells(column), board.camps_left_in_column(column))
    if not swept:
      return changed
    changed = True
