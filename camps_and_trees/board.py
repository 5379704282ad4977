# the game board: a grid plus the camp count wanted on every row and column
#
# Board wraps its Grid rather than subclassing it - reads and mutators are
# forwarded, so the rules accept either one.

from .associate_trees import associate_trees
from . import config
from .errors import BoardShapeError, SolveError
from .fill_camps import fill_camps
from .fill_zeros import fill_zeros
from .grid import Grid
from .initialize_grass import initialize_grass
from .intersection import process_intersections
from .tile import CAMP

# priority order; any change restarts the scan from the top
RULES = [
  ("put grass on rows/cols with no camps remaining", fill_zeros),
  ("fill camps if unassigned count matches the sum", fill_camps),
  ("intersect every placement per row/col", process_intersections),
  ("grass cells next to trees that already have a camp", associate_trees),
]


class Board:

  def __init__(self, rows, columns, grid):
    if len(rows) != grid.num_rows():
      raise BoardShapeError(f"{len(rows)} row sums but the grid has {grid.num_rows()} rows")
    for row, line in enumerate(grid.array):
      if len(line) != len(columns):
        raise BoardShapeError(f"{len(columns)} column sums but row {row} has {len(line)} tiles")
    self.rows = list(rows)
    self.columns = list(columns)
    self.grid = grid

  @classmethod
  def parse(cls, rows, columns, text):
    return cls(rows, columns, Grid.parse(text))

  @classmethod
  def blank(cls, rows, columns):
    return cls(rows, columns, Grid.blank(len(rows), len(columns)))

  def __getattr__(self, name):
    # only reached for names Board doesn't define itself
    if name == 'grid':
      raise AttributeError(name)
    return getattr(self.grid, name)

  def __getitem__(self, pos):
    return self.grid[pos]

  def __setitem__(self, pos, tile):
    self.grid[pos] = tile

  def copy(self):
    return Board(self.rows, self.columns, self.grid.copy())

  def camps_left_in_row(self, row):
    return self.rows[row] - self.grid.count_in_row(row, CAMP)

  def camps_left_in_column(self, column):
    return self.columns[column] - self.grid.count_in_column(column, CAMP)

  def solve(self):
    """Solve the board in place.

    runs initialize_grass once, then the RULES until none of them changes
    anything. raises SolveError if unassigned cells remain; the board keeps
    whatever was deduced up to that point.
    """
    def accelerator(msg, func):
      if func(self):
        if config.DEBUG:
          config.debug(f"board after accelerator ({100.0*self.grid.frac_filled():.1f}%): {msg}")
          config.debug(format_board(self))
        return True
      return False

    accelerator("grass cells not next to any tree", initialize_grass)
    while True:
      for msg, func in RULES:
        if accelerator(msg, func):
          break
      else: # no rule changed anything
        break
    if not self.grid.is_solved():
      raise SolveError(self)

  def __eq__(self, other):
    if not isinstance(other, Board):
      return NotImplemented
    return (self.rows, self.columns, self.grid) == (other.rows, other.columns, other.grid)

  def __str__(self):
    return str(self.grid)

  def __repr__(self):
    return f"Board.parse({self.rows!r}, {self.columns!r}, {str(self.grid)!r})"


def format_board(board):
  """render with column numbers/sums on top and the row sum before each row."""
  width = board.num_columns()
  lines = []
  lines.append(f"cols:   {''.join([f'{x%10}' for x in range(width)])}")
  lines.append(f"sum*10: {''.join([f'{int(x/10)}'.replace('0',' ') for x in board.columns])}")
  lines.append(f"sum* 1: {''.join([f'{x%10}' for x in board.columns])}")
  for y, line in enumerate(board.grid.array):
    lines.append(f"{y:>4} {board.rows[y]:>2} {''.join(line)}")
  return '\n'.join(lines)
