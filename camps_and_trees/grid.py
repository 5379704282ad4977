# rectangular, row-major table of tiles
#
# cells are addressed as grid[row, column]. every rule mutates a grid in place;
# the only mutator that enforces anything is set_camp(), which keeps camps
# from touching (diagonals included) and grasses the cells around a new camp.

from .config import debug
from .errors import ParseError, PlacementError
from .tile import UNASSIGNED, GRASS, CAMP, TREE, WALL, parse_tile

# up, down, left, right
SQUARE_NEIGHBOR_OFFSETS = [ [-1,0], [1,0], [0,-1], [0,1] ]
ALL_NEIGHBOR_OFFSETS = [ [-1,-1], [-1,0], [-1,1], [0,-1], [0,1], [1,-1], [1,0], [1,1] ]


class Grid:

  def __init__(self, array, width=None):
    self.array = array
    # kept separately so a grid with no rows still knows its column count
    self.width = len(array[0]) if array else (width or 0)
    for row, line in enumerate(array):
      if len(line) != self.width:
        raise ParseError(f"row {row} has {len(line)} tiles but row 0 has {self.width}")

  @classmethod
  def parse(cls, text):
    """parse the one-char-per-cell encoding, rows separated by newlines."""
    if text == '':
      return cls([])
    return cls([[parse_tile(c) for c in line] for line in text.split('\n')])

  @classmethod
  def blank(cls, rows, columns):
    return cls([[UNASSIGNED] * columns for _ in range(rows)], columns)

  def copy(self):
    return Grid([line.copy() for line in self.array], self.width)

  def num_rows(self):
    return len(self.array)

  def num_columns(self):
    return self.width

  def legal_cell(self, row, column):
    return (0 <= row < self.num_rows() and 0 <= column < self.num_columns())

  def get(self, row, column):
    if not self.legal_cell(row, column): return WALL
    return self.array[row][column]

  def __getitem__(self, pos):
    row, column = pos
    return self.array[row][column]

  def __setitem__(self, pos, tile):
    row, column = pos
    self.array[row][column] = tile

  def count_in_row(self, row, tile):
    return sum([1 for cell in self.array[row] if cell == tile])

  def count_in_column(self, column, tile):
    return sum([1 for line in self.array if line[column] == tile])

  def surrounding_tiles(self, row, column):
    return [(row+dy, column+dx) for dy,dx in SQUARE_NEIGHBOR_OFFSETS if self.legal_cell(row+dy, column+dx)]

  def row_cells(self, row):
    return [(row, column) for column in range(self.num_columns())]

  def column_cells(self, column):
    return [(row, column) for row in range(self.num_rows())]

  def set_camp(self, row, column):
    """place a camp and grass every unassigned cell around it.

    raises PlacementError (grid untouched) if a camp already sits in the
    3x3 block centered on (row, column).
    """
    if self.get(row, column) == CAMP:
      raise PlacementError(row, column)
    for dy,dx in ALL_NEIGHBOR_OFFSETS:
      if self.get(row+dy, column+dx) == CAMP:
        raise PlacementError(row, column)
    self.array[row][column] = CAMP
    for dy,dx in ALL_NEIGHBOR_OFFSETS:
      if self.get(row+dy, column+dx) == UNASSIGNED:
        self.array[row+dy][column+dx] = GRASS

  def place_camp(self, row, column, msg=None):
    self.set_camp(row, column)
    debug(f"placed  camp on {row:2},{column:2}{(': '+msg) if msg else ''}")
    return True

  def place_grass(self, row, column, msg=None):
    self.array[row][column] = GRASS
    debug(f"placed grass on {row:2},{column:2}{(': '+msg) if msg else ''}")
    return True

  def is_solved(self):
    for line in self.array:
      if UNASSIGNED in line:
        return False
    return True

  def frac_filled(self):
    numtrees,numfills = 0,0
    for line in self.array:
      for cell in line:
        if cell == TREE:
          numtrees += 1
        elif cell != UNASSIGNED:
          numfills += 1
    open_cells = self.num_rows() * self.num_columns() - numtrees
    if open_cells == 0: return 1.0
    return (1.0*numfills) / open_cells

  def __eq__(self, other):
    if not isinstance(other, Grid):
      return NotImplemented
    return (self.array, self.width) == (other.array, other.width)

  def __str__(self):
    return '\n'.join([''.join(line) for line in self.array])

  def __repr__(self):
    return f"Grid.parse({str(self)!r})"
