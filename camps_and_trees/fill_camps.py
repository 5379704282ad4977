from .errors import ContradictionError, PlacementError
from .tile import UNASSIGNED, CAMP


def fill_camps(board, changed=False):
  """Fill rows and columns with camps where the unassigned cells are exactly what's left.

  e.g. rows=[2,0,2] columns=[2,0,2] turns " T \\nT-T\\n T " into "CTC\\nT-T\\nCTC".
  cells grassed by a camp placed earlier in the same line are skipped. grass
  from a column's camps can complete a row (and vice versa), so the passes
  repeat until neither places anything.
  """
  while True:
    placed = False
    for row in range(len(board.rows)):
      if board.count_in_row(row, UNASSIGNED) + board.count_in_row(row, CAMP) == board.rows[row]:
        for row_, column in board.row_cells(row):
          if board[row_, column] == UNASSIGNED:
            placed |= _place(board, row_, column, f"fill_camps row {row}")
    for column in range(len(board.columns)):
      if board.count_in_column(column, UNASSIGNED) + board.count_in_column(column, CAMP) == board.columns[column]:
        for row, column_ in board.column_cells(column):
          if board[row, column_] == UNASSIGNED:
            placed |= _place(board, row, column_, f"fill_camps col {column}")
    if not placed:
      return changed
    changed = True


def _place(board, row, column, msg):
  try:
    return board.place_camp(row, column, msg)
  except PlacementError as e:
    raise ContradictionError(board, str(e)) from e
