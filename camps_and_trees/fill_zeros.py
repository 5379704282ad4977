from .tile import UNASSIGNED, CAMP


def fill_zeros(board, changed=False):
  """rows/columns that already hold all their camps get grass on every unassigned cell."""
  for row in range(len(board.rows)):
    numcamps = board.count_in_row(row, CAMP)
    if numcamps == board.rows[row]:
      for column in range(len(board.columns)):
        if board[row, column] == UNASSIGNED:
          changed |= board.place_grass(row, column, f"numcamps={numcamps} rowsum[{row}]={board.rows[row]}")
  for column in range(len(board.columns)):
    numcamps = board.count_in_column(column, CAMP)
    if numcamps == board.columns[column]:
      for row in range(len(board.rows)):
        if board[row, column] == UNASSIGNED:
          changed |= board.place_grass(row, column, f"numcamps={numcamps} colsum[{column}]={board.columns[column]}")
  return changed
