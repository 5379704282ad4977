from .tile import UNASSIGNED, TREE


def initialize_grass(board, changed=False):
  """grass every unassigned cell that has no tree next to it - no camp can go there."""
  for row in range(board.num_rows()):
    for column in range(board.num_columns()):
      if board[row, column] != UNASSIGNED: continue
      for r, c in board.surrounding_tiles(row, column):
        if board[r, c] == TREE:
          break
      else: # break not reached i.e. tree not found
        changed |= board.place_grass(row, column, "no adjacent tree")
  return changed
