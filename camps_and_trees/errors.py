# exceptions raised by the solver; the cli is the only place that turns them into exit codes


class CampsError(Exception):
  pass


class ParseError(CampsError, ValueError):
  pass


class BoardShapeError(CampsError, ValueError):
  pass


class ConfigError(CampsError, ValueError):
  pass


class PlacementError(CampsError):
  """camp would touch another camp (8-neighborhood)."""

  def __init__(self, row, column):
    super().__init__(f"Camps next to each other at row {row}, column {column}")
    self.row = row
    self.column = column


class SolveError(CampsError):
  """board reached a fixed point with unassigned cells left. board is the partial solution."""

  def __init__(self, board, msg="reached steady state"):
    super().__init__(f"{msg}\n{board}")
    self.board = board
    self.msg = msg


class ContradictionError(CampsError):
  """the board admits no legal placement, i.e. the puzzle is inconsistent."""

  def __init__(self, board, msg):
    super().__init__(f"contradiction: {msg}" + (f"\n{board}" if board is not None else ''))
    self.board = board
