# solve a puzzle from stdin:
#
#   printf '1, 0\n1, 0\n T\n  \n' | camps-and-trees
#
# line 1 is the camp count per row, line 2 per column, the rest is the grid
# (' ' unassigned, '-' grass, 'C' camp, 'T' tree).
#
# make a random puzzle, print it in that format and try to solve it:
#
#   SEED=123 SIZE=8x8 DENSITY=0.4 camps-and-trees generate

import sys

from . import config
from .board import Board, format_board
from .errors import CampsError, ParseError, SolveError
from .generator import generate
from .verify import check_solution, does_solution_match, is_one_tree_per_tent


def read_camps(s):
  """split on ',' and parse the pieces as numbers."""
  if s.strip() == '':
    raise ParseError("Row or column descriptors must not be empty")
  camps = []
  for piece in s.split(','):
    try:
      camps.append(int(piece.strip()))
    except ValueError:
      raise ParseError(f"invalid camp count: {piece.strip()!r}") from None
    if camps[-1] < 0:
      raise ParseError(f"camp counts can't be negative: {camps[-1]}")
  return camps


def analyze_stdin(lines):
  """lines should look like [rows, columns, grid lines...]."""
  if len(lines) < 3:
    raise ParseError("Too few lines.  There must be at least 3.")
  rows = read_camps(lines[0])
  columns = read_camps(lines[1])
  return Board.parse(rows, columns, '\n'.join(lines[2:]))


def get_stdin_lines(stream):
  # keep trailing spaces - they're unassigned cells
  return [line.rstrip('\r\n') for line in stream]


def solve_stdin(stream=None):
  board = analyze_stdin(get_stdin_lines(stream if stream is not None else sys.stdin))
  board.solve()
  print(board)


def generate_and_solve():
  width, height = config.size_from_env()
  density = config.density_from_env()
  seed = config.seed_from_env()
  print(f"SEED={seed}")
  board, solution = generate(height, width, density, seed)
  print(','.join([str(x) for x in board.rows]))
  print(','.join([str(x) for x in board.columns]))
  print(board)
  print("")
  print("running the solver...")
  try:
    board.solve()
  except SolveError as e:
    print(f"oops! {e.msg}")
    print(format_board(e.board))
    return 1
  print(format_board(board))
  errors = check_solution(board)
  if errors:
    print("\n".join(errors))
    return 1
  if not is_one_tree_per_tent(board.grid):
    print("error! is_one_tree_per_tent(board) == False")
    return 1
  if does_solution_match(board.grid, solution, print_mismatches=True):
    print("success! and it matches")
  else:
    print("success! but it doesn't match (new solution)")
  return 0


def main(argv=None):
  argv = sys.argv[1:] if argv is None else argv
  try:
    if argv[:1] == ['generate']:
      return generate_and_solve()
    solve_stdin()
    return 0
  except CampsError as e:
    print(f"Error: {e}", file=sys.stderr)
    return 1


if __name__ == '__main__':
  sys.exit(main())
