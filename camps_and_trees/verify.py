# checks for a finished board. solve() never calls these - the rules don't
# prove the tree/camp pairing - but the cli and the generator use them to
# double-check results.

from ortools.sat.python import cp_model

from . import config
from .tile import CAMP, TREE


def compute_sums(grid):
  rowsums = [0] * grid.num_rows()
  colsums = [0] * grid.num_columns()
  for y in range(grid.num_rows()):
    for x in range(grid.num_columns()):
      if grid[y, x] == CAMP:
        colsums[x] += 1
        rowsums[y] += 1
  return rowsums, colsums


def check_solution(board):
  """list of problems with a solved board's counts, empty if there are none."""
  numtrees = sum([board.count_in_row(y, TREE) for y in range(board.num_rows())])
  numcamps = sum([board.count_in_row(y, CAMP) for y in range(board.num_rows())])
  rowsums, colsums = compute_sums(board.grid)

  errors = []
  if numtrees != numcamps:
    errors.append(f"error: {numtrees} trees but {numcamps} camps.")
  for y in range(len(board.rows)):
    if rowsums[y] != board.rows[y]:
      errors.append(f"error: row {y} has {rowsums[y]} camps but expected {board.rows[y]}.")
  for x in range(len(board.columns)):
    if colsums[x] != board.columns[x]:
      errors.append(f"error: col {x} has {colsums[x]} camps but expected {board.columns[x]}.")
  return errors


def is_one_tree_per_tent(grid, print_mismatch=True):
  """True if trees and camps can be paired off one-to-one along 4-adjacency."""
  model = cp_model.CpModel()
  solver = cp_model.CpSolver()
  pair_vars_for_camp = {}
  for y in range(grid.num_rows()):
    for x in range(grid.num_columns()):
      if grid[y, x] == CAMP:
        pair_vars_for_camp[y, x] = []

  for y in range(grid.num_rows()):
    for x in range(grid.num_columns()):
      if grid[y, x] != TREE:
        continue
      adjacent_camps = [(r, c) for r, c in grid.surrounding_tiles(y, x) if grid[r, c] == CAMP]
      if len(adjacent_camps) == 0:
        if print_mismatch: config.debug(f"is_one_tree_per_tent: tree@{y},{x} is missing a camp !")
        return False
      pair_vars = []
      for r, c in adjacent_camps:
        var = model.new_bool_var(f"T{y},{x}C{r},{c}")
        pair_vars.append(var)
        pair_vars_for_camp[r, c].append(var)
      model.add_exactly_one(pair_vars)

  for (r, c), pair_vars in pair_vars_for_camp.items():
    if len(pair_vars) == 0:
      if print_mismatch: config.debug(f"is_one_tree_per_tent: camp@{r},{c} has no tree !")
      return False
    model.add_exactly_one(pair_vars)

  solver.parameters.max_time_in_seconds = config.solver_timeout_from_env()
  status = solver.solve(model)
  if status == cp_model.INFEASIBLE:
    if print_mismatch: config.debug("is_one_tree_per_tent: can't match trees and camps")
    return False
  if status == cp_model.MODEL_INVALID:
    config.debug(f"is_one_tree_per_tent: invalid\n{model.validate()}")
    return False
  if status == cp_model.UNKNOWN:
    config.debug("is_one_tree_per_tent: unknown / timeout")
    return False
  return True


def does_solution_match(grid, expected, print_mismatches=False):
  """compare camps and trees only - grass vs unassigned doesn't count as a mismatch."""
  mismatches = 0
  for y in range(grid.num_rows()):
    for x in range(grid.num_columns()):
      cell = grid[y, x]
      if (cell in [TREE, CAMP] and cell != expected[y, x]) or \
         (expected[y, x] in [TREE, CAMP] and cell != expected[y, x]):
        if print_mismatches:
          config.debug(f"mismatch at {y},{x}: {cell!r} vs {expected[y, x]!r}")
        mismatches += 1
  return (mismatches == 0)
