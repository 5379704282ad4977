# pair camps with trees, then grass around trees that are already paired
#
# every call builds a fresh association table - a flat list indexed by
# row * width + column - and throws it away on return. entries are:
#   (row, column)        tree whose camp is the one at (row, column)
#   NO_CAMP_ASSOCIATED   tree with no known camp
#   UNASSIGNED_CAMP      camp next to 2+ trees, so ambiguous
#   NO_TREE              anything else, including camps that found their tree
#   UNPROCESSED          not visited yet

from .errors import ContradictionError
from .tile import UNASSIGNED, CAMP, TREE

NO_CAMP_ASSOCIATED='no-camp-associated'
UNASSIGNED_CAMP='unassigned-camp'
NO_TREE='no-tree'
UNPROCESSED='unprocessed'


def is_camp_at(association):
  return isinstance(association, tuple)


def generate_associations(rows, columns):
  return [UNPROCESSED] * (rows * columns)


def associate_tree(grid, row, column, associations):
  """Populate the associations table starting at (row, column).

  depth first over 4-adjacent trees and camps. a camp claims its tree only
  after all of its neighbors have been visited, and only when exactly one
  of them is a tree.
  """
  width = grid.num_columns()
  # (row, column, leaving) - leaving entries are the post-visit step of a camp
  stack = [(row, column, False)]
  while stack:
    r, c, leaving = stack.pop()
    if leaving:
      claim_tree(grid, r, c, associations)
      continue
    if associations[r*width + c] != UNPROCESSED:
      continue
    cell = grid[r, c]
    if cell == TREE:
      associations[r*width + c] = NO_CAMP_ASSOCIATED
    elif cell == CAMP:
      associations[r*width + c] = UNASSIGNED_CAMP
      stack.append((r, c, True))
    else:
      associations[r*width + c] = NO_TREE
      continue
    for nr, nc in reversed(grid.surrounding_tiles(r, c)):
      stack.append((nr, nc, False))


def claim_tree(grid, row, column, associations):
  width = grid.num_columns()
  trees = [(r, c) for r, c in grid.surrounding_tiles(row, column) if grid[r, c] == TREE]
  if len(trees) == 0:
    raise ContradictionError(grid, f"camp at {row},{column} has no adjacent tree")
  if len(trees) == 1:
    r, c = trees[0]
    if is_camp_at(associations[r*width + c]):
      other = associations[r*width + c]
      raise ContradictionError(grid, f"tree at {r},{c} is the only tree for camps at {other[0]},{other[1]} and {row},{column}")
    associations[r*width + c] = (row, column)
    associations[row*width + column] = NO_TREE
  # 2+ trees: ambiguous, leave both as they are


def associate_trees(grid, changed=False):
  """Associate trees with camps and fill in grass around booked trees.

  an unassigned cell becomes grass when every tree next to it already has
  its camp, e.g. " TC\\n---\\n---" becomes "-TC\\n---\\n---". it stays
  conservative - in "T--\\n TC\\nT--" the middle tree is booked but the
  empty cell stays, the trees above and below it may still need it.
  """
  width = grid.num_columns()
  associations = generate_associations(grid.num_rows(), width)
  for row in range(grid.num_rows()):
    for column in range(width):
      associate_tree(grid, row, column, associations)
  for row in range(grid.num_rows()):
    for column in range(width):
      if grid[row, column] != UNASSIGNED: continue
      if all([grid[r, c] != TREE or is_camp_at(associations[r*width + c]) for r, c in grid.surrounding_tiles(row, column)]):
        changed |= grid.place_grass(row, column, "every adjacent tree already has its camp")
  return changed
