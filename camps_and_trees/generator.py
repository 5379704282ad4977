# random puzzles: drop trees at random and give each one a camp on a free
# neighboring cell, then publish only the trees and the resulting sums.

import random

from .board import Board
from .grid import Grid, SQUARE_NEIGHBOR_OFFSETS, ALL_NEIGHBOR_OFFSETS
from .tile import UNASSIGNED, CAMP, TREE
from .verify import compute_sums


def can_place_camp(grid, y, x):
  if grid.get(y, x) != UNASSIGNED: return False
  # check neighbors for other camps
  for dy,dx in ALL_NEIGHBOR_OFFSETS:
    if grid.get(y+dy, x+dx) == CAMP: return False
  return True


def copy_trees_only(grid):
  newgrid = Grid.blank(grid.num_rows(), grid.num_columns())
  for y in range(grid.num_rows()):
    for x in range(grid.num_columns()):
      if grid[y, x] == TREE:
        newgrid[y, x] = TREE
  return newgrid


def generate(height, width, density=0.5, seed=None):
  """returns (puzzle board, solution grid). same seed, same puzzle."""
  rng = random.Random(seed)
  offsets = [list(offset) for offset in SQUARE_NEIGHBOR_OFFSETS]
  solution = Grid.blank(height, width)
  # place both trees and camps at the same time
  for y in range(height):
    for x in range(width):
      if solution[y, x] != UNASSIGNED: continue
      if rng.random() < density:
        rng.shuffle(offsets)
        for dy,dx in offsets:
          if can_place_camp(solution, y+dy, x+dx):
            solution[y+dy, x+dx] = CAMP
            solution[y, x] = TREE
            break
  rowsums, colsums = compute_sums(solution)
  return Board(rowsums, colsums, copy_trees_only(solution)), solution
