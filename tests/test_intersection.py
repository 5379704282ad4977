"""Unit tests for the row/column backtracking and intersection step."""

import pytest

from camps_and_trees.board import Board
from camps_and_trees.errors import ContradictionError
from camps_and_trees.generator import generate
from camps_and_trees.grid import Grid
from camps_and_trees.initialize_grass import initialize_grass
from camps_and_trees.intersection import intersection, possibilities, process_intersections


class TestPossibilities:

  def test_two_camps_in_three_cells(self):
    grid = Grid.blank(1, 3)
    found = possibilities(grid, grid.row_cells(0), 2)
    assert found == [Grid.parse("C-C")]

  def test_one_camp_in_three_cells(self):
    grid = Grid.blank(1, 3)
    found = possibilities(grid, grid.row_cells(0), 1)
    assert sorted([str(g) for g in found]) == sorted(["C- ", "-C-", " -C"])

  def test_zero_camps_is_the_grid_itself(self):
    grid = Grid.parse(" T \n   ")
    assert possibilities(grid, grid.row_cells(1), 0) == [grid]

  def test_not_enough_room(self):
    grid = Grid.blank(1, 3)
    assert possibilities(grid, grid.row_cells(0), 3) == []

  def test_over_quota(self):
    grid = Grid.blank(1, 3)
    assert possibilities(grid, grid.row_cells(0), -1) == []

  def test_only_unassigned_cells_are_used(self):
    grid = Grid.parse("T - ")
    found = possibilities(grid, grid.row_cells(0), 1)
    assert sorted([str(g) for g in found]) == sorted(["TC- ", "T -C"])

  def test_column_line_touches_neighboring_columns(self):
    grid = Grid.blank(3, 2)
    found = possibilities(grid, grid.column_cells(0), 2)
    assert found == [Grid.parse("C-\n--\nC-")]

  def test_input_grid_untouched(self):
    grid = Grid.blank(2, 2)
    possibilities(grid, grid.row_cells(0), 1)
    assert grid == Grid.blank(2, 2)


class TestIntersection:

  def test_one_possibility_is_the_possibility(self):
    grid = Grid.blank(3, 3)
    assert intersection([grid.copy()]) == grid

  def test_two_possibilities(self):
    grid1 = Grid.parse(" T \n C-\n-  ")
    grid2 = Grid.parse("CT \n C-\n   ")
    assert intersection([grid1, grid2]) == Grid.parse(" T \n C-\n   ")

  def test_no_possibilities(self):
    with pytest.raises(ContradictionError):
      intersection([])


class TestProcessIntersections:

  def test_row_deduce_grass_next_row(self):
    board = Board.parse(
      [1, 0, 0, 0, 0],
      [1, 0, 1, 0, 0],
      " - --\nT T  \n-    \n     \n     ",
    )
    assert process_intersections(board)
    assert str(board) == " - --\nT-T  \n-    \n     \n     "

  def test_column_deduce_grass_next_column(self):
    board = Board.parse(
      [1, 0, 1, 0, 0],
      [1, 0, 0, 0, 0],
      " T   \n-    \n T   \n-    \n-    ",
    )
    assert process_intersections(board)
    assert str(board) == " T   \n--   \n T   \n-    \n-    "

  def test_idempotent(self):
    board = Board.parse(
      [1, 0, 1, 0, 0],
      [1, 0, 0, 0, 0],
      " T   \n-    \n T   \n-    \n-    ",
    )
    process_intersections(board)
    before = board.grid.copy()
    assert not process_intersections(board)
    assert board.grid == before

  def test_single_slot_becomes_camp(self):
    board = Board.parse([1, 0], [1, 0], " T\n--")
    assert process_intersections(board)
    assert str(board) == "CT\n--"

  def test_over_quota_row(self):
    board = Board.parse([0, 0], [1, 0], "CT\n--")
    with pytest.raises(ContradictionError):
      process_intersections(board)

  def test_columns_feed_back_into_rows(self):
    """One call keeps sweeping until the rows have taken in what the columns found."""
    board, _ = generate(6, 6, 0.5, seed=2)
    initialize_grass(board)
    process_intersections(board)
    before = board.grid.copy()
    assert not process_intersections(board)
    assert board.grid == before

  @pytest.mark.parametrize("seed", range(20))
  def test_idempotent_on_generated_boards(self, seed):
    board, _ = generate(6, 6, 0.5, seed=seed)
    initialize_grass(board)
    process_intersections(board)
    assert not process_intersections(board)
