"""Tests for the solution checks."""

from camps_and_trees.board import Board
from camps_and_trees.grid import Grid
from camps_and_trees.verify import check_solution, compute_sums, does_solution_match, is_one_tree_per_tent


class TestComputeSums:

  def test_sums(self):
    rowsums, colsums = compute_sums(Grid.parse("CT-\n---\nC-C"))
    assert rowsums == [1, 0, 2]
    assert colsums == [2, 0, 1]


class TestCheckSolution:

  def test_valid(self):
    board = Board.parse([2, 0, 2], [2, 0, 2], "CTC\nT-T\nCTC")
    assert check_solution(board) == []

  def test_wrong_sums(self):
    board = Board.parse([1, 0, 2], [2, 0, 2], "CTC\nT-T\nCTC")
    errors = check_solution(board)
    assert errors == ["error: row 0 has 2 camps but expected 1."]

  def test_tree_camp_count(self):
    board = Board.parse([1, 0], [1, 0], "CT\nT-")
    assert check_solution(board) == ["error: 2 trees but 1 camps."]


class TestOneTreePerTent:

  def test_pairs(self):
    assert is_one_tree_per_tent(Grid.parse("CTC\nT-T\nCTC"))

  def test_needs_matching_not_just_neighbors(self):
    """Both camps only touch the middle tree, so one of them goes without."""
    assert not is_one_tree_per_tent(Grid.parse("C-\nT-\nC-"), print_mismatch=False)

  def test_tree_without_camp(self):
    assert not is_one_tree_per_tent(Grid.parse("CT\n-T"), print_mismatch=False)

  def test_empty(self):
    assert is_one_tree_per_tent(Grid.parse("--\n--"))


class TestDoesSolutionMatch:

  def test_grass_matches_empty(self):
    assert does_solution_match(Grid.parse("CT\n--"), Grid.parse("CT\n  "))

  def test_camp_mismatch(self):
    assert not does_solution_match(Grid.parse("-T\nC-"), Grid.parse("CT\n  "))
