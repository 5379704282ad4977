# deductive solver for camps and trees (a.k.a. tents and trees) puzzles

from .associate_trees import associate_trees
from .board import Board, format_board
from .errors import (CampsError, ParseError, BoardShapeError, ConfigError,
                     PlacementError, SolveError, ContradictionError)
from .fill_camps import fill_camps
from .fill_zeros import fill_zeros
from .grid import Grid
from .initialize_grass import initialize_grass
from .intersection import process_intersections
from .tile import UNASSIGNED, GRASS, CAMP, TREE, parse_tile
