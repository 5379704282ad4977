# tile values - each tile is its own single-character serialization

from .errors import ParseError

UNASSIGNED=' '
GRASS='-'
CAMP='C'
TREE='T'
# returned by Grid.get() for out-of-bounds cells, never stored
WALL='w'

TILES = (UNASSIGNED, GRASS, CAMP, TREE)


def parse_tile(char):
  if char not in TILES:
    raise ParseError(f"Couldn't parse tile: '{char}'")
  return char
