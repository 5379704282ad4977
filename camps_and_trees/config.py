# settings come from the environment, e.g.
#   DEBUG=1 camps-and-trees < puzzle.txt
#   SEED=123 SIZE=8x8 DENSITY=0.4 camps-and-trees generate

import os, re, random

from .errors import ConfigError

DEBUG = (os.environ.get('DEBUG', '0').strip() == '1')


def debug(msg):
  if DEBUG:
    print(msg, flush=True)


def solver_timeout_from_env():
  """seconds allowed for the CP-SAT matching check."""
  timeout = os.environ.get('TIMEOUT', '10.0').strip()
  try:
    return float(timeout)
  except ValueError:
    raise ConfigError(f"TIMEOUT must be a number of seconds, not {timeout!r}") from None


def parse_size(size):
  m = re.fullmatch(r'(\d+)x(\d+)', size.strip())
  if not m:
    raise ConfigError(f"SIZE must look like WIDTHxHEIGHT, not {size!r}")
  width, height = int(m.group(1)), int(m.group(2))
  if width < 3 or width > 100:
    raise ConfigError(f"WIDTH must be between 3 and 100, not {width}")
  if height < 3 or height > 100:
    raise ConfigError(f"HEIGHT must be between 3 and 100, not {height}")
  return width, height


def size_from_env():
  return parse_size(os.environ.get('SIZE', '10x10'))


def density_from_env():
  text = os.environ.get('DENSITY', '0.5').strip()
  try:
    density = float(text)
  except ValueError:
    raise ConfigError(f"DENSITY must be a number, not {text!r}") from None
  if density < 0.1 or density > 1.0:
    raise ConfigError(f"DENSITY must be between 0.1 and 1.0, not {density}")
  return density


def seed_from_env():
  text = os.environ.get('SEED')
  if text is None:
    return random.randint(0, 9999999)
  try:
    return int(text.strip())
  except ValueError:
    raise ConfigError(f"SEED must be an integer, not {text!r}") from None
