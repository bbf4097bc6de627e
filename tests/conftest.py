import itertools
import os
import sys

# Ensure the repo root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# pygame-backed tests run without a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from shapes import SHAPE_NAMES, shape_by_index


def sequence_source(*names):
    """Deterministic shape source cycling through the given kinds."""
    it = itertools.cycle(names)
    return lambda: shape_by_index(SHAPE_NAMES.index(next(it)))


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
