from dataclasses import dataclass

import numpy as np

SHAPES = {
	'I': [[1, 1, 1, 1]],
	'O': [[1, 1], [1, 1]],
	'T': [[0, 1, 0], [1, 1, 1]],
	'S': [[0, 1, 1], [1, 1, 0]],
	'Z': [[1, 1, 0], [0, 1, 1]],
	'J': [[1, 0, 0], [1, 1, 1]],
	'L': [[0, 0, 1], [1, 1, 1]]
}

SHAPE_NAMES = list(SHAPES.keys())

COLORS = {
	'I': (96, 165, 250),
	'O': (250, 204, 21),
	'T': (167, 139, 250),
	'S': (52, 211, 153),
	'Z': (248, 113, 113),
	'J': (59, 130, 246),
	'L': (251, 146, 60)
}

# points per lock, indexed by rows cleared
SCORE_TABLE = [0, 100, 300, 500, 800]


@dataclass
class Tetromino:
	"""One tetromino kind in a given orientation. `id` is the board marker."""
	name: str
	shape: np.ndarray
	color: tuple
	id: int

	def copy(self):
		return Tetromino(self.name, self.shape.copy(), self.color, self.id)


def color_for_id(cell_id):
	return COLORS[SHAPE_NAMES[int(cell_id) - 1]]


def shape_by_index(idx):
	assert 0 <= idx < len(SHAPE_NAMES), f"shape index out of range: {idx}"
	name = SHAPE_NAMES[idx]
	return Tetromino(name, np.array(SHAPES[name], dtype=int), COLORS[name], idx + 1)


def random_shape(rng=None):
	if rng is None:
		rng = np.random.default_rng()
	return shape_by_index(int(rng.integers(len(SHAPE_NAMES))))


class RandomShapeSource:
	"""Uniform draw over the 7 kinds, no bag. Default shape source of TetrisGame."""

	def __init__(self, rng=None):
		self.rng = rng if rng is not None else np.random.default_rng()

	def __call__(self):
		return random_shape(self.rng)
