from dataclasses import dataclass, replace

import numpy as np

from shapes import shape_by_index


def rotate_cw(grid):
	# (h x w) -> (w x h), result[x][h-1-y] = grid[y][x]
	return np.rot90(np.asarray(grid), k=-1).copy()


@dataclass
class Piece:
	name: str
	shape: np.ndarray
	color: tuple
	id: int
	x: int
	y: int

	@staticmethod
	def spawn(tetromino, width):
		shape = tetromino.shape.copy()
		x = (width - shape.shape[1]) // 2
		return Piece(tetromino.name, shape, tetromino.color, tetromino.id, x, 0)

	def cells(self):
		"""Absolute (x, y) board coordinates of the occupied cells."""
		ys, xs = np.nonzero(self.shape)
		return [(self.x + int(x), self.y + int(y)) for y, x in zip(ys, xs)]

	def moved(self, dx, dy):
		return replace(self, x=self.x + dx, y=self.y + dy)

	def rotated(self):
		return replace(self, shape=rotate_cw(self.shape))

	def tetromino(self):
		"""Base orientation of this piece's kind."""
		return shape_by_index(self.id - 1)

	def copy(self):
		return replace(self, shape=self.shape.copy())
