import numpy as np


class Board:
	"""Settled cells of the playfield: 0 is empty, 1..7 the id of the piece that locked there."""

	def __init__(self, width=10, height=20):
		self.width, self.height = width, height
		self.grid = np.zeros((height, width), dtype=int)

	def collides(self, piece):
		for y in range(len(piece.shape)):
			for x in range(len(piece.shape[0])):
				if piece.shape[y][x]:
					board_y = piece.y + y
					board_x = piece.x + x

					# Check boundaries (rows above the field are allowed)
					if board_x < 0 or board_x >= self.width or board_y >= self.height:
						return True

					# Check collision with settled cells
					if board_y >= 0 and self.grid[board_y][board_x]:
						return True
		return False

	def merge(self, piece):
		for y in range(len(piece.shape)):
			for x in range(len(piece.shape[0])):
				if piece.shape[y][x]:
					board_y = piece.y + y
					board_x = piece.x + x
					if 0 <= board_y < self.height and 0 <= board_x < self.width:
						self.grid[board_y][board_x] = piece.id

	def clear_full_lines(self):
		cleared = 0
		y = self.height - 1
		while y >= 0:
			if np.all(self.grid[y]):
				self.grid = np.delete(self.grid, y, axis=0)
				self.grid = np.vstack([np.zeros((1, self.width), dtype=int), self.grid])
				cleared += 1
				# rows above shifted down into y, look at it again
			else:
				y -= 1
		return cleared

	def is_empty(self):
		return not self.grid.any()

	def snapshot(self):
		return self.grid.copy()
