from dataclasses import dataclass
from typing import Optional

import numpy as np

from board import Board
from clock import GravityClock
from piece import Piece
from shapes import SCORE_TABLE, RandomShapeSource, Tetromino

BOARD_W, BOARD_H = 10, 20
DROP_MS = 500

# simple wall kick: shift left/right after a blocked rotation
KICK_OFFSETS = [0, -1, 1, -2, 2]


@dataclass
class GameSnapshot:
	"""Read-only view of one frame for renderers and agents."""
	board: np.ndarray
	current: Optional[Piece]
	ghost: Optional[Piece]
	next_piece: Tetromino
	hold_piece: Optional[Tetromino]
	can_hold: bool
	score: int
	lines_cleared: int
	game_over: bool


class TetrisGame:
	"""
	Game session: owns the board, the active piece, the Next and Hold slots and
	the counters. All mutation goes through the action methods below; they
	reject illegal requests silently and do nothing once the game is over,
	except restart().

	shape_source: zero-argument callable returning a fresh Tetromino.
	notifier: called once per lock that clears rows, with the row count.
	"""

	def __init__(self, width=BOARD_W, height=BOARD_H, drop_ms=DROP_MS, shape_source=None, notifier=None):
		self.width, self.height = width, height
		self.shape_source = shape_source if shape_source is not None else RandomShapeSource()
		self.notifier = notifier

		# Gameplay timing
		self.gravity = GravityClock(self.drop_piece, interval_ms=drop_ms)

		self.restart()

	# ------------------------------------------------------------------
	# read-only state
	# ------------------------------------------------------------------

	@property
	def board(self):
		return self._board.snapshot()

	@property
	def current(self):
		return self._current.copy()

	@property
	def next_piece(self):
		return self._next.copy()

	@property
	def hold(self):
		return self._hold.copy() if self._hold is not None else None

	@property
	def can_hold(self):
		return self._can_hold

	@property
	def score(self):
		return self._score

	@property
	def lines_cleared(self):
		return self._lines

	@property
	def lines_cleared_this_step(self):
		return self._lines_this_step

	@property
	def game_over(self):
		return self._game_over

	def ghost_piece(self):
		"""Where the active piece would land; display only."""
		ghost = self._current
		while True:
			down = ghost.moved(0, 1)
			if self._board.collides(down):
				return ghost.copy()
			ghost = down

	def snapshot(self):
		return GameSnapshot(
			board=self.board,
			current=None if self._game_over else self.current,
			ghost=None if self._game_over else self.ghost_piece(),
			next_piece=self.next_piece,
			hold_piece=self.hold,
			can_hold=self._can_hold,
			score=self._score,
			lines_cleared=self._lines,
			game_over=self._game_over,
		)

	# ------------------------------------------------------------------
	# actions
	# ------------------------------------------------------------------

	def restart(self):
		# build everything first, then swap in, so no reader sees half a reset
		board = Board(self.width, self.height)
		current = Piece.spawn(self.shape_source(), self.width)
		nxt = self.shape_source()

		self._board = board
		self._current = current
		self._next = nxt
		self._hold = None
		self._can_hold = True
		self._score, self._lines = 0, 0
		self._lines_this_step = 0
		self._game_over = False
		self.gravity.reset()

	reset = restart

	def move_piece(self, dx, dy=0):
		if self._game_over:
			return False
		moved = self._current.moved(dx, dy)
		if self._board.collides(moved):
			return False
		self._current = moved
		return True

	def rotate_piece(self):
		if self._game_over:
			return False
		rotated = self._current.rotated()
		for k in KICK_OFFSETS:
			test = rotated.moved(k, 0)
			if not self._board.collides(test):
				self._current = test
				return True
		return False

	def drop_piece(self):
		"""One row down; locks the piece instead when it is resting on something."""
		if self._game_over:
			return False
		if self.move_piece(0, 1):
			return True
		self.lock_piece()
		return False

	def hard_drop(self):
		if self._game_over:
			return 0
		rows = 0
		while self.move_piece(0, 1):
			rows += 1
		self.lock_piece()
		return rows

	def hold_piece(self):
		if self._game_over or not self._can_hold:
			return False

		held = self._current.tetromino()
		if self._hold is None:
			incoming = self._next
			self._next = self.shape_source()
		else:
			incoming = self._hold
		self._hold = held

		self._spawn(incoming)
		self._can_hold = False
		return True

	def update(self, dt_ms):
		"""Advance the gravity clock; returns the number of automatic drops applied."""
		return self.gravity.update(dt_ms, suspended=lambda: self._game_over)

	# ------------------------------------------------------------------
	# lock sequence
	# ------------------------------------------------------------------

	def lock_piece(self):
		self._board.merge(self._current)

		lines = self._board.clear_full_lines()
		self._lines_this_step = lines
		if lines > 0:
			self._lines += lines
			self._score += SCORE_TABLE[lines]
			# one card per clear event, however many rows went
			if self.notifier is not None:
				self.notifier(lines)

		self._can_hold = True

		incoming = self._next
		self._next = self.shape_source()
		self._spawn(incoming)
		return lines

	def _spawn(self, tetromino):
		piece = Piece.spawn(tetromino, self.width)
		if self._board.collides(piece):
			# keep the locked board on screen, the blocked piece is never installed
			self._game_over = True
		else:
			self._current = piece
