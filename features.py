import numpy as np


def column_heights(board):
    """Height of each column measured from the floor (0 for an empty column)."""
    h, w = board.shape
    heights = np.zeros(w, dtype=int)
    for col in range(w):
        filled_idxs = np.where(board[:, col] != 0)[0]
        if filled_idxs.size:
            heights[col] = h - filled_idxs[0]
    return heights


def board_height(board):
    heights = column_heights(board)
    return int(heights.max()) if heights.size else 0


def count_holes(board):
    holes = 0
    width = board.shape[1]

    for x in range(width):
        block_found = False
        for y in range(board.shape[0]):
            if board[y][x]:
                block_found = True
            elif block_found:
                holes += 1
    return holes


def bumpiness(board):
    heights = column_heights(board)
    return int(np.abs(np.diff(heights)).sum())
