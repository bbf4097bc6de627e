import numpy as np
import gymnasium as gym
from gymnasium import spaces

from game import TetrisGame
from features import board_height, count_holes, bumpiness

# reward per lock, indexed by rows cleared
LINE_REWARDS = [0.0, 1.0, 3.0, 5.0, 8.0]


class TetrisEnv(gym.Env):
    """
    Placement-level environment: one action picks a rotation count and a
    target column, then the piece is hard-dropped.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(self, width=10, height=20, render_mode=None, block_size=20,
                 shape_source=None, notifier=None):
        super().__init__()
        self.width, self.height = width, height
        self.render_mode = render_mode
        self.game = TetrisGame(width=width, height=height,
                               shape_source=shape_source, notifier=notifier)
        self.renderer = None
        if render_mode is not None:
            from render import Renderer
            self.renderer = Renderer(width=width, height=height,
                                     block_size=block_size, render_mode=render_mode)

        sample_obs = self.get_state()
        if self.render_mode is None:
            self.observation_space = spaces.Box(low=0.0, high=1.0, shape=sample_obs.shape, dtype=np.float32)
        else:
            self.observation_space = spaces.Box(low=0, high=255, shape=sample_obs.shape, dtype=np.uint8)
        self.action_space = spaces.Discrete(4 * self.width)

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.game.restart()
        obs = self.get_state()
        return obs, {}

    def get_state_matrix(self):
        snap = self.game.snapshot()
        h, w = self.height, self.width

        # Channel 0: locked blocks
        locked = (snap.board > 0).astype(np.float32)

        # Channel 1: current falling piece
        current = np.zeros_like(locked)
        if snap.current is not None:
            for bx, by in snap.current.cells():
                if 0 <= by < h and 0 <= bx < w:
                    current[by][bx] = 1.0

        return np.stack([locked, current], axis=0)

    def get_state(self):
        if self.render_mode is None:
            return self.get_state_matrix()
        return self.render()

    def render(self):
        if self.renderer is None:
            return None
        return self.renderer.render(self.game.snapshot()).astype(np.uint8)

    def step(self, action):
        if self.game.game_over:
            frame = self.get_state()
            return frame, 0.0, True, False, {}

        num_rotations = int((action // self.width) % 4)
        target_col = int(action % self.width)
        prev_lines = self.game.lines_cleared

        # rotations
        for _ in range(num_rotations):
            self.game.rotate_piece()

        # move horizontally
        while self.game.current.x < target_col:
            if not self.game.move_piece(1):
                break
        while self.game.current.x > target_col:
            if not self.game.move_piece(-1):
                break
        self.game.hard_drop()

        # reward calculation
        lines_cleared = self.game.lines_cleared - prev_lines
        board = self.game.board
        reward = 0.1 + LINE_REWARDS[lines_cleared]
        if self.game.game_over:
            reward -= 10.0

        state = self.get_state()
        info = {"score": self.game.score, "lines_cleared": self.game.lines_cleared,
                "height": board_height(board), "holes": count_holes(board),
                "bumpiness": bumpiness(board), "lines_cleared_move": lines_cleared,
                "rotations": num_rotations, "column_used": target_col}
        return state, reward, self.game.game_over, False, info

    def close(self):
        if self.renderer is not None:
            self.renderer.close()
