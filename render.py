import numpy as np
import pygame

from shapes import color_for_id

PREVIEW_COLS, PREVIEW_ROWS = 6, 6

BACKGROUND = (11, 16, 32)
GRID_COLOR = (30, 34, 50)
BUTTON_COLOR = (24, 28, 44)

# on-screen buttons: (name, label, column, row, column span) on a 5-column grid
BUTTONS = [
    ("hold", "HOLD", 0, 0, 1),
    ("left", "<", 1, 0, 1),
    ("rotate", "ROT", 2, 0, 1),
    ("right", ">", 3, 0, 1),
    ("drop", "DROP", 4, 0, 1),
    ("restart", "RESTART", 0, 1, 2),
    ("down", "v", 2, 1, 3),
]
BUTTON_COLS, BUTTON_ROWS = 5, 2
BUTTON_GAP = 6


class Renderer:
    """Draws a GameSnapshot onto a pygame surface. Never touches the game itself."""

    def __init__(self, width=10, height=20, block_size=28, render_mode='rgb_array', touch_controls=False):
        self.width, self.height = width, height
        self.block_size = block_size
        self.render_mode = render_mode

        # HUD / layout
        self.hud_height = 100
        self.preview_block = max(8, int(block_size * 0.75))
        self.sidebar_width = PREVIEW_COLS * self.preview_block + 20
        self.screen_width = width * block_size + self.sidebar_width
        self.screen_height = height * block_size + self.hud_height

        self.card_rect = pygame.Rect(10, self.hud_height + 10, self.screen_width - 20, 84)
        self.buttons = {}
        self.button_labels = {}
        if touch_controls:
            self._layout_buttons()

        pygame.init()
        if render_mode == 'human':
            self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
            pygame.display.set_caption("Totris")
        else:
            self.screen = pygame.Surface((self.screen_width, self.screen_height))

        self.font = pygame.font.SysFont("Arial", 20, bold=True)
        self.title_font = pygame.font.SysFont("Arial", 24, bold=True)
        self.small_font = pygame.font.SysFont("Arial", 14)

    def _layout_buttons(self):
        top = self.screen_height + BUTTON_GAP
        cell_w = (self.screen_width - BUTTON_GAP) // BUTTON_COLS
        cell_h = max(32, self.block_size + 8)
        for name, label, col, row, span in BUTTONS:
            self.buttons[name] = pygame.Rect(
                BUTTON_GAP + col * cell_w,
                top + row * cell_h,
                span * cell_w - BUTTON_GAP,
                cell_h - BUTTON_GAP,
            )
            self.button_labels[name] = label
        self.screen_height = top + BUTTON_ROWS * cell_h

    def cell_rect(self, x, y, inset=1):
        b = self.block_size
        return pygame.Rect(x * b + inset, y * b + self.hud_height + inset, b - 2 * inset, b - 2 * inset)

    def render(self, snap, card=None):
        self.screen.fill((0, 0, 0))

        title_surf = self.title_font.render("TOTRIS", True, (255, 255, 255))
        self.screen.blit(title_surf, (10, 5))

        # scores & lines
        score_surf = self.font.render(f"Score: {snap.score}", True, (200, 200, 200))
        lines_surf = self.font.render(f"Lines: {snap.lines_cleared}", True, (200, 200, 200))
        self.screen.blit(score_surf, (10, 35))
        self.screen.blit(lines_surf, (10, 60))

        field = pygame.Rect(0, self.hud_height, self.width * self.block_size, self.height * self.block_size)
        pygame.draw.rect(self.screen, BACKGROUND, field)

        # locked pieces
        for y in range(self.height):
            for x in range(self.width):
                if snap.board[y][x]:
                    pygame.draw.rect(self.screen, color_for_id(snap.board[y][x]), self.cell_rect(x, y))

        if not snap.game_over:
            self._draw_ghost(snap.ghost)
            for x, y in snap.current.cells():
                if y >= 0:
                    pygame.draw.rect(self.screen, snap.current.color, self.cell_rect(x, y))

        # grid on top
        for x in range(self.width + 1):
            pygame.draw.line(self.screen, GRID_COLOR, (x * self.block_size, field.top), (x * self.block_size, field.bottom))
        for y in range(self.height + 1):
            py = field.top + y * self.block_size
            pygame.draw.line(self.screen, GRID_COLOR, (0, py), (field.right, py))

        sidebar_x = field.right + 10
        box = PREVIEW_ROWS * self.preview_block
        self._draw_preview(snap.next_piece, "NEXT", sidebar_x, self.hud_height)
        self._draw_preview(snap.hold_piece, "HOLD", sidebar_x, self.hud_height + box + 20)

        if snap.game_over:
            self._draw_game_over(field)
        if card is not None:
            self._draw_card(card)
        self._draw_buttons()

        if self.render_mode == 'human':
            pygame.display.flip()
        return self._get_rgb_array()

    def _draw_ghost(self, ghost):
        if ghost is None:
            return
        overlay = pygame.Surface((self.block_size, self.block_size), pygame.SRCALPHA)
        pygame.draw.rect(overlay, (*ghost.color, 115), overlay.get_rect().inflate(-6, -6), 2)
        for x, y in ghost.cells():
            if y >= 0:
                self.screen.blit(overlay, self.cell_rect(x, y, inset=0).topleft)

    def _draw_preview(self, tetromino, label, left, top):
        b = self.preview_block
        box_rect = pygame.Rect(left, top, PREVIEW_COLS * b, PREVIEW_ROWS * b)
        pygame.draw.rect(self.screen, BACKGROUND, box_rect)
        pygame.draw.rect(self.screen, (80, 80, 80), box_rect, 1)
        self.screen.blit(self.small_font.render(label, True, (190, 190, 190)), (left + 6, top + 4))

        # empty slot: frame only
        if tetromino is None:
            return

        shape = tetromino.shape
        shape_h, shape_w = shape.shape
        offset_x = left + (PREVIEW_COLS - shape_w) // 2 * b
        offset_y = top + (PREVIEW_ROWS - shape_h) // 2 * b + b // 2
        for y in range(shape_h):
            for x in range(shape_w):
                if shape[y][x]:
                    rect = (offset_x + x * b + 2, offset_y + y * b + 2, b - 4, b - 4)
                    pygame.draw.rect(self.screen, tetromino.color, rect)

    def _draw_game_over(self, field):
        shade = pygame.Surface(field.size, pygame.SRCALPHA)
        shade.fill((0, 0, 0, 140))
        self.screen.blit(shade, field.topleft)
        msg = self.title_font.render("GAME OVER", True, (255, 255, 255))
        hint = self.small_font.render("Press R to restart", True, (255, 255, 255))
        self.screen.blit(msg, msg.get_rect(center=(field.centerx, field.centery - 8)))
        self.screen.blit(hint, hint.get_rect(center=(field.centerx, field.centery + 18)))

    def _draw_card(self, card):
        panel = self.card_rect
        surf = pygame.Surface(panel.size, pygame.SRCALPHA)
        surf.fill((0, 0, 0, 170))
        self.screen.blit(surf, panel.topleft)
        pygame.draw.rect(self.screen, (90, 90, 110), panel, 1)

        head = card.word if not card.pron else f"{card.word}  {card.pron}"
        self.screen.blit(self.font.render(head, True, (255, 255, 255)), (panel.left + 10, panel.top + 8))
        self.screen.blit(self.small_font.render(card.meaning, True, (230, 230, 230)), (panel.left + 10, panel.top + 36))
        if card.example:
            self.screen.blit(self.small_font.render(card.example, True, (170, 170, 170)), (panel.left + 10, panel.top + 58))
        close = self.small_font.render("close", True, (200, 200, 200))
        self.screen.blit(close, close.get_rect(topright=(panel.right - 10, panel.top + 8)))

    def _draw_buttons(self):
        for name, rect in self.buttons.items():
            pygame.draw.rect(self.screen, BUTTON_COLOR, rect, border_radius=8)
            pygame.draw.rect(self.screen, (70, 74, 96), rect, 1, border_radius=8)
            label = self.font.render(self.button_labels[name], True, (230, 230, 230))
            self.screen.blit(label, label.get_rect(center=rect.center))

    def _get_rgb_array(self):
        rgb_array = pygame.surfarray.array3d(self.screen)
        rgb_array = np.transpose(rgb_array, (1, 0, 2))
        return rgb_array

    def close(self):
        pygame.quit()
