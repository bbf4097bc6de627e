import pygame

from clock import RepeatTimer, TOUCH_REPEAT_DELAY_MS, TOUCH_REPEAT_INTERVAL_MS

HOLD_KEYS = (pygame.K_c, pygame.K_LSHIFT, pygame.K_RSHIFT)


class KeyboardController:
    """
    Maps pygame key events onto the game's action API. Arrow moves repeat
    while held (repeat timing lives here, not in the game); every other
    key acts once per press.

    on_restart: optional callback run after every restart this controller issues.
    """

    def __init__(self, game, repeat=None, on_restart=None):
        self.game = game
        self.repeat = repeat if repeat is not None else RepeatTimer()
        self.on_restart = on_restart

        self.moves = {
            pygame.K_LEFT: lambda: self.game.move_piece(-1, 0),
            pygame.K_RIGHT: lambda: self.game.move_piece(1, 0),
            pygame.K_DOWN: lambda: self.game.drop_piece(),
        }

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            self.on_key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.on_key_up(event.key)
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.repeat.stop()

    def on_key_down(self, key):
        if key in self.moves:
            if self.repeat.key == key:
                return
            self.repeat.start(self.moves[key], key=key)
        elif key == pygame.K_UP:
            self.game.rotate_piece()
        elif key == pygame.K_SPACE:
            self.game.hard_drop()
        elif key in HOLD_KEYS:
            self.game.hold_piece()
        elif key == pygame.K_r:
            self.restart()

    def on_key_up(self, key):
        if self.repeat.key is not None and key == self.repeat.key:
            self.repeat.stop()

    def restart(self):
        self.repeat.stop()
        self.game.restart()
        if self.on_restart is not None:
            self.on_restart()

    def update(self, dt_ms):
        return self.repeat.update(dt_ms)


class PointerController(KeyboardController):
    """
    On-screen buttons for mouse and touch. The arrow buttons repeat while
    pressed and stop on release or when the pointer slides off the button;
    the rest fire once per press. Clicking the flashcard closes it.

    buttons: name -> pygame.Rect, as laid out by Renderer(touch_controls=True).
    """

    def __init__(self, game, buttons, notifier=None, card_rect=None, repeat=None, on_restart=None):
        if repeat is None:
            repeat = RepeatTimer(TOUCH_REPEAT_DELAY_MS, TOUCH_REPEAT_INTERVAL_MS)
        super().__init__(game, repeat=repeat, on_restart=on_restart)
        self.buttons = buttons
        self.notifier = notifier
        self.card_rect = card_rect

        self.repeating = {
            "left": self.moves[pygame.K_LEFT],
            "right": self.moves[pygame.K_RIGHT],
            "down": self.moves[pygame.K_DOWN],
        }
        self.taps = {
            "hold": self.game.hold_piece,
            "rotate": self.game.rotate_piece,
            "drop": self.game.hard_drop,
            "restart": self.restart,
        }

    def button_at(self, pos):
        for name, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return name
        return None

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.on_press(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.repeat.stop()
        elif event.type == pygame.MOUSEMOTION:
            self.on_motion(event.pos)
        elif event.type in (pygame.WINDOWFOCUSLOST, pygame.WINDOWLEAVE):
            self.repeat.stop()

    def on_press(self, pos):
        # the card sits over the field, it takes the click first
        if (self.notifier is not None and self.notifier.card is not None
                and self.card_rect is not None and self.card_rect.collidepoint(pos)):
            self.notifier.dismiss()
            return

        name = self.button_at(pos)
        if name in self.repeating:
            self.repeat.start(self.repeating[name], key=name)
        elif name in self.taps:
            self.taps[name]()

    def on_motion(self, pos):
        if self.repeat.key is not None and not self.buttons[self.repeat.key].collidepoint(pos):
            self.repeat.stop()
