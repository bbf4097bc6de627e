import argparse

import pygame

from controls import KeyboardController, PointerController
from game import TetrisGame, BOARD_W, BOARD_H, DROP_MS
from render import Renderer
from vocab import DEFAULT_WORDS_PATH, VocabDeck, VocabNotifier


def load_deck(path):
	try:
		deck = VocabDeck.from_json(path)
	except FileNotFoundError:
		print(f"[TOTRIS] word list not found: {path} (cards will show a placeholder)")
		return VocabDeck()
	except ValueError as e:
		# bad JSON or bad encoding
		print(f"[TOTRIS] could not read word list {path}: {e} (cards will show a placeholder)")
		return VocabDeck()
	print(f"[TOTRIS] loaded {len(deck)} words from {path}")
	return deck


def run_game(args):
	print(f"\n[TOTRIS] board={args.width}x{args.height}, drop={args.drop_ms}ms, fps={args.fps}\n")

	notifier = VocabNotifier(load_deck(args.words))
	game = TetrisGame(width=args.width, height=args.height, drop_ms=args.drop_ms, notifier=notifier)
	renderer = Renderer(width=args.width, height=args.height, block_size=args.block_size,
						render_mode='human', touch_controls=not args.no_buttons)

	stats = {"games": 1, "reported": False}

	def on_restart():
		notifier.dismiss()
		stats["games"] += 1
		stats["reported"] = False

	controllers = [KeyboardController(game, on_restart=on_restart)]
	if renderer.buttons:
		controllers.append(PointerController(game, renderer.buttons, notifier=notifier,
											card_rect=renderer.card_rect, on_restart=on_restart))

	clock = pygame.time.Clock()
	running = True

	while running:
		dt = clock.tick(args.fps)

		for event in pygame.event.get():
			if event.type == pygame.QUIT:
				running = False
			elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
				running = False
			else:
				for controller in controllers:
					controller.handle_event(event)

		for controller in controllers:
			controller.update(dt)
		game.update(dt)
		notifier.update(dt)

		if game.game_over and not stats["reported"]:
			print(f"Game {stats['games']} over | score={game.score} lines={game.lines_cleared}")
			stats["reported"] = True

		renderer.render(game.snapshot(), card=notifier.card)

	print(f"Finished: score={game.score} lines={game.lines_cleared} cards_shown={notifier.shown}")
	renderer.close()


def main(argv=None):
	p = argparse.ArgumentParser(description="Falling-block puzzle with a flashcard on every line clear")
	p.add_argument("--width", type=int, default=BOARD_W)
	p.add_argument("--height", type=int, default=BOARD_H)
	p.add_argument("--block-size", type=int, default=28)
	p.add_argument("--drop-ms", type=int, default=DROP_MS)
	p.add_argument("--fps", type=int, default=60)
	p.add_argument("--words", default=DEFAULT_WORDS_PATH)
	p.add_argument("--no-buttons", action="store_true", help="hide the on-screen buttons")
	args = p.parse_args(argv)

	run_game(args)


if __name__ == "__main__":
	main()
