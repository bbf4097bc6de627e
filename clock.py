"""Polled schedulers: elapsed milliseconds go in through update(), callbacks come out."""

KEY_REPEAT_DELAY_MS = 140
KEY_REPEAT_INTERVAL_MS = 60

TOUCH_REPEAT_DELAY_MS = 180
TOUCH_REPEAT_INTERVAL_MS = 90


class GravityClock:
	"""
	Fixed-step accumulator. Every full interval of accumulated time calls
	on_tick once, so a stalled caller gets all the missed ticks in one update.
	"""

	def __init__(self, on_tick, interval_ms=500):
		if interval_ms <= 0:
			raise ValueError(f"interval_ms must be positive, got {interval_ms}")
		self.on_tick = on_tick
		self.interval_ms = interval_ms
		self.acc = 0
		self.running = True

	def start(self):
		self.running = True

	def stop(self):
		self.running = False

	def reset(self):
		self.acc = 0

	def update(self, dt_ms, suspended=lambda: False):
		if not self.running or suspended():
			return 0
		self.acc += dt_ms
		ticks = 0
		while self.acc >= self.interval_ms:
			self.acc -= self.interval_ms
			self.on_tick()
			ticks += 1
			if suspended():
				self.acc = 0
				break
		return ticks


class RepeatTimer:
	"""Hold-to-repeat: fire once on start, again after `delay_ms`, then every `interval_ms`."""

	def __init__(self, delay_ms=KEY_REPEAT_DELAY_MS, interval_ms=KEY_REPEAT_INTERVAL_MS):
		if interval_ms <= 0:
			raise ValueError(f"interval_ms must be positive, got {interval_ms}")
		self.delay_ms = delay_ms
		self.interval_ms = interval_ms
		self.action = None
		self.key = None
		self.elapsed = 0
		self.repeating = False

	@property
	def active(self):
		return self.action is not None

	def start(self, action, key=None):
		# one timer in flight: a new press replaces the old one
		self.stop()
		self.action, self.key = action, key
		action()

	def stop(self):
		self.action = None
		self.key = None
		self.elapsed = 0
		self.repeating = False

	def update(self, dt_ms):
		if self.action is None:
			return 0
		self.elapsed += dt_ms
		fired = 0
		if not self.repeating:
			if self.elapsed < self.delay_ms:
				return 0
			self.elapsed -= self.delay_ms
			self.repeating = True
		while self.action is not None and self.elapsed >= self.interval_ms:
			self.elapsed -= self.interval_ms
			self.action()
			fired += 1
		return fired
