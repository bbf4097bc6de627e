import json
from dataclasses import dataclass
from typing import Optional

import numpy as np

from wordlists import words_path

DEFAULT_WORDS_PATH = words_path()

# how long a flashcard stays on screen after a clear
TOAST_MS = 2600


@dataclass
class VocabCard:
    word: str
    meaning: str
    pron: Optional[str] = None
    example: Optional[str] = None


NO_DATA_CARD = VocabCard(word="(no data)", meaning="The word list is empty.")


class VocabDeck:
    def __init__(self, cards=(), rng=None):
        self.cards = list(cards)
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def from_records(cls, records, rng=None):
        """Keep only records whose word and meaning are strings."""
        cards = []
        for r in records:
            if not isinstance(r, dict):
                continue
            word, meaning = r.get("word"), r.get("meaning")
            if not isinstance(word, str) or not isinstance(meaning, str):
                continue
            pron, example = r.get("pron"), r.get("example")
            cards.append(VocabCard(
                word=word,
                meaning=meaning,
                pron=pron if isinstance(pron, str) else None,
                example=example if isinstance(example, str) else None,
            ))
        return cls(cards, rng=rng)

    @classmethod
    def from_json(cls, path=DEFAULT_WORDS_PATH, rng=None):
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list):
            records = []
        return cls.from_records(records, rng=rng)

    def __len__(self):
        return len(self.cards)

    def pick_random(self):
        if not self.cards:
            return NO_DATA_CARD
        return self.cards[int(self.rng.integers(len(self.cards)))]


class VocabNotifier:
    """
    Session notifier that surfaces one flashcard per line-clear event.
    A new clear replaces the card on screen and restarts its timer.
    """

    def __init__(self, deck, duration_ms=TOAST_MS):
        self.deck = deck
        self.duration_ms = duration_ms
        self.card = None
        self.remaining_ms = 0
        self.shown = 0

    def __call__(self, lines_cleared):
        self.card = self.deck.pick_random()
        self.remaining_ms = self.duration_ms
        self.shown += 1
        return self.card

    def update(self, dt_ms):
        if self.card is None:
            return
        self.remaining_ms -= dt_ms
        if self.remaining_ms <= 0:
            self.dismiss()

    def dismiss(self):
        self.card = None
        self.remaining_ms = 0
