"""Bundled flashcard word lists (JSON arrays of {word, meaning, pron?, example?})."""
from importlib.resources import files


def words_path(name="words.json"):
    return str(files(__name__) / name)
