from __future__ import annotations
from pathlib import Path

_DATA_DIR = Path(__file__).parent / "data"


def load_lines(name: str) -> list[str]:
    """Read non-empty, non-comment lines from a packaged data file."""
    path = _DATA_DIR / name
    with path.open(encoding="utf-8") as fh:
        return [
            line.strip() for line in fh if line.strip() and not line.startswith("#")
        ]


class WordList:
    """Case-insensitive membership test over a packaged word list."""

    def __init__(self, name: str, extra_words: list[str] | None = None) -> None:
        self._words: set[str] = {w.lower() for w in load_lines(name)}
        for word in extra_words or []:
            self._words.add(word.strip().lower())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)


NON_NAME_WORDS = WordList("non_name_words.txt")
REPORTING_VERBS = WordList("reporting_verbs.txt")
