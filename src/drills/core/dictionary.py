# src/drills/core/dictionary.py
"""
In-memory word dictionary.

Maps a word to a single definition.
"test" → "this is just a test"

Mutations check that the word is (or is not) already present before acting.
"""

from dataclasses import dataclass
from enum import Enum


class DictErr(str, Enum):
    NOT_FOUND = "could not find the word you were looking for"
    WORD_EXISTS = "cannot add word because it already exists"
    WORD_DOES_NOT_EXIST = "cannot update word because it does not exist"

    def __str__(self) -> str:
        return self.value


class DictionaryError(Exception):
    err: DictErr | None = None

    def __init__(self, word: str):
        message = str(self.err) if self.err else f"dictionary error: {word}"
        super().__init__(message)
        self.word = word


class NotFound(DictionaryError):
    err = DictErr.NOT_FOUND


class WordExists(DictionaryError):
    err = DictErr.WORD_EXISTS


class WordDoesNotExist(DictionaryError):
    err = DictErr.WORD_DOES_NOT_EXIST


@dataclass(frozen=True)
class Entry:
    word: str
    definition: str


class Dictionary:
    def __init__(self, entries: dict[str, str] | None = None):
        self._entries: dict[str, str] = dict(entries or {})

    def search(self, word: str) -> str:
        """Return the definition of a word. Raises NotFound if absent."""
        try:
            return self._entries[word]
        except KeyError:
            raise NotFound(word) from None

    def add(self, word: str, definition: str) -> None:
        """Add a new word. Raises WordExists if it is already present."""
        if word in self._entries:
            raise WordExists(word)
        self._entries[word] = definition

    def update(self, word: str, definition: str) -> None:
        """Replace the definition of a known word. Raises WordDoesNotExist otherwise."""
        if word not in self._entries:
            raise WordDoesNotExist(word)
        self._entries[word] = definition

    def delete(self, word: str) -> None:
        """Remove a word. Missing words are ignored."""
        self._entries.pop(word, None)

    def entries(self) -> list[Entry]:
        return [Entry(w, d) for w, d in sorted(self._entries.items())]

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)
