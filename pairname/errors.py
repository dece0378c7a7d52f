"""
PAIRNAME exceptions.
"""

from typing import List, Optional


class PairnameError(Exception):
    """Base class for all pairname errors."""


class EmptyWordListError(PairnameError):
    """
    Raised when a mnemonic is requested and a word list is empty.

    Construction never raises this; only generation does.
    """

    def __init__(self, left_empty: bool, right_empty: bool):
        self.left_empty = left_empty
        self.right_empty = right_empty

        sides = [side for side, empty in (("left", left_empty), ("right", right_empty)) if empty]
        super().__init__(f"Cannot generate a mnemonic: {' and '.join(sides)} word list is empty")


# Name used for the error kind in the public API docs
EmptyWordList = EmptyWordListError


class UnknownPresetError(PairnameError, KeyError):
    """Raised when a preset name does not match any built-in word bank."""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.name = name
        self.available = available or []
        super().__init__(name)

    def __str__(self) -> str:
        msg = f"Unknown preset '{self.name}'"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        return msg


class WordListFileError(PairnameError):
    """Raised when a word-list file cannot be read or has the wrong shape."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid word-list file {path}: {reason}")
