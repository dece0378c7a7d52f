"""
Two-word mnemonic generator.

A Generator owns a left word list (adjectives) and a right word list (names)
and joins one random word from each with a separator:

    >>> Generator.with_words(["amazing"], ["jordan"]).generate()
    'amazing_jordan'
"""

import random
import threading
from functools import lru_cache
from typing import Iterable, Optional, Protocol, Tuple

from .errors import EmptyWordListError
from .words import DEFAULT_PRESET, get_preset

DEFAULT_SEPARATOR = "_"


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [0, n). random.Random qualifies."""

    def randrange(self, n: int) -> int:
        ...


class _ThreadLocalRandom:
    """Hands each thread its own random.Random so no state is shared across threads."""

    def __init__(self):
        self._local = threading.local()

    def randrange(self, n: int) -> int:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            rng = self._local.rng = random.Random()
        return rng.randrange(n)


_thread_local_random = _ThreadLocalRandom()


class Generator:
    """
    Random adjective/name pair generator.

    The word lists are copied to tuples at construction and never mutated
    afterwards, so one instance can be shared between threads. No validation
    happens here: empty lists only fail when generating.
    """

    __slots__ = ("_left", "_right", "_rng")

    def __init__(
        self,
        left_words: Optional[Iterable[str]] = None,
        right_words: Optional[Iterable[str]] = None,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        """
        Args:
            left_words: Left (adjective) words; defaults to the default preset
            right_words: Right (name) words; defaults to the default preset
            rng: Source of random indices; defaults to a per-thread random.Random
            seed: Optional seed for a private, reproducible random.Random
                  (ignored when rng is given)
        """
        default_left, default_right = get_preset(DEFAULT_PRESET)
        self._left: Tuple[str, ...] = tuple(default_left if left_words is None else left_words)
        self._right: Tuple[str, ...] = tuple(default_right if right_words is None else right_words)

        if rng is not None:
            self._rng = rng
        elif seed is not None:
            self._rng = random.Random(seed)
        else:
            self._rng = _thread_local_random

    @classmethod
    def new(cls, rng: Optional[RandomSource] = None, seed: Optional[int] = None) -> "Generator":
        """Generator over the built-in default word bank."""
        return cls(rng=rng, seed=seed)

    @classmethod
    def with_words(
        cls,
        left: Iterable[str],
        right: Iterable[str],
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> "Generator":
        """Generator over caller-supplied lists, stored verbatim (even if empty)."""
        return cls(left, right, rng=rng, seed=seed)

    @classmethod
    def from_preset(
        cls,
        name: str,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> "Generator":
        """Generator over a named built-in bank. Raises UnknownPresetError."""
        left, right = get_preset(name)
        return cls(left, right, rng=rng, seed=seed)

    @property
    def left_words(self) -> Tuple[str, ...]:
        return self._left

    @property
    def right_words(self) -> Tuple[str, ...]:
        return self._right

    def pick(self) -> Tuple[str, str]:
        """
        Draw one left word and one right word independently.

        Raises:
            EmptyWordListError: If either list is empty
        """
        if not self._left or not self._right:
            raise EmptyWordListError(left_empty=not self._left, right_empty=not self._right)

        left_idx = self._rng.randrange(len(self._left))
        right_idx = self._rng.randrange(len(self._right))

        return self._left[left_idx], self._right[right_idx]

    def generate_with_separator(self, separator: str) -> str:
        """
        Generate a mnemonic joined by `separator` (used verbatim, may be empty).

        Raises:
            EmptyWordListError: If either list is empty
        """
        left, right = self.pick()
        return f"{left}{separator}{right}"

    def generate(self) -> str:
        """Generate a mnemonic joined by "_" (e.g. "amazing_turing")."""
        return self.generate_with_separator(DEFAULT_SEPARATOR)

    def __repr__(self) -> str:
        return f"Generator(left={len(self._left)} words, right={len(self._right)} words)"


@lru_cache(maxsize=1)
def get_default_generator() -> Generator:
    """Get the shared default Generator, created on first use."""
    return Generator.new()


def generate_name(separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Generate a mnemonic from the default word bank.

    Args:
        separator: String placed between the two words

    Returns:
        Mnemonic such as "amazing_turing"
    """
    return get_default_generator().generate_with_separator(separator)
