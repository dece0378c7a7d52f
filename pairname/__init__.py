"""
PAIRNAME - two-word mnemonic names like "amazing_turing".

    from pairname import Generator

    Generator.new().generate()                                # "dreamy_lovelace"
    Generator.with_words(["crazy"], ["alan"]).generate_with_separator("-")  # "crazy-alan"
"""

from .errors import EmptyWordList, EmptyWordListError, PairnameError, UnknownPresetError, WordListFileError
from .generator import DEFAULT_SEPARATOR, Generator, RandomSource, generate_name, get_default_generator
from .words import ADJECTIVES, DEFAULT_PRESET, PRESETS, SURNAMES, get_preset

__version__ = "0.1.0"

__all__ = [
    "ADJECTIVES",
    "DEFAULT_PRESET",
    "DEFAULT_SEPARATOR",
    "EmptyWordList",
    "EmptyWordListError",
    "Generator",
    "PRESETS",
    "PairnameError",
    "RandomSource",
    "SURNAMES",
    "UnknownPresetError",
    "WordListFileError",
    "generate_name",
    "get_default_generator",
    "get_preset",
]
