"""
PAIRNAME data models using Pydantic.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .errors import WordListFileError

logger = logging.getLogger(__name__)


# Word List Models

class WordLists(BaseModel):
    """
    Custom word lists loaded from a JSON file:

        {"left": ["amazing", "legend"], "right": ["jordan", "bird"]}

    Words are kept verbatim. Empty lists are accepted here and only fail
    when a mnemonic is generated.
    """
    left: List[str] = Field(default_factory=list)
    right: List[str] = Field(default_factory=list)


def load_word_lists(path: Union[str, Path]) -> WordLists:
    """
    Load and validate a word-list file.

    Raises:
        WordListFileError: If the file is missing, not JSON, or the wrong shape
    """
    path = Path(path).expanduser()

    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise WordListFileError(str(path), str(e)) from e

    try:
        word_lists = WordLists.model_validate(data)
    except ValidationError as e:
        raise WordListFileError(str(path), f"{e.error_count()} validation error(s)") from e

    logger.debug(f"Loaded {len(word_lists.left)} left / {len(word_lists.right)} right words from {path}")
    return word_lists


# Config Models

class ConfigFileSettings(BaseModel):
    """Settings read from one config file. Every value must be a string."""
    separator: Optional[str] = None
    preset: Optional[str] = None
    words_file: Optional[str] = None
    log_level: Optional[str] = None


# Output Models

class Mnemonic(BaseModel):
    """One generated name with the words and separator it was built from."""
    name: str
    left: str
    right: str
    separator: str
