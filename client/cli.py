#!/usr/bin/env python3
"""
PAIRNAME CLI - Command-line interface for two-word mnemonic names.

Usage:
    pairname generate                      # amazing_turing
    pairname generate -s - -n 3            # three names joined by "-"
    pairname generate --preset minimal
    pairname generate --words-file words.json --json
    pairname presets -v
"""

import json
import logging
from typing import Any, Dict, Optional

import click

from pairname.config import get_config
from pairname.errors import PairnameError
from pairname.generator import Generator
from pairname.models import Mnemonic, load_word_lists
from pairname.words import PRESETS, get_preset, preset_sizes

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level_name: str):
    """Configure root logging for the CLI. Raises ClickException on an unknown level."""
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        raise click.ClickException(
            f"Unknown log level: '{level_name}'\n"
            f"Use one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("pairname").setLevel(level)


def build_generator(config: Dict[str, Any], seed: Optional[int] = None) -> Generator:
    """
    Build a Generator from resolved config.

    A words file takes precedence over the preset.
    """
    try:
        if config.get("words_file"):
            word_lists = load_word_lists(config["words_file"])
            logger.info(f"Using word lists from {config['words_file']}")
            return Generator.with_words(word_lists.left, word_lists.right, seed=seed)

        logger.info(f"Using preset '{config['preset']}'")
        return Generator.from_preset(config["preset"], seed=seed)
    except PairnameError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option("--log-level", envvar="PAIRNAME_LOG_LEVEL", help="Log level (DEBUG, INFO, WARNING, ERROR)")
def cli(log_level):
    """PAIRNAME CLI - Memorable two-word names.

    Quick start: pairname generate
    """
    config = get_config(overrides={"log_level": log_level})
    configure_logging(config["log_level"])


# ============================================================================
# Generation Commands
# ============================================================================

@cli.command()
@click.option("--separator", "-s", default=None, help="String between the two words (default: _)")
@click.option("--preset", "-p", default=None, help=f"Built-in word bank ({', '.join(PRESETS)})")
@click.option("--words-file", "-w", default=None, type=click.Path(dir_okay=False),
              help="JSON file with {\"left\": [...], \"right\": [...]}")
@click.option("--count", "-n", default=1, type=click.IntRange(min=1), help="Number of names to generate")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def generate(separator, preset, words_file, count, seed, output_json):
    """Generate mnemonic names.

    Examples:
      pairname generate
      pairname generate -s "" -n 5
      pairname generate --preset minimal --seed 42
    """
    config = get_config(overrides={
        "separator": separator,
        "preset": preset,
        "words_file": words_file,
    })
    generator = build_generator(config, seed=seed)
    sep = config["separator"]

    results = []
    for _ in range(count):
        try:
            left, right = generator.pick()
        except PairnameError as e:
            raise click.ClickException(str(e))
        results.append(Mnemonic(name=f"{left}{sep}{right}", left=left, right=right, separator=sep))

    if output_json:
        click.echo(json.dumps([m.model_dump() for m in results], indent=2))
        return

    for mnemonic in results:
        click.echo(mnemonic.name)


# ============================================================================
# Word Bank Commands
# ============================================================================

@cli.command()
@click.option("--verbose", "-v", is_flag=True, help="Show sample words")
def presets(verbose):
    """List built-in word banks."""
    config = get_config()
    current = config["preset"]

    click.echo(f"Found {len(PRESETS)} preset(s):\n")

    for name, (left_size, right_size) in preset_sizes().items():
        left, right = PRESETS[name]
        marker = " *" if name == current else ""
        click.echo(f"  {name}{marker}  ({left_size} x {right_size} = {left_size * right_size} names)")
        if verbose:
            click.echo(f"      Left:  {', '.join(left[:5])}{', ...' if left_size > 5 else ''}")
            click.echo(f"      Right: {', '.join(right[:5])}{', ...' if right_size > 5 else ''}")
            click.echo()

    if not verbose:
        click.echo("\n  * = configured preset")
        click.echo("\nUse 'pairname presets -v' for sample words")


@cli.command()
@click.argument("preset")
@click.option("--side", type=click.Choice(["left", "right", "both"]), default="both",
              help="Which word list to print")
def words(preset, side):
    """Print the words of a built-in PRESET, one per line."""
    try:
        left, right = get_preset(preset)
    except PairnameError as e:
        raise click.ClickException(str(e))

    if side in ("left", "both"):
        for word in left:
            click.echo(word)
    if side == "both":
        click.echo()
    if side in ("right", "both"):
        for word in right:
            click.echo(word)


def main():
    """Entry point for the pairname CLI (called by pip-installed command)."""
    cli()


if __name__ == "__main__":
    main()
