"""Command-line interface for wordcraft.

Responsibilities:
- Expose user-facing commands for text transforms, generation, and word
  classification.
- Resolve `WordcraftConfig` from an optional YAML file and CLI overrides.
- Log command lifecycle events and render failures consistently.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Callable, TypeVar

import typer

from .cli_rendering import (
    ROLE_LABELS,
    echo_lines,
    echo_word_rows,
    exit_with_command_error,
    parse_role_label,
)
from .config import ConfigLoader, WordcraftConfig
from .errors import CommandError
from .language.word import Word, sorted_words
from .telemetry.logger import RunLogger
from .text import generation, transform

_T = TypeVar("_T")

app = typer.Typer(
    name="wordcraft",
    no_args_is_help=True,
    help="wordcraft CLI.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
SeedOption = Annotated[
    int | None,
    typer.Option("--seed", help="Seed for reproducible output (overrides config file value)."),
]


def _load_yaml_config(config_path: Path | None) -> WordcraftConfig:
    """Load a YAML config file when requested and map failures to command errors."""

    if config_path is None:
        return WordcraftConfig()

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_config(config_file: Path | None, seed: int | None = None) -> WordcraftConfig:
    """Resolve effective config from YAML defaults and explicit CLI overrides."""

    config = _load_yaml_config(config_file)
    if seed is not None:
        config.seed = seed
    return config


def _execute(command_name: str, operation: Callable[[], _T]) -> _T:
    """Run one command body with lifecycle logging and uniform error rendering."""

    run_logger = RunLogger()
    run_logger.log_command_start(command_name)
    try:
        result = operation()
    except Exception as exc:
        run_logger.log_command_failure(command_name, type(exc).__name__)
        exit_with_command_error(command_name, exc)
    run_logger.log_command_complete(command_name)
    return result


@app.command("stylize")
def stylize_command(
    text: Annotated[str, typer.Argument(help="Text to rewrite as one-word sentences.")],
) -> None:
    """Capitalize every word and end each one with a period."""

    typer.echo(_execute("stylize", lambda: transform.stylize(text)))


@app.command("words")
def words_command(
    text: Annotated[str, typer.Argument(help="Text to split on whitespace.")],
) -> None:
    """Print the whitespace-separated words of TEXT, one per line."""

    echo_lines(_execute("words", lambda: transform.extract_words(text)))


@app.command("normalize")
def normalize_command(
    text: Annotated[str, typer.Argument(help="Text to normalize.")],
) -> None:
    """Remove whitespace and uppercase the rest."""

    typer.echo(_execute("normalize", lambda: transform.normalize(text)))


@app.command("expand")
def expand_command(
    text: Annotated[str, typer.Argument(help="Text to expand.")],
) -> None:
    """Print normalized TEXT as a spaced row followed by a column."""

    typer.echo(_execute("expand", lambda: transform.expand(text)))


@app.command("reverse")
def reverse_command(
    text: Annotated[str, typer.Argument(help="Text to reverse.")],
) -> None:
    """Reverse the characters of TEXT."""

    typer.echo(_execute("reverse", lambda: transform.reverse(text)))


@app.command("hex")
def hex_command(
    text: Annotated[str, typer.Argument(help="Text to encode.")],
) -> None:
    """Encode TEXT as uppercase hexadecimal UTF-8 bytes."""

    typer.echo(_execute("hex", lambda: transform.to_hex(text)))


@app.command("unhex")
def unhex_command(
    hex_text: Annotated[str, typer.Argument(help="Hexadecimal text to decode.")],
) -> None:
    """Decode hexadecimal UTF-8 bytes back into text."""

    typer.echo(_execute("unhex", lambda: transform.from_hex(hex_text)))


@app.command("repeat")
def repeat_command(
    length: Annotated[int, typer.Argument(help="Number of copies.")],
    character: Annotated[str, typer.Argument(help="Character to repeat.")],
) -> None:
    """Print CHARACTER repeated LENGTH times."""

    typer.echo(_execute("repeat", lambda: transform.repeat(length, character)))


@app.command("delimit")
def delimit_command(
    text: Annotated[str, typer.Argument(help="Text to delimit.")],
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Separator (overrides config file value)."),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Insert a separator between every pair of adjacent characters."""

    def _delimit() -> str:
        config = _resolve_config(config_file)
        return transform.delimit(text, separator if separator is not None else config.delimiter)

    typer.echo(_execute("delimit", _delimit))


@app.command("sort")
def sort_command(
    text: Annotated[str, typer.Argument(help="Text to sort.")],
) -> None:
    """Sort the characters of TEXT by code point."""

    typer.echo(_execute("sort", lambda: transform.sort_chars(text)))


@app.command("sentence")
def sentence_command(
    text: Annotated[str, typer.Argument(help="Text to format.")],
) -> None:
    """Format TEXT as the start of a sentence."""

    typer.echo(_execute("sentence", lambda: transform.to_sentence_case(text)))


@app.command("format-list")
def format_list_command(
    text: Annotated[str, typer.Argument(help="Text to format.")],
) -> None:
    """List the non-whitespace characters of TEXT, comma-separated."""

    typer.echo(_execute("format-list", lambda: transform.format_list(text)))


@app.command("percent")
def percent_command(
    fraction: Annotated[float, typer.Argument(help="Fraction such as 0.75.")],
) -> None:
    """Format a fraction as a whole percentage."""

    typer.echo(_execute("percent", lambda: transform.percent_of(fraction)))


@app.command("unique")
def unique_command(
    text: Annotated[str, typer.Argument(help="Text to reduce.")],
) -> None:
    """Keep only the first occurrence of each character."""

    typer.echo(_execute("unique", lambda: transform.unique_chars(text)))


@app.command("contains")
def contains_command(
    text: Annotated[str, typer.Argument(help="Text to search.")],
    character: Annotated[str, typer.Argument(help="Single character to look for.")],
) -> None:
    """Print `true` when CHARACTER occurs in TEXT, otherwise `false`."""

    found = _execute("contains", lambda: transform.contains(text, character))
    typer.echo("true" if found else "false")


@app.command("random")
def random_command(
    length: Annotated[int, typer.Argument(help="Number of characters.")],
    lower: Annotated[str, typer.Option("--lower", help="Lowest character.")] = "a",
    upper: Annotated[str, typer.Option("--upper", help="Highest character.")] = "z",
    as_hex: Annotated[
        bool, typer.Option("--hex/--no-hex", help="Print UTF-8 bytes as hexadecimal.")
    ] = False,
    seed: SeedOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Print LENGTH random characters between `--lower` and `--upper`."""

    def _random() -> str:
        source = _resolve_config(config_file, seed).random_source()
        value = generation.random_string(length, lower, upper, source=source)
        return transform.to_hex(value) if as_hex else value

    typer.echo(_execute("random", _random))


@app.command("random-unique")
def random_unique_command(
    length: Annotated[int, typer.Argument(help="Number of distinct characters (1-65536).")],
    seed: SeedOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Print LENGTH distinct random code units, hex-encoded."""

    def _random_unique() -> str:
        source = _resolve_config(config_file, seed).random_source()
        return transform.to_hex(generation.random_unique_string(length, source=source))

    typer.echo(_execute("random-unique", _random_unique))


@app.command("random-array")
def random_array_command(
    count: Annotated[int, typer.Argument(help="Number of strings.")],
    max_length: Annotated[int, typer.Argument(help="Maximum length of each string.")],
    fixed_length: Annotated[
        bool | None,
        typer.Option(
            "--fixed-length/--variable-length",
            help="Use exactly MAX_LENGTH characters (overrides config file value).",
        ),
    ] = None,
    seed: SeedOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Print COUNT random strings, hex-encoded, one per line."""

    def _random_array() -> list[str]:
        config = _resolve_config(config_file, seed)
        strings = generation.random_string_array(
            count,
            max_length,
            fixed_length=fixed_length if fixed_length is not None else config.fixed_length_arrays,
            source=config.random_source(),
        )
        return [transform.to_hex(value) for value in strings]

    echo_lines(_execute("random-array", _random_array))


@app.command("message")
def message_command(
    seed: SeedOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Print one message drawn from a freshly generated message list, hex-encoded."""

    def _message() -> str:
        config = _resolve_config(config_file, seed)
        source = config.random_source()
        messages = generation.random_string_array(
            config.message_count,
            config.message_max_length,
            fixed_length=config.fixed_length_arrays,
            source=source,
        )
        return transform.to_hex(generation.random_message(messages, source=source))

    typer.echo(_execute("message", _message))


@app.command("classify")
def classify_command(
    tokens: Annotated[list[str], typer.Argument(help="Raw tokens to classify.")],
    sort: Annotated[
        bool, typer.Option("--sort/--no-sort", help="Order rows by characters.")
    ] = False,
) -> None:
    """Classify each token and print its role with vowel/consonant counts."""

    def _classify() -> list[Word]:
        words = [Word.classify(token) for token in tokens]
        return sorted_words(words) if sort else words

    echo_word_rows(_execute("classify", _classify))


@app.command("random-word")
def random_word_command(
    role: Annotated[
        str,
        typer.Option("--role", help=f"Role label: {', '.join(ROLE_LABELS.values())}."),
    ] = "default",
    length: Annotated[
        int | None,
        typer.Option("--length", help="Word length (overrides config file value)."),
    ] = None,
    count: Annotated[int, typer.Option("--count", help="Number of words.")] = 1,
    seed: SeedOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Print random lowercase words with the requested role."""

    def _random_words() -> list[Word]:
        config = _resolve_config(config_file, seed)
        resolved_role = parse_role_label(role)
        resolved_length = length if length is not None else config.default_word_length
        source = config.random_source()
        return [
            Word.from_random(resolved_role, resolved_length, source=source)
            for _ in range(count)
        ]

    echo_word_rows(_execute("random-word", _random_words))


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
