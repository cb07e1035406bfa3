"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
word classification rows, and role label parsing.
"""

from __future__ import annotations

from typing import Iterable, NoReturn

import typer

from .errors import CommandError
from .language.word import Word, WordRole
from .lookups import key_by_value

ROLE_LABELS: dict[WordRole, str] = {
    WordRole.DEFAULT: "default",
    WordRole.PROPER_NOUN: "proper-noun",
    WordRole.TRAILING_PUNCTUATION: "trailing-punctuation",
    WordRole.COMMA_DELINEATED: "comma-delineated",
}


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def parse_role_label(label: str) -> WordRole:
    """Map a CLI role label such as `proper-noun` to its `WordRole`."""

    role = key_by_value(ROLE_LABELS, label.strip().lower())
    if role is None:
        choices = ", ".join(ROLE_LABELS.values())
        raise CommandError(
            stage="arguments",
            detail=f"Unknown role `{label}`.",
            hint=f"Use one of: {choices}.",
        )
    return role


def echo_lines(lines: Iterable[str]) -> None:
    """Print one value per line."""

    for line in lines:
        typer.echo(line)


def echo_word_rows(words: Iterable[Word]) -> None:
    """Print tab-separated characters, role, vowel and consonant counts."""

    for word in words:
        typer.echo(
            f"{word.characters}\t{ROLE_LABELS[word.role]}\t"
            f"vowels={word.vowel_count()}\tconsonants={word.consonant_count()}"
        )
