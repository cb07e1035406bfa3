"""Configuration model and loaders for wordcraft.

Responsibilities:
- Define CLI runtime configuration as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.
- Build the random source used by generation commands.

Key types:
- `WordcraftConfig`: normalized runtime settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `WordcraftConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .language.word import DEFAULT_WORD_LENGTH
from .parsing import (
    normalize_optional_string,
    parse_optional_int,
    parse_permissive_boolean,
    parse_required_boolean,
)
from .random_source import RandomSource, current_random_source
from .text.generation import DEFAULT_MESSAGE_COUNT, DEFAULT_MESSAGE_MAX_LENGTH


@dataclass(slots=True)
class WordcraftConfig:
    """Runtime configuration for one CLI invocation.

    Attributes:
        seed: Optional seed for a deterministic random source.
        default_word_length: Length of random words built without an explicit length.
        fixed_length_arrays: Whether random string arrays use exactly `max_length`
            characters per entry instead of resampled lengths.
        message_count: Number of generated messages to draw a random message from.
        message_max_length: Maximum length of each generated message.
        delimiter: Default separator for the `delimit` command.
    """

    seed: int | None = None
    default_word_length: int = DEFAULT_WORD_LENGTH
    fixed_length_arrays: bool = False
    message_count: int = DEFAULT_MESSAGE_COUNT
    message_max_length: int = DEFAULT_MESSAGE_MAX_LENGTH
    delimiter: str = " "

    def validate(self) -> None:
        """Validate configuration values before command execution."""

        if self.default_word_length <= 0:
            raise ValueError("`default_word_length` must be a positive integer.")
        if self.message_count <= 0:
            raise ValueError("`message_count` must be a positive integer.")
        if self.message_max_length <= 0:
            raise ValueError("`message_max_length` must be a positive integer.")
        if not self.delimiter:
            raise ValueError("`delimiter` must be a non-empty string.")

    def random_source(self) -> RandomSource:
        """Return a seeded source when `seed` is set, else the current context source."""

        if self.seed is None:
            return current_random_source()
        return RandomSource.seeded(self.seed)


class ConfigLoader:
    """Factory methods for creating `WordcraftConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "seed",
            "default_word_length",
            "fixed_length_arrays",
            "message_count",
            "message_max_length",
            "delimiter",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> WordcraftConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> WordcraftConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        seed = parse_optional_int(env_map.get("WORDCRAFT_SEED"), "WORDCRAFT_SEED")
        default_word_length = ConfigLoader._optional_env_positive_int(
            env_map, "WORDCRAFT_DEFAULT_WORD_LENGTH"
        ) or DEFAULT_WORD_LENGTH
        message_count = ConfigLoader._optional_env_positive_int(
            env_map, "WORDCRAFT_MESSAGE_COUNT"
        ) or DEFAULT_MESSAGE_COUNT
        message_max_length = ConfigLoader._optional_env_positive_int(
            env_map, "WORDCRAFT_MESSAGE_MAX_LENGTH"
        ) or DEFAULT_MESSAGE_MAX_LENGTH
        fixed_length_raw = normalize_optional_string(
            env_map.get("WORDCRAFT_FIXED_LENGTH_ARRAYS")
        )
        fixed_length_arrays = (
            parse_required_boolean(fixed_length_raw, "WORDCRAFT_FIXED_LENGTH_ARRAYS")
            if fixed_length_raw is not None
            else False
        )
        # Not stripped: a single space is a valid delimiter.
        delimiter = env_map.get("WORDCRAFT_DELIMITER") or " "

        config = WordcraftConfig(
            seed=seed,
            default_word_length=default_word_length,
            fixed_length_arrays=fixed_length_arrays,
            message_count=message_count,
            message_max_length=message_max_length,
            delimiter=delimiter,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> WordcraftConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        seed = ConfigLoader._optional_int(payload, "seed", source_label)
        default_word_length = ConfigLoader._optional_positive_int(
            payload, "default_word_length", source_label, DEFAULT_WORD_LENGTH
        )
        fixed_length_arrays = ConfigLoader._optional_boolean(
            payload, "fixed_length_arrays", source_label, False
        )
        message_count = ConfigLoader._optional_positive_int(
            payload, "message_count", source_label, DEFAULT_MESSAGE_COUNT
        )
        message_max_length = ConfigLoader._optional_positive_int(
            payload, "message_max_length", source_label, DEFAULT_MESSAGE_MAX_LENGTH
        )
        delimiter = ConfigLoader._optional_delimiter(payload, "delimiter", source_label)

        config = WordcraftConfig(
            seed=seed,
            default_word_length=default_word_length,
            fixed_length_arrays=fixed_length_arrays,
            message_count=message_count,
            message_max_length=message_max_length,
            delimiter=delimiter,
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys the config model does not know about."""

        unknown = sorted(str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_int(payload: Mapping[str, Any], key: str, source_label: str) -> int | None:
        """Read an optional integer field, mapping blank values to `None`."""

        if key not in payload:
            return None
        try:
            return parse_optional_int(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field `{key}` must be an integer.") from exc

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        parsed = ConfigLoader._optional_int(payload, key, source_label)
        if parsed is None:
            return default
        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_delimiter(payload: Mapping[str, Any], key: str, source_label: str) -> str:
        """Read the delimiter verbatim; whitespace is a legitimate separator."""

        if key not in payload or payload[key] is None:
            return " "
        raw_value = payload[key]
        if not isinstance(raw_value, str) or not raw_value:
            raise ValueError(f"{source_label} field `{key}` must be a non-empty string.")
        return raw_value

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer value from environment mapping."""

        parsed = parse_optional_int(env.get(key), key)
        if parsed is None:
            return None
        if parsed <= 0:
            raise ValueError(f"`{key}` must be a positive integer.")
        return parsed
