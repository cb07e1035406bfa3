"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from wordcraft.config import ConfigLoader, WordcraftConfig
from wordcraft.random_source import current_random_source
from wordcraft.text.generation import random_string


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    """YAML loader should parse valid payloads and normalize typed values."""

    config_path = tmp_path / "wordcraft.yml"
    config_path.write_text(
        """
seed: " 42 "
default_word_length: 7
fixed_length_arrays: " yes "
message_count: "3"
message_max_length: 4
delimiter: "-"
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.seed == 42
    assert config.default_word_length == 7
    assert config.fixed_length_arrays is True
    assert config.message_count == 3
    assert config.message_max_length == 4
    assert config.delimiter == "-"


def test_config_loader_from_yaml_empty_file_uses_defaults(tmp_path: Path) -> None:
    """An empty YAML document should produce the default configuration."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == WordcraftConfig()


def test_config_loader_from_yaml_rejects_unknown_keys_and_non_mappings(
    tmp_path: Path,
) -> None:
    """YAML loader should fail clearly on unknown fields or a non-mapping root."""

    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text("seed: 1\nunknown_field: x\n", encoding="utf-8")
    with pytest.raises(ValueError, match=r"unsupported key\(s\): unknown_field"):
        ConfigLoader.from_yaml(unknown_path)

    list_path = tmp_path / "list.yml"
    list_path.write_text("- seed\n- 1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(list_path)


def test_config_loader_from_yaml_rejects_free_form_metadata(tmp_path: Path) -> None:
    """Only fields that commands read should be accepted in a config file."""

    config_path = tmp_path / "metadata.yml"
    config_path.write_text("extra:\n  profile: nightly\n", encoding="utf-8")
    with pytest.raises(ValueError, match=r"unsupported key\(s\): extra"):
        ConfigLoader.from_yaml(config_path)


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("fixed_length_arrays: maybe", "`fixed_length_arrays` must be a boolean"),
        ("default_word_length: x", "`default_word_length` must be an integer"),
        ("message_count: 0", "`message_count` must be a positive integer"),
        ("seed: abc", "`seed` must be an integer"),
        ('delimiter: ""', "`delimiter` must be a non-empty string"),
    ],
)
def test_config_loader_from_yaml_rejects_invalid_typed_values(
    tmp_path: Path, body: str, message: str
) -> None:
    """YAML loader should reject invalid typed tokens with actionable errors."""

    config_path = tmp_path / "invalid.yml"
    config_path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_loads_values() -> None:
    """Environment loader should parse keys and fall back to defaults for blanks."""

    env = {
        "WORDCRAFT_SEED": " 99 ",
        "WORDCRAFT_DEFAULT_WORD_LENGTH": "9",
        "WORDCRAFT_FIXED_LENGTH_ARRAYS": "on",
        "WORDCRAFT_MESSAGE_COUNT": "   ",
        "WORDCRAFT_DELIMITER": "|",
    }

    config = ConfigLoader.from_env(env)

    assert config.seed == 99
    assert config.default_word_length == 9
    assert config.fixed_length_arrays is True
    assert config.message_count == WordcraftConfig().message_count
    assert config.delimiter == "|"


def test_config_loader_from_env_rejects_invalid_values() -> None:
    """Invalid environment values should raise `ValueError`."""

    with pytest.raises(ValueError, match="WORDCRAFT_FIXED_LENGTH_ARRAYS"):
        ConfigLoader.from_env({"WORDCRAFT_FIXED_LENGTH_ARRAYS": "sometimes"})
    with pytest.raises(ValueError, match="WORDCRAFT_MESSAGE_MAX_LENGTH"):
        ConfigLoader.from_env({"WORDCRAFT_MESSAGE_MAX_LENGTH": "-2"})


def test_config_validate_rejects_non_positive_values() -> None:
    """Validation should reject lengths and counts below one."""

    with pytest.raises(ValueError, match="default_word_length"):
        WordcraftConfig(default_word_length=0).validate()
    with pytest.raises(ValueError, match="delimiter"):
        WordcraftConfig(delimiter="").validate()


def test_config_random_source_is_seeded_when_seed_is_set() -> None:
    """A configured seed should yield reproducible sources."""

    first = random_string(10, source=WordcraftConfig(seed=5).random_source())
    second = random_string(10, source=WordcraftConfig(seed=5).random_source())
    assert first == second
    assert WordcraftConfig().random_source() is current_random_source()
