"""CLI error-handling tests for concise command diagnostics."""

from pathlib import Path

from typer.testing import CliRunner

from wordcraft.cli import app


def test_unhex_reports_format_error() -> None:
    """Malformed hex should fail with exit code 1 and the decoding detail."""

    result = CliRunner().invoke(app, ["unhex", "ABC"])

    assert result.exit_code == 1
    assert "unhex failed: Hex input must have even length" in result.output
    assert "event=failure error_type=FormatError" in result.output


def test_repeat_reports_negative_length() -> None:
    """Negative lengths should be rejected with an invalid-argument message."""

    result = CliRunner().invoke(app, ["repeat", "--", "-1", "x"])

    assert result.exit_code == 1
    assert "repeat failed: length must be non-negative" in result.output


def test_random_unique_reports_out_of_domain_length() -> None:
    """Lengths above the code-unit domain should fail cleanly."""

    result = CliRunner().invoke(app, ["random-unique", "65537"])

    assert result.exit_code == 1
    assert "random-unique failed: length 65537 exceeds" in result.output


def test_random_word_reports_unknown_role_with_hint() -> None:
    """Unknown role labels should fail at the arguments stage with a hint."""

    result = CliRunner().invoke(app, ["random-word", "--role", "verb"])

    assert result.exit_code == 1
    assert "random-word failed at stage `arguments`: Unknown role `verb`." in result.output
    assert "Hint: Use one of:" in result.output


def test_missing_config_file_is_reported(tmp_path: Path) -> None:
    """A missing `--config` path should fail at the config stage."""

    missing = tmp_path / "missing.yml"
    result = CliRunner().invoke(app, ["random", "3", "--config", str(missing)])

    assert result.exit_code == 1
    assert "random failed at stage `config`" in result.output
    assert "Config file not found" in result.output


def test_invalid_config_file_is_reported(tmp_path: Path) -> None:
    """Invalid config values should fail at the config stage with a fix hint."""

    config_path = tmp_path / "bad.yml"
    config_path.write_text("message_count: -1\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["message", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "message failed at stage `config`" in result.output
    assert "Hint: Fix config schema/values and rerun." in result.output
