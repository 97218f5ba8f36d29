"""Tests for the line-bisect command."""

import pytest
from click.testing import CliRunner

from line_bisect.src.cli import cli
from line_bisect.utils.logger_setup import LoggerManager


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    for name in ["LINE_BISECT_ENCODING", "LINE_BISECT_DECODE_ERRORS",
                 "LINE_BISECT_LOG_LEVEL", "LINE_BISECT_LOG_FILE"]:
        monkeypatch.delenv(name, raising=False)
    LoggerManager.reset()
    yield
    LoggerManager.reset()


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"apple\r\nbanana\r\ncherry\r\n")
    return path


def _run(*args):
    return CliRunner().invoke(cli, list(args))


def test_found(words_file, tmp_path):
    result = _run("--config-dir", str(tmp_path), "banana", str(words_file))
    assert result.exit_code == 0
    assert result.output == "banana found: banana.\n"


def test_found_case_insensitive_prefix(words_file, tmp_path):
    result = _run("--config-dir", str(tmp_path), "CHE", str(words_file))
    assert result.exit_code == 0
    assert result.output == "CHE found: cherry.\n"


def test_not_found(words_file, tmp_path):
    result = _run("--config-dir", str(tmp_path), "kiwi", str(words_file))
    assert result.exit_code == 0
    assert result.output == f"kiwi not found in file {words_file}.\n"


def test_missing_arguments_print_usage_and_exit_zero():
    result = _run("only-one")
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_too_many_arguments_print_usage_and_exit_zero(words_file):
    result = _run("a", str(words_file), "extra")
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_missing_file_is_an_error(tmp_path):
    result = _run("--config-dir", str(tmp_path), "x", str(tmp_path / "missing.txt"))
    assert result.exit_code == 1
    assert "Error" in result.output
    assert "not found in file" not in result.output


def test_invalid_config_is_an_error(words_file, tmp_path):
    config_dir = tmp_path / ".line-bisect"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("search:\n  encoding: no-such-codec\n", encoding="utf-8")

    result = _run("--config-dir", str(tmp_path), "apple", str(words_file))
    assert result.exit_code == 1
    assert "no-such-codec" in result.output


def test_log_file(words_file, tmp_path):
    log_file = tmp_path / "logs" / "bisect.log"
    result = _run("--config-dir", str(tmp_path), "--log-level", "debug",
                  "--log-file", str(log_file), "apple", str(words_file))
    assert result.exit_code == 0
    assert result.output == "apple found: apple.\n"

    LoggerManager.reset()
    content = log_file.read_text(encoding="utf-8")
    assert "Probe 1" in content
    assert "Found 'apple'" in content


def test_version():
    result = _run("--version")
    assert result.exit_code == 0
    assert "0.1.0" in result.output
