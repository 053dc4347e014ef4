"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest

from nginxconf.config.errors import UnbalancedBracesError
from nginxconf.config.loader import ConfigError, ConfigLoader
from nginxconf.config.parser import ParserOptions


def test_load_file(config_path: Path) -> None:
    loader = ConfigLoader()
    block = loader.load_file(config_path)

    assert len(block) == 4
    assert loader.last_block is block


def test_load_string() -> None:
    block = ConfigLoader().load_string("a; b {}")
    assert [d.name for d in block] == ["a", "b"]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        ConfigLoader().load_file(tmp_path / "missing.conf")


def test_directory_is_not_a_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Not a file"):
        ConfigLoader().load_file(tmp_path)


def test_parse_error_is_wrapped(tmp_path: Path) -> None:
    path = tmp_path / "bad.conf"
    path.write_text("server {")

    with pytest.raises(ConfigError) as exc_info:
        ConfigLoader().load_file(path)

    assert isinstance(exc_info.value.__cause__, UnbalancedBracesError)
    assert "bad.conf" in str(exc_info.value)


def test_failed_load_keeps_previous_block() -> None:
    loader = ConfigLoader()
    block = loader.load_string("a;")
    with pytest.raises(ConfigError):
        loader.load_string("a")
    assert loader.last_block is block


def test_options_are_applied() -> None:
    loader = ConfigLoader(ParserOptions(max_depth=1))
    assert loader.load_string("a { b; }")
    with pytest.raises(ConfigError, match="nested deeper than 1"):
        loader.load_string("a { b { c; } }")


def test_summarize(sample_config: str) -> None:
    loader = ConfigLoader()
    summary = loader.summarize(loader.load_string(sample_config))

    assert summary.directives == 12
    assert summary.blocks == 7
    assert summary.max_depth == 4


def test_summarize_empty() -> None:
    summary = ConfigLoader.summarize(())
    assert (summary.directives, summary.blocks, summary.max_depth) == (0, 0, 0)
