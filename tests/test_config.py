"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from loxscan.config import Config, load_config, resolve_config


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[scanner]\nemit_eof = true\n")
        result = load_config(cfg, tmp_path)
        assert result["scanner"] == {"emit_eof": True}

    def test_auto_discover_loxscan_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "loxscan.toml"
        cfg.write_text('[diagnostics]\nsource = "lox"\n')
        result = load_config(None, tmp_path)
        assert result["diagnostics"] == {"source": "lox"}

    def test_explicit_missing_path(self, tmp_path: Path) -> None:
        assert load_config(tmp_path / "nope.toml", tmp_path) == {}


class TestResolveConfig:
    def test_defaults(self) -> None:
        assert resolve_config({}) == Config()
        assert Config().emit_eof is False
        assert Config().diagnostic_source == "loxscan"
        assert Config().diagnostic_severity == "error"

    def test_all_values(self) -> None:
        cfg = resolve_config(
            {
                "scanner": {"emit_eof": True},
                "diagnostics": {"source": "lox", "severity": "Warning"},
            }
        )
        assert cfg == Config(emit_eof=True, diagnostic_source="lox", diagnostic_severity="warning")

    def test_wrong_types_ignored(self) -> None:
        cfg = resolve_config({"scanner": {"emit_eof": "yes"}, "diagnostics": {"source": 3}})
        assert cfg == Config()

    def test_non_table_sections_ignored(self) -> None:
        assert resolve_config({"scanner": True, "diagnostics": "x"}) == Config()

    def test_invalid_severity(self) -> None:
        with pytest.raises(ValueError, match="severity"):
            resolve_config({"diagnostics": {"severity": "fatal"}})

    def test_from_file(self, tmp_path: Path) -> None:
        (tmp_path / "loxscan.toml").write_text('[diagnostics]\nseverity = "hint"\n')
        cfg = resolve_config(load_config(None, tmp_path))
        assert cfg.diagnostic_severity == "hint"
