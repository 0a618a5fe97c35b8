"""Configuration loading from loxscan.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "loxscan.toml"

SEVERITIES = ("error", "warning", "information", "hint")


@dataclass(frozen=True, slots=True)
class Config:
    """Resolved scanner and diagnostics settings."""

    emit_eof: bool = False
    diagnostic_source: str = "loxscan"
    diagnostic_severity: str = "error"


def load_config(config_path: Path | None, directory: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else directory / CONFIG_FILENAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_config(raw: dict[str, Any]) -> Config:
    """Build a Config from a loaded TOML dict.

    Values of the wrong type are ignored and fall back to the defaults.
    """
    defaults = Config()

    emit_eof = defaults.emit_eof
    cfg_scanner = raw.get("scanner")
    if isinstance(cfg_scanner, dict):
        cfg_eof = cfg_scanner.get("emit_eof")
        if isinstance(cfg_eof, bool):
            emit_eof = cfg_eof

    source = defaults.diagnostic_source
    severity = defaults.diagnostic_severity
    cfg_diag = raw.get("diagnostics")
    if isinstance(cfg_diag, dict):
        cfg_source = cfg_diag.get("source")
        if isinstance(cfg_source, str):
            source = cfg_source
        cfg_severity = cfg_diag.get("severity")
        if isinstance(cfg_severity, str):
            severity = cfg_severity.lower()

    if severity not in SEVERITIES:
        raise ValueError(
            f"invalid diagnostics severity {severity!r} (expected one of {', '.join(SEVERITIES)})"
        )

    return Config(emit_eof=emit_eof, diagnostic_source=source, diagnostic_severity=severity)
