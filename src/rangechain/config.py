"""Solver configuration: JSON file plus command-line overrides."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Literal, TypeAlias

from rangechain.errors import ConfigError
from rangechain.io_utils import load_json

SolveMode: TypeAlias = Literal["ranges", "values"]

SOLVE_MODES: frozenset[str] = frozenset({"ranges", "values"})


@dataclass(frozen=True, slots=True)
class SolverConfig:
    """How an almanac is solved.

    ``stop_label`` of ``None`` means the chain's terminal stage.
    """

    mode: SolveMode = "ranges"
    stop_label: str | None = None
    passthrough: bool = False

    def __post_init__(self) -> None:
        if not (isinstance(self.mode, str) and self.mode in SOLVE_MODES):
            raise ConfigError(f"mode must be one of {sorted(SOLVE_MODES)}, got {self.mode!r}")
        if self.stop_label is not None and (
            not isinstance(self.stop_label, str) or not self.stop_label
        ):
            raise ConfigError("stop_label must be a non-empty string or null")
        if not isinstance(self.passthrough, bool):
            raise ConfigError("passthrough must be a boolean")

    def merged(self, **overrides: Any) -> SolverConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"unknown config override(s): {sorted(unknown)}")
        return replace(self, **changes)


def config_from_dict(payload: Any) -> SolverConfig:
    if not isinstance(payload, dict):
        raise ConfigError("config must be a JSON object")
    known = {f.name for f in fields(SolverConfig)}
    unknown = set(payload) - known
    if unknown:
        raise ConfigError(f"unknown config key(s): {sorted(unknown)}")
    return SolverConfig(**payload)


def load_config(path: Path) -> SolverConfig:
    try:
        payload = load_json(path)
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(f"invalid JSON in config {path}: {exc}") from exc
    return config_from_dict(payload)
