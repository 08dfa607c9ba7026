"""
Run configuration for the routing simulator, read from YAML.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from cost_matrix import DEFAULT_SENTINEL


ALGORITHMS = ("dvr", "lsr")


@dataclass(frozen=True)
class Config:
    sentinel: int = DEFAULT_SENTINEL
    max_passes: Optional[int] = None
    algorithms: Sequence[str] = ALGORITHMS

    def validate(self) -> None:
        """
        Raises
        ------
        ValueError
            If the sentinel is not positive, the pass cap is below one, or an
            algorithm name is unknown.
        """
        if self.sentinel <= 0:
            raise ValueError("sentinel must be a positive integer")
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError("max_passes must be at least 1")
        unknown = [a for a in self.algorithms if a not in ALGORITHMS]
        if unknown:
            raise ValueError(f"Unknown algorithm(s): {', '.join(unknown)}")

    def with_overrides(self, **overrides: object) -> Config:
        """Copy with every non-None override applied."""
        cfg = replace(self, **{k: v for k, v in overrides.items() if v is not None})
        cfg.validate()
        return cfg


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Config {path} is not valid YAML: {exc}") from None
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping.")

    algorithms = data.get("algorithms", ALGORITHMS)
    if not isinstance(algorithms, (list, tuple)):
        raise ValueError("algorithms must be a list of algorithm names")

    max_passes = data.get("max_passes")
    cfg = Config(
        sentinel=_int_field(data, "sentinel", DEFAULT_SENTINEL),
        max_passes=_int_field(data, "max_passes", None) if max_passes is not None else None,
        algorithms=tuple(str(a).lower() for a in algorithms),
    )
    cfg.validate()
    return cfg


def _int_field(data: Mapping[str, Any], key: str, default: Optional[int]) -> Optional[int]:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value
