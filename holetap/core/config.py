from __future__ import annotations
import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class RoundConfig:
    """
    Tunables for one round. Defaults reproduce the shipped game; a game
    manifest may override any of them under `options:`. The bonus multiplier
    itself is fixed (see holetap.core.scoring.BONUS_MULTIPLIER).
    """
    duration_ms: float = 30_000.0        # round length
    base_spawn_rate: float = 0.016       # per-hole spawn chance per tick at intensity 1.0
    bonus_chance: float = 0.16           # share of spawns that are bonus targets

    primary_lifetime_ms: Tuple[float, float] = (520.0, 900.0)
    bonus_lifetime_ms: Tuple[float, float] = (650.0, 980.0)
    cooldown_ms: Tuple[float, float] = (220.0, 520.0)

    primary_points: int = 30
    bonus_duration_ms: float = 8000.0
    hit_flash_ms: float = 160.0          # recently-hit visual window

    hit_particles: int = 10
    hit_particle_power: float = 8.0
    hit_particle_life_ms: float = 320.0
    bonus_particles: int = 16
    bonus_particle_power: float = 10.0
    bonus_particle_life_ms: float = 420.0

    def __post_init__(self):
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive")
        if not 0.0 <= self.base_spawn_rate <= 1.0:
            raise ValueError("base_spawn_rate must be within [0, 1]")
        if not 0.0 <= self.bonus_chance <= 1.0:
            raise ValueError("bonus_chance must be within [0, 1]")
        for name in ("primary_lifetime_ms", "bonus_lifetime_ms", "cooldown_ms"):
            lo, hi = getattr(self, name)
            if lo <= 0 or hi < lo:
                raise ValueError(f"{name} must be a positive (min, max) range")
        if self.bonus_duration_ms <= 0:
            raise ValueError("bonus_duration_ms must be positive")
        for name in ("primary_points", "hit_flash_ms", "hit_particles", "bonus_particles",
                     "hit_particle_life_ms", "bonus_particle_life_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @classmethod
    def from_options(cls, options: Dict[str, Any] | None) -> "RoundConfig":
        """Build a config from a manifest `options` mapping."""
        known = {f.name: f for f in fields(cls)}
        overrides: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            if key not in known:
                raise ValueError(f"Unknown round option: {key!r}")
            try:
                overrides[key] = _coerce(known[key].type, value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Option {key!r} has an invalid value {value!r}: {exc}") from None
        try:
            return replace(cls(), **overrides)
        except ValueError as exc:
            raise ValueError(f"Invalid round options: {exc}") from None


def _number(value: Any) -> float:
    # bools are ints to Python but never a sensible tuning value
    if isinstance(value, bool) or value is None:
        raise TypeError(f"expected a number, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError("expected a finite number")
    return number


def _coerce(annotation: str, value: Any):
    """Convert a YAML value to the field's annotated type."""
    if annotation.startswith("Tuple"):
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise ValueError("expected [min, max]")
        return (_number(value[0]), _number(value[1]))
    number = _number(value)
    if annotation == "int":
        if not number.is_integer():
            raise ValueError("expected a whole number")
        return int(number)
    return number
