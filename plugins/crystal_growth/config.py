"""
Growth Configuration - Immutable parameter set for one synthesis run

Every component receives the same GrowthConfig instance. Values are
validated once at construction, so a bad configuration fails before any
seed is placed.

Defaults reproduce the classic 1000x1000 "galvanized metal" render:
40 seeds, a ring of 10 delay buckets and very rare mutations.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GrowthConfig(BaseModel):
    """Parameters of the crystal growth automaton."""

    model_config = ConfigDict(frozen=True)

    # Grid
    width: int = Field(default=1000, ge=1, description="Grid width in cells")
    height: int = Field(default=1000, ge=1, description="Grid height in cells")

    # Growth timing (latency_max is also the delay ring size)
    latency_max: int = Field(default=10, ge=1, le=255)
    min_speed_range: Tuple[float, float] = (1.0, 2.0)

    # Seeding
    n_seeds: int = Field(default=40, ge=0)
    noise_scale: float = Field(default=0.0002, gt=0.0)
    noise_importance: float = Field(default=5.0, ge=0.0)

    # Brightness
    bright_min: int = Field(default=50, ge=0, le=255)
    bright_max: int = Field(default=250, ge=0, le=255)

    # Mutation
    mut_prob: float = Field(default=0.0001, ge=0.0, le=1.0)
    bright_mut_range: Tuple[int, int] = (-30, 30)
    latency_mut_range: Tuple[int, int] = (-10, 2)

    @model_validator(mode="after")
    def check_ranges(self):
        if self.bright_min >= self.bright_max:
            raise ValueError(
                f"bright_min ({self.bright_min}) must be below "
                f"bright_max ({self.bright_max})")
        low, high = self.min_speed_range
        if not 0.0 < low < high:
            raise ValueError(
                f"min_speed_range must satisfy 0 < low < high, got {self.min_speed_range}")
        for name in ("bright_mut_range", "latency_mut_range"):
            low, high = getattr(self, name)
            if low >= high:
                raise ValueError(f"{name} must satisfy low < high, got {(low, high)}")
        if self.n_seeds > self.width * self.height:
            raise ValueError(
                f"n_seeds ({self.n_seeds}) exceeds the number of cells "
                f"({self.width}x{self.height})")
        return self

    @property
    def max_speed(self):
        """Speed that maps to a delay of exactly one tick."""
        return self.latency_max

    @property
    def mag_range(self):
        """Range of initial growth-vector magnitudes."""
        return (self.latency_max / 1.1, float(self.latency_max))

    @property
    def n_cells(self):
        return self.width * self.height

    def with_overrides(self, **overrides):
        """Return a validated copy with some fields replaced."""
        values = self.model_dump()
        values.update(overrides)
        return type(self)(**values)


DEFAULT_CONFIG = GrowthConfig()
