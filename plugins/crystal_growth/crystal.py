"""
Crystal - Immutable growth parameters shared by many cells

A crystal is a brightness plus four growth delays (ticks until it spreads
up, right, down, left). Construction projects a random growth vector onto
the four axes, so a crystal grows fast along the vector's dominant axis and
slowly across it, giving the elongated grains of the final image.

Crystals are never modified. Grid cells and pending events hold plain
references to the same instance; mutation builds a new crystal.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .delay_ring import PendingEvent

# (dx, dy) per growth direction, in delay order: up, right, down, left
DIRS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _clamp(value, low, high):
    return max(low, min(high, value))


@dataclass(frozen=True, eq=False)
class Crystal:
    brightness: int
    delays: Tuple[int, int, int, int]

    @classmethod
    def new(cls, max_speed, rng, config):
        """Create a random crystal.

        Args:
            max_speed: Speed that yields a one-tick delay
            rng: RandomSource
            config: GrowthConfig
        """
        brightness = rng.integers(config.bright_min, config.bright_max)
        mag = rng.uniform(*config.mag_range)
        angle = rng.uniform(0.0, math.pi * 2.0)
        rates = (
            math.sin(angle) * mag,   # up
            math.cos(angle) * mag,   # right
            -math.sin(angle) * mag,  # down
            -math.cos(angle) * mag,  # left
        )
        delays = []
        for rate in rates:
            # Each direction gets its own minimum speed so no delay is infinite
            speed = max(rate, rng.uniform(*config.min_speed_range))
            delays.append(_clamp(int(max_speed / speed), 1, config.latency_max))
        return cls(brightness, tuple(delays))

    def mutate(self, rng, config):
        """Return a perturbed copy; self is left untouched."""
        brightness = self.brightness + rng.integers(*config.bright_mut_range)
        brightness = _clamp(brightness, config.bright_min, config.bright_max)
        delays = tuple(
            _clamp(d + rng.integers(*config.latency_mut_range), 1, config.latency_max)
            for d in self.delays
        )
        return Crystal(brightness, delays)


def propagate(crystal, ring, x, y, t, rng, config):
    """Schedule growth from a freshly placed crystal into its four neighbours.

    With probability config.mut_prob the crystal mutates first; the mutant
    then spreads with a one-tick delay in every direction, which draws the
    thin bright or dark lines through otherwise uniform grains.
    No bounds check here: the engine discards out-of-grid events.

    Args:
        crystal: Crystal just placed at (x, y)
        ring: DelayRing to schedule into
        t: Current tick (any value congruent to the bucket index)
        rng: RandomSource
        config: GrowthConfig

    Returns:
        True if the crystal mutated
    """
    mutated = rng.random() < config.mut_prob
    if mutated:
        child = crystal.mutate(rng, config)
        for dx, dy in DIRS:
            ring.schedule(t, 1, PendingEvent(x + dx, y + dy, child))
    else:
        for (dx, dy), delay in zip(DIRS, crystal.delays):
            ring.schedule(t, delay, PendingEvent(x + dx, y + dy, crystal))
    return mutated
