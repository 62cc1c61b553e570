"""
NoiseField - Seeded OpenSimplex density field

Biases where seed crystals land. Only the seed sampler reads it; it has no
influence on how crystals grow once placed.
"""

import numpy as np
from opensimplex import OpenSimplex

# Range for noise seeds drawn from a RandomSource
NOISE_SEED_RANGE = (0, 10000)


class NoiseField:

    def __init__(self, seed):
        self.seed = int(seed)
        self._noise = OpenSimplex(seed=self.seed)

    @classmethod
    def from_random(cls, rng):
        """Build a field whose seed is the next integer draw of rng."""
        return cls(rng.integers(*NOISE_SEED_RANGE))

    def eval(self, x, y):
        """Raw noise value in [-1, 1]."""
        return self._noise.noise2(x, y)

    def density(self, x, y):
        """Noise remapped to [0, 1]."""
        return (self.eval(x, y) + 1.0) / 2.0

    def density_map(self, width, height, scale):
        """Density over a whole grid as a (height, width) float array.

        Matches density(x * scale, y * scale) cell by cell.
        """
        xs = np.arange(width, dtype=np.float64) * scale
        ys = np.arange(height, dtype=np.float64) * scale
        values = self._noise.noise2array(xs, ys)
        return (values + 1.0) / 2.0
