"""
RandomSource - Sequential uniform draws for a whole run

Thin wrapper over numpy's Generator. A single instance is threaded through
seeding, crystal construction and propagation, so the order of calls is
part of the output: the same seed only reproduces an image when every
draw happens in the same sequence.
"""

import numpy as np


class RandomSource:

    def __init__(self, seed=None):
        """
        Args:
            seed: Integer seed, or None for fresh OS entropy
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, low, high):
        """Real number in [low, high)."""
        return float(self._rng.uniform(low, high))

    def integers(self, low, high):
        """Integer in [low, high)."""
        return int(self._rng.integers(low, high))

    def random(self):
        """Real number in [0, 1)."""
        return float(self._rng.random())
