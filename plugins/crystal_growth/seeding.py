"""
Seed Placement - Noise-biased rejection sampling

Seeds are drawn uniformly over the grid and accepted with probability
density ** noise_importance, where density is the remapped noise value at
the scaled position. High-density regions collect more seeds, so grains
come out small and crowded there and large where the field is low.
"""

from .crystal import Crystal, propagate


def place_seeds(grid, ring, noise, rng, config):
    """Place config.n_seeds crystals on distinct empty cells.

    Each accepted seed is propagated at tick 0 and then written to the grid.

    Args:
        grid: Empty Grid
        ring: DelayRing receiving the seeds' first growth events
        noise: NoiseField
        rng: RandomSource
        config: GrowthConfig

    Returns:
        (seeds, mutations): list of (x, y, crystal) in placement order, and
        the number of seeds that mutated during their first propagation
    """
    seeds = []
    mutations = 0
    while len(seeds) < config.n_seeds:
        x = rng.integers(0, config.width)
        y = rng.integers(0, config.height)
        if grid.is_occupied(x, y):
            continue
        density = noise.density(x * config.noise_scale, y * config.noise_scale)
        if rng.random() > density ** config.noise_importance:
            continue
        crystal = Crystal.new(config.max_speed, rng, config)
        if propagate(crystal, ring, x, y, 0, rng, config):
            mutations += 1
        grid.set(x, y, crystal)
        seeds.append((x, y, crystal))
    return seeds, mutations
