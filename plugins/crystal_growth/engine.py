"""
Crystal Growth Engine - Event-driven grain growth on a 2D grid

Seed crystals are scattered over an empty grid, then the delay ring is
drained bucket by bucket. Every event that lands on an empty in-bounds
cell claims it for its crystal and schedules the crystal's next growth
into the four neighbours, each after its own delay. The first crystal to
reach a cell keeps it.

One round is a full pass over all buckets. Growth stops after a round in
which every bucket was already empty when visited. A round whose events
were all discarded (out of bounds or occupied) still counts as active, so
the run always ends with one idle round.

The output depends on traversal order as well as on the seeds: ticks in
order, buckets in order, and events popped last-in-first-out.
"""

from .config import DEFAULT_CONFIG
from .crystal import propagate
from .delay_ring import DelayRing
from .grid import Grid
from .noise_field import NoiseField
from .random_source import RandomSource
from .seeding import place_seeds

POP_ORDERS = ("lifo", "fifo")


class CrystalGrowth:

    engine_name = "crystal_growth"
    engine_label = "Crystal Growth"

    def __init__(self, config=None, seed=None, noise_seed=None, pop_order="lifo"):
        """
        Args:
            config: GrowthConfig (defaults to DEFAULT_CONFIG)
            seed: RandomSource seed, None for a fresh random run
            noise_seed: NoiseField seed, None to draw it from the RandomSource
            pop_order: "lifo" (reference order) or "fifo"
        """
        if pop_order not in POP_ORDERS:
            raise ValueError(f"Unknown pop order: {pop_order!r}. Use one of {POP_ORDERS}")
        self.config = config if config is not None else DEFAULT_CONFIG
        self.pop_order = pop_order
        self.rng = RandomSource(seed)
        if noise_seed is None:
            self.noise = NoiseField.from_random(self.rng)
        else:
            self.noise = NoiseField(noise_seed)
        self.grid = Grid(self.config.width, self.config.height)
        self.ring = DelayRing(self.config.latency_max)
        self.seeds = []
        self.seeded = False
        self.finished = False
        self.generation = 0  # completed rounds
        self.mutations = 0

    def seed(self):
        """Place the seed crystals. Only valid once, on the empty grid."""
        if self.seeded:
            raise RuntimeError("engine is already seeded")
        self.seeds, self.mutations = place_seeds(
            self.grid, self.ring, self.noise, self.rng, self.config)
        self.seeded = True
        return self.seeds

    def step(self):
        """Run one round over every bucket.

        Returns:
            True if any bucket held events this round (growth may continue),
            False once a round found every bucket empty.

        Raises:
            RuntimeError: if the engine has not been seeded yet
        """
        if not self.seeded:
            raise RuntimeError("engine must be seeded before stepping")
        if self.finished:
            return False
        grid = self.grid
        ring = self.ring
        rng = self.rng
        config = self.config
        width, height = grid.width, grid.height
        rows = grid.rows
        fifo = self.pop_order == "fifo"

        is_empty = True
        for t in range(ring.size):
            events = ring.take(t)
            if not events:
                continue
            is_empty = False
            if fifo:
                events.reverse()
            while events:
                x, y, crystal = events.pop()
                if not (0 <= x < width and 0 <= y < height):
                    continue
                if rows[y][x] is not None:
                    continue
                if propagate(crystal, ring, x, y, t, rng, config):
                    self.mutations += 1
                grid.set(x, y, crystal)

        self.generation += 1
        if is_empty:
            self.finished = True
        return not is_empty

    def step_n(self, n):
        """Run up to n rounds. Returns the grid."""
        for _ in range(n):
            if not self.step():
                break
        return self.grid

    def run(self):
        """Seed if needed and grow until the ring runs dry. Returns the grid."""
        if not self.seeded:
            self.seed()
        while self.step():
            pass
        return self.grid

    def render(self):
        """Brightness raster of the finished grid (see Grid.to_pixels)."""
        return self.grid.to_pixels()

    @property
    def stats(self):
        """Return current run statistics."""
        return {
            "generation": self.generation,
            "ticks": self.generation * self.ring.size,
            "pending": len(self.ring),
            "occupied": self.grid.occupied,
            "occupied_pct": self.grid.occupied / self.grid.size * 100,
            "seeds": len(self.seeds),
            "mutations": self.mutations,
            "noise_seed": self.noise.seed,
            "finished": self.finished,
        }


def generate(config=None, seed=None, noise_seed=None):
    """Run a full synthesis and return the (height, width) uint8 raster."""
    engine = CrystalGrowth(config, seed=seed, noise_seed=noise_seed)
    engine.run()
    return engine.render()
