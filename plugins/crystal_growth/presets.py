"""
Crystal Growth Parameter Presets

Each preset is a set of GrowthConfig overrides known to produce a
distinctive surface. Fields not listed keep their GrowthConfig default.
"""

from .config import GrowthConfig

PRESETS = {
    "galvanized": {
        "name": "Galvanized",
        "description": "Classic spangle: 40 large grains, rare mutation lines",
        "config": {},
    },
    "spangle": {
        "name": "Fine Spangle",
        "description": "Many small grains crowded into the dense noise regions",
        "config": {"n_seeds": 400, "noise_importance": 8.0},
    },
    "frost": {
        "name": "Frost",
        "description": "Frequent mutations streak the grains with fast thin lines",
        "config": {"n_seeds": 60, "mut_prob": 0.002},
    },
    "needles": {
        "name": "Needles",
        "description": "Long delay ring, strongly elongated grains",
        "config": {"latency_max": 30, "n_seeds": 30},
    },
    "uniform": {
        "name": "Uniform Scatter",
        "description": "Noise ignored, seeds spread evenly",
        "config": {"n_seeds": 80, "noise_importance": 0.0},
    },
    "thumbnail": {
        "name": "Thumbnail",
        "description": "Quick 256x256 preview",
        "config": {"width": 256, "height": 256, "n_seeds": 12},
    },
}

PRESET_ORDER = ["galvanized", "spangle", "frost", "needles", "uniform", "thumbnail"]


def get_preset(name):
    """Get a preset by name. Returns None if not found."""
    return PRESETS.get(name)


def list_presets():
    """Return list of (key, name, description) for presets."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER if k in PRESETS]


def config_for_preset(name, **overrides):
    """Build a GrowthConfig from a preset plus extra field overrides.

    Raises:
        KeyError: unknown preset
        pydantic.ValidationError: the combined values are invalid
    """
    preset = PRESETS[name]
    values = dict(preset["config"])
    values.update(overrides)
    return GrowthConfig(**values)
