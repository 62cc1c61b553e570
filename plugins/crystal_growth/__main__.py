"""
Crystal Growth - Grayscale crystal texture generator

Usage:
    python -m crystal_growth <output> [preset] [--size WxH] [--seeds N]
                             [--seed N] [--noise-seed N]
    python -m crystal_growth --list

Examples:
    python -m crystal_growth out.png
    python -m crystal_growth frost.png frost
    python -m crystal_growth small.png --size 300x200 --seeds 8
    python -m crystal_growth repro.png --seed 7 --noise-seed 1234

Without an output path this help is printed and nothing is computed.
Use --list to see all available presets.
"""

import sys
import time

from pydantic import ValidationError

from .engine import CrystalGrowth
from .presets import PRESET_ORDER, config_for_preset, list_presets
from .render import is_supported_path, save_pixels

_VALUE_FLAGS = ("--size", "--seeds", "--seed", "--noise-seed")


def _parse_size(text):
    """'WxH' -> (width, height). Raises ValueError on anything else."""
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"expected WxH, got {text!r}")
    return int(parts[0]), int(parts[1])


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    preset = "galvanized"
    output = None
    overrides = {}
    seed = None
    noise_seed = None

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in _VALUE_FLAGS and i + 1 < len(args):
            value = args[i + 1]
            try:
                if arg == "--size":
                    overrides["width"], overrides["height"] = _parse_size(value)
                elif arg == "--seeds":
                    overrides["n_seeds"] = int(value)
                elif arg == "--seed":
                    seed = int(value)
                else:
                    noise_seed = int(value)
            except ValueError:
                print(f"Invalid value for {arg}: {value!r}")
                print("Use --help for usage")
                return 2
            i += 2
        elif arg == "--list":
            print("\nAvailable presets:")
            for key, name, desc in list_presets():
                print(f"    {key:12s} {name:16s} {desc}")
            print()
            return 0
        elif arg in ("--help", "-h"):
            print(__doc__)
            return 0
        elif arg in PRESET_ORDER:
            preset = arg
            i += 1
        elif output is None and not arg.startswith("-"):
            output = arg
            i += 1
        else:
            print(f"Unknown argument: {arg}")
            print("Use --help for usage, --list to see available presets")
            return 0

    if output is None:
        print(__doc__)
        return 0

    if not is_supported_path(output):
        print(f"Unsupported image format: {output}")
        print("Use an extension such as .png, .bmp or .tif")
        return 2

    try:
        config = config_for_preset(preset, **overrides)
    except ValidationError as e:
        print(f"Invalid configuration: {e}")
        return 2

    now = time.perf_counter()
    engine = CrystalGrowth(config, seed=seed, noise_seed=noise_seed)
    print(f"Crystal growth: {preset} @ {config.width}x{config.height}, "
          f"{config.n_seeds} seeds, noise seed {engine.noise.seed}")
    engine.seed()
    print("growing crystals...", flush=True)
    engine.run()
    stats = engine.stats
    print(f"  {stats['generation']} rounds, {stats['mutations']} mutations")
    print(f"done, saving image to {output}")
    save_pixels(engine.render(), output)
    print(f"finished after {time.perf_counter() - now:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
