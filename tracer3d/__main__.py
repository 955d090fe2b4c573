# tracer3d/__main__.py
"""
Печать тестового градиента.

    python -m tracer3d                 # в stdout (plain PPM)
    python -m tracer3d image.ppm       # в файл
    python -m tracer3d image.png       # через Pillow
"""

import argparse
import sys

from tracer3d.image import render_gradient, save_image, write_ppm
from tracer3d.utils import Config, Profiler, logger, set_level


def run(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="tracer3d")
    ap.add_argument("output", nargs="?", default=None,
                    help="output file, '-' for stdout (default: config 'output')")
    ap.add_argument("--config", default="tracer3d.json")
    args = ap.parse_args(argv)

    cfg = Config(args.config)
    set_level(cfg["log_level"])
    width, height, blue = cfg.image_settings()
    output = args.output or cfg["output"]

    logger.info(f"Rendering {width}x{height} gradient -> {output}")
    with Profiler("render_gradient"):
        rgb8 = render_gradient(width, height, blue).to_rgb8()

    if output == "-":
        write_ppm(sys.stdout, rgb8)
        sys.stdout.flush()
    else:
        save_image(output, rgb8)
    return 0


if __name__ == "__main__":
    sys.exit(run())
