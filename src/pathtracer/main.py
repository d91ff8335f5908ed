# main.py
"""Command-line entry point: render one of the built-in scenes to disk.

Usage:
    pathtracer [--scene NAME] [--threads N] [--samples N] [--max-depth N]
               [--height H] [--seed S] [--light-off | --sky]
               [--executor thread|process] [--output image.ppm] [--png out.png]

Example:
    pathtracer --scene cornell_box --threads 4 --samples 20 --height 100
"""
import argparse
import logging
import sys
import time
from typing import List, Optional

import numpy as np

from pathtracer.core.errors import PathTracerError, RenderConfigError
from pathtracer.renderer.output import save_png, save_ppm
from pathtracer.renderer.settings import EXECUTORS, RenderSettings
from pathtracer.renderer.tiled import TiledRenderer
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a built-in scene with the multi-threaded path tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="cornell_box",
                        help="Scene to render (default: cornell_box)")
    parser.add_argument("--threads", type=int, default=None,
                        help="Number of row bands / workers (prompted if omitted)")
    parser.add_argument("--samples", type=int, default=5,
                        help="Samples per pixel (default: 5)")
    parser.add_argument("--max-depth", type=int, default=5,
                        help="Maximum bounces per ray (default: 5)")
    parser.add_argument("--height", type=int, default=None,
                        help="Image height in pixels (default: the scene's own)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for scene layout and sampling")
    sky = parser.add_mutually_exclusive_group()
    sky.add_argument("--light-off", dest="light_off", action="store_true", default=None,
                     help="Use the black background instead of the sky gradient")
    sky.add_argument("--sky", dest="light_off", action="store_false",
                     help="Force the sky gradient on")
    parser.add_argument("--executor", choices=EXECUTORS, default="thread",
                        help="Worker pool type (default: thread)")
    parser.add_argument("--output", default="image.ppm",
                        help="Output PPM path (default: image.ppm)")
    parser.add_argument("--png", default=None,
                        help="Also save a PNG copy to this path")
    parser.add_argument("--quiet", action="store_true",
                        help="Suppress the scanline progress counter")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def prompt_threads() -> int:
    try:
        raw = input("Enter the number of threads: ")
    except EOFError:
        raise RenderConfigError("threads not given and stdin is closed; pass --threads") from None
    try:
        return int(raw.strip())
    except ValueError:
        raise RenderConfigError(f"threads must be an integer, got {raw!r}") from None


def _print_progress(remaining: int) -> None:
    print(f"\rScanlines remaining: {remaining} ", end="", file=sys.stderr, flush=True)


def run(args: argparse.Namespace) -> int:
    threads = args.threads if args.threads is not None else prompt_threads()

    scene_rng = np.random.default_rng(args.seed)
    scene = build_scene(args.scene, scene_rng, args.height)
    logger.info("Built scene %s with %d objects", args.scene, len(scene.world))

    light_off = scene.light_off if args.light_off is None else args.light_off
    settings = RenderSettings(
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        light_off=light_off,
        threads=threads,
        seed=args.seed,
        executor=args.executor,
        report_progress=not args.quiet,
    )

    start_time = time.perf_counter()
    image = TiledRenderer(settings).render(
        scene.world, scene.camera, scene.width, scene.height,
        progress=None if args.quiet else _print_progress,
    )
    if not args.quiet:
        print(file=sys.stderr)

    save_ppm(args.output, image)
    if args.png:
        save_png(args.png, image)

    logger.info("Time taken by program: %.2f secs", time.perf_counter() - start_time)
    logger.info("Rendered.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=LOG_FORMAT)
    try:
        return run(args)
    except PathTracerError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
