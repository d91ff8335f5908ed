# renderer/tiled.py
"""
Multi-worker tiled rendering.

The image is cut into horizontal row bands, one per worker. Every worker owns
a private pixel buffer and its own random generator; the BVH, camera and
materials are shared read-only. Once every worker has joined, the bands are
concatenated top to bottom into the final image.
"""
import logging
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.core.utils import spawn_generators
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.settings import RenderSettings, validate_dimensions

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


@dataclass(frozen=True)
class Band:
    """
    Rows [row_end, row_start) of the image, counted from the bottom row 0.
    A worker renders them from row_start - 1 down to row_end.
    """
    index: int
    row_start: int
    row_end: int

    @property
    def rows(self) -> int:
        return self.row_start - self.row_end


@dataclass
class BandResult:
    band: Band
    pixels: np.ndarray  # (band.rows, width, 3) uint8, top row first


@dataclass(frozen=True)
class RenderJob:
    """Read-only inputs shared by every band worker."""
    world: Hittable
    camera: Camera
    width: int
    height: int
    settings: RenderSettings


def partition_rows(height: int, threads: int) -> List[Band]:
    """
    Splits height rows into threads contiguous bands by integer division.
    Band i covers rows [i * height // threads, (i + 1) * height // threads).
    """
    return [Band(i, (i + 1) * height // threads, i * height // threads)
            for i in range(threads)]


def encode_pixels(accumulated: np.ndarray, samples: int) -> np.ndarray:
    """
    Averages summed radiance, applies gamma 2 and quantizes to 0..255.
    """
    scaled = np.nan_to_num(accumulated / samples, nan=0.0, posinf=0.0, neginf=0.0)
    gamma_corrected = np.sqrt(np.maximum(scaled, 0.0))
    return (256 * np.clip(gamma_corrected, 0.0, 0.999)).astype(np.uint8)


def render_band(job: RenderJob, band: Band, rng,
                progress: Optional[ProgressCallback] = None) -> BandResult:
    """
    Renders every pixel of one band into a private buffer.
    """
    settings = job.settings
    width, height = job.width, job.height
    samples = settings.samples_per_pixel
    # A single column or row would otherwise divide by zero.
    u_scale = 1.0 / max(width - 1, 1)
    v_scale = 1.0 / max(height - 1, 1)

    pixels = np.empty((band.rows, width, 3), dtype=np.uint8)
    accumulated = np.empty((width, 3), dtype=np.float64)

    for out_row, i in enumerate(range(band.row_start - 1, band.row_end - 1, -1)):
        if progress is not None:
            progress(settings.threads * (i - band.row_end))

        for j in range(width):
            r = g = b = 0.0
            for _ in range(samples):
                u = (j + rng.random()) * u_scale
                v = (i + rng.random()) * v_scale
                ray = job.camera.get_ray(u, v, rng)
                color = ray_color(ray, job.world, settings.max_depth, rng,
                                  settings.background, settings.light_off)
                r += color.x
                g += color.y
                b += color.z
            accumulated[j] = (r, g, b)

        pixels[out_row] = encode_pixels(accumulated, samples)

    return BandResult(band, pixels)


def merge_bands(results: Iterable[BandResult], width: int, height: int) -> np.ndarray:
    """
    Concatenates band buffers from the topmost band to the bottommost,
    independent of the order in which the workers finished.
    """
    ordered = sorted(results, key=lambda result: result.band.index, reverse=True)
    indices = [result.band.index for result in ordered]
    if indices != list(range(len(ordered) - 1, -1, -1)):
        raise ValueError(f"Missing or duplicate bands in merge: {sorted(indices)}")

    image = np.concatenate(
        [np.empty((0, width, 3), dtype=np.uint8)] + [result.pixels for result in ordered]
    )
    if image.shape != (height, width, 3):
        raise ValueError(f"Merged image has shape {image.shape}, expected {(height, width, 3)}")
    return image


class TiledRenderer:
    """
    Fork-join renderer: builds the BVH once, starts one worker per band,
    joins them all, then merges the bands in order.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings

    def _make_executor(self) -> Executor:
        if self.settings.executor == "process":
            return ProcessPoolExecutor(max_workers=self.settings.threads)
        return ThreadPoolExecutor(max_workers=self.settings.threads,
                                  thread_name_prefix="band")

    def render(self, world, camera: Camera, width: int, height: int,
               progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """
        Renders the scene and returns a (height, width, 3) uint8 image whose
        first row is the top of the picture.

        world may be a HittableList or a plain list of primitives.
        """
        validate_dimensions(width, height)
        settings = self.settings
        objects = list(world.objects) if hasattr(world, "objects") else list(world)

        generators = spawn_generators(settings.threads + 1, settings.seed)
        bvh = BVHNode.build(objects, generators[0])
        job = RenderJob(bvh, camera, width, height, settings)
        bands = partition_rows(height, settings.threads)

        if progress is not None and settings.executor == "process":
            logger.debug("Progress reporting is unavailable with the process executor")
            progress = None
        if not settings.report_progress:
            progress = None

        logger.info("Rendering %dx%d, %d samples, depth %d, %d %s worker(s)",
                    width, height, settings.samples_per_pixel, settings.max_depth,
                    settings.threads, settings.executor)
        start_time = time.perf_counter()

        designated = bands[-1].index
        with self._make_executor() as executor:
            futures = [
                executor.submit(render_band, job, band, generators[band.index + 1],
                                progress if band.index == designated else None)
                for band in reversed(bands)
            ]
            # result() re-raises the first worker failure; the context
            # manager still joins every worker before we leave.
            results = [future.result() for future in futures]

        for result in results:
            logger.debug("Band %d finished rows %d..%d", result.band.index,
                         result.band.row_start - 1, result.band.row_end)

        image = merge_bands(results, width, height)
        logger.info("Rendered in %.2fs", time.perf_counter() - start_time)
        return image


def render(world, camera: Camera, width: int, height: int,
           settings: Optional[RenderSettings] = None,
           progress: Optional[ProgressCallback] = None) -> np.ndarray:
    """Convenience wrapper around TiledRenderer."""
    return TiledRenderer(settings or RenderSettings()).render(
        world, camera, width, height, progress)
