"""Render configuration.

All parameters are validated up front so that a bad configuration fails
before any worker starts and before any image data is produced.
"""

from dataclasses import dataclass, field
from typing import Optional

from pathtracer.core.errors import RenderConfigError
from pathtracer.core.vector import Color

EXECUTORS = ("thread", "process")

# ray_color recurses once per bounce; stay well inside the interpreter limit.
MAX_DEPTH_LIMIT = 500


@dataclass(frozen=True)
class RenderSettings:
    """Parameters shared by every band of a render.

    Attributes:
        samples_per_pixel: Jittered rays averaged per pixel.
        max_depth: Bounce budget per camera ray.
        background: Colour returned on a miss when light_off is set.
        light_off: Disable the sky gradient and use background instead.
        threads: Number of row bands, and of workers in the pool.
        seed: Root seed for the per-band generators; None draws OS entropy.
        executor: "thread" or "process" worker pool.
        report_progress: Let the topmost band report remaining scanlines.
    """

    samples_per_pixel: int = 5
    max_depth: int = 5
    background: Color = field(default_factory=lambda: Color(0.0, 0.0, 0.0))
    light_off: bool = False
    threads: int = 1
    seed: Optional[int] = None
    executor: str = "thread"
    report_progress: bool = True

    def __post_init__(self) -> None:
        if self.samples_per_pixel < 1:
            raise RenderConfigError(
                f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}"
            )
        if self.max_depth < 1:
            raise RenderConfigError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.max_depth > MAX_DEPTH_LIMIT:
            raise RenderConfigError(
                f"max_depth must not exceed {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )
        if self.threads < 1:
            raise RenderConfigError(f"threads must be at least 1, got {self.threads}")
        if self.executor not in EXECUTORS:
            raise RenderConfigError(
                f"executor must be one of {', '.join(EXECUTORS)}, got {self.executor!r}"
            )


def validate_dimensions(width: int, height: int) -> None:
    """Raise RenderConfigError unless both image dimensions are positive."""
    if width < 1 or height < 1:
        raise RenderConfigError(f"image size must be positive, got {width}x{height}")
