from pathtracer.renderer.integrator import ray_color, sky_gradient
from pathtracer.renderer.settings import RenderSettings
from pathtracer.renderer.tiled import (
    Band,
    BandResult,
    TiledRenderer,
    merge_bands,
    partition_rows,
    render,
    render_band,
)

__all__ = [
    "Band",
    "BandResult",
    "RenderSettings",
    "TiledRenderer",
    "merge_bands",
    "partition_rows",
    "ray_color",
    "render",
    "render_band",
    "sky_gradient",
]
