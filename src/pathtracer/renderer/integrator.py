# renderer/integrator.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable

# Minimum hit distance; rejects self-intersection at the ray origin.
T_MIN = 0.001
INFINITY = float("inf")

BLACK = Color(0.0, 0.0, 0.0)
SKY_WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def sky_gradient(ray: Ray) -> Color:
    """
    Vertical white-to-blue blend driven by the normalized direction's y.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng,
              background: Color = BLACK, light_off: bool = False) -> Color:
    """
    Returns the radiance seen along the ray. If the ray hits an object the
    material's emission is added to its attenuated scatter, recursively up
    to 'depth' bounces.
    """
    if depth <= 0:
        return BLACK  # Exceeded recursion depth

    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        if light_off:
            return background
        return sky_gradient(ray)

    emitted = rec.material.emitted()
    scatter_result = rec.material.scatter(ray, rec, rng)
    if scatter_result is None:
        return emitted

    scattered, attenuation = scatter_result
    return emitted + attenuation * ray_color(scattered, world, depth - 1, rng,
                                             background, light_off)
