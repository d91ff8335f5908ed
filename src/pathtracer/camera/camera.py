# camera/camera.py
import math
from typing import Optional

from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians, random_in_unit_disk
from pathtracer.core.vector import Vector3


class Camera:
    """
    Thin-lens camera aimed from look_from towards look_at.

    vfov is the vertical field of view in degrees. With a non-zero aperture,
    rays originate from a random point on the lens and converge on the
    plane at focus_dist, giving depth of field.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, aspect_ratio: float,
                 vfov: float, aperture: float = 0.0, focus_dist: float = 10.0,
                 vup: Optional[Vector3] = None):
        self.look_from = look_from
        self.look_at = look_at
        self.aspect_ratio = aspect_ratio
        self.vfov = vfov
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        if vup is None:
            vup = Vector3(0, 1, 0)

        # Compute viewport dimensions based on fov
        theta = degrees_to_radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.origin = look_from
        self.horizontal = self.u * (viewport_width * focus_dist)
        self.vertical = self.v * (viewport_height * focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through viewport coordinates (s, t) in [0, 1]."""
        if self.lens_radius <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         self.origin)
            return Ray(self.origin, direction)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction)
