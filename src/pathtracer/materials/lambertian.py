# materials/lambertian.py
from typing import Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Color]:
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return Ray(rec.p, scatter_direction), self.albedo

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"


class EmissiveLambertian(Lambertian):
    """
    Diffuse surface that also glows. Emits its albedo unless an explicit
    emission colour is given.
    """
    def __init__(self, albedo: Color, emit: Optional[Color] = None):
        super().__init__(albedo)
        self.emit = emit if emit is not None else albedo

    def emitted(self) -> Color:
        return self.emit

    def __repr__(self) -> str:
        return f"EmissiveLambertian({self.albedo!r}, emit={self.emit!r})"
