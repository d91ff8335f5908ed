# materials/metal.py
from typing import Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Metal(Material):
    """
    Metal material with reflective properties. fuzz in [0, 1] blurs the
    reflection; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = max(0.0, min(fuzz, 1.0))

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"


class EmissiveMetal(Metal):
    """Reflective surface that also emits light (its albedo by default)."""
    def __init__(self, albedo: Color, fuzz: float = 0.0, emit: Optional[Color] = None):
        super().__init__(albedo, fuzz)
        self.emit = emit if emit is not None else albedo

    def emitted(self) -> Color:
        return self.emit
