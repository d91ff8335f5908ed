# materials/diffuse_light.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance.
    """
    def __init__(self, emit: Color):
        self.emit = emit

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self) -> Color:
        return self.emit

    def __repr__(self) -> str:
        return f"DiffuseLight({self.emit!r})"
