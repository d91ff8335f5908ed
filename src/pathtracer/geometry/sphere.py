# geometry/sphere.py
import math
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Sphere of the given center and radius.

    hit() solves |O + tD - C|^2 = r^2 and reports the nearer root inside
    [t_min, t_max], falling back to the farther one (a ray starting inside
    the sphere). A negative radius flips the outward normal inwards.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def _roots(self, ray: Ray):
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return ()
        sqrt_disc = math.sqrt(discriminant)
        return (-half_b - sqrt_disc) / a, (-half_b + sqrt_disc) / a

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        for t in self._roots(ray):
            if t_min <= t <= t_max:
                return self._record(ray, t)
        return None

    def _record(self, ray: Ray, t: float) -> HitRecord:
        rec = HitRecord(p=ray.at(t), t=t, material=self.material)
        rec.set_face_normal(ray, (rec.p - self.center) / self.radius)
        return rec

    def bounding_box(self) -> AABB:
        extent = abs(self.radius)
        half = Vector3(extent, extent, extent)
        return AABB(self.center - half, self.center + half)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
