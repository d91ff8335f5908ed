# geometry/cuboid.py
from typing import Optional

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.planes import XYPlane, XZPlane, YZPlane
from pathtracer.geometry.world import HittableList


class Cuboid(Hittable):
    """
    Axis-aligned box between two opposite corners, made of its six faces.

    This is a surface, not a solid: hit() is the nearest hit among the faces.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = Vector3(min(p0.x, p1.x), min(p0.y, p1.y), min(p0.z, p1.z))
        self.box_max = Vector3(max(p0.x, p1.x), max(p0.y, p1.y), max(p0.z, p1.z))
        self.material = material

        a, b = self.box_min, self.box_max
        self.sides = HittableList([
            XYPlane(a.x, b.x, a.y, b.y, a.z, material),
            XYPlane(a.x, b.x, a.y, b.y, b.z, material),
            YZPlane(a.y, b.y, a.z, b.z, b.x, material),
            YZPlane(a.y, b.y, a.z, b.z, a.x, material),
            XZPlane(a.x, b.x, a.z, b.z, b.y, material),
            XZPlane(a.x, b.x, a.z, b.z, a.y, material),
        ])
        self.box = self.sides.bounding_box()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self):
        return self.box

    def __repr__(self) -> str:
        return f"Cuboid({self.box_min!r}, {self.box_max!r})"
