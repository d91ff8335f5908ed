# geometry/planes.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half-thickness given to planes so their boxes never have zero volume.
PLANE_PADDING = 0.0001

_AXES = "xyz"


class AxisAlignedRect(Hittable):
    """
    A rectangle lying in the plane ``<k_axis> = k``, bounded by
    [a0, a1] x [b0, b1] on the two remaining axes.

    Subclasses fix which axes are involved; the intersection only solves for
    the single t where the ray crosses the plane and then checks the
    rectangle bounds.
    """
    k_axis = None
    a_axis = None
    b_axis = None

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        normal = [0.0, 0.0, 0.0]
        normal[_AXES.index(self.k_axis)] = 1.0
        self.outward_normal = Vector3(*normal)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = getattr(ray.direction, self.k_axis)
        if d == 0.0:
            return None
        t = (self.k - getattr(ray.origin, self.k_axis)) / d
        if t < t_min or t > t_max:
            return None

        a = getattr(ray.origin, self.a_axis) + t * getattr(ray.direction, self.a_axis)
        b = getattr(ray.origin, self.b_axis) + t * getattr(ray.direction, self.b_axis)
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.set_face_normal(ray, self.outward_normal)
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self) -> AABB:
        lo = {self.a_axis: self.a0, self.b_axis: self.b0, self.k_axis: self.k - PLANE_PADDING}
        hi = {self.a_axis: self.a1, self.b_axis: self.b1, self.k_axis: self.k + PLANE_PADDING}
        return AABB(Vector3(lo["x"], lo["y"], lo["z"]), Vector3(hi["x"], hi["y"], hi["z"]))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, {self.b0}, {self.b1}, "
                f"k={self.k})")


class XYPlane(AxisAlignedRect):
    """Rectangle [x0, x1] x [y0, y1] at z = k."""
    k_axis, a_axis, b_axis = "z", "x", "y"

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class YZPlane(AxisAlignedRect):
    """Rectangle [y0, y1] x [z0, z1] at x = k."""
    k_axis, a_axis, b_axis = "x", "y", "z"

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)


class XZPlane(AxisAlignedRect):
    """Rectangle [x0, x1] x [z0, z1] at y = k."""
    k_axis, a_axis, b_axis = "y", "x", "z"

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)
