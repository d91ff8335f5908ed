# src/pathtracer/core/aabb.py
from pathtracer.core.vector import Vector3


class AABB:
    """
    Axis-aligned bounding box stored as its component-wise minimum and
    maximum corners.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in ['x', 'y', 'z']:
            d = getattr(ray.direction, a)
            o = getattr(ray.origin, a)
            if d == 0.0:
                # Parallel to the slab: either always inside or never.
                if o < getattr(self.minimum, a) or o > getattr(self.maximum, a):
                    return False
                continue
            invD = 1.0 / d
            t0 = (getattr(self.minimum, a) - o) * invD
            t1 = (getattr(self.maximum, a) - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(
            getattr(self.minimum, a) <= getattr(other.minimum, a) and
            getattr(self.maximum, a) >= getattr(other.maximum, a)
            for a in 'xyz'
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
