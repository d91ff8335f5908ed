# src/pathtracer/geometry/world.py
from typing import Iterable, List, Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An unordered list of Hittable objects.

    hit() is the brute-force nearest-hit reduction over every member. For
    rendering, build_bvh() produces the accelerated equivalent over the same
    (shared, not copied) objects.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def build_bvh(self, rng) -> BVHNode:
        """
        Builds a hierarchy over the current objects. The list itself keeps its
        order; construction sorts a working copy.
        """
        return BVHNode.build(self.objects, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> Optional[AABB]:
        if not self.objects:
            return None
        output = None
        for obj in self.objects:
            box = obj.bounding_box()
            if box is None:
                return None
            output = box if output is None else AABB.surrounding_box(output, box)
        return output
