# src/pathtracer/geometry/bvh.py
import logging
import time
from typing import Iterator, List, Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.errors import BVHConstructionError
from pathtracer.core.utils import random_axis
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


def _box_of(obj: Hittable) -> AABB:
    box = obj.bounding_box()
    if box is None:
        raise BVHConstructionError(f"No bounding box for {obj!r} in BVH construction")
    return box


def _box_min(obj: Hittable, axis: int) -> float:
    return _box_of(obj).minimum[axis]


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    Construction sorts objects[start:end] in place along a randomly chosen
    axis (by bounding box minimum) and splits at the index midpoint. A span
    of one object stores it as both children. The tree is read-only once
    built and may be shared between render workers.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int, rng):
        axis = random_axis(rng)
        object_span = end - start

        if object_span <= 0:
            raise BVHConstructionError("Cannot build a BVH node over zero objects")

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            first, second = objects[start], objects[start + 1]
            if _box_min(first, axis) < _box_min(second, axis):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            objects[start:end] = sorted(objects[start:end],
                                        key=lambda obj: _box_min(obj, axis))
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng)
            self.right = BVHNode(objects, mid, end, rng)

        self.axis = axis
        self.is_leaf = object_span == 1
        self.box = AABB.surrounding_box(_box_of(self.left), _box_of(self.right))

    @classmethod
    def build(cls, objects: List[Hittable], rng) -> "BVHNode":
        """
        Builds a hierarchy over a working copy of objects.
        """
        if not objects:
            raise BVHConstructionError("Cannot build a BVH over an empty scene")
        start_time = time.perf_counter()
        working = list(objects)
        root = cls(working, 0, len(working), rng)
        logger.info("Built BVH over %d objects: %d nodes, depth %d (%.3fs)",
                    len(working), sum(1 for _ in root.iter_nodes()),
                    tree_depth(root), time.perf_counter() - start_time)
        return root

    def hit(self, ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        if self.right is self.left:
            return hit_left

        # Anything the right subtree returns is at least as close as hit_left.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max)
        return hit_right or hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def iter_nodes(self) -> Iterator["BVHNode"]:
        """Yields this node and every BVHNode below it, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            for child in (node.right, node.left):
                if isinstance(child, BVHNode):
                    stack.append(child)

    def __repr__(self) -> str:
        return f"BVHNode(box={self.box!r}, leaf={self.is_leaf})"


def tree_depth(node: Hittable) -> int:
    """Number of BVHNode levels from node down to its deepest leaf."""
    if not isinstance(node, BVHNode):
        return 0
    if node.left is node.right:
        return 1 + tree_depth(node.left)
    return 1 + max(tree_depth(node.left), tree_depth(node.right))
