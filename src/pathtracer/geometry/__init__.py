from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.bvh import BVHNode, tree_depth
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.planes import AxisAlignedRect, XYPlane, XZPlane, YZPlane
from pathtracer.geometry.cuboid import Cuboid

__all__ = [
    "AxisAlignedRect",
    "BVHNode",
    "Cuboid",
    "HitRecord",
    "Hittable",
    "HittableList",
    "Sphere",
    "XYPlane",
    "XZPlane",
    "YZPlane",
    "tree_depth",
]
