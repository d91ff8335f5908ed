from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3, Vector3

__all__ = ["AABB", "Color", "Point3", "Ray", "Vector3"]
