from pathtracer.materials.material import Material
from pathtracer.materials.lambertian import EmissiveLambertian, Lambertian
from pathtracer.materials.metal import EmissiveMetal, Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight

__all__ = [
    "Dielectric",
    "DiffuseLight",
    "EmissiveLambertian",
    "EmissiveMetal",
    "Lambertian",
    "Material",
    "Metal",
]
