# scenes.py
"""
Built-in demo scenes.

Every builder takes a numpy generator (used only for scene layout) and an
optional image height; the width follows from the scene's aspect ratio.
"""
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.errors import SceneError
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.cuboid import Cuboid
from pathtracer.geometry.planes import XYPlane, XZPlane, YZPlane
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal


@dataclass
class Scene:
    world: HittableList
    camera: Camera
    width: int
    height: int
    aspect_ratio: float
    light_off: bool = False


def _size(aspect_ratio: float, height: Optional[int], default_height: int):
    height = height if height is not None else default_height
    return max(1, int(height * aspect_ratio)), height


def _between(rng, low: float, high: float) -> float:
    # Bounds may arrive in either order.
    return low + (high - low) * rng.random()


def _random_color(rng, low: float = 0.0, high: float = 1.0) -> Color:
    return Color.random(rng, low, high)


def random_spheres(rng, height: Optional[int] = None) -> Scene:
    """The classic field of small random spheres around three large ones."""
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(Color(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            choose_mat = rng.random()
            if choose_mat < 0.8:
                material = Lambertian(_random_color(rng) * _random_color(rng))
            elif choose_mat < 0.95:
                material = Metal(_random_color(rng, 0.5, 1), rng.uniform(0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    aspect_ratio = 16.0 / 9.0
    width, height = _size(aspect_ratio, height, 225)
    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), aspect_ratio, 20, 0.1, 10.0)
    return Scene(world, camera, width, height, aspect_ratio)


def boxes_and_spheres(rng, height: Optional[int] = None) -> Scene:
    """A floor of random-height boxes under a ceiling light, with assorted spheres."""
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    light = DiffuseLight(Color(9.0, 9.0, 9.0))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    matte_grey = Lambertian(Color(0.25, 0.25, 0.25))

    world = HittableList()
    world.add(XZPlane(123, 423, 147, 412, 554, light))

    boxes = 20
    w = 100.0
    for i in range(boxes):
        for j in range(boxes):
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            world.add(Cuboid(Point3(x0, 0.0, z0), Point3(x0 + w, y1, z0 + w), ground))

    world.add(Sphere(Point3(230, 150, 45), 50, Dielectric(1.5)))
    world.add(Sphere(Point3(0, 200, 145), 50, Metal(Color(0.8, 0.8, 0.9), 0.0)))
    world.add(Sphere(Point3(360, 150, 145), 70, Metal(Color(0.2, 0.4, 0.9), 0.2)))
    world.add(Sphere(Point3(400, 200, 400), 100, Lambertian(Color(0.8, 0.0, 0.0))))
    world.add(Sphere(Point3(220, 330, 300), 80, Metal(Color(1, 1, 0), 0.0)))

    for _ in range(1000):
        world.add(Sphere(Vector3.random(rng, 0, 165) + Point3(0, 300, 0), 10, white))

    world.add(XYPlane(-600, 600, 0, 1000, 600, matte_grey))
    world.add(XYPlane(-600, 600, 0, 1000, -601, matte_grey))
    world.add(YZPlane(0, 1000, -601, 600, 600, matte_grey))
    world.add(YZPlane(0, 1000, -601, 600, -600, matte_grey))
    world.add(XZPlane(-600, 600, -601, 600, 555, matte_grey))

    aspect_ratio = 1.0
    width, height = _size(aspect_ratio, height, 200)
    camera = Camera(Point3(478, 278, -600), Point3(278, 278, 0), aspect_ratio, 40, 0.0, 10.0)
    return Scene(world, camera, width, height, aspect_ratio, light_off=True)


def _cornell_walls(world: HittableList) -> Lambertian:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    light_grey = Lambertian(Color(0.73, 0.73, 0.73))

    world.add(XYPlane(0, 555, 0, 555, 555, light_grey))
    world.add(YZPlane(0, 555, -100, 555, 555, green))
    world.add(YZPlane(0, 555, -100, 555, 0, red))
    world.add(XZPlane(0, 555, -100, 555, 0, light_grey))
    world.add(XZPlane(0, 555, -100, 555, 555, light_grey))
    return light_grey


def _cornell_boxes(world: HittableList, material) -> None:
    world.add(Cuboid(Point3(130, 0, 65), Point3(295, 165, 230), material))
    world.add(Cuboid(Point3(265, 0, 295), Point3(430, 330, 460), material))


def _cornell_camera(aspect_ratio: float) -> Camera:
    return Camera(Point3(278, 278, -800), Point3(278, 278, 0), aspect_ratio, 40, 0.0, 10.0)


def cornell_box_unlit(rng, height: Optional[int] = None) -> Scene:
    """Open-fronted Cornell box lit only by the sky."""
    world = HittableList()
    light_grey = _cornell_walls(world)
    _cornell_boxes(world, light_grey)

    aspect_ratio = 1.0
    width, height = _size(aspect_ratio, height, 200)
    return Scene(world, _cornell_camera(aspect_ratio), width, height, aspect_ratio)


def cornell_box(rng, height: Optional[int] = None) -> Scene:
    """Cornell box with a ceiling light."""
    world = HittableList()
    light_grey = _cornell_walls(world)
    world.add(XZPlane(213, 343, 227, 332, 554, DiffuseLight(Color(15, 15, 15))))
    _cornell_boxes(world, light_grey)

    aspect_ratio = 1.0
    width, height = _size(aspect_ratio, height, 200)
    return Scene(world, _cornell_camera(aspect_ratio), width, height, aspect_ratio,
                 light_off=True)


def simple_light(rng, height: Optional[int] = None) -> Scene:
    """A red sphere beside a rectangular area light."""
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(Color(0.25, 0.25, 0.25))))
    world.add(Sphere(Point3(0, 2, 0), 2, Lambertian(Color(0.8, 0.0, 0.0))))
    world.add(XYPlane(3, 7, 1, 5, -2, DiffuseLight(Color(4, 4, 4))))

    aspect_ratio = 16.0 / 9.0
    width, height = _size(aspect_ratio, height, 225)
    camera = Camera(Point3(26, 3, 6), Point3(0, 2, 0), aspect_ratio, 20, 0.0, 10.0)
    return Scene(world, camera, width, height, aspect_ratio, light_off=True)


def sun_field(rng, height: Optional[int] = None) -> Scene:
    """Large scattered spheres on a huge ground sphere under a glowing sun."""
    world = HittableList()
    world.add(Sphere(Point3(0.0, -20000.0, 0.0), 20000.0, Lambertian(Color(0.25, 0.25, 0.25))))
    world.add(Sphere(Point3(1250.0, 1250.0, 0.0), 1000.0, DiffuseLight(Color(2.0, 2.0, 2.0))))

    for a in range(-6, 6):
        for b in range(-4, 3):
            x = a * 5 + _between(rng, _between(rng, -1500, 1000), _between(rng, -1500, 1000))
            z = 5 * b + _between(rng, _between(rng, -1500, 1250), _between(rng, -1500, 1250))
            center = Point3(x, 50, z)

            choose_mat = rng.random()
            if choose_mat < 0.4:
                material = Metal(_random_color(rng, 0.5, 1), rng.uniform(0, 0.25))
            elif choose_mat < 0.73:
                material = Lambertian(_random_color(rng) * _random_color(rng))
            else:
                material = Dielectric(rng.uniform(1.25, 2.0))
            world.add(Sphere(center, 50, material))

    aspect_ratio = 16.0 / 9.0
    width, height = _size(aspect_ratio, height, 225)
    look_from = Point3(-3000.0, 1700, 4500) + Vector3(3000, -1700, -4500).normalize() * 2500
    camera = Camera(look_from, Point3(0, 0, 0), aspect_ratio, 20, 0.0, 10.0)
    return Scene(world, camera, width, height, aspect_ratio, light_off=True)


def single_sphere(rng, height: Optional[int] = None) -> Scene:
    """A grey diffuse unit sphere at the origin seen head on against the sky."""
    world = HittableList([Sphere(Point3(0, 0, 0), 1.0, Lambertian(Color(0.5, 0.5, 0.5)))])

    aspect_ratio = 1.0
    width, height = _size(aspect_ratio, height, 64)
    # Frame the sphere so it covers the middle of the image but not the corners.
    camera = Camera(Point3(0, 0, 5), Point3(0, 0, 0), aspect_ratio,
                    2 * math.degrees(math.atan(1.5 / 5)), 0.0, 5.0)
    return Scene(world, camera, width, height, aspect_ratio)


SceneBuilder = Callable[..., Scene]

SCENES: Dict[str, SceneBuilder] = {
    "random_spheres": random_spheres,
    "boxes_and_spheres": boxes_and_spheres,
    "cornell_box_unlit": cornell_box_unlit,
    "cornell_box": cornell_box,
    "simple_light": simple_light,
    "sun_field": sun_field,
    "single_sphere": single_sphere,
}


def build_scene(name: str, rng, height: Optional[int] = None) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise SceneError(
            f"Unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}"
        ) from None
    return builder(rng, height)
