"""Cornell box scene configuration.

This module provides a factory function for the fixed Cornell box scene:

- Room spanning x in [-1.5, 1.5], y in [0, 3], z in [-1.5, 1.5], open
  toward +z where the camera stands
- Floor: procedural two-tone boards
- Left wall: red diffuse; right wall: green diffuse
- Back wall and ceiling: white diffuse
- Red mirror sphere, clear glass sphere and rough gold sphere
- Wooden crate with noise-perturbed wood grain in the back-right corner
- Point light just below the ceiling center

Example:
    >>> from cornell_rt.scene.cornell_box import CornellBoxParams, create_cornell_box_scene
    >>> scene = create_cornell_box_scene(CornellBoxParams(noise_seed=3))
    >>> len(scene.spheres), len(scene.boxes), len(scene.planes)
    (3, 1, 5)
"""

from __future__ import annotations

from dataclasses import dataclass

from cornell_rt.camera.pinhole import PinholeCamera
from cornell_rt.core.noise import GradientNoise
from cornell_rt.core.ray import Vector3
from cornell_rt.geometry.box import Box
from cornell_rt.geometry.plane import BoundedPlane
from cornell_rt.geometry.sphere import Sphere
from cornell_rt.materials.dielectric import Glass
from cornell_rt.materials.material import Material
from cornell_rt.materials.metal import Metal, Mirror
from cornell_rt.materials.texture import FloorBoardTexture, WoodGrainTexture
from cornell_rt.scene.world import PointLight, Scene

# =============================================================================
# Room Dimensions
# =============================================================================

ROOM_HALF_WIDTH = 1.5
ROOM_HEIGHT = 3.0

ROOM_LOWER = Vector3(-ROOM_HALF_WIDTH, 0.0, -ROOM_HALF_WIDTH)
ROOM_UPPER = Vector3(ROOM_HALF_WIDTH, ROOM_HEIGHT, ROOM_HALF_WIDTH)

# =============================================================================
# Surface Colors
# =============================================================================

LEFT_WALL_COLOR = (0.75, 0.1, 0.1)  # Red
RIGHT_WALL_COLOR = (0.1, 0.75, 0.1)  # Green
WHITE_WALL_COLOR = (0.85, 0.85, 0.85)  # Back wall and ceiling

# Base color of the floor; the board texture replaces it at every hit
FLOOR_BASE_COLOR = (0.5, 0.3, 0.15)

# =============================================================================
# Object Parameters
# =============================================================================

MIRROR_SPHERE_CENTER = (-1.0, 0.4, 0.5)
MIRROR_SPHERE_RADIUS = 0.4
MIRROR_SPHERE_COLOR = (0.9, 0.1, 0.1)

GLASS_SPHERE_CENTER = (0.0, 0.4, -0.2)
GLASS_SPHERE_RADIUS = 0.4
GLASS_SPHERE_COLOR = (0.95, 0.95, 0.95)
GLASS_IOR = 1.5

GOLD_SPHERE_CENTER = (0.85, 0.25, 0.6)
GOLD_SPHERE_RADIUS = 0.25
GOLD_COLOR = (1.0, 0.76, 0.33)

CRATE_MIN = (0.5, 0.0, -1.3)
CRATE_MAX = (1.3, 1.0, -0.5)
CRATE_COLOR = (0.5, 0.3, 0.15)


# =============================================================================
# Cornell Box Parameters
# =============================================================================


@dataclass
class CornellBoxParams:
    """Parameters for configuring a Cornell box scene.

    All parameters have defaults matching the standard view of the room.

    Attributes:
        noise_seed: Seed for the wood grain noise permutation.
        light_position: Position of the point light.
        light_color: RGB color of the light; 1.5 per channel by default.
        background_color: Color of rays leaving the room.
        camera_position: Camera position.
        camera_look_at: Point the camera looks at.
        fov_degrees: Vertical field of view in degrees.

    Example:
        >>> params = CornellBoxParams()
        >>> params.light_position
        (0.0, 2.9, 0.0)
    """

    noise_seed: int = 0
    light_position: tuple[float, float, float] = (0.0, 2.9, 0.0)
    light_color: tuple[float, float, float] = (1.5, 1.5, 1.5)
    background_color: tuple[float, float, float] = (0.85, 0.85, 0.85)
    camera_position: tuple[float, float, float] = (0.0, 1.5, 2.5)
    camera_look_at: tuple[float, float, float] = (0.0, 1.5, 0.0)
    fov_degrees: float = 90.0


# =============================================================================
# Material Factories
# =============================================================================


def _wall_material(color: tuple[float, float, float]) -> Material:
    return Material(color=Vector3(*color), ka=0.1, kd=0.8, ks=0.05)


def floor_material() -> Material:
    return Material(color=Vector3(*FLOOR_BASE_COLOR), ka=0.15, kd=0.75, ks=0.15, shininess=20.0)


def mirror_material() -> Material:
    return Material(
        color=Vector3(*MIRROR_SPHERE_COLOR),
        ka=0.05,
        kd=0.0,
        ks=0.9,
        shininess=100.0,
        kind=Mirror(kr=1.0),
    )


def glass_material() -> Material:
    return Material(
        color=Vector3(*GLASS_SPHERE_COLOR), ka=0.0, kd=0.0, ks=0.1, kind=Glass(eta=GLASS_IOR)
    )


def gold_material() -> Material:
    return Material(
        color=Vector3(*GOLD_COLOR),
        ka=0.1,
        kd=0.05,
        ks=1.0,
        shininess=200.0,
        kind=Metal(kr=0.9, roughness=0.2),
    )


def wood_material() -> Material:
    return Material(color=Vector3(*CRATE_COLOR), ka=0.1, kd=0.75, ks=0.1, shininess=15.0)


# =============================================================================
# Cornell Box Factory
# =============================================================================


def _room_planes() -> tuple[BoundedPlane, ...]:
    """The five room planes in intersection order."""

    def plane(point, normal, material, texture=None) -> BoundedPlane:
        return BoundedPlane(
            point=Vector3(*point),
            normal=Vector3(*normal),
            lower=ROOM_LOWER,
            upper=ROOM_UPPER,
            material=material,
            texture=texture,
        )

    h = ROOM_HALF_WIDTH
    return (
        plane((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), floor_material(), FloorBoardTexture()),
        plane((-h, 0.0, 0.0), (1.0, 0.0, 0.0), _wall_material(LEFT_WALL_COLOR)),
        plane((h, 0.0, 0.0), (-1.0, 0.0, 0.0), _wall_material(RIGHT_WALL_COLOR)),
        plane((0.0, 0.0, -h), (0.0, 0.0, 1.0), _wall_material(WHITE_WALL_COLOR)),
        plane((0.0, ROOM_HEIGHT, 0.0), (0.0, -1.0, 0.0), _wall_material(WHITE_WALL_COLOR)),
    )


def create_cornell_box_scene(params: CornellBoxParams | None = None) -> Scene:
    """Create the Cornell box scene.

    Args:
        params: Optional CornellBoxParams. If None, uses the defaults.

    Returns:
        An immutable Scene ready to be rendered.

    Example:
        >>> scene = create_cornell_box_scene()
        >>> scene.light.position
        Vector3(x=0.0, y=2.9, z=0.0)
    """
    if params is None:
        params = CornellBoxParams()

    noise = GradientNoise(seed=params.noise_seed)

    spheres = (
        Sphere(Vector3(*MIRROR_SPHERE_CENTER), MIRROR_SPHERE_RADIUS, mirror_material()),
        Sphere(Vector3(*GLASS_SPHERE_CENTER), GLASS_SPHERE_RADIUS, glass_material()),
        Sphere(Vector3(*GOLD_SPHERE_CENTER), GOLD_SPHERE_RADIUS, gold_material()),
    )
    boxes = (
        Box(
            Vector3(*CRATE_MIN),
            Vector3(*CRATE_MAX),
            wood_material(),
            texture=WoodGrainTexture(noise),
        ),
    )
    camera = PinholeCamera(
        position=Vector3(*params.camera_position),
        look_at=Vector3(*params.camera_look_at),
        fov_degrees=params.fov_degrees,
    )

    return Scene(
        spheres=spheres,
        boxes=boxes,
        planes=_room_planes(),
        light=PointLight(Vector3(*params.light_position), Vector3(*params.light_color)),
        background=Vector3(*params.background_color),
        camera=camera,
        noise=noise,
    )


def get_cornell_box_bounds() -> dict[str, tuple[float, float, float]]:
    """Get the bounding box of the room.

    Returns:
        Dictionary with 'min' and 'max' corner coordinates.

    Example:
        >>> get_cornell_box_bounds()["max"]
        (1.5, 3.0, 1.5)
    """
    return {"min": tuple(ROOM_LOWER), "max": tuple(ROOM_UPPER)}
