"""Scene module for scene management and ray-scene queries.

Components:
    world: Scene container, point light and the scene object interface
    cornell_box: The Cornell box scene with its fixed objects and materials
"""

from .cornell_box import (
    ROOM_HALF_WIDTH,
    ROOM_HEIGHT,
    CornellBoxParams,
    create_cornell_box_scene,
    get_cornell_box_bounds,
)
from .world import FAR_DISTANCE, PointLight, Scene, SceneObject

__all__ = [
    # World
    "Scene",
    "SceneObject",
    "PointLight",
    "FAR_DISTANCE",
    # Cornell box
    "CornellBoxParams",
    "create_cornell_box_scene",
    "get_cornell_box_bounds",
    "ROOM_HALF_WIDTH",
    "ROOM_HEIGHT",
]
