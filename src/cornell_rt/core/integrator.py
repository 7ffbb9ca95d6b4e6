"""Whitted-style recursive integrator.

This module computes the color seen along a ray. At each hit:

- Glass splits into a refracted and a reflected ray, blended by the Schlick
  Fresnel term (reflection only under total internal reflection).
- Every other material is shaded locally with the Phong model against the
  single point light, with a hard shadow test toward the light. Reflective
  kinds (Mirror, Glossy, Metal) then blend in the averaged color of one
  mirror ray or GLOSSY_SAMPLES perturbed rays.

Recursion is explicit and bounded: a secondary ray is only spawned while
``depth < MAX_DEPTH``, so trace() is never entered with a depth above
MAX_DEPTH. A glass hit at MAX_DEPTH falls back to local shading.

Random numbers for glossy reflection come from the numpy Generator passed
in by the caller; the integrator keeps no global state.

Example:
    >>> import numpy as np
    >>> from cornell_rt.core.integrator import trace
    >>> from cornell_rt.scene import create_cornell_box_scene
    >>> scene = create_cornell_box_scene()
    >>> ray = scene.camera.primary_ray(400, 300, 800, 600)
    >>> color = trace(scene, ray, 0, np.random.default_rng(0))
"""

from __future__ import annotations

import numpy as np

from cornell_rt.core.ray import EPSILON, MAX_DEPTH, ZERO, Ray, Vector3, reflect
from cornell_rt.geometry.sphere import HitRecord
from cornell_rt.materials.dielectric import (
    fresnel_weights,
    is_total_internal_reflection,
    orient_interface,
    refract,
)
from cornell_rt.materials.metal import sample_reflection_directions
from cornell_rt.scene.world import Scene

# =============================================================================
# Shading Constants
# =============================================================================

# Quadratic light falloff: 1 / (1 + k * d^2)
ATTENUATION_QUADRATIC = 0.05

# Diffuse scale for metals
METAL_DIFFUSE_SCALE = 0.1

# Ambient scale for points in shadow
SHADOW_AMBIENT_SCALE = 0.5


def attenuation(distance: float) -> float:
    """Light attenuation factor at a distance from the light."""
    return 1.0 / (1.0 + ATTENUATION_QUADRATIC * distance * distance)


# =============================================================================
# Local Illumination
# =============================================================================


def in_shadow(scene: Scene, point: Vector3, normal: Vector3) -> bool:
    """Test whether a surface point is hidden from the light.

    The shadow ray starts EPSILON above the surface. Only shadow-casting
    objects (spheres and boxes) can occlude.
    """
    to_light = scene.light.position - point
    shadow_ray = Ray(point + normal * EPSILON, to_light)
    return scene.occluded(shadow_ray, to_light.length())


def shade_local(scene: Scene, record: HitRecord) -> Vector3:
    """Phong shading of a hit against the scene's point light.

    Args:
        scene: The scene (light, camera position, occluders).
        record: The hit being shaded.

    Returns:
        The ambient + diffuse + specular color, or half the ambient term
        when the point is in shadow.
    """
    material = record.material
    point, normal = record.point, record.normal

    if in_shadow(scene, point, normal):
        return material.color * (material.ka * SHADOW_AMBIENT_SCALE)

    light = scene.light
    to_light = light.position - point
    light_dist = to_light.length()
    light_dir = to_light.normalize()
    att = attenuation(light_dist)

    color = material.color * material.ka

    diff = max(0.0, normal.dot(light_dir))
    diffuse = (material.color * light.color) * (material.kd * diff * att)
    if material.is_metallic:
        diffuse = diffuse * METAL_DIFFUSE_SCALE
    color = color + diffuse

    view_dir = (scene.camera.position - point).normalize()
    reflect_dir = (normal * (2.0 * normal.dot(light_dir)) - light_dir).normalize()
    spec = max(0.0, view_dir.dot(reflect_dir)) ** material.shininess
    spec_color = material.color if material.is_metallic else light.color
    return color + spec_color * (material.ks * spec * att)


# =============================================================================
# Recursive Trace
# =============================================================================


def _trace_dielectric(
    scene: Scene, ray: Ray, record: HitRecord, depth: int, rng: np.random.Generator
) -> Vector3:
    """Fresnel blend of the refracted and reflected rays at a glass hit."""
    eta = record.material.kind.eta
    interface = orient_interface(ray.direction, record.normal, eta)
    n = interface.normal

    # Reflection is spawned on the incident side of the oriented normal
    reflect_ray = Ray(record.point + n * EPSILON, reflect(ray.direction, n))

    if is_total_internal_reflection(interface.cos_i, interface.eta):
        return trace(scene, reflect_ray, depth + 1, rng)

    refract_ray = Ray(record.point - n * EPSILON, refract(ray.direction, interface))
    refracted = trace(scene, refract_ray, depth + 1, rng)
    reflected = trace(scene, reflect_ray, depth + 1, rng)

    fresnel, transmitted = fresnel_weights(interface.cos_i, interface.eta)
    return refracted * transmitted + reflected * fresnel


def _trace_reflection(
    scene: Scene, ray: Ray, record: HitRecord, depth: int, rng: np.random.Generator
) -> Vector3:
    """Average color of the (possibly perturbed) mirror rays at a hit."""
    normal = record.normal
    mirror_dir = reflect(ray.direction, normal)
    origin = record.point + normal * EPSILON

    directions = sample_reflection_directions(mirror_dir, normal, record.material.roughness, rng)
    total = ZERO
    for direction in directions:
        total = total + trace(scene, Ray(origin, direction), depth + 1, rng)
    return total / len(directions)


def trace(scene: Scene, ray: Ray, depth: int, rng: np.random.Generator) -> Vector3:
    """Compute the color seen along a ray.

    Args:
        scene: The scene to trace against.
        ray: The ray (unit direction).
        depth: Current recursion depth; primary rays use 0.
        rng: Random generator used for glossy reflection sampling.

    Returns:
        The linear RGB color (not clamped).
    """
    if depth > MAX_DEPTH:
        return scene.background

    record = scene.intersect(ray)
    if record is None:
        return scene.background

    material = record.material
    if material.is_refractive and depth < MAX_DEPTH:
        return _trace_dielectric(scene, ray, record, depth, rng)

    color = shade_local(scene, record)

    kr = material.reflectivity
    if kr > 0.0 and depth < MAX_DEPTH:
        reflected = _trace_reflection(scene, ray, record, depth, rng)
        if material.is_metallic:
            reflected = reflected * material.color
        color = color * (1.0 - kr) + reflected * kr

    return color
