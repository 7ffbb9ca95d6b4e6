"""Materials module.

Components:
    material: Material (Phong coefficients) and the MaterialKind variant
    diffuse: Purely locally shaded surfaces
    metal: Mirror, Glossy and Metal kinds plus glossy direction sampling
    dielectric: Glass with Snell refraction and Schlick Fresnel
    texture: Wood grain and floor board procedural textures
"""

from .dielectric import (
    Glass,
    Interface,
    fresnel_weights,
    is_total_internal_reflection,
    orient_interface,
    refract,
    schlick_fresnel,
)
from .diffuse import Diffuse
from .material import Material, MaterialKind
from .metal import (
    GLOSSY_SAMPLES,
    ROUGHNESS_THRESHOLD,
    Glossy,
    Metal,
    Mirror,
    sample_reflection_directions,
)
from .texture import FloorBoardTexture, Texture, WoodGrainTexture

__all__ = [
    # Material
    "Material",
    "MaterialKind",
    # Kinds
    "Diffuse",
    "Mirror",
    "Glossy",
    "Metal",
    "Glass",
    # Reflection
    "GLOSSY_SAMPLES",
    "ROUGHNESS_THRESHOLD",
    "sample_reflection_directions",
    # Refraction
    "Interface",
    "orient_interface",
    "refract",
    "is_total_internal_reflection",
    "schlick_fresnel",
    "fresnel_weights",
    # Textures
    "Texture",
    "WoodGrainTexture",
    "FloorBoardTexture",
]
