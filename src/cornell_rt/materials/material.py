"""Surface material: Phong coefficients plus a material kind.

Every surface carries the local illumination coefficients (ambient ka,
diffuse kd, specular ks, shininess) and exactly one kind from the tagged
variant MaterialKind. The kind carries only the parameters it needs, so
combinations such as a refractive metal cannot be expressed.

Example:
    >>> from cornell_rt.core.ray import Vector3
    >>> from cornell_rt.materials import Material, Metal
    >>> gold = Material(
    ...     color=Vector3(1.0, 0.76, 0.33), ka=0.1, kd=0.05, ks=1.0,
    ...     shininess=200.0, kind=Metal(kr=0.9, roughness=0.2),
    ... )
    >>> gold.is_metallic, gold.reflectivity
    (True, 0.9)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cornell_rt.core.ray import Vector3
from cornell_rt.materials.dielectric import Glass
from cornell_rt.materials.diffuse import Diffuse
from cornell_rt.materials.metal import Glossy, Metal, Mirror

MaterialKind = Diffuse | Mirror | Glossy | Metal | Glass


@dataclass(frozen=True)
class Material:
    """Material properties of a surface.

    Attributes:
        color: Base color in linear RGB (nominally [0, 1] per channel).
        ka: Ambient weight.
        kd: Diffuse weight.
        ks: Specular highlight weight.
        shininess: Phong exponent (> 0).
        kind: The material kind (Diffuse, Mirror, Glossy, Metal or Glass).
    """

    color: Vector3
    ka: float = 0.1
    kd: float = 0.8
    ks: float = 0.2
    shininess: float = 32.0
    kind: MaterialKind = field(default_factory=Diffuse)

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", Vector3(*self.color))
        if self.shininess <= 0.0:
            raise ValueError(f"Shininess = {self.shininess} must be positive.")

    @property
    def reflectivity(self) -> float:
        """Reflective weight kr (0 for diffuse and glass)."""
        if isinstance(self.kind, (Mirror, Glossy, Metal)):
            return self.kind.kr
        return 0.0

    @property
    def roughness(self) -> float:
        """Glossy perturbation scale (0 for non-rough kinds)."""
        if isinstance(self.kind, (Glossy, Metal)):
            return self.kind.roughness
        return 0.0

    @property
    def is_metallic(self) -> bool:
        return isinstance(self.kind, Metal)

    @property
    def is_refractive(self) -> bool:
        return isinstance(self.kind, Glass)
