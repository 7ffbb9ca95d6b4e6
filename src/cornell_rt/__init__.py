"""CPU Whitted-style ray tracer for a procedurally textured Cornell box.

The renderer traces a fixed room (board floor, red and green side walls,
white back wall and ceiling) holding a mirror sphere, a glass sphere, a rough
gold sphere and a wooden crate, and writes the result into an 8-bit RGB
framebuffer.

Subpackages:
    core: Vectors and rays, gradient noise, the recursive integrator,
        the framebuffer and the tiled multi-process renderer
    geometry: Sphere, box and bounded plane primitives
    materials: Material kinds, Fresnel and glossy sampling, textures
    scene: Scene container and the Cornell box builder
    camera: Pinhole camera ray generation
    preview: PNG export, Matplotlib preview and the interactive window
"""

__version__ = "0.1.0"
