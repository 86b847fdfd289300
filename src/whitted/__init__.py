"""Recursive Whitted-style ray tracer.

This package renders scenes of analytic primitives with a Phong-style
local illumination model, with support for:
- Affine transform hierarchies (object and pattern space)
- Hard shadows from a single point light
- Recursive reflection and refraction with a bounded depth
- Procedural patterns (stripe, ring, checker, gradient)
- Data-parallel scanline rendering

Subpackages:
    core: Tuples, colors, matrices, transforms, rays, intersections, canvas
    geometry: Shape primitives and their local intersection rules
    materials: Material parameters and procedural patterns
    scene: Point light, Phong lighting, world shading and preset scenes
    camera: Camera model and the parallel render pass
    preview: Tone mapping, display and image export utilities
"""

__version__ = "0.1.0"
