"""Materials module for surface appearance.

Components:
    material: Phong material with reflection and refraction coefficients
    pattern: Stripe, ring, checker and gradient patterns

Materials are shared freely between shapes; patterns carry their own
transform on top of the shape's.
"""

from .material import AIR, DIAMOND, GLASS, VACUUM, WATER, Material
from .pattern import (
    CheckerPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)

__all__ = [
    "Material",
    "Pattern",
    "StripePattern",
    "RingPattern",
    "CheckerPattern",
    "GradientPattern",
    # Refractive indices
    "VACUUM",
    "AIR",
    "WATER",
    "GLASS",
    "DIAMOND",
]
