"""
Математический суб‑пакет: Vec3 и базисные векторы.
"""

from tracer3d.math.vec3 import APPROX_EPSILON, BASIS_X, BASIS_Y, BASIS_Z, Vec3

__all__ = ["Vec3", "BASIS_X", "BASIS_Y", "BASIS_Z", "APPROX_EPSILON"]
